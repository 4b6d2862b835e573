"""Expedition - a one-day field simulation of a small archaeological team.

A seeded scenario engine runs a morning briefing, several action phases and
an evening inventory over a shared World, logging everything that happens.

Usage:
    from expedition import DayConfig, MemorySink, run_expedition

    sink = MemorySink()
    world = run_expedition(DayConfig(seed=42, steps=3), sink)
    print("\n".join(sink.messages))
"""

from expedition.config import DayConfig
from expedition.engine import InventorySummary, ScenarioEngine, summarize_inventory
from expedition.journal import ConsoleSink, LoggingSink, LogEntry, LogSink, MemorySink
from expedition.randomness import RandomSource
from expedition.simulation import Expedition, build_expedition, run_expedition

__version__ = "0.1.0"

__all__ = [
    "ConsoleSink",
    "DayConfig",
    "Expedition",
    "InventorySummary",
    "LogEntry",
    "LogSink",
    "LoggingSink",
    "MemorySink",
    "RandomSource",
    "ScenarioEngine",
    "build_expedition",
    "run_expedition",
    "summarize_inventory",
]
