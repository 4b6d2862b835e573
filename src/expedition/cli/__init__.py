"""Expedition CLI module.

Usage:
    expedition --seed 42

Or directly:
    python -m expedition.cli.app
"""

from expedition.cli.app import build_parser, main

__all__ = ["build_parser", "main"]
