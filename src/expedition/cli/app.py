"""Command line entry point for the expedition simulation.

Usage:
    # Random day
    expedition

    # Reproducible day with a fixed team
    expedition --seed 42 --steps 3 --tool-durability 2 --water 4

    # Print the final inventory as JSON after the log
    expedition --seed 42 --summary-json

Exit codes:
    0: The day ran to completion
    2: Invalid arguments or configuration
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from pydantic import ValidationError

from expedition.config import DayConfig, get_log_level, get_seed, get_steps
from expedition.engine import summarize_inventory
from expedition.journal import ConsoleSink
from expedition.simulation import run_expedition

TITLE = "Archaeological expedition - one field day"


def print_header(title: str, stream: TextIO) -> None:
    print("=" * (len(title) + 8), file=stream)
    print(f"=== {title} ===", file=stream)
    print("=" * (len(title) + 8), file=stream)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="expedition",
        description="Simulate one field day of a three-member archaeological team",
    )
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for reproducibility (env: EXPEDITION_SEED)")
    parser.add_argument("--steps", type=int, default=None,
                        help="Number of action phases (default: random 3-4, env: EXPEDITION_STEPS)")
    parser.add_argument("--tool-durability", type=int, default=None,
                        help="Uses before the brush breaks (default: random 1-3)")
    parser.add_argument("--water", type=int, default=None,
                        help="Coordinator's starting water (default: random 0-4)")
    parser.add_argument("--log-level", default=None,
                        help="Diagnostic logging level (default: WARNING, env: EXPEDITION_LOG_LEVEL)")
    parser.add_argument("--summary-json", action="store_true",
                        help="Print the final inventory summary as JSON")
    return parser


def main(argv: Optional[Sequence[str]] = None, stream: Optional[TextIO] = None) -> int:
    """Run one expedition day from the command line."""
    parser = build_parser()
    args = parser.parse_args(argv)
    out = stream or sys.stdout

    try:
        log_level = (args.log_level or get_log_level()).upper()
        config = DayConfig(
            seed=args.seed if args.seed is not None else get_seed(),
            steps=args.steps if args.steps is not None else get_steps(),
            tool_durability=args.tool_durability,
            water=args.water,
        )
    except (ValidationError, ValueError) as exc:
        parser.error(str(exc))

    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )

    print_header(TITLE, out)
    world = run_expedition(config, ConsoleSink(out))

    if args.summary_json:
        print(summarize_inventory(world.artifacts).model_dump_json(indent=2), file=out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
