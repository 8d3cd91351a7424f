#!/usr/bin/env python3
"""
Labyrinth - Find the most novel walking loop around a street grid

Usage:
    python -m labyrinth [options]

Options:
    --grid FILE        JSON file overriding the default grid configuration
    --tolerance N      Loops may be N segments shorter/longer than the grid total
    --beam-width K     Paths kept per generation (0 = exhaustive search)
    --shuffle          Randomize the order segments are tried at each corner
    --seed N           Random seed for --shuffle
    --output DIR       Directory for <score>-<id>.txt loop files
    --log FILE         Log file path (default: labyrinth_TIMESTAMP.log)
    --db FILE          Also record runs and loops to a SQLite database
    --no-write         Don't write loop files
"""

import argparse
import sys
from datetime import datetime

from .app import LoopFinder
from .config import load_config
from .errors import ConfigurationError


def main():
    parser = argparse.ArgumentParser(
        description="Labyrinth - Find the most novel walking loop around a street grid"
    )
    parser.add_argument("--grid", metavar="FILE",
                        help="JSON file overriding the default grid configuration")
    parser.add_argument("--tolerance", type=int, metavar="N",
                        help="Loops may be N segments shorter/longer than the grid total")
    parser.add_argument("--beam-width", type=int, metavar="K",
                        help="Paths kept per generation (0 = exhaustive search)")
    parser.add_argument("--shuffle", action="store_true",
                        help="Randomize the order segments are tried at each corner")
    parser.add_argument("--seed", type=int, metavar="N",
                        help="Random seed for --shuffle")
    parser.add_argument("--output", metavar="DIR",
                        help="Directory for loop files")
    parser.add_argument("--log", metavar="FILE",
                        help="Log file path (default: labyrinth_TIMESTAMP.log)")
    parser.add_argument("--db", metavar="FILE",
                        help="Also record runs and loops to a SQLite database")
    parser.add_argument("--no-write", action="store_true",
                        help="Don't write loop files")

    args = parser.parse_args()

    if args.beam_width is not None and args.beam_width < 0:
        parser.error("--beam-width can't be negative")
    if args.seed is not None and not args.shuffle:
        parser.error("--seed only applies with --shuffle")

    overrides = {
        "segment_tolerance": args.tolerance,
        "beam_width": args.beam_width,
        "shuffle_segments": True if args.shuffle else None,
        "random_seed": args.seed,
        "output_dir": args.output,
    }

    # Determine log path
    log_path = args.log
    if not log_path:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_path = f"labyrinth_{timestamp}.log"

    try:
        config = load_config(args.grid, overrides)
        if config["beam_width"] == 0:
            config["beam_width"] = None
        finder = LoopFinder(config, log_path=log_path, db_path=args.db,
                            write_results=not args.no_write)
    except ConfigurationError as e:
        print(f"Configuration error: {e}")
        sys.exit(1)

    try:
        ctx = finder.run()
        finder.display_best(ctx)
    except KeyboardInterrupt:
        print("\nInterrupted")
    finally:
        finder.close()


if __name__ == "__main__":
    main()
