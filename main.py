from __future__ import annotations

import argparse
import logging
from pathlib import Path

from config_io import load_json_config


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Escape ever larger random mazes before time runs out.")
    p.add_argument(
        "config",
        nargs="?",
        default="config.json",
        help="Game config file (default: config.json)",
    )
    p.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Optional RNG seed for reproducible mazes (overrides maze.seed).",
    )
    return p.parse_args()


def main() -> None:
    """Entrypoint for running the game from the command line."""
    args = parse_args()
    cfg_path = Path(args.config)

    raw = load_json_config(cfg_path)
    logging.basicConfig(
        level=str(raw.get("log_level", "INFO")).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    from game import Game  # local import keeps module load side effects minimal

    Game(cfg_path, seed=args.seed).run()


if __name__ == "__main__":
    main()
