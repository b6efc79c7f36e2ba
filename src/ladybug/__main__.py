from __future__ import annotations

import argparse
import logging

from ladybug.app.config import load_config
from ladybug.app.game_app import GameApp


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="ladybug", description="Endless side-scrolling runner.")
    parser.add_argument("--width", type=int, default=None, help="initial window width (px)")
    parser.add_argument("--height", type=int, default=None, help="initial window height (px)")
    parser.add_argument("--fps", type=int, default=None, help="target frames per second")
    parser.add_argument("--seed", type=int, default=None, help="seed for obstacle layout")
    parser.add_argument("--log-level", default=None, choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)

    config = load_config(
        width=args.width,
        height=args.height,
        fps=args.fps,
        seed=args.seed,
        log_level=args.log_level,
    )
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    GameApp(config).run()


if __name__ == "__main__":
    main()
