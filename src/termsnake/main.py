# main.py
from __future__ import annotations

import argparse
import curses
import logging
from typing import List, Optional

from .autopilot import Autopilot
from .config import Config, CELL_SIZE
from .errors import ConfigError
from .headless import HeadlessFrontend
from .session import QUIT, Session, SessionResult
from .terminal import TerminalFrontend

logger = logging.getLogger(__name__)


def play(frontend, cfg: Config, autopilot: bool = False, max_ticks: Optional[int] = None) -> SessionResult:
    """Build a session sized by the front-end and run it to the end."""
    width, height = frontend.size()
    session = Session(width, height, cfg)

    poll = frontend.poll
    if autopilot:
        pilot = Autopilot(session)

        def poll():
            # Keys still quit; directions come from the autopilot
            if frontend.poll() == QUIT:
                return QUIT
            return pilot.poll()

    return session.run(poll, frontend.draw, frontend.wait, max_ticks=max_ticks)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="termsnake", description="Snake in the terminal.")
    parser.add_argument(
        "--frontend",
        type=str,
        default="terminal",
        choices=["terminal", "window", "headless"],
        help="terminal → curses, window → pygame, headless → no display",
    )
    parser.add_argument("--width", type=int, default=40, help="board width (window/headless)")
    parser.add_argument("--height", type=int, default=20, help="board height (window/headless)")
    parser.add_argument("--cell-size", type=int, default=CELL_SIZE, help="pixels per cell (window)")
    parser.add_argument("--seed", type=int, default=None, help="seed for food placement")
    parser.add_argument("--autopilot", action="store_true", help="let the greedy autopilot steer")
    parser.add_argument("--max-ticks", type=int, default=None, help="stop after this many ticks")
    parser.add_argument("--food-max-attempts", type=int, default=None,
                        help="end the game once food placement rejects this many cells")
    parser.add_argument("--log-level", type=str, default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", type=str, default=None,
                        help="write logs here instead of stderr")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        filename=args.log_file,
    )

    cfg = Config(seed=args.seed, food_max_attempts=args.food_max_attempts)
    logger.info("starting %s front-end (autopilot=%s, seed=%s)", args.frontend, args.autopilot, args.seed)

    try:
        if args.frontend == "terminal":
            result = curses.wrapper(
                lambda stdscr: play(TerminalFrontend(stdscr), cfg, args.autopilot, args.max_ticks)
            )
        elif args.frontend == "window":
            from .window import WindowFrontend

            window = WindowFrontend(args.width, args.height, args.cell_size)
            try:
                result = play(window, cfg, args.autopilot, args.max_ticks)
            finally:
                window.close()
        else:
            result = play(HeadlessFrontend(args.width, args.height), cfg, args.autopilot, args.max_ticks)
    except ConfigError as e:
        parser.error(str(e))

    print(f"Game over ({result.end_reason}). score={result.score} length={result.length} ticks={result.ticks}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
