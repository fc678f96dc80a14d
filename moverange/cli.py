# moverange/cli.py
from __future__ import annotations
import argparse, logging, random, sys
from typing import List, Optional

from moverange import settings
from moverange.errors import MoveRangeError
from moverange.session import RangeSession
from moverange.textview import render_board, render_path
from moverange.world.grid import build_grid

logger = logging.getLogger(__name__)

def make_session(args: argparse.Namespace) -> RangeSession:
    rng = random.Random(args.seed) if args.seed is not None else random.Random()
    grid = build_grid(size=args.size, density=args.density, rng=rng)
    return RangeSession(grid, budget=args.budget)

# -------- subcommands --------

def cmd_show(args: argparse.Namespace) -> None:
    session = make_session(args)
    if args.origin is not None:
        session.set_origin(tuple(args.origin))
    else:
        session.start()

    print(render_board(session.grid, session.origin, session.reachable))
    print(f"origin={session.origin} budget={session.budget} reachable={len(session.reachable)}")

    if args.path is not None:
        target = tuple(args.path)
        path = session.path_to(target)
        if path is None:
            print(f"{target}: not reachable")
        else:
            print(f"{target}: cost {path.cost}: {render_path(path, session.origin)}")

def cmd_play(args: argparse.Namespace) -> None:
    from moverange.app import run
    run(make_session(args))

def _add_board_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--size", type=int, default=settings.GRID_SIZE)
    p.add_argument("--density", type=float, default=settings.SHADED_DENSITY)
    p.add_argument("--seed", type=int, default=settings.RNG_SEED)
    p.add_argument("--budget", type=int, default=settings.MAX_MOVEMENT_POINTS)

def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Movement range on a grid with blocked cells")
    p.add_argument("--log-level", type=str, default=settings.LOG_LEVEL)
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("show", help="print the board and the movement range as text")
    _add_board_args(s)
    s.add_argument("--origin", type=int, nargs=2, metavar=("COL", "ROW"), default=None)
    s.add_argument("--path", type=int, nargs=2, metavar=("COL", "ROW"), default=None)
    s.set_defaults(func=cmd_show)

    g = sub.add_parser("play", help="open the interactive board")
    _add_board_args(g)
    g.set_defaults(func=cmd_play)

    return p

def main(argv: Optional[List[str]] = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format=settings.LOG_FORMAT)
    try:
        args.func(args)
    except MoveRangeError as exc:
        logger.debug("command %s failed", args.cmd, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0

if __name__ == "__main__":
    sys.exit(main())
