"""
CLI entrypoint: load a board, apply a move string and print each board.

The whole move string is decoded before any move is applied. Moves are then
applied in order and the run stops at the first rejected move, printing the
last valid board and reporting the rejection.

Exit codes: 0 when every move applied, 1 when a move was rejected, 2 when the
level or the move string could not be read or decoded.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from grid_sokoban.actions import parse_directions
from grid_sokoban.errors import BoardError, MovementError, UnrecognizedDirection
from grid_sokoban.examples.levels import LEVEL_REGISTRY, load_builtin
from grid_sokoban.levels.convert import load_level, to_text
from grid_sokoban.objectives import OBJECTIVE_FN_REGISTRY
from grid_sokoban.state import State
from grid_sokoban.step import iter_steps

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_DECODE_ERROR = 2


def build_argparser() -> argparse.ArgumentParser:
    """CLI argument builder."""
    arg_parser = argparse.ArgumentParser(
        prog="grid-sokoban",
        description="Apply a move string (U/D/L/R) to a Sokoban board and print the boards.",
    )
    source = arg_parser.add_mutually_exclusive_group(required=True)
    source.add_argument("level", nargs="?", help="Path to a level text file.")
    source.add_argument(
        "--builtin",
        choices=sorted(LEVEL_REGISTRY),
        help="Use a built-in level instead of a file.",
    )
    arg_parser.add_argument(
        "--moves",
        default="",
        help="Move string, e.g. 'RRRRRD'. Case-insensitive, no separators.",
    )
    arg_parser.add_argument(
        "--objective",
        choices=sorted(OBJECTIVE_FN_REGISTRY),
        default="default",
        help="Win condition used to report whether the puzzle is solved.",
    )
    arg_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only print the final board.",
    )
    arg_parser.add_argument("--loglevel", default="INFO")
    return arg_parser


def _load_state(args: argparse.Namespace) -> State:
    objective_fn = OBJECTIVE_FN_REGISTRY[args.objective]
    if args.builtin:
        logger.info("Loading built-in level %r", args.builtin)
        return load_builtin(args.builtin, objective_fn)
    logger.info("Loading level from %s", args.level)
    return load_level(args.level, objective_fn)


def _print_board(state: State, out: TextIO) -> None:
    print(to_text(state), file=out)
    print(file=out)


def main(argv: Optional[List[str]] = None, out: TextIO = sys.stdout) -> int:
    args = build_argparser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.loglevel).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        state = _load_state(args)
        directions = parse_directions(args.moves)
    except (BoardError, UnrecognizedDirection, OSError, UnicodeDecodeError) as error:
        logger.error("%s", error)
        return EXIT_DECODE_ERROR

    if not args.quiet:
        _print_board(state, out)

    applied = 0
    try:
        for state in iter_steps(state, directions):
            applied += 1
            if not args.quiet:
                _print_board(state, out)
    except MovementError as error:
        logger.error("Move %d (%s) rejected: %s", applied + 1, directions[applied].symbol, error)
        if args.quiet:
            _print_board(state, out)
        return EXIT_REJECTED

    if args.quiet:
        _print_board(state, out)
    logger.info(
        "Applied %d moves (%d pushes)%s",
        applied,
        state.pushes,
        ", puzzle solved" if state.win else "",
    )
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
