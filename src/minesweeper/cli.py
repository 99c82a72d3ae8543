"""
Command-line entry point.

Usage:
    minesweeper --difficulty {easy,medium,hard} [--seed N]
    minesweeper --width W --height H --mines M [--seed N]

Keys (type one or more, then Enter):
    h/j/k/l  move cursor      space or f  reveal
    d        cycle mark       r           restart
    q        quit
"""
import argparse
import sys
from typing import Iterable, List, Optional, TextIO

from .actions import Game
from .board import DIFFICULTIES, Board, BoardConfig, ConfigError
from .render import render_board
from .sampler import RandomSampler


CLEAR_SCREEN = "\x1b[2J\x1b[H"


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="minesweeper",
        description="Minesweeper in the terminal",
    )
    parser.add_argument(
        "-d",
        "--difficulty",
        choices=sorted(DIFFICULTIES),
        help="Preset board (easy, medium, or hard)",
    )
    parser.add_argument("-W", "--width", type=int, help="Width of the board")
    parser.add_argument("-H", "--height", type=int, help="Height of the board")
    parser.add_argument("-m", "--mines", type=int, help="Number of mines in the board")
    parser.add_argument("--seed", type=int, default=None, help="Seed for mine placement")
    return parser


def resolve_config(
    args: argparse.Namespace, parser: argparse.ArgumentParser
) -> BoardConfig:
    """
    Reduce parsed arguments to a board configuration.

    Exits through ``parser.error`` on any configuration problem.
    """
    explicit = [args.width, args.height, args.mines]
    given = [value is not None for value in explicit]

    if args.difficulty is not None:
        if any(given):
            parser.error("--difficulty cannot be combined with --width/--height/--mines")
        try:
            return BoardConfig.from_difficulty(args.difficulty)
        except ConfigError as exc:
            parser.error(str(exc))

    if not all(given):
        parser.error("either --difficulty or all of --width, --height and --mines are required")

    try:
        return BoardConfig(width=args.width, height=args.height, num_mines=args.mines)
    except ConfigError as exc:
        parser.error(str(exc))


def draw(game: Game, out: TextIO) -> None:
    """Clear the screen and draw the board with the cursor shown."""
    out.write(CLEAR_SCREEN)
    out.write(render_board(game.board.snapshot(), show_cursor=True))
    out.write("\n")
    out.flush()


def run(game: Game, lines: Iterable[str], out: TextIO) -> None:
    """
    Interactive loop.

    Each input line is split into keys; a line holding only a newline
    reveals, matching the space key. Stops on quit or end of input.
    """
    game.start()
    draw(game, out)
    try:
        for line in lines:
            keys = line.rstrip("\n") or " "
            running = True
            for key in keys:
                if not game.press(key):
                    running = False
                    break
            if not running:
                break
            draw(game, out)
    finally:
        out.write(CLEAR_SCREEN)
        out.flush()


def main(argv: Optional[List[str]] = None) -> None:
    """Parse arguments and run the game."""
    parser = build_parser()
    args = parser.parse_args(argv)
    config = resolve_config(args, parser)

    board = Board(config, sampler=RandomSampler(args.seed))
    game = Game(board)
    try:
        run(game, sys.stdin, sys.stdout)
    except KeyboardInterrupt:
        pass
    print(f"Bye! Final state: {board.game_state.name}")


if __name__ == "__main__":
    main()
