"""Knight's tour on an 8x8 board by backtracking and by Warnsdorff's rule."""

from __future__ import annotations

import argparse
from typing import Iterable, Optional, Sequence

from . import bits64

BOARD = 64
ROW = 8

# Square offsets, tried in this order: two down one right, two right one
# down, two right one up, two up one right, two up one left, two left one
# up, two left one down, two down one left.
_MOVES = (17, 10, -6, -15, -17, -10, 6, 15)


def is_valid_move(current: int, target: int, visited: int) -> bool:
    """Tell whether a knight may jump from ``current`` to an unvisited ``target``.

    ``visited`` is a 64-bit mask of the squares already on the path.
    """
    if not 0 <= target < BOARD or bits64.get(visited, target):
        return False
    col_diff = abs(current % ROW - target % ROW)
    row_diff = abs(current // ROW - target // ROW)
    return (col_diff, row_diff) in ((1, 2), (2, 1))


def _check_start(start: int) -> None:
    if not 0 <= start < BOARD:
        raise ValueError("start square must be between 0 and 63")


def _onward_moves(square: int, visited: int) -> int:
    return sum(1 for offset in _MOVES if is_valid_move(square, square + offset, visited))


def _tour(start: int, ordered_moves) -> Optional[list[int]]:
    _check_start(start)
    path: list[int] = []

    def visit(square: int, visited: int) -> bool:
        visited = bits64.set_on(visited, square)
        path.append(square)
        if bits64.count_on(visited) == BOARD:
            return True
        for target in ordered_moves(square, visited):
            if visit(target, visited):
                return True
        path.pop()
        return False

    return path if visit(start, 0) else None


def _plain_order(square: int, visited: int) -> list[int]:
    return [
        square + offset
        for offset in _MOVES
        if is_valid_move(square, square + offset, visited)
    ]


def _warnsdorff_order(square: int, visited: int) -> list[int]:
    return sorted(
        _plain_order(square, visited),
        key=lambda target: _onward_moves(target, visited),
    )


def knight_tour(start: int) -> Optional[list[int]]:
    """Find a tour from ``start`` by plain backtracking; None if there is none."""
    return _tour(start, _plain_order)


def warnsdorff_tour(start: int) -> Optional[list[int]]:
    """Find a tour from ``start``, trying squares with fewest onward moves first."""
    return _tour(start, _warnsdorff_order)


def format_path(path: Iterable[int]) -> str:
    return "->".join(str(square) for square in path)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Print a knight's tour.")
    parser.add_argument("start", nargs="?", type=int, default=0)
    parser.add_argument(
        "--method",
        choices=("backtrack", "warnsdorff", "both"),
        default="both",
    )
    args = parser.parse_args(argv)
    if not 0 <= args.start < BOARD:
        parser.error("start square must be between 0 and 63")

    solvers = {
        "backtrack": (knight_tour,),
        "warnsdorff": (warnsdorff_tour,),
        "both": (knight_tour, warnsdorff_tour),
    }[args.method]
    status = 0
    for solver in solvers:
        path = solver(args.start)
        if path is None:
            print("no tour found")
            status = 1
        else:
            print(format_path(path))
    return status