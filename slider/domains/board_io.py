from __future__ import annotations
from pathlib import Path
from typing import List, Optional, Union
import random

from slider.domains.board import Board

def parse_board(text: str, rng: Optional[random.Random] = None) -> Board:
    """Parse the reference file format: n followed by n*n row-major integers."""
    tokens = text.split()
    if not tokens:
        raise ValueError("Empty puzzle input.")
    try:
        values = [int(tok) for tok in tokens]
    except ValueError as e:
        raise ValueError(f"Puzzle input must contain only integers: {e}") from e
    n, rest = values[0], values[1:]
    if n < 2:
        raise ValueError(f"Board dimension must be at least 2, got {n}.")
    if len(rest) != n * n:
        raise ValueError(f"Expected {n * n} tiles for a {n}x{n} board, got {len(rest)}.")
    rows: List[List[int]] = [rest[r * n:(r + 1) * n] for r in range(n)]
    return Board(rows, rng=rng)

def read_board(path: Union[str, Path], rng: Optional[random.Random] = None) -> Board:
    return parse_board(Path(path).read_text(), rng=rng)

def format_board(board: Board) -> str:
    return str(board)

def format_solution(solver) -> str:
    if not solver.is_solvable():
        return "No solution possible"
    lines = [f"Minimum number of moves = {solver.moves()}"]
    lines.extend(format_board(b) for b in solver.solution())
    return "\n".join(lines)
