from __future__ import annotations
from typing import Iterable, Optional, Sequence, Tuple
import random

from slider.heuristics.hamming import hamming as _hamming
from slider.heuristics.manhattan import manhattan as _manhattan

State = Tuple[int, ...]
Grid = Tuple[Tuple[int, ...], ...]

class Board:
    """Immutable N×N sliding-tile board (0 is the blank).

    Heuristics are computed once at construction. The twin and the neighbor
    boards are computed on first access and kept for the life of the board.
    """
    def __init__(self, tiles: Optional[Sequence[Sequence[int]]], rng: Optional[random.Random] = None):
        if tiles is None:
            raise ValueError("Board tiles cannot be None.")
        self._tiles: Grid = tuple(tuple(row) for row in tiles)
        self.N = len(self._tiles)
        self._flat: State = tuple(t for row in self._tiles for t in row)
        self._rng = rng if rng is not None else random.Random()
        self._hamming = _hamming(self._flat, self.N)
        self._manhattan = _manhattan(self._flat, self.N)
        self._twin: Optional[Board] = None
        self._neighbors: Optional[Tuple[Board, ...]] = None

    def dimension(self) -> int:
        return self.N

    def tiles(self) -> Grid:
        return self._tiles

    def hamming(self) -> int:
        return self._hamming

    def manhattan(self) -> int:
        return self._manhattan

    def is_goal(self) -> bool:
        return self._hamming == 0

    # ---------- twin ----------
    def twin(self) -> Board:
        if self._twin is None:
            self._twin = self._find_twin()
        return self._twin

    def _find_twin(self) -> Board:
        """Swap two distinct non-blank tiles picked uniformly at random."""
        n = self.N
        while True:
            ra, ca = self._rng.randrange(n), self._rng.randrange(n)
            if self._tiles[ra][ca] != 0:
                break
        while True:
            rb, cb = self._rng.randrange(n), self._rng.randrange(n)
            if self._tiles[rb][cb] != 0 and (rb, cb) != (ra, ca):
                break
        return Board(_swapped(self._tiles, (ra, ca), (rb, cb)), rng=self._rng)

    # ---------- transitions ----------
    def neighbors(self) -> Tuple[Board, ...]:
        if self._neighbors is None:
            self._neighbors = tuple(self._find_neighbors())
        return self._neighbors

    def _find_neighbors(self) -> Iterable[Board]:
        n = self.N
        z = self._flat.index(0)
        r0, c0 = divmod(z, n)
        # blank moves up, down, left, right
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            r, c = r0 + dr, c0 + dc
            if 0 <= r < n and 0 <= c < n:
                yield Board(_swapped(self._tiles, (r0, c0), (r, c)), rng=self._rng)

    # ---------- value semantics ----------
    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Board):
            return NotImplemented
        return self.N == other.N and self._flat == other._flat

    def __hash__(self) -> int:
        return hash(self._flat)

    def __str__(self) -> str:
        lines = [str(self.N)]
        for row in self._tiles:
            lines.append("".join(f"{t:2d} " for t in row))
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return f"Board({[list(row) for row in self._tiles]!r})"


def _swapped(tiles: Grid, a: Tuple[int, int], b: Tuple[int, int]) -> Grid:
    lst = [list(row) for row in tiles]
    (ra, ca), (rb, cb) = a, b
    lst[ra][ca], lst[rb][cb] = lst[rb][cb], lst[ra][ca]
    return tuple(tuple(row) for row in lst)


# ---------- instance generation ----------
def goal_tiles(n: int) -> Grid:
    assert n >= 2
    flat = list(range(1, n * n)) + [0]
    return tuple(tuple(flat[r * n:(r + 1) * n]) for r in range(n))

def scramble(n: int, depth: int, seed: int) -> Grid:
    """Depth-limited random walk from the goal with no immediate backtrack."""
    rng = random.Random(seed)
    s = [list(row) for row in goal_tiles(n)]
    r0, c0 = n - 1, n - 1
    last_blank = None
    for _ in range(depth):
        cand = [(r0 + dr, c0 + dc) for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1))
                if 0 <= r0 + dr < n and 0 <= c0 + dc < n]
        if last_blank in cand and len(cand) > 1:
            cand.remove(last_blank)
        r, c = rng.choice(cand)
        s[r0][c0], s[r][c] = s[r][c], s[r0][c0]
        last_blank = (r0, c0)
        r0, c0 = r, c
    return tuple(tuple(row) for row in s)

def make_unsolvable_variant(tiles: Sequence[Sequence[int]]) -> Grid:
    """Swap the first two non-blank tiles (row-major); flips solvability."""
    n = len(tiles)
    cells = [(r, c) for r in range(n) for c in range(len(tiles[r])) if tiles[r][c] != 0]
    grid = tuple(tuple(row) for row in tiles)
    return _swapped(grid, cells[0], cells[1])
