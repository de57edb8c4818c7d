from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
import heapq
import itertools
from time import perf_counter

from slider.domains.board import Board
from slider.log import logger

log = logger.bind(component="solver")

@dataclass(frozen=True, eq=False)
class SearchNode:
    board: Board
    moves: int
    parent: Optional["SearchNode"] = None
    priority: int = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "priority", self.board.manhattan() + self.moves)

    def key(self) -> Tuple[int, int, int]:
        return (self.priority, self.board.manhattan(), self.board.hamming())

def reconstruct_path(node: Optional[SearchNode]) -> List[Board]:
    path: List[Board] = []
    while node is not None:
        path.append(node.board)
        node = node.parent
    path.reverse()
    return path

class _Frontier:
    """Min-heap of search nodes keyed by (priority, manhattan, hamming)."""
    def __init__(self, counter: "itertools.count[int]"):
        self._heap: List[Tuple[Tuple[int, int, int], int, SearchNode]] = []
        self._counter = counter

    def push(self, node: SearchNode) -> None:
        heapq.heappush(self._heap, (node.key(), next(self._counter), node))

    def pop(self) -> SearchNode:
        return heapq.heappop(self._heap)[2]

    def __len__(self) -> int:
        return len(self._heap)

class Solver:
    """
    A* over the initial board raced against A* over its twin.
    Exactly one of the two can reach the goal, which decides solvability.
    The search runs to completion inside the constructor.
    """
    def __init__(self, initial: Optional[Board]):
        if initial is None:
            raise ValueError("Initial board cannot be None.")
        self._solvable = False
        self._moves = -1
        self._solution: Optional[Tuple[Board, ...]] = None
        self._stats: Dict[str, object] = {}
        self._solve(initial)

    def is_solvable(self) -> bool:
        return self._solvable

    def moves(self) -> int:
        """Min number of moves to solve the initial board; -1 if unsolvable."""
        return self._moves

    def solution(self) -> Optional[Tuple[Board, ...]]:
        """Boards of a shortest solution, initial first; None if unsolvable."""
        return self._solution

    def stats(self) -> Dict[str, object]:
        return dict(self._stats)

    def _solve(self, initial: Board) -> None:
        t0 = perf_counter()
        counter = itertools.count()
        main_pq = _Frontier(counter)
        twin_pq = _Frontier(counter)
        main_pq.push(SearchNode(initial, 0))
        twin_pq.push(SearchNode(initial.twin(), 0))
        log.debug("solving {}x{} board, manhattan={} hamming={}",
                  initial.dimension(), initial.dimension(), initial.manhattan(), initial.hamming())

        expanded = 0
        generated = 2
        peak_open = 2

        next_main = main_pq.pop()
        next_twin = twin_pq.pop()
        while not next_main.board.is_goal() and not next_twin.board.is_goal():
            for pq, node in ((main_pq, next_main), (twin_pq, next_twin)):
                expanded += 1
                for board in node.board.neighbors():
                    if node.parent is not None and board == node.parent.board:
                        continue
                    pq.push(SearchNode(board, node.moves + 1, node))
                    generated += 1
            peak_open = max(peak_open, len(main_pq) + len(twin_pq))
            next_main = main_pq.pop()
            next_twin = twin_pq.pop()

        if next_main.board.is_goal():
            self._solvable = True
            self._moves = next_main.moves
            self._solution = tuple(reconstruct_path(next_main))

        self._stats = {
            "algorithm": "A* twin",
            "solvable": self._solvable,
            "moves": self._moves,
            "expanded": expanded,
            "generated": generated,
            "peak_open": peak_open,
            "time": perf_counter() - t0,
        }
        log.debug("done: solvable={solvable} moves={moves} expanded={expanded} "
                  "generated={generated} time={time:.4f}s", **self._stats)
