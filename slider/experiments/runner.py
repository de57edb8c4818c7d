from __future__ import annotations
import argparse, csv, random
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from slider.domains.board import Board, Grid, scramble, make_unsolvable_variant
from slider.log import configure
from slider.search.solver import Solver

HEADER = [
    "algorithm", "heuristic", "n", "depth", "seed",
    "expanded", "generated", "peak_open", "moves", "time_sec",
    "solvable", "reported",
]

@dataclass
class Instance:
    seed: int
    depth: int
    tiles: Grid

def generate(n: int, depths: List[int], per_depth: int, start_seed: int = 0) -> List[Instance]:
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        for _ in range(per_depth):
            out.append(Instance(seed=seed, depth=d, tiles=scramble(n, d, seed)))
            seed += 1
    return out

def run_one(tiles: Grid, seed: int) -> Solver:
    return Solver(Board(tiles, rng=random.Random(seed)))

def make_row(solver: Solver, n: int, inst: Instance, solvable_flag: int) -> list:
    st = solver.stats()
    return [
        st["algorithm"], "manhattan", n, inst.depth, inst.seed,
        st["expanded"], st["generated"], st["peak_open"], st["moves"],
        f"{st['time']:.6f}", solvable_flag, int(st["solvable"]),
    ]

def run(n: int, depths: List[int], per_depth: int, out: Path,
        include_unsolvable: bool = False, start_seed: int = 0, log=None) -> int:
    """Solve scrambled instances (and optionally their unsolvable variants); write CSV rows."""
    insts = generate(n, depths, per_depth, start_seed)
    out.parent.mkdir(parents=True, exist_ok=True)
    rows = 0
    with out.open("w", newline="") as f:
        w = csv.writer(f); w.writerow(HEADER)
        for inst in insts:
            solver = run_one(inst.tiles, inst.seed)
            w.writerow(make_row(solver, n, inst, 1)); rows += 1
            if log is not None:
                log.debug("depth={} seed={} moves={}", inst.depth, inst.seed, solver.moves())

            if include_unsolvable:
                u = make_unsolvable_variant(inst.tiles)
                solver = run_one(u, inst.seed)
                w.writerow(make_row(solver, n, inst, 0)); rows += 1
    return rows

def main(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(description="Twin-raced A* experiment runner for N×N puzzles")
    ap.add_argument("--n", type=int, default=3, help="Square board size (N×N)")
    ap.add_argument("--depths", type=int, nargs="+", default=[4, 8, 12, 16, 20])
    ap.add_argument("--per_depth", type=int, default=10)
    ap.add_argument("--seed_start", type=int, default=0)
    ap.add_argument("--include_unsolvable", action="store_true", help="Also solve a parity-flipped variant of each instance")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))
    args = ap.parse_args(argv)
    if args.n < 2:
        ap.error("--n must be at least 2")

    log = configure().bind(component="runner")
    rows = run(args.n, args.depths, args.per_depth, args.out,
               include_unsolvable=args.include_unsolvable, start_seed=args.seed_start, log=log)
    log.info("Wrote {} ({} rows)", args.out, rows)

if __name__ == "__main__":
    main()
