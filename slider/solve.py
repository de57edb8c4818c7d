#!/usr/bin/env python3
import argparse, random

from slider.domains.board_io import read_board, format_solution
from slider.log import configure
from slider.search.solver import Solver

def main(argv=None):
    ap = argparse.ArgumentParser(description="Solve one N-puzzle file with twin-raced A*.")
    ap.add_argument("file", help="Puzzle file: n followed by n*n integers (0 = blank)")
    ap.add_argument("--seed", type=int, default=None, help="Seed for twin selection")
    args = ap.parse_args(argv)

    log = configure().bind(component="solve")
    rng = random.Random(args.seed)
    try:
        board = read_board(args.file, rng=rng)
    except (OSError, ValueError) as e:
        ap.error(str(e))

    log.info("read {n}x{n} board from {}", args.file, n=board.dimension())
    solver = Solver(board)
    print(format_solution(solver))
    st = solver.stats()
    log.info("expanded={} generated={} time={:.3f}s", st["expanded"], st["generated"], st["time"])
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
