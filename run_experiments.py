#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(args):
    cmd = [sys.executable, "-m", *args]
    print("Running:", " ".join(cmd))
    r = subprocess.run(cmd)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    run(["slider.experiments.runner", "--n", "3", "--depths", "4", "8", "12", "16", "20",
         "--per_depth", "10", "--include_unsolvable", "--out", "results/p8.csv"])
    run(["slider.experiments.runner", "--n", "4", "--depths", "4", "8", "12",
         "--per_depth", "5", "--out", "results/p15.csv"])
    run(["slider.experiments.analyze", "results/p8.csv", "results/p15.csv"])
    run(["slider.experiments.plot", "results/p8.csv", "results/p15.csv", "--save", "results/plots"])

if __name__ == "__main__":
    main()
