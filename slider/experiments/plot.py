#!/usr/bin/env python3
import argparse, os
from pathlib import Path

import matplotlib
# Default to a non-interactive backend
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt
from loguru import logger

from slider.experiments.analyze import load, summarize
from slider.log import configure

log = logger.bind(component="plot")

def plot_metric(ax, table, metric):
    for (n, solvable), sub in table.groupby(["n", "solvable"]):
        label = f"{int(n)}x{int(n)} | {'solvable' if solvable else 'unsolvable'}"
        ax.errorbar(sub["depth"], sub[f"{metric}_mean"], yerr=sub[f"{metric}_sem"],
                    marker="o", capsize=3, label=label)
    ax.set_xlabel("Scramble depth")
    ax.set_ylabel(metric)
    ax.set_title(f"{metric} vs depth (mean ± SEM)")
    ax.grid(True)
    ax.legend()

def save_fig(fig, outdir: Path, name: str) -> Path:
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"{name}.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    log.info("Saved: {}", path)
    return path

def main(argv=None):
    ap = argparse.ArgumentParser(description="Plot runner CSVs and save PNGs.")
    ap.add_argument("csv", nargs="+", type=Path, help="One or more CSV result files")
    ap.add_argument("--save", type=Path, default=Path("results/plots"), help="Directory to save plots")
    args = ap.parse_args(argv)
    configure()

    df = load(args.csv)
    if df is None or df.empty:
        log.warning("No rows to plot. Are your CSVs empty?")
        return 1
    table = summarize(df)
    base = "combo" if len(args.csv) > 1 else args.csv[0].stem

    fig, axes = plt.subplots(1, 3, figsize=(15, 5))
    for ax, metric in zip(axes, ["expanded", "generated", "time_sec"]):
        plot_metric(ax, table, metric)
    fig.tight_layout()
    save_fig(fig, args.save, f"{base}_combined")
    plt.close(fig)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
