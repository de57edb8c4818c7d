#!/usr/bin/env python3
from __future__ import annotations
import argparse
from pathlib import Path
from typing import Iterable, Optional

import numpy as np
import pandas as pd

from loguru import logger

from slider.log import configure

log = logger.bind(component="analyze")

METRICS = ("expanded", "generated", "time_sec")
NEED = {"n", "depth", "solvable", "reported", *METRICS}

def sem(x):
    x = np.asarray(x, float)
    n = np.sum(~np.isnan(x))
    return 0.0 if n <= 1 else np.nanstd(x, ddof=1) / np.sqrt(n)

def load(paths: Iterable[Path]) -> Optional[pd.DataFrame]:
    frames = []
    for p in paths:
        try:
            df = pd.read_csv(p)
        except (OSError, UnicodeDecodeError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
            log.warning("skipping {}: {}", p, e)
            continue
        if not NEED.issubset(df.columns):
            log.warning("skipping {}: missing columns {}", p, sorted(NEED - set(df.columns)))
            continue
        for col in NEED:
            df[col] = pd.to_numeric(df[col], errors="coerce")
        total = len(df)
        df = df.dropna(subset=sorted(NEED))
        dropped = total - len(df)
        if dropped:
            log.warning("skipping {} malformed rows in {}", dropped, p)
        frames.append(df)
    if not frames:
        return None
    return pd.concat(frames, ignore_index=True)

def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Mean and SEM of each metric per (n, solvable, depth), plus verdict mismatches."""
    df = df.assign(mismatch=(df["reported"] != df["solvable"]).astype(int))
    aggs = {}
    for m in METRICS:
        aggs[f"{m}_mean"] = (m, "mean")
        aggs[f"{m}_sem"] = (m, sem)
    aggs["count"] = ("expanded", "count")
    aggs["mismatches"] = ("mismatch", "sum")
    return (df.groupby(["n", "solvable", "depth"], as_index=False)
              .agg(**aggs)
              .sort_values(["n", "solvable", "depth"], ascending=[True, False, True])
              .reset_index(drop=True))

def main(argv=None):
    ap = argparse.ArgumentParser(description="Summarize runner CSVs (mean ± SEM per depth).")
    ap.add_argument("csv", nargs="+", type=Path, help="One or more CSV result files")
    args = ap.parse_args(argv)
    configure()

    df = load(args.csv)
    if df is None or df.empty:
        log.warning("No rows to summarize. Are your CSVs empty?")
        return 1

    table = summarize(df)
    with pd.option_context("display.max_rows", None, "display.width", 120):
        print(table.to_string(index=False, float_format=lambda v: f"{v:.3f}"))
    bad = int(table["mismatches"].sum())
    if bad:
        log.warning("{} rows where the solver verdict disagrees with the expected solvability", bad)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
