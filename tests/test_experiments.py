"""
Tests for the experiment runner and the CSV summary.
"""

import csv
import subprocess
import sys

import pandas as pd
import pytest

from slider.experiments import analyze, plot, runner
from slider.log import configure


@pytest.fixture
def results_csv(tmp_path):
    out = tmp_path / "results" / "p8.csv"
    rows = runner.run(3, [2, 4], 3, out, include_unsolvable=True)
    assert rows == 12
    return out


class TestRunner:
    def test_generate_is_seeded(self):
        a = runner.generate(3, [4, 6], 2, start_seed=5)
        b = runner.generate(3, [4, 6], 2, start_seed=5)
        assert [i.tiles for i in a] == [i.tiles for i in b]
        assert [i.seed for i in a] == [5, 6, 7, 8]
        assert [i.depth for i in a] == [4, 4, 6, 6]

    def test_csv_rows(self, results_csv):
        with results_csv.open(newline="") as f:
            rows = list(csv.DictReader(f))
        assert list(rows[0].keys()) == runner.HEADER
        assert len(rows) == 12
        for row in rows:
            assert row["reported"] == row["solvable"]
            if row["solvable"] == "1":
                assert 0 <= int(row["moves"]) <= int(row["depth"])
            else:
                assert row["moves"] == "-1"

    def test_main(self, tmp_path):
        out = tmp_path / "run.csv"
        runner.main(["--n", "2", "--depths", "3", "--per_depth", "2", "--out", str(out)])
        assert len(pd.read_csv(out)) == 2


class TestAnalyze:
    def test_summarize(self, results_csv):
        df = analyze.load([results_csv])
        table = analyze.summarize(df)
        assert len(table) == 4
        assert set(table["count"]) == {3}
        assert table["mismatches"].sum() == 0
        assert list(table["solvable"]) == [1, 1, 0, 0]
        assert (table["expanded_mean"] >= 0).all()

    def test_sem(self):
        assert analyze.sem([5.0]) == 0.0
        assert analyze.sem([1.0, 3.0]) == pytest.approx(1.0)

    def test_load_skips_bad_files(self, tmp_path, results_csv):
        bad = tmp_path / "bad.csv"
        bad.write_text("a,b\n1,2\n")
        df = analyze.load([bad, tmp_path / "missing.csv", results_csv])
        assert len(df) == 12
        assert analyze.load([bad]) is None

    def test_main(self, results_csv, capsys):
        assert analyze.main([str(results_csv)]) == 0
        assert "expanded_mean" in capsys.readouterr().out


class TestPlot:
    def test_main_saves_png(self, results_csv, tmp_path):
        outdir = tmp_path / "plots"
        assert plot.main([str(results_csv), "--save", str(outdir)]) == 0
        assert (outdir / "p8_combined.png").exists()

    def test_main_without_rows(self, tmp_path):
        empty = tmp_path / "empty.csv"
        empty.write_text(",".join(runner.HEADER) + "\n")
        assert plot.main([str(empty), "--save", str(tmp_path / "plots")]) == 1


@pytest.fixture
def warnings_on_stderr():
    configure("WARNING")


class TestLoadWarnings:
    def test_malformed_rows_dropped_with_warning(self, tmp_path, capfd, warnings_on_stderr):
        p = tmp_path / "mixed.csv"
        p.write_text(
            ",".join(runner.HEADER) + "\n"
            "A* twin,manhattan,3,4,0,12,30,20,4,0.001,1,1\n"
            "A* twin,manhattan,3,4,1,x,30,20,4,0.001,1,1\n"
        )
        df = analyze.load([p])
        assert len(df) == 1
        assert "skipping 1 malformed rows" in capfd.readouterr().err

    def test_undecodable_file_skipped(self, tmp_path, capfd, results_csv, warnings_on_stderr):
        binary = tmp_path / "binary.csv"
        binary.write_bytes(b"a,b\n\xc3\x28\x81,\xfa\n")
        assert analyze.load([binary]) is None
        assert len(analyze.load([binary, results_csv])) == 12
        assert "skipping" in capfd.readouterr().err


class TestRunExperimentsScript:
    def test_commands_are_argument_lists(self, tmp_path, monkeypatch):
        import run_experiments

        calls = []

        def fake_run(cmd, *args, **kwargs):
            calls.append((cmd, kwargs))
            return subprocess.CompletedProcess(cmd, 0)

        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(run_experiments.subprocess, "run", fake_run)
        run_experiments.main()
        assert len(calls) == 4
        for cmd, kwargs in calls:
            assert isinstance(cmd, list)
            assert cmd[:2] == [sys.executable, "-m"]
            assert not kwargs.get("shell")
        assert calls[0][0][2] == "slider.experiments.runner"
