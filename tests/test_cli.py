import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import glob

import pandas as pd
import pytest

from cli import make_figs, run_compare
from planners import Algorithm


def test_build_jobs_expands_a_star_per_heuristic():
    jobs = run_compare.build_jobs([Algorithm.BFS, Algorithm.A_STAR], ["manhattan", "euclidean"])
    assert jobs == [(Algorithm.BFS, None),
                    (Algorithm.A_STAR, "manhattan"),
                    (Algorithm.A_STAR, "euclidean")]


def test_parsers_reject_unknown_names():
    assert run_compare._parse_algorithms("BFS, a*") == [Algorithm.BFS, Algorithm.A_STAR]
    with pytest.raises(ValueError):
        run_compare._parse_presets("small,huge")
    with pytest.raises(ValueError):
        run_compare._parse_heuristics("manhattan,octile")


def test_run_compare_writes_csv_and_figures(tmp_path, capsys):
    csv_dir = tmp_path / "csv"
    fig_dir = tmp_path / "figs"
    rc = run_compare.main([
        "--presets", "small", "--mode", "both", "--repeats", "2", "--exact-reference",
        "--outdir", str(csv_dir), "--plot-dir", str(fig_dir), "--no-progress",
    ])
    assert rc == 0

    files = glob.glob(str(csv_dir / "compare_*.csv"))
    assert len(files) == 1
    df = pd.read_csv(files[0])
    # 2 modes x (bfs, dfs, 3 x a_star) x 2 repeats
    assert len(df) == 20
    assert list(df.columns) == run_compare.CSV_FIELDS
    assert df["success"].all()
    assert set(df["mode"]) == {"simple", "weighted"}

    astar = df[df["algorithm"] == "a_star"]
    assert astar["path_optimality_ratio"].tolist() == pytest.approx([1.0] * len(astar))

    assert len(list(fig_dir.glob("small_*.png"))) == 10
    out = capsys.readouterr().out
    assert "A* (manhattan)" in out and "Saved:" in out


def test_make_figs_from_csv(tmp_path):
    csv_dir = tmp_path / "csv"
    run_compare.main(["--presets", "small", "--mode", "weighted",
                      "--outdir", str(csv_dir), "--no-progress"])
    fig_dir = tmp_path / "figs"
    rc = make_figs.main(["--csv-glob", str(csv_dir / "compare_*.csv"), "--outdir", str(fig_dir)])
    assert rc == 0
    assert (fig_dir / "compare_nodes_expanded.png").exists()
    assert (fig_dir / "compare_path_optimality_ratio.png").exists()


def test_make_figs_without_input(tmp_path):
    assert make_figs.main(["--csv-glob", str(tmp_path / "none_*.csv"),
                           "--outdir", str(tmp_path)]) == 1


@pytest.mark.parametrize("argv", [
    ["--algorithms", "greedy"],
    ["--presets", "huge"],
    ["--heuristics", "octile"],
    ["--repeats", "0"],
])
def test_bad_arguments_exit_with_usage_error(argv, tmp_path):
    with pytest.raises(SystemExit) as exc:
        run_compare.main(argv + ["--outdir", str(tmp_path), "--no-progress"])
    assert exc.value.code == 2
