# tests/benchmarks/test_benchmark_runner.py
import sys
import os

import matplotlib
matplotlib.use("Agg")

sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from experiments.benchmark_runner import run_benchmark, plot_comparisons, build_map
from jps_lab.planning.heuristics import EuclideanHeuristic, OctileHeuristic


def test_build_map_is_read_only_and_clear():
    grid = build_map(0.2, seed=3, width=25, height=25, start=(2, 2), goal=(22, 22))
    assert not grid.data.flags.writeable
    assert not grid.is_obstacle(2, 2)
    assert not grid.is_obstacle(22, 22)


def test_small_benchmark(tmp_path):
    heuristics = {'Euclidean': EuclideanHeuristic(), 'Octile': OctileHeuristic()}
    df = run_benchmark(densities=[0.0, 0.2], num_trials=2, heuristics=heuristics,
                       width=25, height=25, start=(2, 2), goal=(22, 22), verbose=False)

    assert len(df) == 4
    assert set(df['Heuristic']) == {'Euclidean', 'Octile'}
    assert (df['SuccessRate'] == 100.0).all()
    assert (df['LengthMean'] > 0).all()

    out = tmp_path / "bench.png"
    plot_comparisons(df, output_path=str(out), show=False)
    assert out.exists()


def test_run_experiment_releases_debug_log(tmp_path, monkeypatch):
    import experiments.run_experiment as run_module
    from jps_lab.visualization.observers import DebugObserver

    created = []

    def make_observer(config):
        observer = DebugObserver(log_dir=config.log_dir)
        created.append(observer)
        return observer

    monkeypatch.setattr(run_module, "create_observer", make_observer)
    result = run_module.run_experiment(density=0.0, seed=1, mode="debug", output_dir=str(tmp_path))

    assert result.found
    assert len(created) == 1
    assert created[0].logger.handlers == []
    assert os.path.exists(created[0].log_file)
    assert any(name.endswith(".png") for name in os.listdir(tmp_path))
