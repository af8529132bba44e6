import matplotlib
matplotlib.use("Agg")
import numpy as np
import pytest


@pytest.fixture
def toy_pairs():
    return {"A": [0.0], "B": [10.0]}


@pytest.fixture
def cluster_pairs():
    """
    Three well separated 2d clusters, two points each
    """
    return [
        ("a", [0.0, 0.0]), ("a", [0.2, 0.1]),
        ("b", [5.0, 5.0]), ("b", [5.1, 4.8]),
        ("c", [0.0, 5.0]), ("c", [0.2, 5.2])
    ]


@pytest.fixture
def data_files(tmp_path):
    """
    Training set, test set, and parameter file on disk
    """
    rng = np.random.default_rng(0)
    centers = {"A": [0.0, 0.0, 0.0], "B": [3.0, 3.0, 3.0], "C": [-3.0, 3.0, 0.0]}
    tr_lines = []
    te_lines = []
    for label, center in centers.items():
        x_tr = np.asarray(center) + rng.normal(scale = .1, size = 3)
        x_te = np.asarray(center) + rng.normal(scale = .1, size = 3)
        tr_lines.append(",".join([label] + ["%.4f" % v for v in x_tr]))
        te_lines.append(",".join([label] + ["%.4f" % v for v in x_te]))
    (tmp_path / "training.csv").write_text("\n".join(tr_lines) + "\n")
    (tmp_path / "test.csv").write_text("\n".join(te_lines) + "\n")
    (tmp_path / "parameters.txt").write_text(
        "gridSize 3\n"
        "learningRate 0.5\n"
        "maxIterations 5\n"
        "dataDimension 3\n"
        "standardDeviation 2\n"
        "trainFile training.csv\n"
        "testFile test.csv\n"
    )
    return tmp_path
