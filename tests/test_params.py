import os
import pytest
from somlvq.params import read_parameters, check_params


def write_params(tmp_path, lines):
    path = tmp_path / "parameters.txt"
    path.write_text("\n".join(lines) + "\n")
    return str(path)


VALID = [
    "gridSize 4",
    "learningRate 0.3",
    "maxIterations 20",
    "dataDimension 16",
    "standardDeviation 2.5",
    "trainFile data/training.csv",
    "testFile /tmp/test.csv"
]


def test_read_parameters(tmp_path):
    params = read_parameters(write_params(tmp_path, VALID))
    assert params["gridSize"] == 4
    assert params["learningRate"] == .3
    assert params["maxIterations"] == 20
    assert params["dataDimension"] == 16
    assert params["standardDeviation"] == 2.5
    assert params["trainFile"] == os.path.join(str(tmp_path), "data/training.csv")
    assert params["testFile"] == "/tmp/test.csv"


def test_read_parameters_any_order(tmp_path):
    params = read_parameters(write_params(tmp_path, VALID[::-1]))
    assert params["gridSize"] == 4


def test_missing_key(tmp_path):
    with pytest.raises(ValueError, match = "Missing keys"):
        read_parameters(write_params(tmp_path, VALID[1:]))


def test_unknown_key(tmp_path):
    with pytest.raises(ValueError, match = "Unknown keys"):
        read_parameters(write_params(tmp_path, VALID + ["momentum 0.9"]))


def test_duplicated_key(tmp_path):
    with pytest.raises(ValueError, match = "Duplicated"):
        read_parameters(write_params(tmp_path, VALID + ["gridSize 5"]))


def test_bad_type(tmp_path):
    lines = ["gridSize four"] + VALID[1:]
    with pytest.raises(ValueError, match = "Expected int for gridSize"):
        read_parameters(write_params(tmp_path, lines))


def test_missing_value(tmp_path):
    lines = ["gridSize"] + VALID[1:]
    with pytest.raises(ValueError, match = "Invalid parameters"):
        read_parameters(write_params(tmp_path, lines))


def test_standard_deviation_checked(tmp_path):
    lines = VALID[:4] + ["standardDeviation 1"] + VALID[5:]
    with pytest.raises(ValueError, match = "Invalid sd"):
        read_parameters(write_params(tmp_path, lines))


def test_check_params_valid():
    check_params(1, .1, 0, 1, 1.01)


@pytest.mark.parametrize("args, name", [
    ((0, .1, 1, 1, 2), "grid_size"),
    ((True, .1, 1, 1, 2), "grid_size"),
    ((2, float("nan"), 1, 1, 2), "learning_rate"),
    ((2, .1, 1.5, 1, 2), "max_iter"),
    ((2, .1, 1, -3, 2), "data_dim"),
    ((2, .1, 1, 1, .9), "sd"),
])
def test_check_params_invalid(args, name):
    with pytest.raises(ValueError, match = "Invalid %s" % name):
        check_params(*args)
