import os
import numpy as np


PARAM_TYPES = {
    "gridSize": int,
    "learningRate": float,
    "maxIterations": int,
    "dataDimension": int,
    "standardDeviation": float,
    "trainFile": str,
    "testFile": str
}


def read_parameters(path):
    """
    Parameter file - one whitespace separated key value pair per line
        gridSize 10
        learningRate 0.3
        maxIterations 100
        dataDimension 16
        standardDeviation 5
        trainFile training.csv
        testFile test.csv
    Relative data file paths are resolved against the directory of the parameter file.
    :param path: file path of parameter file
    :return: dict of parameter name and typed value
    """
    with open(path, "r") as fh:
        lines = [line.split() for line in fh if line.strip()]
    if len(lines) == 0 or any(len(line) != 2 for line in lines):
        raise ValueError("Invalid parameters given. Expected one 'key value' pair per line in %s" % path)
    keys = [line[0] for line in lines]
    values = [line[1] for line in lines]
    unknown = [key for key in keys if key not in PARAM_TYPES]
    if len(unknown) > 0:
        raise ValueError("Invalid parameters given. Unknown keys: %s" % unknown)
    if len(set(keys)) != len(keys):
        raise ValueError("Invalid parameters given. Duplicated keys in %s" % path)
    missing = [key for key in PARAM_TYPES if key not in keys]
    if len(missing) > 0:
        raise ValueError("Invalid parameters given. Missing keys: %s" % missing)
    params = {}
    for key, value in zip(keys, values):
        try:
            params[key] = PARAM_TYPES[key](value)
        except ValueError:
            raise ValueError(
                "Invalid parameters given. Expected %s for %s, got %s" % (PARAM_TYPES[key].__name__, key, value)
            ) from None
    base = os.path.dirname(os.path.abspath(path))
    for key in ["trainFile", "testFile"]:
        if not os.path.isabs(params[key]):
            params[key] = os.path.join(base, params[key])
    check_params(
        params["gridSize"], params["learningRate"], params["maxIterations"],
        params["dataDimension"], params["standardDeviation"]
    )
    return params


def is_integer(value):
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def check_params(grid_size, learning_rate, max_iter, data_dim, sd):
    """
    :param grid_size: Number of nodes on each side of the square grid
    :param learning_rate: initial learning rate
    :param max_iter: epoch number
    :param data_dim: number of features per input
    :param sd: initial standard deviation of the neighborhood function
    """
    if not is_integer(grid_size) or grid_size < 1:
        raise ValueError("Invalid grid_size. Expected a positive integer, got %s" % grid_size)
    if not is_integer(data_dim) or data_dim < 1:
        raise ValueError("Invalid data_dim. Expected a positive integer, got %s" % data_dim)
    if not is_integer(max_iter) or max_iter < 0:
        raise ValueError("Invalid max_iter. Expected a non-negative integer, got %s" % max_iter)
    if not np.isfinite(learning_rate) or learning_rate <= 0:
        raise ValueError("Invalid learning_rate. Expected a positive number, got %s" % learning_rate)
    # log10(sd) is the radius decay speed
    if not np.isfinite(sd) or sd <= 1:
        raise ValueError("Invalid sd. Expected a number larger than 1, got %s" % sd)
