import numpy as np
import pandas as pd
from sklearn.metrics import classification_report
from sklearn.preprocessing import StandardScaler
from somlvq.kohonen import kohonen
from somlvq.dataset import LabelData, save_data
from somlvq.params import read_parameters


class SomLvq:
    """
    Given labelled training and test files
    1. LabelData - read both data sets (optionally standardized by the training set)
    2. Fit SOM to the training set, measuring test error every epoch
    3. Label nodes by the test set, LVQ with the training set, label again
    4. Write error per epoch and label map
    """

    def __init__(
        self, path_train, path_test, grid_size, learning_rate, max_iter, data_dim, sd,
        standard = False, collapse = True, seed = None, verbose = True
    ):
        """
        :param path_train: file path of training set
        :param path_test: file path of test set
        :param grid_size: Number of nodes on each side of the square grid
        :param learning_rate: initial learning rate
        :param max_iter: epoch number
        :param data_dim: number of features per input
        :param sd: initial standard deviation of the neighborhood function, larger than 1
        :param standard: standardize both data sets with the training set mean and sd
        :param collapse: keep only the last row of each label
        :param seed: Random seed
        :param verbose: show epoch progress bar
        """
        self.path_train = path_train
        self.path_test = path_test
        self.som_grid = kohonen(grid_size, learning_rate, max_iter, data_dim, sd, seed, verbose)
        self.som_tr = LabelData.from_file(path_train, data_dim, collapse)
        self.som_te = LabelData.from_file(path_test, data_dim, collapse)
        # standardization
        self.standard = standard
        if self.standard:
            self.som_tr, self.som_te = SomLvq.standardize(self.som_tr, self.som_te)

    @classmethod
    def from_parameters(cls, path, standard = False, collapse = True, seed = None, verbose = True):
        """
        :param path: file path of parameter file
        :param standard: standardize both data sets with the training set mean and sd
        :param collapse: keep only the last row of each label
        :param seed: Random seed
        :param verbose: show epoch progress bar
        :return: SomLvq
        """
        params = read_parameters(path)
        return cls(
            params["trainFile"], params["testFile"],
            params["gridSize"], params["learningRate"], params["maxIterations"],
            params["dataDimension"], params["standardDeviation"],
            standard, collapse, seed, verbose
        )

    @staticmethod
    def standardize(train, test):
        """
        :param train: LabelData of training set
        :param test: LabelData of test set
        :return: both sets scaled by the training set mean and sd
        """
        if len(train) == 0:
            raise ValueError("Invalid train. Cannot standardize with an empty training set")
        scaler = StandardScaler()
        tmp_tr = scaler.fit_transform(train.features)
        scaled_tr = LabelData(train.labels.tolist(), tmp_tr, train.data_dim, collapse = False)
        if len(test) == 0:
            return scaled_tr, test
        tmp_te = scaler.transform(test.features)
        return scaled_tr, LabelData(test.labels.tolist(), tmp_te, test.data_dim, collapse = False)

    def learn(self, progress = None):
        """
        :param progress: called with the epoch index after each epoch
        """
        self.som_grid.run(self.som_tr, self.som_te, progress)
        return self

    def write_errors(self, path):
        """
        :param path: output file - epoch, train error, test error per line
        """
        save_data(self.som_grid.error_frame(), path)

    def write_labels(self, path):
        """
        :param path: output file - one grid row per line
        """
        save_data(pd.DataFrame(self.som_grid.labels), path)

    def report(self):
        """
        :return: classification report of the test set mapped onto the labelled SOM
        """
        if len(self.som_te) == 0:
            return ""
        pred = self.som_grid.predict(self.som_te)
        classes = np.unique(np.append(self.som_te.labels, pred))
        return classification_report(self.som_te.labels, pred, labels = classes, zero_division = 0)

    def plot_error(self):
        return self.som_grid.plot_error()

    def plot_labels(self, show = True):
        return self.som_grid.plot_labels(show)
