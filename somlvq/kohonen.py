import numpy as np
import pandas as pd
import plotly.express as px
import matplotlib.pyplot as plt
from scipy.spatial import distance
from tqdm import tqdm
from somlvq.dataset import as_label_data
from somlvq.params import check_params


UNSET_LABEL = ""


class kohonen:
    """
    Labelled SOM
    Initialize weight vectors in [-1, 1]
    For epoch t <- 0 to T - 1 do
        For each training input x do
            Best Matching Unit = winning node = node with the smallest squared distance
            For every node do
                update weight vector
            end
        end
        For each test input x do
            accumulate squared distance from its BMU
        end
    end
    Label every node by its closest test input
    LVQ: move each training input's BMU toward x if labels agree, away otherwise
    Label every node again

    Update weight mi(t + 1) = mi(t) + ⍺(t) * hci(t) [x(t) - mi(t)]
    Neighborhood function hci(t) = exp(-||rc - ri||^2 / (2 * σ^2(t)))
        rc, ri: location vectors of node c and i
    Radius: σ(t) = σ_0 * exp(-t / (T / log10(σ_0)))
    Learning rate: ⍺(t) = ⍺_0 * exp(-t / T)
    LVQ: mc <- mc ± ⍺(T) * (x - mc)
    """

    def __init__(self, grid_size, learning_rate, max_iter, data_dim, sd, seed = None, verbose = True):
        """
        :param grid_size: Number of nodes on each side of the square grid
        :param learning_rate: initial learning rate
        :param max_iter: epoch number T
        :param data_dim: number of features per input
        :param sd: initial standard deviation of the neighborhood function, larger than 1
        :param seed: Random seed
        :param verbose: show epoch progress bar
        """
        check_params(grid_size, learning_rate, max_iter, data_dim, sd)
        self.grid_size = grid_size
        self.data_dim = data_dim
        self.initial_learn = learning_rate
        self.initial_r = sd
        self.epoch_num = max_iter
        self.verbose = verbose
        self.rng = np.random.default_rng(seed)
        # Initialize codebook
        self.init_weight()
        self.init_grid()
        # labeling()
        self.labels = np.full((grid_size, grid_size), UNSET_LABEL, dtype = "<U1")
        # epoch()
        self.train_error = []
        self.test_error = []

    def init_weight(self):
        self.net = self.rng.uniform(-1, 1, size = (self.grid_size, self.grid_size, self.data_dim))

    def init_grid(self):
        """
        [row, col] of each node, row-major
        [0,0]
        [0,1]
        ...
        [1,0]
        """
        self.pts = np.indices((self.grid_size, self.grid_size)).reshape(2, -1).T

    def dist_node(self, bmu):
        """
        :param bmu: grid coordinate of the winning node
        :return: squared grid distance between each node and the BMU, row-major
        """
        return distance.cdist(self.pts, [bmu], "sqeuclidean")[:, 0]

    def elapsed(self, time):
        """
        :param time: t
        :return: t / T, zero when no epoch is run
        """
        if self.epoch_num == 0:
            return 0.0
        return time / self.epoch_num

    def decay_rate(self, time):
        """
        :param time: t
        :return: learning rate ⍺(t)
        """
        return self.initial_learn * np.exp(-self.elapsed(time))

    def decay_radius(self, time):
        """
        :param time: t
        :return: standard deviation σ(t) of the neighborhood function
        """
        if self.epoch_num == 0:
            return self.initial_r
        return self.initial_r * np.exp(-time / (self.epoch_num / np.log10(self.initial_r)))

    def neighborhood(self, bmu, time):
        """
        :param bmu: grid coordinate of the winning node
        :param time: t
        :return: grid_size * grid_size array of Gaussian neighborhood hci(t), 1 at the BMU
        """
        radius = self.decay_radius(time)
        hci = np.exp(-self.dist_node(bmu) / (2 * radius ** 2))
        return hci.reshape((self.grid_size, self.grid_size))

    def check_input(self, x):
        x = np.asarray(x, dtype = float)
        if x.shape != (self.data_dim,):
            raise ValueError("Invalid input. Expected a vector of length %d, got shape %s" % (self.data_dim, x.shape))
        return x

    def find_bmu(self, x):
        """
        :param x: input vector
        :return: grid coordinate of the BMU and its squared distance. Ties go to the first node in row-major order.
        """
        x = self.check_input(x)
        dist_code = np.sum(np.square(x - self.net), axis = 2)
        bmu = np.unravel_index(np.argmin(dist_code), dist_code.shape)
        bmu = (int(bmu[0]), int(bmu[1]))
        return bmu, float(dist_code[bmu])

    def update_weight(self, x, bmu, time):
        """
        :param x: input vector
        :param bmu: grid coordinate of the winning node
        :param time: t
        """
        hci = self.neighborhood(bmu, time)
        self.net += self.decay_rate(time) * hci[:, :, np.newaxis] * (x - self.net)

    def epoch(self, time, data, train = True):
        """
        :param time: epoch index t
        :param data: LabelData, dict, or sequence of (label, vector)
        :param train: update weights (training set) or only measure error (test set)
        :return: mean squared distance between each input and its BMU, nan for empty data
        """
        data = as_label_data(data, self.data_dim)
        sum_error = 0.0
        for _, x in data:
            bmu, dmin = self.find_bmu(x)
            if train:
                self.update_weight(x, bmu, time)
            sum_error += dmin
        if len(data) == 0:
            mean_error = np.nan
        else:
            mean_error = sum_error / len(data)
        if train:
            self.train_error.append(mean_error)
        else:
            self.test_error.append(mean_error)
        return mean_error

    def dist_label(self, data):
        """
        :param data: LabelData
        :return: (grid_size * grid_size) * n squared distance between each node and each input
        """
        codebook = self.net.reshape((-1, self.data_dim))
        return np.sum(np.square(codebook[:, np.newaxis, :] - data.features[np.newaxis, :, :]), axis = 2)

    def labeling(self, data):
        """
        :param data: LabelData, dict, or sequence of (label, vector)
        :return: label of the closest input for every node. Ties go to the first input.
        """
        data = as_label_data(data, self.data_dim)
        if len(data) == 0:
            self.labels = np.full((self.grid_size, self.grid_size), UNSET_LABEL, dtype = "<U1")
            return self.labels
        closest = np.argmin(self.dist_label(data), axis = 1)
        self.labels = data.labels[closest].reshape((self.grid_size, self.grid_size))
        return self.labels

    def lvq(self, data):
        """
        :param data: LabelData, dict, or sequence of (label, vector) - training set
        """
        data = as_label_data(data, self.data_dim)
        # frozen at the rate of the last epoch
        alpha = self.decay_rate(self.epoch_num)
        for label, x in data:
            bmu, _ = self.find_bmu(x)
            sign = 1 if self.labels[bmu] == label else -1
            self.net[bmu] += sign * alpha * (x - self.net[bmu])

    def run(self, train, test, progress = None):
        """
        :param train: training set
        :param test: test set
        :param progress: called with the epoch index after each epoch
        :return: self
        """
        train = as_label_data(train, self.data_dim)
        test = as_label_data(test, self.data_dim)
        for t in tqdm(range(self.epoch_num), desc = "epoch", disable = not self.verbose):
            self.epoch(t, train, train = True)
            self.epoch(t, test, train = False)
            if progress is not None:
                progress(t)
        self.labeling(test)
        self.lvq(train)
        self.labeling(test)
        return self

    def predict(self, data):
        """
        :param data: LabelData, dict, or sequence of (label, vector)
        :return: label of the BMU of each input
        """
        data = as_label_data(data, self.data_dim)
        pred = [self.labels[self.find_bmu(x)[0]] for _, x in data]
        return np.array(pred, dtype = "<U1")

    def score(self, data):
        """
        :param data: LabelData, dict, or sequence of (label, vector)
        :return: ratio of inputs whose BMU carries their label
        """
        data = as_label_data(data, self.data_dim)
        if len(data) == 0:
            return np.nan
        return float(np.mean(self.predict(data) == data.labels))

    def error_frame(self):
        """
        :return: train and test error for each epoch
        """
        return pd.DataFrame({
            "Epoch": np.arange(len(self.train_error)) + 1,
            "Train Error": self.train_error,
            "Test Error": self.test_error
        })

    def plot_error(self):
        """
        :return: line plot of train and test error versus epoch
        """
        error_df = self.error_frame().melt(id_vars = "Epoch", var_name = "Data", value_name = "Error")
        fig = px.line(error_df, x = "Epoch", y = "Error", color = "Data")
        fig.show()
        return fig

    def plot_labels(self, show = True):
        """
        :param show: call plt.show()
        :return: label map of SOM nodes
        """
        classes, codes = np.unique(self.labels, return_inverse = True)
        codes = codes.reshape(self.labels.shape)
        fig, ax = plt.subplots()
        ax.imshow(codes, cmap = "tab20", vmin = 0, vmax = max(len(classes) - 1, 1))
        for i in range(self.grid_size):
            for j in range(self.grid_size):
                ax.text(j, i, self.labels[i, j], ha = "center", va = "center")
        ax.set_xticks([])
        ax.set_yticks([])
        if show:
            plt.show()
        return fig
