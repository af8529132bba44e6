import re
from collections.abc import Mapping
import numpy as np
import pandas as pd


def load_data(path, **kwargs):
    """
    :param path: file path, format chosen by extension
    :param kwargs: passed to the csv and xlsx readers
    :return: DataFrame
    """
    if re.search(r'\.(csv|txt)$', path, re.IGNORECASE):
        return pd.read_csv(path, header = None, **kwargs)
    elif re.search(r'\.parquet$', path, re.IGNORECASE):
        return pd.read_parquet(path)
    elif re.search(r'\.feather$', path, re.IGNORECASE):
        return pd.read_feather(path)
    elif re.search(r'\.xlsx$', path, re.IGNORECASE):
        return pd.read_excel(path, header = None, **kwargs)
    elif re.search(r'\.json$', path, re.IGNORECASE):
        return pd.read_json(path)
    else:
        raise ValueError("Unsupported file format")


def save_data(df, path):
    if re.search(r'\.(csv|txt)$', path, re.IGNORECASE):
        df.to_csv(path, index = False, header = False)
    elif re.search(r'\.parquet$', path, re.IGNORECASE):
        df.to_parquet(path, index = False)
    elif re.search(r'\.feather$', path, re.IGNORECASE):
        df.reset_index(drop = True).to_feather(path)
    elif re.search(r'\.xlsx$', path, re.IGNORECASE):
        df.to_excel(path, index = False, header = False)
    elif re.search(r'\.json$', path, re.IGNORECASE):
        df.to_json(path, orient = 'records')
    else:
        raise ValueError("Unsupported file format")


class LabelData:
    """
    Ordered labelled data set
    Given n rows of (label, x1, ..., xp)
    1. label: one character class label
    2. features: n * p array
    If collapse, only the last row of each label is kept, at the position where the label first appeared.
    Iterating gives (label, feature vector) pairs in order.
    """

    def __init__(self, labels, features, data_dim, collapse = True):
        """
        :param labels: sequence of one character labels
        :param features: n * data_dim array-like
        :param data_dim: number of features per input
        :param collapse: keep only the last row of each label
        """
        labels = [LabelData.check_label(label) for label in labels]
        features = np.asarray(features, dtype = float)
        if features.size == 0:
            features = np.empty((0, data_dim))
        if features.ndim != 2 or features.shape[1] != data_dim:
            raise ValueError("Invalid features. Expected shape (n, %d), got %s" % (data_dim, features.shape))
        if features.shape[0] != len(labels):
            raise ValueError("Invalid features. %d labels for %d rows" % (len(labels), features.shape[0]))
        if collapse:
            merged = {}
            for label, x in zip(labels, features):
                merged[label] = x
            labels = list(merged.keys())
            features = np.asarray(list(merged.values())).reshape((-1, data_dim))
        self.data_dim = data_dim
        self.collapse = collapse
        self.labels = np.array(labels, dtype = "<U1")
        self.features = features

    def __len__(self):
        return self.labels.shape[0]

    def __iter__(self):
        return zip(self.labels, self.features)

    @staticmethod
    def check_label(label):
        if not isinstance(label, str) or len(label) != 1:
            raise ValueError("Invalid label. Expected a single character, got %r" % (label,))
        return label

    @classmethod
    def from_file(cls, path, data_dim, collapse = True):
        """
        :param path: file path of data set, without header
        :param data_dim: number of features per input
        :param collapse: keep only the last row of each label
        :return: LabelData, empty for an empty file
        """
        try:
            # labels are read as raw text: "NA" or " x" stay labels
            df = load_data(path, dtype = {0: str}, keep_default_na = False)
        except pd.errors.EmptyDataError:
            return cls([], np.empty((0, data_dim)), data_dim, collapse)
        if df.shape[1] != 1 + data_dim:
            raise ValueError("Inconsistent data given in file %s. Expected %d columns, got %d" % (path, 1 + data_dim, df.shape[1]))
        features = df.iloc[:, 1:].apply(pd.to_numeric, errors = "coerce")
        if features.isnull().values.any():
            raise ValueError("Inconsistent data given in file %s. Missing values or non-numeric features" % path)
        labels = df.iloc[:, 0]
        if labels.isnull().any():
            raise ValueError("Inconsistent data given in file %s. Empty label" % path)
        labels = labels.astype(str)
        if (labels.str.len() == 0).any():
            raise ValueError("Inconsistent data given in file %s. Empty label" % path)
        return cls(labels.str[0].tolist(), features.to_numpy(dtype = float), data_dim, collapse)

    @classmethod
    def from_pairs(cls, pairs, data_dim, collapse = True):
        """
        :param pairs: dict of label and feature vector, or sequence of (label, feature vector)
        :param data_dim: number of features per input
        :param collapse: keep only the last vector of each label
        :return: LabelData
        """
        if isinstance(pairs, Mapping):
            pairs = pairs.items()
        labels = []
        features = []
        for label, x in pairs:
            x = np.asarray(x, dtype = float).ravel()
            if x.shape[0] != data_dim:
                raise ValueError("Invalid dimension for label %r. Expected %d, got %d" % (label, data_dim, x.shape[0]))
            labels.append(label)
            features.append(x)
        return cls(labels, features, data_dim, collapse)


def as_label_data(data, data_dim):
    """
    :param data: LabelData, dict of label and feature vector, or sequence of (label, feature vector)
    :param data_dim: number of features per input
    :return: LabelData in the given order, nothing collapsed
    """
    if isinstance(data, LabelData):
        if data.data_dim != data_dim:
            raise ValueError("Invalid dimension. Expected %d, got %d" % (data_dim, data.data_dim))
        return data
    return LabelData.from_pairs(data, data_dim, collapse = False)
