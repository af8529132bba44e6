from somlvq.kohonen import kohonen, UNSET_LABEL
from somlvq.dataset import LabelData, load_data, save_data
from somlvq.classifier import SomLvq
