import math

from bpnn.core.activation import Activation
from bpnn.core.exception import ConfigurationError
from bpnn.core.regularization import Regularization
from bpnn.data.dim2 import CLASSIFICATION_DATASETS, REGRESSION_DATASETS
from bpnn.feature.input_feature import validate_input_ids


CLASSIFICATION = 'classification'
REGRESSION = 'regression'
PROBLEMS = (CLASSIFICATION, REGRESSION)

NUM_SAMPLES_CLASSIFY = 500
NUM_SAMPLES_REGRESS = 1200


class PlaygroundConfig:
    """ The user-adjustable settings of a playground session
    """
    def __init__(self,
                 activation='tanh',
                 batch_size=10,
                 dataset=None,
                 init_zero=False,
                 input_ids=('x', 'y'),
                 learning_rate=0.03,
                 n_samples=None,
                 network_shape=(4, 2),
                 noise=0,
                 perc_train_data=50,
                 problem=CLASSIFICATION,
                 regularization='none',
                 regularization_rate=0.0,
                 seed=None,
                 ):
        """
        Parameters
        ----------
        activation: str or Activation, default='tanh'
            The hidden layer activation.

        batch_size: int, default=10
            The number of samples whose gradients are averaged per update.

        dataset: str, default=None
            Name of a dataset in the registry for `problem`. The default
            None uses 'circle' for classification and 'reg-plane' for
            regression.

        init_zero: bool, default=False
            Start all weights and biases at zero.

        input_ids: sequence of str, default=('x', 'y')
            The input features, see
            :data:`bpnn.feature.input_feature.INPUT_FEATURES`.

        learning_rate: float, default=0.03

        n_samples: int, default=None
            The number of generated examples. The default None uses 500 for
            classification and 1200 for regression.

        network_shape: sequence of int, default=(4, 2)
            The sizes of the hidden layers only.

        noise: float, default=0
            Dataset noise as a percentage in [0, 50].

        perc_train_data: float, default=50
            Percentage of examples used for training.

        problem: str, default='classification'
            Either 'classification' or 'regression'.

        regularization: str or Regularization, default='none'

        regularization_rate: float, default=0.0

        seed: int, default=None
            Seeds data generation and weight initialization.

        """
        if problem not in PROBLEMS:
            msg = "`problem` must be one of {}, got {}"
            raise ConfigurationError(msg.format(PROBLEMS, problem))
        self.problem = problem

        registry = self.datasets
        if dataset is None:
            dataset = next(iter(registry))
        if dataset not in registry:
            msg = "Unknown {} dataset `{}`; expected one of {}"
            raise ConfigurationError(
                msg.format(problem, dataset, list(registry)))
        self.dataset = dataset

        self.activation = activation
        self.regularization = regularization
        # Resolving here rejects unknown names early
        self.activation_function
        self.regularization_function

        if learning_rate <= 0:
            msg = "`learning_rate` must be positive, got {}"
            raise ConfigurationError(msg.format(learning_rate))
        self.learning_rate = float(learning_rate)

        if regularization_rate < 0:
            msg = "`regularization_rate` must be non-negative, got {}"
            raise ConfigurationError(msg.format(regularization_rate))
        self.regularization_rate = float(regularization_rate)

        if int(batch_size) != batch_size or batch_size < 1:
            msg = "`batch_size` must be a positive integer, got {}"
            raise ConfigurationError(msg.format(batch_size))
        self.batch_size = int(batch_size)

        for i, size in enumerate(network_shape):
            if int(size) != size or size < 1:
                msg = "network_shape[{}] = {} is not a positive integer"
                raise ConfigurationError(msg.format(i, size))
        self.network_shape = tuple(int(size) for size in network_shape)

        validate_input_ids(input_ids)
        self.input_ids = tuple(input_ids)

        if not 0 <= noise <= 50:
            msg = "`noise` must be a percentage in [0, 50], got {}"
            raise ConfigurationError(msg.format(noise))
        self.noise = noise

        if not 0 < perc_train_data < 100:
            msg = "`perc_train_data` must be in (0, 100), got {}"
            raise ConfigurationError(msg.format(perc_train_data))
        self.perc_train_data = perc_train_data

        if n_samples is None:
            n_samples = (NUM_SAMPLES_REGRESS if problem == REGRESSION
                         else NUM_SAMPLES_CLASSIFY)
        elif n_samples < 2:
            msg = "`n_samples` must be at least 2, got {}"
            raise ConfigurationError(msg.format(n_samples))
        self.n_samples = int(n_samples)

        n_train = int(math.floor(self.n_samples * perc_train_data / 100.))
        if not 1 <= n_train <= self.n_samples - 1:
            msg = ("`perc_train_data` = {} of {} samples leaves {} training "
                   "and {} testing examples; both must be non-empty")
            raise ConfigurationError(msg.format(
                perc_train_data, self.n_samples, n_train,
                self.n_samples - n_train))

        self.init_zero = bool(init_zero)
        self.seed = seed

    def __repr__(self):
        return ("<PlaygroundConfig problem={} dataset={} shape={}>"
                .format(self.problem, self.dataset, self.shape))

    @property
    def datasets(self):
        if self.problem == REGRESSION:
            return REGRESSION_DATASETS
        return CLASSIFICATION_DATASETS

    @property
    def data_generator(self):
        return self.datasets[self.dataset]

    @property
    def activation_function(self):
        if isinstance(self.activation, Activation):
            return self.activation
        return Activation.from_name(self.activation)

    @property
    def output_activation(self):
        """ Regression predicts an unbounded value; classification
        squashes to (-1, 1) to match the labels
        """
        if self.problem == REGRESSION:
            return Activation.LINEAR
        return Activation.TANH

    @property
    def regularization_function(self):
        if isinstance(self.regularization, Regularization):
            return self.regularization
        return Regularization.from_name(self.regularization)

    @property
    def shape(self):
        """ The full layer shape: inputs, hidden layers, one output
        """
        return [len(self.input_ids)] + list(self.network_shape) + [1]
