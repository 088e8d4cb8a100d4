# flake8: noqa

from .activation import Activation
from .error import ErrorFunction
from .exception import (
    BPNNError, ConfigurationError, DimensionError, EmptyInputError)
from .network import Link, Network, Node, build_network
from .propagation import (
    back_prop, forward_prop, mean_loss, reset_accumulators, update_weights)
from .regularization import Regularization
