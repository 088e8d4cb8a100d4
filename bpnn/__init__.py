# flake8: noqa

from ._version import version as __version__
from .core import (
    Activation,
    ErrorFunction,
    Regularization,
    back_prop,
    build_network,
    forward_prop,
    mean_loss,
    update_weights,
)
from .core.config import PlaygroundConfig
from .core.trainer import Trainer
