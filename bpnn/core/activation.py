""" Node activation functions and their derivatives
"""
import enum
import math

from bpnn.core.exception import ConfigurationError


class Activation(enum.Enum):
    """ The activation functions available to network nodes. Each member
    computes its value with :code:`output(x)` and its derivative with
    :code:`der(x)`.
    """
    LINEAR = 'linear'
    TANH = 'tanh'
    SIGMOID = 'sigmoid'
    RELU = 'relu'

    @classmethod
    def from_name(cls, name):
        """ Look up an activation by (case-insensitive) name
        """
        try:
            return cls(str(name).lower())
        except ValueError:
            msg = "Unknown activation `{}`; expected one of {}"
            raise ConfigurationError(
                msg.format(name, [member.value for member in cls]))

    def output(self, x):
        if self is Activation.LINEAR:
            return x
        elif self is Activation.TANH:
            return math.tanh(x)
        elif self is Activation.SIGMOID:
            return _sigmoid(x)
        else:
            return max(0., x)

    def der(self, x):
        if self is Activation.LINEAR:
            return 1.
        elif self is Activation.TANH:
            t = math.tanh(x)
            return 1. - t * t
        elif self is Activation.SIGMOID:
            s = _sigmoid(x)
            return s * (1. - s)
        else:
            return 0. if x <= 0 else 1.


def _sigmoid(x):
    # exp of a large positive argument overflows, so branch on the sign
    if x >= 0:
        return 1. / (1. + math.exp(-x))
    z = math.exp(x)
    return z / (1. + z)
