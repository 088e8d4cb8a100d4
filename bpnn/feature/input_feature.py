""" Named features computed from a 2-D point. A network's input ids select
which of these feed its input layer, and in what order.
"""
from collections import OrderedDict, namedtuple
import math

from bpnn.core.exception import ConfigurationError


InputFeature = namedtuple('InputFeature', ['func', 'label'])


INPUT_FEATURES = OrderedDict([
    ('x', InputFeature(lambda x, y: x, 'X_1')),
    ('y', InputFeature(lambda x, y: y, 'X_2')),
    ('xSquared', InputFeature(lambda x, y: x * x, 'X_1^2')),
    ('ySquared', InputFeature(lambda x, y: y * y, 'X_2^2')),
    ('xTimesY', InputFeature(lambda x, y: x * y, 'X_1X_2')),
    ('sinX', InputFeature(lambda x, y: math.sin(x), 'sin(X_1)')),
    ('sinY', InputFeature(lambda x, y: math.sin(y), 'sin(X_2)')),
])


def validate_input_ids(input_ids):
    """ Check that every id names a known feature and none is repeated
    """
    if len(input_ids) == 0:
        raise ConfigurationError("At least one input feature is required")

    for input_id in input_ids:
        if input_id not in INPUT_FEATURES:
            msg = "Unknown input feature `{}`; expected one of {}"
            raise ConfigurationError(
                msg.format(input_id, list(INPUT_FEATURES)))

    if len(set(input_ids)) != len(input_ids):
        msg = "`input_ids` included non-unique features: {}"
        raise ConfigurationError(msg.format(list(input_ids)))


def construct_input(x, y, input_ids):
    """ Compute the input vector for the point `(x, y)`

    Parameters
    ----------
    x, y: float
        The coordinates of the point.

    input_ids: sequence of str
        Keys of :data:`INPUT_FEATURES`, in input-layer order.

    Returns
    -------
    inputs: list of float

    """
    inputs = []
    for input_id in input_ids:
        try:
            feature = INPUT_FEATURES[input_id]
        except KeyError:
            msg = "Unknown input feature `{}`"
            raise ConfigurationError(msg.format(input_id))
        inputs.append(feature.func(x, y))
    return inputs
