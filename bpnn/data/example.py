from collections import namedtuple
import math

import numpy


# A labelled point in the plane
Example2D = namedtuple('Example2D', ['x', 'y', 'label'])


def shuffle(examples, random_state=None):
    """ Shuffle a list of examples in place
    """
    random_state = (random_state if random_state is not None
                    else numpy.random.RandomState())
    random_state.shuffle(examples)


def split(examples, perc_train):
    """ Split examples into training and testing lists

    Parameters
    ----------
    examples: list of Example2D

    perc_train: float
        Percentage (0 to 100) of the examples, taken from the front of the
        list, that become training data.

    Returns
    -------
    train, test: list, list
    """
    if not 0 <= perc_train <= 100:
        msg = "`perc_train` must be in [0, 100], got {}"
        raise ValueError(msg.format(perc_train))

    split_index = int(math.floor(len(examples) * perc_train / 100.))
    return examples[:split_index], examples[split_index:]
