class BPNNError(Exception):
    """ Base class for errors raised by the network engine
    """


class ConfigurationError(BPNNError, ValueError):
    """ Raised when a network or training configuration is malformed, e.g.,
    the shape disagrees with the number of input features
    """


class DimensionError(BPNNError, ValueError):
    """ Raised when an input vector does not match the size of the input layer
    """


class EmptyInputError(BPNNError, ValueError):
    """ Raised when a loss is requested over an empty collection of samples
    """


class StopTraining(Exception):
    """ Raised by an `on_iterate` callback to end :meth:`Trainer.train`
    before the requested number of steps
    """
