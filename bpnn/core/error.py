import enum


class ErrorFunction(enum.Enum):
    """ Per-sample error between a prediction and its target
    """
    SQUARE = 'square'

    def error(self, output, target):
        return 0.5 * (output - target) ** 2

    def der(self, output, target):
        return output - target
