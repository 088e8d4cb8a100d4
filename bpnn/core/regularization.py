""" Weight penalties. "No regularization" is represented by None wherever a
regularization is accepted.
"""
import enum

from bpnn.core.exception import ConfigurationError


NO_REGULARIZATION_NAME = 'none'


class Regularization(enum.Enum):
    L1 = 'l1'
    L2 = 'l2'

    @classmethod
    def from_name(cls, name):
        """ Look up a regularization by name; :code:`'none'` (or None) gives
        None
        """
        if name is None or str(name).lower() == NO_REGULARIZATION_NAME:
            return None
        try:
            return cls(str(name).lower())
        except ValueError:
            msg = "Unknown regularization `{}`; expected one of {}"
            names = [member.value for member in cls] + [NO_REGULARIZATION_NAME]
            raise ConfigurationError(msg.format(name, names))

    def output(self, w):
        """ The penalty for weight `w`
        """
        if self is Regularization.L1:
            return abs(w)
        return 0.5 * w * w

    def der(self, w):
        """ The derivative of the penalty at weight `w`
        """
        if self is Regularization.L1:
            if w < 0:
                return -1.
            elif w > 0:
                return 1.
            return 0.
        return w
