from collections import namedtuple
import logging

import numpy

from bpnn.core.error import ErrorFunction
from bpnn.core.exception import StopTraining
from bpnn.core.network import build_network
from bpnn.core.propagation import (
    back_prop, forward_prop, mean_loss, update_weights)
from bpnn.data.example import shuffle, split
from bpnn.feature.input_feature import construct_input


_logger_name = __name__.rsplit('.', 1)[-1]
logger = logging.getLogger(_logger_name)


# Returned by `Trainer.one_step` and passed to `on_iterate` callbacks
StepResult = namedtuple('StepResult', ['iteration', 'loss_train', 'loss_test'])


class Trainer:
    """ Owns a network, its data and the training loop of a playground
    session
    """
    def __init__(self, config, error_func=ErrorFunction.SQUARE):
        """
        Parameters
        ----------
        config: PlaygroundConfig
            See :class:`bpnn.core.config.PlaygroundConfig`

        error_func: ErrorFunction, default=ErrorFunction.SQUARE

        """
        self.config = config
        self.error_func = error_func
        self.random_state = numpy.random.RandomState(config.seed)

        self.network = None
        self.iteration = 0
        self.train_data = []
        self.test_data = []
        self.loss_train = None
        self.loss_test = None
        self.loss_history = []

        self.generate_data()
        self.reset()

    def _log_with_iter(self, msg, level='info'):
        """ Write to the logger with the current iteration number prepended
        to the log message
        """
        full_message = "(Iteration = {:03d}) {:s}".format(self.iteration, msg)

        if level == 'info':
            logger.info(full_message)
        elif level == 'debug':
            logger.debug(full_message)
        else:
            raise ValueError("Unknown log level: {}".format(level))

    def generate_data(self):
        """ Draw a fresh dataset and split it into training and testing data
        """
        config = self.config
        examples = config.data_generator(
            config.n_samples, config.noise / 100.,
            random_state=self.random_state)
        shuffle(examples, random_state=self.random_state)
        self.train_data, self.test_data = split(
            examples, config.perc_train_data)

        msg = "Generated {} dataset: {} training, {} testing examples"
        logger.info(msg.format(config.dataset, len(self.train_data),
                               len(self.test_data)))

    def construct_input(self, x, y):
        return construct_input(x, y, self.config.input_ids)

    def _samples(self, examples):
        return [(self.construct_input(example.x, example.y), example.label)
                for example in examples]

    def get_loss(self, examples):
        return mean_loss(self.network, self._samples(examples),
                         error_func=self.error_func)

    def reset(self):
        """ Build a new network from the configuration and start counting
        iterations from zero
        """
        config = self.config
        self.iteration = 0
        self.network = build_network(
            shape=config.shape,
            activation=config.activation_function,
            output_activation=config.output_activation,
            regularization=config.regularization_function,
            input_ids=config.input_ids,
            init_zero=config.init_zero,
            random_state=self.random_state)

        self.loss_train = self.get_loss(self.train_data)
        self.loss_test = self.get_loss(self.test_data)
        self.loss_history = [
            StepResult(self.iteration, self.loss_train, self.loss_test)]

        self._log_with_iter(
            "Reset network {}; train loss {:.4f}, test loss {:.4f}".format(
                config.shape, self.loss_train, self.loss_test))

    def one_step(self):
        """ Run one pass over the training data, updating the weights after
        every `batch_size` samples

        Returns
        -------
        result: StepResult
        """
        config = self.config
        self.iteration += 1

        for i, example in enumerate(self.train_data):
            inputs = self.construct_input(example.x, example.y)
            forward_prop(self.network, inputs)
            back_prop(self.network, example.label, self.error_func)
            if (i + 1) % config.batch_size == 0:
                update_weights(self.network, config.learning_rate,
                               config.regularization_rate)

        self.loss_train = self.get_loss(self.train_data)
        self.loss_test = self.get_loss(self.test_data)

        result = StepResult(self.iteration, self.loss_train, self.loss_test)
        self.loss_history.append(result)

        self._log_with_iter(
            "Train loss {:.4f}, test loss {:.4f}".format(
                self.loss_train, self.loss_test), level='debug')

        return result

    def train(self, n_steps, on_iterate=None):
        """ Run `n_steps` calls of :meth:`one_step`

        Parameters
        ----------
        n_steps: int

        on_iterate: list of callables, default=None
            Each is called as :code:`func(trainer, result)` after every step.
            A callback may raise :class:`bpnn.core.exception.StopTraining`
            to end training early.

        Returns
        -------
        result: StepResult
            The result of the last step run.
        """
        on_iterate = on_iterate or []
        result = self.loss_history[-1]

        for _ in range(n_steps):
            result = self.one_step()
            try:
                for func in on_iterate:
                    func(self, result)
            except StopTraining as e:
                self._log_with_iter("Stopping early: {}".format(e))
                break

        return result

    def predict(self, x, y):
        """ The network output at the point `(x, y)`
        """
        return forward_prop(self.network, self.construct_input(x, y))
