""" This module provides a few simple `on_iterate` functions that can be
used in the Trainer.train member function
"""
import logging

from bpnn.core.exception import StopTraining


logger = logging.getLogger('on_iterate')


def collect_losses(loss_list):
    """ Collects the (training, testing) losses from the steps. Losses are
    appended to :code:`loss_list` and so an empty list should be provided.
    Usage::

        losses = []
        trainer.train(100, on_iterate=[collect_losses(losses)])
    """

    def on_iterate(trainer, result):
        loss_list.append((result.loss_train, result.loss_test))

    return on_iterate


def log_progress(every=1):
    """ Log the losses every `every` steps
    """
    if int(every) != every or every < 1:
        msg = "`every` must be a positive integer, got {}"
        raise ValueError(msg.format(every))

    def on_iterate(trainer, result):
        if result.iteration % every == 0:
            msg = "Step {:d}: train loss {:.5f}, test loss {:.5f}"
            logger.info(msg.format(
                result.iteration, result.loss_train, result.loss_test))

    return on_iterate


def stop_when_below(threshold):
    """ End training once the training loss drops below `threshold`
    """

    def on_iterate(trainer, result):
        if result.loss_train < threshold:
            msg = "training loss {:.5f} below {}"
            raise StopTraining(msg.format(result.loss_train, threshold))

    return on_iterate
