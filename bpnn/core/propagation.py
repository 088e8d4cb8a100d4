""" Forward evaluation, backpropagation and the mini-batch weight update.

A training step for one sample is :func:`forward_prop` followed by
:func:`back_prop`; after every `batch_size` samples the driver calls
:func:`update_weights`. The functions keep no state of their own, everything
is read from and written to the network passed in.
"""
import logging

from bpnn.core.error import ErrorFunction
from bpnn.core.exception import (
    ConfigurationError, DimensionError, EmptyInputError)


_logger_name = __name__.rsplit('.', 1)[-1]
logger = logging.getLogger(_logger_name)


def forward_prop(network, inputs):
    """ Evaluate the network on a single input vector

    Parameters
    ----------
    network: Network
        The network to evaluate. Every node's `total_input`, `output` and
        `output_der` are overwritten.

    inputs: sequence of float
        One value per input-layer node, in input-layer order.

    Returns
    -------
    output: float
        The output of the single output node.

    """
    input_layer = network.input_nodes

    if len(inputs) != len(input_layer):
        msg = "Input vector has length {} but the input layer has {} nodes"
        raise DimensionError(msg.format(len(inputs), len(input_layer)))

    for node, value in zip(input_layer, inputs):
        node.output = float(value)

    nodes = network.nodes
    links = network.links

    for layer in network.layers[1:]:
        for node_index in layer:
            node = nodes[node_index]
            total_input = node.bias
            for link_index in node.input_links:
                link = links[link_index]
                if link.is_dead:
                    continue
                total_input += link.weight * nodes[link.source].output
            node.total_input = total_input
            node.output = node.activation.output(total_input)
            node.output_der = node.activation.der(total_input)

    return network.output_node.output


def back_prop(network, target, error_func=ErrorFunction.SQUARE):
    """ Propagate the error of the most recent forward pass back through the
    network, accumulating the gradients of every bias and weight

    Must be called right after :func:`forward_prop` on the same sample.

    Parameters
    ----------
    network: Network

    target: float
        The label of the sample just evaluated.

    error_func: ErrorFunction, default=ErrorFunction.SQUARE

    """
    nodes = network.nodes
    links = network.links

    output_node = network.output_node
    output_node.input_der = (
        error_func.der(output_node.output, target) * output_node.output_der)

    # Walk from the output layer down to the first hidden layer
    for layer_index in range(network.n_layers - 1, 0, -1):
        layer = network.layers[layer_index]

        for node_index in layer:
            node = nodes[node_index]

            if layer_index < network.n_layers - 1:
                total = 0.
                for link_index in node.output_links:
                    link = links[link_index]
                    if link.is_dead:
                        continue
                    total += link.weight * nodes[link.dest].input_der
                node.input_der = node.output_der * total

            node.acc_input_der += node.input_der
            node.num_accumulated_ders += 1

        # Gradient of every weight feeding this layer
        for node_index in layer:
            node = nodes[node_index]
            for link_index in node.input_links:
                link = links[link_index]
                if link.is_dead:
                    continue
                link.error_der = nodes[link.source].output * node.input_der
                link.acc_error_der += link.error_der
                link.num_accumulated_ders += 1


def update_weights(network, learning_rate, regularization_rate):
    """ Apply the accumulated gradients (averaged over the number of
    accumulated samples) and the weight penalty, then reset the accumulators

    Parameters
    ----------
    network: Network

    learning_rate: float
        Positive gradient descent step size.

    regularization_rate: float
        Non-negative multiplier of the regularization derivative. Biases
        are never regularized.

    """
    if learning_rate <= 0:
        msg = "`learning_rate` must be positive, got {}"
        raise ConfigurationError(msg.format(learning_rate))

    if regularization_rate < 0:
        msg = "`regularization_rate` must be non-negative, got {}"
        raise ConfigurationError(msg.format(regularization_rate))

    nodes = network.nodes
    links = network.links

    for layer in network.layers[1:]:
        for node_index in layer:
            node = nodes[node_index]

            if node.num_accumulated_ders > 0:
                node.bias -= (learning_rate * node.acc_input_der /
                              node.num_accumulated_ders)
                node.acc_input_der = 0.
                node.num_accumulated_ders = 0

            for link_index in node.input_links:
                link = links[link_index]
                if link.num_accumulated_ders == 0:
                    continue

                # The penalty is taken at the weight before this update
                if link.regularization is not None and not link.is_dead:
                    regularization_der = link.regularization.der(link.weight)
                else:
                    regularization_der = 0.

                link.weight -= (learning_rate * link.acc_error_der /
                                link.num_accumulated_ders)
                link.weight -= (learning_rate * regularization_rate *
                                regularization_der)

                link.acc_error_der = 0.
                link.num_accumulated_ders = 0


def reset_accumulators(network):
    """ Discard any gradients accumulated since the last weight update
    """
    for node in network.nodes:
        node.acc_input_der = 0.
        node.num_accumulated_ders = 0

    for link in network.links:
        link.acc_error_der = 0.
        link.num_accumulated_ders = 0


def mean_loss(network, samples, error_func=ErrorFunction.SQUARE):
    """ Average error of the network over a collection of samples

    Only the transient per-sample state of the network is touched; weights
    and biases are left as they are.

    Parameters
    ----------
    network: Network

    samples: sequence of (inputs, label)
        Each item pairs an input vector with its target label.

    error_func: ErrorFunction, default=ErrorFunction.SQUARE

    Returns
    -------
    loss: float

    """
    if len(samples) == 0:
        raise EmptyInputError("Cannot compute the loss of zero samples")

    loss = 0.
    for inputs, label in samples:
        output = forward_prop(network, inputs)
        loss += error_func.error(output, label)

    return loss / len(samples)
