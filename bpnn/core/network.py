""" The layered graph of nodes and links that makes up a network.

Nodes and links live in flat lists owned by the :class:`Network`. A link
refers to its endpoints by node index and a node refers to its incoming and
outgoing links by link index, so no object owns another.
"""
import logging

import numpy

from bpnn.core.activation import Activation
from bpnn.core.exception import ConfigurationError
from bpnn.core.regularization import Regularization


_logger_name = __name__.rsplit('.', 1)[-1]
logger = logging.getLogger(_logger_name)

DEFAULT_BIAS = 0.1
INIT_WEIGHT_RANGE = (-0.5, 0.5)
NODE_ID_FORMAT = "{:d}-{:d}"


class Node:
    """ A computational unit in one layer of the network
    """
    def __init__(self, index, node_id, layer, activation, bias=DEFAULT_BIAS,
                 feature=None):
        self.index = index
        self.id = node_id
        self.layer = layer
        self.activation = activation
        self.bias = bias

        # Only set for nodes in the input layer
        self.feature = feature

        self.input_links = []
        self.output_links = []

        # Transient state, filled in by forward and backward passes
        self.total_input = 0.
        self.output = 0.
        self.output_der = 0.
        self.input_der = 0.
        self.acc_input_der = 0.
        self.num_accumulated_ders = 0

    def __repr__(self):
        return "Node(id={}, bias={:.3f}, output={:.3f})".format(
            self.id, self.bias, self.output)


class Link:
    """ A directed, weighted edge between the nodes at indices `source` and
    `dest` of the owning network
    """
    def __init__(self, index, source, dest, weight, regularization=None):
        self.index = index
        self.source = source
        self.dest = dest
        self.weight = weight
        self.regularization = regularization
        self.is_dead = False

        self.error_der = 0.
        self.acc_error_der = 0.
        self.num_accumulated_ders = 0

    def __repr__(self):
        status = "D" if self.is_dead else "A"
        return "Link({}->{}, w={:.3f}, {})".format(
            self.source, self.dest, self.weight, status)


class Network:
    """ A fully connected feedforward network stored as an arena of nodes
    and links. Use :func:`build_network` to create one.
    """
    def __init__(self, input_ids):
        self.nodes = []
        self.links = []
        self.layers = []
        self.input_ids = tuple(input_ids)

    def __repr__(self):
        return "<Network shape={}>".format(self.shape)

    @property
    def shape(self):
        return [len(layer) for layer in self.layers]

    @property
    def n_layers(self):
        return len(self.layers)

    def node(self, index):
        return self.nodes[index]

    def link(self, index):
        return self.links[index]

    def layer_nodes(self, layer):
        """ The node objects in layer number `layer`, in position order
        """
        return [self.nodes[index] for index in self.layers[layer]]

    @property
    def input_nodes(self):
        return self.layer_nodes(0)

    @property
    def output_node(self):
        return self.nodes[self.layers[-1][0]]

    def input_position(self, feature_id):
        """ The input-layer position fed by the feature `feature_id`
        """
        try:
            return self.input_ids.index(feature_id)
        except ValueError:
            msg = "Feature `{}` is not an input of this network"
            raise KeyError(msg.format(feature_id))

    def iterate_links(self):
        """ Yield the links in creation order, i.e., layer-major, then by
        source node, then by destination node
        """
        for layer in self.layers[:-1]:
            for node_index in layer:
                for link_index in self.nodes[node_index].output_links:
                    yield self.links[link_index]

    def link_triples(self):
        """ List of :code:`(source_id, dest_id, weight)` for every link
        """
        return [
            (self.nodes[link.source].id, self.nodes[link.dest].id, link.weight)
            for link in self.iterate_links()
        ]

    def node_states(self):
        """ List of :code:`(id, bias, output)` for every node in layer order
        """
        return [
            (node.id, node.bias, node.output)
            for layer in range(self.n_layers)
            for node in self.layer_nodes(layer)
        ]

    def get_output_weights(self):
        """ Flat list of all link weights in creation order
        """
        return [link.weight for link in self.iterate_links()]


def _validate_shape(shape, input_ids):

    if len(shape) < 2:
        msg = "`shape` must have at least an input and output layer, got {}"
        raise ConfigurationError(msg.format(list(shape)))

    for i, size in enumerate(shape):
        if not isinstance(size, (int, numpy.integer)) or size < 1:
            msg = "shape[{}] = {} is not a positive integer"
            raise ConfigurationError(msg.format(i, size))

    if shape[0] != len(input_ids):
        msg = "shape[0] ({}) doesn't match the number of input ids ({})"
        raise ConfigurationError(msg.format(shape[0], len(input_ids)))

    if shape[-1] != 1:
        msg = "The output layer must have exactly one node, got {}"
        raise ConfigurationError(msg.format(shape[-1]))

    if len(set(input_ids)) != len(input_ids):
        msg = "`input_ids` included non-unique ids: {}"
        raise ConfigurationError(msg.format(list(input_ids)))


def build_network(shape, activation, output_activation, regularization,
                  input_ids, init_zero=False, random_state=None):
    """ Build a fully connected feedforward network

    Parameters
    ----------
    shape: sequence of int
        The number of nodes in each layer, including the input layer and the
        single-node output layer.

    activation: Activation
        The activation used by every hidden layer.

    output_activation: Activation
        The activation used by the output node.

    regularization: Regularization or None
        The weight penalty attached to every link.

    input_ids: sequence of str
        The feature identifiers feeding the input layer, in order.

    init_zero: bool, default=False
        If True, all weights and biases start at zero.

    random_state: numpy.random.RandomState, default=None
        Provide a RandomState object for reproducible weights.

    Returns
    -------
    network: Network

    """
    shape = list(shape)
    input_ids = list(input_ids)
    _validate_shape(shape, input_ids)

    if not isinstance(activation, Activation):
        activation = Activation.from_name(activation)
    if not isinstance(output_activation, Activation):
        output_activation = Activation.from_name(output_activation)

    if regularization is not None and \
            not isinstance(regularization, Regularization):
        regularization = Regularization.from_name(regularization)

    random_state = (random_state if random_state is not None
                    else numpy.random.RandomState())

    network = Network(input_ids)
    n_layers = len(shape)

    for layer_index, n_nodes in enumerate(shape):
        if layer_index == 0:
            layer_activation = Activation.LINEAR
        elif layer_index == n_layers - 1:
            layer_activation = output_activation
        else:
            layer_activation = activation

        layer = []
        for position in range(n_nodes):
            node = Node(
                index=len(network.nodes),
                node_id=NODE_ID_FORMAT.format(layer_index, position),
                layer=layer_index,
                activation=layer_activation,
                bias=0. if init_zero else DEFAULT_BIAS,
                feature=input_ids[position] if layer_index == 0 else None)
            network.nodes.append(node)
            layer.append(node.index)

        network.layers.append(layer)

        if layer_index == 0:
            continue

        # Fully connect the previous layer to this one
        for source_index in network.layers[layer_index - 1]:
            source = network.nodes[source_index]
            for dest_index in layer:
                dest = network.nodes[dest_index]
                if init_zero:
                    weight = 0.
                else:
                    weight = float(random_state.uniform(*INIT_WEIGHT_RANGE))
                link = Link(index=len(network.links), source=source_index,
                            dest=dest_index, weight=weight,
                            regularization=regularization)
                network.links.append(link)
                source.output_links.append(link.index)
                dest.input_links.append(link.index)

    logger.debug("Built network with shape {} and {} links".format(
        shape, len(network.links)))

    return network
