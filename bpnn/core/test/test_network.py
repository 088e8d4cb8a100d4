import unittest

import numpy as np

from bpnn.core.activation import Activation
from bpnn.core.exception import ConfigurationError
from bpnn.core.network import DEFAULT_BIAS, build_network
from bpnn.core.regularization import Regularization


def make_network(shape=(3, 4, 2, 1), seed=1234, **kwargs):
    input_ids = kwargs.pop('input_ids', ['x', 'y', 'xTimesY'][:shape[0]])
    return build_network(
        shape=shape,
        activation=kwargs.pop('activation', Activation.TANH),
        output_activation=kwargs.pop('output_activation', Activation.LINEAR),
        regularization=kwargs.pop('regularization', None),
        input_ids=input_ids,
        random_state=np.random.RandomState(seed),
        **kwargs)


class TestBuildNetwork(unittest.TestCase):

    def test_layers_and_activations(self):

        network = make_network()

        self.assertEqual(network.shape, [3, 4, 2, 1])
        self.assertEqual(len(network.nodes), 10)
        self.assertEqual(len(network.links), 3*4 + 4*2 + 2*1)

        for node in network.input_nodes:
            self.assertIs(node.activation, Activation.LINEAR)
            self.assertEqual(node.input_links, [])

        for layer in (1, 2):
            for node in network.layer_nodes(layer):
                self.assertIs(node.activation, Activation.TANH)

        self.assertIs(network.output_node.activation, Activation.LINEAR)
        self.assertEqual(network.output_node.output_links, [])

    def test_input_ids_tag_input_nodes(self):

        network = make_network(input_ids=['y', 'x', 'sinX'])

        features = [node.feature for node in network.input_nodes]
        self.assertEqual(features, ['y', 'x', 'sinX'])
        self.assertEqual(network.input_position('sinX'), 2)

        with self.assertRaises(KeyError):
            network.input_position('ySquared')

    def test_node_ids_are_unique(self):

        network = make_network()

        ids = [node.id for node in network.nodes]
        self.assertEqual(len(ids), len(set(ids)))
        self.assertEqual(network.output_node.id, '3-0')

    def test_full_connectivity_and_shared_links(self):

        network = make_network()

        for layer in range(network.n_layers - 1):
            n_next = len(network.layers[layer + 1])
            for node in network.layer_nodes(layer):
                self.assertEqual(len(node.output_links), n_next)
                dests = [network.link(i).dest for i in node.output_links]
                self.assertEqual(dests, network.layers[layer + 1])

        # Both endpoints refer to the very same link object
        for link in network.links:
            self.assertIn(link.index, network.node(link.source).output_links)
            self.assertIn(link.index, network.node(link.dest).input_links)
            self.assertIs(network.link(link.index), link)

    def test_link_order_is_source_major(self):

        network = make_network(shape=(2, 3, 1), input_ids=['x', 'y'])

        pairs = [(s, d) for s, d, _ in network.link_triples()]
        expected = [
            ('0-0', '1-0'), ('0-0', '1-1'), ('0-0', '1-2'),
            ('0-1', '1-0'), ('0-1', '1-1'), ('0-1', '1-2'),
            ('1-0', '2-0'), ('1-1', '2-0'), ('1-2', '2-0'),
        ]
        self.assertEqual(pairs, expected)
        self.assertEqual(network.get_output_weights(),
                         [link.weight for link in network.links])

    def test_initial_values(self):

        network = make_network()

        for link in network.links:
            self.assertGreaterEqual(link.weight, -0.5)
            self.assertLessEqual(link.weight, 0.5)
            self.assertFalse(link.is_dead)

        for node in network.nodes:
            self.assertEqual(node.bias, DEFAULT_BIAS)

    def test_zero_init(self):

        network = make_network(init_zero=True)

        self.assertTrue(all(link.weight == 0 for link in network.links))
        self.assertTrue(all(node.bias == 0 for node in network.nodes))

    def test_rebuild_with_same_seed_is_identical(self):

        network1 = make_network(seed=42)
        network2 = make_network(seed=42)
        network3 = make_network(seed=43)

        self.assertEqual(network1.link_triples(), network2.link_triples())
        self.assertEqual(network1.node_states(), network2.node_states())
        self.assertNotEqual(network1.get_output_weights(),
                            network3.get_output_weights())

    def test_regularization_attached_to_links(self):

        network = make_network(regularization='l1')

        for link in network.links:
            self.assertIs(link.regularization, Regularization.L1)

    def test_activation_names_accepted(self):

        network = make_network(activation='relu', output_activation='tanh')

        self.assertIs(network.node(network.layers[1][0]).activation,
                      Activation.RELU)
        self.assertIs(network.output_node.activation, Activation.TANH)

    def test_shape_input_mismatch(self):

        with self.assertRaises(ConfigurationError):
            make_network(shape=(3, 2, 1), input_ids=['x', 'y'])

    def test_invalid_shapes(self):

        for shape in [(2,), (2, 0, 1), (2, 3, 2), (2, 1.5, 1)]:
            with self.assertRaises(ConfigurationError):
                make_network(shape=shape, input_ids=['x', 'y'])

    def test_duplicate_input_ids(self):

        with self.assertRaises(ConfigurationError):
            make_network(shape=(2, 1), input_ids=['x', 'x'])


if __name__ == '__main__':
    unittest.main()
