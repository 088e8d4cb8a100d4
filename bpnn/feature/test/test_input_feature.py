import math
import unittest

from bpnn.core.exception import ConfigurationError
from bpnn.feature.input_feature import (
    INPUT_FEATURES, construct_input, validate_input_ids)


class TestInputFeature(unittest.TestCase):

    def test_registry_order(self):

        self.assertEqual(
            list(INPUT_FEATURES),
            ['x', 'y', 'xSquared', 'ySquared', 'xTimesY', 'sinX', 'sinY'])

    def test_construct_input_follows_id_order(self):

        x, y = 1.5, -2.

        inputs = construct_input(x, y, ['sinY', 'xTimesY', 'x'])

        self.assertEqual(len(inputs), 3)
        self.assertAlmostEqual(inputs[0], math.sin(y))
        self.assertAlmostEqual(inputs[1], x * y)
        self.assertEqual(inputs[2], x)

    def test_all_features(self):

        inputs = construct_input(2., 3., list(INPUT_FEATURES))

        expected = [2., 3., 4., 9., 6., math.sin(2.), math.sin(3.)]
        for value, expected_value in zip(inputs, expected):
            self.assertAlmostEqual(value, expected_value)

    def test_unknown_feature(self):

        with self.assertRaises(ConfigurationError):
            construct_input(0., 0., ['x', 'cosX'])

    def test_validate_input_ids(self):

        validate_input_ids(['x', 'y'])

        for input_ids in [[], ['x', 'x'], ['z']]:
            with self.assertRaises(ConfigurationError):
                validate_input_ids(input_ids)


if __name__ == '__main__':
    unittest.main()
