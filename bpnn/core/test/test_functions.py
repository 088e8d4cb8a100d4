import math
import unittest

from bpnn.core.activation import Activation
from bpnn.core.error import ErrorFunction
from bpnn.core.exception import ConfigurationError
from bpnn.core.regularization import Regularization


class TestActivation(unittest.TestCase):

    def test_linear(self):
        self.assertEqual(Activation.LINEAR.output(-2.5), -2.5)
        self.assertEqual(Activation.LINEAR.der(-2.5), 1.0)

    def test_tanh(self):
        x = 0.7
        self.assertAlmostEqual(Activation.TANH.output(x), math.tanh(x))
        self.assertAlmostEqual(Activation.TANH.der(x), 1 - math.tanh(x)**2)
        self.assertEqual(Activation.TANH.output(0.), 0.)

    def test_sigmoid(self):
        self.assertEqual(Activation.SIGMOID.output(0.), 0.5)
        self.assertEqual(Activation.SIGMOID.der(0.), 0.25)

        # Large magnitudes should neither overflow nor leave (0, 1)
        self.assertAlmostEqual(Activation.SIGMOID.output(1000.), 1.0)
        self.assertAlmostEqual(Activation.SIGMOID.output(-1000.), 0.0)
        self.assertAlmostEqual(Activation.SIGMOID.der(-1000.), 0.0)

    def test_relu(self):
        self.assertEqual(Activation.RELU.output(-3.), 0.)
        self.assertEqual(Activation.RELU.output(3.), 3.)
        self.assertEqual(Activation.RELU.der(0.), 0.)
        self.assertEqual(Activation.RELU.der(-1.), 0.)
        self.assertEqual(Activation.RELU.der(1e-9), 1.)

    def test_derivatives_match_finite_differences(self):
        eps = 1e-6
        for activation in Activation:
            for x in (-1.3, -0.2, 0.4, 2.1):
                numeric = (activation.output(x + eps) -
                           activation.output(x - eps)) / (2 * eps)
                self.assertAlmostEqual(activation.der(x), numeric, places=5)

    def test_from_name(self):
        self.assertIs(Activation.from_name('ReLU'), Activation.RELU)
        self.assertIs(Activation.from_name('tanh'), Activation.TANH)

        with self.assertRaises(ConfigurationError):
            Activation.from_name('softplus')


class TestErrorFunction(unittest.TestCase):

    def test_square(self):
        self.assertEqual(ErrorFunction.SQUARE.error(3., 1.), 2.)
        self.assertEqual(ErrorFunction.SQUARE.der(3., 1.), 2.)
        self.assertEqual(ErrorFunction.SQUARE.error(-1., -1.), 0.)


class TestRegularization(unittest.TestCase):

    def test_l1(self):
        self.assertEqual(Regularization.L1.output(-0.4), 0.4)
        self.assertEqual(Regularization.L1.der(-0.4), -1.)
        self.assertEqual(Regularization.L1.der(0.4), 1.)
        self.assertEqual(Regularization.L1.der(0.), 0.)

    def test_l2(self):
        self.assertAlmostEqual(Regularization.L2.output(-0.4), 0.08)
        self.assertEqual(Regularization.L2.der(-0.4), -0.4)

    def test_from_name(self):
        self.assertIsNone(Regularization.from_name('none'))
        self.assertIsNone(Regularization.from_name(None))
        self.assertIs(Regularization.from_name('L2'), Regularization.L2)

        with self.assertRaises(ConfigurationError):
            Regularization.from_name('elastic')


if __name__ == '__main__':
    unittest.main()
