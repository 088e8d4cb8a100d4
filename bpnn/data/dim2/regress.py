""" Continuous targets over the plane, roughly in [-1, 1].
"""
import math

import numpy as np

from bpnn.data.example import Example2D


RADIUS = 6

# (center x, center y, sign)
GAUSSIANS = (
    (-4, 2.5, 1), (0, 2.5, -1), (4, 2.5, 1),
    (-4, -2.5, -1), (0, -2.5, 1), (4, -2.5, -1),
)


def _sample(n_samples, noise, rs, get_label):
    rs = rs if rs is not None else np.random.RandomState()
    examples = []
    for _ in range(n_samples):
        x = rs.uniform(-RADIUS, RADIUS)
        y = rs.uniform(-RADIUS, RADIUS)
        noise_x = rs.uniform(-RADIUS, RADIUS) * noise
        noise_y = rs.uniform(-RADIUS, RADIUS) * noise
        label = get_label(x + noise_x, y + noise_y)
        examples.append(Example2D(float(x), float(y), float(label)))
    return examples


def regress_plane(n_samples, noise=0., random_state=None):
    """
    The plane label = (x + y) / 10, sampled on [-6, 6]^2.
    """
    def get_label(x, y):
        return (x + y) / 10.

    return _sample(n_samples, noise, random_state, get_label)


def regress_gaussian(n_samples, noise=0., random_state=None):
    """
    Six signed bumps; each point takes the value of the bump with the largest
    magnitude, which decays linearly to zero at distance 2 from its center.
    """
    def get_label(x, y):
        label = 0.
        for cx, cy, sign in GAUSSIANS:
            dist = math.hypot(x - cx, y - cy)
            new_label = sign * min(1., max(0., 1. - dist / 2.))
            if abs(new_label) > abs(label):
                label = new_label
        return label

    return _sample(n_samples, noise, random_state, get_label)
