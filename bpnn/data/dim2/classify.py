""" Two-class point clouds in the plane. Labels are 1 and -1.
"""
import math

import numpy as np

from bpnn.data.example import Example2D


def _random_state(rs):
    return rs if rs is not None else np.random.RandomState()


def _class_sizes(n_samples):
    # The positive class takes the extra point when n_samples is odd
    return n_samples - n_samples // 2, n_samples // 2


def classify_two_gauss(n_samples, noise=0., random_state=None):
    """
    Two Gaussian blobs centered at (2, 2) (label 1) and (-2, -2) (label -1).

    Parameters
    ----------
    n_samples: int
        Total number of points, split evenly between the blobs (the
        positive blob gets the extra point when odd).

    noise: float, default=0
        In [0, 0.5]. Scales the blob variance linearly from 0.5 to 4.

    random_state: numpy.random.RandomState
        RandomState object for reproducible results.

    Returns
    -------
    examples: list of Example2D
    """
    rs = _random_state(random_state)
    variance = 0.5 + noise * (4 - 0.5) / 0.5
    std = math.sqrt(variance)

    examples = []
    blobs = ((2, 2, 1), (-2, -2, -1))
    for (cx, cy, label), n in zip(blobs, _class_sizes(n_samples)):
        for _ in range(n):
            x = cx + std * rs.randn()
            y = cy + std * rs.randn()
            examples.append(Example2D(float(x), float(y), label))

    return examples


def classify_circle(n_samples, noise=0., random_state=None, radius=5.):
    """
    A disc of positive points surrounded by a ring of negative points.
    The label of a point is decided after the noise is applied, so noisy
    points may land on the wrong side.
    """
    rs = _random_state(random_state)

    def get_label(x, y):
        return 1 if math.hypot(x, y) < radius * 0.5 else -1

    examples = []
    rings = ((0, radius * 0.5), (radius * 0.7, radius))
    for (r_min, r_max), n in zip(rings, _class_sizes(n_samples)):
        for _ in range(n):
            r = rs.uniform(r_min, r_max)
            angle = rs.uniform(0, 2 * math.pi)
            x = r * math.sin(angle)
            y = r * math.cos(angle)
            noise_x = rs.uniform(-radius, radius) * noise
            noise_y = rs.uniform(-radius, radius) * noise
            label = get_label(x + noise_x, y + noise_y)
            examples.append(Example2D(x, y, label))

    return examples


def classify_xor(n_samples, noise=0., random_state=None, padding=0.3):
    """
    Points in [-5, 5]^2, pushed `padding` away from the axes, labelled by the
    sign of x * y.
    """
    rs = _random_state(random_state)

    def get_label(x, y):
        return 1 if x * y >= 0 else -1

    examples = []
    for _ in range(n_samples):
        x = rs.uniform(-5, 5)
        x += padding if x > 0 else -padding
        y = rs.uniform(-5, 5)
        y += padding if y > 0 else -padding
        noise_x = rs.uniform(-5, 5) * noise
        noise_y = rs.uniform(-5, 5) * noise
        label = get_label(x + noise_x, y + noise_y)
        examples.append(Example2D(float(x), float(y), label))

    return examples


def classify_spiral(n_samples, noise=0., random_state=None):
    """
    Two interleaved spiral arms, the second rotated by pi.
    """
    rs = _random_state(random_state)

    examples = []
    arms = ((0, 1), (math.pi, -1))
    for (delta_t, label), n in zip(arms, _class_sizes(n_samples)):
        for i in range(n):
            r = i / n * 5
            t = 1.75 * i / n * 2 * math.pi + delta_t
            x = r * math.sin(t) + rs.uniform(-1, 1) * noise
            y = r * math.cos(t) + rs.uniform(-1, 1) * noise
            examples.append(Example2D(float(x), float(y), label))

    return examples
