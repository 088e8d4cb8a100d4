from collections import OrderedDict

from . import classify, regress


CLASSIFICATION_DATASETS = OrderedDict([
    ('circle', classify.classify_circle),
    ('xor', classify.classify_xor),
    ('gauss', classify.classify_two_gauss),
    ('spiral', classify.classify_spiral),
])

REGRESSION_DATASETS = OrderedDict([
    ('reg-plane', regress.regress_plane),
    ('reg-gauss', regress.regress_gaussian),
])
