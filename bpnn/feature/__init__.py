# flake8: noqa

from .input_feature import (
    construct_input,
    INPUT_FEATURES,
    InputFeature,
    validate_input_ids,
)
