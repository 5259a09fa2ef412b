"""Row vector derivation and image discovery."""

from .row_vector import (
    SCALE_FACTOR,
    DEFAULT_OUTPUT,
    one_if_zero,
    rgb_ratios,
    random_signs,
    image_array_to_row_vector,
    write_row_vector,
    read_row_vector,
)
from .loaders import IMAGE_EXTENSIONS, get_image_set

__all__ = [
    "SCALE_FACTOR",
    "DEFAULT_OUTPUT",
    "one_if_zero",
    "rgb_ratios",
    "random_signs",
    "image_array_to_row_vector",
    "write_row_vector",
    "read_row_vector",
    "IMAGE_EXTENSIONS",
    "get_image_set",
]
