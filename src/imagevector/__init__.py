"""
Image row vector package.

Reads the RGB values of an image and derives a signed per-pixel
"row vector" from the R/G/B ratio of every pixel.
"""

from .utils.image_processing import read_image_array, print_image_array
from .data.row_vector import (
    image_array_to_row_vector,
    write_row_vector,
    read_row_vector,
)

__all__ = [
    'read_image_array',
    'print_image_array',
    'image_array_to_row_vector',
    'write_row_vector',
    'read_row_vector',
]
