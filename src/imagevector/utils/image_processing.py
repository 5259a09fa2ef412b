"""Image processing utilities.

This module reads raster images into flat RGB arrays that the row vector
functions in :mod:`imagevector.data.row_vector` consume.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

import numpy as np
from PIL import Image

__all__: Tuple[str, ...] = ("read_image_array", "format_image_array", "print_image_array")


def read_image_array(image_path: str | Path, flatten: bool = True) -> np.ndarray:
    """Load an image and return the RGB values of each pixel.

    Parameters
    ----------
    image_path : str or pathlib.Path
        Path to the image file to read.
    flatten : bool, default=True
        If *True*, the returned array has shape ``(height * width, 3)``. Pixels
        are ordered row by row, left to right, and the three columns hold the
        *R*, *G* and *B* channel values. If *False*, the array keeps the
        spatial structure and has shape ``(height, width, 3)``.

    Returns
    -------
    numpy.ndarray
        A ``np.uint8`` array with values in [0, 255].

    Raises
    ------
    FileNotFoundError
        If *image_path* does not exist.
    ValueError
        If the file exists but Pillow cannot decode it, including files that
        are truncated.

    Notes
    -----
    Grayscale and palette images are converted to RGB. 16-bit grayscale
    images are scaled down to 8 bits (the high byte is kept) rather than
    clipped. Alpha channels are dropped, not composited.
    """

    img_path = Path(image_path)
    if not img_path.exists():
        raise FileNotFoundError(f"Image file not found: {img_path}")

    try:
        with Image.open(img_path) as img:
            if img.mode == "I" or img.mode.startswith("I;16"):
                rgb_array = _wide_gray_to_rgb(np.asarray(img))
            else:
                img = img.convert("RGB")
                rgb_array = np.asarray(img, dtype=np.uint8)  # (H, W, 3)
    except OSError as e:
        # also covers truncated files, which only fail once pixel data is loaded
        raise ValueError(f"Cannot decode image {img_path}: {e}") from e

    if flatten:
        rgb_array = rgb_array.reshape(-1, 3)  # (H*W, 3)

    return rgb_array


def _wide_gray_to_rgb(gray: np.ndarray) -> np.ndarray:
    gray = (gray.astype(np.int64) >> 8).clip(0, 255).astype(np.uint8)
    return np.stack([gray, gray, gray], axis=-1)


def format_image_array(image_array: np.ndarray) -> List[str]:
    """Return one ``"R G B "`` line per pixel, each value followed by a space."""
    return ["".join(f"{int(v)} " for v in pixel) for pixel in np.asarray(image_array).reshape(-1, 3)]


def print_image_array(image_array: np.ndarray) -> None:
    """Print the R, G and B values of every pixel, one pixel per line."""
    for line in format_image_array(image_array):
        print(line)
