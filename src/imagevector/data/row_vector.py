"""
Functions for turning an RGB pixel array into a signed row vector.

Every pixel contributes one element: ``R / G / B`` scaled by
``SCALE_FACTOR``, with the sign flipped at random.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import numpy as np

# Multiplier applied to every ratio so the values are not too small.
SCALE_FACTOR = 10

DEFAULT_OUTPUT = "vector.txt"


def one_if_zero(image_array):
    """
    Replace zero channel values with 1.

    Args:
        image_array (np.ndarray): RGB values, any shape

    Returns:
        np.ndarray: Copy of *image_array* without zeros
    """
    image_array = np.array(image_array, copy=True)
    image_array[image_array == 0] = 1
    return image_array


def rgb_ratios(image_array):
    """
    Compute ``R / G / B * SCALE_FACTOR`` for every pixel.

    Args:
        image_array (np.ndarray): Pixel array of shape (n_pixels, 3)

    Returns:
        np.ndarray: Ratios, shape (n_pixels,), dtype float64

    Raises:
        ValueError: If the array is not shaped (n_pixels, 3)
    """
    image_array = np.asarray(image_array)
    if image_array.ndim != 2 or image_array.shape[1] != 3:
        raise ValueError(f"Expected a pixel array of shape (n_pixels, 3), got {image_array.shape}")

    rgb = one_if_zero(image_array).astype(np.float64)
    return rgb[:, 0] / rgb[:, 1] / rgb[:, 2] * SCALE_FACTOR


def random_signs(n: int, rng: np.random.Generator) -> np.ndarray:
    """Return *n* values of +1.0 or -1.0; a draw of 0 means negative."""
    draws = rng.integers(0, 2, size=n)
    return np.where(draws == 0, -1.0, 1.0)


def image_array_to_row_vector(
    image_array,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
) -> np.ndarray:
    """
    Build the signed row vector of an RGB pixel array.

    Args:
        image_array (np.ndarray): Pixel array of shape (n_pixels, 3)
        rng (np.random.Generator, optional): Generator used for the signs.
            Takes precedence over *seed*.
        seed (int, optional): Seed for a fresh generator when *rng* is None

    Returns:
        np.ndarray: One signed value per pixel
    """
    if rng is None:
        rng = np.random.default_rng(seed)

    ratios = rgb_ratios(image_array)
    return ratios * random_signs(len(ratios), rng)


def write_row_vector(row_vector, output_path: str | os.PathLike = DEFAULT_OUTPUT) -> Path:
    """Write one value per line to *output_path* and return the path."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    # repr of a python float is the shortest string that parses back exactly
    lines = [repr(float(value)) for value in np.asarray(row_vector, dtype=np.float64).ravel()]
    with open(output_path, "w") as f:
        for line in lines:
            f.write(line + "\n")
    return output_path


def read_row_vector(path: str | os.PathLike) -> np.ndarray:
    """Load a row vector file written by :func:`write_row_vector`."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Row vector file not found: {path}")

    with open(path, "r") as f:
        values = [float(line) for line in f if line.strip()]
    return np.asarray(values, dtype=np.float64)
