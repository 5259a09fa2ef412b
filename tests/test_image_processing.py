#!/usr/bin/env python3
"""Unit tests for reading images into RGB pixel arrays."""
from __future__ import annotations

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT / "src") not in sys.path:
    sys.path.append(str(PROJECT_ROOT / "src"))

import os
import tempfile

import numpy as np
import pytest
from PIL import Image

from imagevector.utils.image_processing import (
    format_image_array,
    print_image_array,
    read_image_array,
)


def create_test_png(path: str, pixels, mode: str = "RGB") -> None:
    """Write a 2x2 image with *pixels* listed row by row."""
    img = Image.new(mode, (2, 2))
    img.putdata(pixels)
    img.save(path)


def test_solid_color_triples() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "solid.png")
        create_test_png(path, [(200, 100, 50)] * 4)

        arr = read_image_array(path)
        assert arr.shape == (4, 3), f"Expected shape (4, 3), got {arr.shape}"
        assert arr.dtype == np.uint8
        assert arr.tolist() == [[200, 100, 50]] * 4


def test_pixels_are_row_major() -> None:
    pixels = [(1, 2, 3), (4, 5, 6), (7, 8, 9), (10, 11, 12)]
    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "ordered.png")
        create_test_png(path, pixels)

        flat = read_image_array(path)
        assert [tuple(p) for p in flat.tolist()] == pixels

        spatial = read_image_array(path, flatten=False)
        assert spatial.shape == (2, 2, 3)
        # top-right pixel
        assert tuple(spatial[0, 1]) == (4, 5, 6)


def test_grayscale_and_alpha_are_converted() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        gray = os.path.join(tmp, "gray.png")
        create_test_png(gray, [0, 64, 128, 255], mode="L")
        assert read_image_array(gray).tolist() == [[0, 0, 0], [64, 64, 64], [128, 128, 128], [255, 255, 255]]

        rgba = os.path.join(tmp, "rgba.png")
        create_test_png(rgba, [(10, 20, 30, 0)] * 4, mode="RGBA")
        assert read_image_array(rgba).tolist() == [[10, 20, 30]] * 4


def test_missing_file_raises() -> None:
    with pytest.raises(FileNotFoundError):
        read_image_array("/nonexistent/path/image.png")


def test_undecodable_file_raises_value_error() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "broken.png")
        with open(path, "w") as f:
            f.write("this is not an image")

        with pytest.raises(ValueError, match="Cannot decode image"):
            read_image_array(path)


def test_truncated_file_raises_value_error() -> None:
    noise = np.random.default_rng(0).integers(0, 256, size=(64, 64, 3), dtype=np.uint8)
    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "truncated.png")
        Image.fromarray(noise).save(path)
        with open(path, "rb") as f:
            data = f.read()
        with open(path, "wb") as f:
            f.write(data[: len(data) // 2])

        with pytest.raises(ValueError, match="Cannot decode image"):
            read_image_array(path)


def test_16_bit_grayscale_is_scaled_not_clipped() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "gray16.png")
        Image.fromarray(np.full((2, 2), 32768, dtype=np.uint16)).save(path)

        arr = read_image_array(path)
        assert arr.shape == (4, 3), f"Expected shape (4, 3), got {arr.shape}"
        assert arr.tolist() == [[128, 128, 128]] * 4, f"Expected mid gray, got {arr.tolist()}"


def test_format_and_print_image_array(capsys) -> None:
    arr = np.array([[1, 2, 3], [255, 0, 7]], dtype=np.uint8)
    assert format_image_array(arr) == ["1 2 3 ", "255 0 7 "]

    print_image_array(arr)
    assert capsys.readouterr().out == "1 2 3 \n255 0 7 \n"


if __name__ == "__main__":
    test_solid_color_triples()
    test_pixels_are_row_major()
    test_grayscale_and_alpha_are_converted()
    print("All image processing tests passed!")
