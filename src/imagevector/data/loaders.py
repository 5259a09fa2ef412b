"""Utilities for listing the images of a folder for batch processing."""
from __future__ import annotations

import os
from typing import List

IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg", ".bmp", ".gif", ".tif", ".tiff")


def get_image_set(image_folder: str) -> List[str]:
    """Return sorted paths of the image files directly inside *image_folder*."""
    if not os.path.isdir(image_folder):
        raise FileNotFoundError(f"Image folder not found: {image_folder}")
    return sorted(
        os.path.join(image_folder, f)
        for f in os.listdir(image_folder)
        if f.lower().endswith(IMAGE_EXTENSIONS) and os.path.isfile(os.path.join(image_folder, f))
    )
