"""
Script for reading images and writing their signed RGB-ratio row vectors.
"""
import argparse
import os
import sys
from pathlib import Path
from typing import List, Optional, Sequence

sys.path.append(os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))

from imagevector.utils import image_processing  # noqa: E402
from imagevector.data import loaders, row_vector  # noqa: E402
import numpy as np  # noqa: E402
from tqdm import tqdm  # noqa: E402


def main(
    *,
    image_path: Optional[str] = None,
    image_folder: Optional[str] = None,
    output_path: str = row_vector.DEFAULT_OUTPUT,
    output_dir: str = ".",
    output_prefix: str = "vector",
    seed: Optional[int] = None,
    print_array: bool = False,
) -> List[Path]:
    """
    Main function for writing row vectors.

    Args:
        image_path (str, optional): Single image to process, written to *output_path*.
        image_folder (str, optional): Folder whose images are all processed, each written
            to ``<output_dir>/<output_prefix>_<image stem>.txt``.
        seed (int, optional): Seed for the random signs.
        print_array (bool, optional): Print the RGB values of every pixel before writing.

    Returns:
        list: Paths of the written row vector files.
    """
    if (image_path is None) == (image_folder is None):
        raise ValueError("Exactly one of image_path or image_folder must be provided")

    rng = np.random.default_rng(seed)

    if image_path is not None:
        print(f"Reading image: {image_path}")
        written = process_image(image_path, output_path, rng, print_array=print_array)
        print(f"Row vector saved to: {written}")
        return [written]

    images = loaders.get_image_set(image_folder)
    if not images:
        raise ValueError(f"No images found in {image_folder}")

    output_dir = os.path.abspath(output_dir)
    print(f"Found {len(images)} images in {image_folder}")
    print(f"Output directory: {output_dir}")

    written_paths = []
    for path in tqdm(images, desc="Writing row vectors"):
        stem = os.path.splitext(os.path.basename(path))[0]
        out = os.path.join(output_dir, f"{output_prefix}_{stem}.txt")
        written_paths.append(process_image(path, out, rng, print_array=print_array))
        tqdm.write(f"{os.path.basename(path)} -> {out}")

    print("\nRow vector extraction complete!")
    return written_paths


def process_image(image_path, output_path, rng, *, print_array: bool = False) -> Path:
    """Read a single image and write its row vector."""
    image_array = image_processing.read_image_array(image_path)

    if print_array:
        image_processing.print_image_array(image_array)

    vector = row_vector.image_array_to_row_vector(image_array, rng=rng)
    return row_vector.write_row_vector(vector, output_path)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Write the signed R/G/B ratio of every pixel to a text file")
    parser.add_argument("image", nargs="?", default=None, help="Path to the image file to read.")
    parser.add_argument("--folder", default=None, help="Process every image in this folder instead of a single image.")
    parser.add_argument("--output", default=row_vector.DEFAULT_OUTPUT, help="Output file in single-image mode (default: vector.txt).")
    parser.add_argument("--output_dir", default=".", help="Directory for output files in folder mode (default: current directory).")
    parser.add_argument("--output_prefix", default="vector", help="Prefix for output files in folder mode (default: vector).")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random signs (default: unseeded).")
    parser.add_argument("--print_array", action="store_true", help="Print the R G B values of every pixel.")
    return parser.parse_args(argv)


def run(argv: Optional[Sequence[str]] = None) -> List[Path]:
    """Command-line entry point. Any failure aborts the process with status 1."""
    args = parse_args(argv)
    try:
        return main(
            image_path=args.image,
            image_folder=args.folder,
            output_path=args.output,
            output_dir=args.output_dir,
            output_prefix=args.output_prefix,
            seed=args.seed,
            print_array=args.print_array,
        )
    except Exception as e:
        print(f"An error occurred: {str(e)}")
        print("Exiting...")
        sys.exit(1)


if __name__ == "__main__":
    run()
