import argparse
import os
import sys

import numpy as np

sys.path.append(os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))

from imagevector.data.row_vector import read_row_vector, rgb_ratios  # noqa: E402
from imagevector.utils.image_processing import read_image_array  # noqa: E402

parser = argparse.ArgumentParser(description='Summarize a row vector file and optionally check it against its image')
parser.add_argument('--file', type=str, required=True, help='Path to the row vector file')
parser.add_argument('--image', type=str, default=None, help='Source image to verify against')
args = parser.parse_args()

assert os.path.isfile(args.file), f"{args.file} not found. Check if path is correct."

vector = read_row_vector(args.file)
magnitudes = np.abs(vector)

print("Lines:", len(vector))
print("=" * 80)
if len(vector):
    print(f"Magnitude range: {magnitudes.min()} .. {magnitudes.max()}")
    print(f"Negative: {int((vector < 0).sum())}  Positive: {int((vector > 0).sum())}")

if args.image:
    image_array = read_image_array(args.image)
    assert len(vector) == len(image_array), \
        f"Line count {len(vector)} does not match pixel count {len(image_array)}"
    # signs are random, only magnitudes are comparable
    assert np.allclose(magnitudes, rgb_ratios(image_array)), "Magnitudes do not match R/G/B ratios"
    print("=" * 80)
    print(f"{args.file} matches {args.image}")
