"""
Image emission: gamma correction, 8-bit quantization and file output.

The native output format is plain-text PPM (P3): a header line
``P3 <width> <height> 255`` followed by one ``r g b`` line per pixel,
row-major from the top-left. Other extensions are written with Pillow.
"""

from __future__ import annotations
import math
from pathlib import Path
from typing import TextIO, Union

import numpy as np
from PIL import Image as PILImage

from .vec3 import Color

MAX_CHANNEL = 255
QUANTIZE_SCALE = 255.999


def gamma_correct(color: Color) -> Color:
    """Linear to display space with gamma 2 (square root per channel)."""
    return Color(*(math.sqrt(c) if c > 0 else 0.0 for c in color))


def quantize(value: float) -> int:
    """Map a display-space channel to an integer in [0, 255].

    Values are clamped to [0, 1] first so over-bright samples saturate
    instead of wrapping.
    """
    return int(math.floor(QUANTIZE_SCALE * min(max(value, 0.0), 1.0)))


def pixel_string(color_sum: Color, samples: int) -> str:
    """Format an accumulated pixel colour as a PPM pixel line.

    Args:
        color_sum: Sum of all sample colours for the pixel
        samples: Number of samples that were summed
    """
    corrected = gamma_correct(color_sum / samples)
    return " ".join(str(quantize(c)) for c in corrected)


def to_ldr(hdr_image: np.ndarray) -> np.ndarray:
    """Convert an averaged linear image to 8-bit display values.

    Args:
        hdr_image: Linear image array of shape (height, width, 3)

    Returns:
        uint8 array of the same shape
    """
    corrected = np.sqrt(np.clip(hdr_image, 0.0, None))
    return np.floor(QUANTIZE_SCALE * np.clip(corrected, 0.0, 1.0)).astype(np.uint8)


def write_ppm(ldr_image: np.ndarray, stream: TextIO) -> None:
    """Write an 8-bit image as plain-text PPM.

    Args:
        ldr_image: uint8 array of shape (height, width, 3)
        stream: Text stream to write to
    """
    height, width = ldr_image.shape[:2]
    stream.write(f"P3 {width} {height} {MAX_CHANNEL}\n")
    for row in ldr_image:
        stream.writelines(f"{r} {g} {b}\n" for r, g, b in row)


def ppm_string(ldr_image: np.ndarray) -> str:
    """Return the PPM text for an 8-bit image."""
    height, width = ldr_image.shape[:2]
    lines = [f"P3 {width} {height} {MAX_CHANNEL}"]
    lines.extend(f"{r} {g} {b}" for row in ldr_image for r, g, b in row)
    return "\n".join(lines) + "\n"


def save_image(hdr_image: np.ndarray, filename: Union[str, Path]) -> None:
    """Save a linear image to file.

    The extension selects the format: ``.ppm`` is written as P3 text,
    anything else goes through Pillow (png, jpg, bmp, ...).

    Raises:
        OSError: If the file cannot be written
    """
    path = Path(filename)
    ldr = to_ldr(hdr_image)

    if path.suffix.lower() == '.ppm':
        with open(path, 'w') as f:
            write_ppm(ldr, f)
    else:
        PILImage.fromarray(ldr).save(path)
