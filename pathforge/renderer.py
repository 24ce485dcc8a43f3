"""
Renderer module - the per-pixel sampling loop.

For every pixel the camera fires ``samples_per_pixel`` jittered rays, the
integrator traces each one, and the colours are averaged into a linear
image. Rendering is single-threaded; progress is reported per scanline.
"""

from __future__ import annotations
import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Callable, Union
import numpy as np

from .vec3 import Color
from .camera import Camera
from .shapes import Hittable
from .integrator import trace
from .image import save_image, to_ldr

logger = logging.getLogger(__name__)


@dataclass
class RenderSettings:
    """Configuration for the renderer.

    ``height`` is derived from ``width`` and ``aspect_ratio`` when not given.
    """
    width: int = 400
    aspect_ratio: float = 16.0 / 9.0
    height: Optional[int] = None
    samples_per_pixel: int = 100
    max_depth: int = 50
    seed: Optional[int] = None

    def __post_init__(self):
        if self.aspect_ratio <= 0:
            raise ValueError(f"aspect_ratio must be positive, got {self.aspect_ratio}")
        if self.height is None:
            self.height = int(self.width / self.aspect_ratio)
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Image size must be positive, got {self.width}x{self.height}")
        if self.samples_per_pixel <= 0:
            raise ValueError(f"samples_per_pixel must be positive, got {self.samples_per_pixel}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must not be negative, got {self.max_depth}")


class Renderer:
    """Monte Carlo path tracing renderer."""

    def __init__(self, settings: RenderSettings = None):
        """Create a renderer with the given settings.

        Args:
            settings: Render configuration (uses defaults if None)
        """
        self.settings = settings if settings else RenderSettings()
        self._progress_callback: Optional[Callable[[float], None]] = None

    def set_progress_callback(self, callback: Callable[[float], None]) -> None:
        """Set a callback function for progress updates.

        Args:
            callback: Function that takes progress as float (0.0 to 1.0)
        """
        self._progress_callback = callback

    def render(self, scene: Hittable, camera: Camera, rng: Optional[np.random.Generator] = None) -> np.ndarray:
        """Render the scene and return the image as a numpy array.

        Args:
            scene: The scene to render (any Hittable)
            camera: The camera to render from
            rng: Random source; created from ``settings.seed`` if None

        Returns:
            Averaged linear image of shape (height, width, 3), top row first
        """
        width = self.settings.width
        height = self.settings.height
        samples = self.settings.samples_per_pixel
        max_depth = self.settings.max_depth

        if rng is None:
            rng = np.random.default_rng(self.settings.seed)

        logger.debug(
            "Rendering %dx%d, %d spp, depth %d, %d objects",
            width, height, samples, max_depth, len(scene) if hasattr(scene, '__len__') else -1
        )
        start = time.perf_counter()

        image = np.zeros((height, width, 3), dtype=np.float64)
        u_scale = max(width - 1, 1)
        v_scale = max(height - 1, 1)

        for j in range(height):
            row = height - 1 - j
            for i in range(width):
                pixel_color = Color(0, 0, 0)

                for _ in range(samples):
                    u = (i + rng.random()) / u_scale
                    v = (row + rng.random()) / v_scale

                    ray = camera.get_ray(u, v, rng)
                    pixel_color = pixel_color + trace(scene, ray, max_depth, rng)

                image[j, i] = pixel_color.to_array() / samples

            if self._progress_callback:
                self._progress_callback((j + 1) / height)

        logger.debug("Render finished in %.2fs", time.perf_counter() - start)
        return image

    def to_ldr(self, hdr_image: np.ndarray) -> np.ndarray:
        """Convert a rendered image to gamma-corrected 8-bit values."""
        return to_ldr(hdr_image)

    def save_image(self, image: np.ndarray, filename: Union[str, Path]) -> None:
        """Save a rendered image; the extension determines the format."""
        logger.debug("Saving image to %s", filename)
        save_image(image, filename)
