"""
DerivativeRenderer - Handles decoding, resizing and re-encoding of source images.
"""

import io
import logging
from typing import Optional, Tuple

from PIL import Image, ImageOps


class DerivativeRenderer:
    """
    Renders WebP derivatives from original images using Pillow.

    Every derivative is auto-oriented from its EXIF data and capped to a
    maximum width (never enlarged).
    """

    output_format = 'WEBP'

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize renderer.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def render(self, source_bytes: bytes, max_width: int, quality: int) -> bytes:
        """
        Render a derivative from image data.

        Args:
            source_bytes: Original image as bytes
            max_width: Maximum width of the result in pixels
            quality: Encoder quality (1-100)

        Returns:
            Encoded WebP bytes
        """
        with Image.open(io.BytesIO(source_bytes)) as source:
            img = ImageOps.exif_transpose(source)
            img = self._convert_color_mode(img)

            target = self.target_size(img.size, max_width)
            if target != img.size:
                self.logger.debug(f"Resizing {img.size[0]}x{img.size[1]} -> {target[0]}x{target[1]}")
                img = img.resize(target, Image.Resampling.LANCZOS)

            output = io.BytesIO()
            img.save(output, format=self.output_format, quality=quality)

        return output.getvalue()

    @staticmethod
    def target_size(size: Tuple[int, int], max_width: int) -> Tuple[int, int]:
        """Scale (width, height) down to max_width, keeping the aspect ratio."""
        width, height = size
        if width <= max_width:
            return size
        new_height = max(1, round(height * max_width / width))
        return max_width, new_height

    @staticmethod
    def _convert_color_mode(img: Image.Image) -> Image.Image:
        """Convert image to RGB, or RGBA when it carries transparency."""
        if img.mode in ('RGB', 'RGBA'):
            return img
        if img.mode in ('LA', 'PA') or (img.mode == 'P' and 'transparency' in img.info):
            return img.convert('RGBA')
        return img.convert('RGB')
