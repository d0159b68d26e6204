"""
ImageProcessor - Turns one source image into a derivative pair and an index entry.
"""

import logging
import os
from pathlib import Path
from typing import Optional, Tuple

from .config import OptimizerConfig
from .index_entry import IndexEntry
from .renderer import DerivativeRenderer
from .sidecar import SidecarMetadata


class ImageProcessingError(Exception):
    """Raised when a single source image cannot be turned into derivatives."""

    def __init__(self, filename: str, message: str):
        super().__init__(f"{filename}: {message}")
        self.filename = filename
        self.message = message


class ImageProcessor:
    """
    Processes a single source image.

    Reads the optional sidecar, writes the full-size and thumbnail
    derivatives, and builds the index entry.
    """

    def __init__(
        self,
        config: OptimizerConfig,
        renderer: Optional[DerivativeRenderer] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize processor.

        Args:
            config: Optimizer configuration
            renderer: Derivative renderer (defaults to the Pillow WebP renderer)
            logger: Optional logger instance
        """
        self.config = config
        self.logger = logger or logging.getLogger(__name__)
        self.renderer = renderer or DerivativeRenderer(logger=self.logger)

    @staticmethod
    def base_name(filename: str) -> str:
        """Filename without its extension."""
        return os.path.splitext(os.path.basename(filename))[0]

    def process(self, filename: str) -> IndexEntry:
        """
        Process a source image.

        Args:
            filename: Source filename relative to the input directory

        Returns:
            IndexEntry for the written derivatives

        Raises:
            ImageProcessingError: If the source cannot be read, decoded,
                resized, encoded or written
        """
        entry, _ = self.process_with_size(filename)
        return entry

    def process_with_size(self, filename: str) -> Tuple[IndexEntry, int]:
        """Process a source image, also returning the bytes written."""
        name = self.base_name(filename)
        source_path = self.config.input_dir / filename

        metadata = SidecarMetadata.load(self.config.sidecar_path(name), logger=self.logger)

        source_bytes = self._read_source(filename, source_path)

        full_path = self.config.full_output_path(name)
        thumb_path = self.config.thumb_output_path(name)

        written = self._write_derivative(
            filename, source_bytes, full_path,
            self.config.full_width, self.config.full_quality
        )
        try:
            written += self._write_derivative(
                filename, source_bytes, thumb_path,
                self.config.thumb_width, self.config.thumb_quality
            )
        except ImageProcessingError:
            full_path.unlink(missing_ok=True)
            raise

        entry = IndexEntry.from_metadata(
            base_name=name,
            metadata=metadata,
            image=self.config.image_url(name),
            thumb=self.config.thumb_url(name),
        )
        return entry, written

    def _read_source(self, filename: str, source_path: Path) -> bytes:
        """Read the source, rejecting files too small to be an image."""
        try:
            size = source_path.stat().st_size
        except OSError as e:
            raise ImageProcessingError(filename, f"cannot stat source: {e}") from e

        if size < self.config.min_source_bytes:
            raise ImageProcessingError(filename, "file too small or unreadable")

        try:
            return source_path.read_bytes()
        except OSError as e:
            raise ImageProcessingError(filename, f"cannot read source: {e}") from e

    def _write_derivative(
        self,
        filename: str,
        source_bytes: bytes,
        out_path: Path,
        max_width: int,
        quality: int
    ) -> int:
        """Render one derivative and write it; returns its size in bytes."""
        self.logger.debug(f"Rendering {out_path.name} (max width {max_width}, quality {quality})")
        try:
            data = self.renderer.render(source_bytes, max_width, quality)
        except Exception as e:
            raise ImageProcessingError(filename, f"cannot render {out_path.name}: {e}") from e

        try:
            out_path.write_bytes(data)
        except OSError as e:
            raise ImageProcessingError(filename, f"cannot write {out_path}: {e}") from e

        return len(data)
