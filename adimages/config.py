"""
OptimizerConfig - Paths and encoding settings for an optimizer run.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, List, Union


DEFAULT_IMAGE_EXTENSIONS = frozenset({'.jpg', '.jpeg', '.png', '.webp', '.gif'})


@dataclass
class OptimizerConfig:
    """
    Configuration for a batch run.

    Attributes:
        input_dir: Directory holding source images and their sidecars
        output_dir: Directory receiving the derivatives
        index_path: Path of the JSON index file
        asset_prefix: URL prefix of derivatives relative to the static root
        full_width: Maximum width of the full-size derivative
        full_quality: Encoder quality of the full-size derivative
        thumb_width: Maximum width of the thumbnail
        thumb_quality: Encoder quality of the thumbnail
        thumb_suffix: Suffix appended to the base name for thumbnails
        output_extension: Extension of every derivative
        image_extensions: Source extensions picked up by the scan
        min_source_bytes: Sources smaller than this are rejected
        pretty_index: Indent the index file instead of minifying it
    """
    input_dir: Path
    output_dir: Path
    index_path: Path
    asset_prefix: str = 'images'
    full_width: int = 1200
    full_quality: int = 80
    thumb_width: int = 300
    thumb_quality: int = 70
    thumb_suffix: str = '-thumb'
    output_extension: str = '.webp'
    image_extensions: FrozenSet[str] = field(default=DEFAULT_IMAGE_EXTENSIONS)
    min_source_bytes: int = 16
    pretty_index: bool = False

    def __post_init__(self):
        self.input_dir = Path(self.input_dir)
        self.output_dir = Path(self.output_dir)
        self.index_path = Path(self.index_path)

    @classmethod
    def from_root(cls, root: Union[str, os.PathLike], **overrides) -> 'OptimizerConfig':
        """
        Build the standard site layout under a project root.

        Args:
            root: Project root directory
            **overrides: Any other field to override

        Returns:
            OptimizerConfig for <root>/static/...
        """
        static_dir = Path(root) / 'static'
        return cls(
            input_dir=static_dir / 'images' / 'originals',
            output_dir=static_dir / 'images',
            index_path=static_dir / 'ads.json',
            **overrides
        )

    def validate(self) -> List[str]:
        """Return a list of configuration problems (empty if valid)."""
        errors = []

        for label, width in (('full_width', self.full_width), ('thumb_width', self.thumb_width)):
            if width <= 0:
                errors.append(f"{label} must be positive, got {width}")

        for label, quality in (('full_quality', self.full_quality), ('thumb_quality', self.thumb_quality)):
            if not 1 <= quality <= 100:
                errors.append(f"{label} must be between 1 and 100, got {quality}")

        if not self.output_extension.startswith('.'):
            errors.append(f"output_extension must start with '.', got {self.output_extension!r}")

        return errors

    def is_image_file(self, filename: str) -> bool:
        """Check whether a filename has a recognized source extension."""
        return os.path.splitext(filename)[1].lower() in self.image_extensions

    def sidecar_path(self, name: str) -> Path:
        return self.input_dir / f"{name}.json"

    def full_output_path(self, name: str) -> Path:
        return self.output_dir / f"{name}{self.output_extension}"

    def thumb_output_path(self, name: str) -> Path:
        return self.output_dir / f"{name}{self.thumb_suffix}{self.output_extension}"

    def image_url(self, name: str) -> str:
        """Site-relative path of the full-size derivative."""
        return f"{self.asset_prefix}/{name}{self.output_extension}"

    def thumb_url(self, name: str) -> str:
        """Site-relative path of the thumbnail."""
        return f"{self.asset_prefix}/{name}{self.thumb_suffix}{self.output_extension}"
