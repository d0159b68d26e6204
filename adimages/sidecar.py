"""
SidecarMetadata - Optional human-entered metadata stored next to a source image.
"""

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional


@dataclass
class SidecarMetadata:
    """
    Fields read from a <basename>.json sidecar.

    Every field is optional. An empty string means "use the default".

    Attributes:
        name: Display name (defaults to the image base name)
        description: Free-form description
        location: Where the item is
        category: Category label
        contact: Contact details
        code: Reference code
    """
    name: str = ''
    description: str = ''
    location: str = ''
    category: str = ''
    contact: str = ''
    code: str = ''

    @classmethod
    def from_dict(cls, data: dict) -> 'SidecarMetadata':
        """
        Create from a parsed sidecar object.

        Unknown keys are ignored. Missing, null, empty and other falsy values
        are left as the default; anything else is converted to a string.
        """
        values = {}
        for f in fields(cls):
            value = data.get(f.name)
            if not value:
                continue
            values[f.name] = value if isinstance(value, str) else str(value)
        return cls(**values)

    @classmethod
    def load(cls, path: Path, logger: Optional[logging.Logger] = None) -> 'SidecarMetadata':
        """
        Read a sidecar file, falling back to empty metadata.

        A missing file is expected and only logged at INFO. A file that
        cannot be read, is not valid JSON, or is not a JSON object is
        logged as a warning. Neither case raises.

        Args:
            path: Path of the sidecar file
            logger: Optional logger instance

        Returns:
            SidecarMetadata (empty on any problem)
        """
        logger = logger or logging.getLogger(__name__)
        path = Path(path)

        if not path.is_file():
            logger.info(f"No metadata at {path.name} - using defaults.")
            return cls()

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning(f"Could not parse metadata {path}: {e}")
            return cls()

        if not isinstance(data, dict):
            logger.warning(
                f"Could not parse metadata {path}: expected a JSON object, "
                f"got {type(data).__name__}"
            )
            return cls()

        return cls.from_dict(data)
