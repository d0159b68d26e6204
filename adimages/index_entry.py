"""
IndexEntry - Record for a single processed image in the index file.
"""

from dataclasses import dataclass, asdict

from .sidecar import SidecarMetadata


@dataclass
class IndexEntry:
    """
    Record for a single processed image.

    Field order is the key order of the serialized JSON object.

    Attributes:
        name: Display name
        description: Free-form description
        location: Where the item is
        category: Category label
        contact: Contact details
        code: Reference code
        image: Site-relative path of the full-size derivative
        thumb: Site-relative path of the thumbnail
    """
    name: str
    description: str
    location: str
    category: str
    contact: str
    code: str
    image: str
    thumb: str

    @classmethod
    def from_metadata(
        cls,
        base_name: str,
        metadata: SidecarMetadata,
        image: str,
        thumb: str
    ) -> 'IndexEntry':
        """
        Build an entry from sidecar metadata.

        Args:
            base_name: Source filename without extension, used when the
                sidecar has no name
            metadata: Sidecar metadata (possibly empty)
            image: Site-relative path of the full-size derivative
            thumb: Site-relative path of the thumbnail
        """
        return cls(
            name=metadata.name or base_name,
            description=metadata.description,
            location=metadata.location,
            category=metadata.category,
            contact=metadata.contact,
            code=metadata.code,
            image=image,
            thumb=thumb,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> 'IndexEntry':
        """Create from dictionary, tolerating missing keys."""
        return cls(
            name=data.get('name', ''),
            description=data.get('description', ''),
            location=data.get('location', ''),
            category=data.get('category', ''),
            contact=data.get('contact', ''),
            code=data.get('code', ''),
            image=data.get('image', ''),
            thumb=data.get('thumb', ''),
        )
