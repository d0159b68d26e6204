"""
AdIndex - Ordered collection of index entries and the JSON index file.
"""

import json
import os
import tempfile
import unicodedata
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Tuple, Union

from .index_entry import IndexEntry

PathLike = Union[str, os.PathLike]


def sort_key(name: str) -> Tuple[str, str, str]:
    """
    Locale-like ordering key for entry names.

    Compares accent- and case-insensitively first, then puts lowercase
    before uppercase, then falls back to the raw string so the order is
    total.
    """
    folded = name.casefold()
    base = ''.join(
        ch for ch in unicodedata.normalize('NFKD', folded)
        if not unicodedata.combining(ch)
    )
    return base, name.swapcase(), name


@dataclass
class AdIndex:
    """
    Entries collected during a run.

    Attributes:
        entries: Entries in the order they were added
    """
    entries: List[IndexEntry] = field(default_factory=list)

    def add_entry(self, entry: IndexEntry) -> None:
        """Add an entry to the index."""
        self.entries.append(entry)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[IndexEntry]:
        return iter(self.entries)

    def sorted_entries(self) -> List[IndexEntry]:
        """Entries sorted ascending by name."""
        return sorted(self.entries, key=lambda e: sort_key(e.name))

    def to_list(self) -> List[dict]:
        """Sorted entries as plain dictionaries."""
        return [e.to_dict() for e in self.sorted_entries()]

    def to_json(self, pretty: bool = False) -> str:
        """Serialize the sorted entries (minified unless pretty)."""
        if pretty:
            return json.dumps(self.to_list(), indent=2, ensure_ascii=False)
        return json.dumps(self.to_list(), separators=(',', ':'), ensure_ascii=False)

    def save(self, filepath: PathLike, pretty: bool = False) -> None:
        """
        Write the index file, replacing any existing one.

        The JSON is built in memory and written to a temporary file in the
        same directory, which is then renamed over the target, so readers
        never see a truncated index.
        """
        path = Path(filepath)
        _atomic_write_text(path, self.to_json(pretty=pretty))

    @classmethod
    def from_list(cls, data: list) -> 'AdIndex':
        """Create from a parsed index file."""
        return cls(entries=[IndexEntry.from_dict(item) for item in data])

    @classmethod
    def load(cls, filepath: PathLike) -> 'AdIndex':
        """Load an index file."""
        with open(filepath, 'r', encoding='utf-8') as f:
            data = json.load(f)
        if not isinstance(data, list):
            raise ValueError(f"{filepath}: expected a JSON array")
        return cls.from_list(data)

    @staticmethod
    def ensure_exists(filepath: PathLike) -> bool:
        """
        Create an empty index file if none exists.

        Returns:
            True if a file was created, False if one was already there
        """
        path = Path(filepath)
        if path.exists():
            return False
        _atomic_write_text(path, '[]')
        return True


def _atomic_write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix='.tmp', dir=path.parent)
    try:
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            f.write(text)
        os.chmod(tmp_name, 0o666 & ~_current_umask())
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.remove(tmp_name)
        raise


def _current_umask() -> int:
    # mkstemp always creates 0600 files, ignoring the umask
    umask = os.umask(0)
    os.umask(umask)
    return umask
