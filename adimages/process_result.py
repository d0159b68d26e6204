"""
ProcessResult - Outcome of processing one source file.
"""

from dataclasses import dataclass
from typing import Optional

from .index_entry import IndexEntry


@dataclass
class ProcessResult:
    """
    Success (with an entry) or failure (with a message) for one file.

    Attributes:
        filename: Source filename relative to the input directory
        entry: Index entry when processing succeeded
        error: Error message when processing failed
        bytes_written: Total size of the derivatives written
    """
    filename: str
    entry: Optional[IndexEntry] = None
    error: Optional[str] = None
    bytes_written: int = 0

    @property
    def ok(self) -> bool:
        return self.entry is not None and self.error is None

    @classmethod
    def success(cls, filename: str, entry: IndexEntry, bytes_written: int = 0) -> 'ProcessResult':
        return cls(filename=filename, entry=entry, bytes_written=bytes_written)

    @classmethod
    def failure(cls, filename: str, error: str) -> 'ProcessResult':
        return cls(filename=filename, error=error)

    def format_status(self) -> str:
        """
        Format a one-line status string.

        Returns:
            e.g. "a.jpg -> images/a.webp" or "d.jpg -> FAILED (file too small or unreadable)"
        """
        if self.ok:
            return f"{self.filename} -> {self.entry.image}"
        return f"{self.filename} -> FAILED ({self.error})"
