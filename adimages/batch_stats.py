"""
BatchStats - Statistics for an optimizer run.
"""

import time
from dataclasses import dataclass, field
from typing import List


@dataclass
class BatchStats:
    """
    Statistics for an optimizer run.

    Attributes:
        total_found: Source images found by the scan
        processed: Images turned into derivatives and an entry
        errors: Images that failed
        bytes_written: Total bytes of derivatives written
        entries_written: Entries in the index file written at the end
        start_time: Start timestamp
        error_details: "<file>: <message>" for every failure
    """
    total_found: int = 0
    processed: int = 0
    errors: int = 0
    bytes_written: int = 0
    entries_written: int = 0
    start_time: float = field(default_factory=time.time)
    error_details: List[str] = field(default_factory=list)

    @property
    def elapsed_seconds(self) -> float:
        """Elapsed time in seconds."""
        return time.time() - self.start_time

    @property
    def completed_count(self) -> int:
        """Total completed (processed + errors)."""
        return self.processed + self.errors

    def record_failure(self, filename: str, message: str) -> None:
        self.errors += 1
        self.error_details.append(f"{filename}: {message}")
