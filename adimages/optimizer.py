"""
Optimizer - Batch driver that turns a directory of originals into derivatives and an index.
"""

import logging
import os
from typing import List, Optional

from .ad_index import AdIndex
from .batch_stats import BatchStats
from .config import OptimizerConfig
from .image_processor import ImageProcessingError, ImageProcessor
from .process_result import ProcessResult


class Optimizer:
    """
    Runs the whole batch: scan, process each file, sort, write the index.

    Failures of individual files are logged and skipped. Failures to
    create directories, list the originals or write the index propagate.
    """

    def __init__(
        self,
        config: OptimizerConfig,
        processor: Optional[ImageProcessor] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize optimizer.

        Args:
            config: Optimizer configuration
            processor: Image processor (defaults to one built from config)
            logger: Optional logger instance
        """
        self.config = config
        self.logger = logger or logging.getLogger(__name__)
        self.processor = processor or ImageProcessor(config, logger=self.logger)
        self.stats = BatchStats()
        self.index = AdIndex()

    def scan(self) -> List[str]:
        """
        List source images in the input directory.

        Returns:
            Filenames with a recognized extension, in directory-listing order
        """
        files = []
        for filename in os.listdir(self.config.input_dir):
            if not self.config.is_image_file(filename):
                continue
            if not (self.config.input_dir / filename).is_file():
                self.logger.debug(f"Skipping non-file entry: {filename}")
                continue
            files.append(filename)
        return files

    def run(self) -> BatchStats:
        """
        Process every source image and rewrite the index file.

        Returns:
            BatchStats with results
        """
        self.stats = BatchStats()
        self.index = AdIndex()

        self.config.output_dir.mkdir(parents=True, exist_ok=True)

        if not self.config.input_dir.exists():
            self.logger.info(f"Originals directory does not exist: {self.config.input_dir}")
            self.logger.info("Nothing to process.")
            if AdIndex.ensure_exists(self.config.index_path):
                self.logger.info(f"Created empty index: {self.config.index_path}")
            return self.stats

        files = self.scan()
        self.stats.total_found = len(files)
        self.logger.info(f"Found {len(files)} image(s) in {self.config.input_dir}")

        for filename in files:
            result = self._process_file(filename)
            if result.ok:
                self.index.add_entry(result.entry)
                self.stats.processed += 1
                self.stats.bytes_written += result.bytes_written
            else:
                self.stats.record_failure(filename, result.error)

        self.index.save(self.config.index_path, pretty=self.config.pretty_index)
        self.stats.entries_written = len(self.index)

        self.logger.info(f"Wrote {len(self.index)} entries to {self.config.index_path}")
        self.logger.info(
            f"Run complete: {self.stats.processed} processed, "
            f"{self.stats.errors} errors ({self.stats.elapsed_seconds:.1f}s)"
        )
        return self.stats

    def _process_file(self, filename: str) -> ProcessResult:
        """Process a single source file, capturing its failure."""
        self.logger.info(f"Processing {filename} ...")
        try:
            entry, written = self.processor.process_with_size(filename)
        except ImageProcessingError as e:
            self.logger.error(f"Failed to process {filename}: {e.message}")
            return ProcessResult.failure(filename, e.message)
        except Exception as e:
            self.logger.error(f"Failed to process {filename}: {e}")
            return ProcessResult.failure(filename, str(e))

        result = ProcessResult.success(filename, entry, bytes_written=written)
        self.logger.info(f"Processed {result.format_status()}")
        return result
