"""
Image optimizer for the ads static site.

Reads static/images/originals/, writes a full-size and a thumbnail WebP
derivative per image into static/images/, and regenerates static/ads.json.
"""

__version__ = "1.0.0"

from .config import OptimizerConfig
from .renderer import DerivativeRenderer
from .sidecar import SidecarMetadata
from .index_entry import IndexEntry
from .process_result import ProcessResult
from .image_processor import ImageProcessor, ImageProcessingError
from .ad_index import AdIndex
from .batch_stats import BatchStats
from .optimizer import Optimizer

__all__ = [
    "OptimizerConfig",
    "DerivativeRenderer",
    "SidecarMetadata",
    "IndexEntry",
    "ProcessResult",
    "ImageProcessor",
    "ImageProcessingError",
    "AdIndex",
    "BatchStats",
    "Optimizer",
]
