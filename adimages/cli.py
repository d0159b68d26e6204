"""
Command Line Interface for the image optimizer.
"""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from .config import OptimizerConfig
from .optimizer import Optimizer


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    logging.getLogger('PIL').setLevel(logging.WARNING)

    return logging.getLogger('adimages')


def find_project_root() -> Path:
    """The directory containing this package's parent directory."""
    return Path(__file__).resolve().parent.parent


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    return argparse.ArgumentParser(
        prog='adimages',
        description='Build web derivatives and the ads index for the static site',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Reads:   static/images/originals/*.{jpg,jpeg,png,webp,gif} (+ optional <name>.json)
Writes:  static/images/<name>.webp, static/images/<name>-thumb.webp
         static/ads.json
"""
    )


def run(config: OptimizerConfig, logger: logging.Logger) -> int:
    """Run the optimizer with a configuration, returning an exit code."""
    errors = config.validate()
    if errors:
        for error in errors:
            logger.error(error)
        return 2

    try:
        optimizer = Optimizer(config, logger=logger)
        stats = optimizer.run()
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        return 2

    if stats.errors:
        logger.warning(f"{stats.errors} image(s) could not be processed")
    return 0


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    parser.parse_args(args)

    logger = setup_logging()
    config = OptimizerConfig.from_root(find_project_root())
    return run(config, logger)
