"""Logging setup."""

import logging
import os
from pathlib import Path
from typing import Optional

LOG_DIR = Path.home() / ".cache" / "wp_beta_tester"


def setup_logging(level: int = logging.INFO, log_dir: Optional[Path] = None):
    """Setup logging configuration. Calling it again with the same log_dir is a no-op."""
    log_dir = log_dir or LOG_DIR
    log_file = log_dir / "beta_tester.log"

    logger = logging.getLogger()
    if any(isinstance(h, logging.FileHandler) and h.baseFilename == os.path.abspath(log_file)
           for h in logger.handlers):
        return

    log_dir.mkdir(parents=True, exist_ok=True)
    logger.setLevel(logging.DEBUG)

    # File handler
    file_handler = logging.FileHandler(log_file)
    file_handler.setLevel(logging.DEBUG)
    file_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    file_handler.setFormatter(file_formatter)
    logger.addHandler(file_handler)

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_formatter = logging.Formatter('%(levelname)s: %(message)s')
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)
