#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Logging configuration for Disk Space Optimizer.
"""

from __future__ import annotations
import logging
from typing import Optional

logger = logging.getLogger("diskoptimizer")


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """
    Configure logging system.

    Args:
        verbose: If True, set DEBUG level. Otherwise INFO.
        log_file: Optional path to log file. If None, only console logging.
    """
    level = logging.DEBUG if verbose else logging.INFO
    handlers = []

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter('[%(levelname)s] %(message)s'))
    handlers.append(console_handler)

    log_file_error = None
    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s - [%(levelname)s] - %(name)s - %(message)s'
            ))
            handlers.append(file_handler)
        except OSError as e:
            log_file_error = e

    logging.basicConfig(
        level=level,
        handlers=handlers,
        force=True
    )

    logger.setLevel(level)

    if log_file_error is not None:
        logger.warning(f"Failed to create log file {log_file}: {log_file_error}")
    elif log_file:
        logger.info(f"Logging to file: {log_file}")

    if verbose:
        logger.debug("Verbose logging enabled")
