"""Centralized logging configuration for the knockout bracket runner."""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Union


def setup_logging(
    log_dir: Optional[Path] = None,
    level: Union[int, str] = logging.INFO,
    log_to_file: bool = False,
    log_to_console: bool = True,
) -> logging.Logger:
    """
    Configure the 'knockout' logger that every module logs under.

    Module loggers ('knockout.service', 'knockout.resolver', ...) propagate
    to it, so this is the only place handlers are attached. Console output
    goes to stderr to keep stdout for the bracket printout.

    Args:
        log_dir: Directory for log files (default: ./logs)
        level: Logging level, as a number or a name such as 'DEBUG'
        log_to_file: Whether to also write a timestamped log file
        log_to_console: Whether to log to stderr (default: True)

    Returns:
        The configured 'knockout' logger

    Raises:
        ValueError: If level is an unknown level name

    Example:
        from knockout.logging_config import setup_logging
        setup_logging(level='DEBUG')
    """
    if isinstance(level, str):
        # getLevelName maps known names to their number
        level_number = logging.getLevelName(level.upper())
        if not isinstance(level_number, int):
            raise ValueError(f'Unknown logging level: {level}')
        level = level_number

    logger = logging.getLogger('knockout')
    logger.setLevel(level)

    # Replace handlers from an earlier call
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_to_file:
        log_dir = Path(log_dir or 'logs')
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f'knockout_{datetime.now().strftime("%Y%m%d_%H%M%S")}.log'

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S',
        ))
        logger.addHandler(file_handler)

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter('%(levelname)s [%(name)s]: %(message)s'))
        logger.addHandler(console_handler)

    return logger
