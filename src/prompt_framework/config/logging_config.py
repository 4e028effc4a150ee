"""
Logging setup shared by the CLI and the MCP server.

Handlers always write to stderr: on the stdio transport stdout carries the
protocol, and the CLI keeps stdout for JSON output.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

FILE_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_LOG_FORMAT = "%(name)s - %(levelname)s - %(message)s"


def configure_logging(
    level: int = logging.INFO,
    log_dir: Optional[Path] = None,
    stream=None,
) -> Optional[Path]:
    """
    Configure the root logger.

    Args:
        level: Logging level for all handlers
        log_dir: If given, also log to a timestamped file in this directory
        stream: Console stream (defaults to sys.stderr)

    Returns:
        Path of the log file, if one was created
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Repeated calls replace handlers instead of stacking them
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_LOG_FORMAT))
    root_logger.addHandler(console_handler)

    log_file = None
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_dir / f"text2json_{timestamp}.log"

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
        root_logger.addHandler(file_handler)

        logging.info(f"Logging initialized. Log file: {log_file}")

    return log_file
