"""Module: init_logging.py

Author: Michael Economou
Date: 2025-05-12

Single entry point to attach activity and error log files for a host application.
"""

import logging
import os

from bulkrename.config import LOG_DIR
from bulkrename.utils.logging.logger_factory import get_cached_logger
from bulkrename.utils.logging.logger_file_helper import add_file_handler


def init_logging(app_name: str = "bulkrename", log_dir: str = LOG_DIR) -> logging.Logger:
    """Add rotating activity and error log files under the given app name.

    Args:
        app_name (str): The base name for log files.
        log_dir (str): Directory that receives the log files.

    Returns:
        logging.Logger: The package logger with both file handlers attached.

    """
    logger = get_cached_logger("bulkrename")
    logger.setLevel(logging.DEBUG)

    add_file_handler(logger, os.path.join(log_dir, f"{app_name}_activity.log"), level=logging.INFO)
    add_file_handler(logger, os.path.join(log_dir, f"{app_name}_errors.log"), level=logging.ERROR)

    return logger
