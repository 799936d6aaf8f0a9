"""Module: logger_setup.py

Author: Michael Economou
Date: 2025-05-06

ConfigureLogger sets up root logging for a host application that drives
bulkrename. Console output gets INFO and higher by default, the log file gets
ERROR and higher, and an optional debug file gets everything.
"""

import contextlib
import logging
import os
import sys
from datetime import datetime

from bulkrename import config
from bulkrename.utils.logging.logger_file_helper import add_file_handler
from bulkrename.utils.logging.logger_helper import DevOnlyFilter

HANDLER_TAG = "_bulkrename_handler"


class ConfigureLogger:
    """Configures application-wide logging on the root logger.

    Handlers installed here are tagged, and a second ConfigureLogger does
    nothing while tagged handlers are present, so output is never duplicated.
    Handlers added by the host (or a test runner) are left alone.
    """

    def __init__(
        self,
        log_name: str = config.APP_NAME,
        log_dir: str = config.LOG_DIR,
        console_enabled: bool = config.LOG_TO_CONSOLE,
        file_enabled: bool = config.LOG_TO_FILE,
        debug_enabled: bool = config.LOG_DEBUG_FILE_ENABLED,
    ):
        """Initialize and configure the root logger.

        Args:
            log_name (str): Base name for the log files.
            log_dir (str): Directory to store log files.
            console_enabled (bool): Attach a console handler.
            file_enabled (bool): Attach a rotating file handler.
            debug_enabled (bool): Attach a rotating DEBUG-level file handler.

        """
        self.logger = logging.getLogger()
        self.logger.setLevel(logging.DEBUG)  # handlers filter levels
        self.log_file_path: str | None = None
        self.debug_file_path: str | None = None

        if any(getattr(h, HANDLER_TAG, False) for h in self.logger.handlers):
            return

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

        if console_enabled:
            self._setup_console_handler(getattr(logging, config.LOG_CONSOLE_LEVEL, logging.INFO))

        if file_enabled:
            os.makedirs(log_dir, exist_ok=True)
            self.log_file_path = os.path.join(log_dir, f"{log_name}_{timestamp}.log")
            handler = add_file_handler(
                logger=self.logger,
                log_path=self.log_file_path,
                level=getattr(logging, config.LOG_FILE_LEVEL, logging.ERROR),
                max_bytes=config.LOG_FILE_MAX_BYTES,
                backup_count=config.LOG_FILE_BACKUP_COUNT,
            )
            setattr(handler, HANDLER_TAG, True)

        if debug_enabled:
            os.makedirs(log_dir, exist_ok=True)
            self.debug_file_path = os.path.join(log_dir, f"{log_name}_debug_{timestamp}.log")
            handler = add_file_handler(
                logger=self.logger,
                log_path=self.debug_file_path,
                level=logging.DEBUG,
                max_bytes=config.LOG_DEBUG_FILE_MAX_BYTES,
                backup_count=config.LOG_DEBUG_FILE_BACKUP_COUNT,
            )
            setattr(handler, HANDLER_TAG, True)

    def _setup_console_handler(self, level: int) -> None:
        """Set up a console handler with UTF-8-safe output and DevOnlyFilter."""
        console_handler = logging.StreamHandler(sys.stdout)

        with contextlib.suppress(AttributeError, ValueError):
            console_handler.stream.reconfigure(encoding="utf-8")

        console_handler.setLevel(level)
        console_handler.addFilter(DevOnlyFilter())
        console_handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        setattr(console_handler, HANDLER_TAG, True)
        self.logger.addHandler(console_handler)
