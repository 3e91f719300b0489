"""
Logging Configuration for Design State

Features:
- Colored console output (TTY only)
- Optional rotating file handler
- Level from argument, LOG_LEVEL or DesignSettings
"""
import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Optional

from version import APP_NAME, VERSION


class ColoredFormatter(logging.Formatter):
    """Colored formatter for console output"""

    COLORS = {
        'DEBUG': '\033[36m',  # Cyan
        'INFO': '\033[32m',  # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',  # Red
        'CRITICAL': '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def format(self, record):
        # Copy so other handlers still see the plain level name
        record = logging.makeLogRecord(record.__dict__)
        if record.levelname in self.COLORS:
            record.levelname = (
                f"{self.COLORS[record.levelname]}{record.levelname}{self.RESET}"
            )
        return super().format(record)


class LoggingConfig:
    """Centralized logging configuration"""

    DEFAULT_LOG_LEVEL = "INFO"
    DEFAULT_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
    DEFAULT_BACKUP_COUNT = 3
    LOG_FILE_NAME = f"{APP_NAME}.log"

    @staticmethod
    def setup_logging(
            log_level: Optional[str] = None,
            log_dir: Optional[str] = None,
            enable_console: bool = True,
            enable_colors: bool = True,
            logger_name: Optional[str] = None,
    ) -> logging.Logger:
        """
        Configure handlers on the root logger (or ``logger_name``).

        A file handler is only added when ``log_dir`` is given.
        """
        log_level = (log_level or os.getenv("LOG_LEVEL", LoggingConfig.DEFAULT_LOG_LEVEL)).upper()
        level = getattr(logging, log_level, logging.INFO)

        target = logging.getLogger(logger_name)
        target.setLevel(level)
        target.handlers.clear()

        detailed_format = logging.Formatter(
            '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        if enable_console and sys.stdout is not None:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(level)

            is_tty = hasattr(sys.stdout, "isatty") and sys.stdout.isatty()

            if enable_colors and is_tty:
                console_handler.setFormatter(ColoredFormatter(
                    '%(asctime)s - %(levelname)s - %(message)s',
                    datefmt='%H:%M:%S'
                ))
            else:
                console_handler.setFormatter(detailed_format)

            target.addHandler(console_handler)

        if log_dir:
            log_path = Path(log_dir)
            log_path.mkdir(exist_ok=True, parents=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_path / LoggingConfig.LOG_FILE_NAME,
                maxBytes=LoggingConfig.DEFAULT_MAX_BYTES,
                backupCount=LoggingConfig.DEFAULT_BACKUP_COUNT,
                encoding='utf-8'
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(detailed_format)
            target.addHandler(file_handler)

        target.info(f"Logging initialized ({APP_NAME} {VERSION}, level={log_level})")
        return target

    @staticmethod
    def setup_from_settings(settings, **kwargs) -> logging.Logger:
        """Shortcut taking a core.config.DesignSettings."""
        return LoggingConfig.setup_logging(
            log_level=settings.log_level,
            log_dir=settings.log_dir or None,
            **kwargs,
        )
