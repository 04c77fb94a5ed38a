import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from pulsewatch.utilities.env.parsing import _env_flag

LOG_LEVEL_ENV_VAR = "LOG_LEVEL"
LOG_DIR_ENV_VAR = "PULSEWATCH_LOG_DIR"
LOG_FILE_ENV_VAR = "PULSEWATCH_LOG_FILE"
SESSION_LOG_FILENAME = "session.log"
MAX_LOG_BYTES = 2 * 1024 * 1024  # 2 MiB
BACKUP_COUNT = 3

CONSOLE_FORMAT = "%(levelname)-7s %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(threadName)s] %(message)s"

_session_file_handler: RotatingFileHandler | None = None


def _session_log_path() -> Path:
    """Return the session log path, creating its directory when needed."""

    log_dir = os.getenv(LOG_DIR_ENV_VAR)
    directory = (
        Path(log_dir).expanduser() if log_dir else Path.home() / ".pulsewatch" / "logs"
    )
    directory.mkdir(parents=True, exist_ok=True)
    return directory / SESSION_LOG_FILENAME


def _shared_file_handler() -> RotatingFileHandler:
    # One handler per log directory, shared by every pulsewatch logger.
    global _session_file_handler
    path = _session_log_path()
    if (
        _session_file_handler is None
        or _session_file_handler.baseFilename != os.path.abspath(path)
    ):
        _session_file_handler = RotatingFileHandler(
            path, maxBytes=MAX_LOG_BYTES, backupCount=BACKUP_COUNT
        )
        _session_file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return _session_file_handler


def _configure_logger(logger: logging.Logger, log_level: str) -> None:
    level = getattr(logging, log_level, logging.INFO)
    logger.setLevel(level)

    if logger.handlers:
        # Logger already configured elsewhere; respect existing handlers.
        return

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console)

    if _env_flag(LOG_FILE_ENV_VAR, default=True):
        logger.addHandler(_shared_file_handler())
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger writing to stderr and, unless disabled, the shared session log."""

    log_level = os.getenv(LOG_LEVEL_ENV_VAR, "INFO").upper()
    logger = logging.getLogger(name)
    _configure_logger(logger, log_level)
    return logger
