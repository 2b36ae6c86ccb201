import logging
import sys
from datetime import datetime, timedelta
from pathlib import Path
from typing import List, Optional

# Relative to the working directory of the run.
DEFAULT_LOG_DIR = Path("var/log")

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
LOG_GLOB = "*.log"

logger = logging.getLogger(__name__)


def get_log_file_path(
        logger_name: str,
        log_dir: Optional[Path] = None,
        include_timestamp: bool = True
) -> Path:
    """
    Log file for a logger: `<log_dir>/<logger_name with dots as underscores>[_YYYYmmdd_HHMMSS].log`.

    The directory is created if missing.
    """
    target_dir = Path(log_dir) if log_dir is not None else DEFAULT_LOG_DIR
    target_dir.mkdir(parents=True, exist_ok=True)

    stem = logger_name.replace(".", "_")
    if include_timestamp:
        stem = f"{stem}_{datetime.now():%Y%m%d_%H%M%S}"
    return target_dir / f"{stem}.log"


def _make_handler(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    handler.setLevel(level)
    return handler


def setup_logger(
    name: str,
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    log_dir: Optional[Path] = None,
    enable_file_logging: bool = False,
) -> logging.Logger:
    """
    (Re)configures a logger to write to stdout and, optionally, to a file.

    Handlers attached by an earlier call are closed and replaced, so the CLI
    can be invoked repeatedly in one process without duplicated output.

    Parameters
    ----------
    name : str
        Logger name; the CLI passes the package name so every module logger
        propagates to it.
    level : int, optional
        Level of the logger and all of its handlers, by default `logging.INFO`.
    log_file : Optional[str], optional
        Explicit log file, appended to. Takes precedence over `enable_file_logging`.
    log_dir : Optional[Path], optional
        Directory of the timestamped file written when `enable_file_logging` is set.
    enable_file_logging : bool, optional
        Write a timestamped file under `log_dir` when no `log_file` is given.

    Returns
    -------
    logging.Logger
        The configured logger.
    """
    configured = logging.getLogger(name)
    configured.setLevel(level)
    for old_handler in list(configured.handlers):
        configured.removeHandler(old_handler)
        old_handler.close()

    configured.addHandler(_make_handler(logging.StreamHandler(sys.stdout), level))

    log_path: Optional[Path] = None
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
    elif enable_file_logging:
        log_path = get_log_file_path(name, log_dir=log_dir)

    if log_path is not None:
        configured.addHandler(_make_handler(logging.FileHandler(log_path, mode='a'), level))
        configured.debug(f"Logging to file: {log_path}")

    return configured


def set_log_level(target: logging.Logger, level: int) -> None:
    """Applies `level` to a logger and every handler attached to it."""
    target.setLevel(level)
    for handler in target.handlers:
        handler.setLevel(level)


def cleanup_old_logs(log_dir: Optional[Path] = None, max_age_days: int = 7) -> List[Path]:
    """
    Deletes `*.log` files in `log_dir` not modified within the last `max_age_days` days.

    Returns
    -------
    List[Path]
        The deleted files, in name order. Empty if the directory does not exist.
    """
    target_dir = Path(log_dir) if log_dir is not None else DEFAULT_LOG_DIR
    if not target_dir.is_dir():
        return []

    cutoff = datetime.now() - timedelta(days=max_age_days)
    stale = [path for path in sorted(target_dir.glob(LOG_GLOB))
             if datetime.fromtimestamp(path.stat().st_mtime) < cutoff]

    for path in stale:
        path.unlink()
        logger.info(f"Removed old log: {path}")
    return stale
