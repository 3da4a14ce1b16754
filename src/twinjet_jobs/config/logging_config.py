from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

LevelLike = Union[int, str, None]

# Set on loggers configured here (lets callers/tests tell them apart).
_TWINJET_LOGGER_MARK = "_twinjet_logger_configured"

# timestamp | level | logger | message
_DEFAULT_FMT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

_LEVEL_ENV_VARS = ("TWINJET_LOG_LEVEL", "LOG_LEVEL")
_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "NOTSET": logging.NOTSET,
}


def _coerce_level(level: LevelLike) -> int:
    """
    Accept an int or a name ('INFO', 'debug'). When None, fall back to
    TWINJET_LOG_LEVEL, then LOG_LEVEL, then INFO. Unknown names mean INFO.
    """
    if level is None:
        for var in _LEVEL_ENV_VARS:
            if os.getenv(var):
                level = os.getenv(var)
                break

    if isinstance(level, int):
        return level
    if isinstance(level, str):
        return _LEVELS.get(level.strip().upper(), logging.INFO)
    return logging.INFO


def _console_handler(logger: logging.Logger) -> Optional[logging.Handler]:
    for h in logger.handlers:
        # FileHandler subclasses StreamHandler; only stderr/stdout count
        if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler):
            if getattr(h, "stream", None) in (sys.stderr, sys.stdout):
                return h
    return None


def _file_handler(logger: logging.Logger, path: Path) -> Optional[logging.Handler]:
    target = path.resolve()
    for h in logger.handlers:
        if isinstance(h, RotatingFileHandler) and Path(h.baseFilename).resolve() == target:
            return h
    return None


def get_logger(
    name: Optional[str] = "twinjet_jobs",
    *,
    level: LevelLike = None,
    log_file: Optional[Union[str, Path]] = None,
    console: bool = True,
    propagate: bool = False,
    fmt: str = _DEFAULT_FMT,
    datefmt: str = _DEFAULT_DATEFMT,
    max_bytes: int = 5_000_000,
    backup_count: int = 5,
) -> logging.Logger:
    """
    Create/configure a logger for applications using the client (the library
    itself only calls logging.getLogger). Safe to call repeatedly: existing
    console/file handlers are reused and re-levelled, missing ones are added.
    """
    logger = logging.getLogger(name)
    logger.setLevel(_coerce_level(level))
    logger.propagate = propagate

    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

    if console:
        sh = _console_handler(logger)
        if sh is None:
            sh = logging.StreamHandler(stream=sys.stderr)
            sh.setFormatter(formatter)
            logger.addHandler(sh)
        sh.setLevel(logger.level)

    if log_file is not None:
        log_path = Path(log_file)
        fh = _file_handler(logger, log_path)
        if fh is None:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            fh = RotatingFileHandler(
                filename=str(log_path),
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
                delay=True,
            )
            fh.setFormatter(formatter)
            logger.addHandler(fh)
        fh.setLevel(logger.level)

    setattr(logger, _TWINJET_LOGGER_MARK, True)
    return logger
