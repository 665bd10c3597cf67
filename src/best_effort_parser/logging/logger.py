"""
Centralized logging configuration for the best_effort_parser package.

Key behaviors
-------------
* Single entry point via ``get_logger`` to keep handlers/formatters consistent.
* Console logging that respects the configured level and debug flag.
* Optional master log file (``logging.file`` in ``config/best_effort_parser.yml``)
  plus per-module logs, with optional rotation.
* Parsers are libraries: nothing is written to disk unless a file is configured.
"""

from __future__ import annotations

import logging
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, Optional

from best_effort_parser.config import get_config

# -----------------------------------------------------------------------------
# Paths and configuration
# -----------------------------------------------------------------------------

PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_LOG_DIR = PROJECT_ROOT / "logs"
BASE_LOGGER_NAME = "best_effort_parser"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Cache so handlers are only created once per module
_logger_cache: Dict[str, Logger] = {}
_base_configured: bool = False
_effective_level: int = logging.INFO
_log_dir: Path = DEFAULT_LOG_DIR
_master_log_name: Optional[str] = None
_rotate_logs: bool = False


# -----------------------------------------------------------------------------
# Internal helpers
# -----------------------------------------------------------------------------

def _ensure_log_dir() -> Path:
    """Resolve and create the log directory from configuration."""
    global _log_dir
    cfg = get_config()

    log_dir = Path(cfg.logging.get("dir") or "logs")
    if not log_dir.is_absolute():
        log_dir = PROJECT_ROOT / log_dir

    log_dir.mkdir(parents=True, exist_ok=True)
    _log_dir = log_dir
    return log_dir


def _build_file_handler(path: Path, level: int) -> logging.Handler:
    """Create a file handler with optional rotation."""
    if _rotate_logs:
        handler = RotatingFileHandler(
            path,
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _configure_base_logger() -> Logger:
    """Configure the shared base logger once."""
    global _base_configured, _effective_level, _master_log_name, _rotate_logs

    if _base_configured:
        return logging.getLogger(BASE_LOGGER_NAME)

    cfg = get_config()
    _rotate_logs = bool(cfg.logging.get("rotate", False))
    _master_log_name = cfg.logging.get("file") or None

    level_name = str(cfg.logging.get("level", "INFO")).upper()
    base_level = getattr(logging, level_name, logging.INFO)
    debug_enabled = bool(getattr(cfg, "debug", False))

    _effective_level = logging.DEBUG if debug_enabled else base_level

    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    base_logger.setLevel(_effective_level)
    base_logger.propagate = False

    # Master log handler
    if _master_log_name:
        master_path = _ensure_log_dir() / _master_log_name
        base_logger.addHandler(_build_file_handler(master_path, _effective_level))

    # Console handler
    if cfg.logging.get("console", True):
        console = StreamHandler()
        console.setLevel(_effective_level)
        console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        base_logger.addHandler(console)

    _base_configured = True
    return base_logger


def _module_handler_exists(logger: Logger) -> bool:
    return any(getattr(h, "is_module_handler", False) for h in logger.handlers)


def _attach_module_handler(logger: Logger, module_name: str) -> None:
    log_dir = _ensure_log_dir()
    filename = f"{module_name.replace('.', '_')}.log"
    path = log_dir / filename

    handler = _build_file_handler(path, _effective_level)
    handler.is_module_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def get_logger(name: str | None = None) -> Logger:
    """Return a logger configured with project-wide handlers.

    * Module loggers are namespaced under ``best_effort_parser`` and propagate
      to the base console (+ master log) handlers.
    * With file logging configured, each module also gains ``logs/<module>.log``.
    * The debug flag in ``config/best_effort_parser.yml`` forces DEBUG output.
    """

    base_logger = _configure_base_logger()
    logger_name = name or BASE_LOGGER_NAME
    if logger_name != BASE_LOGGER_NAME and not logger_name.startswith(BASE_LOGGER_NAME + "."):
        logger_name = f"{BASE_LOGGER_NAME}.{logger_name}"
    logger = logging.getLogger(logger_name)
    logger.setLevel(_effective_level)

    if logger_name != base_logger.name:
        if _master_log_name and not _module_handler_exists(logger):
            _attach_module_handler(logger, logger_name)
        logger.propagate = True
    else:
        # Base logger already owns the master + console handlers
        logger.propagate = False

    _logger_cache[logger_name] = logger
    return logger


def set_debug(enabled: bool = True) -> None:
    """Switch every known logger (and the base logger) to DEBUG or back to the configured level."""
    global _effective_level
    base_logger = _configure_base_logger()

    cfg = get_config()
    level_name = str(cfg.logging.get("level", "INFO")).upper()
    _effective_level = logging.DEBUG if enabled else getattr(logging, level_name, logging.INFO)

    for logger in [base_logger, *_logger_cache.values()]:
        logger.setLevel(_effective_level)
        for handler in logger.handlers:
            handler.setLevel(_effective_level)
