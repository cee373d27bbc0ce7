from __future__ import annotations
import logging
import os


# Defaults
_DEFAULT_RECURSION_LIMIT = 10000
_DEFAULT_LOG_LEVEL = 'WARNING'


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}")


def get_recursion_limit() -> int:
    return int_from_env('LUMEN_RECURSION_LIMIT', _DEFAULT_RECURSION_LIMIT)


def get_log_level() -> str:
    raw = os.environ.get('LUMEN_LOG_LEVEL')
    return raw.strip().upper() if raw and raw.strip() else _DEFAULT_LOG_LEVEL


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Apply a level to the `lumen` logger hierarchy and give it a stderr handler once."""
    logger = logging.getLogger('lumen')
    logger.setLevel(level if level is not None else get_log_level())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter('%(levelname)s %(name)s: %(message)s'))
        logger.addHandler(handler)
    return logger
