from __future__ import annotations
import logging
import os
import sys
from typing import TextIO


# Defaults
_DEFAULT_DIAGNOSTIC_STREAM = 'stderr'
_DEFAULT_MAX_DEPTH = 200
_DEFAULT_LOG_LEVEL = 'WARNING'

_STREAMS = {'stderr', 'stdout'}


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


def get_diagnostic_stream() -> TextIO:
    """Stream that print forms and the driver write to (stderr unless overridden)."""
    name = os.environ.get('SIGMA_DIAGNOSTIC_STREAM', _DEFAULT_DIAGNOSTIC_STREAM).strip().lower()
    if name not in _STREAMS:
        name = _DEFAULT_DIAGNOSTIC_STREAM
    # looked up at call time so that redirected/captured streams are honoured
    return sys.stdout if name == 'stdout' else sys.stderr


def get_max_depth() -> int:
    return int_from_env('SIGMA_MAX_DEPTH', _DEFAULT_MAX_DEPTH)


def get_log_level() -> int:
    name = os.environ.get('SIGMA_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING
