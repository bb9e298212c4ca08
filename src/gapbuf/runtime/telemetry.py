"""Buffer logging on top of telelog.

Only storage-level events are logged: growth (profiled as a span) and
explicit ``debug()`` dumps. Per-element edits and cursor moves stay silent.

Settings come from ``GAPBUF_LOG_LEVEL`` (default ``INFO``),
``GAPBUF_LOG_FILE`` and ``GAPBUF_NO_COLOR``, or from ``configure(...)``.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Any, Dict, Iterator, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "GAPBUF_"
DEFAULT_LOGGER_NAME = "gapbuf"

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


def _build_config(level: Optional[str] = None) -> Any:
    config = tl.Config()
    config.with_min_level(
        (level or os.getenv(f"{ENV_PREFIX}LOG_LEVEL") or "INFO").upper()
    )
    config.with_console_output(True)
    config.with_colored_output(not os.getenv(f"{ENV_PREFIX}NO_COLOR"))
    log_file = os.getenv(f"{ENV_PREFIX}LOG_FILE")
    if log_file:
        config.with_file_output(log_file)
    config.with_profiling(True)
    return config


def configure(*, config: Optional[Any] = None, level: Optional[str] = None) -> None:
    """Swap the telelog config used by buffer loggers.

    Pass a ready ``tl.Config`` or just a minimum ``level``; with neither the
    environment settings are re-read. Cached loggers are dropped.
    """

    global _ACTIVE_CONFIG
    if config is not None and level is not None:
        raise ValueError("Provide either `config` or `level`, not both.")
    _ACTIVE_CONFIG = config if config is not None else _build_config(level)
    _LOGGER_CACHE.clear()


def get_logger(name: Optional[str] = None) -> Any:
    global _ACTIVE_CONFIG
    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _LOGGER_CACHE:
        if _ACTIVE_CONFIG is None:
            _ACTIVE_CONFIG = _build_config()
        _LOGGER_CACHE[logger_name] = tl.Logger.with_config(
            logger_name, _ACTIVE_CONFIG
        )
    return _LOGGER_CACHE[logger_name]


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit ``event::<name>`` with ``data`` as string key/value pairs."""

    log = get_logger(logger_name)
    pairs = [("event", name)] + [(str(k), str(v)) for k, v in (data or {}).items()]
    with_data = getattr(log, f"{level.lower()}_with", None)
    if with_data is not None:
        with_data(f"event::{name}", pairs)
        return
    plain = getattr(log, level.lower(), None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"event::{name} {dict(pairs)}")


@contextmanager
def span(
    name: str,
    *,
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> Iterator[None]:
    """Profile a block under ``name``; a raised error is logged, then re-raised."""

    log = get_logger(logger_name)
    with log.profile(name):
        try:
            yield
        except Exception as exc:
            record_event(
                f"{name}.failed",
                level="error",
                data={**(data or {}), "reason": exc},
                logger_name=logger_name,
            )
            raise


__all__ = ["configure", "get_logger", "record_event", "span"]
