"""
Channel-aware structured logging for domnest.

Every logger belongs to one channel:
- MODEL: ruleset loading and content-model construction
- CHECK: tree checking, violations found, per-file timing
- REPORT: result formatting and output
- SYSTEM: errors, warnings, status

Verbosity runs silent < info < verbose < debug. Errors and warnings are
emitted on every channel unless logging is silent.

Environment defaults, used when ``configure_logging`` gets no argument:
- DOMNEST_LOG_LEVEL: silent/info/verbose/debug
- DOMNEST_LOG_FORMAT: console/json
- DOMNEST_LOG_CHANNELS: comma-separated channel names (all if unset)

Output goes to stderr; stdout carries check results only.
"""

import logging
import os
import sys
import time
from contextvars import ContextVar
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Iterable, Optional, Union

import structlog


class LogLevel(IntEnum):
    """Verbosity thresholds, lowest first."""
    SILENT = 0
    INFO = 1
    VERBOSE = 2
    DEBUG = 3


class LogChannel(str, Enum):
    """Semantic log channels."""
    MODEL = "MODEL"
    CHECK = "CHECK"
    REPORT = "REPORT"
    SYSTEM = "SYSTEM"


# stdlib names are accepted so DOMNEST_LOG_LEVEL=warning does not go quiet
_LEVEL_NAMES = {
    **{level.name.lower(): level for level in LogLevel},
    "warning": LogLevel.INFO,
    "error": LogLevel.INFO,
}

# Python logging threshold feeding the structlog stdlib wrapper
_STDLIB_LEVELS = {
    LogLevel.SILENT: logging.CRITICAL + 1,
    LogLevel.INFO: logging.INFO,
    LogLevel.VERBOSE: logging.DEBUG,
    LogLevel.DEBUG: logging.DEBUG,
}


@dataclass
class _LogState:
    level: LogLevel = LogLevel.INFO
    format: str = "console"
    channels: frozenset = field(default_factory=lambda: frozenset(LogChannel))
    configured: bool = False


_state = _LogState()

_request_context: ContextVar[dict] = ContextVar("domnest_log_context", default={})


def _parse_level(value: Union[LogLevel, str]) -> LogLevel:
    if isinstance(value, LogLevel):
        return value
    return _LEVEL_NAMES.get(value.strip().lower(), LogLevel.INFO)


def _channel(value: Union[LogChannel, str]) -> Optional[LogChannel]:
    if isinstance(value, LogChannel):
        return value
    try:
        return LogChannel(value.strip().upper())
    except ValueError:
        return None


def _parse_channels(values: Iterable[Union[LogChannel, str]]) -> frozenset:
    """Known channels among ``values``; unknown names are dropped."""
    return frozenset(ch for ch in map(_channel, values) if ch is not None)


def _renderer_chain(fmt: str) -> list:
    chain = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if fmt == "json":
        chain += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        chain.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))
    return chain


def configure_logging(
    level: Union[LogLevel, str, None] = None,
    format: Optional[str] = None,
    channels: Optional[Iterable[Union[LogChannel, str]]] = None,
    force: bool = False,
) -> None:
    """
    Configure the logging system.

    Only the first call takes effect unless ``force`` is set. Arguments left
    as None fall back to the DOMNEST_LOG_* environment variables.
    """
    if _state.configured and not force:
        return

    env = os.environ
    _state.level = _parse_level(level if level is not None else env.get("DOMNEST_LOG_LEVEL", "info"))
    _state.format = format or env.get("DOMNEST_LOG_FORMAT", "console")

    if channels is None:
        channels = [c for c in env.get("DOMNEST_LOG_CHANNELS", "").split(",") if c.strip()]
        # An empty or fully unknown env filter means every channel
        _state.channels = _parse_channels(channels) or frozenset(LogChannel)
    else:
        _state.channels = _parse_channels(channels)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=_STDLIB_LEVELS[_state.level],
        force=True,
    )
    # Not cached: the CLI reconfigures after module-level loggers exist
    structlog.configure(
        processors=_renderer_chain(_state.format),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
    _state.configured = True


class ChannelLogger:
    """
    A logger bound to one channel.

    ``info``, ``verbose`` and ``debug`` respect both the level and the
    channel filter. ``error`` and ``warning`` only go quiet when silent.
    """

    def __init__(self, channel: LogChannel, name: Optional[str] = None):
        self.channel = channel
        self.name = name or f"domnest.{channel.value.lower()}"
        self._logger = structlog.get_logger(self.name)

    def _emit(self, method: str, event: str, fields: dict, threshold: Optional[LogLevel] = None) -> None:
        if _state.level == LogLevel.SILENT:
            return
        if threshold is not None and (self.channel not in _state.channels or _state.level < threshold):
            return
        data = {"channel": self.channel.value, **fields, **_request_context.get()}
        getattr(self._logger, method)(event, **data)

    def info(self, event: str, **kwargs) -> None:
        self._emit("info", event, kwargs, LogLevel.INFO)

    def verbose(self, event: str, **kwargs) -> None:
        self._emit("debug", event, kwargs, LogLevel.VERBOSE)

    def debug(self, event: str, **kwargs) -> None:
        self._emit("debug", event, kwargs, LogLevel.DEBUG)

    def error(self, event: str, **kwargs) -> None:
        self._emit("error", event, kwargs)

    def warning(self, event: str, **kwargs) -> None:
        self._emit("warning", event, kwargs)


def get_logger(channel: Union[LogChannel, str] = LogChannel.SYSTEM) -> ChannelLogger:
    """Get a logger for ``channel``; unknown channel names map to SYSTEM."""
    configure_logging()
    return ChannelLogger(channel=_channel(channel) or LogChannel.SYSTEM)


def bind_request_context(**kwargs) -> None:
    """Add fields to every message logged from the current context."""
    _request_context.set({**_request_context.get(), **kwargs})


def clear_request_context() -> None:
    _request_context.set({})


class CheckLogger:
    """
    Request-scoped logger for a single tree check.

    Binds the request ID and source for every message in the check.
    """

    def __init__(self, request_id: str, source: Optional[str] = None):
        self.request_id = request_id
        self._log = get_logger(LogChannel.CHECK)
        self._started = time.perf_counter()

        bind_request_context(request_id=request_id, source=source)

    def check_start(self, ruleset: str) -> None:
        self._log.verbose("check_started", ruleset=ruleset)

    def violation(self, parent_tag: str, child_tag: str, line: Optional[int]) -> None:
        self._log.debug("invalid_nesting", parent=parent_tag, child=child_tag, line=line)

    def check_error(self, error: Exception) -> None:
        self._log.error("check_failed", error=str(error), error_type=type(error).__name__)

    def check_complete(self, status: str, **metrics: Any) -> None:
        """Log completion with timing, then drop the request context."""
        elapsed_ms = (time.perf_counter() - self._started) * 1000
        self._log.info("check_complete", status=status, duration_ms=round(elapsed_ms, 2), **metrics)
        clear_request_context()
