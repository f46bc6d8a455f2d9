"""Observability for the kill-feed and scoring engine.

Configures structlog once for the process and provides the
``engine_debug_wrapper`` decorator used on engine entry points.
"""

import functools
import logging
import sys
import time
import traceback
from collections.abc import Callable
from typing import Any, TypeVar, cast

import structlog
from structlog.contextvars import bind_contextvars, bound_contextvars, unbind_contextvars

from src.config.settings import get_settings

# Configure structured logging
structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.dev.ConsoleRenderer() if sys.stderr.isatty() else structlog.processors.JSONRenderer(),  # type: ignore[list-item]
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)

logging.getLogger("src").setLevel(get_settings().app_log_level.upper())

logger = structlog.get_logger("src.engine")

# Type variable for generic decorator
F = TypeVar("F", bound=Callable[..., Any])


def set_correlation_id(correlation_id: str) -> None:
    """Bind a caller-owned id (e.g. match id + poll sequence) to all engine logs."""
    bind_contextvars(correlation_id=correlation_id)


def clear_correlation_id() -> None:
    unbind_contextvars("correlation_id")


def configure_logging(level: str | None = None) -> None:
    """Attach a stderr handler and apply ``APP_LOG_LEVEL`` to the ``src`` loggers.

    Entry points call this once; importing the engine only sets the level.
    """
    logging.basicConfig(format="%(message)s", stream=sys.stderr)
    logging.getLogger("src").setLevel((level or get_settings().app_log_level).upper())


def _describe(value: Any) -> Any:
    """Summarize an argument without dumping whole timelines into the log."""
    if isinstance(value, (list, tuple, dict)):
        return f"{type(value).__name__}[{len(value)}]"
    if isinstance(value, (int, float, str, bool)) or value is None:
        return value
    return type(value).__name__


def engine_debug_wrapper(
    *,
    capture_args: bool = False,
    log_level: str = "debug",
) -> Callable[[F], F]:
    """Decorator logging entry, duration and failures of an engine call.

    Exceptions are logged with their traceback and re-raised unchanged.
    Tracing is skipped entirely when ``ENGINE_TRACE_ENABLED`` is false.
    """

    def decorator(func: F) -> F:
        function_name = f"{func.__module__}.{func.__name__}"

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            if not get_settings().engine_trace_enabled:
                return func(*args, **kwargs)

            execution_id = f"{function_name}_{int(time.time() * 1000000)}"
            emit = getattr(logger, log_level.lower())

            # Nested traced calls restore the caller's execution_id on exit
            with bound_contextvars(execution_id=execution_id):
                if capture_args:
                    emit(
                        "engine_call_started",
                        execution_id=execution_id,
                        function_name=function_name,
                        args=[_describe(a) for a in args],
                        kwargs={k: _describe(v) for k, v in kwargs.items()},
                    )
                else:
                    emit(
                        "engine_call_started",
                        execution_id=execution_id,
                        function_name=function_name,
                    )

                start_time = time.perf_counter()
                try:
                    result = func(*args, **kwargs)
                except Exception as e:
                    logger.error(
                        "engine_call_failed",
                        execution_id=execution_id,
                        function_name=function_name,
                        duration_ms=(time.perf_counter() - start_time) * 1000,
                        error_type=type(e).__name__,
                        error_message=str(e),
                        traceback=traceback.format_exc(),
                    )
                    raise

                emit(
                    "engine_call_finished",
                    execution_id=execution_id,
                    function_name=function_name,
                    duration_ms=(time.perf_counter() - start_time) * 1000,
                    result=_describe(result),
                )
                return result

        return cast(F, wrapper)

    return decorator


def trace_performance(func: F) -> F:
    """Decorator focused on performance monitoring."""
    return engine_debug_wrapper(capture_args=False, log_level="debug")(func)


def trace_critical(func: F) -> F:
    """Decorator for caller-facing entry points with argument summaries."""
    return engine_debug_wrapper(capture_args=True, log_level="info")(func)
