import logging
from collections.abc import Callable
from typing import Any

from returns.result import Failure, Result, safe

logger = logging.getLogger(__name__)


def describe(func: Callable[..., Any]) -> str:
    """Human-readable name of a callable for log and error messages."""
    return getattr(func, "__qualname__", None) or repr(func)


def capture[T](func: Callable[..., T], *args: Any, **kwargs: Any) -> Result[T, Exception]:
    """Run `func` inside a capture boundary.

    Only `Exception` subclasses are captured; `BaseException`s such as
    `KeyboardInterrupt` or `nxkit.errors.AbortError` propagate.
    """
    result = safe(func)(*args, **kwargs)
    if isinstance(result, Failure):
        exc = result.failure()
        logger.debug("captured %s from %s: %s", type(exc).__name__, describe(func), exc)
    return result


__all__ = ["capture", "describe"]
