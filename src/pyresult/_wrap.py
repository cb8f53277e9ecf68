"""Bridge between raising callables and `Result` values."""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable, Coroutine
from dataclasses import dataclass
from typing import Any, overload

from ._results import Err, Ok, Result

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True, eq=False)
class _Immediate[T]:
    """The callback finished during the call, successfully or not."""

    outcome: Result[T, Any]


@dataclass(slots=True, frozen=True, eq=False)
class _Deferred[T]:
    """The callback handed back an awaitable that settles later."""

    awaitable: Awaitable[T]


def _invoke[T](callback: Callable[[], T | Awaitable[T]]) -> _Immediate[T] | _Deferred[T]:
    try:
        value = callback()
    except Exception as exc:
        logger.debug(
            "captured %s raised by a %s (immediate)",
            type(exc).__name__,
            type(callback).__name__,
        )
        return _Immediate(Err(exc))
    if inspect.isawaitable(value):
        return _Deferred(value)
    return _Immediate(Ok(value))


async def _settle[T](awaitable: Awaitable[T]) -> Result[T, Any]:
    try:
        value = await awaitable
    except Exception as exc:
        logger.debug(
            "captured %s from a %s (deferred)",
            type(exc).__name__,
            type(awaitable).__name__,
        )
        return Err(exc)
    return Ok(value)


def _defer[T](
    awaitable: Awaitable[T],
) -> asyncio.Task[Result[T, Any]] | Coroutine[Any, Any, Result[T, Any]]:
    coro = _settle(awaitable)
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        # no loop to schedule on, the caller drives the coroutine
        return coro
    return asyncio.ensure_future(coro)


@overload
def wrap_exception[T](
    callback: Callable[[], Awaitable[T]],
) -> Awaitable[Result[T, Any]]: ...
@overload
def wrap_exception[T](callback: Callable[[], T]) -> Result[T, Any]: ...
def wrap_exception[T](
    callback: Callable[[], T | Awaitable[T]],
) -> Result[T, Any] | Awaitable[Result[T, Any]]:
    """Call `callback` once and capture what it raises into an `Err`.

    Whether the outcome is immediate or deferred depends on what the call actually returns, not on how `callback` is declared:

    - a plain value gives `Ok(value)`.
    - an exception raised during the call gives `Err(exc)`.
    - an awaitable gives an awaitable that resolves to `Ok(value)` or `Err(exc)` once the original one settles.

    Inside a running event loop the awaitable is an `asyncio.Task` already scheduled on that loop.
    Otherwise it is a coroutine for the caller to run.

    Only `Exception` subclasses are captured: `KeyboardInterrupt`, `SystemExit` and `asyncio.CancelledError` propagate.

    The failure type is left open so that callers can narrow it by annotation.

    Args:
        callback (Callable[[], T | Awaitable[T]]): Zero-argument callable to run.

    Returns:
        Result[T, Any] | Awaitable[Result[T, Any]]: The captured outcome, or an awaitable one.

    Example:
    ```python
    >>> import asyncio
    >>> import pyresult as pr
    >>> pr.wrap_exception(lambda: 42)
    Ok(value=42)
    >>> pr.wrap_exception(lambda: int("boom"))
    Err(error=ValueError("invalid literal for int() with base 10: 'boom'"))
    >>> async def fetch() -> str:
    ...     return "done"
    >>> asyncio.run(pr.wrap_exception(fetch))
    Ok(value='done')

    ```
    """
    match _invoke(callback):
        case _Immediate(outcome):
            return outcome
        case _Deferred(awaitable):
            return _defer(awaitable)
