"""@safe and @safe_async decorators for catching exceptions into Err."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, overload

import wrapt

from fallible.factories import coerce_error
from fallible.result import Err, Ok

__all__ = ['safe', 'safe_async']


@overload
def safe[**P, T](
    func: Callable[P, T],
) -> Callable[P, Ok[T] | Err[Exception]]: ...


@overload
def safe(
    func: None = None,
    *,
    exceptions: tuple[type[Exception], ...] | None = None,
    on_error: Callable[[Exception], Any] | None = None,
) -> Callable[[Callable[..., Any]], Callable[..., Ok[Any] | Err[Any]]]: ...


def safe[**P, T](
    func: Callable[P, T] | None = None,
    *,
    exceptions: tuple[type[Exception], ...] | None = None,
    on_error: Callable[[Exception], Any] | None = None,
) -> Any:
    """Decorator that catches exceptions and returns Err.

    Wraps a function so that it returns Ok(value) on success and
    Err(...) if an exception is raised. The caught exception is coerced the
    same way capture_throw does it.

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(exceptions=(ValueError, TypeError), on_error=str)
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to catch. Defaults to (Exception,).
            Anything else propagates.
        on_error: Maps the caught exception to the error payload.

    Returns:
        A wrapped function that returns Result[T, E] instead of T.

    Example:
        ```python
        @safe
        def divide(a: int, b: int) -> float:
            return a / b

        divide(10, 2)
        # Ok(value=5.0)
        divide(10, 0)
        # Err(error=ZeroDivisionError('division by zero'))
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Ok[T] | Err[Any]:
        try:
            return Ok(wrapped(*args, **kwargs))
        except catch as e:
            return Err(coerce_error(e, on_error))

    if func is not None:
        return wrapper(func)
    return wrapper


@overload
def safe_async[**P, T](
    func: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[Ok[T] | Err[Exception]]]: ...


@overload
def safe_async(
    func: None = None,
    *,
    exceptions: tuple[type[Exception], ...] | None = None,
    on_error: Callable[[Exception], Any] | None = None,
) -> Callable[[Callable[..., Awaitable[Any]]], Callable[..., Awaitable[Ok[Any] | Err[Any]]]]: ...


def safe_async[**P, T](
    func: Callable[P, Awaitable[T]] | None = None,
    *,
    exceptions: tuple[type[Exception], ...] | None = None,
    on_error: Callable[[Exception], Any] | None = None,
) -> Any:
    """Async decorator that catches exceptions and returns Err.

    The async counterpart of @safe; the caught exception is coerced the same
    way capture_future does it.

    Example:
        ```python
        @safe_async
        async def fetch(url: str) -> bytes:
            # may raise
            return await http_get(url)
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[P, Awaitable[T]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Ok[T] | Err[Any]:
        try:
            return Ok(await wrapped(*args, **kwargs))
        except catch as e:
            return Err(coerce_error(e, on_error))

    if func is not None:
        return wrapper(func)
    return wrapper
