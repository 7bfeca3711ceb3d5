"""Construction entry points for Result values.

Every factory is a pure function of its arguments. ``capture_throw``,
``capture_future`` and the ``@safe`` decorators (all via ``coerce_error``) are
the only places where a raised exception is turned into an ``Err``.

Example:
    ```python
    import json

    from fallible import capture_throw, from_nullable, validate

    capture_throw(lambda: json.loads('{"a": 1}'))  # Ok(value={'a': 1})
    capture_throw(lambda: json.loads('nope'))  # Err(error=JSONDecodeError(...))

    from_nullable(users.get(42), lambda: 'user not found')
    validate(age, lambda a: a >= 18, lambda a: f'{a} is underage')
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, overload

from fallible._logging import get_logger
from fallible._utils import display_value, to_exception
from fallible.result import Err, Ok, Result, is_result

__all__ = [
    'capture_future',
    'capture_throw',
    'coerce_error',
    'err',
    'from_nullable',
    'is_result',
    'ok',
    'validate',
]

logger = get_logger(__name__)


def ok[T](value: T) -> Ok[T]:
    """Wrap a value in Ok."""
    return Ok(value)


def err[E](error: E) -> Err[E]:
    """Wrap an error in Err."""
    return Err(error)


def coerce_error(exc: Exception, on_error: Callable[[Exception], Any] | None = None) -> Any:
    """Turn a caught exception into an Err payload.

    on_error wins when supplied; otherwise the exception is coerced with
    to_exception.
    """
    logger.debug('exception captured', exc_type=type(exc).__name__, mapped=on_error is not None)
    if on_error is not None:
        return on_error(exc)
    return to_exception(exc)


@overload
def capture_throw[T](fn: Callable[[], T]) -> Result[T, Exception]: ...


@overload
def capture_throw[T, E](fn: Callable[[], T], on_error: Callable[[Exception], E]) -> Result[T, E]: ...


def capture_throw[T](fn: Callable[[], T], on_error: Callable[[Exception], Any] | None = None) -> Result[T, Any]:
    """Call fn and capture any raised Exception as an Err.

    Args:
        fn: Zero-argument callable to execute.
        on_error: Maps the caught exception to the error payload. Always wins
            over the default coercion when supplied.

    Returns:
        Ok(fn()) on success, otherwise Err(on_error(exc)) or Err(exc).

    Examples:
        >>> capture_throw(lambda: 1 / 0).is_err()
        True
        >>> capture_throw(lambda: int('x'), lambda e: 'not an int')
        Err(error='not an int')
    """
    try:
        return Ok(fn())
    except Exception as exc:  # noqa: BLE001
        return Err(coerce_error(exc, on_error))


@overload
async def capture_future[T](fn: Callable[[], Awaitable[T]] | Awaitable[T]) -> Result[T, Exception]: ...


@overload
async def capture_future[T, E](
    fn: Callable[[], Awaitable[T]] | Awaitable[T],
    on_error: Callable[[Exception], E],
) -> Result[T, E]: ...


async def capture_future[T](
    fn: Callable[[], Awaitable[T]] | Awaitable[T],
    on_error: Callable[[Exception], Any] | None = None,
) -> Result[T, Any]:
    """Await fn() (or an awaitable) and capture a raised Exception as an Err.

    Cancellation is never captured; it propagates like any BaseException.

    Args:
        fn: Zero-argument async callable, or an awaitable.
        on_error: Maps the caught exception to the error payload.

    Returns:
        Ok(await fn()) on success, otherwise Err(on_error(exc)) or Err(exc).
    """
    try:
        awaitable = fn() if callable(fn) else fn
        return Ok(await awaitable)
    except Exception as exc:  # noqa: BLE001
        return Err(coerce_error(exc, on_error))


def from_nullable[T](value: T | None, on_none: Callable[[], Any] | None = None) -> Result[T, Any]:
    """Return Ok(value) unless value is None.

    Args:
        value: Possibly-None value.
        on_none: Builds the error when value is None. Defaults to a ValueError.

    Examples:
        >>> from_nullable(0)
        Ok(value=0)
        >>> from_nullable(None, lambda: 'missing')
        Err(error='missing')
    """
    if value is None:
        return Err(on_none() if on_none is not None else ValueError('Value is None'))
    return Ok(value)


def validate[T](
    value: T,
    pred: Callable[[T], bool],
    on_invalid: Callable[[T], Any] | None = None,
) -> Result[T, Any]:
    """Return Ok(value) if pred(value) holds, otherwise an Err.

    Args:
        value: Value to validate.
        pred: Predicate the value must satisfy.
        on_invalid: Builds the error from the rejected value. Defaults to a
            ValueError naming the value.
    """
    if pred(value):
        return Ok(value)
    if on_invalid is not None:
        return Err(on_invalid(value))
    return Err(ValueError(f'Validation failed for value: {display_value(value)}'))
