"""Result type: Ok[T] | Err[E] for explicit handling of fallible computations.

A Result is exactly one of two frozen variants. ``Ok`` carries the success
payload on ``value``; ``Err`` carries the failure payload on ``error``. Every
operation returns a new instance, and each variant answers every method so
callers never branch on ``None`` or catch exceptions for expected failures.

Example:
    ```python
    from fallible import Err, Ok, Result

    def parse_port(raw: str) -> Result[int, str]:
        if not raw.isdigit():
            return Err(f'not a number: {raw}')
        return Ok(int(raw))

    parse_port('8080').map(lambda p: p + 1)  # Ok(value=8081)
    parse_port('http').value_or(80)  # 80

    match parse_port('443'):
        case Ok(port):
            ...
        case Err(reason):
            ...
    ```

Note:
    ``map`` auto-flattens: when the mapper itself returns a Result, that
    Result is returned as-is instead of ``Ok(Ok(...))``. ``map_err`` never
    flattens.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable, Iterator
from typing import Any, NoReturn, TypeIs

import msgspec

from fallible._utils import display_value
from fallible.exceptions import FailureRaised, MatchHandlerError, NotAResultError, UnwrapError

__all__ = ['Err', 'Failure', 'Ok', 'Result', 'Success', 'is_result']


def is_result(value: object) -> TypeIs[Ok[Any] | Err[Any]]:
    """Return True if value is an Ok or Err instance.

    Examples:
        >>> is_result(Ok(1))
        True
        >>> is_result({'type': 'ok', 'value': 1})
        False
    """
    return isinstance(value, Ok | Err)


def _require_result(operation: str, value: Any) -> None:
    if not isinstance(value, Ok | Err):
        raise NotAResultError(operation, value)


def _check_handlers(ok: Any, err: Any) -> None:
    if not callable(ok):
        raise MatchHandlerError('ok', ok)
    if not callable(err):
        raise MatchHandlerError('err', err)


def _unwrap_error(message: str, payload: Any) -> UnwrapError:
    exc = UnwrapError(message, payload)
    if isinstance(payload, BaseException):
        exc.__cause__ = payload
    return exc


def _close(awaitable: Awaitable[Any]) -> None:
    # Operand that will never be awaited. Only coroutines are closed; other
    # awaitables (tasks, futures) belong to the caller.
    from fallible.async_.result import AsyncResult

    while isinstance(awaitable, AsyncResult):
        awaitable = awaitable._awaitable  # noqa: SLF001
    if inspect.iscoroutine(awaitable):
        awaitable.close()


class Ok[T](msgspec.Struct, frozen=True):
    """Success variant of Result containing a value of type T.

    Examples:
        >>> ok = Ok(42)
        >>> ok.unwrap()
        42
        >>> ok.map(lambda x: x * 2)
        Ok(value=84)
        >>> ok.error is None
        True
    """

    value: T

    # ---- checking -----------------------------------------------------

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True since this is Ok.

        Narrows the type to Ok[T] for type checkers.
        """
        return True

    def is_err(self) -> TypeIs[Err[Any]]:
        """Return False since this is Ok."""
        return False

    def is_ok_and(self, pred: Callable[[T], bool]) -> bool:
        """Return True if the value satisfies pred."""
        return bool(pred(self.value))

    def is_err_and(self, pred: Callable[[Any], bool]) -> bool:  # noqa: ARG002
        """Return False since this is Ok; pred is not called."""
        return False

    # ---- extracting ---------------------------------------------------

    @property
    def error(self) -> None:
        """Ok carries no error."""
        return None

    def unwrap(self) -> T:
        """Return the contained Ok value."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise since this is Ok.

        Raises:
            UnwrapError: Always, with the Ok value attached as ``cause``.
        """
        raise _unwrap_error(f'Called unwrap_err on Ok: {self.value!r}', self.value)

    def expect(self, msg: str) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the message."""
        return self.value

    def expect_err(self, msg: str) -> NoReturn:
        """Raise with a custom message since this is Ok.

        Raises:
            UnwrapError: Always, with the Ok value attached as ``cause``.
        """
        raise _unwrap_error(f'{msg}: {self.value!r}', self.value)

    def value_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def value_or_else(self, f: Callable[[Any], T]) -> T:  # noqa: ARG002
        """Return the contained Ok value; the fallback is not called."""
        return self.value

    unwrap_or = value_or
    unwrap_or_else = value_or_else

    # ---- transforming -------------------------------------------------

    def map[U](self, f: Callable[[T], U]) -> Ok[U] | Err[Any]:
        """Apply f to the contained value.

        If f returns a Result, it is returned directly rather than nested.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok(f(value)), or the Result f returned.
        """
        result = f(self.value)
        if isinstance(result, Ok | Err):
            return result
        return Ok(result)

    def map_err(self, f: Callable[[Any], Any]) -> Ok[T]:  # noqa: ARG002
        """Return self unchanged since this is Ok."""
        return self

    def map_or[U](self, f: Callable[[T], U], default: U) -> U:  # noqa: ARG002
        """Return f(value); the default is unused for Ok."""
        return f(self.value)

    def map_or_else[U](self, ok_fn: Callable[[T], U], err_fn: Callable[[Any], U]) -> U:  # noqa: ARG002
        """Return ok_fn(value)."""
        return ok_fn(self.value)

    def filter(
        self,
        pred: Callable[[T], bool],
        on_reject: Callable[[T], Any] | None = None,
    ) -> Ok[T] | Err[Any]:
        """Keep the value if pred holds, otherwise turn it into an Err.

        Args:
            pred: Predicate applied to the value.
            on_reject: Builds the error from the rejected value. Without it the
                error is a ValueError naming the rejected value.

        Returns:
            self if pred(value) is truthy, else Err(rejection).
        """
        if pred(self.value):
            return self
        if on_reject is not None:
            return Err(on_reject(self.value))
        return Err(ValueError(f'Filter predicate failed for value: {display_value(self.value)}'))

    def flatten(self) -> Ok[Any] | Err[Any]:
        """Collapse Ok(Result) into the inner Result.

        Raises:
            NotAResultError: If the contained value is not a Result.
        """
        _require_result('flatten()', self.value)
        return self.value  # type: ignore[return-value]

    # ---- chaining -----------------------------------------------------

    def and_then[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Return f(value). Also known as flatmap or bind."""
        return f(self.value)

    def or_else(self, f: Callable[[Any], Any]) -> Ok[T]:  # noqa: ARG002
        """Return self unchanged since this is Ok."""
        return self

    def and_[U, E](self, other: Ok[U] | Err[E]) -> Ok[U] | Err[E]:
        """Return other, discarding this value."""
        _require_result('and_()', other)
        return other

    def or_(self, other: Ok[Any] | Err[Any]) -> Ok[T]:
        """Return self since this is Ok."""
        _require_result('or_()', other)
        return self

    def zip[U, F](self, other: Ok[U] | Err[F]) -> Ok[tuple[T, U]] | Err[F]:
        """Combine with another Result into Ok((self.value, other.value)).

        If other is Err, that Err is returned.
        """
        _require_result('zip()', other)
        if isinstance(other, Ok):
            return Ok((self.value, other.value))
        return other

    # ---- inspecting ---------------------------------------------------

    def match[L, R](self, *, ok: Callable[[T], L], err: Callable[[Any], R]) -> L | R:
        """Dispatch to the ok handler.

        Raises:
            MatchHandlerError: If either handler is not callable.
        """
        _check_handlers(ok, err)
        return ok(self.value)

    def inspect(self, f: Callable[[T], Any]) -> Ok[T]:
        """Call f with the value for side effects and return self."""
        f(self.value)
        return self

    def inspect_err(self, f: Callable[[Any], Any]) -> Ok[T]:  # noqa: ARG002
        """Return self unchanged since this is Ok."""
        return self

    def contains(self, x: Any, comparator: Callable[[T, Any], bool] | None = None) -> bool:
        """Return True if the value equals x (or comparator(value, x) holds)."""
        if comparator is not None:
            return bool(comparator(self.value, x))
        return self.value == x

    def contains_err(self, x: Any, comparator: Callable[[Any, Any], bool] | None = None) -> bool:  # noqa: ARG002
        """Return False since this is Ok."""
        return False

    def iter(self) -> Iterator[T]:
        """Yield the contained value."""
        yield self.value

    # ---- converting ---------------------------------------------------

    async def to_future(self) -> T:
        """Resolve to the contained value."""
        return self.value

    def to_dict(self) -> dict[str, Any]:
        """Return the tagged record ``{'type': 'ok', 'value': value}``."""
        return {'type': 'ok', 'value': self.value}

    def __str__(self) -> str:
        return f'Success({self.value})'

    # ---- async mirror -------------------------------------------------

    async def map_async[U](self, f: Callable[[T], Awaitable[U]]) -> Ok[U] | Err[Any]:
        """Await f(value); auto-flattens like map()."""
        result = await f(self.value)
        if isinstance(result, Ok | Err):
            return result
        return Ok(result)

    async def map_err_async(self, f: Callable[[Any], Awaitable[Any]]) -> Ok[T]:  # noqa: ARG002
        """Return self unchanged since this is Ok."""
        return self

    async def map_or_async[U](self, f: Callable[[T], Awaitable[U]], default: U) -> U:  # noqa: ARG002
        """Await f(value)."""
        return await f(self.value)

    async def map_or_else_async[U](
        self,
        ok_fn: Callable[[T], Awaitable[U]],
        err_fn: Callable[[Any], Awaitable[U]],  # noqa: ARG002
    ) -> U:
        """Await ok_fn(value)."""
        return await ok_fn(self.value)

    async def filter_async(
        self,
        pred: Callable[[T], Awaitable[bool]],
        on_reject: Callable[[T], Any] | None = None,
    ) -> Ok[T] | Err[Any]:
        """Async counterpart of filter() with an awaitable predicate."""
        if await pred(self.value):
            return self
        if on_reject is not None:
            return Err(on_reject(self.value))
        return Err(ValueError(f'Filter predicate failed for value: {display_value(self.value)}'))

    async def and_then_async[U, E](
        self, f: Callable[[T], Awaitable[Ok[U] | Err[E]]]
    ) -> Ok[U] | Err[E]:
        """Await f(value)."""
        return await f(self.value)

    async def or_else_async(self, f: Callable[[Any], Awaitable[Any]]) -> Ok[T]:  # noqa: ARG002
        """Return self unchanged since this is Ok."""
        return self

    async def and_async[U, E](self, other: Awaitable[Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Await and return other."""
        result = await other
        _require_result('and_async()', result)
        return result

    async def or_async(self, other: Awaitable[Ok[Any] | Err[Any]]) -> Ok[T]:
        """Return self; other is closed without being awaited."""
        _close(other)
        return self

    async def zip_async[U, F](self, other: Awaitable[Ok[U] | Err[F]]) -> Ok[tuple[T, U]] | Err[F]:
        """Await other, then zip()."""
        return self.zip(await other)

    async def value_or_else_async(self, f: Callable[[Any], Awaitable[T]]) -> T:  # noqa: ARG002
        """Return the contained Ok value."""
        return self.value


class Err[E](msgspec.Struct, frozen=True):
    """Error variant of Result containing an error of type E.

    Examples:
        >>> err = Err('something went wrong')
        >>> err.is_err()
        True
        >>> err.value_or(0)
        0
        >>> err.value is None
        True
    """

    error: E

    # ---- checking -----------------------------------------------------

    def is_ok(self) -> TypeIs[Ok[Any]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True since this is Err.

        Narrows the type to Err[E] for type checkers.
        """
        return True

    def is_ok_and(self, pred: Callable[[Any], bool]) -> bool:  # noqa: ARG002
        """Return False since this is Err; pred is not called."""
        return False

    def is_err_and(self, pred: Callable[[E], bool]) -> bool:
        """Return True if the error satisfies pred."""
        return bool(pred(self.error))

    # ---- extracting ---------------------------------------------------

    @property
    def value(self) -> None:
        """Err carries no value."""
        return None

    def unwrap(self) -> NoReturn:
        """Raise since this is Err.

        Raises:
            UnwrapError: Always, with the error attached as ``cause``.
        """
        raise _unwrap_error(f'Called unwrap on Err: {self.error!r}', self.error)

    def unwrap_err(self) -> E:
        """Return the contained error."""
        return self.error

    def expect(self, msg: str) -> NoReturn:
        """Raise with a custom message since this is Err.

        Raises:
            UnwrapError: Always, with the error attached as ``cause``.
        """
        raise _unwrap_error(f'{msg}: {self.error!r}', self.error)

    def expect_err(self, msg: str) -> E:  # noqa: ARG002
        """Return the contained error, ignoring the message."""
        return self.error

    def value_or[T](self, default: T) -> T:
        """Return the default since this is Err."""
        return default

    def value_or_else[T](self, f: Callable[[E], T]) -> T:
        """Compute a value from the error."""
        return f(self.error)

    unwrap_or = value_or
    unwrap_or_else = value_or_else

    # ---- transforming -------------------------------------------------

    def map(self, f: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        """Return self unchanged since this is Err."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Return Err(f(error))."""
        return Err(f(self.error))

    def map_or[U](self, f: Callable[[Any], U], default: U) -> U:  # noqa: ARG002
        """Return the default since this is Err."""
        return default

    def map_or_else[U](self, ok_fn: Callable[[Any], U], err_fn: Callable[[E], U]) -> U:  # noqa: ARG002
        """Return err_fn(error)."""
        return err_fn(self.error)

    def filter(
        self,
        pred: Callable[[Any], bool],  # noqa: ARG002
        on_reject: Callable[[Any], Any] | None = None,  # noqa: ARG002
    ) -> Err[E]:
        """Return self unchanged; the predicate is not called."""
        return self

    def flatten(self) -> Err[E]:
        """Return self since there is nothing to flatten."""
        return self

    # ---- chaining -----------------------------------------------------

    def and_then(self, f: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        """Return self unchanged; f is not called."""
        return self

    def or_else[T, F](self, f: Callable[[E], Ok[T] | Err[F]]) -> Ok[T] | Err[F]:
        """Return f(error) to recover from the failure."""
        return f(self.error)

    def and_(self, other: Ok[Any] | Err[Any]) -> Err[E]:
        """Return self since this is Err."""
        _require_result('and_()', other)
        return self

    def or_[T, F](self, other: Ok[T] | Err[F]) -> Ok[T] | Err[F]:
        """Return other since this is Err."""
        _require_result('or_()', other)
        return other

    def zip(self, other: Ok[Any] | Err[Any]) -> Err[E]:
        """Return self; the receiver's failure takes priority."""
        _require_result('zip()', other)
        return self

    # ---- inspecting ---------------------------------------------------

    def match[L, R](self, *, ok: Callable[[Any], L], err: Callable[[E], R]) -> L | R:
        """Dispatch to the err handler.

        Raises:
            MatchHandlerError: If either handler is not callable.
        """
        _check_handlers(ok, err)
        return err(self.error)

    def inspect(self, f: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        """Return self unchanged since this is Err."""
        return self

    def inspect_err(self, f: Callable[[E], Any]) -> Err[E]:
        """Call f with the error for side effects and return self."""
        f(self.error)
        return self

    def contains(self, x: Any, comparator: Callable[[Any, Any], bool] | None = None) -> bool:  # noqa: ARG002
        """Return False since this is Err."""
        return False

    def contains_err(self, x: Any, comparator: Callable[[E, Any], bool] | None = None) -> bool:
        """Return True if the error equals x (or comparator(error, x) holds)."""
        if comparator is not None:
            return bool(comparator(self.error, x))
        return self.error == x

    def iter(self) -> Iterator[Any]:
        """Yield nothing."""
        yield from ()

    # ---- converting ---------------------------------------------------

    async def to_future(self) -> NoReturn:
        """Raise the contained error.

        Raises:
            E: The error itself when it is an exception.
            FailureRaised: Wrapping the raw error otherwise.
        """
        if isinstance(self.error, BaseException):
            raise self.error
        raise FailureRaised(self.error)

    def to_dict(self) -> dict[str, Any]:
        """Return the tagged record ``{'type': 'err', 'error': error}``."""
        return {'type': 'err', 'error': self.error}

    def __str__(self) -> str:
        return f'Failure({self.error})'

    # ---- async mirror -------------------------------------------------

    async def map_async(self, f: Callable[[Any], Awaitable[Any]]) -> Err[E]:  # noqa: ARG002
        """Return self unchanged since this is Err."""
        return self

    async def map_err_async[F](self, f: Callable[[E], Awaitable[F]]) -> Err[F]:
        """Return Err(await f(error))."""
        return Err(await f(self.error))

    async def map_or_async[U](self, f: Callable[[Any], Awaitable[U]], default: U) -> U:  # noqa: ARG002
        """Return the default since this is Err."""
        return default

    async def map_or_else_async[U](
        self,
        ok_fn: Callable[[Any], Awaitable[U]],  # noqa: ARG002
        err_fn: Callable[[E], Awaitable[U]],
    ) -> U:
        """Await err_fn(error)."""
        return await err_fn(self.error)

    async def filter_async(
        self,
        pred: Callable[[Any], Awaitable[bool]],  # noqa: ARG002
        on_reject: Callable[[Any], Any] | None = None,  # noqa: ARG002
    ) -> Err[E]:
        """Return self unchanged; the predicate is not awaited."""
        return self

    async def and_then_async(self, f: Callable[[Any], Awaitable[Any]]) -> Err[E]:  # noqa: ARG002
        """Return self unchanged; f is not called."""
        return self

    async def or_else_async[T, F](self, f: Callable[[E], Awaitable[Ok[T] | Err[F]]]) -> Ok[T] | Err[F]:
        """Await f(error)."""
        return await f(self.error)

    async def and_async(self, other: Awaitable[Ok[Any] | Err[Any]]) -> Err[E]:
        """Return self; other is closed without being awaited."""
        _close(other)
        return self

    async def or_async[T, F](self, other: Awaitable[Ok[T] | Err[F]]) -> Ok[T] | Err[F]:
        """Await and return other."""
        result = await other
        _require_result('or_async()', result)
        return result

    async def zip_async(self, other: Awaitable[Ok[Any] | Err[Any]]) -> Err[E]:
        """Return self; other is closed without being awaited."""
        _close(other)
        return self

    async def value_or_else_async[T](self, f: Callable[[E], Awaitable[T]]) -> T:
        """Await f(error)."""
        return await f(self.error)


type Result[T, E = Exception] = Ok[T] | Err[E]

Success = Ok
Failure = Err
