"""AsyncResult: fluent composition of awaitable Results.

AsyncResult wraps an ``Awaitable[Result[T, E]]``. Each method returns a new
AsyncResult, so a pipeline of sync and async steps is built up front and runs
when the final AsyncResult is awaited. Every step delegates to the
corresponding Result method, so the async chain has exactly the synchronous
semantics, including the auto-flatten of ``amap``.

Example:
    ```python
    async def fetch_user(id: int) -> Result[User, str]:
        ...

    result = await (
        AsyncResult(fetch_user(1))
        .aand_then(validate_user)
        .amap(format_response)
    )
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Coroutine, Generator
from typing import Any

import anyio

from fallible.result import Err, Ok, Result

__all__ = ['AsyncResult']


class AsyncResult[T, E]:
    """Async-aware Result wrapper for composing async Result operations.

    Note:
        AsyncResult is single-shot when wrapping a coroutine object.
        Coroutines can only be awaited once; awaiting the same AsyncResult
        twice raises RuntimeError. Use from_ok/from_err/from_result for
        fresh values, or wrap a Task/Future for multi-await scenarios.

    Example:
        ```python
        async def get_data() -> Result[int, str]:
            return Ok(42)

        async def main():
            result = await AsyncResult(get_data()).amap(lambda x: x * 2)
            assert result == Ok(84)
        ```
    """

    __slots__ = ('_awaitable',)

    def __init__(self, awaitable: Awaitable[Result[T, E]]) -> None:
        """Create an AsyncResult from an awaitable.

        Args:
            awaitable: An awaitable that produces a Result[T, E].
        """
        self._awaitable = awaitable

    def __await__(self) -> Generator[Any, Any, Result[T, E]]:
        return self._awaitable.__await__()

    @classmethod
    def from_ok(cls, value: T) -> AsyncResult[T, E]:
        """Create an AsyncResult resolving to Ok(value)."""

        async def _ok() -> Result[T, E]:
            return Ok(value)

        return cls(_ok())

    @classmethod
    def from_err(cls, error: E) -> AsyncResult[T, E]:
        """Create an AsyncResult resolving to Err(error)."""

        async def _err() -> Result[T, E]:
            return Err(error)

        return cls(_err())

    @classmethod
    def from_result(cls, result: Result[T, E]) -> AsyncResult[T, E]:
        """Create an AsyncResult resolving to an existing Result."""

        async def _result() -> Result[T, E]:
            return result

        return cls(_result())

    def amap[U](self, f: Callable[[T], U]) -> AsyncResult[U, Any]:
        """Apply a sync function to the Ok value.

        Example:
            ```python
            async def example():
                result = await AsyncResult.from_ok(5).amap(lambda x: x * 2)
                assert result == Ok(10)
            ```
        """

        async def _mapped() -> Result[U, Any]:
            return (await self._awaitable).map(f)

        return AsyncResult(_mapped())

    def amap_async[U](self, f: Callable[[T], Awaitable[U]]) -> AsyncResult[U, Any]:
        """Apply an async function to the Ok value; f is not awaited on Err."""

        async def _mapped() -> Result[U, Any]:
            return await (await self._awaitable).map_async(f)

        return AsyncResult(_mapped())

    def amap_err[F](self, f: Callable[[E], F]) -> AsyncResult[T, F]:
        """Apply a sync function to the Err value."""

        async def _mapped() -> Result[T, F]:
            return (await self._awaitable).map_err(f)

        return AsyncResult(_mapped())

    def amap_err_async[F](self, f: Callable[[E], Awaitable[F]]) -> AsyncResult[T, F]:
        """Apply an async function to the Err value; f is not awaited on Ok."""

        async def _mapped() -> Result[T, F]:
            return await (await self._awaitable).map_err_async(f)

        return AsyncResult(_mapped())

    def afilter(
        self,
        pred: Callable[[T], bool],
        on_reject: Callable[[T], Any] | None = None,
    ) -> AsyncResult[T, Any]:
        """Keep the Ok value only if pred holds (see Ok.filter)."""

        async def _filtered() -> Result[T, Any]:
            return (await self._awaitable).filter(pred, on_reject)

        return AsyncResult(_filtered())

    def aand_then[U](self, f: Callable[[T], Result[U, E]]) -> AsyncResult[U, E]:
        """Chain with a sync function that returns a Result.

        Example:
            ```python
            def validate(x: int) -> Result[int, str]:
                return Ok(x) if x > 0 else Err('not positive')

            async def example():
                assert await AsyncResult.from_ok(5).aand_then(validate) == Ok(5)
            ```
        """

        async def _chained() -> Result[U, E]:
            return (await self._awaitable).and_then(f)

        return AsyncResult(_chained())

    def aand_then_async[U](self, f: Callable[[T], Awaitable[Result[U, E]]]) -> AsyncResult[U, E]:
        """Chain with an async function that returns a Result."""

        async def _chained() -> Result[U, E]:
            return await (await self._awaitable).and_then_async(f)

        return AsyncResult(_chained())

    def aor_else[F](self, f: Callable[[E], Result[T, F]]) -> AsyncResult[T, F]:
        """Recover from an Err with a sync function."""

        async def _recovered() -> Result[T, F]:
            return (await self._awaitable).or_else(f)

        return AsyncResult(_recovered())

    def aor_else_async[F](self, f: Callable[[E], Awaitable[Result[T, F]]]) -> AsyncResult[T, F]:
        """Recover from an Err with an async function."""

        async def _recovered() -> Result[T, F]:
            return await (await self._awaitable).or_else_async(f)

        return AsyncResult(_recovered())

    def aunwrap_or(self, default: T) -> Coroutine[Any, Any, T]:
        """Coroutine producing the Ok value or the default."""

        async def _unwrap() -> T:
            return (await self._awaitable).value_or(default)

        return _unwrap()

    def aunwrap_or_else(self, f: Callable[[E], T]) -> Coroutine[Any, Any, T]:
        """Coroutine producing the Ok value or f(error)."""

        async def _unwrap() -> T:
            return (await self._awaitable).value_or_else(f)

        return _unwrap()

    def amatch[L, R](self, *, ok: Callable[[T], L], err: Callable[[E], R]) -> Coroutine[Any, Any, L | R]:
        """Coroutine dispatching the settled Result to ok or err."""

        async def _matched() -> L | R:
            return (await self._awaitable).match(ok=ok, err=err)

        return _matched()

    def azip[U](self, other: AsyncResult[U, E]) -> AsyncResult[tuple[T, U], E]:
        """Combine two AsyncResults into a tuple.

        Both sides run concurrently. If self resolves to Err it wins, otherwise
        other's Err wins, regardless of which finished first.
        """

        async def _zipped() -> Result[tuple[T, U], E]:
            result1: Result[T, E] | None = None
            result2: Result[U, E] | None = None

            async with anyio.create_task_group() as tg:

                async def run_self() -> None:
                    nonlocal result1
                    result1 = await self._awaitable

                async def run_other() -> None:
                    nonlocal result2
                    result2 = await other._awaitable

                tg.start_soon(run_self)
                tg.start_soon(run_other)

            assert result1 is not None
            assert result2 is not None
            return result1.zip(result2)

        return AsyncResult(_zipped())

    def __repr__(self) -> str:
        return f'AsyncResult({self._awaitable!r})'
