"""Async collection combinators.

Each function resolves every awaitable concurrently in an anyio task group,
then applies the same aggregation as its synchronous counterpart over the
settled Results in input order. Completion order never affects the outcome.

Example:
    ```python
    async def fetch(id: int) -> Result[dict, str]:
        ...

    async def main():
        users = await combine_all_async([fetch(1), fetch(2), fetch(3)])
        mirror = await first_success_async([primary(), replica()], limit=1)
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Iterable
from typing import Any

import aiologic
import anyio

from fallible.combinators import (
    SettledOutcome,
    combine_all,
    errors,
    first_success,
    partition,
    settle_all,
    values,
)
from fallible.result import Ok, Result

__all__ = [
    'combine_all_async',
    'errors_async',
    'first_success_async',
    'gather_results',
    'partition_async',
    'settle_all_async',
    'values_async',
]


async def gather_results[T, E](
    awaitables: Iterable[Awaitable[Result[T, E]]],
    *,
    limit: int | None = None,
) -> list[Result[T, E]]:
    """Await every awaitable concurrently and return the Results in input order.

    Note:
        The awaitables iterable is eagerly materialized into a list. An
        exception raised by any awaitable cancels the others and propagates
        from the task group as an ExceptionGroup.

    Args:
        awaitables: Awaitables that produce Result values.
        limit: Maximum number of awaitables in flight. None means unlimited.

    Returns:
        The Results, positioned as their awaitables were.
    """
    awaitable_list = list(awaitables)
    results: list[Result[T, E] | None] = [None] * len(awaitable_list)
    limiter = aiologic.CapacityLimiter(limit) if limit is not None else None

    async def run_one(i: int, aw: Awaitable[Result[T, E]]) -> None:
        if limiter is None:
            results[i] = await aw
            return
        async with limiter:
            results[i] = await aw

    async with anyio.create_task_group() as tg:
        for i, aw in enumerate(awaitable_list):
            tg.start_soon(run_one, i, aw)

    return results  # type: ignore[return-value]


async def combine_all_async[T, E](
    awaitables: Iterable[Awaitable[Result[T, E]]],
    *,
    limit: int | None = None,
) -> Result[list[T], E]:
    """Fail-fast over concurrently resolved Results.

    Returns:
        Ok(list[T]) if all are Ok, otherwise the first Err by input order.

    Example:
        ```python
        async def get_value(n: int) -> Result[int, str]:
            return Ok(n * 2)

        async def example():
            assert await combine_all_async([get_value(1), get_value(2)]) == Ok([2, 4])
        ```
    """
    return combine_all(await gather_results(awaitables, limit=limit))


async def first_success_async[T, E](
    awaitables: Iterable[Awaitable[Result[T, E]]],
    *,
    limit: int | None = None,
) -> Result[T, list[E]]:
    """First Ok by input order, or Err with every error in input order."""
    return first_success(await gather_results(awaitables, limit=limit))


async def partition_async[T, E](
    awaitables: Iterable[Awaitable[Result[T, E]]],
    *,
    limit: int | None = None,
) -> tuple[list[T], list[E]]:
    """Partition concurrently resolved Results into (ok_values, err_values)."""
    return partition(await gather_results(awaitables, limit=limit))


async def settle_all_async[T, E](
    awaitables: Iterable[Awaitable[Result[T, E]]],
    *,
    limit: int | None = None,
) -> Ok[list[SettledOutcome[T, E]]]:
    """Describe every concurrently resolved Result as a SettledOutcome."""
    return settle_all(await gather_results(awaitables, limit=limit))


async def values_async[T](
    awaitables: Iterable[Awaitable[Result[T, Any]]],
    *,
    limit: int | None = None,
) -> list[T]:
    """Ok values of concurrently resolved Results, in input order."""
    return values(await gather_results(awaitables, limit=limit))


async def errors_async[E](
    awaitables: Iterable[Awaitable[Result[Any, E]]],
    *,
    limit: int | None = None,
) -> list[E]:
    """Err errors of concurrently resolved Results, in input order."""
    return errors(await gather_results(awaitables, limit=limit))
