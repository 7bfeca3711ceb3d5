"""Combinators over collections of Results.

Three aggregation policies plus a partition:
    - combine_all: fail-fast, the first Err (by input order) wins
    - first_success: the first Ok wins, otherwise every error is collected
    - settle_all: fail-safe, every entry becomes a SettledOutcome
    - partition: split into (values, errors) preserving order

Example:
    ```python
    combine_all([Ok(1), Ok(2)])  # Ok(value=[1, 2])
    combine_all([Ok(1), Err('x'), Err('y')])  # Err(error='x')
    first_success([Err('a'), Err('b')])  # Err(error=['a', 'b'])
    partition([Ok(1), Err('a'), Ok(2)])  # ([1, 2], ['a'])
    ```
"""

from collections.abc import Iterable
from typing import Any

import msgspec

from fallible.exceptions import NotAResultError
from fallible.result import Err, Ok, Result

__all__ = [
    'SettledFailure',
    'SettledOutcome',
    'SettledSuccess',
    'combine_all',
    'errors',
    'first_success',
    'partition',
    'settle',
    'settle_all',
    'values',
]


class SettledSuccess[T](msgspec.Struct, frozen=True, tag_field='status', tag='success'):
    """Settled record of an Ok; renders as ``{'status': 'success', 'value': ...}``."""

    value: T


class SettledFailure[E](msgspec.Struct, frozen=True, tag_field='status', tag='failure'):
    """Settled record of an Err; renders as ``{'status': 'failure', 'reason': ...}``."""

    reason: E


type SettledOutcome[T, E] = SettledSuccess[T] | SettledFailure[E]


def _checked[T, E](results: Iterable[Result[T, E]], operation: str) -> Iterable[Result[T, E]]:
    for result in results:
        if not isinstance(result, Ok | Err):
            raise NotAResultError(operation, result)
        yield result


def settle[T, E](result: Result[T, E]) -> SettledOutcome[T, E]:
    """Describe a single Result as a SettledOutcome."""
    if isinstance(result, Ok):
        return SettledSuccess(result.value)
    return SettledFailure(result.error)


def combine_all[T, E](results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Collect Results into a Result of list, short-circuiting on the first Err.

    Args:
        results: Results in input order.

    Returns:
        Ok(list[T]) if every entry is Ok (Ok([]) when empty), else the first Err.

    Raises:
        NotAResultError: If an entry before the first Err is not a Result.

    Examples:
        >>> combine_all([Ok(1), Ok(2), Ok(3)])
        Ok(value=[1, 2, 3])
        >>> combine_all([Ok(1), Err('fail'), Ok(3)])
        Err(error='fail')
    """
    values_: list[T] = []
    for result in _checked(results, 'combine_all()'):
        if isinstance(result, Err):
            return result
        values_.append(result.value)
    return Ok(values_)


def first_success[T, E](results: Iterable[Result[T, E]]) -> Result[T, list[E]]:
    """Return the first Ok, or Err with every error in input order.

    Examples:
        >>> first_success([Err('a'), Ok(42), Ok(99)])
        Ok(value=42)
        >>> first_success([Err('a'), Err('b')])
        Err(error=['a', 'b'])
        >>> first_success([])
        Err(error=[])
    """
    errors_: list[E] = []
    for result in _checked(results, 'first_success()'):
        if isinstance(result, Ok):
            return result
        errors_.append(result.error)
    return Err(errors_)


def partition[T, E](results: Iterable[Result[T, E]]) -> tuple[list[T], list[E]]:
    """Split Results into (ok_values, err_values) in a single pass.

    Both lists preserve the relative order of the input, and their lengths
    always add up to the number of inputs.
    """
    oks: list[T] = []
    errs: list[E] = []
    for result in _checked(results, 'partition()'):
        if isinstance(result, Ok):
            oks.append(result.value)
        else:
            errs.append(result.error)
    return oks, errs


def settle_all[T, E](results: Iterable[Result[T, E]]) -> Ok[list[SettledOutcome[T, E]]]:
    """Describe every Result as a SettledOutcome. Never fails.

    Examples:
        >>> settle_all([Ok(1), Err('failed')])
        Ok(value=[SettledSuccess(value=1), SettledFailure(reason='failed')])
    """
    return Ok([settle(result) for result in _checked(results, 'settle_all()')])


def values[T](results: Iterable[Result[T, Any]]) -> list[T]:
    """Return only the Ok values, in order."""
    return [result.value for result in _checked(results, 'values()') if isinstance(result, Ok)]


def errors[E](results: Iterable[Result[Any, E]]) -> list[E]:
    """Return only the Err errors, in order."""
    return [result.error for result in _checked(results, 'errors()') if isinstance(result, Err)]
