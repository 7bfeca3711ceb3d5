"""Async utilities: AsyncResult and concurrent collection combinators.

Examples:
    >>> from fallible.async_ import AsyncResult, combine_all_async
    >>>
    >>> async def fetch(id: int) -> Result[dict, str]:
    ...     return Ok({'id': id})
    >>>
    >>> async def main():
    ...     result = await AsyncResult(fetch(1)).amap(lambda d: d['id'])
    ...     results = await combine_all_async([fetch(1), fetch(2), fetch(3)])
"""

from fallible.async_.combinators import (
    combine_all_async,
    errors_async,
    first_success_async,
    gather_results,
    partition_async,
    settle_all_async,
    values_async,
)
from fallible.async_.result import AsyncResult

__all__ = [
    'AsyncResult',
    'combine_all_async',
    'errors_async',
    'first_success_async',
    'gather_results',
    'partition_async',
    'settle_all_async',
    'values_async',
]
