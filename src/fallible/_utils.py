"""Rendering and coercion helpers shared by the Result types and factories."""

from __future__ import annotations

from typing import Any

__all__ = ['display_value', 'to_exception']

DISPLAY_MAX_LENGTH = 100


def display_value(value: Any, max_length: int = DISPLAY_MAX_LENGTH) -> str:
    """Render a value for human-readable error messages, bounded in size.

    Examples:
        >>> display_value(42)
        '42'
        >>> display_value('abc')
        '"abc"'
        >>> display_value(ValueError('bad'))
        '[ValueError: bad]'
        >>> display_value([1, 2, 3])
        '[list(3)]'
    """
    if isinstance(value, BaseException):
        return f'[{type(value).__name__}: {value}]'
    if value is None or isinstance(value, bool | int | float | complex):
        return str(value)
    if isinstance(value, str):
        if len(value) > max_length:
            return f'"{value[:max_length]}..."'
        return f'"{value}"'
    if isinstance(value, list | tuple):
        return f'[{type(value).__name__}({len(value)})]'
    if callable(value):
        return '[Function]'
    return f'[{type(value).__name__}]'


def to_exception(value: Any) -> BaseException:
    """Coerce a caught value into an exception.

    Exceptions pass through unchanged; ``None`` and any other value are
    wrapped in a plain ``Exception`` carrying a string rendering.
    """
    if isinstance(value, BaseException):
        return value
    if value is None:
        return Exception('Unknown error: None value')
    return Exception(str(value))
