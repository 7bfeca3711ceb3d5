"""Programming errors: misuse of the Result API, raised outside the Result channel.

Domain failures always travel as ``Err`` payloads. The exceptions here signal a
defect in the calling code (unwrapping the wrong variant, flattening a plain
value, passing malformed handlers) and are never wrapped into a Result.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    'FailureRaised',
    'FallibleError',
    'MatchHandlerError',
    'NotAResultError',
    'UnwrapError',
]


class FallibleError(Exception):
    """Base class for every exception raised by fallible itself."""


class UnwrapError(FallibleError, RuntimeError):
    """Raised when unwrap/expect is called on the non-matching variant.

    The payload of the receiving Result is kept on ``cause`` so callers can
    inspect the root cause without re-deriving it. When that payload is an
    exception it is also chained as ``__cause__``.
    """

    def __init__(self, message: str, cause: Any = None) -> None:
        self.cause = cause
        super().__init__(message)


class NotAResultError(FallibleError, TypeError):
    """A Result was required but something else was supplied."""

    def __init__(self, operation: str, value: Any) -> None:
        self.operation = operation
        self.received = value
        super().__init__(f'{operation} expected a Result, got {type(value).__name__}')


class MatchHandlerError(FallibleError, TypeError):
    """Raised when match() receives a handler that is not callable."""

    def __init__(self, handler: str, value: Any) -> None:
        self.handler = handler
        super().__init__(f"match() handler '{handler}' must be callable, got {type(value).__name__}")


class FailureRaised(FallibleError):  # noqa: N818
    """Carries a non-exception Err payload out of to_future().

    Exception payloads are raised as-is; anything else is raised inside this
    wrapper with the raw payload on ``error``.
    """

    def __init__(self, error: Any) -> None:
        self.error = error
        super().__init__(f'Failure({error!r})')
