"""fallible: immutable Result values for explicit handling of fallible computations.

Flat imports (preferred):
    from fallible import Result, Ok, Err, capture_throw, combine_all
    from fallible import AsyncResult, capture_future, combine_all_async, safe

Submodule imports (for organization):
    from fallible.result import Ok, Err, Result
    from fallible.combinators import partition, settle_all
    from fallible.async_ import AsyncResult
    from fallible.codec import encode, decode
"""

# Async
from fallible.async_ import (
    AsyncResult,
    combine_all_async,
    errors_async,
    first_success_async,
    partition_async,
    settle_all_async,
    values_async,
)

# Collections
from fallible.combinators import (
    SettledFailure,
    SettledOutcome,
    SettledSuccess,
    combine_all,
    errors,
    first_success,
    partition,
    settle_all,
    values,
)

# Configuration and logging
from fallible._config import Config, get_config, init
from fallible._logging import configure_logging

# Display helpers
from fallible._utils import display_value, to_exception

# Decorators
from fallible.decorators import safe, safe_async

# Exceptions
from fallible.exceptions import (
    FailureRaised,
    FallibleError,
    MatchHandlerError,
    NotAResultError,
    UnwrapError,
)

# Construction
from fallible.factories import (
    capture_future,
    capture_throw,
    err,
    from_nullable,
    ok,
    validate,
)

# Result types
from fallible.result import Err, Failure, Ok, Result, Success, is_result

__all__ = [
    # Async
    'AsyncResult',
    # Configuration
    'Config',
    # Result types
    'Err',
    'Failure',
    # Exceptions
    'FailureRaised',
    'FallibleError',
    'MatchHandlerError',
    'NotAResultError',
    'Ok',
    'Result',
    # Collections
    'SettledFailure',
    'SettledOutcome',
    'SettledSuccess',
    'Success',
    'UnwrapError',
    # Construction
    'capture_future',
    'capture_throw',
    'combine_all',
    'combine_all_async',
    'configure_logging',
    # Display helpers
    'display_value',
    'err',
    'errors',
    'errors_async',
    'first_success',
    'first_success_async',
    'from_nullable',
    'get_config',
    'init',
    'is_result',
    'ok',
    'partition',
    'partition_async',
    # Decorators
    'safe',
    'safe_async',
    'settle_all',
    'settle_all_async',
    'to_exception',
    'validate',
    'values',
    'values_async',
]
