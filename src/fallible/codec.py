"""Tagged-record serialization for Result values.

A Result crosses any persistence or transport boundary as the tagged record
``{'type': 'ok', 'value': ...}`` or ``{'type': 'err', 'error': ...}``. The
record types below are msgspec tagged structs, so decoding validates the tag
and, when requested, the payload types.

Usage:
    >>> from fallible import Ok
    >>> from fallible.codec import decode, encode
    >>> encode(Ok(1))
    b'{"type":"ok","value":1}'
    >>> decode(b'{"type":"err","error":"boom"}')
    Err(error='boom')
"""

from collections.abc import Callable, Mapping
from typing import Any

import msgspec

from fallible.exceptions import NotAResultError
from fallible.result import Err, Ok, Result

__all__ = [
    'ErrRecord',
    'OkRecord',
    'decode',
    'encode',
    'from_dict',
]


class OkRecord[T](msgspec.Struct, frozen=True, tag_field='type', tag='ok'):
    """Wire record of an Ok."""

    value: T


class ErrRecord[E](msgspec.Struct, frozen=True, tag_field='type', tag='err'):
    """Wire record of an Err."""

    error: E


def _default_enc_hook(obj: Any) -> Any:
    if isinstance(obj, BaseException):
        return {'exception': type(obj).__name__, 'message': str(obj)}
    raise NotImplementedError(f'Objects of type {type(obj).__name__} are not supported')


def _record_type(value_type: Any, error_type: Any) -> Any:
    return OkRecord[value_type] | ErrRecord[error_type]


def _from_record(record: OkRecord[Any] | ErrRecord[Any]) -> Result[Any, Any]:
    if isinstance(record, OkRecord):
        return Ok(record.value)
    return Err(record.error)


def encode(result: Result[Any, Any], *, enc_hook: Callable[[Any], Any] | None = None) -> bytes:
    """Encode a Result as its tagged JSON record.

    Exceptions in the payload are encoded as ``{'exception': name, 'message': str}``
    unless a custom enc_hook is supplied.

    Raises:
        NotAResultError: If result is not an Ok or Err.
    """
    if isinstance(result, Ok):
        record: OkRecord[Any] | ErrRecord[Any] = OkRecord(result.value)
    elif isinstance(result, Err):
        record = ErrRecord(result.error)
    else:
        raise NotAResultError('encode()', result)
    return msgspec.json.encode(record, enc_hook=enc_hook or _default_enc_hook)


def decode(data: bytes | str, *, value_type: Any = Any, error_type: Any = Any) -> Result[Any, Any]:
    """Decode a tagged JSON record into a Result.

    Args:
        data: JSON bytes or str.
        value_type: Expected type of an Ok payload.
        error_type: Expected type of an Err payload.

    Raises:
        msgspec.ValidationError: If the record is malformed or a payload does
            not match the requested type.
    """
    record = msgspec.json.decode(data, type=_record_type(value_type, error_type))
    return _from_record(record)


def from_dict(record: Mapping[str, Any], *, value_type: Any = Any, error_type: Any = Any) -> Result[Any, Any]:
    """Rebuild a Result from the record produced by ``to_dict()``.

    Raises:
        msgspec.ValidationError: If the record is malformed.
    """
    return _from_record(msgspec.convert(record, type=_record_type(value_type, error_type)))
