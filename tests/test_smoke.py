"""Smoke tests for the public import surface."""

import fallible


def test_all_exports_resolve():
    """Every name in __all__ is importable from the package root."""
    for name in fallible.__all__:
        assert hasattr(fallible, name), name


def test_submodules_import():
    from fallible.async_ import AsyncResult, gather_results
    from fallible.codec import decode, encode
    from fallible.combinators import settle
    from fallible.decorators import safe
    from fallible.exceptions import FallibleError
    from fallible.result import Result

    assert all([AsyncResult, gather_results, decode, encode, settle, safe, FallibleError, Result])


def test_exception_hierarchy():
    assert issubclass(fallible.UnwrapError, fallible.FallibleError)
    assert issubclass(fallible.NotAResultError, TypeError)
    assert issubclass(fallible.MatchHandlerError, TypeError)
    assert issubclass(fallible.FailureRaised, fallible.FallibleError)


def test_end_to_end_pipeline():
    result = (
        fallible.capture_throw(lambda: int('21'))
        .map(lambda x: x * 2)
        .filter(lambda x: x > 10)
        .and_then(lambda x: fallible.validate(x, lambda v: v % 2 == 0))
    )
    assert result == fallible.Ok(42)
    assert str(result) == 'Success(42)'
