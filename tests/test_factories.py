"""Tests for construction entry points and display helpers."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fallible import (
    Err,
    Ok,
    capture_future,
    capture_throw,
    display_value,
    err,
    from_nullable,
    ok,
    to_exception,
    validate,
)
from fallible.factories import coerce_error


class TestOkErr:
    """Tests for the ok() and err() wrappers."""

    def test_ok(self):
        assert ok(1) == Ok(1)

    def test_err(self):
        assert err('e') == Err('e')

    @given(st.integers())
    def test_ok_roundtrips_value(self, x: int):
        assert ok(x).unwrap() == x


class TestCaptureThrow:
    """Tests for capture_throw()."""

    def test_success(self):
        assert capture_throw(lambda: 1 + 1) == Ok(2)

    def test_exception_passes_through(self):
        """A raised exception is carried as-is."""
        exc = ValueError('boom')

        def raiser():
            raise exc

        result = capture_throw(raiser)
        assert result.is_err()
        assert result.error is exc

    def test_boom(self):
        """Scenario: a raised 'boom' becomes Err carrying an exception with that message."""

        def boom():
            raise Exception('boom')  # noqa: TRY002

        result = capture_throw(boom)
        assert type(result.error) is Exception
        assert str(result.error) == 'boom'

    def test_on_error_wins(self):
        result = capture_throw(lambda: int('x'), lambda e: f'mapped {type(e).__name__}')
        assert result == Err('mapped ValueError')

    def test_on_error_receives_raw_exception(self):
        seen = []

        def raiser():
            raise KeyError('k')

        capture_throw(raiser, seen.append)
        assert isinstance(seen[0], KeyError)

    def test_base_exception_propagates(self):
        """Only Exception subclasses are captured."""

        def interrupt():
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            capture_throw(interrupt)


class TestCaptureFuture:
    """Tests for capture_future()."""

    @pytest.mark.asyncio
    async def test_success_from_callable(self):
        async def fetch():
            return 42

        assert await capture_future(fetch) == Ok(42)

    @pytest.mark.asyncio
    async def test_success_from_awaitable(self):
        async def fetch():
            return 'data'

        assert await capture_future(fetch()) == Ok('data')

    @pytest.mark.asyncio
    async def test_rejection_captured(self):
        async def fail():
            raise ConnectionError('down')

        result = await capture_future(fail)
        assert result.is_err()
        assert isinstance(result.error, ConnectionError)

    @pytest.mark.asyncio
    async def test_sync_raise_in_factory_captured(self):
        """An exception raised while producing the awaitable is captured too."""

        def factory():
            raise RuntimeError('before await')

        result = await capture_future(factory)
        assert isinstance(result.error, RuntimeError)

    @pytest.mark.asyncio
    async def test_on_error_wins(self):
        async def fail():
            raise ConnectionError('down')

        assert await capture_future(fail, lambda e: 'unavailable') == Err('unavailable')


class TestFromNullable:
    """Tests for from_nullable()."""

    def test_value(self):
        assert from_nullable(5) == Ok(5)

    def test_falsy_values_are_ok(self):
        assert from_nullable(0) == Ok(0)
        assert from_nullable('') == Ok('')
        assert from_nullable(False) == Ok(False)

    def test_none_default_error(self):
        result = from_nullable(None)
        assert isinstance(result.error, ValueError)
        assert str(result.error) == 'Value is None'

    def test_none_custom_error(self):
        assert from_nullable(None, lambda: 'missing') == Err('missing')


class TestValidate:
    """Tests for validate()."""

    def test_valid(self):
        assert validate(20, lambda a: a >= 18) == Ok(20)

    def test_invalid_default_error(self):
        result = validate('kid', lambda s: len(s) > 5)
        assert isinstance(result.error, ValueError)
        assert str(result.error) == 'Validation failed for value: "kid"'

    def test_invalid_custom_error(self):
        assert validate(12, lambda a: a >= 18, lambda a: f'{a} is underage') == Err('12 is underage')


class TestCoercion:
    """Tests for to_exception() and coerce_error()."""

    def test_exception_passthrough(self):
        exc = TypeError('t')
        assert to_exception(exc) is exc

    def test_string_wrapped(self):
        """Scenario: a thrown "boom" becomes an exception with message boom."""
        coerced = to_exception('boom')
        assert type(coerced) is Exception
        assert str(coerced) == 'boom'

    def test_none_wrapped(self):
        assert str(to_exception(None)) == 'Unknown error: None value'

    def test_coerce_error_prefers_mapper(self):
        assert coerce_error(ValueError('v'), str) == 'v'


class TestDisplayValue:
    """Tests for display_value()."""

    @pytest.mark.parametrize(
        ('value', 'expected'),
        [
            (42, '42'),
            (1.5, '1.5'),
            (True, 'True'),
            (None, 'None'),
            ('abc', '"abc"'),
            ([1, 2, 3], '[list(3)]'),
            ((1,), '[tuple(1)]'),
            (ValueError('bad'), '[ValueError: bad]'),
            (len, '[Function]'),
            ({'a': 1}, '[dict]'),
        ],
    )
    def test_rendering(self, value, expected):
        assert display_value(value) == expected

    def test_long_string_truncated(self):
        rendered = display_value('x' * 150)
        assert rendered == '"' + 'x' * 100 + '..."'

    def test_custom_max_length(self):
        assert display_value('abcdef', max_length=3) == '"abc..."'
