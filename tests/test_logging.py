"""Tests for logging configuration and hooks."""

from __future__ import annotations

from typing import Any

import pytest

from fallible import capture_throw, configure_logging
from fallible._logging import (
    add_log_hook,
    clear_log_hooks,
    get_logger,
    remove_log_hook,
)


@pytest.fixture(autouse=True)
def cleanup_hooks(restore_root_logger) -> None:
    """Clear log hooks before and after each test."""
    clear_log_hooks()
    yield
    clear_log_hooks()


class TestLogHooks:
    """Tests for logging hooks functionality."""

    def test_hook_receives_log_events(self) -> None:
        """Registered hooks receive log entry dicts."""
        received: list[dict[str, Any]] = []

        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(received.append)

        logger = get_logger('test')
        logger.info('Test message', extra_field='extra_value')

        test_entries = [e for e in received if e.get('event') == 'Test message']
        assert len(test_entries) == 1
        assert test_entries[0]['extra_field'] == 'extra_value'
        assert test_entries[0]['level'] == 'info'

    def test_multiple_hooks_all_called(self) -> None:
        calls: list[str] = []

        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(lambda _: calls.append('hook1'))
        add_log_hook(lambda _: calls.append('hook2'))

        get_logger('test').info('Test')

        assert 'hook1' in calls
        assert 'hook2' in calls

    def test_remove_hook(self) -> None:
        """remove_log_hook() stops hook from being called."""
        calls: list[str] = []

        def hook(event_dict: dict[str, Any]) -> None:
            calls.append('called')

        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(hook)

        logger = get_logger('test')
        logger.info('First')
        assert len(calls) == 1

        remove_log_hook(hook)
        logger.info('Second')
        assert len(calls) == 1

    def test_remove_unknown_hook_is_noop(self) -> None:
        remove_log_hook(lambda _: None)

    def test_failing_hook_does_not_break_logging(self) -> None:
        received: list[dict[str, Any]] = []

        def broken(event_dict: dict[str, Any]) -> None:
            raise RuntimeError('hook failure')

        configure_logging(level='DEBUG', json_output=False)
        add_log_hook(broken)
        add_log_hook(received.append)

        get_logger('test').warning('still logged')

        assert [e['event'] for e in received] == ['still logged']

    def test_filtered_level_skips_hooks(self) -> None:
        received: list[dict[str, Any]] = []

        configure_logging(level='WARNING', json_output=True)
        add_log_hook(received.append)

        get_logger('test').debug('too quiet')

        assert received == []


class TestCaptureLogging:
    """Boundary adapters emit a debug event when they capture an exception."""

    def test_capture_emits_debug_event(self) -> None:
        received: list[dict[str, Any]] = []

        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(received.append)

        capture_throw(lambda: int('x'))

        captured = [e for e in received if e.get('event') == 'exception captured']
        assert len(captured) == 1
        assert captured[0]['exc_type'] == 'ValueError'
        assert captured[0]['mapped'] is False
        assert captured[0]['logger'] == 'fallible.factories'

    def test_json_output_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(level='DEBUG', json_output=True)

        capture_throw(lambda: int('x'), str)

        err = capsys.readouterr().err
        assert '"event": "exception captured"' in err
        assert '"mapped": true' in err
