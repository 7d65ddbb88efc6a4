"""
Tests for process-level setup: logging and the fatal fault policy.
"""
import logging
import threading
from types import SimpleNamespace

import pytest

from levantflow import run


@pytest.fixture
def exits(monkeypatch):
    """Record process exit codes instead of terminating."""
    codes = []
    monkeypatch.setattr(run.os, '_exit', codes.append)
    monkeypatch.setattr(run.logging, 'shutdown', lambda: None)
    return codes


def test_uncaught_exception_terminates(exits, caplog):
    """An uncaught exception is logged and exits with status 1."""
    error = RuntimeError('boom')
    with caplog.at_level(logging.CRITICAL, logger='levantflow.run'):
        run.handle_uncaught_exception(RuntimeError, error, None)

    assert exits == [1]
    assert 'Uncaught Exception' in caplog.text


def test_keyboard_interrupt_is_not_fatal(exits, monkeypatch):
    """Ctrl-C keeps the default interpreter behaviour."""
    seen = []
    monkeypatch.setattr(run.sys, '__excepthook__', lambda *args: seen.append(args[0]))

    run.handle_uncaught_exception(KeyboardInterrupt, KeyboardInterrupt(), None)
    assert exits == []
    assert seen == [KeyboardInterrupt]


def test_thread_exception_terminates(exits, caplog):
    """An exception escaping a background thread exits with status 1."""
    args = SimpleNamespace(
        exc_type=ValueError,
        exc_value=ValueError('bad'),
        exc_traceback=None,
        thread=SimpleNamespace(name='worker-1'),
    )
    with caplog.at_level(logging.CRITICAL, logger='levantflow.run'):
        run.handle_thread_exception(args)

    assert exits == [1]
    assert 'worker-1' in caplog.text


def test_thread_exit_is_ignored(exits):
    """SystemExit raised in a thread is not treated as a fault."""
    args = SimpleNamespace(exc_type=SystemExit, exc_value=SystemExit(), exc_traceback=None, thread=None)
    run.handle_thread_exception(args)
    assert exits == []


def test_installed_hook_catches_real_thread(exits, monkeypatch):
    """The installed thread hook fires for a real failing thread."""
    monkeypatch.setattr(run.sys, 'excepthook', run.sys.excepthook)
    monkeypatch.setattr(threading, 'excepthook', threading.excepthook)
    run.install_fatal_handlers()

    def fail():
        raise RuntimeError('worker crashed')

    thread = threading.Thread(target=fail)
    thread.start()
    thread.join()
    assert exits == [1]


def test_setup_logging_adds_handlers(monkeypatch, tmp_path):
    """Console and rotating file handlers are attached to the root logger."""
    root = logging.getLogger()
    monkeypatch.setattr(root, 'handlers', [])
    monkeypatch.setattr(root, 'level', root.level)

    class FileLoggingConfig(run.Config):
        LOG_LEVEL = 'DEBUG'
        LOG_FILE_ENABLED = True
        LOG_FILE_PATH = str(tmp_path / 'app.log')

    run.setup_logging(FileLoggingConfig)
    try:
        kinds = {type(handler).__name__ for handler in root.handlers}
        assert kinds == {'StreamHandler', 'RotatingFileHandler'}
        assert root.level == logging.DEBUG
    finally:
        for handler in root.handlers:
            handler.close()
