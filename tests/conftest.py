"""Pytest fixtures for TextForge tests."""

import logging
from datetime import datetime, timedelta

import pytest

from textforge.clipboard import ClipboardError, ClipboardWriter
from textforge.config import reset_settings


class FakeClock:
    """Clock that advances one second on every call."""

    def __init__(self, start: datetime) -> None:
        self.current = start

    def __call__(self) -> datetime:
        now = self.current
        self.current += timedelta(seconds=1)
        return now


class RecordingClipboard(ClipboardWriter):
    """Clipboard double that remembers what was written."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.writes: list[str] = []

    def write(self, text: str) -> None:
        if self.fail:
            raise ClipboardError("clipboard is locked")
        self.writes.append(text)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    """Isolate tests from TEXTFORGE_* variables and cached settings."""
    for name in (
        "TEXTFORGE_DEFAULT_MODE",
        "TEXTFORGE_AUTO_APPLY",
        "TEXTFORGE_HISTORY_LIMIT",
        "TEXTFORGE_PREVIEW_LENGTH",
        "TEXTFORGE_TIME_FORMAT",
        "TEXTFORGE_LOG_LEVEL",
        "TEXTFORGE_CLIPBOARD_COMMAND",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def clock() -> FakeClock:
    """Deterministic clock starting at 2026-01-02 15:04:05."""
    return FakeClock(datetime(2026, 1, 2, 15, 4, 5))


@pytest.fixture
def clipboard() -> RecordingClipboard:
    """Clipboard double that records writes."""
    return RecordingClipboard()


@pytest.fixture
def broken_clipboard() -> RecordingClipboard:
    """Clipboard double whose writes always fail."""
    return RecordingClipboard(fail=True)


@pytest.fixture
def sample_text() -> str:
    """Sample text for testing transformations."""
    return "Hi! how are you? Fine."


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo any setup_logging() call made during a test."""
    yield
    logger = logging.getLogger("textforge")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
