"""Tests for the session state model."""

import dataclasses

import pytest

from textforge.config import reset_settings
from textforge.core.models import MODES, SessionSnapshot, TransformMode
from textforge.core.session import Session
from textforge.core.transformer import transform


@pytest.fixture
def session(clock) -> Session:
    """Create a session with a deterministic clock."""
    return Session(clock=clock)


class TestSessionDefaults:
    """Tests for initial session state."""

    def test_defaults(self, session: Session):
        assert session.input_text == ""
        assert session.output_text == ""
        assert session.selected_mode is TransformMode.UPPERCASE
        assert session.auto_apply is False
        assert session.history == ()

    def test_default_mode_from_settings(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("TEXTFORGE_DEFAULT_MODE", "kebabcase")
        monkeypatch.setenv("TEXTFORGE_AUTO_APPLY", "true")
        reset_settings()

        session = Session()

        assert session.selected_mode is TransformMode.KEBABCASE
        assert session.auto_apply is True

    def test_invalid_default_mode_falls_back(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ):
        monkeypatch.setenv("TEXTFORGE_DEFAULT_MODE", "shout")
        reset_settings()

        session = Session()

        assert session.selected_mode is TransformMode.UPPERCASE
        assert "Unknown default mode" in caplog.text

    def test_mode_info(self, session: Session):
        session.set_mode("reverse")
        assert session.mode_info is MODES[TransformMode.REVERSE]


class TestManualApply:
    """Tests for sessions with auto-apply off."""

    def test_set_input_does_not_recompute(self, session: Session):
        session.set_input("hello")

        assert session.input_text == "hello"
        assert session.output_text == ""

    def test_apply_computes_output(self, session: Session):
        session.set_input("hello")

        assert session.apply() == "HELLO"
        assert session.output_text == "HELLO"

    def test_output_goes_stale_until_apply(self, session: Session):
        """Test that output lags behind input and mode without auto-apply."""
        session.set_input("hello")
        session.apply()
        session.set_input("world")
        session.set_mode(TransformMode.REVERSE)

        assert session.output_text == "HELLO"
        session.apply()
        assert session.output_text == "dlrow"

    def test_apply_records_history(self, session: Session):
        session.set_input("Hello World")
        session.set_mode("snakecase")
        session.apply()

        assert len(session.history) == 1
        entry = session.history[0]
        assert entry.mode is TransformMode.SNAKECASE
        assert entry.input_preview == "Hello World"

    def test_apply_with_empty_input_records_nothing(self, session: Session):
        session.apply()
        session.set_mode(TransformMode.STATISTICS)
        session.apply()

        assert session.history == ()

    def test_apply_with_empty_output_records_nothing(self, session: Session):
        """Test that an empty result is not recorded."""
        session.set_input("2024")
        session.set_mode(TransformMode.REMOVENUMBERS)

        assert session.apply() == ""
        assert session.history == ()

    def test_apply_is_not_idempotent_for_history(self, session: Session):
        session.set_input("x")
        first = session.apply()
        second = session.apply()

        assert first == second
        assert len(session.history) == 2

    def test_history_capped_after_fifteen_applies(self, session: Session):
        """Test that history keeps the ten newest entries."""
        for i in range(15):
            session.set_input(f"input {i}")
            session.apply()

        assert len(session.history) == 10
        assert session.history[0].input_preview == "input 14"
        assert session.history[-1].input_preview == "input 5"

    def test_history_limit_argument(self, clock):
        session = Session(history_limit=3, clock=clock)
        for i in range(5):
            session.set_input(str(i) + "a")
            session.apply()

        assert [e.input_preview for e in session.history] == ["4a", "3a", "2a"]


class TestAutoApply:
    """Tests for sessions with auto-apply on."""

    def test_set_input_recomputes(self, clock):
        session = Session(auto_apply=True, clock=clock)
        session.set_input("x")

        assert session.output_text == transform("x", session.selected_mode)
        assert session.history == ()

    def test_set_mode_recomputes(self, clock):
        session = Session(auto_apply=True, clock=clock)
        session.set_input("Hello World")
        session.set_mode("kebabcase")

        assert session.output_text == "hello-world"
        assert session.history == ()

    def test_clearing_input_clears_output(self, clock):
        session = Session(auto_apply=True, clock=clock)
        session.set_input("abc")
        session.set_input("")

        assert session.output_text == ""

    def test_toggling_does_not_recompute(self, session: Session):
        session.set_input("abc")
        session.set_auto_apply(True)

        assert session.auto_apply is True
        assert session.output_text == ""

    def test_apply_still_records_history(self, clock):
        session = Session(auto_apply=True, clock=clock)
        session.set_input("abc")
        session.apply()

        assert len(session.history) == 1


class TestSetMode:
    """Tests for mode selection."""

    def test_accepts_alias(self, session: Session):
        assert session.set_mode("count") is True
        assert session.selected_mode is TransformMode.STATISTICS

    def test_unknown_mode_is_noop(self, session: Session):
        session.set_mode(TransformMode.TRIM)

        assert session.set_mode("shout") is False
        assert session.selected_mode is TransformMode.TRIM


class TestSwapClearLoad:
    """Tests for swap, clear and load_mode."""

    def test_swap(self, session: Session):
        session.set_input("hello")
        session.apply()
        session.swap()

        assert session.input_text == "HELLO"
        assert session.output_text == ""
        assert len(session.history) == 1

    def test_swap_does_not_recompute_with_auto_apply(self, clock):
        session = Session(auto_apply=True, clock=clock)
        session.set_input("hello")
        session.swap()

        assert session.input_text == "HELLO"
        assert session.output_text == ""

    def test_clear_keeps_mode_and_history(self, session: Session):
        session.set_mode("reverse")
        session.set_input("abc")
        session.apply()
        session.clear()

        assert session.input_text == ""
        assert session.output_text == ""
        assert session.selected_mode is TransformMode.REVERSE
        assert len(session.history) == 1

    def test_load_mode_restores_only_mode(self, session: Session):
        session.set_mode("titlecase")
        session.set_input("first text")
        session.apply()
        entry = session.history[0]

        session.set_mode("uppercase")
        session.set_input("second text")
        session.apply()
        session.load_mode(entry)

        assert session.selected_mode is TransformMode.TITLECASE
        assert session.input_text == "second text"
        assert session.output_text == "SECOND TEXT"


class TestSnapshot:
    """Tests for session snapshots."""

    def test_snapshot_copies_state(self, session: Session):
        session.set_input("abc")
        session.apply()
        snapshot = session.snapshot()

        assert snapshot == SessionSnapshot(
            input_text="abc",
            selected_mode=TransformMode.UPPERCASE,
            output_text="ABC",
            auto_apply=False,
            history=session.history,
        )

    def test_snapshot_is_detached(self, session: Session):
        """Test that later changes do not affect an earlier snapshot."""
        snapshot = session.snapshot()
        session.set_input("changed")
        session.apply()

        assert snapshot.input_text == ""
        assert snapshot.history == ()

    def test_snapshot_is_frozen(self, session: Session):
        with pytest.raises(dataclasses.FrozenInstanceError):
            session.snapshot().input_text = "x"  # type: ignore[misc]
