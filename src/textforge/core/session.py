"""Session state for one interactive editing session."""

import logging
from datetime import datetime
from typing import Callable, Optional, Union

from textforge.config import get_settings
from textforge.core.history import History
from textforge.core.models import (
    DEFAULT_MODE,
    MODES,
    HistoryEntry,
    ModeInfo,
    SessionSnapshot,
    TransformMode,
    resolve_mode,
)
from textforge.core.transformer import transform

logger = logging.getLogger(__name__)


class Session:
    """Holds the input, selected mode, output and history of a session.

    Output is derived from input and mode. With auto-apply on, changing
    the input or the mode recomputes the output immediately; otherwise the
    output only changes on ``apply``, ``swap`` or ``clear`` and may lag
    behind the input until the next explicit apply.
    """

    def __init__(
        self,
        mode: Union[TransformMode, str, None] = None,
        auto_apply: Optional[bool] = None,
        history_limit: Optional[int] = None,
        preview_length: Optional[int] = None,
        time_format: Optional[str] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        """Initialize an empty session.

        Arguments left as None are taken from the settings.

        Args:
            mode: Initially selected mode
            auto_apply: Whether input/mode changes recompute the output
            history_limit: Maximum history entries (1-10)
            preview_length: Characters of input kept in history previews
            time_format: strftime format for history times
            clock: Time source for history entries
        """
        settings = get_settings()

        selected = resolve_mode(mode if mode is not None else settings.default_mode)
        if selected is None:
            logger.warning(
                "Unknown default mode %r, using %s",
                mode if mode is not None else settings.default_mode,
                DEFAULT_MODE.value,
            )
            selected = DEFAULT_MODE

        self.input_text = ""
        self.output_text = ""
        self.selected_mode: TransformMode = selected
        self.auto_apply = settings.auto_apply if auto_apply is None else auto_apply
        self._history = History(
            capacity=history_limit or settings.history_limit,
            preview_length=preview_length or settings.preview_length,
            clock=clock,
            time_format=time_format or settings.time_format,
        )

    @property
    def history(self) -> tuple[HistoryEntry, ...]:
        """Get history entries, most recent first."""
        return self._history.entries

    @property
    def mode_info(self) -> ModeInfo:
        """Get catalog metadata for the selected mode."""
        return MODES[self.selected_mode]

    def _recompute(self) -> None:
        self.output_text = transform(self.input_text, self.selected_mode)

    def set_input(self, text: str) -> None:
        """Replace the input text, recomputing output when auto-apply is on."""
        self.input_text = text
        if self.auto_apply:
            self._recompute()

    def set_mode(self, mode: Union[TransformMode, str]) -> bool:
        """Select a mode, recomputing output when auto-apply is on.

        Returns:
            True if the mode was accepted, False if it is not in the catalog
        """
        resolved = resolve_mode(mode)
        if resolved is None:
            logger.debug("Ignoring unknown mode %r", mode)
            return False

        self.selected_mode = resolved
        if self.auto_apply:
            self._recompute()
        return True

    def set_auto_apply(self, enabled: bool) -> None:
        """Toggle auto-apply. Does not recompute the output by itself."""
        self.auto_apply = enabled

    def apply(self) -> str:
        """Transform the input and record the operation in history.

        A history entry is added only when both the input and the
        resulting output are non-empty.

        Returns:
            The new output text
        """
        self._recompute()
        if self.input_text and self.output_text:
            self._history.record(self.selected_mode, self.input_text)
        return self.output_text

    def swap(self) -> None:
        """Move the output into the input and clear the output."""
        self.input_text = self.output_text
        self.output_text = ""

    def clear(self) -> None:
        """Empty input and output. Mode and history are kept."""
        self.input_text = ""
        self.output_text = ""

    def load_mode(self, entry: HistoryEntry) -> None:
        """Select the mode of a history entry.

        Only the mode is restored. History keeps a preview of the input,
        not the full text, so input and output are left as they are.
        """
        self.selected_mode = entry.mode

    def snapshot(self) -> SessionSnapshot:
        """Get a read-only copy of the current state."""
        return SessionSnapshot(
            input_text=self.input_text,
            selected_mode=self.selected_mode,
            output_text=self.output_text,
            auto_apply=self.auto_apply,
            history=self.history,
        )
