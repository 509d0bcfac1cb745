"""Bounded, most-recent-first history of explicit transformations."""

import logging
from collections import deque
from datetime import datetime
from typing import Callable, Iterator, Optional

from textforge.core.models import HistoryEntry, TransformMode

logger = logging.getLogger(__name__)

MAX_HISTORY = 10
DEFAULT_PREVIEW_LENGTH = 50
DEFAULT_TIME_FORMAT = "%I:%M:%S %p"
ELLIPSIS = "..."


def make_preview(text: str, length: int = DEFAULT_PREVIEW_LENGTH) -> str:
    """Truncate text for display, marking truncation with an ellipsis."""
    if len(text) > length:
        return text[:length] + ELLIPSIS
    return text


class History:
    """Fixed-capacity history with the newest entry first.

    Entries are inserted at the head; once the capacity is reached the
    oldest entry is dropped. Entry ids come from the clock in epoch
    milliseconds and are bumped when needed so they strictly increase.
    """

    def __init__(
        self,
        capacity: int = MAX_HISTORY,
        preview_length: int = DEFAULT_PREVIEW_LENGTH,
        clock: Optional[Callable[[], datetime]] = None,
        time_format: str = DEFAULT_TIME_FORMAT,
    ) -> None:
        """Initialize an empty history.

        Args:
            capacity: Maximum number of entries kept (clamped to 1-10)
            preview_length: Characters of input kept in each preview
            clock: Time source, defaults to datetime.now
            time_format: strftime format for the applied-at time
        """
        self.capacity = max(1, min(MAX_HISTORY, capacity))
        self.preview_length = preview_length
        self.clock = clock or datetime.now
        self.time_format = time_format
        self._entries: deque[HistoryEntry] = deque(maxlen=self.capacity)
        self._last_id = 0

    @property
    def entries(self) -> tuple[HistoryEntry, ...]:
        """Get all entries, most recent first."""
        return tuple(self._entries)

    def record(self, mode: TransformMode, input_text: str) -> HistoryEntry:
        """Create an entry for an applied transformation and insert it at the head.

        Args:
            mode: The mode that was applied
            input_text: The full input text (only a preview is stored)

        Returns:
            The new HistoryEntry
        """
        now = self.clock()
        entry_id = max(int(now.timestamp() * 1000), self._last_id + 1)
        self._last_id = entry_id

        entry = HistoryEntry(
            id=entry_id,
            mode=mode,
            input_preview=make_preview(input_text, self.preview_length),
            applied_at=now.strftime(self.time_format),
        )

        if len(self._entries) == self.capacity:
            logger.debug("History full, evicting entry %s", self._entries[-1].id)
        self._entries.appendleft(entry)
        logger.debug("Recorded history entry %s (%s)", entry.id, mode.value)
        return entry

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(tuple(self._entries))

    def __getitem__(self, index: int) -> HistoryEntry:
        return self._entries[index]

    def __bool__(self) -> bool:
        return bool(self._entries)
