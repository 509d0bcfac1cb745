"""Clipboard writers.

Copying is fire-and-forget for callers: ``ClipboardWriter.copy`` reports
success as a boolean and logs failures instead of raising.
"""

import logging
import platform
import shlex
import shutil
import subprocess
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from textforge.config import get_settings

logger = logging.getLogger(__name__)

# Candidate commands, tried in order
CLIPBOARD_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("pbcopy",),
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("clip",),
)

COMMAND_TIMEOUT = 5


class ClipboardError(Exception):
    """Error writing to the clipboard."""

    pass


class ClipboardWriter(ABC):
    """Abstract base class for clipboard writers."""

    @abstractmethod
    def write(self, text: str) -> None:
        """Put text on the clipboard.

        Raises:
            ClipboardError: If the clipboard cannot be written
        """
        ...

    def copy(self, text: str) -> bool:
        """Write text to the clipboard, logging instead of raising on failure.

        Returns:
            True if the text was copied
        """
        try:
            self.write(text)
        except ClipboardError as e:
            logger.warning("Failed to copy: %s", e)
            return False
        return True


class CommandClipboard(ClipboardWriter):
    """Writes to the clipboard by piping text into a system command."""

    def __init__(self, command: Sequence[str]) -> None:
        if not command:
            raise ValueError("Clipboard command must not be empty")
        self.command = tuple(command)

    def write(self, text: str) -> None:
        # Windows clip.exe reads UTF-16; the others take UTF-8
        encoding = "utf-16" if self.command[0] == "clip" else "utf-8"
        try:
            subprocess.run(
                self.command,
                input=text.encode(encoding),
                check=True,
                timeout=COMMAND_TIMEOUT,
            )
        except (OSError, subprocess.SubprocessError) as e:
            raise ClipboardError(f"{self.command[0]}: {e}") from e

    def __repr__(self) -> str:
        return f"CommandClipboard({' '.join(self.command)!r})"


def detect_clipboard_command() -> Optional[tuple[str, ...]]:
    """Find the first available clipboard command on this system."""
    candidates = CLIPBOARD_COMMANDS
    if platform.system() == "Darwin":
        candidates = (("pbcopy",),)
    for command in candidates:
        if shutil.which(command[0]):
            return command
    return None


def get_clipboard() -> Optional[ClipboardWriter]:
    """Get a clipboard writer for this system.

    Uses the configured clipboard command if set, otherwise the first
    available system command.

    Returns:
        A ClipboardWriter, or None if no clipboard command is available
    """
    configured = get_settings().clipboard_command
    if configured:
        return CommandClipboard(shlex.split(configured))

    command = detect_clipboard_command()
    if command is None:
        logger.debug("No clipboard command found")
        return None
    return CommandClipboard(command)
