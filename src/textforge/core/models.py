"""Core data models for TextForge.

Defines the transformation modes, the fixed mode catalog used to render
mode choices, and the immutable records produced by a session (history
entries and snapshots).
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Union


class UnknownModeError(ValueError):
    """Raised when a mode identifier is not in the catalog."""

    pass


class TransformMode(str, Enum):
    """Identifiers for every supported transformation."""

    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    TITLECASE = "titlecase"
    SENTENCECASE = "sentencecase"
    CAMELCASE = "camelcase"
    SNAKECASE = "snakecase"
    KEBABCASE = "kebabcase"
    REVERSE = "reverse"
    TRIM = "trim"
    ALTERNATING = "alternating"
    STATISTICS = "statistics"
    REMOVENUMBERS = "removenumbers"

    def __str__(self) -> str:
        return self.value


# Older identifiers still accepted from callers
MODE_ALIASES: Mapping[str, TransformMode] = MappingProxyType({
    "sentence": TransformMode.SENTENCECASE,
    "count": TransformMode.STATISTICS,
    "stats": TransformMode.STATISTICS,
    "remove-numbers": TransformMode.REMOVENUMBERS,
    "remove_numbers": TransformMode.REMOVENUMBERS,
})


@dataclass(frozen=True)
class ModeInfo:
    """Display metadata for a transformation mode.

    Attributes:
        mode: The mode this entry describes
        label: Short display label, written in the mode's own style
        icon: Single glyph shown next to the label
        description: One-line description of what the mode does
    """

    mode: TransformMode
    label: str
    icon: str
    description: str

    @property
    def id(self) -> str:
        """Get the string identifier of the mode."""
        return self.mode.value


MODE_CATALOG: tuple[ModeInfo, ...] = (
    ModeInfo(TransformMode.UPPERCASE, "UPPERCASE", "⬆", "Convert all text to uppercase"),
    ModeInfo(TransformMode.LOWERCASE, "lowercase", "⬇", "Convert all text to lowercase"),
    ModeInfo(TransformMode.TITLECASE, "Title Case", "✨", "Capitalize first letter of each word"),
    ModeInfo(TransformMode.SENTENCECASE, "Sentence case", "📝", "Capitalize first letter of sentences"),
    ModeInfo(TransformMode.CAMELCASE, "camelCase", "🐫", "Convert to camelCase format"),
    ModeInfo(TransformMode.SNAKECASE, "snake_case", "🐍", "Convert to snake_case format"),
    ModeInfo(TransformMode.KEBABCASE, "kebab-case", "🍢", "Convert to kebab-case format"),
    ModeInfo(TransformMode.REVERSE, "Reverse", "↩", "Reverse the text"),
    ModeInfo(TransformMode.TRIM, "Trim Spaces", "✂", "Remove extra whitespace"),
    ModeInfo(TransformMode.ALTERNATING, "aLtErNaTiNg", "🎭", "Alternate between upper and lowercase"),
    ModeInfo(TransformMode.STATISTICS, "Statistics", "📊", "Count words, characters, lines"),
    ModeInfo(TransformMode.REMOVENUMBERS, "Remove Numbers", "🔢", "Strip all numeric characters"),
)

MODES: Mapping[TransformMode, ModeInfo] = MappingProxyType(
    {info.mode: info for info in MODE_CATALOG}
)

DEFAULT_MODE = TransformMode.UPPERCASE


def resolve_mode(value: Union[TransformMode, str, None]) -> Optional[TransformMode]:
    """Resolve a mode identifier to a catalog member.

    Accepts enum members, canonical ids and the older aliases. Matching
    ignores case and surrounding whitespace.

    Returns:
        The matching TransformMode, or None if the identifier is unknown
    """
    if isinstance(value, TransformMode):
        return value
    if not isinstance(value, str):
        return None

    key = value.strip().lower()
    try:
        return TransformMode(key)
    except ValueError:
        return MODE_ALIASES.get(key)


def require_mode(value: Union[TransformMode, str, None]) -> TransformMode:
    """Resolve a mode identifier, raising if it is not in the catalog."""
    mode = resolve_mode(value)
    if mode is None:
        raise UnknownModeError(
            f"Unknown mode: {value!r}. "
            f"Available: {', '.join(info.id for info in MODE_CATALOG)}"
        )
    return mode


def get_mode_info(mode: Union[TransformMode, str]) -> ModeInfo:
    """Get catalog metadata for a mode."""
    return MODES[require_mode(mode)]


@dataclass(frozen=True)
class HistoryEntry:
    """Record of one explicit transformation.

    Attributes:
        id: Unique, strictly increasing creation token (epoch milliseconds)
        mode: Mode that was applied
        input_preview: Input text truncated for display
        applied_at: Human-readable time of the transformation
    """

    id: int
    mode: TransformMode
    input_preview: str
    applied_at: str

    @property
    def info(self) -> ModeInfo:
        """Get catalog metadata for the entry's mode."""
        return MODES[self.mode]


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only copy of a session's state."""

    input_text: str
    selected_mode: TransformMode
    output_text: str
    auto_apply: bool
    history: tuple[HistoryEntry, ...] = field(default_factory=tuple)
