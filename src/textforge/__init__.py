"""TextForge - transform text between cases, cleanups and statistics."""

__version__ = "0.1.0"

from textforge.core import (
    MODE_CATALOG,
    MODES,
    History,
    HistoryEntry,
    ModeInfo,
    Session,
    SessionSnapshot,
    TextStatistics,
    TransformMode,
    UnknownModeError,
    compute_statistics,
    format_report,
    get_mode_info,
    require_mode,
    resolve_mode,
    transform,
)

__all__ = [
    "__version__",
    "MODE_CATALOG",
    "MODES",
    "History",
    "HistoryEntry",
    "ModeInfo",
    "Session",
    "SessionSnapshot",
    "TextStatistics",
    "TransformMode",
    "UnknownModeError",
    "compute_statistics",
    "format_report",
    "get_mode_info",
    "require_mode",
    "resolve_mode",
    "transform",
]
