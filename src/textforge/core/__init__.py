"""Core transformation logic for TextForge."""

from textforge.core.models import (
    MODE_CATALOG,
    MODES,
    HistoryEntry,
    ModeInfo,
    SessionSnapshot,
    TransformMode,
    UnknownModeError,
    get_mode_info,
    require_mode,
    resolve_mode,
)
from textforge.core.statistics import TextStatistics, compute_statistics, format_report
from textforge.core.transformer import transform
from textforge.core.history import History
from textforge.core.session import Session

__all__ = [
    "MODE_CATALOG",
    "MODES",
    "HistoryEntry",
    "ModeInfo",
    "SessionSnapshot",
    "TransformMode",
    "UnknownModeError",
    "get_mode_info",
    "require_mode",
    "resolve_mode",
    "TextStatistics",
    "compute_statistics",
    "format_report",
    "transform",
    "History",
    "Session",
]
