"""Text statistics and report rendering."""

import re
from dataclasses import dataclass

SENTENCE_SPLIT_PATTERN = re.compile(r"[.!?]+")
WHITESPACE_PATTERN = re.compile(r"\s")

REPORT_TITLE = "📊 Text Statistics:"


@dataclass(frozen=True)
class TextStatistics:
    """Counts describing a piece of text.

    Attributes:
        words: Whitespace-delimited non-empty tokens
        characters: Total characters
        characters_no_spaces: Characters excluding whitespace
        lines: One more than the number of newline characters
        sentences: Non-blank segments between runs of . ! ?
    """

    words: int = 0
    characters: int = 0
    characters_no_spaces: int = 0
    lines: int = 1
    sentences: int = 0


def count_words(text: str) -> int:
    """Count whitespace-delimited words."""
    return len(text.split())


def count_sentences(text: str) -> int:
    """Count sentences, ignoring segments that are only whitespace."""
    return sum(
        1 for segment in SENTENCE_SPLIT_PATTERN.split(text) if segment.strip()
    )


def compute_statistics(text: str) -> TextStatistics:
    """Compute all statistics for a text."""
    return TextStatistics(
        words=count_words(text),
        characters=len(text),
        characters_no_spaces=len(WHITESPACE_PATTERN.sub("", text)),
        lines=text.count("\n") + 1,
        sentences=count_sentences(text),
    )


def format_number(value: int) -> str:
    """Render an integer with thousands separators."""
    return f"{value:,}"


def format_report(stats: TextStatistics) -> str:
    """Render statistics as the fixed multi-line report."""
    return (
        f"{REPORT_TITLE}\n\n"
        f"Words: {format_number(stats.words)}\n"
        f"Characters: {format_number(stats.characters)}\n"
        f"Characters (no spaces): {format_number(stats.characters_no_spaces)}\n"
        f"Lines: {format_number(stats.lines)}\n"
        f"Sentences: {format_number(stats.sentences)}"
    )


def quick_counts(text: str) -> tuple[int, int]:
    """Get (word_count, char_count) for an editor summary line."""
    return count_words(text), len(text)
