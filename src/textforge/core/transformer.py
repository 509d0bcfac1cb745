"""Text transformation engine.

Every transformation is a pure function of its input text. ``transform``
dispatches on the mode and never raises for well-formed strings: an unknown
mode passes the text through unchanged.
"""

import logging
import re
from typing import Callable, Union

from textforge.core.models import TransformMode, resolve_mode
from textforge.core.statistics import compute_statistics, format_report

logger = logging.getLogger(__name__)

# Word boundaries are ASCII-oriented: anything outside [A-Za-z0-9] delimits
NON_ALNUM_PATTERN = re.compile(r"[^a-zA-Z0-9]+")
CAMEL_BOUNDARY_PATTERN = re.compile(r"[^a-zA-Z0-9]+(.)")
SENTENCE_START_PATTERN = re.compile(r"^\s*[A-Za-z0-9_]|[.!?]\s*[A-Za-z0-9_]")
WHITESPACE_RUN_PATTERN = re.compile(r"\s+")
DIGIT_PATTERN = re.compile(r"[0-9]")


def to_uppercase(text: str) -> str:
    return text.upper()


def to_lowercase(text: str) -> str:
    return text.lower()


def to_title_case(text: str) -> str:
    """Capitalize the first character of each space-delimited token."""
    return " ".join(
        word[:1].upper() + word[1:] for word in text.lower().split(" ")
    )


def to_sentence_case(text: str) -> str:
    """Capitalize the first letter of the text and of every sentence."""
    return SENTENCE_START_PATTERN.sub(
        lambda match: match.group(0).upper(), text.lower()
    )


def to_camel_case(text: str) -> str:
    """Drop delimiter runs and capitalize the character after each one."""
    return CAMEL_BOUNDARY_PATTERN.sub(
        lambda match: match.group(1).upper(), text.lower()
    )


def _to_delimited(text: str, separator: str) -> str:
    return NON_ALNUM_PATTERN.sub(separator, text.lower()).strip(separator)


def to_snake_case(text: str) -> str:
    return _to_delimited(text, "_")


def to_kebab_case(text: str) -> str:
    return _to_delimited(text, "-")


def reverse_text(text: str) -> str:
    return text[::-1]


def trim_whitespace(text: str) -> str:
    """Strip every line and collapse internal whitespace runs."""
    lines = (
        WHITESPACE_RUN_PATTERN.sub(" ", line.strip()) for line in text.split("\n")
    )
    return "\n".join(lines).strip()


def to_alternating_case(text: str) -> str:
    """Lower-case characters at even positions, upper-case odd ones."""
    return "".join(
        char.lower() if index % 2 == 0 else char.upper()
        for index, char in enumerate(text)
    )


def statistics_report(text: str) -> str:
    return format_report(compute_statistics(text))


def remove_numbers(text: str) -> str:
    return DIGIT_PATTERN.sub("", text)


TRANSFORMS: dict[TransformMode, Callable[[str], str]] = {
    TransformMode.UPPERCASE: to_uppercase,
    TransformMode.LOWERCASE: to_lowercase,
    TransformMode.TITLECASE: to_title_case,
    TransformMode.SENTENCECASE: to_sentence_case,
    TransformMode.CAMELCASE: to_camel_case,
    TransformMode.SNAKECASE: to_snake_case,
    TransformMode.KEBABCASE: to_kebab_case,
    TransformMode.REVERSE: reverse_text,
    TransformMode.TRIM: trim_whitespace,
    TransformMode.ALTERNATING: to_alternating_case,
    TransformMode.STATISTICS: statistics_report,
    TransformMode.REMOVENUMBERS: remove_numbers,
}


def transform(text: str, mode: Union[TransformMode, str]) -> str:
    """Apply a transformation mode to text.

    Args:
        text: The text to transform (may be empty)
        mode: A TransformMode or mode identifier

    Returns:
        The transformed text. Empty input yields an empty string, except
        for the statistics mode which reports zero counts. Unknown modes
        return the text unchanged.
    """
    resolved = resolve_mode(mode)
    if resolved is None:
        logger.debug("Unknown mode %r, returning text unchanged", mode)
        return text

    if not text and resolved is not TransformMode.STATISTICS:
        return ""

    return TRANSFORMS[resolved](text)
