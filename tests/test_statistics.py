"""Tests for text statistics."""

from textforge.core.models import TransformMode
from textforge.core.statistics import (
    TextStatistics,
    compute_statistics,
    count_sentences,
    format_number,
    format_report,
    quick_counts,
)
from textforge.core.transformer import transform


class TestComputeStatistics:
    """Tests for compute_statistics."""

    def test_scenario_sentences_and_words(self, sample_text: str):
        """Test the three-sentence, five-word sample."""
        stats = compute_statistics(sample_text)

        assert stats.sentences == 3
        assert stats.words == 5

    def test_all_metrics(self):
        stats = compute_statistics("One two.\nThree  four!")

        assert stats == TextStatistics(
            words=4,
            characters=21,
            characters_no_spaces=17,
            lines=2,
            sentences=2,
        )

    def test_empty_text(self):
        assert compute_statistics("") == TextStatistics(
            words=0, characters=0, characters_no_spaces=0, lines=1, sentences=0
        )

    def test_whitespace_only(self):
        """Test that whitespace-only text has no words or sentences."""
        stats = compute_statistics("  \n\t ")

        assert stats.words == 0
        assert stats.sentences == 0
        assert stats.characters == 5
        assert stats.characters_no_spaces == 0
        assert stats.lines == 2

    def test_no_terminator_is_one_sentence(self):
        assert count_sentences("just some words") == 1

    def test_terminator_runs_count_once(self):
        """Test that runs like '?!' and '...' split only once."""
        assert count_sentences("Really?! Yes... ok") == 3

    def test_trailing_whitespace_segment_ignored(self):
        assert count_sentences("Done. ") == 1


class TestReport:
    """Tests for report formatting."""

    def test_report_layout(self):
        report = format_report(
            TextStatistics(
                words=1234,
                characters=1234567,
                characters_no_spaces=999,
                lines=3,
                sentences=2,
            )
        )

        assert report.splitlines() == [
            "📊 Text Statistics:",
            "",
            "Words: 1,234",
            "Characters: 1,234,567",
            "Characters (no spaces): 999",
            "Lines: 3",
            "Sentences: 2",
        ]

    def test_format_number_groups_thousands(self):
        assert format_number(0) == "0"
        assert format_number(1000) == "1,000"
        assert format_number(12345678) == "12,345,678"

    def test_statistics_mode_renders_report(self, sample_text: str):
        result = transform(sample_text, TransformMode.STATISTICS)

        assert result.startswith("📊 Text Statistics:")
        assert "Sentences: 3" in result
        assert "Words: 5" in result


class TestQuickCounts:
    """Tests for the editor summary counts."""

    def test_quick_counts(self):
        assert quick_counts("two words") == (2, 9)

    def test_quick_counts_empty(self):
        assert quick_counts("") == (0, 0)
