"""Unit tests for greedy line wrapping."""

import pytest

from resumeflow.contexts.layout.line_wrapper import LineWrapper, normalize_whitespace, wrap_text
from resumeflow.contexts.templating.style_data_structures import FontRole

BODY = FontRole.BODY


@pytest.mark.unit
def test_wrap_three_words_per_line(mono):
    """Test width that fits exactly three words breaks before the fourth."""
    # "The quick brown" is 15 characters = 75pt at 5pt per character
    lines = wrap_text("The quick brown fox jumps", 75, BODY, 10, mono)
    assert lines == ["The quick brown", "fox jumps"]


@pytest.mark.unit
def test_wrap_empty_and_blank_input(mono):
    """Test empty or whitespace-only text produces no lines."""
    wrapper = LineWrapper(mono)
    assert wrapper.wrap("", 100, BODY, 10) == []
    assert wrapper.wrap("   \n\t ", 100, BODY, 10) == []


@pytest.mark.unit
def test_long_word_is_never_split(mono):
    """Test a word wider than max width sits alone on its own line."""
    lines = wrap_text("a supercalifragilistic b", 30, BODY, 10, mono)
    assert lines == ["a", "supercalifragilistic", "b"]


@pytest.mark.unit
def test_lines_fit_or_are_single_words(mono):
    """Test every line fits max width unless it is one unbreakable word."""
    text = "Designed and operated distributed ingestion pipelines processing terabytes daily"
    for width in (20, 45, 60, 90, 150, 400):
        for line in wrap_text(text, width, BODY, 10, mono):
            assert mono.measure(line, BODY, 10) <= width or " " not in line


@pytest.mark.unit
def test_rejoined_lines_reproduce_normalized_text(mono):
    """Test joining lines with single spaces gives the whitespace-normalized input."""
    text = "  Led   the\tmigration of\n\nlegacy   services  "
    lines = wrap_text(text, 40, BODY, 10, mono)
    assert " ".join(lines) == normalize_whitespace(text)
    assert normalize_whitespace(text) == "Led the migration of legacy services"


@pytest.mark.unit
def test_wrap_is_idempotent(mono):
    """Test repeated calls with the same arguments give the same lines."""
    wrapper = LineWrapper(mono)
    text = "one two three four five six seven"
    first = wrapper.wrap(text, 50, BODY, 10)
    wrapper.wrap(text, 20, BODY, 10)
    assert wrapper.wrap(text, 50, BODY, 10) == first


@pytest.mark.unit
def test_wrap_uses_size(mono):
    """Test larger font sizes wrap earlier."""
    assert wrap_text("ab cd", 25, BODY, 10, mono) == ["ab cd"]
    assert wrap_text("ab cd", 25, BODY, 20, mono) == ["ab", "cd"]
