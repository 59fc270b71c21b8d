"""Unit tests for BlockRenderer."""

from dataclasses import replace

import pytest

from resumeflow.contexts.layout.block_renderer import BlockRenderer
from resumeflow.contexts.layout.flow_cursor import FlowState
from resumeflow.contexts.layout.layout_data_structures import (
    BulletList,
    Heading,
    KeyValueRow,
    LabeledLine,
    PageGeometry,
    Paragraph,
    Spacer,
)
from resumeflow.contexts.templating.style_data_structures import FontRole


@pytest.fixture
def edge_page():
    """100x200pt page with no margins, so x offsets equal indents."""
    return PageGeometry(width=100, height=200, margin_top=0, margin_bottom=0, margin_left=0, margin_right=0)


def _render(block, geometry, style, metrics):
    renderer = BlockRenderer(geometry, style, metrics)
    state = FlowState(geometry=geometry, style=style)
    runs, height = renderer.render(block, state)
    return runs, height, state


@pytest.mark.unit
def test_bullets_start_with_glyph_at_bullet_indent(edge_page, bullet_style, mono):
    """Test each bullet item's first line starts with the glyph at the bullet indent."""
    runs, height, _ = _render(BulletList(["Led team of 5", "Shipped v2"]), edge_page, bullet_style, mono)

    assert [run.text for run in runs] == ["• Led team of 5", "• Shipped v2"]
    assert all(run.x == 10 for run in runs)
    assert runs[1].y < runs[0].y
    assert height == pytest.approx(30)


@pytest.mark.unit
def test_bullet_continuation_lines_use_hanging_indent(edge_page, bullet_style, mono):
    """Test wrapped bullet lines start at bullet indent plus hanging indent."""
    runs, _, _ = _render(BulletList(["alpha beta gamma delta epsilon"]), edge_page, bullet_style, mono)

    assert [(run.text, run.x) for run in runs] == [("• alpha beta gamma", 10), ("delta epsilon", 15)]


@pytest.mark.unit
def test_blank_bullet_items_are_skipped(edge_page, bullet_style, mono):
    """Test blank items emit nothing and consume no height."""
    runs, height, _ = _render(BulletList(["", "  ", "Real item"]), edge_page, bullet_style, mono)
    assert [run.text for run in runs] == ["• Real item"]
    assert height == pytest.approx(15)


@pytest.mark.unit
@pytest.mark.parametrize("hanging_indent", [0.0, 5.0])
def test_bullet_glyph_wider_than_hanging_indent_stays_in_margin(small_page, bullet_style, mono, hanging_indent):
    """Test the prefixed first line fits when the glyph and space are wider than the hanging indent."""
    narrow = replace(bullet_style, hanging_indent=hanging_indent)
    runs, _, _ = _render(BulletList(["a " * 20]), small_page, narrow, mono)

    # 160pt left after the bullet indent and the 10pt prefix: 16 words per first line
    assert runs[0].text == "• " + " ".join(["a"] * 16)
    assert runs[0].x == 20
    assert runs[1].x == 20 + hanging_indent
    assert all(run.right <= small_page.right_x for run in runs)


@pytest.mark.unit
def test_heading_is_single_unwrapped_run(small_page, style, mono):
    """Test headings produce one run even when wider than the content box."""
    text = "A VERY LONG SECTION HEADING THAT DOES NOT FIT ON ONE LINE"
    runs, height, state = _render(Heading(text), small_page, style, mono)

    assert len(runs) == 1
    assert runs[0].text == text
    assert runs[0].role == FontRole.HEADING
    assert runs[0].font == "Helvetica-Bold"
    assert runs[0].y == pytest.approx(90 - 14)
    assert height == pytest.approx(21)
    assert state.cursor.y == pytest.approx(90 - 21)


@pytest.mark.unit
def test_paragraph_lines_descend(small_page, style, mono):
    """Test paragraph lines share x and step down one body line each."""
    runs, height, _ = _render(Paragraph("one two three four five six seven eight nine ten"), small_page, style, mono)

    assert len(runs) > 1
    assert all(run.x == 10 for run in runs)
    for upper, lower in zip(runs, runs[1:]):
        assert upper.y - lower.y == pytest.approx(15)
    assert height == pytest.approx(15 * len(runs))


@pytest.mark.unit
def test_labeled_line_value_follows_label(small_page, style, mono):
    """Test value starts after the label width plus one space, on the same baseline."""
    runs, _, _ = _render(LabeledLine("Tech:", "Python, Go"), small_page, style, mono)

    label, value = runs
    assert label.text == "Tech:"
    assert label.role == FontRole.LABEL
    assert label.font == "Helvetica-Bold"
    assert value.x == pytest.approx(10 + 25 + 5)
    assert value.y == label.y


@pytest.mark.unit
def test_labeled_line_value_wraps_at_value_x(small_page, style, mono):
    """Test long values wrap with continuation lines aligned to the value."""
    value = " ".join(["word"] * 12)
    runs, _, _ = _render(LabeledLine("Tech:", value), small_page, style, mono)

    value_runs = runs[1:]
    assert len(value_runs) > 1
    assert all(run.x == pytest.approx(40) for run in value_runs)
    assert all(run.right <= small_page.right_x for run in value_runs)


@pytest.mark.unit
def test_labeled_line_with_one_side_blank(small_page, style, mono):
    """Test a blank value emits only the label, and a blank label only the value."""
    runs, _, _ = _render(LabeledLine("Tech:", ""), small_page, style, mono)
    assert [run.text for run in runs] == ["Tech:"]

    runs, _, _ = _render(LabeledLine("", "Python"), small_page, style, mono)
    assert [(run.text, run.x) for run in runs] == [("Python", 10)]


@pytest.mark.unit
def test_missing_heading_or_paragraph_text_is_skipped(small_page, style, mono):
    """Test None text renders nothing and consumes no height."""
    renderer = BlockRenderer(small_page, style, mono)
    for block in (Heading(None), Paragraph(None)):
        assert renderer.measure_height(block) == 0
        runs, height, state = _render(block, small_page, style, mono)
        assert runs == []
        assert height == 0
        assert state.cursor.y == pytest.approx(small_page.top_y)


@pytest.mark.unit
def test_key_value_row_right_aligned(small_page, style, mono):
    """Test right text ends exactly at the right margin, on the left text's baseline."""
    runs, height, _ = _render(KeyValueRow("Engineer - Acme", "1/2020 - Present"), small_page, style, mono)

    left, right = runs
    assert left.x == 10
    assert left.role == FontRole.SUBHEADING
    assert right.role == FontRole.META
    assert right.x == pytest.approx(190 - 80)
    assert right.right == pytest.approx(190)
    assert left.y == right.y == pytest.approx(90 - 12)
    assert height == pytest.approx(18)


@pytest.mark.unit
def test_key_value_row_collision_still_emitted(small_page, style, mono):
    """Test colliding sides are both emitted."""
    runs, _, _ = _render(KeyValueRow("x" * 30, "y" * 20), small_page, style, mono)
    assert len(runs) == 2


@pytest.mark.unit
def test_measure_height_matches_render(small_page, style, mono):
    """Test the page-break estimate equals the height render consumes."""
    renderer = BlockRenderer(small_page, style, mono)
    blocks = [
        Heading("SKILLS"),
        Paragraph("a b c d e f g h i j k l m n o p q r s t u v w x y z " * 3),
        BulletList(["first item that wraps around the line width", "second"]),
        LabeledLine("Languages:", "Python, Go, Rust, TypeScript, SQL, Bash"),
        KeyValueRow("Engineer", "2020"),
        Spacer(7),
    ]
    for block in blocks:
        state = FlowState(geometry=small_page, style=style)
        _, consumed = renderer.render(block, state)
        assert renderer.measure_height(block) == pytest.approx(consumed)
        assert state.cursor.y == pytest.approx(90 - consumed)


@pytest.mark.unit
def test_spacer_emits_no_runs(small_page, style, mono):
    """Test spacers only move the cursor."""
    runs, height, state = _render(Spacer(12), small_page, style, mono)
    assert runs == []
    assert height == 12
    assert state.cursor.y == pytest.approx(78)
