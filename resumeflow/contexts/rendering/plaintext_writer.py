"""
Plain-text writer.

Turns a LayoutResult into monospace text: runs sharing a baseline become one
text line, x offsets become columns and vertical gaps become blank lines.
Pages are separated by a form feed.
"""

from typing import List, Optional

from resumeflow.contexts.layout.font_metrics import FontMetrics, MonospaceMetrics
from resumeflow.contexts.layout.layout_data_structures import LayoutResult, PageLayout, PositionedRun
from resumeflow.contexts.templating.style_data_structures import FontRole

PAGE_SEPARATOR = "\f"

# Tolerance when comparing baselines of runs on the same line
Y_TOLERANCE = 1e-6


def _group_lines(runs: List[PositionedRun]) -> List[List[PositionedRun]]:
    """Group consecutive runs that share a baseline."""
    lines: List[List[PositionedRun]] = []
    for run in runs:
        if lines and abs(lines[-1][0].y - run.y) <= Y_TOLERANCE:
            lines[-1].append(run)
        else:
            lines.append([run])
    return lines


def _compose_line(runs: List[PositionedRun], left: float, char_width: float) -> str:
    text = ""
    for run in sorted(runs, key=lambda r: r.x):
        column = max(0, round((run.x - left) / char_width))
        if column < len(text):
            # Colliding runs keep their text, separated by one space
            column = len(text) + 1
        text = text.ljust(column) + run.text
    return text.rstrip()


def _render_page(page: PageLayout, left: float, char_width: float, row_pitch: float) -> str:
    output: List[str] = []
    previous_y: Optional[float] = None

    for line in _group_lines(page.runs):
        y = line[0].y
        if previous_y is not None:
            rows = round((previous_y - y) / row_pitch)
            output.extend([""] * max(rows - 1, 0))
        output.append(_compose_line(line, left, char_width))
        previous_y = y

    return "\n".join(output)


def render_plaintext(result: LayoutResult, metrics: Optional[FontMetrics] = None) -> str:
    """
    Serialize a LayoutResult as plain text.

    Args:
        result: Engine output (normally laid out with the plain-text style)
        metrics: Metrics used to convert x offsets to columns; defaults to MonospaceMetrics

    Returns:
        Text with one line per baseline, pages joined by form feeds
    """
    if metrics is None:
        metrics = MonospaceMetrics()

    style = result.style
    char_width = metrics.measure("M", FontRole.BODY, style.body_size)
    row_pitch = style.line_height(FontRole.BODY)
    left = result.geometry.left_x

    pages = [_render_page(page, left, char_width, row_pitch) for page in result.pages]
    text = PAGE_SEPARATOR.join(pages)
    return f"{text}\n" if text else ""
