"""
Greedy line wrapping.

Words are packed left to right into lines no wider than max_width. A word wider
than max_width on its own is placed alone on its line and never split.
"""

from typing import List

from resumeflow.contexts.layout.font_metrics import FontMetrics
from resumeflow.contexts.templating.style_data_structures import FontRole


def normalize_whitespace(text: str) -> str:
    """Collapse all whitespace runs to single spaces and trim the ends."""
    return " ".join(text.split())


class LineWrapper:
    """Stateless greedy wrapper bound to a metrics provider."""

    def __init__(self, metrics: FontMetrics):
        self.metrics = metrics

    def wrap(self, text: str, max_width: float, role: FontRole, size: float) -> List[str]:
        """
        Wrap text into lines whose measured width fits max_width.

        Joining the returned lines with single spaces reproduces the
        whitespace-normalized input.

        Args:
            text: Raw text (any whitespace)
            max_width: Available width in points
            role: Font role used for measurement
            size: Font size in points

        Returns:
            Lines in word order; empty list for empty or blank input
        """
        words = text.split()
        lines: List[str] = []
        current = ""

        for word in words:
            candidate = f"{current} {word}" if current else word
            if current and self.metrics.measure(candidate, role, size) > max_width:
                lines.append(current)
                current = word
            else:
                current = candidate

        if current:
            lines.append(current)

        return lines


def wrap_text(text: str, max_width: float, role: FontRole, size: float, metrics: FontMetrics) -> List[str]:
    """Functional form of LineWrapper.wrap."""
    return LineWrapper(metrics).wrap(text, max_width, role, size)
