"""
Flow Cursor

Tracks the vertical writing position on the current page. The cursor only
reports overflow; page creation is the flow engine's decision.
"""

from dataclasses import dataclass, field

from resumeflow.contexts.layout.layout_data_structures import PageGeometry
from resumeflow.contexts.templating.style_data_structures import StyleParams

# Tolerance for float drift when comparing against the bottom margin
EPSILON = 1e-6


class FlowCursor:
    """Vertical cursor moving down from the top margin (bottom-left origin)."""

    def __init__(self, geometry: PageGeometry):
        self.geometry = geometry
        self.y = geometry.top_y

    @property
    def top_y(self) -> float:
        return self.geometry.top_y

    @property
    def bottom_y(self) -> float:
        return self.geometry.bottom_y

    @property
    def remaining(self) -> float:
        """Vertical space left above the bottom margin."""
        return self.y - self.bottom_y

    @property
    def at_top(self) -> bool:
        return abs(self.y - self.top_y) <= EPSILON

    def advance(self, amount: float) -> float:
        """
        Move the cursor down by amount points.

        Returns:
            New y position

        Raises:
            ValueError: If amount is negative
        """
        if amount < 0:
            raise ValueError(f"Cursor can only advance downward, got {amount}")
        self.y -= amount
        return self.y

    def would_overflow(self, amount: float) -> bool:
        """True if advancing by amount would move below the bottom margin."""
        return self.y - amount < self.bottom_y - EPSILON

    def reset_for_new_page(self) -> None:
        self.y = self.top_y


@dataclass
class FlowState:
    """
    Mutable per-call engine state.

    Created fresh by each DocumentFlowEngine.layout() call and never shared.
    """

    geometry: PageGeometry
    style: StyleParams
    page_index: int = 0
    cursor: FlowCursor = field(init=False)

    def __post_init__(self):
        self.cursor = FlowCursor(self.geometry)

    def start_new_page(self) -> None:
        self.page_index += 1
        self.cursor.reset_for_new_page()
