"""
Block Renderer

Converts one semantic block into positioned runs. Each block is first planned
as a list of lines (segments with x offsets and roles); measure_height() and
render() share that plan, so the page-break estimate always equals the height
actually consumed.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from resumeflow.contexts.layout.exceptions import LayoutContractError
from resumeflow.contexts.layout.flow_cursor import FlowState
from resumeflow.contexts.layout.font_metrics import FontMetrics
from resumeflow.contexts.layout.layout_data_structures import (
    BulletList,
    Heading,
    KeyValueRow,
    LabeledLine,
    PageGeometry,
    Paragraph,
    PositionedRun,
    Spacer,
    TextBlock,
)
from resumeflow.contexts.layout.line_wrapper import LineWrapper, normalize_whitespace
from resumeflow.contexts.layout.logger import _log_debug
from resumeflow.contexts.templating.style_data_structures import FontRole, StyleParams


@dataclass
class _Segment:
    text: str
    x: float
    role: FontRole
    width: float


@dataclass
class _PlannedLine:
    segments: List[_Segment] = field(default_factory=list)
    height: float = 0.0
    ascent: float = 0.0


class BlockRenderer:
    """
    Renders TextBlocks against a fixed geometry and style.

    Args:
        geometry: Page geometry (margins define the content box)
        style: Resolved style parameters
        metrics: Width measurement provider
    """

    def __init__(self, geometry: PageGeometry, style: StyleParams, metrics: FontMetrics):
        self.geometry = geometry
        self.style = style
        self.metrics = metrics
        self.wrapper = LineWrapper(metrics)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def measure_height(self, block: TextBlock) -> float:
        """Height in points that render() will consume for this block."""
        if isinstance(block, Spacer):
            return block.height
        return sum(line.height for line in self._plan(block))

    def render(self, block: TextBlock, state: FlowState) -> Tuple[List[PositionedRun], float]:
        """
        Place a block at the current cursor and advance the cursor past it.

        Args:
            block: Block to render
            state: Engine state (cursor and page index are read and the cursor advanced)

        Returns:
            (runs in emission order, total height consumed)
        """
        if isinstance(block, Spacer):
            state.cursor.advance(block.height)
            return [], block.height

        runs: List[PositionedRun] = []
        consumed = 0.0

        for line in self._plan(block):
            baseline = state.cursor.y - line.ascent
            for segment in line.segments:
                size = self.style.size_for(segment.role)
                runs.append(
                    PositionedRun(
                        text=segment.text,
                        x=segment.x,
                        y=baseline,
                        role=segment.role,
                        size=size,
                        font=self.style.font_for(segment.role),
                        width=segment.width,
                        page_index=state.page_index,
                    )
                )
            state.cursor.advance(line.height)
            consumed += line.height

        return runs, consumed

    # ------------------------------------------------------------------
    # Line planning
    # ------------------------------------------------------------------

    def _plan(self, block: TextBlock) -> List[_PlannedLine]:
        if isinstance(block, Heading):
            return self._plan_heading(block)
        if isinstance(block, Paragraph):
            return self._plan_paragraph(block)
        if isinstance(block, BulletList):
            return self._plan_bullets(block)
        if isinstance(block, LabeledLine):
            return self._plan_labeled_line(block)
        if isinstance(block, KeyValueRow):
            return self._plan_key_value_row(block)
        if isinstance(block, Spacer):
            return []
        raise LayoutContractError(f"Unsupported block type {type(block).__name__}")

    def _measure(self, text: str, role: FontRole) -> float:
        return self.metrics.measure(text, role, self.style.size_for(role))

    def _segment(self, text: str, x: float, role: FontRole) -> _Segment:
        return _Segment(text=text, x=x, role=role, width=self._measure(text, role))

    def _line(self, *segments: _Segment) -> _PlannedLine:
        roles = [segment.role for segment in segments]
        return _PlannedLine(
            segments=list(segments),
            height=max(self.style.line_height(role) for role in roles),
            ascent=max(self.style.size_for(role) for role in roles),
        )

    def _wrap(self, text: str, max_width: float, role: FontRole) -> List[str]:
        return self.wrapper.wrap(text, max_width, role, self.style.size_for(role))

    def _plan_heading(self, block: Heading) -> List[_PlannedLine]:
        # Headings are a single run, never wrapped
        text = normalize_whitespace(block.text or "")
        if not text:
            return []
        return [self._line(self._segment(text, self.geometry.left_x, block.role))]

    def _plan_paragraph(self, block: Paragraph) -> List[_PlannedLine]:
        left = self.geometry.left_x
        return [
            self._line(self._segment(text, left, block.role))
            for text in self._wrap(block.text or "", self.geometry.content_width, block.role)
        ]

    def _plan_bullets(self, block: BulletList) -> List[_PlannedLine]:
        bullet_x = self.geometry.left_x + self.style.bullet_indent
        continuation_x = bullet_x + self.style.hanging_indent
        prefix = f"{self.style.bullet_glyph} "
        # One width for all lines: it must fit both the prefixed first line and the hanging continuations
        offset = max(self.style.hanging_indent, self._measure(prefix, block.role))
        max_width = self.geometry.right_x - bullet_x - offset

        lines: List[_PlannedLine] = []
        for item in block.items:
            wrapped = self._wrap(item or "", max_width, block.role)
            for index, text in enumerate(wrapped):
                if index == 0:
                    lines.append(self._line(self._segment(prefix + text, bullet_x, block.role)))
                else:
                    lines.append(self._line(self._segment(text, continuation_x, block.role)))
        return lines

    def _plan_labeled_line(self, block: LabeledLine) -> List[_PlannedLine]:
        left = self.geometry.left_x
        label = normalize_whitespace(block.label or "")
        value = block.value or ""

        if not label:
            return self._plan_paragraph(Paragraph(value, role=block.value_role))

        label_segment = self._segment(label, left, block.label_role)
        if not value.strip():
            return [self._line(label_segment)]

        value_x = left + label_segment.width + self._measure(" ", block.value_role)
        wrapped = self._wrap(value, self.geometry.right_x - value_x, block.value_role)

        lines = [self._line(label_segment, self._segment(wrapped[0], value_x, block.value_role))]
        for text in wrapped[1:]:
            lines.append(self._line(self._segment(text, value_x, block.value_role)))
        return lines

    def _plan_key_value_row(self, block: KeyValueRow) -> List[_PlannedLine]:
        left_text = normalize_whitespace(block.left or "")
        right_text = normalize_whitespace(block.right or "")

        segments = []
        if left_text:
            segments.append(self._segment(left_text, self.geometry.left_x, block.left_role))
        if right_text:
            right_width = self._measure(right_text, block.right_role)
            segments.append(
                _Segment(
                    text=right_text,
                    x=self.geometry.right_x - right_width,
                    role=block.right_role,
                    width=right_width,
                )
            )

        if not segments:
            return []

        if len(segments) == 2 and segments[0].x + segments[0].width > segments[1].x:
            _log_debug(f"KeyValueRow sides overlap: '{left_text}' collides with '{right_text}'")

        return [self._line(*segments)]
