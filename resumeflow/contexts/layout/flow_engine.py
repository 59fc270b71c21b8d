"""
Document Flow Engine

Walks an ordered list of Sections, renders each heading and block through the
BlockRenderer and decides page breaks. One layout() call owns one FlowState;
the engine itself holds only immutable configuration, so a single engine can
serve concurrent calls.
"""

from typing import List, Optional, Sequence

from resumeflow.contexts.layout.block_renderer import BlockRenderer
from resumeflow.contexts.layout.flow_cursor import FlowState
from resumeflow.contexts.layout.font_metrics import FontMetrics, MeasurementCache, ReportLabMetrics
from resumeflow.contexts.layout.layout_data_structures import (
    Heading,
    LayoutResult,
    PageGeometry,
    PageLayout,
    Section,
    Spacer,
    TextBlock,
    ensure_sections,
)
from resumeflow.contexts.layout.logger import (
    _log_debug,
    log_layout_result,
    log_layout_start,
    log_oversized_block,
    log_page_break,
)
from resumeflow.contexts.templating.style_data_structures import FontRole, StyleParams


class DocumentFlowEngine:
    """
    Lays out sections onto pages.

    Args:
        geometry: Page geometry shared by every page
        style: Resolved style parameters
        metrics: Width provider; defaults to reportlab metrics for the style's font family

    Example:
        >>> engine = DocumentFlowEngine(PageGeometry.from_page_size("letter"), professional_style())
        >>> result = engine.layout([Section("SKILLS", [Paragraph("Python, Go")])])
        >>> result.page_count
        1
    """

    def __init__(self, geometry: PageGeometry, style: StyleParams, metrics: Optional[FontMetrics] = None):
        self.geometry = geometry
        self.style = style
        self.metrics = metrics if metrics is not None else ReportLabMetrics(style.font_family)

    def layout(self, sections: Sequence[Section], document_name: str = "document") -> LayoutResult:
        """
        Lay out sections in order and return runs grouped by page.

        Args:
            sections: Ordered sections (None or non-Section entries raise LayoutContractError)
            document_name: Identifier used in logs and in the result

        Returns:
            LayoutResult with at least one page
        """
        sections = ensure_sections(sections)
        log_layout_start(document_name, len(sections), self.geometry)

        walk = _FlowWalk(self.geometry, self.style, MeasurementCache(self.metrics))

        for section in sections:
            if section.is_empty:
                _log_debug(f"Skipping empty section in {document_name}")
                continue
            walk.place_section(section)

        result = LayoutResult(
            pages=walk.pages,
            geometry=self.geometry,
            style=self.style,
            document_name=document_name,
        )
        log_layout_result(document_name, result)
        return result


class _FlowWalk:
    """Single-use state machine for one layout() call."""

    def __init__(self, geometry: PageGeometry, style: StyleParams, metrics: FontMetrics):
        self.geometry = geometry
        self.style = style
        self.renderer = BlockRenderer(geometry, style, metrics)
        self.state = FlowState(geometry=geometry, style=style)
        self.pages: List[PageLayout] = [PageLayout(index=0)]
        self.rendered_sections = 0
        self.section_has_content = False

    @property
    def page_is_fresh(self) -> bool:
        return self.pages[-1].is_empty

    def place_section(self, section: Section) -> None:
        self.section_has_content = False

        if section.has_heading:
            heading = Heading(section.heading, role=FontRole.HEADING)
            self._keep_with_first_block(heading, section.blocks)
            self._place(heading)

        for block in section.blocks:
            self._place(block)

        if self.section_has_content:
            self.rendered_sections += 1

    def _place(self, block: TextBlock) -> None:
        if isinstance(block, Spacer):
            # Whitespace is dropped at the top of a page and before a section's first content
            if not self.page_is_fresh and self.section_has_content:
                self.renderer.render(block, self.state)
            return

        height = self.renderer.measure_height(block)
        if height <= 0:
            return

        if not self.section_has_content and self.rendered_sections and not self.page_is_fresh:
            # Inter-section spacing is added without a page-break check
            self.state.cursor.advance(self.style.section_spacing)

        if not self.page_is_fresh and self.state.cursor.would_overflow(height):
            self._break_page(height)

        if height > self.geometry.content_height:
            log_oversized_block(type(block).__name__, height, self.geometry.content_height)

        runs, _ = self.renderer.render(block, self.state)
        self.pages[-1].runs.extend(runs)
        self.section_has_content = True

    def _keep_with_first_block(self, heading: Heading, blocks: Sequence[TextBlock]) -> None:
        """Break before a heading that would otherwise be stranded at the bottom of a page."""
        if self.page_is_fresh:
            return

        heading_height = self.renderer.measure_height(heading)
        if heading_height <= 0:
            return

        first_height = 0.0
        for block in blocks:
            if isinstance(block, Spacer):
                continue
            first_height = self.renderer.measure_height(block)
            if first_height > 0:
                break

        needed = heading_height + first_height
        if needed > self.geometry.content_height:
            # Pair cannot share any page; the heading goes where it fits on its own
            return

        if self.rendered_sections:
            needed += self.style.section_spacing

        if self.state.cursor.would_overflow(needed):
            self._break_page(needed)

    def _break_page(self, needed: float) -> None:
        log_page_break(self.state.page_index + 1, needed, self.state.cursor.remaining)
        self.state.start_new_page()
        self.pages.append(PageLayout(index=self.state.page_index))
