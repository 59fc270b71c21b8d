"""
Layout diagnostics for positioned resume output.

Checks a LayoutResult against its own page geometry before it is handed to a
container writer.

Detection capabilities:
- Content below the bottom margin (only possible for a block taller than a page)
- Content past the right margin (an unbreakable word wider than the line)
- Overlapping runs on the same baseline (a KeyValueRow whose sides collide)
- Page count above a caller-supplied limit
"""

from dataclasses import dataclass, field
from typing import List, Optional

from resumeflow.contexts.layout.layout_data_structures import LayoutResult, PageLayout, PositionedRun

# Tolerance for float drift in position comparisons
EPSILON = 1e-6

# Characters of run text quoted in issue messages
QUOTE_LENGTH = 30


class IssueTemplates:
    """Centralized issue message templates (f-string style)."""

    # Document-level
    TOO_MANY_PAGES = "Page count {actual} exceeds limit of {limit}"

    # Page-level
    BELOW_MARGIN = "Page {page}: '{text}' sits below the bottom margin (y={y:.1f} < {limit:.1f})"
    ABOVE_MARGIN = "Page {page}: '{text}' extends above the top margin (top={top:.1f} > {limit:.1f})"
    PAST_RIGHT_MARGIN = "Page {page}: '{text}' extends past the right margin by {amount:.1f}pt"
    OVERLAP = "Page {page}: '{first}' overlaps '{second}' at y={y:.1f}"


def _quote(text: str) -> str:
    if len(text) <= QUOTE_LENGTH:
        return text
    return text[: QUOTE_LENGTH - 3] + "..."


# =============================================================================
# Diagnostics Hierarchy
# =============================================================================


@dataclass
class Diagnostics:
    """Base class for hierarchical diagnostics."""

    components: List["Diagnostics"] = field(default_factory=list)

    def get_issues(self) -> List[str]:
        """Generate issues for this level based on field values. Override in subclasses."""
        return []

    def get_inherited_issues(self) -> List[str]:
        """Collect issues from this level and all descendants."""
        all_issues = list(self.get_issues())
        for component in self.components:
            all_issues.extend(component.get_inherited_issues())
        return all_issues

    @property
    def is_valid(self) -> bool:
        """True if no issues at this level or any descendant."""
        return len(self.get_inherited_issues()) == 0


@dataclass
class PageDiagnostics(Diagnostics):
    """Diagnostics for a single page."""

    page_index: int = 0
    top_limit: float = 0.0
    bottom_limit: float = 0.0
    right_limit: float = 0.0
    below_margin: List[PositionedRun] = field(default_factory=list)
    above_margin: List[PositionedRun] = field(default_factory=list)
    past_right_margin: List[PositionedRun] = field(default_factory=list)
    overlaps: List[tuple] = field(default_factory=list)

    def get_issues(self) -> List[str]:
        issues = []
        page = self.page_index + 1
        for run in self.below_margin:
            issues.append(
                IssueTemplates.BELOW_MARGIN.format(
                    page=page, text=_quote(run.text), y=run.y, limit=self.bottom_limit
                )
            )
        for run in self.above_margin:
            issues.append(
                IssueTemplates.ABOVE_MARGIN.format(
                    page=page, text=_quote(run.text), top=run.y + run.size, limit=self.top_limit
                )
            )
        for run in self.past_right_margin:
            issues.append(
                IssueTemplates.PAST_RIGHT_MARGIN.format(
                    page=page, text=_quote(run.text), amount=run.right - self.right_limit
                )
            )
        for first, second in self.overlaps:
            issues.append(
                IssueTemplates.OVERLAP.format(
                    page=page, first=_quote(first.text), second=_quote(second.text), y=first.y
                )
            )
        return issues


@dataclass
class DocumentDiagnostics(Diagnostics):
    """Top-level diagnostics for the entire document."""

    document_name: str = ""
    page_count: int = 0
    max_pages: Optional[int] = None

    def get_issues(self) -> List[str]:
        issues = []
        if self.max_pages is not None and self.page_count > self.max_pages:
            issues.append(IssueTemplates.TOO_MANY_PAGES.format(actual=self.page_count, limit=self.max_pages))
        return issues


# =============================================================================
# Analysis
# =============================================================================


def _find_overlaps(runs: List[PositionedRun]) -> List[tuple]:
    """Pairs of runs on the same baseline whose horizontal extents intersect."""
    by_baseline = {}
    for run in runs:
        by_baseline.setdefault(round(run.y, 6), []).append(run)

    overlaps = []
    for line in by_baseline.values():
        ordered = sorted(line, key=lambda r: r.x)
        for first, second in zip(ordered, ordered[1:]):
            if first.right > second.x + EPSILON:
                overlaps.append((first, second))
    return overlaps


def _analyze_page(page: PageLayout, result: LayoutResult) -> PageDiagnostics:
    geometry = result.geometry
    diagnostics = PageDiagnostics(
        page_index=page.index,
        top_limit=geometry.top_y,
        bottom_limit=geometry.bottom_y,
        right_limit=geometry.right_x,
    )

    for run in page.runs:
        if run.y < geometry.bottom_y - EPSILON:
            diagnostics.below_margin.append(run)
        if run.y + run.size > geometry.top_y + EPSILON:
            diagnostics.above_margin.append(run)
        if run.right > geometry.right_x + EPSILON:
            diagnostics.past_right_margin.append(run)

    diagnostics.overlaps = _find_overlaps(page.runs)
    return diagnostics


def analyze_layout(result: LayoutResult, max_pages: Optional[int] = None) -> DocumentDiagnostics:
    """
    Analyze a LayoutResult for margin violations, overlaps and page count.

    Args:
        result: Engine output
        max_pages: Optional page limit (e.g. 1 for a one-page resume)

    Returns:
        DocumentDiagnostics with one PageDiagnostics component per page

    Example:
        >>> diagnostics = analyze_layout(result, max_pages=1)
        >>> diagnostics.is_valid
        True
    """
    return DocumentDiagnostics(
        components=[_analyze_page(page, result) for page in result.pages],
        document_name=result.document_name,
        page_count=result.page_count,
        max_pages=max_pages,
    )
