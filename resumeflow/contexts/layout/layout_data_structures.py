"""
Layout Data Structures

Defines the engine's inputs (page geometry, semantic blocks, sections) and its
outputs (positioned runs grouped into pages).

Coordinates are in points with a bottom-left origin: y decreases as layout
proceeds down the page. A line of height h written at cursor y occupies
[y - h, y] and its runs sit on baseline y - (largest font size on the line).
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from reportlab.lib.pagesizes import A4, LETTER

from resumeflow.contexts.layout.exceptions import InvalidGeometryError, LayoutContractError
from resumeflow.contexts.templating.style_data_structures import FontRole, StyleParams

PAGE_SIZES = {
    "letter": LETTER,
    "a4": A4,
}

# Finite stand-in for "no page breaks" so y stays strictly decreasing
UNBOUNDED_HEIGHT = 1e9


# ============================================================================
# Page geometry
# ============================================================================


@dataclass(frozen=True)
class PageGeometry:
    """
    Page size and margins in points.

    Invariant: width > left + right margins and height > top + bottom margins.
    """

    width: float
    height: float
    margin_top: float
    margin_bottom: float
    margin_left: float
    margin_right: float

    def __post_init__(self):
        margins = (self.margin_top, self.margin_bottom, self.margin_left, self.margin_right)
        if any(m < 0 for m in margins):
            raise InvalidGeometryError("Margins must not be negative", self.width, self.height)
        if self.width <= self.margin_left + self.margin_right:
            raise InvalidGeometryError("Left and right margins leave no content width", self.width, self.height)
        if self.height <= self.margin_top + self.margin_bottom:
            raise InvalidGeometryError("Top and bottom margins leave no content height", self.width, self.height)

    @classmethod
    def from_page_size(
        cls,
        page_size: str = "letter",
        margin: float = 50.0,
        margin_top: Optional[float] = None,
        margin_bottom: Optional[float] = None,
        margin_left: Optional[float] = None,
        margin_right: Optional[float] = None,
    ) -> "PageGeometry":
        """
        Build geometry for a named page size with a uniform margin and optional per-side overrides.

        Unknown page sizes fall back to US Letter.
        """
        width, height = PAGE_SIZES.get((page_size or "letter").strip().lower(), LETTER)
        return cls(
            width=width,
            height=height,
            margin_top=margin if margin_top is None else margin_top,
            margin_bottom=margin if margin_bottom is None else margin_bottom,
            margin_left=margin if margin_left is None else margin_left,
            margin_right=margin if margin_right is None else margin_right,
        )

    @classmethod
    def unbounded(cls, width: float, margin: float = 0.0) -> "PageGeometry":
        """Build a single effectively-infinite page, used for plain-text export."""
        return cls(
            width=width,
            height=UNBOUNDED_HEIGHT,
            margin_top=margin,
            margin_bottom=margin,
            margin_left=margin,
            margin_right=margin,
        )

    @property
    def content_width(self) -> float:
        return self.width - self.margin_left - self.margin_right

    @property
    def content_height(self) -> float:
        return self.height - self.margin_top - self.margin_bottom

    @property
    def top_y(self) -> float:
        return self.height - self.margin_top

    @property
    def bottom_y(self) -> float:
        return self.margin_bottom

    @property
    def left_x(self) -> float:
        return self.margin_left

    @property
    def right_x(self) -> float:
        return self.width - self.margin_right

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


# ============================================================================
# Semantic blocks (engine input)
# ============================================================================


@dataclass(frozen=True)
class Heading:
    """A single unwrapped line (section heading, or the title when role=TITLE)."""

    text: Optional[str]
    role: FontRole = FontRole.HEADING


@dataclass(frozen=True)
class Paragraph:
    """Free text wrapped at the content width."""

    text: Optional[str]
    role: FontRole = FontRole.BODY


@dataclass(frozen=True)
class BulletList:
    """Ordered bullet items, each wrapped with a hanging indent."""

    items: Tuple[str, ...]
    role: FontRole = FontRole.BODY

    def __post_init__(self):
        if self.items is None:
            raise LayoutContractError("BulletList items must be a sequence, not None")
        if isinstance(self.items, str):
            raise LayoutContractError("BulletList items must be a sequence of strings, not a string")
        object.__setattr__(self, "items", tuple(self.items))


@dataclass(frozen=True)
class LabeledLine:
    """Emphasized label followed by a value on the same baseline (e.g. 'Technologies: Go')."""

    label: str
    value: str
    label_role: FontRole = FontRole.LABEL
    value_role: FontRole = FontRole.BODY


@dataclass(frozen=True)
class KeyValueRow:
    """Left text at the left margin, right text right-aligned, same baseline."""

    left: str
    right: str
    left_role: FontRole = FontRole.SUBHEADING
    right_role: FontRole = FontRole.META


@dataclass(frozen=True)
class Spacer:
    """Vertical whitespace between entries. Emits no runs."""

    height: float

    def __post_init__(self):
        if self.height < 0:
            raise LayoutContractError(f"Spacer height must not be negative, got {self.height}")


TextBlock = Union[Heading, Paragraph, BulletList, LabeledLine, KeyValueRow, Spacer]
BLOCK_TYPES = (Heading, Paragraph, BulletList, LabeledLine, KeyValueRow, Spacer)


@dataclass(frozen=True)
class Section:
    """
    Named group of blocks in document order.

    The heading (if any) is rendered once before the blocks.
    """

    heading: Optional[str] = None
    blocks: Tuple[TextBlock, ...] = ()

    def __post_init__(self):
        if self.blocks is None:
            raise LayoutContractError("Section blocks must be a sequence, not None")
        blocks = tuple(self.blocks)
        for index, block in enumerate(blocks):
            if not isinstance(block, BLOCK_TYPES):
                raise LayoutContractError(
                    f"Unsupported block type {type(block).__name__}", block_index=index
                )
        object.__setattr__(self, "blocks", blocks)

    @property
    def has_heading(self) -> bool:
        return bool(self.heading and self.heading.strip())

    @property
    def is_empty(self) -> bool:
        return not self.has_heading and not self.blocks


# ============================================================================
# Positioned output
# ============================================================================


@dataclass(frozen=True)
class PositionedRun:
    """
    One line fragment of styled text at an absolute position.

    Attributes:
        text: Text content
        x: Left edge in points
        y: Baseline in points (bottom-left origin)
        role: Font role
        size: Font size in points
        font: Resolved face name (e.g. 'Helvetica-Bold')
        width: Measured width in points
        page_index: 0-based page index
    """

    text: str
    x: float
    y: float
    role: FontRole
    size: float
    font: str
    width: float
    page_index: int

    @property
    def right(self) -> float:
        return self.x + self.width

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "x": self.x,
            "y": self.y,
            "role": self.role.value,
            "size": self.size,
            "font": self.font,
            "width": self.width,
            "page_index": self.page_index,
        }


@dataclass
class PageLayout:
    """Runs placed on one page, in emission order."""

    index: int
    runs: List[PositionedRun] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.runs

    def to_dict(self) -> Dict[str, Any]:
        return {"index": self.index, "runs": [run.to_dict() for run in self.runs]}


@dataclass
class LayoutResult:
    """
    Complete output of one engine invocation.

    Always holds at least one page, even for empty input.
    """

    pages: List[PageLayout]
    geometry: PageGeometry
    style: StyleParams
    document_name: str = "document"

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def runs(self) -> List[PositionedRun]:
        return [run for page in self.pages for run in page.runs]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "document_name": self.document_name,
            "page_count": self.page_count,
            "geometry": self.geometry.to_dict(),
            "style": self.style.to_dict(),
            "pages": [page.to_dict() for page in self.pages],
        }


def ensure_sections(sections: Optional[Sequence[Section]]) -> List[Section]:
    """Validate a caller's section list, failing fast on contract violations."""
    if sections is None:
        raise LayoutContractError("Section list must be a sequence, not None")
    checked = []
    for index, section in enumerate(sections):
        if not isinstance(section, Section):
            raise LayoutContractError(
                f"Expected Section, got {type(section).__name__}", section_index=index
            )
        checked.append(section)
    return checked
