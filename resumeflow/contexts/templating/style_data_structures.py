"""
Style Data Structures

Defines the font roles used by the layout engine and the immutable style
parameters a template resolves to. Also maps (font family, role) pairs to
standard PDF face names so metrics and container writers agree on faces.
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict

from resumeflow.contexts.templating.exceptions import InvalidStyleError


class FontRole(str, Enum):
    """Semantic role of a run of text; determines its size and face."""

    TITLE = "title"
    HEADING = "heading"
    SUBHEADING = "subheading"
    BODY = "body"
    LABEL = "label"
    META = "meta"


# Roles drawn with the bold / italic face of the family
BOLD_ROLES = {FontRole.TITLE, FontRole.HEADING, FontRole.SUBHEADING, FontRole.LABEL}
ITALIC_ROLES = {FontRole.META}

# Standard 14 PDF faces per family: (regular, bold, italic)
STANDARD_FACES = {
    "Helvetica": ("Helvetica", "Helvetica-Bold", "Helvetica-Oblique"),
    "Times": ("Times-Roman", "Times-Bold", "Times-Italic"),
    "Courier": ("Courier", "Courier-Bold", "Courier-Oblique"),
}

# Common desktop family names mapped onto the closest standard family
FONT_ALIASES = {
    "helvetica": "Helvetica",
    "arial": "Helvetica",
    "calibri": "Helvetica",
    "sans-serif": "Helvetica",
    "times": "Times",
    "times-roman": "Times",
    "times new roman": "Times",
    "serif": "Times",
    "courier": "Courier",
    "courier new": "Courier",
    "monospace": "Courier",
}


def canonical_family(font_family: str) -> str:
    """Return the standard family for a font name, or the name itself if unknown."""
    return FONT_ALIASES.get(font_family.strip().lower(), font_family.strip())


def font_face(font_family: str, role: FontRole) -> str:
    """
    Resolve the concrete face name for a role within a family.

    Unknown families are passed through unchanged (all roles share the name),
    which lets callers register custom fonts with reportlab under that name.

    Examples:
        >>> font_face("Arial", FontRole.HEADING)
        'Helvetica-Bold'
        >>> font_face("Times", FontRole.META)
        'Times-Italic'
    """
    family = canonical_family(font_family)
    faces = STANDARD_FACES.get(family)
    if faces is None:
        return family

    regular, bold, italic = faces
    if role in BOLD_ROLES:
        return bold
    if role in ITALIC_ROLES:
        return italic
    return regular


@dataclass(frozen=True)
class StyleParams:
    """
    Immutable style parameters consumed by the layout engine.

    Sizes are in points. Line height for a role is its size times
    line_height_multiplier. Bullet glyphs sit at bullet_indent from the left
    margin; wrapped continuation lines start at bullet_indent + hanging_indent.

    Attributes:
        font_family: Family name (Helvetica, Times, Courier or an alias)
        title_size: Size of the document title (candidate name)
        heading_size: Size of section headings
        subheading_size: Size of entry headlines (job title, degree)
        body_size: Size of body text (also used for labels)
        meta_size: Size of italic meta lines (locations, dates, links)
        line_height_multiplier: Leading factor, at least 1.0
        bullet_indent: Offset of the bullet glyph from the left margin
        hanging_indent: Extra offset of wrapped bullet continuation lines
        bullet_glyph: Glyph drawn before the first line of each bullet item
        section_spacing: Vertical gap inserted between sections
        entry_spacing: Vertical gap inserted between entries within a section
        margin: Default page margin applied to all four sides
        primary_color: Hex color for headings
        secondary_color: Hex color for accents
        text_color: Hex color for body text
    """

    font_family: str = "Helvetica"
    title_size: float = 24.0
    heading_size: float = 14.0
    subheading_size: float = 12.0
    body_size: float = 10.0
    meta_size: float = 10.0
    line_height_multiplier: float = 1.5
    bullet_indent: float = 10.0
    hanging_indent: float = 10.0
    bullet_glyph: str = "•"
    section_spacing: float = 10.0
    entry_spacing: float = 10.0
    margin: float = 50.0
    primary_color: str = "#2c3e50"
    secondary_color: str = "#3498db"
    text_color: str = "#000000"

    def __post_init__(self):
        if not self.font_family or not self.font_family.strip():
            raise InvalidStyleError("Font family must be a non-empty name", "font_family", self.font_family)

        for name in ("title_size", "heading_size", "subheading_size", "body_size", "meta_size"):
            value = getattr(self, name)
            if value <= 0:
                raise InvalidStyleError("Font sizes must be positive", name, value)

        if self.line_height_multiplier < 1.0:
            raise InvalidStyleError(
                "Line height multiplier must be at least 1.0 so lines never overlap",
                "line_height_multiplier",
                self.line_height_multiplier,
            )

        for name in ("bullet_indent", "hanging_indent", "section_spacing", "entry_spacing", "margin"):
            value = getattr(self, name)
            if value < 0:
                raise InvalidStyleError("Offsets and spacings must not be negative", name, value)

    def size_for(self, role: FontRole) -> float:
        """Font size in points for a role."""
        if role == FontRole.TITLE:
            return self.title_size
        if role == FontRole.HEADING:
            return self.heading_size
        if role == FontRole.SUBHEADING:
            return self.subheading_size
        if role == FontRole.META:
            return self.meta_size
        return self.body_size

    def line_height(self, role: FontRole) -> float:
        """Vertical advance in points for one line in a role."""
        return self.size_for(role) * self.line_height_multiplier

    def font_for(self, role: FontRole) -> str:
        """Concrete face name for a role."""
        return font_face(self.font_family, role)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
