"""
Default values for resume styles.

Provides shared defaults used by:
- template_registry.py (professional style and its aliases)
- config_resolver.py (base values that presets and settings override)
- rendering/exporter.py (plain-text style for the text exporter)

Values follow the PDF exporter's historical constants: 50pt margins,
24/14/12/10pt font sizes and 15pt body lines.
"""

from typing import Any, Dict

from resumeflow.contexts.templating.style_data_structures import StyleParams

# Default color scheme (dark slate headings, blue accents)
DEFAULT_COLORS = {
    "primary_color": "#2c3e50",
    "secondary_color": "#3498db",
    "text_color": "#000000",
}

# Font sizes in points per role
DEFAULT_FONT_SIZES = {
    "title_size": 24.0,
    "heading_size": 14.0,
    "subheading_size": 12.0,
    "body_size": 10.0,
    "meta_size": 10.0,
}

# Spacing and indentation values in points
DEFAULT_SPACING = {
    "line_height_multiplier": 1.5,
    "bullet_indent": 10.0,
    "hanging_indent": 10.0,
    "section_spacing": 10.0,
    "entry_spacing": 10.0,
    "margin": 50.0,
}

DEFAULT_FONT_FAMILY = "Helvetica"
DEFAULT_BULLET_GLYPH = "•"
DEFAULT_PAGE_SIZE = "letter"

# Plain-text rendering: one 10pt Courier row per line, two-column continuation indent
PLAINTEXT_OVERRIDES = {
    "font_family": "Courier",
    "title_size": 10.0,
    "heading_size": 10.0,
    "subheading_size": 10.0,
    "body_size": 10.0,
    "meta_size": 10.0,
    "line_height_multiplier": 1.0,
    "bullet_glyph": "-",
    "bullet_indent": 0.0,
    "hanging_indent": 12.0,
    "margin": 0.0,
}


def get_default_style_values() -> Dict[str, Any]:
    """
    Get the complete set of professional style values as a plain dict.

    Returns:
        Dict with one entry per StyleParams field
    """
    return {
        "font_family": DEFAULT_FONT_FAMILY,
        **DEFAULT_FONT_SIZES,
        **DEFAULT_SPACING,
        "bullet_glyph": DEFAULT_BULLET_GLYPH,
        **DEFAULT_COLORS,
    }


def professional_style() -> StyleParams:
    """Build the professional style, the fallback for every unknown template."""
    return StyleParams(**get_default_style_values())


def plaintext_style() -> StyleParams:
    """Build the style used for plain-text export (Courier, 10pt rows)."""
    return StyleParams(**{**get_default_style_values(), **PLAINTEXT_OVERRIDES})
