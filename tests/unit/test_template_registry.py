"""Unit tests for template selection and the StyleRegistry class."""

import pytest

from resumeflow.contexts.templating.defaults import professional_style
from resumeflow.contexts.templating.template_registry import StyleRegistry, TemplateName, resolve_template


@pytest.mark.unit
def test_unknown_template_resolves_to_professional():
    """Test unknown names fail closed to the professional style."""
    assert resolve_template("nonexistent") == resolve_template("professional")


@pytest.mark.unit
def test_missing_template_resolves_to_professional():
    """Test None and empty names resolve without raising."""
    assert resolve_template(None) == professional_style()
    assert resolve_template("") == professional_style()


@pytest.mark.unit
def test_modern_and_creative_match_professional():
    """Test modern and creative currently share the professional style."""
    professional = resolve_template("professional")
    assert resolve_template("modern") == professional
    assert resolve_template("creative") == professional


@pytest.mark.unit
def test_template_name_parse():
    """Test parsing ignores case and whitespace and defaults to professional."""
    assert TemplateName.parse(" MODERN ") == TemplateName.MODERN
    assert TemplateName.parse("creative") == TemplateName.CREATIVE
    assert TemplateName.parse("nonexistent") == TemplateName.PROFESSIONAL
    assert TemplateName.parse(None) == TemplateName.PROFESSIONAL
    assert TemplateName.is_known("Modern")
    assert not TemplateName.is_known("fancy")


@pytest.mark.unit
def test_professional_values():
    """Test the professional style carries the historical exporter constants."""
    style = resolve_template("professional")
    assert style.font_family == "Helvetica"
    assert (style.title_size, style.heading_size, style.subheading_size, style.body_size) == (24, 14, 12, 10)
    assert style.line_height_multiplier == 1.5
    assert style.margin == 50
    assert style.bullet_indent == 10
    assert style.hanging_indent == 10
    assert style.primary_color == "#2c3e50"


@pytest.mark.unit
def test_style_registry_init():
    """Test StyleRegistry starts with an empty cache."""
    registry = StyleRegistry()
    assert registry._cache == {}


@pytest.mark.unit
def test_style_caching():
    """Test styles are cached after first resolution."""
    registry = StyleRegistry()

    style1 = registry.get_style("professional")
    assert registry.is_cached("professional")
    assert not registry.is_cached("professional", ["spacing_tight"])

    style2 = registry.get_style("PROFESSIONAL")
    assert style1 is style2


@pytest.mark.unit
def test_style_registry_with_presets():
    """Test preset stacks are resolved and cached independently."""
    registry = StyleRegistry()
    base = registry.get_style("modern")
    tight = registry.get_style("modern", ["spacing_tight"])

    assert tight != base
    assert tight.line_height_multiplier == 1.2
    assert registry.is_cached("modern", ["spacing_tight"])


@pytest.mark.unit
def test_style_registry_unknown_preset():
    """Test unknown presets raise ValueError and are not cached."""
    registry = StyleRegistry()
    with pytest.raises(ValueError, match="not found"):
        registry.get_style("professional", ["spacing_nonexistent"])
    assert not registry.is_cached("professional", ["spacing_nonexistent"])


@pytest.mark.unit
def test_clear_cache():
    """Test cache clearing."""
    registry = StyleRegistry()
    registry.get_style("professional")
    assert len(registry._cache) == 1

    registry.clear_cache()
    assert len(registry._cache) == 0
