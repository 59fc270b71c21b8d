"""
Template Selector

Maps template names to resolved StyleParams. Template names form a closed set;
anything unrecognized fails closed to the professional style instead of raising.
"""

from enum import Enum
from typing import Dict, Optional, Sequence, Tuple

from resumeflow.contexts.templating.config_resolver import apply_presets
from resumeflow.contexts.templating.defaults import professional_style
from resumeflow.contexts.templating.logger import log_presets_applied, log_template_fallback
from resumeflow.contexts.templating.style_data_structures import StyleParams


class TemplateName(str, Enum):
    """Known resume templates."""

    PROFESSIONAL = "professional"
    MODERN = "modern"
    CREATIVE = "creative"

    @classmethod
    def default(cls) -> "TemplateName":
        return cls.PROFESSIONAL

    @classmethod
    def parse(cls, name: Optional[str]) -> "TemplateName":
        """
        Parse a template name, ignoring case and surrounding whitespace.

        Returns the default template for None or unrecognized names.

        Examples:
            >>> TemplateName.parse(" Modern ")
            <TemplateName.MODERN: 'modern'>
            >>> TemplateName.parse("nonexistent")
            <TemplateName.PROFESSIONAL: 'professional'>
        """
        if name is None:
            return cls.default()
        key = name.strip().lower()
        for member in cls:
            if member.value == key:
                return member
        return cls.default()

    @classmethod
    def is_known(cls, name: Optional[str]) -> bool:
        if name is None:
            return False
        return name.strip().lower() in {member.value for member in cls}


def _style_for(template: TemplateName) -> StyleParams:
    # Modern and creative currently share the professional look
    if template == TemplateName.PROFESSIONAL:
        return professional_style()
    if template == TemplateName.MODERN:
        return professional_style()
    if template == TemplateName.CREATIVE:
        return professional_style()
    raise AssertionError(f"Unhandled template: {template}")


def resolve_template(name: Optional[str]) -> StyleParams:
    """
    Resolve a template name to its StyleParams.

    Never raises: unknown or missing names log a warning and resolve to
    the professional style.

    Args:
        name: Template name as supplied by the caller (any case)

    Returns:
        Immutable StyleParams for the template
    """
    if not TemplateName.is_known(name):
        log_template_fallback(name, TemplateName.default().value)
    return _style_for(TemplateName.parse(name))


class StyleRegistry:
    """
    Registry for resolving and caching template styles.

    Cache keys are (template, presets) so the same template with different
    preset stacks resolves independently. StyleParams are immutable, so cached
    instances can be handed to concurrent exports safely.
    """

    def __init__(self, presets_path=None):
        """
        Initialize the style registry.

        Args:
            presets_path: Optional path to a presets YAML file. Defaults to
                          STYLE_PRESETS_PATH.
        """
        self.presets_path = presets_path
        self._cache: Dict[Tuple[TemplateName, Tuple[str, ...]], StyleParams] = {}

    def get_style(self, template_name: Optional[str], presets: Sequence[str] = ()) -> StyleParams:
        """
        Get the style for a template with optional presets, resolving and caching it if necessary.

        Args:
            template_name: Template name (unknown names fall back to professional)
            presets: Preset names applied in order

        Returns:
            Resolved StyleParams

        Raises:
            ValueError: If a preset name is unknown
        """
        key = (TemplateName.parse(template_name), tuple(presets))

        if key in self._cache:
            return self._cache[key]

        style = apply_presets(resolve_template(template_name), list(presets), self.presets_path)
        log_presets_applied(key[0].value, list(presets))

        self._cache[key] = style
        return style

    def clear_cache(self):
        """Clear the style cache."""
        self._cache.clear()

    def is_cached(self, template_name: Optional[str], presets: Sequence[str] = ()) -> bool:
        """
        Check if a style is in the cache.

        Args:
            template_name: Template name
            presets: Preset names

        Returns:
            True if cached, False otherwise
        """
        return (TemplateName.parse(template_name), tuple(presets)) in self._cache
