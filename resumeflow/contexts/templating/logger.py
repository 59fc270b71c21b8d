"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from utils.logger directly.
"""

from typing import List, Optional

from loguru import logger

CONTEXT_PREFIX = "[template]"


# Wrapper functions with automatic [template] prefix


def _log_info(message: str) -> None:
    """Log info message with [template] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [template] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [template] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [template] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level templating-specific logging helpers


def log_template_fallback(requested: Optional[str], fallback: str) -> None:
    """Log that an unrecognized template name was replaced by the default."""
    _log_warning(f"Unknown template {requested!r}, falling back to '{fallback}'")


def log_presets_applied(template_name: str, preset_names: List[str]) -> None:
    """Log which presets were layered onto a template's style."""
    if preset_names:
        _log_debug(f"Applied presets to '{template_name}': {', '.join(preset_names)}")
