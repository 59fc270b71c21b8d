"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from resumeflow.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, template_name: Optional[str] = None) -> Path:
    """
    Setup logger for rendering context.

    Configures loguru with provenance tracking and rendering-specific context.

    Args:
        log_dir: Directory for this rendering session
        template_name: Template recorded in the provenance header

    Returns:
        Path to log file

    Example:
        from resumeflow.contexts.rendering.logger import setup_rendering_logger, _log_info

        log_file = setup_rendering_logger(log_dir, template_name="professional")
        _log_info("Starting export...")
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={"Template": template_name or "(resume default)"},
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_export_start(resume_name: str, output_format: str, template_name: str) -> None:
    """Log start of an export with context."""
    _log_info(f"Starting {output_format} export: {resume_name}")
    _log_debug(f"  Template: {template_name}")


def log_export_result(resume_name: str, result, elapsed_time: float) -> None:
    """
    Log export result summary.

    Args:
        resume_name: Resume identifier
        result: LayoutResult produced for the export
        elapsed_time: Time taken
    """
    _log_success(
        f"{resume_name}: {result.page_count} page(s), {len(result.runs)} runs ({elapsed_time:.2f}s)"
    )


def log_diagnostics(resume_name: str, issues: list, limit: int = 5) -> None:
    """Log layout diagnostics, listing at most `limit` issues."""
    if not issues:
        _log_success(f"{resume_name}: layout diagnostics passed")
        return

    _log_warning(f"{resume_name}: {len(issues)} layout issue(s)")
    for i, issue in enumerate(issues[:limit], 1):
        _log_warning(f"  Issue {i}: {issue}")
    if len(issues) > limit:
        _log_warning(f"  ... and {len(issues) - limit} more issues")
