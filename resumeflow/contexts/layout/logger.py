"""
Layout context logger.

Provides logging interface for layout context with automatic [layout] prefix.
All layout modules should import from this module, not from utils.logger directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[layout]"


# Wrapper functions with automatic [layout] prefix


def _log_info(message: str) -> None:
    """Log info message with [layout] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [layout] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [layout] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [layout] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [layout] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level layout-specific logging helpers


def log_layout_start(document_name: str, section_count: int, geometry) -> None:
    """Log start of a layout pass."""
    _log_debug(
        f"Laying out {document_name}: {section_count} sections on "
        f"{geometry.width:g}x{geometry.height:g}pt pages"
    )


def log_layout_result(document_name: str, result) -> None:
    """
    Log layout result summary.

    Args:
        document_name: Document identifier
        result: LayoutResult from DocumentFlowEngine.layout()
    """
    _log_debug(f"{document_name}: {result.page_count} page(s), {len(result.runs)} runs")


def log_page_break(page_index: int, needed: float, remaining: float) -> None:
    """Log a page break decision."""
    _log_debug(f"Page break before page {page_index} (needed {needed:.1f}pt, remaining {remaining:.1f}pt)")


def log_oversized_block(block_name: str, height: float, page_height: float) -> None:
    """Log a block taller than a full page, which is placed on one page regardless."""
    _log_warning(
        f"{block_name} is {height:.1f}pt tall, exceeding the {page_height:.1f}pt content height; "
        "placing it on a single page"
    )


def log_measure_fallback(font: str, error: Exception) -> None:
    """Log a width measurement failure that fell back to monospace estimates."""
    _log_warning(f"Width measurement failed for font '{font}' ({error}); using monospace estimate")
