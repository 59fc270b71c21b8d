"""
Logging session setup for resumeflow.

Each CLI run gets its own log directory with one log file per context, headed
by a provenance block (command, working directory, package and font-metrics
versions). Console output goes to stderr so that exported text on stdout stays
clean. Context-specific wrappers live in contexts/{context}/logger.py.
"""

import sys
from pathlib import Path
from typing import Dict, Optional, TextIO

import reportlab
from loguru import logger

from resumeflow import __version__

LEVEL_COLORS = {
    "DEBUG": "<blue>",
    "WARNING": "<yellow>",
    "ERROR": "<red>",
}

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<level>{level: <7}</level> | <level>{message}</level>"


def session_provenance(context_name: str, log_dir: Path) -> Dict[str, object]:
    """Provenance recorded at the top of every layout session log."""
    return {
        "Context": context_name,
        "Session": log_dir.name,
        "resumeflow": __version__,
        "reportlab": reportlab.Version,
    }


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[Dict[str, object]] = None,
    console: Optional[TextIO] = None,
) -> Path:
    """
    Start a logging session for one context.

    Replaces any existing sinks with a DEBUG file sink in log_dir and an INFO
    console sink, then writes the provenance header.

    Args:
        context_name: Context identifier, also the log file stem (e.g., "render")
        log_dir: Directory for this session (created if missing)
        extra_provenance: Additional key-value pairs for the provenance header
        console: Console stream (defaults to sys.stderr at call time)

    Returns:
        Path to log file

    Example:
        log_file = setup_logger(
            context_name="render",
            log_dir=Path("outs/logs/export_20251114_123456"),
            extra_provenance={"Template": "professional"}
        )
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()

    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(console or sys.stderr, format=CONSOLE_FORMAT, level="INFO", colorize=True)

    log_provenance({**session_provenance(context_name, log_dir), **(extra_provenance or {})})

    return log_file


def log_provenance(extra_context: Optional[Dict[str, object]] = None) -> None:
    """
    Log execution provenance to the current sinks.

    Args:
        extra_context: Key-value pairs logged after the command line
    """
    logger.info("=" * 80)
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]}")

    for key, value in (extra_context or {}).items():
        logger.info(f"{key}: {value}")

    logger.info("=" * 80)
