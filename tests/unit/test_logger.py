"""Unit tests for logging session setup."""

import io

import pytest
from loguru import logger

from resumeflow import __version__
from resumeflow.contexts.rendering.logger import setup_rendering_logger
from resumeflow.utils.logger import session_provenance, setup_logger


@pytest.mark.unit
def test_session_provenance_names_context_and_versions(tmp_path):
    """Test the default provenance identifies the session and package version."""
    provenance = session_provenance("render", tmp_path / "export_20251114_123456")
    assert provenance["Context"] == "render"
    assert provenance["Session"] == "export_20251114_123456"
    assert provenance["resumeflow"] == __version__
    assert provenance["reportlab"]


@pytest.mark.unit
def test_setup_logger_writes_header_to_file_and_console(tmp_path):
    """Test the log file and console stream both receive the provenance header."""
    console = io.StringIO()
    log_file = setup_logger("render", tmp_path / "session", {"Template": "modern"}, console=console)
    logger.debug("only in file")
    logger.remove()

    content = log_file.read_text(encoding="utf-8")
    assert log_file == tmp_path / "session" / "render.log"
    assert f"resumeflow: {__version__}" in content
    assert "Template: modern" in content
    assert "only in file" in content

    assert "Template: modern" in console.getvalue()
    assert "only in file" not in console.getvalue()


@pytest.mark.unit
def test_rendering_logger_records_template(tmp_path):
    """Test the rendering context logs the requested template, or the resume default."""
    log_file = setup_rendering_logger(tmp_path, template_name=None)
    logger.remove()
    assert "Template: (resume default)" in log_file.read_text(encoding="utf-8")
