"""
Export orchestration.

Resume -> Sections -> StyleParams -> DocumentFlowEngine -> LayoutResult.
Container writers (PDF, Word-compatible) consume the LayoutResult; the text
exporter is the same engine run on one unbounded page.
"""

import time
from typing import Optional, Sequence

from resumeflow.contexts.intake.repository import ResumeRepository
from resumeflow.contexts.intake.resume_data_structure import Resume, ResumeSettings
from resumeflow.contexts.intake.section_builder import build_sections
from resumeflow.contexts.layout.flow_engine import DocumentFlowEngine
from resumeflow.contexts.layout.font_metrics import FontMetrics, MonospaceMetrics
from resumeflow.contexts.layout.layout_data_structures import LayoutResult, PageGeometry
from resumeflow.contexts.rendering.logger import log_export_result, log_export_start
from resumeflow.contexts.rendering.plaintext_writer import render_plaintext
from resumeflow.contexts.templating.config_resolver import apply_settings
from resumeflow.contexts.templating.defaults import DEFAULT_PAGE_SIZE, plaintext_style
from resumeflow.contexts.templating.style_data_structures import FontRole, StyleParams
from resumeflow.contexts.templating.template_registry import StyleRegistry, TemplateName

DEFAULT_TEXT_COLUMNS = 80

_style_registry = StyleRegistry()


def build_page_geometry(style: StyleParams, settings: Optional[ResumeSettings] = None) -> PageGeometry:
    """
    Build page geometry from the style's margin and the resume's settings.

    Per-side margins in settings override the style's uniform margin; the page
    size comes from settings ('letter' or 'a4', anything else is letter).
    """
    if settings is None:
        return PageGeometry.from_page_size(DEFAULT_PAGE_SIZE, margin=style.margin)

    return PageGeometry.from_page_size(
        settings.page_size or DEFAULT_PAGE_SIZE,
        margin=style.margin,
        margin_top=settings.margin_top,
        margin_bottom=settings.margin_bottom,
        margin_left=settings.margin_left,
        margin_right=settings.margin_right,
    )


def layout_resume(
    resume: Resume,
    template_name: Optional[str] = None,
    presets: Sequence[str] = (),
    metrics: Optional[FontMetrics] = None,
) -> LayoutResult:
    """
    Lay out a resume onto pages.

    Args:
        resume: Resume aggregate
        template_name: Template to use; defaults to the resume's own template
        presets: Style presets layered over the template, in order
        metrics: Width provider; defaults to reportlab metrics for the resolved font

    Returns:
        LayoutResult ready for a container writer

    Raises:
        ValueError: If a preset name is unknown
    """
    template = template_name if template_name is not None else resume.template_name
    log_export_start(resume.title, "layout", TemplateName.parse(template).value)
    start_time = time.time()

    style = apply_settings(_style_registry.get_style(template, presets), resume.settings)
    geometry = build_page_geometry(style, resume.settings)
    sections = build_sections(resume, style)

    result = DocumentFlowEngine(geometry, style, metrics).layout(sections, document_name=resume.title)

    log_export_result(resume.title, result, time.time() - start_time)
    return result


def layout_plaintext(
    resume: Resume,
    columns: int = DEFAULT_TEXT_COLUMNS,
    metrics: Optional[FontMetrics] = None,
) -> LayoutResult:
    """Lay out a resume on a single unbounded page `columns` characters wide."""
    if columns <= 0:
        raise ValueError(f"columns must be positive, got {columns}")
    if metrics is None:
        metrics = MonospaceMetrics()

    style = plaintext_style()
    char_width = metrics.measure("M", FontRole.BODY, style.body_size)
    geometry = PageGeometry.unbounded(width=columns * char_width, margin=style.margin)
    sections = build_sections(resume, style)

    return DocumentFlowEngine(geometry, style, metrics).layout(sections, document_name=resume.title)


def export_text(
    resume: Resume,
    columns: int = DEFAULT_TEXT_COLUMNS,
    metrics: Optional[FontMetrics] = None,
) -> str:
    """
    Export a resume as plain text.

    Uses the same block rules as paginated output (wrap width, bullets, labels),
    on one page of effectively infinite height.

    Args:
        resume: Resume aggregate
        columns: Line width in characters
        metrics: Monospace metrics used for both layout and column mapping

    Returns:
        Plain-text resume
    """
    if metrics is None:
        metrics = MonospaceMetrics()

    log_export_start(resume.title, "text", "plaintext")
    start_time = time.time()

    result = layout_plaintext(resume, columns=columns, metrics=metrics)
    text = render_plaintext(result, metrics)

    log_export_result(resume.title, result, time.time() - start_time)
    return text


def export_resume(
    repository: ResumeRepository,
    resume_id: str,
    template_name: Optional[str] = None,
    presets: Sequence[str] = (),
    metrics: Optional[FontMetrics] = None,
) -> LayoutResult:
    """
    Fetch a resume by id and lay it out.

    Raises:
        FileNotFoundError: If the repository has no resume with this id
    """
    resume = repository.get(resume_id)
    return layout_resume(resume, template_name=template_name, presets=presets, metrics=metrics)
