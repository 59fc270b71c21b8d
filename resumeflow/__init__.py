"""
resumeflow - Resume document flow and layout engine

Turns structured resume content into paginated, positioned text runs that
format-specific writers (PDF, Word-compatible, plain text) can consume.

Architecture:
- Intake Context: Resume aggregate, JSON Resume import, section adapter
- Templating Context: Template selection, style parameters, style presets
- Layout Context: Font metrics, line wrapping, flow cursor, block rendering, page flow
- Rendering Context: Plain-text output, layout diagnostics, export orchestration
"""

__version__ = "0.1.0"
