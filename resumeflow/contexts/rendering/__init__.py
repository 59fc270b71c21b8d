"""
Rendering context: consumers of layout engine output.

- plaintext_writer: positioned runs to monospace text
- layout_diagnostics: margin, overlap and page-count checks on a LayoutResult
- exporter: resume -> sections -> style -> engine orchestration
"""
