#!/usr/bin/env python3
"""
Export resumes through the layout engine.

Reads a JSON Resume (jsonresume.org) file, lays it out with a template and
optional style presets, and prints plain text, a page summary, positioned runs
as JSON, or layout diagnostics.

Examples:
    # Plain-text export at 80 columns
    python scripts/export_resume.py text resume.json

    # Page summary with presets, plus a JSON dump of positioned runs
    python scripts/export_resume.py layout resume.json -t modern -p spacing_tight --json runs.json

    # Fail (exit 1) if the layout has issues or exceeds one page
    python scripts/export_resume.py check resume.json --max-pages 1

    # List templates and presets
    python scripts/export_resume.py templates
"""

import json
import os
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from resumeflow.contexts.intake.json_resume_importer import load_json_resume
from resumeflow.contexts.rendering.exporter import DEFAULT_TEXT_COLUMNS, export_text, layout_resume
from resumeflow.contexts.rendering.layout_diagnostics import analyze_layout
from resumeflow.contexts.rendering.logger import log_diagnostics, setup_rendering_logger
from resumeflow.contexts.templating.config_resolver import list_presets
from resumeflow.contexts.templating.template_registry import TemplateName
from resumeflow.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    help="Lay out resumes and export them as text, runs or diagnostics",
    add_completion=False,
)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context):
    """Show help if no command is given."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _load(resume_file: Path):
    """Load a JSON Resume file, exiting with an error message on failure."""
    try:
        return load_json_resume(resume_file)
    except FileNotFoundError:
        typer.secho(f"Resume file not found: {resume_file}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    except ValueError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def _layout(resume, template: Optional[str], presets: Optional[List[str]]):
    """Run the engine, exiting with an error message on a bad preset."""
    try:
        return layout_resume(resume, template_name=template, presets=presets or [])
    except ValueError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command("text")
def text_command(
    resume_file: Annotated[Path, typer.Argument(help="JSON Resume file")],
    columns: Annotated[
        int,
        typer.Option("--columns", "-c", help="Line width in characters"),
    ] = DEFAULT_TEXT_COLUMNS,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write text to this file instead of stdout"),
    ] = None,
):
    """
    Export a resume as plain text.

    Examples:\n
        $ export_resume.py text resume.json

        $ export_resume.py text resume.json -c 100 -o resume.txt
    """
    if columns <= 0:
        typer.secho("Error: --columns must be positive", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    resume = _load(resume_file)
    setup_rendering_logger(LOGS_PATH / f"export_{now()}", template_name="plaintext")
    text = export_text(resume, columns=columns)

    if output:
        output.write_text(text, encoding="utf-8")
        typer.secho(f"✓ Text written to {output}", fg=typer.colors.GREEN, bold=True)
    else:
        typer.echo(text, nl=False)


@app.command("layout")
def layout_command(
    resume_file: Annotated[Path, typer.Argument(help="JSON Resume file")],
    template: Annotated[
        Optional[str],
        typer.Option("--template", "-t", help="Template name (professional, modern, creative)"),
    ] = None,
    presets: Annotated[
        Optional[List[str]],
        typer.Option("--preset", "-p", help="Style preset to apply (repeatable, applied in order)"),
    ] = None,
    json_output: Annotated[
        Optional[Path],
        typer.Option("--json", help="Write positioned runs as JSON to this file"),
    ] = None,
):
    """
    Lay out a resume onto pages and summarize the result.

    Examples:\n
        $ export_resume.py layout resume.json

        $ export_resume.py layout resume.json -t modern -p fonts_serif --json runs.json
    """
    resume = _load(resume_file)
    setup_rendering_logger(LOGS_PATH / f"export_{now()}", template_name=template)
    result = _layout(resume, template, presets)

    typer.secho(f"{result.document_name}: {result.page_count} page(s)", bold=True)
    for page in result.pages:
        typer.echo(f"  Page {page.index + 1}: {len(page.runs)} runs")

    if json_output:
        json_output.write_text(json.dumps(result.to_dict(), indent=2), encoding="utf-8")
        typer.secho(f"✓ Runs written to {json_output}", fg=typer.colors.GREEN, bold=True)


@app.command("check")
def check_command(
    resume_file: Annotated[Path, typer.Argument(help="JSON Resume file")],
    template: Annotated[
        Optional[str],
        typer.Option("--template", "-t", help="Template name (professional, modern, creative)"),
    ] = None,
    presets: Annotated[
        Optional[List[str]],
        typer.Option("--preset", "-p", help="Style preset to apply (repeatable, applied in order)"),
    ] = None,
    max_pages: Annotated[
        Optional[int],
        typer.Option("--max-pages", "-m", help="Report an issue if the layout exceeds this many pages"),
    ] = None,
):
    """
    Check a resume layout for margin violations, overlaps and page count.

    Exits with code 1 if any issue is found.

    Examples:\n
        $ export_resume.py check resume.json --max-pages 1
    """
    resume = _load(resume_file)
    setup_rendering_logger(LOGS_PATH / f"check_{now()}", template_name=template)
    result = _layout(resume, template, presets)

    diagnostics = analyze_layout(result, max_pages=max_pages)
    issues = diagnostics.get_inherited_issues()
    log_diagnostics(result.document_name, issues)

    if issues:
        typer.secho(f"✗ {len(issues)} layout issue(s)", fg=typer.colors.RED, bold=True)
        for issue in issues:
            typer.echo(f"  • {issue}")
        raise typer.Exit(code=1)

    typer.secho(f"✓ Layout OK ({result.page_count} page(s))", fg=typer.colors.GREEN, bold=True)


@app.command("templates")
def templates_command():
    """List available templates and style presets."""
    typer.secho("Templates", bold=True)
    for name in TemplateName:
        suffix = " (default)" if name == TemplateName.default() else ""
        typer.echo(f"  {name.value}{suffix}")

    typer.secho("Presets", bold=True)
    for preset in list_presets():
        typer.echo(f"  {preset}")


if __name__ == "__main__":
    app()
