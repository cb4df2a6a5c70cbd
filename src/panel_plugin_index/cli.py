"""
panel-plugin-index CLI.

`build` regenerates plugins.json from the plugins directory; `validate` runs
the same checks without writing anything and is meant for pull-request gates.
Both exit non-zero when a plugin has errors, or in --strict mode when any
plugin has warnings.
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from panel_plugin_index.config import get_settings
from panel_plugin_index.errors import PipelineError
from panel_plugin_index.pipeline import ValidationReport
from panel_plugin_index.pipeline import build as run_build
from panel_plugin_index.pipeline import validate as run_validate

app = typer.Typer(
    name="panel-plugin-index",
    help="Validate plugin submissions and build the marketplace index",
    no_args_is_help=True,
)

console = Console()


def setup_logging(level: str, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else level.upper(),
        format="[%(asctime)s] [%(name)s] [%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler()],
    )


def render_report(report: ValidationReport) -> None:
    """Print one line per plugin, its issues, and the run summary."""
    for outcome in report.outcomes:
        if outcome.valid:
            version = outcome.manifest.get("version") if outcome.manifest else ""
            name = escape(outcome.display_name)
            console.print(f"[green]✓[/green] {name} v{escape(str(version))}")
        else:
            console.print(f"[red]✗[/red] {escape(outcome.plugin_id)}:")
            for issue in outcome.result.errors:
                console.print(f"   [red]error[/red]   {escape(str(issue))}")
        for issue in outcome.result.warnings:
            console.print(f"   [yellow]warning[/yellow] {escape(str(issue))}")

    console.print(
        f"\n[bold]Results:[/bold] {len(report.valid)}/{report.total} plugins valid"
    )
    if report.passed:
        console.print("[green]PASS[/green]")
    elif report.has_errors:
        console.print("[red]FAIL[/red] (plugins with errors)")
    else:
        console.print("[red]FAIL[/red] (warnings in strict mode)")


@app.command()
def build(
    plugins_dir: Optional[Path] = typer.Option(
        None, "--plugins-dir", help="Directory with one sub-directory per plugin"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Where to write the marketplace index"
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Run submission checks and fail on warnings"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every step"),
) -> None:
    """
    Build plugins.json from every valid plugin.

    Invalid plugins are reported and left out of the index; the index is
    still written.
    """
    settings = get_settings()
    setup_logging(settings.log_level, verbose)

    plugins_dir = plugins_dir or settings.plugins_dir
    output = output or settings.output_file
    console.print(f"[bold blue]Scanning plugins in:[/bold blue] {escape(str(plugins_dir))}")

    try:
        report = run_build(
            plugins_dir,
            output,
            strict=strict,
            min_panel_version=settings.min_panel_version,
        )
    except PipelineError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    render_report(report)
    plugin_count = report.index.plugin_count if report.index else 0
    console.print(f"Generated {escape(str(output))} with {plugin_count} plugin(s)")
    raise typer.Exit(report.exit_code)


@app.command()
def validate(
    plugins_dir: Optional[Path] = typer.Option(
        None, "--plugins-dir", help="Directory with one sub-directory per plugin"
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Run submission checks and fail on warnings"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every step"),
) -> None:
    """
    Validate every plugin manifest without writing the index.
    """
    settings = get_settings()
    setup_logging(settings.log_level, verbose)

    plugins_dir = plugins_dir or settings.plugins_dir

    try:
        report = run_validate(plugins_dir, strict=strict)
    except PipelineError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    render_report(report)
    raise typer.Exit(report.exit_code)


if __name__ == "__main__":
    app()
