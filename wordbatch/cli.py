"""CLI entry point for wordbatch."""

from __future__ import annotations

from functools import partial
from pathlib import Path
from typing import Annotated

import typer
import yaml
from pydantic import ValidationError
from rich import print as rprint
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from wordbatch.automation import ApplicationUnavailableError, create_application
from wordbatch.config import ConversionConfig, WordbatchConfig, load_config
from wordbatch.config.loader import DEFAULT_CONFIG_TEMPLATE, PROJECT_CONFIG
from wordbatch.converter import (
    TARGET_FORMATS,
    BatchConverter,
    BatchReport,
    ConversionOutcome,
    ExitCode,
    InvalidPatternError,
    PlannedConversion,
    SourceNotFoundError,
    find_sources,
    is_supported,
)
from wordbatch.log import setup_logging

app = typer.Typer(
    name="wordbatch",
    help="Batch-convert legacy word-processing documents through Word's save-as.",
)

config_app = typer.Typer(help="Manage wordbatch configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: WordbatchConfig | None = None


def _get_config() -> WordbatchConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to wordbatch.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(ExitCode.CRITICAL)


_STATUS_STYLE = {
    "converted": "[green]converted[/green]",
    "failed": "[red]failed[/red]",
    "skipped": "[yellow]skipped[/yellow]",
}

_ACTION_STYLE = {
    "convert": "[green]convert[/green]",
    "replace": "[cyan]replace[/cyan]",
    "fail": "[red]fail[/red]",
    "skip": "[yellow]skip[/yellow]",
}


def _print_outcome(outcome: ConversionOutcome, *, quiet: bool) -> None:
    """Per-file progress line. Failures are shown even in quiet mode."""
    if quiet and outcome.status != "failed":
        return
    line = f"{_STATUS_STYLE[outcome.status]} {escape(outcome.source_path)}"
    if outcome.status == "converted":
        line += f" -> {escape(outcome.output_path or '')}"
    elif outcome.reason:
        line += f" [dim]({escape(outcome.reason)})[/dim]"
    rprint(line)


def _display_report(report: BatchReport) -> None:
    table = Table(title="Conversion Summary")
    table.add_column("Converted", style="green", justify="right")
    table.add_column("Failed", style="red", justify="right")
    table.add_column("Skipped", style="yellow", justify="right")
    table.add_column("Total", justify="right")
    table.add_row(
        str(report.converted), str(report.failed), str(report.skipped), str(report.total)
    )
    rprint(table)


def _display_plan(plan: list[PlannedConversion]) -> None:
    table = Table(title=f"Planned Conversions ({len(plan)})")
    table.add_column("Source", style="cyan")
    table.add_column("Action")
    table.add_column("Output")
    table.add_column("Note", style="dim")
    for item in plan:
        table.add_row(
            escape(item.source_path),
            _ACTION_STYLE[item.action],
            escape(item.output_path or "-"),
            escape(item.reason or ""),
        )
    rprint(table)


@app.command()
def convert(
    source: str = typer.Argument(..., help="Document file or directory to convert"),
    include: Annotated[
        str | None, typer.Option("--include", "-i", help="Glob filter for directory mode")
    ] = None,
    target_format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Target format: default, pdf, xps, html, rtf"),
    ] = None,
    overwrite: Annotated[
        bool | None,
        typer.Option("--overwrite/--no-overwrite", help="Replace existing output files"),
    ] = None,
    reuse_instance: Annotated[
        bool | None,
        typer.Option(
            "--reuse-instance/--no-reuse-instance",
            help="Use one Word instance for the whole batch",
        ),
    ] = None,
    recurse: Annotated[
        bool | None,
        typer.Option("--recurse/--no-recurse", "-r", help="Include subdirectories"),
    ] = None,
    output_dir: Annotated[
        str | None, typer.Option("--output-dir", "-o", help="Write outputs under this directory")
    ] = None,
    quiet: Annotated[
        bool, typer.Option("--quiet", "-q", help="Only report failures and the summary")
    ] = False,
    dry_run: Annotated[
        bool, typer.Option("--dry-run", help="Show what would be converted, start nothing")
    ] = False,
) -> None:
    """Convert a document, or every matching document in a directory."""
    cfg = _get_config()
    setup_logging(cfg.log_level, cfg.log_format, quiet=quiet)

    overrides = {
        "include": include,
        "target_format": target_format.lower() if target_format else None,
        "overwrite": overwrite,
        "reuse_instance": reuse_instance,
        "recurse": recurse,
        "output_dir": output_dir,
    }
    try:
        conversion = ConversionConfig(
            **{
                **cfg.conversion.model_dump(),
                **{k: v for k, v in overrides.items() if v is not None},
            }
        )
    except ValidationError as e:
        rprint(f"[red]Error:[/red] invalid option: {e.errors()[0]['msg']}")
        raise typer.Exit(ExitCode.INVALID_FILE)

    source_path = Path(source)
    try:
        files = find_sources(source_path, conversion.include, recurse=conversion.recurse)
    except SourceNotFoundError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(ExitCode.SOURCE_NOT_FOUND)
    except InvalidPatternError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(ExitCode.INVALID_FILE)

    if source_path.is_file() and not is_supported(source_path):
        rprint(f"[red]Error:[/red] Unsupported file type: {escape(str(source_path))}")
        raise typer.Exit(ExitCode.INVALID_FILE)

    if not files:
        rprint(
            f"[yellow]No files matching '{escape(conversion.include)}' "
            f"in {escape(str(source_path))}.[/yellow]"
        )
        return

    converter = BatchConverter(conversion, partial(create_application, cfg.automation))

    if dry_run:
        rprint("[yellow](dry run: Word will not be started)[/yellow]\n")
        _display_plan(converter.plan(files, root=source_path))
        return

    if not quiet:
        rprint(
            f"[bold]Converting[/bold] {len(files)} file(s) to "
            f"{converter.target.name} ({converter.target.extension})..."
        )

    try:
        report = converter.run(
            files, root=source_path, on_outcome=partial(_print_outcome, quiet=quiet)
        )
    except ApplicationUnavailableError as e:
        rprint(f"[red]Error:[/red] Word is not available: {escape(str(e))}")
        raise typer.Exit(ExitCode.APPLICATION_UNAVAILABLE)
    except Exception as e:
        rprint(f"[red]Unexpected error:[/red] {escape(str(e))}")
        raise typer.Exit(ExitCode.CRITICAL)

    _display_report(report)
    if report.exit_code != ExitCode.SUCCESS:
        raise typer.Exit(report.exit_code)


@app.command()
def formats() -> None:
    """List the supported target formats."""
    table = Table(title="Target Formats")
    table.add_column("Name", style="cyan")
    table.add_column("Extension", style="green")
    table.add_column("Code", justify="right")
    table.add_column("Description")
    for spec in TARGET_FORMATS.values():
        table.add_row(spec.name, spec.extension, str(spec.code), spec.description)
    rprint(table)


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default wordbatch.yaml in current directory."""
    target = Path(PROJECT_CONFIG)
    if target.exists() and not force:
        rprint("[yellow]wordbatch.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")


if __name__ == "__main__":
    app()
