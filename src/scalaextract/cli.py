"""CLI entry point for scalaextract."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .exceptions import ScalaExtractError
from .models import Diagnostic, ExtractorConfig, ParseResult

app = typer.Typer(
    name="scalaextract",
    help="Extract package, imports and exported symbols from Scala sources.",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True, soft_wrap=True)


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _load_config_or_exit(config_path: Path | None) -> ExtractorConfig:
    from .config import load_config

    try:
        return load_config(config_path)
    except ScalaExtractError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)


def _print_result(result: ParseResult) -> None:
    table = Table(title=escape(result.file), show_header=False, title_justify="left")
    table.add_column("field", style="bold")
    table.add_column("value")
    table.add_row("package", escape(result.package) or "[dim](none)[/dim]")
    table.add_row("imports", escape("\n".join(result.imports)) or "[dim](none)[/dim]")
    table.add_row("symbols", escape("\n".join(result.symbols)) or "[dim](none)[/dim]")
    table.add_row("hasMain", str(result.has_main).lower())
    console.print(table)


def _print_diagnostics(file: str, diagnostics: list[Diagnostic]) -> None:
    for diagnostic in diagnostics:
        err_console.print(f"{file}:{diagnostic}", style="yellow", markup=False, highlight=False)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command()
def parse(
    files: List[Path] = typer.Argument(..., help="Scala source files to parse."),
    as_json: bool = typer.Option(False, "--json", help="Print one JSON object per file."),
    config_path: Optional[Path] = typer.Option(None, "--config", help="Path to a TOML config file."),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override the configured log level."),
    no_syntax_errors: bool = typer.Option(
        False, "--no-syntax-errors", help="Skip the syntax-error query."
    ),
) -> None:
    """Parse Scala files and print their package, imports and symbols."""
    from .extractors import new_parser

    cfg = _load_config_or_exit(config_path)
    overrides: dict[str, object] = {}
    if no_syntax_errors:
        overrides["query_syntax_errors"] = False
    if log_level is not None:
        overrides["log_level"] = log_level
    if overrides:
        try:
            cfg = ExtractorConfig.model_validate({**cfg.model_dump(), **overrides})
        except ValidationError as exc:
            err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
            raise typer.Exit(code=1)
    _configure_logging(cfg.log_level)

    try:
        parser = new_parser(cfg)
    except ScalaExtractError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    failed = False
    for path in files:
        try:
            source = path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            err_console.print(f"[red]Error:[/red] Cannot read {escape(str(path))}: {escape(str(exc))}")
            failed = True
            continue

        try:
            result, diagnostics = parser.parse(str(path), source)
        except ScalaExtractError as exc:
            err_console.print(f"[red]Error:[/red] {escape(str(path))}: {escape(str(exc))}")
            failed = True
            continue

        if as_json:
            typer.echo(result.model_dump_json(by_alias=True))
        else:
            _print_result(result)
        _print_diagnostics(str(path), diagnostics)

    if failed:
        raise typer.Exit(code=1)


@app.command()
def config(
    config_path: Optional[Path] = typer.Option(None, "--config", help="Path to a TOML config file."),
) -> None:
    """Show the effective configuration."""
    cfg = _load_config_or_exit(config_path)
    console.print("[bold]scalaextract config:[/bold]")
    for field_name in ExtractorConfig.model_fields:
        console.print(f"  {field_name} = {getattr(cfg, field_name)!r}", markup=False, highlight=False)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
