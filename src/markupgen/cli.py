"""
Command line interface.

Commands:
- generate: Write the builder module and its smoke tests
- dump: Print the resolved element table as YAML or JSON
- check: Print diagnostics for the element table
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer

from markupgen.analyzer import analyze_table
from markupgen.catalog import load_catalogs
from markupgen.config import GeneratorConfig, load_config
from markupgen.errors import MarkupgenError
from markupgen.generator import generate
from markupgen.serialization import table_to_json, table_to_yaml
from markupgen.table import build_element_table, get_element

app = typer.Typer(help="Generate typed HTML/SVG element builders", no_args_is_help=True)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _fail(exc: Exception) -> NoReturn:
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(code=1)


@app.command("generate")
def generate_command(
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", "-o", help="Directory to write into"),
    package: Optional[str] = typer.Option(
        None, "--package", "-p", help="Import path of the package holding the builder module"
    ),
    runtime_module: Optional[str] = typer.Option(
        None, "--runtime-module", help="Module providing UI, EventHandler, HTMLElement and Text"
    ),
    config_file: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML configuration file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress"),
) -> None:
    """
    Generate the builder module and its smoke tests.

    Command line options override values read from --config.
    """
    _configure_logging(verbose)
    try:
        config = load_config(config_file) if config_file else GeneratorConfig()
        config = config.with_overrides(output_dir=output_dir, package=package, runtime_module=runtime_module)
        result = generate(config)
    except MarkupgenError as exc:
        _fail(exc)

    for written in result.files:
        typer.echo(f"Generated: {written.path} ({written.line_count} lines)")
    typer.echo(f"{result.element_count} elements")


@app.command("dump")
def dump_command(
    fmt: str = typer.Option("yaml", "--format", "-f", help="Output format (yaml/json)"),
    element: Optional[str] = typer.Option(None, "--element", "-e", help="Only dump this element"),
) -> None:
    """Print the resolved element table."""
    if fmt not in ("yaml", "json"):
        typer.echo(f"Unknown format: {fmt} (expected yaml or json)", err=True)
        raise typer.Exit(code=1)

    try:
        elements = build_element_table()
    except MarkupgenError as exc:
        _fail(exc)

    if element is not None:
        found = get_element(elements, element)
        if found is None:
            typer.echo(f"Unknown element: {element}", err=True)
            raise typer.Exit(code=1)
        elements = [found]

    typer.echo(table_to_json(elements) if fmt == "json" else table_to_yaml(elements), nl=fmt == "json")


@app.command("check")
def check_command() -> None:
    """
    Print diagnostics for the element table.

    Exits with status 1 when the report holds errors.
    """
    try:
        catalogs = load_catalogs()
        elements = build_element_table(catalogs=catalogs)
    except MarkupgenError as exc:
        _fail(exc)

    report = analyze_table(elements, catalogs)
    for line in report.summary_lines():
        typer.echo(line)

    if report.has_errors:
        raise typer.Exit(code=1)


def main() -> None:
    app()
