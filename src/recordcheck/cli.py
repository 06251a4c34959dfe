"""CLI interface for recordcheck using Typer framework."""

import importlib
import json as jsonlib
import logging
import sys
from pathlib import Path
from typing import Annotated, Any

import typer
from pydantic import BaseModel
from rich.console import Console
from rich.table import Table

from recordcheck import __description__, __version__
from recordcheck.checker import check_integer, check_text
from recordcheck.config import LogLevel, load_config
from recordcheck.constraints import parse_int, parse_rule
from recordcheck.errors import RecordCheckError, ValidationErrors, Violation
from recordcheck.validator import RecordValidator

app = typer.Typer(
    name="recordcheck",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()

VALID_FORMATS = ["table", "json"]
VALID_KINDS = ["text", "int"]

_LOG_LEVELS = {
    LogLevel.ERROR.value: logging.ERROR,
    LogLevel.WARN.value: logging.WARNING,
    LogLevel.INFO.value: logging.INFO,
    LogLevel.DEBUG.value: logging.DEBUG,
}


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=_LOG_LEVELS.get(level, logging.WARNING), format="%(levelname)s %(name)s: %(message)s")


def _check_format(format: str) -> None:
    if format not in VALID_FORMATS:
        console.print(f"[red]Error:[/red] Invalid format '{format}'. Must be one of: {', '.join(VALID_FORMATS)}")
        raise typer.Exit(1)


def _print_violations(violations: list[Violation], format: str) -> None:
    if format == "json":
        payload = ValidationErrors(violations).to_dict() if violations else {"valid": True, "total_violations": 0, "violations": []}
        typer.echo(jsonlib.dumps(payload, indent=2))
        return

    if not violations:
        console.print("[green]No violations found![/green]")
        return

    table = Table(title=f"Violations ({len(violations)})")
    table.add_column("Field", style="cyan")
    table.add_column("Kind", style="yellow")
    table.add_column("Message", style="white")
    for violation in violations:
        table.add_row(violation.field, violation.kind.value, violation.message)
    console.print(table)


def _load_target(target: str) -> type:
    module_name, _, class_name = target.partition(":")
    if not module_name or not class_name:
        raise ValueError(f"Target must be 'module:Class', got: {target}")

    cwd = str(Path.cwd())
    if cwd not in sys.path:
        sys.path.insert(0, cwd)

    module = importlib.import_module(module_name)
    try:
        return getattr(module, class_name)
    except AttributeError:
        raise ValueError(f"Module '{module_name}' has no attribute '{class_name}'")


def _build_record(cls: type, data: dict[str, Any]) -> Any:
    if isinstance(cls, type) and issubclass(cls, BaseModel):
        return cls.model_validate(data)
    return cls(**data)


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"recordcheck version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, help="Show version and exit")
    ] = False,
) -> None:
    """recordcheck - declarative field validation for records."""
    pass


@app.command()
def parse(
    rule: Annotated[str, typer.Argument(help="Rule string, e.g. 'min:3;max:5;in:a,b'")],
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: table, json (default: table)")
    ] = "table",
) -> None:
    """Parse a rule string and show the resulting constraint set."""
    _check_format(format)

    violations: list[Violation] = []
    constraints = parse_rule(rule, "rule", violations)

    if format == "json":
        payload = {
            "constraints": constraints.to_dict(),
            "violations": [violation.to_dict() for violation in violations],
        }
        typer.echo(jsonlib.dumps(payload, indent=2))
    else:
        table = Table(title="Constraints")
        table.add_column("Key", style="cyan")
        table.add_column("Value", style="white")
        for key, value in constraints.to_dict().items():
            shown = "[dim]unset[/dim]" if value is None else ", ".join(value) if isinstance(value, list) else str(value)
            table.add_row(key, shown)
        console.print(table)
        if violations:
            _print_violations(violations, format)

    raise typer.Exit(1 if violations else 0)


@app.command()
def check(
    rule: Annotated[str, typer.Argument(help="Rule string to check against")],
    value: Annotated[str, typer.Argument(help="Value to check")],
    kind: Annotated[
        str,
        typer.Option("--kind", "-k", help="Value kind: text, int (default: text)")
    ] = "text",
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: table, json (default: table)")
    ] = "table",
) -> None:
    """Check a single value against a rule string."""
    _check_format(format)
    if kind not in VALID_KINDS:
        console.print(f"[red]Error:[/red] Invalid kind '{kind}'. Must be one of: {', '.join(VALID_KINDS)}")
        raise typer.Exit(1)

    violations: list[Violation] = []
    constraints = parse_rule(rule, "value", violations)

    if kind == "int":
        number = parse_int(value)
        if number is None:
            console.print(f"[red]Error:[/red] '{value}' is not an integer")
            raise typer.Exit(1)
        check_integer(number, "value", constraints, violations)
    else:
        check_text(value, "value", constraints, violations)

    _print_violations(violations, format)
    raise typer.Exit(1 if violations else 0)


@app.command()
def validate(
    target: Annotated[str, typer.Argument(help="Record class as 'module:Class'")],
    data: Annotated[Path, typer.Argument(help="JSON file with the record's field values")],
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: table, json (default: table)")
    ] = "table",
    config: Annotated[
        Path,
        typer.Option("--config", "-c", help="Configuration file path (default: search for .recordcheck.json)")
    ] = None,
) -> None:
    """Build a record from a JSON file and validate its fields."""
    _check_format(format)

    try:
        record_config = load_config(config)
        _configure_logging(record_config.logging.level)

        with open(data, encoding="utf-8") as f:
            payload = jsonlib.load(f)
        if not isinstance(payload, dict):
            raise ValueError(f"Expected a JSON object in {data}")

        record = _build_record(_load_target(target), payload)
        violations = RecordValidator(record_config).collect(record)
    except (RecordCheckError, OSError, ValueError, TypeError, ImportError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    _print_violations(violations, format)
    raise typer.Exit(1 if violations else 0)
