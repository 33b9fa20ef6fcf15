"""
Command line interface for the Spring Boot project scaffolder.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional

import typer
from filelock import Timeout
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .config import (
    BASE_PACKAGE_PROPERTY,
    PropertiesError,
    parse_property_options,
    resolve_project_properties,
)
from .scaffold import BUILD_GRADLE_TEMPLATE, LAYOUT_GROUPS, ScaffoldReport, is_source_file, scaffold_project
from .util import project_lock

console = Console()
app = typer.Typer(help="Generate the standard Spring Boot package layout for a Gradle project.")
logger = logging.getLogger(__name__)

LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]
TASK_NAME = "generate-spring-boot-project"


def _configure_logging(level_name: str) -> None:
    env_override = os.getenv("BOOTSCAFFOLD_LOG_LEVEL")
    level_str = (env_override or level_name or "info").upper()
    if level_str not in {lvl.upper() for lvl in LOG_LEVELS}:
        level_str = "INFO"
    logging.basicConfig(
        level=getattr(logging, level_str, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.debug("Logging configured at %s", level_str)


def _resolve_project_dir(value: Path) -> Path:
    """Ensure the project directory exists and return its absolute path."""
    resolved = value.expanduser().resolve()
    if not resolved.exists():
        raise typer.BadParameter(f"No project directory found at {resolved}")
    if not resolved.is_dir():
        raise typer.BadParameter(f"Project path must be a directory, got file: {resolved}")
    return resolved


def _parse_properties_or_fail(values: Optional[List[str]]) -> dict[str, str]:
    try:
        return parse_property_options(values)
    except PropertiesError as exc:
        raise typer.BadParameter(str(exc), param_hint="'--property' / '-P'") from exc


def _print_scaffold_report(report: ScaffoldReport) -> None:
    table = Table(title="Scaffold Summary")
    table.add_column("Key")
    table.add_column("Value", overflow="fold")
    for key, value in report.summary_rows():
        table.add_row(key, escape(value))
    console.print(table)


@app.callback(invoke_without_command=True)
def _root_command(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show bootscaffold version and exit.",
        is_flag=True,
    ),
    log_level: str = typer.Option(
        "info",
        "--log-level",
        help="Logging level (critical, error, warning, info, debug).",
        show_default=True,
        case_sensitive=False,
    ),
) -> None:
    """
    Default command when no subcommand is selected.
    """
    _configure_logging(log_level)

    if version:
        console.print(f"[bold green]bootscaffold[/] {__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(
            f"[bold yellow]bootscaffold[/] is ready. Run [cyan]bootscaffold {TASK_NAME} -P basePackage=com.example[/] "
            "from your project directory.",
        )


@app.command(TASK_NAME)
def generate_spring_boot_project(
    project_dir: Path = typer.Option(
        Path("."),
        "--project-dir",
        "-d",
        help="Root directory of the Gradle project.",
        callback=_resolve_project_dir,
    ),
    properties: Optional[List[str]] = typer.Option(
        None,
        "--property",
        "-P",
        help="Project property as key=value (multiple allowed), e.g. -P basePackage=com.example.",
    ),
    base_package: Optional[str] = typer.Option(
        None,
        "--base-package",
        "-b",
        help="Shortcut for -P basePackage=<value>.",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Report what would be created without touching the filesystem.",
    ),
    lock_timeout: float = typer.Option(
        60.0,
        "--lock-timeout",
        help="Seconds to wait for another run on the same project to finish.",
        show_default=True,
    ),
) -> None:
    """
    Create the common/feature package layout and overwrite build.gradle with the template.
    """
    overrides = _parse_properties_or_fail(properties)
    if base_package is not None:
        overrides[BASE_PACKAGE_PROPERTY] = base_package

    try:
        project_properties = resolve_project_properties(project_dir, overrides)
    except PropertiesError as exc:
        console.print(f"[bold red]Property error:[/] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    package = project_properties.find_property(BASE_PACKAGE_PROPERTY)
    if package is not None:
        logger.info(
            "Using %s=%s (from %s)",
            BASE_PACKAGE_PROPERTY,
            package,
            project_properties.source_of(BASE_PACKAGE_PROPERTY),
        )

    try:
        with project_lock(project_dir, timeout=lock_timeout):
            outcome = scaffold_project(project_dir, package, dry_run=dry_run)
    except Timeout as exc:
        console.print(f"[bold red]Another scaffold run holds the lock for {escape(str(project_dir))}.[/]")
        raise typer.Exit(code=1) from exc

    _print_scaffold_report(outcome.report)
    if not outcome.ok:
        console.print(f"[bold red]Error generating project ({outcome.error.kind.value}):[/] {escape(str(outcome.error))}")
        raise typer.Exit(code=1)

    if dry_run:
        console.print("[bold blue]Dry run complete.[/] No filesystem changes made.")
    else:
        console.print("[bold green]Project generated successfully![/]")


@app.command()
def layout() -> None:
    """
    List the directories and placeholder files created under the base package.
    """
    table = Table(title="Package Layout")
    table.add_column("Group")
    table.add_column("Path", overflow="fold")
    table.add_column("Kind")
    for group in LAYOUT_GROUPS:
        for entry in group.entries:
            table.add_row(group.name, entry, "file" if is_source_file(entry) else "directory")
    console.print(table)


@app.command("build-gradle")
def build_gradle() -> None:
    """
    Print the build.gradle template exactly as it is written to disk.
    """
    typer.echo(BUILD_GRADLE_TEMPLATE, nl=False)


def main() -> None:
    """
    Entry-point used by the console script defined in pyproject.toml.
    """
    app()
