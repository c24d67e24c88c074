"""CLI commands for scaffolding and inspecting locator configurations."""

from __future__ import annotations

import importlib
import os
import sys
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from systems_locator.adapters.scene import SceneConstruction, SceneDiscovery
from systems_locator.core.config import settings
from systems_locator.core.exceptions import LocatorError
from systems_locator.services.locator import Locator

app = typer.Typer(name="config", help="Scaffold and inspect locator configurations")
console = Console()

CONFIG_TEMPLATE = '''"""Systems locator configuration."""

from __future__ import annotations

from systems_locator.services.builder import LocatorBuilder


class {class_name}:
    """Declares the systems tracked by the locator."""

    def configure(self, builder: LocatorBuilder) -> None:
        builder.prefab_path = "{prefab_path}"
'''


class ConsoleReporter:
    """Print locator warnings and errors instead of logging them."""

    def warning(self, message: str) -> None:
        console.print(f"[yellow]Warning:[/yellow] {message}")

    def error(self, message: str) -> None:
        console.print(f"[red]Error:[/red] {message}")


def render_config(class_name: str, prefab_path: str) -> str:
    """Return the source of a configuration module."""
    return CONFIG_TEMPLATE.format(class_name=class_name, prefab_path=prefab_path)


def load_configuration(target: str) -> Any:
    """Import ``module:attribute`` and return a configure callable.

    Classes are instantiated; objects exposing ``configure`` are used through
    that method; any other callable is used as-is.
    """
    module_name, sep, attribute = target.partition(":")
    if not sep or not module_name or not attribute:
        raise ValueError(f"Expected MODULE:ATTRIBUTE, got {target!r}")

    cwd = os.getcwd()
    added = cwd not in sys.path
    if added:
        sys.path.insert(0, cwd)
    try:
        module = importlib.import_module(module_name)
    finally:
        if added:
            sys.path.remove(cwd)
    try:
        obj = getattr(module, attribute)
    except AttributeError as exc:
        raise ValueError(f"{module_name} has no attribute {attribute!r}") from exc

    if isinstance(obj, type):
        obj = obj()
    configure = getattr(obj, "configure", obj)
    if not callable(configure):
        raise ValueError(f"{target} is neither a configuration nor a callable")
    return configure


@app.command("init")
def init_config(
    path: Path = typer.Option(Path("game_config.py"), "--path", "-p", help="File to write"),
    class_name: str = typer.Option("GameConfig", "--class-name", "-c", help="Class name"),
    prefab_path: str = typer.Option(
        settings.DEFAULT_PREFAB_PATH, "--prefab-path", help="Systems root prefab path"
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
) -> None:
    """Write a configuration module scaffold."""
    if path.exists() and not force:
        console.print(f"[red]Error:[/red] {path} already exists (use --force to overwrite)")
        raise typer.Exit(1)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_config(class_name, prefab_path), encoding="utf-8")
    console.print(f"[green]Created configuration at:[/green] {path}")


@app.command("inspect")
def inspect_config(
    target: str = typer.Argument(..., help="Configuration as MODULE:ATTRIBUTE"),
) -> None:
    """List the systems a configuration declares."""
    try:
        configure = load_configuration(target)
    except (ImportError, ValueError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e

    locator = Locator(SceneDiscovery(), SceneConstruction(), ConsoleReporter(), name="inspect")
    captured: dict[str, Any] = {}

    def capture_builder(builder: Any) -> None:
        captured["prefab_path"] = builder.prefab_path
        captured["prefab_paths"] = list(builder.prefab_paths)

    try:
        locator.initialize(configure, root_factory=capture_builder)
    except LocatorError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e

    systems = locator.describe()
    if not systems:
        console.print("[dim]No systems declared.[/dim]")
        return

    table = Table(title="Declared Systems")
    table.add_column("System", style="cyan", no_wrap=True)
    table.add_column("Module", style="dim")
    table.add_column("Required")
    table.add_column("No Override")
    table.add_column("Create If Missing")
    table.add_column("Null Object")

    for info in systems:
        table.add_row(
            info.qualname,
            info.module or "-",
            _flag(info.required),
            _flag(info.no_override),
            _flag(info.create_if_not_present),
            _flag(info.has_null_instance),
        )

    console.print(table)
    console.print(f"[bold]Prefab path:[/bold] {captured.get('prefab_path') or '-'}")
    for extra in captured.get("prefab_paths", []):
        console.print(f"[bold]Extra prefab path:[/bold] {extra}")


def _flag(value: bool) -> str:
    return "[green]yes[/green]" if value else "[dim]no[/dim]"
