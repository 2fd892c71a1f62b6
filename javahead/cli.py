"""
JavaHead - Command line interface

Usage:
    javahead resolve com.example.shapes           # Show a package or class
    javahead classes com.example.shapes           # List classes in a package
    javahead compile com.example.shapes.Circle    # Compile in place
    javahead run com.example.shapes.Circle 3      # Compile, run, clean up
    javahead -r src test com.example.shapes       # Extra search root
"""

from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from .config import Config
from .core import JavaClass, Package, Registry
from .exceptions import JavaHeadError
from .utils.logger import get_logger, setup_logger

app = typer.Typer(add_completion=False)
console = Console()
logger = get_logger(__name__)

_state = {"roots": [], "registry": None}

# Let "-g:none" style tokens through as arguments instead of options
_PASSTHROUGH = {"ignore_unknown_options": True}


@app.callback()
def main(
    root: Optional[List[str]] = typer.Option(None, "--root", "-r", help="Additional search root (repeatable)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print debug logging"),
):
    """Resolve, compile and run Java classes by their dotted names."""
    setup_logger("DEBUG" if verbose else None)
    _state["roots"] = list(root or [])
    _state["registry"] = None


def get_registry() -> Registry:
    registry = _state["registry"]
    if registry is None:
        registry = Registry()
        for root in _state["roots"]:
            registry.add_search_root(root)
        logger.debug(f"Registry ready with {len(registry.search_roots)} search roots")
        _state["registry"] = registry
    return registry


def fail(error: Exception):
    console.print(f"[bold red]Error:[/bold red] {error}")
    raise typer.Exit(code=1)


def print_package(package: Package):
    table = Table(title=f"Package {package.full_name or '<default>'}", title_justify="left")
    table.add_column("Class")
    table.add_column("Source")
    table.add_column("Compiled")
    for java_class in package.classes():
        table.add_row(
            java_class.full_name,
            str(java_class.source_path),
            "[green]yes[/green]" if java_class.is_compiled() else "[dim]no[/dim]",
        )
    console.print(table)


@app.command()
def resolve(name: str = typer.Argument(..., help="Dotted package or class name")):
    """Show where a package or class lives."""
    member, error = get_registry().try_resolve(name)
    if error is not None:
        fail(error)

    if isinstance(member, Package):
        console.print(f"[bold cyan]Package[/bold cyan] {member.full_name}")
        console.print(f"Path: {member.path}")
        if member.parent is not None:
            console.print(f"Parent: {member.parent.full_name}")
    else:
        console.print(f"[bold cyan]Class[/bold cyan] {member.full_name}")
        console.print(f"Source: {member.source_path}")
        console.print(f"Compiled: {'yes' if member.is_compiled() else 'no'}")


@app.command()
def classes(name: str = typer.Argument(..., help="Dotted package name")):
    """List the classes of a package."""
    try:
        print_package(get_registry().resolve_package(name))
    except JavaHeadError as e:
        fail(e)


@app.command("compile", context_settings=_PASSTHROUGH)
def compile_command(
    name: str = typer.Argument(..., help="Package or class to compile"),
    args: Optional[List[str]] = typer.Argument(None, help="Extra compiler arguments"),
):
    """Compile a class, or every class of a package, in place."""
    try:
        member = get_registry().resolve_member(name)
        member.compile(*(args or []))
    except JavaHeadError as e:
        fail(e)
    console.print(f"[OK] Compiled {name}")


@app.command(context_settings=_PASSTHROUGH)
def run(
    name: str = typer.Argument(..., help="Class to run"),
    args: Optional[List[str]] = typer.Argument(None, help="Program arguments"),
):
    """Compile a class, run it and remove the compiled artifacts."""
    try:
        output = get_registry().resolve_class(name).run(*(args or []))
    except JavaHeadError as e:
        fail(e)
    console.print(output, end="", markup=False, highlight=False)


@app.command()
def test(name: str = typer.Argument(..., help="Package or class to test-compile")):
    """Check that classes compile without leaving artifacts behind."""
    try:
        member = get_registry().resolve_member(name)
    except JavaHeadError as e:
        fail(e)

    targets = member.classes() if isinstance(member, Package) else [member]
    failed = [c.full_name for c in targets if c.test() is None]

    for java_class in targets:
        status = "[red]FAILED[/red]" if java_class.full_name in failed else "[green]ok[/green]"
        console.print(f"  {status} {java_class.full_name}")

    if failed:
        raise typer.Exit(code=1)


@app.command()
def clean(name: str = typer.Argument(..., help="Package or class to clean")):
    """Remove compiled artifacts."""
    try:
        member = get_registry().resolve_member(name)
    except JavaHeadError as e:
        fail(e)

    if isinstance(member, JavaClass) and not member.remove_compiled_artifacts():
        console.print(f"[dim]Nothing to remove for {name}[/dim]")
        return
    if isinstance(member, Package):
        member.remove_compiled_artifacts()
    console.print(f"[OK] Cleaned {name}")


@app.command()
def info():
    """Show configuration and search roots."""
    registry = get_registry()

    console.print("\n[bold cyan]JavaHead[/bold cyan]\n")
    console.print(f"Compiler: {Config.JAVAC}")
    console.print(f"Runtime: {Config.JAVA}")
    console.print(f"Timeout: {registry.toolchain.timeout or 'none'}")
    try:
        Config.validate()
        console.print("Toolchain: [green]available[/green]")
    except ValueError as e:
        console.print(f"Toolchain: [yellow]{e}[/yellow]")

    console.print("\n[bold cyan]Search roots:[/bold cyan]")
    for root in registry.search_roots:
        console.print(f"  - {root}")
    console.print()


if __name__ == "__main__":
    app()
