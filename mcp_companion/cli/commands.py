"""CLI commands for mcp-companion."""

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from mcp_companion import __logo__, __version__
from mcp_companion.cli.prompts import ENTRY_TYPES, prompt_entry
from mcp_companion.config.schema import CompanionConfig, load_config
from mcp_companion.errors import (
    CorruptStoreError,
    MissingStoreError,
    StoreReadError,
    UnknownSectionError,
    UnsupportedModeError,
)
from mcp_companion.logging_config import setup_logging
from mcp_companion.memory.store import MemoryFileStore, SectionView

app = typer.Typer(
    name="mcp-companion",
    help=f"{__logo__} mcp-companion - project memory for AI collaboration",
    invoke_without_command=True,
)

console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool):
    if value:
        console.print(f"{__logo__} mcp-companion v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        None, "--version", "-V", callback=version_callback, is_eager=True
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """mcp-companion - project memory for AI collaboration.

    Runs setup in the current directory when no command is given.
    """
    config = load_config()
    setup_logging("DEBUG" if verbose else config.log_level)
    if ctx.invoked_subcommand is None:
        _run_setup(Path.cwd(), config)


# ============================================================================
# Shared helpers
# ============================================================================


def _directory_option():
    return typer.Option(
        None, "--directory", "-d", help="Project root (default: current directory)"
    )


def _open_store(directory: Path | None, config: CompanionConfig) -> MemoryFileStore:
    return MemoryFileStore(directory or Path.cwd(), config)


def _load_or_exit(store: MemoryFileStore) -> dict:
    """Load the store, exiting with status 1 if it is missing or corrupt."""
    try:
        return store.load()
    except MissingStoreError:
        err_console.print("[red]Error: No memory file found.[/red]")
        err_console.print("Run [cyan]mcp-companion setup[/cyan] first.")
        raise typer.Exit(1)
    except CorruptStoreError as e:
        err_console.print(f"[red]Error: Memory file is not valid JSON:[/red] {e.detail}")
        raise typer.Exit(1)
    except StoreReadError as e:
        err_console.print(f"[red]Error: Could not read the memory file:[/red] {e.reason}")
        raise typer.Exit(1)


def _add_mode(interactive: bool, entry_type: str | None) -> str | None:
    """Return "interactive", or None when only usage should be shown.

    Raises:
        UnsupportedModeError: a type was given without --interactive.
    """
    if interactive:
        return "interactive"
    if entry_type:
        raise UnsupportedModeError("Non-interactive")
    return None


def _report_save(saved: bool, success: str) -> None:
    if saved:
        console.print(f"[green]✓[/green] {success}")
    else:
        err_console.print("[red]Error: Failed to save the memory file.[/red]")
        raise typer.Exit(1)


# ============================================================================
# Setup
# ============================================================================


@app.command()
def setup(directory: Path = _directory_option()):
    """Create the memory file and the Cursor rules file."""
    _run_setup(directory or Path.cwd(), load_config())


def _run_setup(root: Path, config: CompanionConfig) -> None:
    from mcp_companion.scaffold import initialize

    console.print(f"\n{__logo__} MCP Cursor Companion Setup\n")

    with console.status("Initializing memory and rules..."):
        result = initialize(root, config)

    if not result.ok:
        err_console.print("[red]✗ Setup failed[/red]")
        err_console.print(f"[red]Error during setup:[/red] {result.error}")
        err_console.print("\n[yellow]Troubleshooting:[/yellow]")
        err_console.print("  1. Ensure you have write permissions in the project directory")
        err_console.print("  2. Try running the command with administrator privileges")
        raise typer.Exit(1)

    if result.memory_created:
        console.print(f"[green]✓[/green] Created memory at {result.memory_file}")
    else:
        console.print(f"[yellow]Memory already exists at {result.memory_file}, kept as is[/yellow]")
    console.print(f"[green]✓[/green] Wrote rules to {result.rules_file}")

    console.print(f"\n{__logo__} mcp-companion is ready!")
    console.print("\nNext steps:")
    console.print("  1. Restart Cursor so it picks up the new rules")
    console.print("  2. View memory: [cyan]mcp-companion memory[/cyan]")
    console.print("  3. Record work: [cyan]mcp-companion add --interactive[/cyan]")


# ============================================================================
# Memory commands
# ============================================================================


@app.command()
def memory(
    section: str = typer.Option(None, "--section", "-s", help="Top-level section to show"),
    directory: Path = _directory_option(),
):
    """Show a memory summary or a single section."""
    store = _open_store(directory, load_config())
    data = _load_or_exit(store)

    try:
        view = store.view(section, store=data)
    except UnknownSectionError as e:
        console.print(f"[red]Section '{e.section}' not found.[/red]")
        console.print("Available sections:")
        for key in e.available:
            console.print(f"  - {key}")
        return

    if isinstance(view, SectionView):
        console.print(f"[bold]{view.name}[/bold]")
        console.print_json(data=view.value)
        return

    console.print(f"{__logo__} Project Memory\n")
    console.print(f"Project: {view.project_name or '[dim]unknown[/dim]'}")
    console.print(f"Version: {view.current_version or '[dim]unknown[/dim]'}")

    table = Table(title="Records")
    table.add_column("Section", style="cyan")
    table.add_column("Entries", justify="right")
    for key, count in view.counts.items():
        table.add_row(key, str(count))
    console.print(table)

    console.print("Available sections:")
    for key in view.sections:
        console.print(f"  - {key}")


@app.command()
def update(
    version: str = typer.Option(None, "--version", help="Set project_overview.current_version"),
    focus: str = typer.Option(None, "--focus", "-f", help="Add an upcoming change"),
    directory: Path = _directory_option(),
):
    """Update the project version or development focus."""
    store = _open_store(directory, load_config())
    data = _load_or_exit(store)

    if not version and not focus:
        console.print("[yellow]No updates specified.[/yellow] Use --version or --focus.")
        return

    result = store.update(version=version, focus=focus, store=data)
    if not result.changed:
        console.print("[yellow]Nothing changed; focus already listed.[/yellow]")
        return

    for change in result.changes:
        console.print(f"  [dim]{change}[/dim]")
    _report_save(result.saved, "Memory updated")


@app.command()
def add(
    interactive: bool = typer.Option(
        False, "--interactive", "-i", help="Prompt for the entry fields"
    ),
    entry_type: str = typer.Option(
        None, "--type", "-t", help=f"Entry type: {', '.join(ENTRY_TYPES)}"
    ),
    directory: Path = _directory_option(),
):
    """Append an entry to detailed_memories."""
    store = _open_store(directory, load_config())
    data = _load_or_exit(store)

    try:
        mode = _add_mode(interactive, entry_type)
    except UnsupportedModeError as e:
        console.print(f"[yellow]{e}.[/yellow]")
        console.print("Use [cyan]mcp-companion add --interactive[/cyan] instead.")
        return

    if mode == "interactive":
        entry_input = prompt_entry(console)
        result = store.add_entry(entry_input, store=data)
        if result.secondary:
            console.print(f"  [dim]Also recorded in {result.secondary}[/dim]")
        _report_save(result.saved, f"Added {entry_input.type.value} memory")
        return

    console.print("Usage: [cyan]mcp-companion add --interactive[/cyan]")
    console.print(f"Entry types: {', '.join(ENTRY_TYPES)}")
