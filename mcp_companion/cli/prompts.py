"""Interactive prompt sequence for a new memory entry."""

from rich.console import Console
from rich.prompt import Prompt

from mcp_companion.memory.types import EntryInput, EntryType
from mcp_companion.utils.helpers import split_csv

ENTRY_TYPES = [t.value for t in EntryType]


def ask_required(console: Console, label: str) -> str:
    """Ask until a non-empty answer is given. Only this step repeats."""
    while True:
        answer = Prompt.ask(label, console=console).strip()
        if answer:
            return answer
        console.print(f"[red]{label} is required[/red]")


def prompt_entry(console: Console) -> EntryInput:
    """Collect type, description, context, impact and tags, in that order."""
    entry_type = Prompt.ask("Entry type", choices=ENTRY_TYPES, console=console)
    description = ask_required(console, "Description")
    context = ask_required(console, "Context")
    impact = ask_required(console, "Impact")
    tags = Prompt.ask(
        "Tags (comma-separated)", default="", show_default=False, console=console
    )

    return EntryInput(
        type=EntryType(entry_type),
        description=description,
        context=context,
        impact=impact,
        tags=split_csv(tags),
    )
