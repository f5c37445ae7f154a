"""Display components for CLI using Rich."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from src.models.context import HookContext

console = Console()


def show_success(title: str, message: str) -> None:
    """Display a success message."""
    console.print()
    console.print(
        Panel(
            f"[bold green]{escape(message)}[/]",
            title=f"[bold]{escape(title)}[/]",
            border_style="green",
        )
    )


def show_error(title: str, message: str) -> None:
    """Display an error message."""
    console.print()
    console.print(
        Panel(
            f"[bold red]{escape(message)}[/]",
            title=f"[bold]{escape(title)}[/]",
            border_style="red",
        )
    )


def show_context(context: HookContext) -> None:
    """Display the plugin context a stage runs against."""
    table = Table(title="Plugin", show_header=False, border_style="blue")
    table.add_column("Key", style="cyan")
    table.add_column("Value")

    table.add_row("Name", escape(context.plugin_name))
    table.add_row("Directory", escape(str(context.plugin_dir)))
    table.add_row("Parent folder", escape(context.parent_folder) if context.parent_folder else "[dim]-[/]")
    table.add_row(
        "Local checkout",
        escape(str(context.local_checkout_dir)) if context.local_checkout_dir else "[dim]-[/]",
    )
    table.add_row("Compiled", "[green]yes[/]" if context.override_default_compile else "no")

    console.print()
    console.print(table)
