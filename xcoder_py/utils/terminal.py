"""Utility functions for terminal UI and user input."""

from typing import Iterable, Optional

from bs4 import BeautifulSoup
from rich.console import Console
from rich.table import Table

from ..events import Notification

console = Console()


def scanline(prompt: str = "") -> str:
    """Read a line of input from user."""
    if prompt:
        return input(prompt)
    return input()


def scanline_trim(prompt: str = "") -> str:
    """Read and trim a line of input from user."""
    return scanline(prompt).strip()


def choose_index(prompt: str, options: list, max_attempts: int = 3) -> Optional[int]:
    """
    Let user choose an index from a list of options.
    Returns the selected index or None if invalid.
    """
    for _ in range(max_attempts):
        try:
            choice = input(f"{prompt} (0-{len(options) - 1}): ")
            idx = int(choice)
            if 0 <= idx < len(options):
                return idx
            console.print(
                f"[red]Please enter a number between 0 and {len(options) - 1}[/red]"
            )
        except ValueError:
            console.print("[red]Please enter a valid number[/red]")
        except (KeyboardInterrupt, EOFError):
            console.print("\n[yellow]Cancelled[/yellow]")
            return None

    console.print("[red]Too many invalid attempts[/red]")
    return None


def create_table(title: str, headers: list) -> Table:
    """Create a formatted table for display."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    for header in headers:
        table.add_column(header)
    return table


def format_result_color(result: str) -> str:
    """Format a verdict status with appropriate color."""
    result_upper = result.upper()

    if result_upper in ["AC", "ACCEPTED"]:
        return f"[green]{result}[/green]"
    elif result_upper in ["WA", "RE", "CE", "WRONG ANSWER"]:
        return f"[red]{result}[/red]"
    elif result_upper in ["TLE", "MLE", "OLE"]:
        return f"[magenta]{result}[/magenta]"
    elif result_upper in ["IE", "RUN CODE"]:
        return f"[yellow]{result}[/yellow]"
    else:
        return result


def render_description(html: str) -> str:
    """
    Turn a problem statement into plain text.
    The statement's first paragraph repeats the limits shown separately,
    so it is dropped.
    """
    soup = BeautifulSoup(html.replace("\\leq", "≤").replace("\\geq", "≥"), "html.parser")
    first_p = soup.find("p")
    if first_p is not None:
        first_p.decompose()
    lines = (line.rstrip() for line in soup.get_text("\n").splitlines())
    text = "\n".join(lines)
    # Collapse the blank runs left behind by block tags
    while "\n\n\n" in text:
        text = text.replace("\n\n\n", "\n\n")
    return text.strip()


def print_notifications(notifications: Iterable[Notification]) -> None:
    """Show pending notifications, errors in red, confirmations in teal."""
    for notification in notifications:
        color = "red" if notification.is_error else "cyan"
        prefix = f"{notification.title}: " if notification.title else ""
        console.print(f"[{color}]{prefix}{notification.message}[/{color}]")
