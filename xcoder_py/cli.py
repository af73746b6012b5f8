"""Command-line interface for xcoder_py."""

import asyncio
import logging
import shlex
from typing import List, Optional

import click
from rich.logging import RichHandler
from rich.table import Table

from . import __version__
from .client import BackendClient
from .client.models import LANGUAGES, PROBLEM_IDS, Tab
from .config import GlobalConfig
from .events import Event, NotificationBoard, WindowResize
from .session import Session
from .session.view import case_labels
from .utils.terminal import (
    choose_index,
    console,
    create_table,
    format_result_color,
    print_notifications,
    render_description,
    scanline_trim,
)


logger = logging.getLogger(__name__)


class TerminalHost:
    """Receives session events and renders them on the console."""

    def __init__(self):
        self.board = NotificationBoard()
        self.expanded = False

    def __call__(self, event: Event) -> None:
        if isinstance(event, WindowResize):
            self.expanded = event.maximize
            logger.debug("window resize to %dx%d", event.width, event.height)
        else:
            self.board(event)

    def flush(self) -> None:
        print_notifications(self.board.drain())


def _new_session(client: BackendClient, host: TerminalHost) -> Session:
    session = Session(client)
    session.events.subscribe(host)
    return session


@click.group()
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, default=False, help="Enable debug output")
def cli(debug: bool):
    """xcoder_py - contest assistant client for AtCoder problem sets."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


@cli.group()
def config():
    """Manage client configuration."""
    pass


@config.command(name="show")
def config_show():
    """Display the current configuration."""
    cfg = GlobalConfig.load()
    console.print(f"[bold cyan]Backend:[/bold cyan] {cfg.backend_url}")
    timeout = "none" if cfg.request_timeout is None else f"{cfg.request_timeout}s"
    console.print(f"[bold cyan]Request timeout:[/bold cyan] {timeout}")


@config.command(name="set-backend")
@click.argument("url")
@click.option("-t", "--timeout", type=float, help="Request timeout in seconds")
def config_set_backend(url: str, timeout: Optional[float]):
    """Point the client at a backend service."""
    cfg = GlobalConfig.load()
    cfg.backend_url = url
    if timeout is not None:
        cfg.request_timeout = timeout
    cfg.save()
    console.print(f"[green]Backend set to: {url}[/green]")


@cli.command()
def languages():
    """List the supported solution languages."""
    table = create_table("Languages", ["ID", "Language"])
    for language in LANGUAGES:
        table.add_row(language.id, language.label)
    console.print(table)


@cli.command()
def status():
    """Show the project settings, filter and current problem."""
    host = TerminalHost()
    client = BackendClient()
    try:
        session = _new_session(client, host)
        asyncio.run(session.start())
        host.flush()
        show_status(session)
        if session.problem is not None:
            show_problem(session)
    finally:
        client.close()


@cli.command()
def update():
    """Refresh the backend's problem catalog."""
    host = TerminalHost()
    client = BackendClient()
    try:
        session = _new_session(client, host)
        console.print("[cyan]Updating problems list...[/cyan]")
        if asyncio.run(session.navigator.update_problems_list()):
            console.print("[green]Problems list updated[/green]")
        host.flush()
    finally:
        client.close()


@cli.command()
def shell():
    """Interactive session: browse problems, run and submit."""
    host = TerminalHost()
    client = BackendClient()
    try:
        asyncio.run(run_shell(_new_session(client, host), host))
    finally:
        client.close()


def show_status(session: Session):
    """Print directory, editor, language and filter."""
    store = session.store
    flt = session.filter
    console.print(f"[bold cyan]Directory:[/bold cyan] {store.directory or '-'}")
    console.print(f"[bold cyan]Editor:[/bold cyan] {store.editor or '-'}")
    console.print(f"[bold cyan]Language:[/bold cyan] {store.language}")
    console.print(
        f"[bold cyan]Contest:[/bold cyan] {flt.contest_type.value}  "
        f"[bold cyan]Problems:[/bold cyan] {', '.join(flt.problem_ids) or '-'}  "
        f"[bold cyan]Hide solved:[/bold cyan] {'on' if flt.hide_solved else 'off'}"
    )


def show_problem(session: Session):
    """Print whichever tab is current."""
    problem = session.problem
    if problem is None:
        console.print("[yellow]No problem to show.[/yellow]")
        return

    console.print(f"\n[bold]{problem.title}[/bold]  [dim]{problem.task_url}[/dim]")
    if session.view_state.current_tab is Tab.RESULT:
        show_results(session)
        return

    console.print(
        f"[green]Time Limit: {problem.time_limit:g} sec[/green]  "
        f"[blue]Memory Limit: {problem.memory_limit} MB[/blue]"
    )
    console.print(render_description(problem.description))


def show_results(session: Session):
    """Print the aggregate verdict and the selected test case."""
    state = session.view_state
    console.print(f"\n[bold]{format_result_color(state.aggregate_verdict)}[/bold]")
    console.print("  ".join(case_labels(state)))

    verdict = session.view.verdict
    if verdict is None:
        console.print("[yellow]No test results.[/yellow]")
        return

    console.print(
        f"\n[bold]Case {state.selected_case_index + 1}:[/bold] "
        f"{format_result_color(verdict.status)}  "
        f"[magenta]Time Taken: {verdict.time:.2f} sec[/magenta]  "
        f"[blue]Memory: {verdict.memory} MB[/blue]"
    )
    table = Table(show_header=True, header_style="bold magenta", expand=True)
    table.add_column("Input", style="white")
    table.add_column("Answer", style="green")
    table.add_column("Output", style="yellow")
    table.add_row(verdict.input, verdict.answer, verdict.output)
    console.print(table)


SHELL_HELP = [
    ("open DIR", "Open a project directory"),
    ("close", "Close the project"),
    ("editor PATH", "Set the editor executable"),
    ("lang [ID]", "Set the solution language"),
    ("contest ABC|ARC|AGC", "Set the contest type"),
    ("problems ID...", f"Filter problem ids (max 3 of {' '.join(PROBLEM_IDS)})"),
    ("hide-solved on|off", "Hide solved problems"),
    ("next / prev", "Move to the next/previous problem"),
    ("show", "Show the current tab"),
    ("browse", "Open the task page in the browser"),
    ("tab description|result", "Switch tab"),
    ("case N", "Select a test case"),
    ("create", "Create the solution file"),
    ("edit", "Open the solution file in the editor"),
    ("run / submit", "Judge the solution"),
    ("status", "Show settings"),
    ("quit", "Save state and exit"),
]


async def _cmd_open(session: Session, args: List[str]):
    if not args:
        console.print("[red]Usage: open DIR[/red]")
        return
    if await session.open_project(" ".join(args)):
        show_problem(session)


async def _cmd_close(session: Session, args: List[str]):
    if await session.close_project():
        console.print("[green]Project closed[/green]")


async def _cmd_editor(session: Session, args: List[str]):
    if not args:
        console.print(f"[bold cyan]Editor:[/bold cyan] {session.store.editor or '-'}")
        return
    if await session.store.set_editor(" ".join(args)):
        console.print(f"[green]Editor set to: {session.store.editor}[/green]")


async def _cmd_lang(session: Session, args: List[str]):
    if args:
        language_id = args[0]
    else:
        table = create_table("Languages", ["#", "ID", "Language"])
        for idx, language in enumerate(LANGUAGES):
            marker = "*" if language.id == session.store.language else ""
            table.add_row(f"{idx}{marker}", language.id, language.label)
        console.print(table)
        idx = choose_index("Select language", LANGUAGES)
        if idx is None:
            return
        language_id = LANGUAGES[idx].id
    await session.store.set_language(language_id)


async def _cmd_contest(session: Session, args: List[str]):
    if not args:
        console.print("[red]Usage: contest ABC|ARC|AGC[/red]")
        return
    await session.navigator.set_contest_type(args[0])
    show_problem(session)


async def _cmd_problems(session: Session, args: List[str]):
    ids = [x for arg in args for x in arg.replace(",", " ").split()]
    await session.navigator.set_problem_type_filter(ids)
    show_problem(session)


async def _cmd_hide_solved(session: Session, args: List[str]):
    if not args or args[0].lower() not in ("on", "off"):
        console.print("[red]Usage: hide-solved on|off[/red]")
        return
    await session.navigator.set_hide_solved(args[0].lower() == "on")
    show_problem(session)


async def _cmd_next(session: Session, args: List[str]):
    await session.navigator.advance()
    show_problem(session)


async def _cmd_prev(session: Session, args: List[str]):
    await session.navigator.retreat()
    show_problem(session)


async def _cmd_show(session: Session, args: List[str]):
    show_problem(session)


async def _cmd_browse(session: Session, args: List[str]):
    problem = session.problem
    if problem is None:
        console.print("[yellow]No problem to show.[/yellow]")
        return
    console.print(f"[cyan]Opening {problem.task_url}[/cyan]")
    click.launch(problem.task_url)


async def _cmd_tab(session: Session, args: List[str]):
    tab = args[0].lower() if args else Tab.DESCRIPTION.value
    if not session.view.switch_tab(tab):
        console.print("[yellow]Nothing to show there yet.[/yellow]")
        return
    show_problem(session)


async def _cmd_case(session: Session, args: List[str]):
    try:
        number = int(args[0])
    except (IndexError, ValueError):
        console.print("[red]Usage: case N[/red]")
        return
    session.view.set_selected_case(number - 1)
    if session.view.switch_tab(Tab.RESULT):
        show_results(session)


async def _cmd_create(session: Session, args: List[str]):
    await session.create_file()


async def _cmd_edit(session: Session, args: List[str]):
    await session.open_file()


async def _judge(session: Session, submit: bool):
    orchestrator = session.orchestrator
    label = "Submitting" if submit else "Running"
    with console.status(f"[bold green]{label}..."):
        verdicts = await (orchestrator.submit() if submit else orchestrator.run())
    if verdicts is None:
        return
    if not verdicts:
        console.print("[yellow]No test results returned.[/yellow]")
        return
    show_results(session)


async def _cmd_run(session: Session, args: List[str]):
    await _judge(session, submit=False)


async def _cmd_submit(session: Session, args: List[str]):
    await _judge(session, submit=True)


async def _cmd_status(session: Session, args: List[str]):
    show_status(session)


async def _cmd_help(session: Session, args: List[str]):
    table = create_table("Commands", ["Command", "Description"])
    for usage, description in SHELL_HELP:
        table.add_row(usage, description)
    console.print(table)


SHELL_COMMANDS = {
    "open": _cmd_open,
    "close": _cmd_close,
    "editor": _cmd_editor,
    "lang": _cmd_lang,
    "contest": _cmd_contest,
    "problems": _cmd_problems,
    "hide-solved": _cmd_hide_solved,
    "next": _cmd_next,
    "prev": _cmd_prev,
    "show": _cmd_show,
    "browse": _cmd_browse,
    "tab": _cmd_tab,
    "case": _cmd_case,
    "create": _cmd_create,
    "edit": _cmd_edit,
    "run": _cmd_run,
    "submit": _cmd_submit,
    "status": _cmd_status,
    "help": _cmd_help,
}


def _prompt(session: Session, host: TerminalHost) -> str:
    problem = session.problem
    if host.expanded and problem is not None:
        return f"xcoder [{problem.source_stem}]> "
    return "xcoder> "


async def run_shell(session: Session, host: TerminalHost):
    """Read-eval loop over SHELL_COMMANDS; saves backend state on exit."""
    await session.start()
    host.flush()
    if session.store.project_open:
        show_problem(session)
    else:
        console.print("[bold]Welcome to XCoder[/bold]")
        console.print("Open a project folder with 'open DIR'. Type 'help' for commands.")

    while True:
        try:
            line = scanline_trim(_prompt(session, host))
        except (EOFError, KeyboardInterrupt):
            console.print()
            break
        try:
            words = shlex.split(line)
        except ValueError as e:
            console.print(f"[red]{e}[/red]")
            continue
        if not words:
            continue

        name, args = words[0].lower(), words[1:]
        if name in ("quit", "exit"):
            break
        handler = SHELL_COMMANDS.get(name)
        if handler is None:
            console.print(f"[red]Unknown command: {name}[/red] (try 'help')")
            continue
        await handler(session, args)
        host.flush()

    if await session.close():
        console.print("[green]State saved[/green]")
    host.flush()


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
