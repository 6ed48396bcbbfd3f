"""histchain shell command.

Interactive session over a single in-memory history.

Execution Context:
    CLI command - invoked via `histchain shell`

Dependencies:
    - click: CLI framework
    - rich: Terminal output
    - histchain_core: History operations

Metadata:
    Version: 0.1.0
    Author: histchain Team
"""
from __future__ import annotations

import shlex
from typing import Callable

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from histchain_core.history import CommitHistory
from histchain_core.history import InvalidArgument
from histchain_core.models import HistoryConfig

console = Console()

PROMPT = "histchain> "
EXIT_COMMANDS = ("quit", "exit")


# ---- Session Handlers ---------------------------------------------------------------------------------------


def _parse_count(args: list[str], default: int | None = None) -> int:
    """Parse the count argument of log/reset.

    Raises:
        InvalidArgument: If the argument is missing or not an integer.
    """
    if not args:
        if default is None:
            raise InvalidArgument("A count is required")
        return default

    try:
        return int(args[0])
    except ValueError as parse_error:
        msg = f"Count must be an integer, got '{args[0]}'"
        raise InvalidArgument(msg) from parse_error


def _require_id(args: list[str]) -> str:
    if not args:
        raise InvalidArgument("A commit ID is required")
    return args[0]


def _do_commit(history: CommitHistory, args: list[str], config: HistoryConfig) -> None:
    commit_id = history.commit(" ".join(args))
    console.print(f"[green]Created commit[/green] [cyan]{commit_id}[/cyan]")


def _do_log(history: CommitHistory, args: list[str], config: HistoryConfig) -> None:
    text = history.get_history(_parse_count(args, default=config.log_limit))
    if not text:
        console.print("[dim]No commits yet[/dim]")
        return

    head_id = history.get_head_id()
    for line in text.splitlines():
        marker = "[yellow]*[/yellow] " if line.startswith(f"{head_id}:") else "  "
        console.print(f"{marker}{escape(line)}", soft_wrap=True)


def _do_reset(history: CommitHistory, args: list[str], config: HistoryConfig) -> None:
    history.reset(_parse_count(args))
    console.print(escape(history.describe()), soft_wrap=True)


def _do_drop(history: CommitHistory, args: list[str], config: HistoryConfig) -> None:
    commit_id = _require_id(args)
    if history.drop(commit_id):
        console.print(f"[green]Dropped[/green] {escape(commit_id)}")
    else:
        console.print(f"[yellow]No commit {escape(commit_id)}[/yellow]")


def _do_squash(history: CommitHistory, args: list[str], config: HistoryConfig) -> None:
    commit_id = _require_id(args)
    if history.squash(commit_id):
        console.print(f"[green]Squashed[/green] {escape(commit_id)} with its previous commit")
    else:
        console.print(f"[yellow]Nothing to squash for {escape(commit_id)}[/yellow]")


def _do_contains(history: CommitHistory, args: list[str], config: HistoryConfig) -> None:
    commit_id = _require_id(args)
    found = history.contains(commit_id)
    console.print("yes" if found else "no")


def _do_head(history: CommitHistory, args: list[str], config: HistoryConfig) -> None:
    console.print(history.get_head_id() or "[dim](none)[/dim]")


def _do_describe(history: CommitHistory, args: list[str], config: HistoryConfig) -> None:
    console.print(escape(history.describe()), soft_wrap=True)


def _do_help(history: CommitHistory, args: list[str], config: HistoryConfig) -> None:
    table = Table(show_header=False, box=None)
    for command, (_, usage) in HANDLERS.items():
        table.add_row(f"[cyan]{command}[/cyan]", escape(usage))
    table.add_row(f"[cyan]{'/'.join(EXIT_COMMANDS)}[/cyan]", "Leave the shell")
    console.print(table)


Handler = Callable[[CommitHistory, list[str], HistoryConfig], None]

HANDLERS: dict[str, tuple[Handler, str]] = {
    "commit": (_do_commit, "commit MESSAGE - record a new commit"),
    "log": (_do_log, "log [N] - show the N most recent commits"),
    "reset": (_do_reset, "reset N - move HEAD back N commits"),
    "drop": (_do_drop, "drop ID - remove a commit"),
    "squash": (_do_squash, "squash ID - merge a commit with the one before it"),
    "contains": (_do_contains, "contains ID - check whether a commit exists"),
    "head": (_do_head, "head - show the HEAD commit ID"),
    "describe": (_do_describe, "describe - summarize the history"),
    "help": (_do_help, "help - list commands"),
}


def execute_line(
        history: CommitHistory,
        line: str,
        config: HistoryConfig,
) -> bool:
    """Execute one shell input line.

    Args:
        history: History the session operates on.
        line: Raw input line.
        config: CLI configuration.

    Returns:
        False when the session should end, True otherwise.
    """
    try:
        parts = shlex.split(line)
    except ValueError as parse_error:
        console.print(f"[red]Error: {escape(str(parse_error))}[/red]")
        return True

    if not parts:
        return True

    command, args = parts[0].lower(), parts[1:]
    if command in EXIT_COMMANDS:
        return False

    if command not in HANDLERS:
        console.print(f"[red]Unknown command '{escape(command)}'[/red] (try 'help')")
        return True

    handler, _ = HANDLERS[command]
    try:
        handler(history, args, config)
    except InvalidArgument as arg_error:
        console.print(f"[red]Error: {escape(str(arg_error))}[/red]")
    return True


# ---- Shell Command ------------------------------------------------------------------------------------------


@click.command()
@click.option(
    "--name",
    default=None,
    help="History name (defaults to the configured name).",
)
@click.pass_obj
def shell(
        config: HistoryConfig | None,
        name: str | None,
) -> None:
    """Start an interactive history session.

    The history lives only for the duration of the session.

    Examples:
        histchain shell
        histchain shell --name scratch
    """
    config = config or HistoryConfig()

    try:
        history = CommitHistory(name or config.name)
    except InvalidArgument as arg_error:
        raise click.ClickException(str(arg_error)) from arg_error

    console.print(f"[bold]{escape(history.describe())}[/bold] (type 'help' for commands)")

    while True:
        try:
            line = click.prompt(PROMPT, prompt_suffix="", default="", show_default=False)
        except click.Abort:
            break

        if not execute_line(history, line, config):
            break
