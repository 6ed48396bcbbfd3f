"""histchain run command.

Replays a scenario file against a fresh history and reports each step.

Execution Context:
    CLI command - invoked via `histchain run`

Dependencies:
    - click: CLI framework
    - rich: Terminal output
    - histchain_core: Scenario replay

Metadata:
    Version: 0.1.0
    Author: histchain Team
"""
from __future__ import annotations

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from histchain_core.models import HistoryConfig
from histchain_core.scenario import Scenario
from histchain_core.scenario import ScenarioResult
from histchain_core.scenario import run_scenario

console = Console()


# ---- Run Command --------------------------------------------------------------------------------------------


@click.command()
@click.argument(
    "script",
    type=click.Path(exists=True, dir_okay=False),
)
@click.option(
    "--name",
    default=None,
    help="History name (overrides the script and config).",
)
@click.option(
    "--limit",
    "-n",
    type=int,
    default=None,
    help="Maximum number of commits to show after the replay.",
)
@click.pass_obj
def run(
        config: HistoryConfig | None,
        script: str,
        name: str | None,
        limit: int | None,
) -> None:
    """Replay a scenario script.

    The script is a JSON list of steps, or an object with 'name' and
    'steps'. Each step names an operation ('commit', 'reset', 'drop',
    'squash', 'contains', 'history', 'describe', 'head') and its
    arguments. Commit steps may set a 'label' that later steps use as
    their 'target'; any step may set 'expect' to check its result.

    The history is named by --name, else the script's 'name', else the
    configured name (HISTCHAIN_NAME, then the config file).

    Examples:
        histchain run linear.json
        histchain run linear.json --name demo -n 5
    """
    config = config or HistoryConfig()

    try:
        scenario = Scenario.load(script)
        history_name = name or scenario.name or config.name
        result = run_scenario(scenario, history_name=history_name)

        _print_steps(result)
        console.print()
        console.print(f"[bold]{escape(result.history.describe())}[/bold]", soft_wrap=True)

        log_text = result.history.get_history(limit if limit is not None else config.log_limit)
        for line in log_text.splitlines():
            console.print(f"  [cyan]{escape(line)}[/cyan]", soft_wrap=True)

    except Exception as run_error:
        msg = f"Run failed: {run_error}"
        raise click.ClickException(msg) from run_error

    if not result.passed:
        msg = f"{len(result.failures)} step(s) did not meet expectations"
        raise click.ClickException(msg)


def _print_steps(result: ScenarioResult) -> None:
    """Print a table with one row per replayed step."""
    table = Table(title="Steps")
    table.add_column("#", justify="right")
    table.add_column("Operation")
    table.add_column("Result")
    table.add_column("Status")

    for index, step_result in enumerate(result.steps, start=1):
        if step_result.error:
            outcome = f"error: {step_result.error}"
        else:
            outcome = "" if step_result.value is None else str(step_result.value)

        status = "[green]ok[/green]" if step_result.passed else "[red]FAILED[/red]"
        table.add_row(
            str(index),
            escape(step_result.step.describe()),
            escape(outcome),
            status,
        )

    console.print(table)
