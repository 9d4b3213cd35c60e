# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from bujo import __version__
from bujo.configuration import ConfigurationError
from bujo.initialize import initialize
from bujo.interaction.app import App
from bujo.interaction.mode import tab_from_name
from bujo.logging_setup import get_logger
from bujo.repository.configuration import CONFIGURATION_REPO
from bujo.repository.journal import JOURNAL_REPO, StorageError
from bujo.terminal.session import SessionResult, run_session

logger = get_logger(__name__)

console = Console()

app = typer.Typer(
    help="Bujo - A bullet journal in the terminal",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    if value:
        console.print(f"bujo {__version__}")
        raise typer.Exit()


@app.command()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-v",
            help="Show the version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """
    Open the journal.

    Tab switches views, t/e/n add entries, q saves and quits, ? shows help.
    """
    try:
        initialize()
        config = CONFIGURATION_REPO.get_config()
        journal = JOURNAL_REPO.load_journal()
    except (StorageError, ConfigurationError, OSError) as e:
        logger.error("Startup failed: %s", e)
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    app_state = App(
        journal,
        JOURNAL_REPO,
        start_tab=tab_from_name(config["journal"]["default_view"]),
    )
    result, failures = run_session(app_state, CONFIGURATION_REPO)

    for failure in failures:
        console.print(f"[red]{escape(failure)}[/red]")
    if result == SessionResult.INTERRUPTED:
        console.print("[yellow]Interrupted, journal not saved[/yellow]")
    if failures:
        raise typer.Exit(1)


def run() -> None:
    app()
