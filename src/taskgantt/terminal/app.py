# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from taskgantt.initialize import configure_logging
from taskgantt.terminal import configuration, view
from taskgantt.terminal.custom_typer import AliasedTyperGroup
from taskgantt.view import state as view_state

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="taskgantt - Workflow run timelines in the CLI",
    no_args_is_help=True,
)
app.add_typer(configuration.app, name="config, c")
app.add_typer(view.app, name="view, v")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output above the chart",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output"),
    ] = False,
) -> None:
    """
    taskgantt - Workflow run timelines in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if verbose:
        configure_logging("DEBUG")


def run() -> None:
    app()
