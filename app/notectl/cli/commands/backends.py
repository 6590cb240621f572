"""Backends command implementation.

Shows how each configured backend resolves and which one is selected.
"""

from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from notectl.backends.base import Backend, BackendError
from notectl.backends.selector import probe_backends, select_backend
from notectl.cli.types import BackendOption, ConfigOption, RootOption, resolve_config
from notectl.core.config import CorpusConfigError
from notectl.models.backend import BackendProbe
from notectl.models.config import BackendPreference
from notectl.utils.formatting import console, print_error, print_info

app = typer.Typer(
    help="Show backend resolution and selection.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def show_backends(
    config_path: ConfigOption = None,
    root: RootOption = None,
    backends: BackendOption = None,
    selected_only: Annotated[
        bool,
        typer.Option("--selected", "-s", help="Only print the selected backend."),
    ] = False,
) -> None:
    """Probe the backend preference list in order.

    Every entry is probed and shown, so an unknown backend is visible in
    the table even when it stops the selection.

    Examples:
        notectl backends                    # Table of configured backends
        notectl backends -b rg -b fd        # Probe an ad-hoc preference list
        notectl backends --selected         # Print the backend that would run
    """
    try:
        config = resolve_config(config_path, root, backends=backends)
    except CorpusConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if selected_only:
        selected = _select_or_exit(config.backends)
        typer.echo(selected.identifier.value)
        return

    probes = probe_backends(config.backends)
    if probes:
        console.print(_probe_table(probes))
    else:
        print_info("No backends configured; the directory walk is always used.")

    selected = _select_or_exit(config.backends)
    label = selected.identifier.value
    if selected.is_fallback:
        label += " (directory walk)"
    console.print(f"\n[dim]Selected backend:[/] [info]{label}[/]")


def _select_or_exit(preferences: tuple[BackendPreference, ...]) -> Backend:
    """Select a backend, turning configuration errors into exit code 1."""
    try:
        return select_backend(preferences)
    except BackendError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def _probe_table(probes: list[BackendProbe]) -> Table:
    """Build the table of probed backend preferences."""
    table = Table(
        title="Backend Preferences",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("#", justify="right", style="muted")
    table.add_column("Tool", no_wrap=True)
    table.add_column("Override", style="muted")
    table.add_column("Executable")

    for index, probe in enumerate(probes, start=1):
        if not probe.known:
            executable = "[error]unknown backend[/]"
        elif probe.found:
            executable = f"[success]{escape(probe.executable or '')}[/]"
        else:
            executable = "[warning]not found[/]"
        table.add_row(
            str(index),
            escape(probe.tool),
            escape(probe.override or "-"),
            executable,
        )
    return table
