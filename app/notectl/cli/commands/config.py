"""Config command implementation.

Creates, shows, and locates the corpus configuration file.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from notectl.cli.types import (
    BackendOption,
    ConfigOption,
    ExcludeOption,
    ExtensionOption,
    parse_backend_option,
    resolve_config,
)
from notectl.core.config import CorpusConfigError, parse_corpus_config, save_corpus_config
from notectl.core.paths import get_config_path
from notectl.utils.formatting import console, print_error, print_success

app = typer.Typer(
    help="Manage the corpus configuration file.",
    no_args_is_help=True,
)


@app.command()
def init(
    root: Annotated[
        Path,
        typer.Option("--root", "-r", help="Corpus root directory."),
    ],
    config_path: ConfigOption = None,
    extensions: ExtensionOption = None,
    exclude: ExcludeOption = None,
    backends: BackendOption = None,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a new config file for a corpus."""
    path = config_path or get_config_path()
    if path.exists() and not force:
        print_error(f"Config already exists: {path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    data: dict[str, object] = {"root": root}
    if extensions:
        data["extensions"] = extensions
    if exclude:
        data["exclude"] = exclude
    if backends:
        data["backends"] = [parse_backend_option(value) for value in backends]

    try:
        config = parse_corpus_config(data)
        saved = save_corpus_config(config, path)
    except CorpusConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")


@app.command()
def show(config_path: ConfigOption = None) -> None:
    """Show the effective corpus configuration."""
    try:
        config = resolve_config(config_path)
    except CorpusConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    console.print(f"[bold_header]root[/]        {escape(str(config.root))}")
    console.print(f"[bold_header]extensions[/]  {', '.join(config.extensions)}")
    exclude = ", ".join(config.exclude) if config.exclude else "-"
    console.print(f"[bold_header]exclude[/]     {escape(exclude)}")

    if config.backends:
        entries = [
            f"{pref.tool}={pref.executable}" if pref.executable else pref.tool
            for pref in config.backends
        ]
        console.print(f"[bold_header]backends[/]    {escape(', '.join(entries))}")
    else:
        console.print("[bold_header]backends[/]    [muted](none, directory walk)[/]")

    timeout = f"{config.command_timeout}s" if config.command_timeout else "none"
    console.print(f"[bold_header]timeout[/]     {timeout}")


@app.command()
def path() -> None:
    """Print the default config file path."""
    typer.echo(str(get_config_path()))
