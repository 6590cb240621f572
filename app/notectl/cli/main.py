"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from typing import Annotated

import typer

from notectl import __version__
from notectl.cli.commands import backends, check, config, files
from notectl.utils.formatting import configure_logging

# Create main Typer app
app = typer.Typer(
    name="notectl",
    help="Discover and classify the note files of a managed corpus.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"notectl version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging on stderr.",
        ),
    ] = False,
) -> None:
    """notectl - Discover and classify the note files of a managed corpus.

    Lists the files under a notes directory using the fastest installed
    search tool (find, fd, ripgrep), or a built-in directory walk.
    """
    configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


# Register commands
app.add_typer(files.app, name="files")
app.command(name="check")(check.check_paths)
app.add_typer(backends.app, name="backends")
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
