"""Check command implementation.

Tests whether individual paths belong to the corpus without listing it.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from notectl.cli.types import (
    ConfigOption,
    ExcludeOption,
    ExtensionOption,
    RootOption,
    resolve_config,
)
from notectl.core.config import CorpusConfigError
from notectl.corpus.classifier import Membership, explain
from notectl.utils.formatting import console, print_error

# Human-readable explanation per rejection reason
_REASONS: dict[Membership, str] = {
    Membership.MANAGED: "managed",
    Membership.OUTSIDE_ROOT: "not under the corpus root",
    Membership.EXTENSION: "extension not accepted",
    Membership.EXCLUDED: "matches an exclusion pattern",
}


def check_paths(
    paths: Annotated[
        list[Path],
        typer.Argument(help="Paths to classify."),
    ],
    config_path: ConfigOption = None,
    root: RootOption = None,
    extensions: ExtensionOption = None,
    exclude: ExcludeOption = None,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Print nothing, only set the exit code."),
    ] = False,
) -> None:
    """Check whether paths belong to the corpus.

    Classifies each path and reports why it is rejected.

    Exits with code 1 if any path is not managed.

    Examples:
        notectl check ~/notes/inbox.org
        notectl check -q "$FILE" && echo managed
    """
    try:
        config = resolve_config(config_path, root, extensions, exclude)
    except CorpusConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    all_managed = True
    for path in paths:
        membership = explain(path, config)
        if membership is not Membership.MANAGED:
            all_managed = False
        if quiet:
            continue

        style = "managed" if membership is Membership.MANAGED else "rejected"
        console.print(
            f"[{style}]{membership.value}[/] {escape(str(path))} "
            f"[dim]({_REASONS[membership]})[/]"
        )

    if not all_managed:
        raise typer.Exit(code=1)
