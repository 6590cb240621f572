"""Files command implementation.

Lists the managed files of the corpus.
"""

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from notectl.backends.base import BackendError
from notectl.backends.selector import select_backend
from notectl.cli.types import (
    BackendOption,
    ConfigOption,
    ExcludeOption,
    ExtensionOption,
    OutputFormat,
    RootOption,
    resolve_config,
)
from notectl.core.config import CorpusConfigError
from notectl.corpus.classifier import canonical_path
from notectl.corpus.enumerator import list_files_with
from notectl.models.file_list import FileListing
from notectl.utils.formatting import (
    console,
    create_file_table,
    format_file_row,
    print_error,
    print_info,
    print_warning,
)

app = typer.Typer(
    help="List the managed files of the corpus.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def list_corpus_files(
    ctx: typer.Context,
    config_path: ConfigOption = None,
    root: RootOption = None,
    extensions: ExtensionOption = None,
    exclude: ExcludeOption = None,
    backends: BackendOption = None,
    count_only: Annotated[
        bool,
        typer.Option("--count", "-c", help="Only show the file count."),
    ] = False,
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-n", help="Limit number of files to display."),
    ] = None,
    export_path: Annotated[
        Path | None,
        typer.Option("--export", help="Export the listing to a JSON file."),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: table, json, or plain.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """List every file that belongs to the corpus.

    Examples:
        notectl files                       # Table of managed files
        notectl files --format plain        # One path per line
        notectl files -r ~/notes -e org -e md
        notectl files -b rg -b fallback     # Prefer ripgrep, else walk
        notectl files --export files.json   # Export to JSON file
    """
    if ctx.invoked_subcommand is not None:
        return

    try:
        config = resolve_config(config_path, root, extensions, exclude, backends)
        backend = select_backend(config.backends)
        files = list_files_with(backend, config)
    except (CorpusConfigError, BackendError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    root_str = str(canonical_path(config.root))
    listing = FileListing.create(
        files=files,
        root=root_str,
        backend=backend.identifier.value,
        extensions=config.extensions,
    )

    if not files:
        print_warning(f"No managed files found under {root_str}")

    if export_path is not None:
        export_path = export_path.resolve()
        if export_path.is_dir():
            print_error(f"Export path is a directory: {export_path}")
            raise typer.Exit(code=1)
        try:
            export_path.parent.mkdir(parents=True, exist_ok=True)
            export_path.write_text(json.dumps(listing.to_dict(), indent=2))
            print_info(f"File listing exported to {export_path}")
        except OSError as e:
            print_error(f"Failed to export: {e}")
            raise typer.Exit(code=1) from e

    if count_only:
        print_info(f"Total files: {len(files)}")
        console.print(f"  [file_encrypted]Encrypted:[/] {listing.encrypted_count}")
        return

    display_files = files[:limit] if limit else files

    if output_format == OutputFormat.PLAIN:
        for path in display_files:
            typer.echo(path)
        return

    if output_format == OutputFormat.JSON:
        shown = FileListing(metadata=listing.metadata, files=display_files)
        console.print_json(json.dumps(shown.to_dict()))
        return

    table = create_file_table(f"Managed Files ({escape(root_str)})")
    for path in display_files:
        table.add_row(*format_file_row(path, root_str))
    console.print(table)

    summary = f"Showing {len(display_files)} of {len(files)} files via {backend.identifier.value}"
    if limit and len(display_files) < len(files):
        summary += f" (limited to {limit})"
    console.print(f"\n[dim]{summary}[/]")
