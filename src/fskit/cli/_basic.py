"""The ls, find, and info commands."""

from __future__ import annotations

import json

import click

from ..fileinfo import FileInfo
from ..tree import FileExplorer
from ._helpers import (
    main,
    _fskit_errors,
    _format_option,
    _recursive_option,
    _sort_option,
)


# ---------------------------------------------------------------------------
# ls
# ---------------------------------------------------------------------------

def _format_entry(entry, long: bool) -> str:
    name = entry.name + ("/" if entry.is_dir else "")
    if not long:
        return name
    size = "" if entry.size is None else str(entry.size)
    when = entry.modified_time.strftime("%Y-%m-%d %H:%M")
    return f"{size:>10}  {when}  {name}"


def _echo_tree(entries, long: bool, depth: int = 0) -> None:
    for entry in entries:
        click.echo("  " * depth + _format_entry(entry, long))
        if entry.children:
            _echo_tree(entry.children, long, depth + 1)


@main.command()
@click.argument("directory", type=click.Path(), default=".")
@_recursive_option
@click.option("-l", "--long", "long_", is_flag=True, help="Show file sizes and modification times.")
@_sort_option
@_format_option
def ls(directory, recursive, long_, sort, fmt):
    """List the entries of DIRECTORY (default: current directory).

    With -R, subdirectories are listed beneath their parent, indented.

    \b
    Examples:
        fskit ls
        fskit ls -R -l ./data
        fskit ls --format json ./data
    """
    with _fskit_errors():
        entries = FileExplorer(directory, sort=sort).list_all(recursive)
    if fmt == "json":
        click.echo(json.dumps([e.to_dict() for e in entries]))
    else:
        _echo_tree(entries, long_)


# ---------------------------------------------------------------------------
# find
# ---------------------------------------------------------------------------

@main.command()
@click.argument("directory", type=click.Path())
@click.argument("pattern")
@_recursive_option
@click.option("--ext", "by_ext", is_flag=True, default=False,
              help="Treat PATTERN as a file extension (e.g. 'txt').")
@_sort_option
@_format_option
def find(directory, pattern, recursive, by_ext, sort, fmt):
    """Print files under DIRECTORY whose path matches PATTERN.

    PATTERN is a glob matched case-insensitively against the whole path:
    '*' matches any run of characters (including '/'), '?' one
    character.  Quote it to prevent shell expansion.

    \b
    Examples:
        fskit find . '*.txt'
        fskit find -R ./src '*/tests/*.py'
        fskit find -R --ext ./docs md
    """
    with _fskit_errors():
        explorer = FileExplorer(directory, sort=sort)
        if by_ext:
            matches = explorer.search_by_extension(pattern, recursive)
        else:
            matches = explorer.search(pattern, recursive)
    if fmt == "json":
        click.echo(json.dumps([e.to_dict() for e in matches]))
    else:
        for entry in matches:
            click.echo(entry.path)


# ---------------------------------------------------------------------------
# info
# ---------------------------------------------------------------------------

@main.command()
@click.argument("path", type=click.Path())
@click.option("--checksum", "checksum", is_flag=True, default=False,
              help="Include the SHA-256 of the content.")
@_format_option
def info(path, checksum, fmt):
    """Show metadata for the file at PATH."""
    with _fskit_errors():
        fi = FileInfo(path)
        meta = fi.metadata()
        if checksum:
            meta["sha256"] = fi.checksum()
    if fmt == "json":
        click.echo(json.dumps(meta))
        return
    width = max(len(k) for k in meta)
    for key, value in meta.items():
        click.echo(f"{key:<{width}}  {'' if value is None else value}")
