"""The split and join commands."""

from __future__ import annotations

import click

from ..split import FileSplitter, join_parts
from ._helpers import main, SIZE, _fskit_errors, _status


@main.command()
@click.argument("path", type=click.Path())
@click.option("-s", "--size", "chunk_size", type=SIZE, default="1M", show_default=True,
              envvar="FSKIT_CHUNK_SIZE",
              help="Part size in bytes; accepts K/M/G suffixes (or set FSKIT_CHUNK_SIZE).")
@click.option("-o", "--output-dir", "output_dir", type=click.Path(), default=None,
              help="Directory for the parts (default: next to PATH).")
@click.pass_context
def split(ctx, path, chunk_size, output_dir):
    """Split the file at PATH into PATH.part0, PATH.part1, ...

    Every part is SIZE bytes except possibly the last.  Prints the path
    of each part created.

    \b
    Examples:
        fskit split video.mp4 -s 100M
        fskit split dump.sql -s 512K -o /tmp/parts
    """
    with _fskit_errors():
        splitter = FileSplitter(path, output_dir)
        _status(ctx, f"Splitting {splitter.source.path} into {chunk_size}-byte parts")
        parts = splitter.split(chunk_size)
    for part in parts:
        click.echo(part.path)
    _status(ctx, f"{len(parts)} part(s) written to {splitter.directory}")


@main.command()
@click.argument("destination", type=click.Path())
@click.argument("parts", nargs=-1, required=True, type=click.Path())
@click.pass_context
def join(ctx, destination, parts):
    """Concatenate PARTS, in the order given, into DESTINATION.

    \b
    Example:
        fskit join video.mp4 video.mp4.part0 video.mp4.part1
    """
    with _fskit_errors():
        result = join_parts(parts, destination)
    _status(ctx, f"Joined {len(parts)} part(s) into {result.path} ({result.size} bytes)")
