"""The sync command."""

from __future__ import annotations

import click

from ..sync import FileSynchronizer
from ._helpers import main, _fskit_errors, _recursive_option, _status
from ._watch import SyncTally, watch_and_sync


@main.command()
@click.argument("source", type=click.Path())
@click.argument("target", type=click.Path())
@_recursive_option
@click.option("--watch", "watch", is_flag=True, default=False,
              help="Watch SOURCE for changes and sync continuously.")
@click.option("--debounce", type=int, default=2000,
              help="Debounce delay in ms for --watch (default: 2000).")
@click.pass_context
def sync(ctx, source, target, recursive, watch, debounce):
    """Copy new and updated files from SOURCE into TARGET.

    Both directories must exist.  A file is copied when it is missing
    from TARGET or its modification time is newer than the TARGET copy.
    Nothing in TARGET is deleted.  Without -R only the top-level files
    of SOURCE are considered.

    \b
    Examples:
        fskit sync ./notes /mnt/backup/notes
        fskit sync -R ./site ./public
        fskit sync -R --watch ./src ./mirror
    """
    verbose = ctx.obj.get("verbose", False)
    with _fskit_errors():
        # Validate both directories before starting a watch loop.
        FileSynchronizer(source, target)
        if watch:
            watch_and_sync(source, target, recursive=recursive,
                           debounce=debounce, verbose=verbose)
            return
        tally = SyncTally(verbose)
        FileSynchronizer(source, target, tally).sync(recursive)
    _status(ctx, f"{tally.copied} copied, {tally.current} up to date")
