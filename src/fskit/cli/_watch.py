"""Watch mode for the sync command."""

from __future__ import annotations

import datetime

import click

from ..exceptions import FsKitError
from ..sync import FileSynchronizer

try:
    import watchfiles
except ImportError:  # optional 'watch' extra
    watchfiles = None


def _require_watchfiles():
    """Return the watchfiles module, raising a friendly error if missing."""
    if watchfiles is None:
        raise click.ClickException(
            "watchfiles is required for --watch mode.\n"
            "Install it with: pip install fskit[watch]"
        )
    return watchfiles


class SyncTally:
    """Sync log hook that counts events and echoes copies.

    Skipped (already current) files are only reported in verbose mode.
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.copied = 0
        self.current = 0

    def __call__(self, event) -> None:
        if event.copied:
            self.copied += 1
            click.echo(f"copy  {event.source} -> {event.target}")
        else:
            self.current += 1
            if self.verbose:
                click.echo(f"skip  {event.source}", err=True)

    def summary(self) -> str:
        if not self.copied:
            return "no changes"
        return f"{self.copied} copied, {self.current} up to date"


def _run_sync_cycle(source, target, *, recursive, verbose):
    """Run one sync pass and print a timestamped summary."""
    tally = SyncTally(verbose)
    FileSynchronizer(source, target, tally).sync(recursive)
    now = datetime.datetime.now().strftime("%H:%M:%S")
    click.echo(f"[{now}] Sync: {tally.summary()}")
    return tally


def watch_and_sync(source, target, *, recursive, debounce, verbose=False):
    """Watch *source* and sync it into *target* on every change batch."""
    wf = _require_watchfiles()

    # Initial sync to catch up with any pending changes
    click.echo(f"Watching {source} -> {target} (debounce {debounce}ms)")
    try:
        _run_sync_cycle(source, target, recursive=recursive, verbose=verbose)
    except FsKitError as exc:
        click.echo(f"ERROR: Initial sync failed: {exc}", err=True)

    try:
        for _changes in wf.watch(source, debounce=debounce, recursive=recursive):
            try:
                _run_sync_cycle(source, target, recursive=recursive, verbose=verbose)
            except FsKitError as exc:
                click.echo(f"ERROR: Sync failed: {exc}", err=True)
    except KeyboardInterrupt:
        click.echo("\nStopped watching.")
