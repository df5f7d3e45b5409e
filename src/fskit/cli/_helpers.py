"""Shared helpers, option decorators, and the main CLI group."""

from __future__ import annotations

import logging
import re
from contextlib import contextmanager

import click

from ..exceptions import FsKitError


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _status(ctx, msg):
    """Emit a status message to stderr when verbose mode (-v) is on."""
    if ctx.obj.get("verbose"):
        click.echo(msg, err=True)


@contextmanager
def _fskit_errors():
    """Turn library errors into a one-line CLI error (exit status 1)."""
    try:
        yield
    except FsKitError as exc:
        raise click.ClickException(str(exc))


_SIZE_RE = re.compile(r"^\s*(\d+)\s*([kmg]?)i?b?\s*$", re.IGNORECASE)
_SIZE_UNITS = {"": 1, "k": 1024, "m": 1024 ** 2, "g": 1024 ** 3}


class SizeParamType(click.ParamType):
    """A byte count with an optional ``K``/``M``/``G`` suffix (powers of 1024)."""
    name = "size"

    def convert(self, value, param, ctx):
        if isinstance(value, int):
            return value
        m = _SIZE_RE.match(str(value))
        if not m:
            self.fail(f"Invalid size: {value} (use e.g. 512K, 1M, 1048576)", param, ctx)
        size = int(m.group(1)) * _SIZE_UNITS[m.group(2).lower()]
        if size <= 0:
            self.fail(f"Size must be positive: {value}", param, ctx)
        return size


SIZE = SizeParamType()


def _recursive_option(f):
    """Shared -R/--recursive flag."""
    return click.option(
        "-R", "--recursive", is_flag=True, default=False,
        help="Descend into subdirectories.",
    )(f)


def _sort_option(f):
    """Shared --sort flag for listing commands."""
    return click.option(
        "--sort", "sort", is_flag=True, default=False,
        help="Sort entries by name (default: filesystem order).",
    )(f)


def _format_option(f):
    """Shared --format option."""
    return click.option(
        "--format", "fmt", type=click.Choice(["text", "json"]), default="text",
        help="Output format (default: text).",
    )(f)


# ---------------------------------------------------------------------------
# Main group
# ---------------------------------------------------------------------------

@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose output on stderr.")
@click.option("--debug", is_flag=True, help="Show library debug logging on stderr.")
@click.pass_context
def main(ctx, verbose, debug):
    """fskit — a small filesystem toolkit.

    \b
    Quick start:
      fskit ls -R ./photos
      fskit find -R ./docs '*.md'
      fskit split big.iso -s 100M
      fskit sync -R ./src ./backup

    \b
    Commands:
      ls / find / info   Explore directories and files
      split / join       Cut a file into parts and put it back together
      sync               Mirror a directory into another (no deletes)
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )
