"""Console-script entry point for ``fskit``.

The library has no third-party dependencies; only the command line
needs click, which ships with the ``cli`` extra.  Checking for click up
front keeps a missing extra from surfacing as an import traceback.
"""

import sys

_MISSING_CLICK = (
    "fskit: the command-line tool needs click.\n"
    "Install it with:  pip install 'fskit[cli]'\n"
    "(use 'fskit[watch]' to also enable 'fskit sync --watch')"
)


def main(argv=None):
    try:
        import click  # noqa: F401
    except ImportError:
        print(_MISSING_CLICK, file=sys.stderr)
        raise SystemExit(1)
    from .cli import main as cli_main
    cli_main(args=argv, prog_name="fskit")
