"""fskit command line: ls/find/info, split/join, and sync [--watch].

Commands live in one module per area and attach themselves to the
``main`` group from ``_helpers`` when imported here.
"""

from ._helpers import main  # noqa: F401

from . import _basic, _split, _sync  # noqa: F401
