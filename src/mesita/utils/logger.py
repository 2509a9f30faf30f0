"""Namespaced loggers for Mesita.

Every module logs under the ``mesita`` logger so an editor host can turn
table diagnostics on with a single call::

    logging.getLogger("mesita").setLevel(logging.DEBUG)

Records are emitted at DEBUG only: delimiter rows inserted by
complete_table, edits that were soft no-ops and reformat summaries. No
handlers are attached here; where records go is up to the host.
"""

from __future__ import annotations

import logging

_ROOT = "mesita"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module, nested under ``mesita``.

    Args:
        name: Module name, usually ``__name__``. Names outside the package
            are nested under it, so ``"editor"`` becomes ``"mesita.editor"``.

    Example:
        >>> get_logger("mesita.formatter").name
        'mesita.formatter'
    """
    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
