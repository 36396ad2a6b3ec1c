"""Public package surface for dirview.

Exports ``main`` for programmatic CLI invocation.
Most implementation lives in submodules under ``dirview``.
"""

from __future__ import annotations

__version__ = "0.1.0"


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["__version__", "main"]
