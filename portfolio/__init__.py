"""Portfolio site package entry.

This lightweight package provides a stable module entrypoint (python -m portfolio)
while keeping the top-level packages (app/, services/, domain/, etc.) intact.
"""

from portfolio.version import __version__  # single source of truth

__all__ = ["__version__"]
