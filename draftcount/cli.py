"""Draftcount CLI.

Re-exports the CLI from draftcount.interfaces.cli so ``python -m
draftcount.cli`` and the ``draftcount`` entry point share one app.
"""

from draftcount.interfaces.cli import app
from draftcount.interfaces.cli.main import main

__all__ = ["app", "main"]

if __name__ == "__main__":
    main()
