"""Entry point for the Draftcount CLI.

Usage:
    python -m draftcount.interfaces.cli.main

Or via installed entry point:
    draftcount <command>
"""

from draftcount.interfaces.cli import app


def main() -> None:
    """Run the Draftcount CLI application."""
    app()


if __name__ == "__main__":
    main()
