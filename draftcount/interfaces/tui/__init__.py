"""Textual editor for Draftcount.

Launched by ``draftcount write FILE``.
"""

from draftcount.interfaces.tui.app import DraftApp, TuiNotifier, TuiPrompter

__all__ = ["DraftApp", "TuiNotifier", "TuiPrompter"]
