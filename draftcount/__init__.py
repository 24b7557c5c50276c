"""Draftcount - daily writing-progress tracking for local projects."""

__version__ = "0.1.0"
