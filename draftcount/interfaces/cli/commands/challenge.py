"""Challenge CLI commands.

Goal selection and the bonus commands.
"""

from draftcount.interfaces.cli.common import ProjectOption, run_command


def start_challenge(project: ProjectOption = None) -> None:
    """Choose a preset daily goal or enter a custom one.

    Example:
        draftcount start-challenge
    """
    run_command("start-challenge", project)


def add_revision_time(project: ProjectOption = None) -> None:
    """Credit 1,000 characters for revision time (needs a goal of 3,000+)."""
    run_command("add-revision-time", project)


def add_citation(project: ProjectOption = None) -> None:
    """Credit 50 characters for a citation (needs a goal of 2,000+)."""
    run_command("add-citation", project)
