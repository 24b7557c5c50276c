"""Challenge domain package.

Goal presets, custom-goal validation, goal-crossing detection and the
bonus/correction rules.
"""

from draftcount.domain.challenge.events import BonusGranted, ChallengeStarted, GoalReached
from draftcount.domain.challenge.policy import (
    apply_daily_increment,
    correct_count,
    grant_bonus,
    parse_correction,
    parse_custom_goal,
    reset_all,
    reset_today,
    set_paused,
    start_challenge,
)
from draftcount.domain.challenge.presets import (
    CITATION,
    CUSTOM_CHALLENGE_NAME,
    CUSTOM_GOAL_LABEL,
    PRESETS,
    REVISION_TIME,
    Bonus,
    ChallengePreset,
    challenge_options,
    find_preset,
)

__all__ = [
    # Presets
    "PRESETS",
    "CUSTOM_GOAL_LABEL",
    "CUSTOM_CHALLENGE_NAME",
    "ChallengePreset",
    "challenge_options",
    "find_preset",
    # Bonuses
    "Bonus",
    "REVISION_TIME",
    "CITATION",
    # Policy
    "apply_daily_increment",
    "correct_count",
    "grant_bonus",
    "parse_correction",
    "parse_custom_goal",
    "reset_all",
    "reset_today",
    "set_paused",
    "start_challenge",
    # Events
    "BonusGranted",
    "ChallengeStarted",
    "GoalReached",
]
