"""Challenge presets and bonus definitions."""

from pydantic import BaseModel, Field

CUSTOM_GOAL_LABEL = "Custom goal..."
CUSTOM_CHALLENGE_NAME = "Custom"


class ChallengePreset(BaseModel):
    """A named daily goal offered by start-challenge."""

    name: str
    goal: int = Field(gt=0)

    @property
    def label(self) -> str:
        return f"{self.name} ({self.goal:,} chars/day)"


class Bonus(BaseModel):
    """A fixed credit granted by a bonus command, gated on the active goal."""

    name: str
    amount: int = Field(gt=0)
    min_goal: int = Field(gt=0)


PRESETS: list[ChallengePreset] = [
    ChallengePreset(name="Warm-up", goal=500),
    ChallengePreset(name="Steady Writer", goal=1000),
    ChallengePreset(name="Chapter Sprint", goal=2000),
    ChallengePreset(name="Deep Work", goal=3000),
    ChallengePreset(name="Marathon", goal=5000),
]

REVISION_TIME = Bonus(name="revision time", amount=1000, min_goal=3000)
CITATION = Bonus(name="citation", amount=50, min_goal=2000)


def challenge_options() -> list[str]:
    """Labels shown in the challenge picker, presets first, custom last."""
    return [preset.label for preset in PRESETS] + [CUSTOM_GOAL_LABEL]


def find_preset(label: str) -> ChallengePreset | None:
    """Find the preset behind a picker label."""
    for preset in PRESETS:
        if preset.label == label:
            return preset
    return None
