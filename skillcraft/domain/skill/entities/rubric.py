from dataclasses import dataclass

from skillcraft.domain.skill.constants import SKILL_DIFFICULTIES
from skillcraft.domain.skill.exceptions import InvalidArgumentError


@dataclass
class Rubric:
    """What mastery of a skill looks like at one difficulty level."""

    difficulty: str
    explanation: str

    def __post_init__(self) -> None:
        if self.difficulty not in SKILL_DIFFICULTIES:
            raise InvalidArgumentError(
                "Invalid difficulty value passed", field="difficulty", value=self.difficulty
            )

    def set_explanation(self, explanation: str) -> None:
        self.explanation = explanation

    def to_backend_dict(self) -> dict[str, str]:
        return {"difficulty": self.difficulty, "explanation": self.explanation}
