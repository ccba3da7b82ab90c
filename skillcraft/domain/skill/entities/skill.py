"""
Skill aggregate root.
"""

import copy
from dataclasses import dataclass, field

from skillcraft.domain.common.aggregate_root import AggregateRoot
from skillcraft.domain.common.exceptions import DomainError, InvariantViolationError
from skillcraft.domain.skill.constants import (
    INTERSTITIAL_LANGUAGE_CODE,
    INTERSTITIAL_NEXT_MISCONCEPTION_ID,
    INTERSTITIAL_SKILL_DESCRIPTION,
    INTERSTITIAL_SKILL_VERSION,
    SKILL_DIFFICULTIES,
)
from skillcraft.domain.skill.entities.concept_card import ConceptCard
from skillcraft.domain.skill.entities.misconception import Misconception
from skillcraft.domain.skill.entities.rubric import Rubric
from skillcraft.domain.skill.events import (
    MisconceptionAdded,
    MisconceptionDeleted,
    RubricUpdated,
    SkillDescriptionUpdated,
)
from skillcraft.domain.skill.exceptions import (
    DuplicateMisconceptionError,
    InvalidArgumentError,
    MisconceptionIdReuseError,
)
from skillcraft.domain.skill.value_objects.ids import MisconceptionId, SkillId

RUBRIC_COVERAGE_ISSUE = (
    f"All {len(SKILL_DIFFICULTIES)} difficulties "
    f"({', '.join(SKILL_DIFFICULTIES[:-1])} and {SKILL_DIFFICULTIES[-1]}) "
    "should be addressed in rubrics."
)
EMPTY_DESCRIPTION_ISSUE = "Skill description should not be empty."


def _normalize_misconception_id(misconception_id: str | int | MisconceptionId) -> str:
    if isinstance(misconception_id, MisconceptionId):
        return misconception_id.value
    value = str(misconception_id)
    if value.isascii() and value.isdecimal():
        # "07" and 7 both name misconception "7"
        return str(int(value))
    return value


@dataclass
class Skill(AggregateRoot[SkillId]):
    """
    Skill aggregate root.

    A unit of learnable material: its description, the misconceptions
    learners commonly hold about it, a rubric per difficulty, and the
    concept card that teaches it.

    Business Rules:
    - Misconception ids are unique and never reused, even after deletion
    - The next misconception id is always greater than every id ever assigned
    - At most one rubric per difficulty; only Easy, Medium and Hard exist
    - Collections are exposed read-only; change them through the methods below
    - Quality problems are reported by get_validation_issues, not raised
    """

    # Identity (None for the interstitial placeholder)
    id: SkillId | None

    # Content
    description: str
    _misconceptions: list[Misconception]
    _rubrics: list[Rubric]
    concept_card: ConceptCard
    language_code: str

    # Versioning, managed by the persistence layer
    version: int
    _next_misconception_id: MisconceptionId

    # Merge and dependency metadata
    superseding_skill_id: str | None = None
    all_questions_merged: bool = False
    _prerequisite_skill_ids: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.version < 1:
            raise DomainError("Skill version must be positive")

        ids = [m.id for m in self._misconceptions]
        if len(ids) != len(set(ids)):
            raise InvariantViolationError("Skill", "misconception ids must be unique")

        difficulties = [r.difficulty for r in self._rubrics]
        if len(difficulties) != len(set(difficulties)):
            raise InvariantViolationError("Skill", "at most one rubric per difficulty")

    @property
    def misconceptions(self) -> tuple[Misconception, ...]:
        return tuple(self._misconceptions)

    @property
    def rubrics(self) -> tuple[Rubric, ...]:
        return tuple(self._rubrics)

    @property
    def prerequisite_skill_ids(self) -> tuple[str, ...]:
        return tuple(self._prerequisite_skill_ids)

    @property
    def next_misconception_id(self) -> str:
        return self._next_misconception_id.value

    # Misconceptions

    def get_next_misconception_id(self) -> str:
        """Id to use for the next misconception minted for this skill."""
        return self._next_misconception_id.value

    def get_incremented_misconception_id(
        self, misconception_id: str | int | MisconceptionId
    ) -> str:
        return MisconceptionId.from_value(misconception_id).next().value

    def get_misconception_at_index(self, index: int) -> Misconception:
        return self._misconceptions[index]

    def find_misconception_by_id(
        self, misconception_id: str | int | MisconceptionId
    ) -> Misconception | None:
        target = _normalize_misconception_id(misconception_id)
        for misconception in self._misconceptions:
            if misconception.id.value == target:
                return misconception
        return None

    def append_misconception(self, misconception: Misconception) -> None:
        """
        Append a misconception and move the id counter past its id.

        Raises:
            DuplicateMisconceptionError: If a misconception with that id exists
            MisconceptionIdReuseError: If the id is below the next misconception id
        """
        if self.find_misconception_by_id(misconception.id) is not None:
            raise DuplicateMisconceptionError(misconception.id.value)
        if int(misconception.id) < int(self._next_misconception_id):
            raise MisconceptionIdReuseError(
                misconception.id.value, self._next_misconception_id.value
            )

        self._misconceptions.append(misconception)
        self._next_misconception_id = misconception.id.next()
        self._record_event(MisconceptionAdded(skill_id=self.id, misconception_id=misconception.id))

    def delete_misconception(self, misconception_id: str | int | MisconceptionId) -> None:
        """Remove the misconception with this id; unknown ids are ignored."""
        target = _normalize_misconception_id(misconception_id)
        remaining = [m for m in self._misconceptions if m.id.value != target]
        if len(remaining) == len(self._misconceptions):
            return
        self._misconceptions = remaining
        self._record_event(
            MisconceptionDeleted(skill_id=self.id, misconception_id=MisconceptionId(target))
        )

    # Rubrics

    def get_rubric_for_difficulty(self, difficulty: str) -> Rubric | None:
        for rubric in self._rubrics:
            if rubric.difficulty == difficulty:
                return rubric
        return None

    def update_rubric_for_difficulty(self, difficulty: str, explanation: str) -> None:
        """
        Set the rubric explanation for a difficulty.

        An existing rubric keeps its position; otherwise a new one is appended.

        Raises:
            InvalidArgumentError: If difficulty is not Easy, Medium or Hard
        """
        if difficulty not in SKILL_DIFFICULTIES:
            raise InvalidArgumentError(
                "Invalid difficulty value passed", field="difficulty", value=difficulty
            )

        rubric = self.get_rubric_for_difficulty(difficulty)
        if rubric is not None:
            rubric.set_explanation(explanation)
        else:
            self._rubrics.append(Rubric(difficulty=difficulty, explanation=explanation))
        self._record_event(
            RubricUpdated(skill_id=self.id, difficulty=difficulty, created=rubric is None)
        )

    # Other edits

    def set_description(self, description: str) -> None:
        self.description = description
        self._record_event(SkillDescriptionUpdated(skill_id=self.id, description=description))

    def copy_from_skill(self, other: "Skill") -> None:
        """Overwrite this skill's state with a deep copy of another skill's state."""
        self.id = other.id
        self.description = other.description
        self._misconceptions = copy.deepcopy(other._misconceptions)
        self._rubrics = copy.deepcopy(other._rubrics)
        self.concept_card = copy.deepcopy(other.concept_card)
        self.language_code = other.language_code
        self.version = other.version
        self._next_misconception_id = other._next_misconception_id
        self.superseding_skill_id = other.superseding_skill_id
        self.all_questions_merged = other.all_questions_merged
        self._prerequisite_skill_ids = list(other._prerequisite_skill_ids)

    # Validation

    def get_validation_issues(self) -> list[str]:
        """
        Content-quality problems that block publishing.

        Concept card issues come first, then rubric coverage, then the
        remaining skill-level checks. An empty list means the skill is valid.
        """
        issues = self.concept_card.get_validation_issues()
        if {r.difficulty for r in self._rubrics} != set(SKILL_DIFFICULTIES):
            issues.append(RUBRIC_COVERAGE_ISSUE)
        if not self.description.strip():
            issues.append(EMPTY_DESCRIPTION_ISSUE)
        return issues

    # Serialization

    def to_backend_dict(self) -> dict[str, object]:
        return {
            "id": self.id.to_primitive() if self.id is not None else None,
            "description": self.description,
            "misconceptions": [m.to_backend_dict() for m in self._misconceptions],
            "rubrics": [r.to_backend_dict() for r in self._rubrics],
            "skill_contents": self.concept_card.to_backend_dict(),
            "language_code": self.language_code,
            "version": self.version,
            "next_misconception_id": self._next_misconception_id.to_primitive(),
            "superseding_skill_id": self.superseding_skill_id,
            "all_questions_merged": self.all_questions_merged,
            "prerequisite_skill_ids": list(self._prerequisite_skill_ids),
        }

    # Factory methods

    @classmethod
    def create_with_id(
        cls,
        id: SkillId | None,
        description: str,
        misconceptions: list[Misconception],
        rubrics: list[Rubric],
        concept_card: ConceptCard,
        language_code: str,
        version: int,
        next_misconception_id: MisconceptionId,
        superseding_skill_id: str | None,
        all_questions_merged: bool,
        prerequisite_skill_ids: list[str],
    ) -> "Skill":
        """Reconstitute a skill from persistence."""
        return cls(
            id=id,
            description=description,
            _misconceptions=list(misconceptions),
            _rubrics=list(rubrics),
            concept_card=concept_card,
            language_code=language_code,
            version=version,
            _next_misconception_id=next_misconception_id,
            superseding_skill_id=superseding_skill_id,
            all_questions_merged=all_questions_merged,
            _prerequisite_skill_ids=list(prerequisite_skill_ids),
        )

    @classmethod
    def create_interstitial(cls) -> "Skill":
        """Placeholder skill shown while the real one is loading."""
        return cls(
            id=None,
            description=INTERSTITIAL_SKILL_DESCRIPTION,
            _misconceptions=[],
            _rubrics=[],
            concept_card=ConceptCard.create_interstitial(),
            language_code=INTERSTITIAL_LANGUAGE_CODE,
            version=INTERSTITIAL_SKILL_VERSION,
            _next_misconception_id=MisconceptionId(INTERSTITIAL_NEXT_MISCONCEPTION_ID),
            superseding_skill_id=None,
            all_questions_merged=False,
            _prerequisite_skill_ids=[],
        )
