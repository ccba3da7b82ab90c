"""Factory for the Skill aggregate."""

import structlog

from skillcraft.domain.skill.entities.skill import Skill
from skillcraft.domain.skill.exceptions import MalformedInputError
from skillcraft.domain.skill.value_objects.ids import MisconceptionId, SkillId
from skillcraft.infrastructure.skill.factories.concept_card_factory import ConceptCardFactory
from skillcraft.infrastructure.skill.factories.misconception_factory import MisconceptionFactory
from skillcraft.infrastructure.skill.factories.rubric_factory import RubricFactory
from skillcraft.infrastructure.skill.schemas.skill_schemas import SkillSchema, parse_backend_dict

logger = structlog.get_logger(__name__)


class SkillFactory:
    """Builds Skill aggregates from backend dicts, or placeholders while loading."""

    def __init__(
        self,
        concept_card_factory: ConceptCardFactory | None = None,
        misconception_factory: MisconceptionFactory | None = None,
        rubric_factory: RubricFactory | None = None,
    ) -> None:
        self.concept_card_factory = concept_card_factory or ConceptCardFactory()
        self.misconception_factory = misconception_factory or MisconceptionFactory()
        self.rubric_factory = rubric_factory or RubricFactory()

    def create_from_backend_dict(self, backend_dict: object) -> Skill:
        """
        Hydrate a skill from its persisted dict.

        The dict's next_misconception_id is trusted as-is.

        Args:
            backend_dict: Skill dict as stored by the backend

        Returns:
            Skill aggregate whose to_backend_dict() equals the input

        Raises:
            MalformedInputError: If a field is missing, unknown or mistyped
        """
        try:
            schema = parse_backend_dict(SkillSchema, backend_dict, "Skill")
        except MalformedInputError as e:
            logger.warning("malformed_skill_dict", errors=e.errors)
            raise

        skill = self.to_domain(schema)
        logger.debug(
            "skill_hydrated",
            skill_id=schema.id,
            version=schema.version,
            misconceptions=len(schema.misconceptions),
            rubrics=len(schema.rubrics),
        )
        return skill

    def to_domain(self, schema: SkillSchema) -> Skill:
        return Skill.create_with_id(
            id=SkillId(schema.id) if schema.id is not None else None,
            description=schema.description,
            misconceptions=[self.misconception_factory.to_domain(m) for m in schema.misconceptions],
            rubrics=[self.rubric_factory.to_domain(r) for r in schema.rubrics],
            concept_card=self.concept_card_factory.to_domain(schema.skill_contents),
            language_code=schema.language_code,
            version=schema.version,
            next_misconception_id=MisconceptionId(schema.next_misconception_id),
            superseding_skill_id=schema.superseding_skill_id,
            all_questions_merged=schema.all_questions_merged,
            prerequisite_skill_ids=schema.prerequisite_skill_ids,
        )

    def create_interstitial_skill(self) -> Skill:
        """Placeholder skill with no id, shown while the real skill loads."""
        return Skill.create_interstitial()
