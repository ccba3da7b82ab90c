"""Factory for Rubric entities."""

from skillcraft.domain.skill.entities.rubric import Rubric
from skillcraft.infrastructure.skill.schemas.skill_schemas import RubricSchema, parse_backend_dict


class RubricFactory:
    """Builds Rubric entities from backend dicts."""

    def create_from_backend_dict(self, backend_dict: object) -> Rubric:
        schema = parse_backend_dict(RubricSchema, backend_dict, "Rubric")
        return self.to_domain(schema)

    def to_domain(self, schema: RubricSchema) -> Rubric:
        return Rubric(difficulty=schema.difficulty, explanation=schema.explanation)

    def create(self, difficulty: str, explanation: str) -> Rubric:
        return Rubric(difficulty=difficulty, explanation=explanation)
