"""Factory for Misconception entities."""

from skillcraft.domain.skill.entities.misconception import Misconception
from skillcraft.domain.skill.value_objects.ids import MisconceptionId
from skillcraft.infrastructure.skill.schemas.skill_schemas import (
    MisconceptionSchema,
    parse_backend_dict,
)


class MisconceptionFactory:
    """Builds Misconception entities from backend dicts or editor input."""

    def create_from_backend_dict(self, backend_dict: object) -> Misconception:
        schema = parse_backend_dict(MisconceptionSchema, backend_dict, "Misconception")
        return self.to_domain(schema)

    def to_domain(self, schema: MisconceptionSchema) -> Misconception:
        return Misconception(
            id=MisconceptionId(schema.id),
            name=schema.name,
            notes=schema.notes,
            feedback=schema.feedback,
            must_be_addressed=schema.must_be_addressed,
        )

    def create(
        self,
        misconception_id: str | int,
        name: str,
        notes: str,
        feedback: str,
        must_be_addressed: bool,
    ) -> Misconception:
        """Create a new misconception, typically with the skill's next id."""
        return Misconception(
            id=MisconceptionId.from_value(misconception_id),
            name=name,
            notes=notes,
            feedback=feedback,
            must_be_addressed=must_be_addressed,
        )
