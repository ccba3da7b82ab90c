from dataclasses import dataclass

from skillcraft.domain.common.entity import Entity
from skillcraft.domain.skill.value_objects.ids import MisconceptionId


@dataclass
class Misconception(Entity[MisconceptionId]):
    """A recorded incorrect-understanding pattern learners show for a skill."""

    id: MisconceptionId
    name: str
    notes: str
    feedback: str
    must_be_addressed: bool

    def set_name(self, name: str) -> None:
        self.name = name

    def set_notes(self, notes: str) -> None:
        self.notes = notes

    def set_feedback(self, feedback: str) -> None:
        self.feedback = feedback

    def set_must_be_addressed(self, must_be_addressed: bool) -> None:
        self.must_be_addressed = must_be_addressed

    def to_backend_dict(self) -> dict[str, object]:
        return {
            "id": self.id.to_primitive(),
            "name": self.name,
            "notes": self.notes,
            "feedback": self.feedback,
            "must_be_addressed": self.must_be_addressed,
        }
