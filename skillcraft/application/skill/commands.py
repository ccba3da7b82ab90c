"""Edit commands for a skill, and their handlers."""

from dataclasses import dataclass

from skillcraft.application.common.command import Command, CommandHandler
from skillcraft.domain.skill.entities.misconception import Misconception
from skillcraft.domain.skill.entities.skill import Skill
from skillcraft.infrastructure.skill.factories.misconception_factory import MisconceptionFactory


@dataclass(frozen=True)
class AddMisconceptionCommand(Command):
    name: str
    notes: str
    feedback: str
    must_be_addressed: bool = True


@dataclass(frozen=True)
class DeleteMisconceptionCommand(Command):
    misconception_id: str | int


@dataclass(frozen=True)
class UpdateRubricCommand(Command):
    difficulty: str
    explanation: str


@dataclass(frozen=True)
class UpdateDescriptionCommand(Command):
    description: str


class AddMisconceptionHandler(CommandHandler[AddMisconceptionCommand, Misconception]):
    """Mints a misconception with the skill's next id and appends it."""

    def __init__(self, skill: Skill, misconception_factory: MisconceptionFactory) -> None:
        self._skill = skill
        self._misconception_factory = misconception_factory

    def handle(self, command: AddMisconceptionCommand) -> Misconception:
        misconception = self._misconception_factory.create(
            misconception_id=self._skill.get_next_misconception_id(),
            name=command.name,
            notes=command.notes,
            feedback=command.feedback,
            must_be_addressed=command.must_be_addressed,
        )
        self._skill.append_misconception(misconception)
        return misconception


class DeleteMisconceptionHandler(CommandHandler[DeleteMisconceptionCommand, bool]):
    """Returns whether a misconception was actually removed."""

    def __init__(self, skill: Skill) -> None:
        self._skill = skill

    def handle(self, command: DeleteMisconceptionCommand) -> bool:
        existed = self._skill.find_misconception_by_id(command.misconception_id) is not None
        self._skill.delete_misconception(command.misconception_id)
        return existed


class UpdateRubricHandler(CommandHandler[UpdateRubricCommand, None]):
    def __init__(self, skill: Skill) -> None:
        self._skill = skill

    def handle(self, command: UpdateRubricCommand) -> None:
        self._skill.update_rubric_for_difficulty(command.difficulty, command.explanation)


class UpdateDescriptionHandler(CommandHandler[UpdateDescriptionCommand, None]):
    def __init__(self, skill: Skill) -> None:
        self._skill = skill

    def handle(self, command: UpdateDescriptionCommand) -> None:
        self._skill.set_description(command.description)
