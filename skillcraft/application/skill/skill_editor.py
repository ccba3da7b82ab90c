"""Single-writer access to a Skill aggregate."""

import threading
from collections.abc import Iterable
from typing import Any

import structlog

from skillcraft.application.common.command import Command, CommandHandler
from skillcraft.application.common.result import Failure, Result, Success
from skillcraft.application.skill.commands import (
    AddMisconceptionCommand,
    AddMisconceptionHandler,
    DeleteMisconceptionCommand,
    DeleteMisconceptionHandler,
    UpdateDescriptionCommand,
    UpdateDescriptionHandler,
    UpdateRubricCommand,
    UpdateRubricHandler,
)
from skillcraft.domain.common.domain_event import DomainEvent
from skillcraft.domain.common.exceptions import DomainError
from skillcraft.domain.skill.entities.skill import Skill
from skillcraft.infrastructure.skill.factories.misconception_factory import MisconceptionFactory

logger = structlog.get_logger(__name__)


class SkillEditor:
    """
    Applies edit commands to one skill, one at a time.

    Skill itself is not thread-safe. Every read and write that goes through
    the editor holds its lock, so several edit sessions can share a skill.
    A command rejected by the domain leaves the skill unchanged and comes
    back as a Failure carrying the error message.
    """

    def __init__(
        self, skill: Skill, misconception_factory: MisconceptionFactory | None = None
    ) -> None:
        self._skill = skill
        self._lock = threading.RLock()
        self._handlers: dict[type[Command], CommandHandler[Any, Any]] = {
            AddMisconceptionCommand: AddMisconceptionHandler(
                skill, misconception_factory or MisconceptionFactory()
            ),
            DeleteMisconceptionCommand: DeleteMisconceptionHandler(skill),
            UpdateRubricCommand: UpdateRubricHandler(skill),
            UpdateDescriptionCommand: UpdateDescriptionHandler(skill),
        }

    @property
    def skill(self) -> Skill:
        return self._skill

    def apply(self, command: Command) -> Result[Any, str]:
        """
        Apply a single command.

        Raises:
            TypeError: If no handler is registered for the command type
        """
        handler = self._handlers.get(type(command))
        if handler is None:
            raise TypeError(f"No handler registered for {type(command).__name__}")

        command_name = type(command).__name__
        with self._lock:
            try:
                value = handler.handle(command)
            except DomainError as e:
                logger.warning(
                    "skill_edit_rejected",
                    skill_id=self._skill_id(),
                    command=command_name,
                    error=e.message,
                )
                return Failure(e.message)

        logger.info("skill_edited", skill_id=self._skill_id(), command=command_name)
        return Success(value)

    def apply_all(self, commands: Iterable[Command]) -> list[Result[Any, str]]:
        """Apply commands in order without interleaving, stopping at the first failure."""
        results: list[Result[Any, str]] = []
        with self._lock:
            for command in commands:
                result = self.apply(command)
                results.append(result)
                if result.is_failure:
                    break
        return results

    def reload(self, saved_skill: Skill) -> None:
        """Replace the edited state with a freshly loaded copy of the skill."""
        with self._lock:
            self._skill.copy_from_skill(saved_skill)
        logger.info("skill_reloaded", skill_id=self._skill_id(), version=saved_skill.version)

    def get_validation_issues(self) -> list[str]:
        with self._lock:
            return self._skill.get_validation_issues()

    def to_backend_dict(self) -> dict[str, object]:
        with self._lock:
            return self._skill.to_backend_dict()

    def collect_events(self) -> list[DomainEvent]:
        with self._lock:
            return self._skill.collect_events()

    def _skill_id(self) -> str | None:
        return str(self._skill.id) if self._skill.id is not None else None
