"""
Command and CommandHandler base classes.

Commands represent intentions to change the system state.
They are named in imperative form: AddMisconception, UpdateRubric, etc.

Example:
    @dataclass(frozen=True)
    class UpdateDescriptionCommand(Command):
        description: str

    class UpdateDescriptionHandler(CommandHandler[UpdateDescriptionCommand, None]):
        def __init__(self, skill: Skill) -> None:
            self._skill = skill

        def handle(self, command: UpdateDescriptionCommand) -> None:
            self._skill.set_description(command.description)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar

# Input type (the command)
TCommand = TypeVar("TCommand", bound="Command")
# Output type (the result of handling the command)
TResult = TypeVar("TResult")


@dataclass(frozen=True)
class Command:
    """
    Base class for Commands.

    Commands are:
    - Immutable (frozen dataclass)
    - Named in imperative form (AddMisconception, not MisconceptionAddition)
    - Carry all data needed to execute the operation
    - Represent intentions, not facts
    """


class CommandHandler(ABC, Generic[TCommand, TResult]):
    """
    Base class for Command Handlers.

    Command Handlers:
    - Execute a single command type
    - Orchestrate domain logic
    - Return the result of the operation

    Each command should have exactly one handler.
    """

    @abstractmethod
    def handle(self, command: TCommand) -> TResult:
        """
        Handle the command and return the result.

        Raises:
            DomainError: When business rules are violated
        """
        raise NotImplementedError
