"""
Base class for Entities.

Entities are objects that have a distinct identity that runs through time
and different states.

Example:
    @dataclass
    class Misconception(Entity[MisconceptionId]):
        id: MisconceptionId
        name: str

        def set_name(self, name: str) -> None:
            self.name = name
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, TypeVar

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    Entity IDs are value objects wrapping the string identifier used in the
    persisted representation. They provide type safety to prevent mixing up
    IDs of different entities.

    Example:
        @dataclass(frozen=True)
        class SkillId(EntityId):
            pass

        skill_id = SkillId("skill_1")
        misconception_id = MisconceptionId("1")
        # These are different types, preventing accidental mixing
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise ValueError(f"{self.__class__.__name__} must be a non-empty string")

    def __str__(self) -> str:
        return self.value

    def to_primitive(self) -> str:
        """Convert to primitive for serialization."""
        return self.value


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Entities are:
    - Defined by identity
    - Mutable (state can change over time)
    - Have lifecycle (created, modified, deleted)

    Subclasses must have an 'id' attribute of type IdType.
    """

    id: IdType
