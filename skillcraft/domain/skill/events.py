"""Domain events recorded by the Skill aggregate."""

from dataclasses import dataclass

from skillcraft.domain.common.domain_event import DomainEvent
from skillcraft.domain.skill.value_objects.ids import MisconceptionId, SkillId


@dataclass(frozen=True, kw_only=True)
class MisconceptionAdded(DomainEvent):
    skill_id: SkillId | None
    misconception_id: MisconceptionId


@dataclass(frozen=True, kw_only=True)
class MisconceptionDeleted(DomainEvent):
    skill_id: SkillId | None
    misconception_id: MisconceptionId


@dataclass(frozen=True, kw_only=True)
class RubricUpdated(DomainEvent):
    skill_id: SkillId | None
    difficulty: str
    created: bool


@dataclass(frozen=True, kw_only=True)
class SkillDescriptionUpdated(DomainEvent):
    skill_id: SkillId | None
    description: str
