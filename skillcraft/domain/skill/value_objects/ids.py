import re
from dataclasses import dataclass

from skillcraft.domain.common.entity import EntityId
from skillcraft.domain.skill.constants import MISCONCEPTION_ID_PATTERN


def _is_canonical_decimal(value: str) -> bool:
    return re.fullmatch(MISCONCEPTION_ID_PATTERN, value) is not None


@dataclass(frozen=True)
class SkillId(EntityId):
    """Strongly-typed skill identifier."""

    value: str


@dataclass(frozen=True)
class MisconceptionId(EntityId):
    """
    Strongly-typed misconception identifier.

    Misconception ids are string-encoded non-negative integers in canonical
    form ("7", never "07"), unique within their skill and never reused.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not _is_canonical_decimal(self.value):
            raise ValueError("MisconceptionId must be a canonical non-negative integer string")

    def __int__(self) -> int:
        return int(self.value)

    @classmethod
    def from_value(cls, value: "str | int | MisconceptionId") -> "MisconceptionId":
        """Normalize an int, a string or an existing id to the canonical id."""
        if isinstance(value, MisconceptionId):
            return value
        if isinstance(value, bool):
            raise ValueError("MisconceptionId cannot be a boolean")
        if isinstance(value, int):
            if value < 0:
                raise ValueError("MisconceptionId must be non-negative")
            return cls(str(value))
        return cls(value)

    def next(self) -> "MisconceptionId":
        """Return the id immediately following this one."""
        return MisconceptionId(str(int(self) + 1))
