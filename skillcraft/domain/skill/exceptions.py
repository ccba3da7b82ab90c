"""Skill module domain exceptions."""

from skillcraft.domain.common.exceptions import InvariantViolationError, ValidationError


class MalformedInputError(ValidationError):
    """Raised when a backend dict cannot be turned into a domain object."""

    def __init__(self, entity_type: str, errors: list[str]) -> None:
        super().__init__(f"Malformed {entity_type} backend dict")
        self.details["errors"] = errors
        self.entity_type = entity_type
        self.errors = errors


class InvalidArgumentError(ValidationError):
    """Raised when an operation receives an argument outside its domain."""


class DuplicateMisconceptionError(InvariantViolationError):
    """Raised when appending a misconception whose id is already used."""

    def __init__(self, misconception_id: str) -> None:
        super().__init__("Skill", f"misconception id {misconception_id} is already in use")
        self.misconception_id = misconception_id


class MisconceptionIdReuseError(InvariantViolationError):
    """Raised when appending a misconception whose id was handed out before."""

    def __init__(self, misconception_id: str, next_misconception_id: str) -> None:
        super().__init__(
            "Skill",
            f"misconception id {misconception_id} was already issued "
            f"(next id is {next_misconception_id})",
        )
        self.misconception_id = misconception_id
        self.next_misconception_id = next_misconception_id
