"""Pydantic schemas for the persisted (backend) skill dict shapes."""

from typing import Annotated, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    field_validator,
    model_validator,
)
from pydantic import ValidationError as PydanticValidationError

from skillcraft.domain.skill.constants import MISCONCEPTION_ID_PATTERN, SKILL_DIFFICULTIES
from skillcraft.domain.skill.exceptions import MalformedInputError

MisconceptionIdStr = Annotated[StrictStr, Field(pattern=MISCONCEPTION_ID_PATTERN)]
NonEmptyStr = Annotated[StrictStr, Field(min_length=1)]


class BackendDictSchema(BaseModel):
    """Base schema: unknown keys are rejected so serialization can round-trip."""

    model_config = ConfigDict(extra="forbid")


class SubtitledHtmlSchema(BackendDictSchema):
    html: StrictStr
    content_id: StrictStr = Field(..., min_length=1)


class VoiceoverSchema(BackendDictSchema):
    filename: StrictStr = Field(..., min_length=1)
    file_size_bytes: StrictInt = Field(..., ge=0)
    needs_update: StrictBool
    duration_secs: StrictFloat | StrictInt | None = None

    @field_validator("duration_secs")
    @classmethod
    def check_duration_not_null(cls, value: float | None) -> float | None:
        if value is None:
            raise ValueError("duration_secs may be omitted but not null")
        return value


class RecordedVoiceoversSchema(BackendDictSchema):
    voiceovers_mapping: dict[StrictStr, dict[StrictStr, VoiceoverSchema]]


class ConceptCardSchema(BackendDictSchema):
    """Schema for `skill_contents`."""

    explanation: SubtitledHtmlSchema
    worked_examples: list[SubtitledHtmlSchema]
    recorded_voiceovers: RecordedVoiceoversSchema

    @model_validator(mode="after")
    def check_unique_worked_examples(self) -> "ConceptCardSchema":
        content_ids = [example.content_id for example in self.worked_examples]
        if len(content_ids) != len(set(content_ids)):
            raise ValueError("worked examples must have distinct content ids")
        return self


class MisconceptionSchema(BackendDictSchema):
    id: MisconceptionIdStr
    name: StrictStr
    notes: StrictStr
    feedback: StrictStr
    must_be_addressed: StrictBool


class RubricSchema(BackendDictSchema):
    difficulty: StrictStr
    explanation: StrictStr

    @field_validator("difficulty")
    @classmethod
    def check_difficulty(cls, value: str) -> str:
        if value not in SKILL_DIFFICULTIES:
            msg = f"difficulty must be one of {', '.join(SKILL_DIFFICULTIES)}"
            raise ValueError(msg)
        return value


class SkillSchema(BackendDictSchema):
    id: NonEmptyStr | None
    description: StrictStr
    misconceptions: list[MisconceptionSchema]
    rubrics: list[RubricSchema]
    skill_contents: ConceptCardSchema
    language_code: StrictStr
    version: StrictInt = Field(..., ge=1)
    next_misconception_id: MisconceptionIdStr
    superseding_skill_id: StrictStr | None
    all_questions_merged: StrictBool
    prerequisite_skill_ids: list[StrictStr]

    @model_validator(mode="after")
    def check_unique_children(self) -> "SkillSchema":
        misconception_ids = [m.id for m in self.misconceptions]
        if len(misconception_ids) != len(set(misconception_ids)):
            raise ValueError("misconception ids must be unique")

        difficulties = [r.difficulty for r in self.rubrics]
        if len(difficulties) != len(set(difficulties)):
            raise ValueError("at most one rubric per difficulty")
        return self


SchemaType = TypeVar("SchemaType", bound=BackendDictSchema)


def parse_backend_dict(
    schema: type[SchemaType], backend_dict: object, entity_type: str
) -> SchemaType:
    """
    Validate a backend dict against its schema.

    Raises:
        MalformedInputError: With one "<field path>: <reason>" entry per problem
    """
    try:
        return schema.model_validate(backend_dict)
    except PydanticValidationError as e:
        errors = [
            f"{'.'.join(str(part) for part in error['loc']) or '<root>'}: {error['msg']}"
            for error in e.errors()
        ]
        raise MalformedInputError(entity_type, errors) from e
