from .skill_schemas import (
    ConceptCardSchema,
    MisconceptionSchema,
    RecordedVoiceoversSchema,
    RubricSchema,
    SkillSchema,
    SubtitledHtmlSchema,
    VoiceoverSchema,
    parse_backend_dict,
)

__all__ = [
    "ConceptCardSchema",
    "MisconceptionSchema",
    "RecordedVoiceoversSchema",
    "RubricSchema",
    "SkillSchema",
    "SubtitledHtmlSchema",
    "VoiceoverSchema",
    "parse_backend_dict",
]
