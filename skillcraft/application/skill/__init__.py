from .commands import (
    AddMisconceptionCommand,
    DeleteMisconceptionCommand,
    UpdateDescriptionCommand,
    UpdateRubricCommand,
)
from .skill_editor import SkillEditor

__all__ = [
    "AddMisconceptionCommand",
    "DeleteMisconceptionCommand",
    "SkillEditor",
    "UpdateDescriptionCommand",
    "UpdateRubricCommand",
]
