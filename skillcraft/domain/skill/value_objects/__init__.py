"""Value objects of the Skill aggregate."""

from .ids import MisconceptionId, SkillId
from .subtitled_html import SubtitledHtml
from .voiceover import Voiceover

__all__ = [
    # IDs
    "MisconceptionId",
    "SkillId",
    # Content
    "SubtitledHtml",
    "Voiceover",
]
