from .concept_card import ConceptCard
from .misconception import Misconception
from .recorded_voiceovers import RecordedVoiceovers
from .rubric import Rubric
from .skill import Skill

__all__ = [
    "ConceptCard",
    "Misconception",
    "RecordedVoiceovers",
    "Rubric",
    "Skill",
]
