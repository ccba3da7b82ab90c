from .concept_card_factory import ConceptCardFactory, SubtitledHtmlFactory
from .misconception_factory import MisconceptionFactory
from .rubric_factory import RubricFactory
from .skill_factory import SkillFactory

__all__ = [
    "ConceptCardFactory",
    "MisconceptionFactory",
    "RubricFactory",
    "SkillFactory",
    "SubtitledHtmlFactory",
]
