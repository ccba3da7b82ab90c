"""
ConceptCard entity: the review material that teaches a skill.
"""

from dataclasses import dataclass, field

from skillcraft.domain.common.exceptions import DomainError
from skillcraft.domain.skill.constants import (
    EXPLANATION_CONTENT_ID,
    INTERSTITIAL_EXPLANATION_HTML,
)
from skillcraft.domain.skill.entities.recorded_voiceovers import RecordedVoiceovers
from skillcraft.domain.skill.value_objects.subtitled_html import SubtitledHtml


@dataclass
class ConceptCard:
    """
    Concept card owned by a single skill.

    Business Rules:
    - Worked examples must not share a content id with each other
    - Adding a worked example registers its content id for voiceovers
    - An empty explanation is reported as a validation issue, not an error
    """

    explanation: SubtitledHtml
    worked_examples: list[SubtitledHtml] = field(default_factory=list)
    recorded_voiceovers: RecordedVoiceovers = field(default_factory=RecordedVoiceovers)

    def __post_init__(self) -> None:
        content_ids = [example.content_id for example in self.worked_examples]
        if len(content_ids) != len(set(content_ids)):
            raise DomainError("Worked examples cannot share a content id")

    def set_explanation(self, explanation: SubtitledHtml) -> None:
        self.explanation = explanation

    def set_worked_examples(self, worked_examples: list[SubtitledHtml]) -> None:
        """Replace the worked examples, keeping the voiceover mapping in sync."""
        old_ids = {example.content_id for example in self.worked_examples}
        new_ids = {example.content_id for example in worked_examples}
        if len(new_ids) != len(worked_examples):
            raise DomainError("Worked examples cannot share a content id")

        for content_id in old_ids - new_ids:
            if self.recorded_voiceovers.has_content_id(content_id):
                self.recorded_voiceovers.delete_content_id_for_voiceover(content_id)
        for example in worked_examples:
            if not self.recorded_voiceovers.has_content_id(example.content_id):
                self.recorded_voiceovers.add_content_id_for_voiceover(example.content_id)
        self.worked_examples = list(worked_examples)

    def add_worked_example(self, worked_example: SubtitledHtml) -> None:
        """
        Append a worked example.

        Raises:
            DomainError: If the content id is already used by the card
        """
        if any(e.content_id == worked_example.content_id for e in self.worked_examples):
            raise DomainError(f"Worked example {worked_example.content_id} already exists")
        self.recorded_voiceovers.add_content_id_for_voiceover(worked_example.content_id)
        self.worked_examples.append(worked_example)

    def get_validation_issues(self) -> list[str]:
        issues: list[str] = []
        if self.explanation.is_empty():
            issues.append("There should be review material in the concept card.")
        return issues

    def to_backend_dict(self) -> dict[str, object]:
        return {
            "explanation": self.explanation.to_backend_dict(),
            "worked_examples": [example.to_backend_dict() for example in self.worked_examples],
            "recorded_voiceovers": self.recorded_voiceovers.to_backend_dict(),
        }

    @classmethod
    def create_interstitial(cls) -> "ConceptCard":
        """Placeholder card shown while the real one is loading."""
        return cls(
            explanation=SubtitledHtml.create_default(
                INTERSTITIAL_EXPLANATION_HTML, EXPLANATION_CONTENT_ID
            ),
            worked_examples=[],
            recorded_voiceovers=RecordedVoiceovers({EXPLANATION_CONTENT_ID: {}}),
        )
