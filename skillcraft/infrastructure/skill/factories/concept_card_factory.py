"""Factories for ConceptCard and its SubtitledHtml content."""

from skillcraft.domain.skill.entities.concept_card import ConceptCard
from skillcraft.domain.skill.entities.recorded_voiceovers import RecordedVoiceovers
from skillcraft.domain.skill.value_objects.subtitled_html import SubtitledHtml
from skillcraft.domain.skill.value_objects.voiceover import Voiceover
from skillcraft.infrastructure.skill.schemas.skill_schemas import (
    ConceptCardSchema,
    RecordedVoiceoversSchema,
    SubtitledHtmlSchema,
    parse_backend_dict,
)


class SubtitledHtmlFactory:
    """Builds SubtitledHtml values from backend dicts."""

    def create_from_backend_dict(self, backend_dict: object) -> SubtitledHtml:
        schema = parse_backend_dict(SubtitledHtmlSchema, backend_dict, "SubtitledHtml")
        return self.to_domain(schema)

    def to_domain(self, schema: SubtitledHtmlSchema) -> SubtitledHtml:
        return SubtitledHtml(html=schema.html, content_id=schema.content_id)

    def create_default(self, html: str, content_id: str) -> SubtitledHtml:
        return SubtitledHtml.create_default(html, content_id)


class ConceptCardFactory:
    """Builds ConceptCard entities from the `skill_contents` backend dict."""

    def __init__(self, subtitled_html_factory: SubtitledHtmlFactory | None = None) -> None:
        self.subtitled_html_factory = subtitled_html_factory or SubtitledHtmlFactory()

    def create_from_backend_dict(self, backend_dict: object) -> ConceptCard:
        schema = parse_backend_dict(ConceptCardSchema, backend_dict, "ConceptCard")
        return self.to_domain(schema)

    def to_domain(self, schema: ConceptCardSchema) -> ConceptCard:
        return ConceptCard(
            explanation=self.subtitled_html_factory.to_domain(schema.explanation),
            worked_examples=[
                self.subtitled_html_factory.to_domain(example)
                for example in schema.worked_examples
            ],
            recorded_voiceovers=self._recorded_voiceovers_to_domain(schema.recorded_voiceovers),
        )

    def create_interstitial_concept_card(self) -> ConceptCard:
        return ConceptCard.create_interstitial()

    def _recorded_voiceovers_to_domain(
        self, schema: RecordedVoiceoversSchema
    ) -> RecordedVoiceovers:
        return RecordedVoiceovers(
            voiceovers_mapping={
                content_id: {
                    language_code: Voiceover(
                        filename=voiceover.filename,
                        file_size_bytes=voiceover.file_size_bytes,
                        needs_update=voiceover.needs_update,
                        duration_secs=voiceover.duration_secs,
                    )
                    for language_code, voiceover in voiceovers.items()
                }
                for content_id, voiceovers in schema.voiceovers_mapping.items()
            }
        )
