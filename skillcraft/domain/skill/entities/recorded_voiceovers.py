from dataclasses import dataclass, field

from skillcraft.domain.common.exceptions import DomainError
from skillcraft.domain.skill.value_objects.voiceover import Voiceover


@dataclass
class RecordedVoiceovers:
    """
    Voiceovers recorded for the content of a concept card.

    Maps each content id to the voiceovers recorded for it, keyed by
    language code. A content id with no recordings maps to an empty dict.
    """

    voiceovers_mapping: dict[str, dict[str, Voiceover]] = field(default_factory=dict)

    def get_all_content_id(self) -> list[str]:
        return list(self.voiceovers_mapping)

    def has_content_id(self, content_id: str) -> bool:
        return content_id in self.voiceovers_mapping

    def add_content_id_for_voiceover(self, content_id: str) -> None:
        if content_id in self.voiceovers_mapping:
            raise DomainError(f"Content id {content_id} already exists in voiceovers mapping")
        self.voiceovers_mapping[content_id] = {}

    def delete_content_id_for_voiceover(self, content_id: str) -> None:
        if content_id not in self.voiceovers_mapping:
            raise DomainError(f"Content id {content_id} does not exist in voiceovers mapping")
        del self.voiceovers_mapping[content_id]

    def to_backend_dict(self) -> dict[str, object]:
        return {
            "voiceovers_mapping": {
                content_id: {
                    language_code: voiceover.to_backend_dict()
                    for language_code, voiceover in voiceovers.items()
                }
                for content_id, voiceovers in self.voiceovers_mapping.items()
            }
        }
