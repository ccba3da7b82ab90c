"""
SubtitledHtml value object.

A piece of HTML content tagged with the content id under which its
translations and voiceovers are recorded.
"""

from dataclasses import dataclass
from typing import Self

from skillcraft.domain.common.value_object import ValueObject


@dataclass(frozen=True)
class SubtitledHtml(ValueObject):
    """HTML content paired with its content id."""

    html: str
    content_id: str

    def __post_init__(self) -> None:
        if not self.content_id:
            raise ValueError("SubtitledHtml content_id cannot be empty")

    def is_empty(self) -> bool:
        """Whether the HTML holds no visible content."""
        return not self.html.strip()

    @classmethod
    def create_default(cls, html: str, content_id: str) -> Self:
        return cls(html=html, content_id=content_id)

    def to_backend_dict(self) -> dict[str, str]:
        return {"html": self.html, "content_id": self.content_id}
