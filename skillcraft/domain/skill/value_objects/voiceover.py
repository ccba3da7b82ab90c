"""Voiceover value object: one recorded audio file for a piece of content."""

from dataclasses import dataclass

from skillcraft.domain.common.value_object import ValueObject


@dataclass(frozen=True)
class Voiceover(ValueObject):
    """An audio recording of a piece of content in one language."""

    filename: str
    file_size_bytes: int
    needs_update: bool
    duration_secs: float | None = None

    def __post_init__(self) -> None:
        if not self.filename:
            raise ValueError("Voiceover filename cannot be empty")
        if self.file_size_bytes < 0:
            raise ValueError("Voiceover file size cannot be negative")

    def to_backend_dict(self) -> dict[str, object]:
        backend_dict: dict[str, object] = {
            "filename": self.filename,
            "file_size_bytes": self.file_size_bytes,
            "needs_update": self.needs_update,
        }
        # Older payloads carry no duration; keep the shape they came in with.
        if self.duration_secs is not None:
            backend_dict["duration_secs"] = self.duration_secs
        return backend_dict
