"""Constants shared by the Skill aggregate."""

from typing import Final

# Canonical order; used verbatim in validation messages.
SKILL_DIFFICULTIES: Final[tuple[str, ...]] = ("Easy", "Medium", "Hard")

INTERSTITIAL_SKILL_DESCRIPTION: Final = "Skill description loading"
INTERSTITIAL_SKILL_VERSION: Final = 1
INTERSTITIAL_NEXT_MISCONCEPTION_ID: Final = "0"
INTERSTITIAL_LANGUAGE_CODE: Final = "en"

INTERSTITIAL_EXPLANATION_HTML: Final = "Loading review material"
EXPLANATION_CONTENT_ID: Final = "explanation"

# Canonical decimal form: no sign, no leading zeros.
MISCONCEPTION_ID_PATTERN: Final = r"^(0|[1-9][0-9]*)$"
