"""Tests for SkillFactory hydration, interstitial skills and serialization."""

import copy
from typing import Any

import pytest

from skillcraft.domain.skill.exceptions import MalformedInputError
from skillcraft.domain.skill.value_objects.ids import SkillId
from skillcraft.infrastructure.skill.factories.concept_card_factory import ConceptCardFactory
from skillcraft.infrastructure.skill.factories.misconception_factory import MisconceptionFactory
from skillcraft.infrastructure.skill.factories.rubric_factory import RubricFactory
from skillcraft.infrastructure.skill.factories.skill_factory import SkillFactory


def test_create_from_backend_dict(
    skill_factory: SkillFactory,
    skill_dict: dict[str, Any],
    misconception_dict_1: dict[str, Any],
    misconception_dict_2: dict[str, Any],
    rubric_dict: dict[str, Any],
    skill_contents_dict: dict[str, Any],
) -> None:
    """Test hydrating a skill and reading back every attribute."""
    skill = skill_factory.create_from_backend_dict(skill_dict)
    misconception_factory = MisconceptionFactory()

    assert skill.id == SkillId("1")
    assert skill.description == "test description"
    assert skill.misconceptions == (
        misconception_factory.create_from_backend_dict(misconception_dict_1),
        misconception_factory.create_from_backend_dict(misconception_dict_2),
    )
    assert skill.rubrics == (RubricFactory().create_from_backend_dict(rubric_dict),)
    assert skill.concept_card == ConceptCardFactory().create_from_backend_dict(
        skill_contents_dict
    )
    assert skill.language_code == "en"
    assert skill.version == 3
    assert skill.get_next_misconception_id() == "6"
    assert skill.next_misconception_id == "6"
    assert skill.superseding_skill_id == "2"
    assert skill.all_questions_merged is False
    assert skill.prerequisite_skill_ids == ("skill_1",)


def test_create_from_backend_dict_records_no_events(
    skill_factory: SkillFactory, skill_dict: dict[str, Any]
) -> None:
    skill = skill_factory.create_from_backend_dict(skill_dict)
    assert skill.pending_events == []


def test_to_backend_dict_round_trip(
    skill_factory: SkillFactory, skill_dict: dict[str, Any]
) -> None:
    """Test that serialization is the exact inverse of hydration."""
    original = copy.deepcopy(skill_dict)
    skill = skill_factory.create_from_backend_dict(skill_dict)

    assert skill.to_backend_dict() == original
    # The input dict is not touched by hydration
    assert skill_dict == original


def test_round_trip_with_voiceovers_and_null_ids(
    skill_factory: SkillFactory, skill_dict: dict[str, Any]
) -> None:
    skill_dict["id"] = None
    skill_dict["superseding_skill_id"] = None
    skill_dict["all_questions_merged"] = True
    skill_dict["skill_contents"]["recorded_voiceovers"]["voiceovers_mapping"]["explanation"] = {
        "en": {"filename": "explanation-en.mp3", "file_size_bytes": 1024, "needs_update": False},
        "hi": {
            "filename": "explanation-hi.mp3",
            "file_size_bytes": 2048,
            "needs_update": True,
            "duration_secs": 12.5,
        },
        "fr": {
            "filename": "explanation-fr.mp3",
            "file_size_bytes": 512,
            "needs_update": False,
            "duration_secs": 7,
        },
    }

    skill = skill_factory.create_from_backend_dict(copy.deepcopy(skill_dict))

    assert skill.id is None
    assert skill.to_backend_dict() == skill_dict


def test_serialized_collections_are_independent(
    skill_factory: SkillFactory, skill_dict: dict[str, Any]
) -> None:
    skill = skill_factory.create_from_backend_dict(skill_dict)
    backend_dict = skill.to_backend_dict()

    backend_dict["prerequisite_skill_ids"].append("skill_2")  # type: ignore[attr-defined]

    assert skill.prerequisite_skill_ids == ("skill_1",)


def test_create_interstitial_skill(skill_factory: SkillFactory) -> None:
    """Test the placeholder skill shown while loading."""
    skill = skill_factory.create_interstitial_skill()

    assert skill.id is None
    assert skill.description == "Skill description loading"
    assert skill.misconceptions == ()
    assert skill.rubrics == ()
    assert skill.concept_card == ConceptCardFactory().create_interstitial_concept_card()
    assert skill.language_code == "en"
    assert skill.version == 1
    assert skill.get_next_misconception_id() == "0"
    assert skill.superseding_skill_id is None
    assert skill.all_questions_merged is False
    assert skill.prerequisite_skill_ids == ()


def test_create_interstitial_skill_ignores_environment(
    skill_factory: SkillFactory, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("SKILLCRAFT_ENVIRONMENT", "staging")

    skill = skill_factory.create_interstitial_skill()

    assert skill.language_code == "en"


def test_interstitial_skills_are_independent(skill_factory: SkillFactory) -> None:
    first = skill_factory.create_interstitial_skill()
    second = skill_factory.create_interstitial_skill()

    first.update_rubric_for_difficulty("Easy", "explanation")

    assert second.rubrics == ()


class TestMalformedInput:
    """Hydration failures surface as MalformedInputError."""

    def _errors(self, skill_factory: SkillFactory, backend_dict: object) -> list[str]:
        with pytest.raises(MalformedInputError) as exc_info:
            skill_factory.create_from_backend_dict(backend_dict)
        assert exc_info.value.entity_type == "Skill"
        assert exc_info.value.details["errors"] == exc_info.value.errors
        return exc_info.value.errors

    def test_missing_field(self, skill_factory: SkillFactory, skill_dict: dict[str, Any]) -> None:
        del skill_dict["description"]
        errors = self._errors(skill_factory, skill_dict)
        assert any(error.startswith("description:") for error in errors)

    def test_missing_nullable_field(
        self, skill_factory: SkillFactory, skill_dict: dict[str, Any]
    ) -> None:
        del skill_dict["superseding_skill_id"]
        errors = self._errors(skill_factory, skill_dict)
        assert any(error.startswith("superseding_skill_id:") for error in errors)

    def test_mistyped_version(
        self, skill_factory: SkillFactory, skill_dict: dict[str, Any]
    ) -> None:
        skill_dict["version"] = "3"
        errors = self._errors(skill_factory, skill_dict)
        assert any(error.startswith("version:") for error in errors)

    def test_non_positive_version(
        self, skill_factory: SkillFactory, skill_dict: dict[str, Any]
    ) -> None:
        skill_dict["version"] = 0
        errors = self._errors(skill_factory, skill_dict)
        assert any(error.startswith("version:") for error in errors)

    def test_mistyped_flag(self, skill_factory: SkillFactory, skill_dict: dict[str, Any]) -> None:
        skill_dict["all_questions_merged"] = "false"
        errors = self._errors(skill_factory, skill_dict)
        assert any(error.startswith("all_questions_merged:") for error in errors)

    def test_unknown_field(self, skill_factory: SkillFactory, skill_dict: dict[str, Any]) -> None:
        skill_dict["creator"] = "someone"
        errors = self._errors(skill_factory, skill_dict)
        assert any(error.startswith("creator:") for error in errors)

    def test_non_numeric_next_misconception_id(
        self, skill_factory: SkillFactory, skill_dict: dict[str, Any]
    ) -> None:
        skill_dict["next_misconception_id"] = "six"
        errors = self._errors(skill_factory, skill_dict)
        assert any(error.startswith("next_misconception_id:") for error in errors)

    def test_integer_next_misconception_id(
        self, skill_factory: SkillFactory, skill_dict: dict[str, Any]
    ) -> None:
        skill_dict["next_misconception_id"] = 6
        errors = self._errors(skill_factory, skill_dict)
        assert any(error.startswith("next_misconception_id:") for error in errors)

    def test_nested_misconception_error_path(
        self, skill_factory: SkillFactory, skill_dict: dict[str, Any]
    ) -> None:
        del skill_dict["misconceptions"][1]["feedback"]
        errors = self._errors(skill_factory, skill_dict)
        assert any(error.startswith("misconceptions.1.feedback:") for error in errors)

    def test_unknown_rubric_difficulty(
        self, skill_factory: SkillFactory, skill_dict: dict[str, Any]
    ) -> None:
        skill_dict["rubrics"][0]["difficulty"] = "Impossible"
        errors = self._errors(skill_factory, skill_dict)
        assert any(error.startswith("rubrics.0.difficulty:") for error in errors)

    def test_repeated_rubric_difficulty(
        self, skill_factory: SkillFactory, skill_dict: dict[str, Any]
    ) -> None:
        skill_dict["rubrics"].append({"difficulty": "Easy", "explanation": "again"})
        errors = self._errors(skill_factory, skill_dict)
        assert any("at most one rubric per difficulty" in error for error in errors)

    def test_repeated_misconception_id(
        self, skill_factory: SkillFactory, skill_dict: dict[str, Any]
    ) -> None:
        skill_dict["misconceptions"][1]["id"] = "2"
        errors = self._errors(skill_factory, skill_dict)
        assert any("misconception ids must be unique" in error for error in errors)

    def test_empty_skill_id(self, skill_factory: SkillFactory, skill_dict: dict[str, Any]) -> None:
        skill_dict["id"] = ""
        errors = self._errors(skill_factory, skill_dict)
        assert any(error.startswith("id:") for error in errors)

    def test_malformed_concept_card(
        self, skill_factory: SkillFactory, skill_dict: dict[str, Any]
    ) -> None:
        skill_dict["skill_contents"]["explanation"] = "test explanation"
        errors = self._errors(skill_factory, skill_dict)
        assert any(error.startswith("skill_contents.explanation:") for error in errors)

    def test_leading_zero_misconception_id(
        self, skill_factory: SkillFactory, skill_dict: dict[str, Any]
    ) -> None:
        skill_dict["misconceptions"][0]["id"] = "02"
        errors = self._errors(skill_factory, skill_dict)
        assert any(error.startswith("misconceptions.0.id:") for error in errors)

    def test_leading_zero_next_misconception_id(
        self, skill_factory: SkillFactory, skill_dict: dict[str, Any]
    ) -> None:
        skill_dict["next_misconception_id"] = "06"
        errors = self._errors(skill_factory, skill_dict)
        assert any(error.startswith("next_misconception_id:") for error in errors)

    @pytest.mark.parametrize("duration", [None, "12.5", "long"])
    def test_malformed_voiceover_duration(
        self, skill_factory: SkillFactory, skill_dict: dict[str, Any], duration: object
    ) -> None:
        skill_dict["skill_contents"]["recorded_voiceovers"]["voiceovers_mapping"][
            "explanation"
        ] = {
            "en": {
                "filename": "a.mp3",
                "file_size_bytes": 1,
                "needs_update": False,
                "duration_secs": duration,
            }
        }
        errors = self._errors(skill_factory, skill_dict)
        assert any(
            error.startswith(
                "skill_contents.recorded_voiceovers.voiceovers_mapping.explanation.en.duration_secs"
            )
            for error in errors
        )

    def test_not_a_dict(self, skill_factory: SkillFactory) -> None:
        errors = self._errors(skill_factory, None)
        assert errors[0].startswith("<root>:")

    def test_error_message(self, skill_factory: SkillFactory, skill_dict: dict[str, Any]) -> None:
        del skill_dict["language_code"]
        with pytest.raises(MalformedInputError, match="Malformed Skill backend dict"):
            skill_factory.create_from_backend_dict(skill_dict)
