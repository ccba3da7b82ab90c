"""Pytest configuration and fixtures."""

from collections.abc import Generator
from typing import Any

import pytest

from skillcraft.config import get_settings
from skillcraft.domain.skill.entities.skill import Skill
from skillcraft.infrastructure.skill.factories.skill_factory import SkillFactory


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def misconception_dict_1() -> dict[str, Any]:
    return {
        "id": "2",
        "name": "test name",
        "notes": "test notes",
        "feedback": "test feedback",
        "must_be_addressed": True,
    }


@pytest.fixture
def misconception_dict_2() -> dict[str, Any]:
    return {
        "id": "4",
        "name": "test name",
        "notes": "test notes",
        "feedback": "test feedback",
        "must_be_addressed": False,
    }


@pytest.fixture
def rubric_dict() -> dict[str, Any]:
    return {"difficulty": "Easy", "explanation": "explanation"}


@pytest.fixture
def skill_contents_dict() -> dict[str, Any]:
    return {
        "explanation": {"html": "test explanation", "content_id": "explanation"},
        "worked_examples": [
            {"html": "test worked example 1", "content_id": "worked_example_1"},
            {"html": "test worked example 2", "content_id": "worked_example_2"},
        ],
        "recorded_voiceovers": {
            "voiceovers_mapping": {
                "explanation": {},
                "worked_example_1": {},
                "worked_example_2": {},
            }
        },
    }


@pytest.fixture
def skill_dict(
    misconception_dict_1: dict[str, Any],
    misconception_dict_2: dict[str, Any],
    rubric_dict: dict[str, Any],
    skill_contents_dict: dict[str, Any],
) -> dict[str, Any]:
    return {
        "id": "1",
        "description": "test description",
        "misconceptions": [misconception_dict_1, misconception_dict_2],
        "rubrics": [rubric_dict],
        "skill_contents": skill_contents_dict,
        "language_code": "en",
        "version": 3,
        "next_misconception_id": "6",
        "superseding_skill_id": "2",
        "all_questions_merged": False,
        "prerequisite_skill_ids": ["skill_1"],
    }


@pytest.fixture
def skill_factory() -> SkillFactory:
    return SkillFactory()


@pytest.fixture
def skill(skill_factory: SkillFactory, skill_dict: dict[str, Any]) -> Skill:
    return skill_factory.create_from_backend_dict(skill_dict)
