# tests/integration/cli/conftest.py
"""为 CLI 集成测试提供 Fixtures。"""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

FIXTURE_DATA = {
    "entity_types": [{"id": "node", "revisionable": True}],
    "items": [
        {"id": "1", "default_langcode": "en", "translations": ["fr"], "owner_id": "editor"},
        {"id": "2", "default_langcode": "en"},
        {"id": "3", "default_langcode": "fr"},
    ],
    "revisions": [
        {
            "item_id": "2",
            "revision_id": 5,
            "is_default_revision": False,
            "translation_langcodes": ["en", "fr"],
            "affected": ["fr"],
        }
    ],
    "viewers": [
        {
            "id": "translator",
            "permissions": [
                "translate any entity",
                "create content translations",
                "update content translations",
                "delete content translations",
            ],
        },
        {"id": "editor", "permissions": ["edit own article content"]},
        {
            "id": "skilled",
            "permissions": [
                "translate any entity",
                "translators_content create content translations",
                "translators_content update content translations",
            ],
        },
    ],
    "skills": {"skilled": [["en", "de"]]},
}


@pytest.fixture
def cli_runner() -> CliRunner:
    """提供一个 Typer CliRunner 实例用于模拟命令行调用。"""
    return CliRunner()


@pytest.fixture
def fixture_file(tmp_path: Path) -> Path:
    path = tmp_path / "listing.json"
    path.write_text(json.dumps(FIXTURE_DATA), encoding="utf-8")
    return path
