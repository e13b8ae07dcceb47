# tests/unit/test_config.py
"""针对 `TranslationViewsConfig` 的单元测试：默认值、环境变量和校验。"""

import pytest
from pydantic import ValidationError

from translation_views.config import PermissionProviderName, TranslationViewsConfig


def test_defaults() -> None:
    config = TranslationViewsConfig()
    assert config.permission_provider is PermissionProviderName.CONTENT_TRANSLATION
    assert config.revisions_enabled is False
    assert config.append_destination is True
    assert config.languages == {"en": "English"}
    assert config.target_language.remove_source_rows is True
    assert config.target_language.skill_columns == {"to"}
    assert config.logging.format == "console"


def test_loads_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TV_PERMISSION_PROVIDER", "translators")
    monkeypatch.setenv("TV_REVISIONS_ENABLED", "true")
    monkeypatch.setenv("TV_LANGUAGES", '{"en": "English", "fr": "French"}')
    monkeypatch.setenv("TV_TARGET_LANGUAGE__LIMIT_BY_SKILLS", "true")
    monkeypatch.setenv("TV_SKILL_CACHE__TTL", "5")
    monkeypatch.setenv("TV_LOGGING__FORMAT", "json")

    config = TranslationViewsConfig()
    assert config.permission_provider is PermissionProviderName.TRANSLATORS
    assert config.revisions_enabled is True
    assert config.languages["fr"] == "French"
    assert config.target_language.limit_by_skills is True
    assert config.skill_cache.ttl == 5
    assert config.logging.format == "json"


def test_loads_from_dotenv_file(tmp_path) -> None:
    (tmp_path / ".env").write_text("TV_SITE_DEFAULT_LANGUAGE=fr\n", encoding="utf-8")
    config = TranslationViewsConfig()
    assert config.site_default_language == "fr"


def test_site_default_is_added_to_languages() -> None:
    config = TranslationViewsConfig(site_default_language="de", languages={"en": "English"})
    assert config.languages == {"de": "de", "en": "English"}


@pytest.mark.parametrize(
    "overrides",
    [
        {"site_default_language": "german"},
        {"languages": {"en": "English", "english": "?"}},
        {"permission_provider": "unknown"},
        {"skill_cache": {"maxsize": 0}},
        {"target_language": {"limit_by_skills": True, "skill_columns": []}},
    ],
)
def test_invalid_values_are_rejected(overrides: dict) -> None:
    with pytest.raises(ValidationError):
        TranslationViewsConfig(**overrides)
