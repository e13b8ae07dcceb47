# translation_views/config.py

import enum
from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from translation_views.utils import validate_lang_codes


class PermissionProviderName(str, enum.Enum):
    CONTENT_TRANSLATION = "content_translation"
    LOCAL_TRANSLATION = "local_translation"
    TRANSLATORS = "translators"


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: Literal["json", "console"] = "console"


class SkillCacheConfig(BaseModel):
    """技能型提供者对每个用户技能列表的缓存配置。"""

    maxsize: int = Field(default=256, gt=0)
    ttl: int = Field(default=60, gt=0)


class TargetLanguageFilterConfig(BaseModel):
    remove_source_rows: bool = Field(
        default=True, description="移除行语言与目标语言相同的行"
    )
    limit_by_skills: bool = Field(
        default=False, description="仅使用用户翻译技能中的语言作为目标语言选项"
    )
    skill_columns: set[Literal["from", "to"]] = Field(default_factory=lambda: {"to"})

    @model_validator(mode="after")
    def check_columns(self) -> "TargetLanguageFilterConfig":
        if self.limit_by_skills and not self.skill_columns:
            raise ValueError("启用 limit_by_skills 时 skill_columns 不能为空")
        return self


class TranslationViewsConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TV_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    permission_provider: PermissionProviderName = (
        PermissionProviderName.CONTENT_TRANSLATION
    )
    revisions_enabled: bool = Field(
        default=False, description="是否检查尚未发布的待定修订（内容审核）"
    )
    append_destination: bool = Field(
        default=True, description="是否为操作链接追加返回地址参数"
    )
    site_default_language: str = "en"
    languages: dict[str, str] = Field(default_factory=lambda: {"en": "English"})

    target_language: TargetLanguageFilterConfig = Field(
        default_factory=TargetLanguageFilterConfig
    )
    skill_cache: SkillCacheConfig = Field(default_factory=SkillCacheConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("site_default_language")
    @classmethod
    def validate_site_default_language(cls, v: str) -> str:
        validate_lang_codes([v])
        return v

    @field_validator("languages")
    @classmethod
    def validate_languages(cls, v: dict[str, str]) -> dict[str, str]:
        validate_lang_codes(list(v))
        return v

    @model_validator(mode="after")
    def ensure_site_default_listed(self) -> "TranslationViewsConfig":
        if self.site_default_language not in self.languages:
            self.languages = {
                self.site_default_language: self.site_default_language,
                **self.languages,
            }
        return self
