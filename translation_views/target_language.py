# translation_views/target_language.py
"""
目标语言选择器：整个列表的所有翻译字段和筛选器都以它选出的语言为准。

站点默认语言在暴露的输入中以哨兵值表示，使站点默认语言变化时
已保存的列表链接仍然有效。
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from translation_views.config import TargetLanguageFilterConfig
from translation_views.core import LanguageRegistry, LanguageSkill

SITE_DEFAULT_SENTINEL = "***LANGUAGE_site_default***"
TARGET_EXPOSED_KEY = "translation_target_language"


def resolve_target_language(
    exposed_input: Mapping[str, str], languages: LanguageRegistry
) -> str | None:
    """从暴露的输入中取出目标语言代码，哨兵值映射为站点默认语言。"""
    langcode = exposed_input.get(TARGET_EXPOSED_KEY)
    if langcode == SITE_DEFAULT_SENTINEL:
        return languages.default_langcode
    return langcode or None


def build_language_options(
    languages: LanguageRegistry,
    filter_config: TargetLanguageFilterConfig,
    skills: Iterable[LanguageSkill] | None = None,
) -> dict[str, str]:
    """
    构建目标语言下拉框的选项。

    未按技能限制时：站点默认语言（哨兵值）在前，其余可配置语言随后；
    按技能限制时：只取用户技能中所启用列（from / to）的语言。
    """
    if filter_config.limit_by_skills:
        options: dict[str, str] = {}
        skill_list = list(skills or [])
        for column in ("from", "to"):
            if column not in filter_config.skill_columns:
                continue
            for skill in skill_list:
                code = skill.language_from if column == "from" else skill.language_to
                options[code] = languages.get_name(code)
        return options

    default = languages.default_langcode
    options = {SITE_DEFAULT_SENTINEL: languages.get_name(default)}
    for code, name in languages.languages().items():
        if code != default:
            options[code] = name
    return options


def normalize_exposed_input(
    exposed_input: Mapping[str, str],
    options: Mapping[str, str],
    languages: LanguageRegistry,
    filter_config: TargetLanguageFilterConfig,
) -> dict[str, str]:
    """
    在用户尚未选择时补全暴露的输入。

    未限制时，缺失值或显式的站点默认语言都改写为哨兵值；
    按技能限制时，缺失或不在选项中的值改写为第一个可用选项。
    """
    result = dict(exposed_input)
    value = result.get(TARGET_EXPOSED_KEY)
    if not filter_config.limit_by_skills:
        if value is None or value == languages.default_langcode:
            result[TARGET_EXPOSED_KEY] = SITE_DEFAULT_SENTINEL
    elif value not in options and options:
        result[TARGET_EXPOSED_KEY] = next(iter(options))
    return result
