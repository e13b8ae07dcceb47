# translation_views/providers/skills.py
"""
基于翻译技能的权限提供者。

两个提供者互斥，都在通用翻译权限之上再按用户登记的语言对技能做限制：
- local_translation 只以目标语言为键；
- translators 在 create 时以 (源语言, 目标语言) 语言对为键，
  update/delete 时只以目标语言为键。
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod

from cachetools import TTLCache

from translation_views.config import SkillCacheConfig
from translation_views.core import (
    LanguageSkill,
    Operation,
    SkillRegistry,
    TranslatableItem,
    Viewer,
)
from translation_views.providers.content_translation import has_translate_permission


class _SkillBasedProvider(ABC):
    name = "skills"
    PERMISSION_TEMPLATE = "{op} content translations"

    def __init__(self, registry: SkillRegistry, cache: SkillCacheConfig | None = None):
        self.registry = registry
        cache_config = cache or SkillCacheConfig()
        self._skills: TTLCache[str, tuple[LanguageSkill, ...]] = TTLCache(
            maxsize=cache_config.maxsize, ttl=cache_config.ttl
        )
        # TTLCache 的过期清理不是线程安全的，读写都必须持锁
        self._lock = threading.Lock()

    def skills_for(self, viewer: Viewer) -> tuple[LanguageSkill, ...]:
        with self._lock:
            skills = self._skills.get(viewer.id)
            if skills is None:
                skills = tuple(self.registry.get_skills(viewer.id))
                self._skills[viewer.id] = skills
            return skills

    def skill_languages(self, viewer: Viewer) -> set[str]:
        return {code for skill in self.skills_for(viewer) for code in skill.languages()}

    def clear_cache(self) -> None:
        with self._lock:
            self._skills.clear()

    def check(
        self,
        item: TranslatableItem,
        viewer: Viewer,
        operation: Operation,
        target_langcode: str,
        source_langcode: str | None = None,
    ) -> bool:
        permission = self.PERMISSION_TEMPLATE.format(op=operation.value)
        if not (
            has_translate_permission(item, viewer) and viewer.has_permission(permission)
        ):
            return False
        return self._has_skill(viewer, operation, target_langcode, source_langcode)

    @abstractmethod
    def _has_skill(
        self,
        viewer: Viewer,
        operation: Operation,
        target_langcode: str,
        source_langcode: str | None,
    ) -> bool:
        """[子类实现] 用户的技能是否覆盖本次操作的语言。"""
        ...


class LocalTranslationProvider(_SkillBasedProvider):
    name = "local_translation"
    PERMISSION_TEMPLATE = "local_translation {op} content translations"

    def _has_skill(
        self,
        viewer: Viewer,
        operation: Operation,
        target_langcode: str,
        source_langcode: str | None,
    ) -> bool:
        return target_langcode in self.skill_languages(viewer)


class TranslatorsProvider(_SkillBasedProvider):
    name = "translators"
    PERMISSION_TEMPLATE = "translators_content {op} content translations"

    def _has_skill(
        self,
        viewer: Viewer,
        operation: Operation,
        target_langcode: str,
        source_langcode: str | None,
    ) -> bool:
        if operation is Operation.CREATE:
            if not source_langcode:
                return False
            return any(
                skill.covers(source_langcode, target_langcode)
                for skill in self.skills_for(viewer)
            )
        return target_langcode in self.skill_languages(viewer)
