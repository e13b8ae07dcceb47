# translation_views/core/interfaces.py
"""
定义了 translation-views 所消费、但并不实现的外部协作者的接口协议 (Protocols)。
决策流程只依赖于这些抽象接口，而不是具体的实现类；
`translation_views.memory` 提供了一组内存实现。
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

from translation_views.core.types import (
    LanguageSkill,
    Operation,
    Revision,
    TranslatableItem,
)


class Viewer(Protocol):
    """当前操作的用户。"""

    @property
    def id(self) -> str: ...

    def has_permission(self, permission: str) -> bool:
        """判断用户是否拥有指定名称的权限。"""
        ...


class EntityStore(Protocol):
    """实体存储：加载条目与修订。"""

    def load(self, entity_type_id: str, item_id: str) -> TranslatableItem | None:
        """按 ID 加载条目，不存在时返回 None。"""
        ...

    def load_revision(
        self, item: TranslatableItem, revision_id: int
    ) -> Revision | None:
        """加载条目的某个指定修订。"""
        ...

    def get_latest_translation_affected_revision_id(
        self, item: TranslatableItem, langcode: str
    ) -> int | None:
        """返回影响指定语言的最新修订 ID，没有时返回 None。"""
        ...


class EntityAccessHandler(Protocol):
    """与语言无关的、粗粒度的实体级访问检查（例如“编辑任意文章”）。"""

    def access(
        self, item: TranslatableItem, operation: Operation, viewer: Viewer
    ) -> bool: ...


class PermissionProvider(Protocol):
    """
    针对非默认语言行的翻译访问检查。

    同一时刻只会有一个提供者生效，在组装阶段一次性选定。
    `source_langcode` 只在 create 操作时传入。
    """

    name: str

    def check(
        self,
        item: TranslatableItem,
        viewer: Viewer,
        operation: Operation,
        target_langcode: str,
        source_langcode: str | None = None,
    ) -> bool: ...


class SkillRegistry(Protocol):
    """技能服务：返回用户登记的语言对技能。"""

    def get_skills(self, viewer_id: str) -> list[LanguageSkill]: ...


class RouteBuilder(Protocol):
    """根据路由名称和参数生成一个不透明的地址字符串。"""

    def url(
        self,
        route_name: str,
        parameters: Mapping[str, str],
        *,
        language: str | None = None,
        query: Mapping[str, str] | None = None,
    ) -> str: ...


class LanguageRegistry(Protocol):
    """站点语言信息：站点默认语言及所有可配置语言。"""

    @property
    def default_langcode(self) -> str: ...

    def languages(self) -> dict[str, str]:
        """返回语言代码到显示名称的有序映射。"""
        ...

    def get_name(self, langcode: str) -> str: ...
