# translation_views/memory.py
"""
外部协作者的内存实现。

CLI 用它们从 JSON 夹具中渲染列表，测试用它们代替真实的实体系统。
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from urllib.parse import urlencode

from translation_views.core import (
    LanguageSkill,
    Operation,
    Revision,
    RouteNotFoundError,
    TranslatableItem,
    Viewer,
)


@dataclass(frozen=True)
class StaticViewer:
    """拥有一组固定权限的用户。"""

    id: str
    permissions: frozenset[str] = frozenset()

    def has_permission(self, permission: str) -> bool:
        return permission in self.permissions


class InMemoryEntityStore:
    """以 (实体类型, ID) 为键保存条目，并按语言记录影响该语言的修订。"""

    def __init__(self) -> None:
        self._items: dict[tuple[str, str], TranslatableItem] = {}
        self._revisions: dict[tuple[str, str], dict[int, Revision]] = {}
        self._affected: dict[tuple[str, str], dict[str, int]] = {}

    def add(self, item: TranslatableItem) -> None:
        self._items[(item.entity_type_id, item.id)] = item

    def add_revision(
        self, item: TranslatableItem, revision: Revision, affected: Iterable[str]
    ) -> None:
        """登记一个修订；`affected` 是该修订改动过的语言代码。"""
        key = (item.entity_type_id, item.id)
        self._revisions.setdefault(key, {})[revision.revision_id] = revision
        latest = self._affected.setdefault(key, {})
        for langcode in affected:
            if revision.revision_id >= latest.get(langcode, -1):
                latest[langcode] = revision.revision_id

    def items(self) -> list[TranslatableItem]:
        return list(self._items.values())

    def load(self, entity_type_id: str, item_id: str) -> TranslatableItem | None:
        return self._items.get((entity_type_id, item_id))

    def load_revision(
        self, item: TranslatableItem, revision_id: int
    ) -> Revision | None:
        return self._revisions.get((item.entity_type_id, item.id), {}).get(revision_id)

    def get_latest_translation_affected_revision_id(
        self, item: TranslatableItem, langcode: str
    ) -> int | None:
        return self._affected.get((item.entity_type_id, item.id), {}).get(langcode)


class PermissionEntityAccess:
    """
    以权限名称实现粗粒度的实体访问：
    "bypass {entity_type} access"、"{verb} any {bundle} content"，
    以及作者本人的 "{verb} own {bundle} content"。
    """

    VERBS = {Operation.UPDATE: "edit", Operation.DELETE: "delete"}

    def access(
        self, item: TranslatableItem, operation: Operation, viewer: Viewer
    ) -> bool:
        verb = self.VERBS.get(operation)
        if verb is None:
            return False
        if viewer.has_permission(f"bypass {item.entity_type_id} access"):
            return True
        if viewer.has_permission(f"{verb} any {item.bundle} content"):
            return True
        return (
            item.owner_id is not None
            and item.owner_id == viewer.id
            and viewer.has_permission(f"{verb} own {item.bundle} content")
        )


class InMemorySkillRegistry:
    def __init__(self, skills: Mapping[str, Iterable[LanguageSkill]] | None = None):
        self._skills: dict[str, list[LanguageSkill]] = {
            viewer_id: list(entries) for viewer_id, entries in (skills or {}).items()
        }

    def add_skill(self, viewer_id: str, language_from: str, language_to: str) -> None:
        self._skills.setdefault(viewer_id, []).append(
            LanguageSkill(language_from=language_from, language_to=language_to)
        )

    def get_skills(self, viewer_id: str) -> list[LanguageSkill]:
        return list(self._skills.get(viewer_id, []))


_ROUTE_PATTERN = re.compile(r"^entity\.(?P<entity_type>\w+)\.(?P<route>\w+)$")

DEFAULT_ROUTE_PATHS: dict[str, str] = {
    "canonical": "/{entity_type}/{id}",
    "edit_form": "/{entity_type}/{id}/edit",
    "delete_form": "/{entity_type}/{id}/delete",
    "content_translation_add": "/{entity_type}/{id}/translations/add/{source}/{target}",
    "content_translation_edit": "/{entity_type}/{id}/translations/edit/{language}",
    "content_translation_delete": "/{entity_type}/{id}/translations/delete/{language}",
}


class PathRouteBuilder:
    """
    把 `entity.{type}.{route}` 形式的路由渲染为路径。
    非站点默认语言的地址带有语言前缀，例如 `/fr/node/1/translations/edit/fr`。
    """

    def __init__(
        self,
        default_langcode: str,
        paths: Mapping[str, str] | None = None,
        base_path: str = "",
    ):
        self.default_langcode = default_langcode
        self.paths = dict(paths or DEFAULT_ROUTE_PATHS)
        self.base_path = base_path.rstrip("/")

    def url(
        self,
        route_name: str,
        parameters: Mapping[str, str],
        *,
        language: str | None = None,
        query: Mapping[str, str] | None = None,
    ) -> str:
        match = _ROUTE_PATTERN.match(route_name)
        if match is None or match["route"] not in self.paths:
            raise RouteNotFoundError(route_name)

        entity_type = match["entity_type"]
        values = {**parameters, "entity_type": entity_type}
        values["id"] = parameters.get(entity_type, "")
        try:
            path = self.paths[match["route"]].format(**values)
        except KeyError as e:
            raise RouteNotFoundError(
                f"路由 '{route_name}' 缺少参数 {e.args[0]!r}"
            ) from e

        if language and language != self.default_langcode:
            path = f"/{language}{path}"
        if query:
            path = f"{path}?{urlencode(dict(query))}"
        return f"{self.base_path}{path}"


@dataclass
class StaticLanguageRegistry:
    default_langcode: str
    names: dict[str, str] = field(default_factory=dict)

    def languages(self) -> dict[str, str]:
        if self.default_langcode in self.names:
            return dict(self.names)
        return {self.default_langcode: self.default_langcode, **self.names}

    def get_name(self, langcode: str) -> str:
        return self.names.get(langcode, langcode)
