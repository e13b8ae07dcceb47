# translation_views/fixtures.py
"""从 JSON 夹具文件加载内存后端，供 CLI 使用。"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

import structlog
from pydantic import BaseModel, Field, ValidationError

from translation_views.core import (
    EntityTypeInfo,
    FixtureError,
    Revision,
    TranslatableItem,
)
from translation_views.core.exceptions import EntityNotFoundError
from translation_views.memory import (
    InMemoryEntityStore,
    InMemorySkillRegistry,
    StaticViewer,
)

logger = structlog.get_logger(__name__)


class _ItemEntry(BaseModel):
    id: str
    entity_type: str = "node"
    bundle: str = "article"
    default_langcode: str
    translations: list[str] = Field(default_factory=list)
    owner_id: str | None = None
    translatable: bool = True


class _RevisionEntry(BaseModel):
    entity_type: str = "node"
    item_id: str
    revision_id: int
    is_default_revision: bool = False
    translation_langcodes: list[str] = Field(default_factory=list)
    affected: list[str] = Field(default_factory=list)


class _ViewerEntry(BaseModel):
    id: str
    permissions: list[str] = Field(default_factory=list)


class _FixtureFile(BaseModel):
    entity_types: list[EntityTypeInfo] = Field(default_factory=list)
    items: list[_ItemEntry] = Field(default_factory=list)
    revisions: list[_RevisionEntry] = Field(default_factory=list)
    viewers: list[_ViewerEntry] = Field(default_factory=list)
    skills: dict[str, list[tuple[str, str]]] = Field(default_factory=dict)


@dataclass
class FixtureBundle:
    store: InMemoryEntityStore
    skills: InMemorySkillRegistry
    viewers: dict[str, StaticViewer] = field(default_factory=dict)

    def viewer(self, viewer_id: str) -> StaticViewer:
        try:
            return self.viewers[viewer_id]
        except KeyError as e:
            raise FixtureError(f"夹具中不存在用户 '{viewer_id}'") from e


def load_item_or_raise(
    store: InMemoryEntityStore, entity_type_id: str, item_id: str
) -> TranslatableItem:
    """调用方在进入决策流程之前负责确保条目存在。"""
    item = store.load(entity_type_id, item_id)
    if item is None:
        raise EntityNotFoundError(f"{entity_type_id}:{item_id}")
    return item


def load_fixture(path: Path) -> FixtureBundle:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
        data = _FixtureFile.model_validate(raw)
    except OSError as e:
        raise FixtureError(f"无法读取夹具文件 '{path}': {e}") from e
    except json.JSONDecodeError as e:
        raise FixtureError(f"夹具文件不是合法的 JSON: {e}") from e
    except ValidationError as e:
        raise FixtureError(f"夹具文件结构不正确: {e}") from e

    entity_types = {info.id: info for info in data.entity_types}
    store = InMemoryEntityStore()
    for entry in data.items:
        entity_type = entity_types.get(entry.entity_type) or EntityTypeInfo(
            id=entry.entity_type
        )
        store.add(
            TranslatableItem(
                id=entry.id,
                entity_type=entity_type,
                bundle=entry.bundle,
                default_langcode=entry.default_langcode,
                translations={code: True for code in entry.translations},
                owner_id=entry.owner_id,
                translatable=entry.translatable,
            )
        )

    for rev in data.revisions:
        try:
            item = load_item_or_raise(store, rev.entity_type, rev.item_id)
        except EntityNotFoundError as e:
            raise FixtureError(f"修订引用了不存在的条目 {e}") from e
        store.add_revision(
            item,
            Revision(
                revision_id=rev.revision_id,
                is_default_revision=rev.is_default_revision,
                translation_langcodes=frozenset(rev.translation_langcodes),
            ),
            affected=rev.affected,
        )

    skills = InMemorySkillRegistry()
    for viewer_id, pairs in data.skills.items():
        for language_from, language_to in pairs:
            skills.add_skill(viewer_id, language_from, language_to)

    viewers = {
        v.id: StaticViewer(id=v.id, permissions=frozenset(v.permissions))
        for v in data.viewers
    }
    logger.debug(
        "夹具已加载", path=str(path), items=len(data.items), viewers=len(viewers)
    )
    return FixtureBundle(store=store, skills=skills, viewers=viewers)
