# tests/unit/test_operations.py
"""
针对 `translation_views.operations` 操作编排器的单元测试。

覆盖每行链接集合的性质：顺序、幂等、add 与 edit/delete 互斥，
以及默认语言行、翻译行、缺失翻译、待定修订等典型场景。
"""

import pytest

from tests.helpers.factories import make_item, make_orchestrator, make_viewer
from translation_views.config import PermissionProviderName, TranslationViewsConfig
from translation_views.core import LinkKind, Revision
from translation_views.memory import (
    InMemoryEntityStore,
    InMemorySkillRegistry,
    PathRouteBuilder,
    PermissionEntityAccess,
)
from translation_views.operations import create_orchestrator

LANGCODES = ["fr", "de", "it", "af", "sq"]


def _kinds(links: list) -> list[LinkKind]:
    return [link.kind for link in links]


def test_default_language_with_generic_permissions() -> None:
    """默认语言行：持有通用编辑/删除权限时给出指向实体表单的 edit 和 delete。"""
    item = make_item(translations=["fr"])
    viewer = make_viewer("edit any article content", "delete any article content")

    links = make_orchestrator().operations_for(item, viewer, "en", "en")
    assert _kinds(links) == [LinkKind.EDIT, LinkKind.DELETE]
    assert [link.url for link in links] == ["/node/1/edit", "/node/1/delete"]


def test_translation_row_without_translation_permission_is_empty() -> None:
    """通用权限不适用于翻译行。"""
    item = make_item(translations=["fr"])
    viewer = make_viewer("edit any article content", "delete any article content")

    assert make_orchestrator().operations_for(item, viewer, "en", "fr") == []


def test_add_link_for_missing_translation() -> None:
    item = make_item()
    viewer = make_viewer("create content translations", "translate any entity")

    links = make_orchestrator().operations_for(item, viewer, "en", "de")
    assert _kinds(links) == [LinkKind.ADD]
    assert links[0].route_parameters == {"node": "1", "source": "en", "target": "de"}


def test_create_permission_alone_is_not_enough() -> None:
    viewer = make_viewer("create content translations")
    for target in LANGCODES:
        assert make_orchestrator().operations_for(make_item(), viewer, "en", target) == []


def test_update_translation_permission_flow() -> None:
    """先只有 update 权限（无链接），再加上该 bundle 的翻译权限（出现翻译编辑链接）。"""
    item = make_item(translations=LANGCODES)
    orchestrator = make_orchestrator()

    viewer = make_viewer("update content translations")
    assert LinkKind.EDIT not in _kinds(orchestrator.operations_for(item, viewer, "en", "fr"))

    viewer = make_viewer("update content translations", "translate article node")
    links = orchestrator.operations_for(item, viewer, "en", "fr")
    assert _kinds(links) == [LinkKind.EDIT]
    assert links[0].url == "/fr/node/1/translations/edit/fr"

    # 额外的通用编辑权限不会改变翻译行的链接地址
    viewer = make_viewer(
        "update content translations", "translate article node", "edit any article content"
    )
    links = orchestrator.operations_for(item, viewer, "en", "fr")
    assert [link.url for link in links] == ["/fr/node/1/translations/edit/fr"]


def test_delete_translation_permission_flow() -> None:
    item = make_item(translations=LANGCODES)
    orchestrator = make_orchestrator()

    viewer = make_viewer("delete content translations")
    assert orchestrator.operations_for(item, viewer, "en", "fr") == []

    viewer = make_viewer("delete content translations", "translate article node")
    links = orchestrator.operations_for(item, viewer, "en", "fr")
    assert _kinds(links) == [LinkKind.DELETE]
    assert links[0].url == "/fr/node/1/translations/delete/fr"


def test_full_translator_gets_ordered_links() -> None:
    item = make_item(translations=["fr"])
    viewer = make_viewer(
        "create content translations",
        "update content translations",
        "delete content translations",
        "translate any entity",
    )
    orchestrator = make_orchestrator()

    assert _kinds(orchestrator.operations_for(item, viewer, "en", "fr")) == [
        LinkKind.EDIT,
        LinkKind.DELETE,
    ]
    assert _kinds(orchestrator.operations_for(item, viewer, "en", "de")) == [LinkKind.ADD]


@pytest.mark.parametrize("target", ["en", "fr", "de"])
def test_add_never_combined_with_edit_or_delete(target: str) -> None:
    item = make_item(translations=["fr"])
    viewer = make_viewer(
        "bypass node access",
        "create content translations",
        "update content translations",
        "delete content translations",
        "translate any entity",
    )
    kinds = set(_kinds(make_orchestrator().operations_for(item, viewer, "en", target)))
    assert not (LinkKind.ADD in kinds and kinds & {LinkKind.EDIT, LinkKind.DELETE})


def test_operations_are_idempotent() -> None:
    item = make_item(translations=["fr"])
    viewer = make_viewer("update content translations", "translate any entity")
    orchestrator = make_orchestrator(append_destination=True)

    first = orchestrator.operations_for(item, viewer, "en", "fr", destination="/list")
    second = orchestrator.operations_for(item, viewer, "en", "fr", destination="/list")
    assert first == second


@pytest.mark.parametrize("target", [None, "", "not a language"])
def test_invalid_target_yields_no_links(target: str | None) -> None:
    viewer = make_viewer("bypass node access", "create content translations", "translate any entity")
    assert make_orchestrator().operations_for(make_item(), viewer, "en", target) == []


def test_non_canonical_target_never_offers_duplicate_add() -> None:
    """目标写成 FR 时与已存在的 fr 翻译是同一语言，不能因为大小写不同而提供新增链接。"""
    item = make_item(translations=["fr"])
    viewer = make_viewer(
        "create content translations", "update content translations", "translate any entity"
    )
    orchestrator = make_orchestrator()

    assert orchestrator.operations_for(item, viewer, "en", "FR") == []
    assert orchestrator.operations_for(item, viewer, "en", "en_GB") == []
    assert _kinds(orchestrator.operations_for(item, viewer, "en", "fr")) == [LinkKind.EDIT]


def test_add_source_falls_back_to_default_language() -> None:
    """来源语言没有翻译时，新增翻译以默认语言为来源。"""
    viewer = make_viewer("create content translations", "translate any entity")
    links = make_orchestrator().operations_for(make_item(), viewer, "it", "de")
    assert links[0].route_parameters["source"] == "en"


def test_add_source_uses_row_language_when_translated() -> None:
    viewer = make_viewer("create content translations", "translate any entity")
    links = make_orchestrator().operations_for(make_item(translations=["fr"]), viewer, "fr", "de")
    assert links[0].url == "/de/node/1/translations/add/fr/de"


def test_pending_revision_offers_edit() -> None:
    """翻译只存在于尚未发布的修订中时，提供编辑链接而不是新增链接。"""
    store = InMemoryEntityStore()
    item = make_item()
    store.add(item)
    store.add_revision(
        item,
        Revision(revision_id=2, is_default_revision=False, translation_langcodes=frozenset({"en", "de"})),
        affected=["de"],
    )
    viewer = make_viewer(
        "create content translations", "update content translations", "translate article node"
    )

    links = make_orchestrator(store=store, revisions_enabled=True).operations_for(
        item, viewer, "en", "de"
    )
    assert _kinds(links) == [LinkKind.EDIT]
    assert links[0].url == "/de/node/1/translations/edit/de"

    without_revisions = make_orchestrator(store=store).operations_for(item, viewer, "en", "de")
    assert _kinds(without_revisions) == [LinkKind.ADD]


def test_create_orchestrator_with_translators_provider() -> None:
    skills = InMemorySkillRegistry()
    skills.add_skill("translator", "en", "fr")
    config = TranslationViewsConfig(
        permission_provider=PermissionProviderName.TRANSLATORS,
        append_destination=False,
    )
    orchestrator = create_orchestrator(
        config,
        store=InMemoryEntityStore(),
        entity_access=PermissionEntityAccess(),
        routes=PathRouteBuilder("en"),
        skills=skills,
    )
    viewer = make_viewer(
        "translators_content create content translations",
        "translators_content update content translations",
        "translators_content delete content translations",
        "translate any entity",
        viewer_id="translator",
    )

    item = make_item()
    assert _kinds(orchestrator.operations_for(item, viewer, "en", "fr")) == [LinkKind.ADD]
    assert orchestrator.operations_for(item, viewer, "en", "de") == []

    translated = make_item(translations=["fr", "de"])
    assert _kinds(orchestrator.operations_for(translated, viewer, "en", "fr")) == [
        LinkKind.EDIT,
        LinkKind.DELETE,
    ]
    assert orchestrator.operations_for(translated, viewer, "en", "de") == []


def test_create_orchestrator_appends_destination_by_default() -> None:
    orchestrator = create_orchestrator(
        TranslationViewsConfig(),
        store=InMemoryEntityStore(),
        entity_access=PermissionEntityAccess(),
        routes=PathRouteBuilder("en"),
    )
    viewer = make_viewer("bypass node access")
    links = orchestrator.operations_for(make_item(), viewer, "en", "en", destination="/admin")
    assert all(link.query == {"destination": "/admin"} for link in links)
    assert len(links) == 2
