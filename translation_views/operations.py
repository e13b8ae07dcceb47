# translation_views/operations.py
"""本模块包含操作编排器：为列表中的一行组装有序的翻译操作链接。"""

from __future__ import annotations

import structlog

from translation_views.access import AccessEvaluator
from translation_views.config import TranslationViewsConfig
from translation_views.core import (
    LINK_OPERATIONS,
    EntityAccessHandler,
    EntityStore,
    LinkKind,
    OperationLink,
    RouteBuilder,
    SkillRegistry,
    TranslatableItem,
    Viewer,
)
from translation_views.links import LinkBuilder
from translation_views.providers import create_permission_provider
from translation_views.state import TranslationStateResolver
from translation_views.utils import is_canonical_lang_code

logger = structlog.get_logger(__name__)

LINK_ORDER: tuple[LinkKind, ...] = (LinkKind.EDIT, LinkKind.DELETE, LinkKind.ADD)


class OperationOrchestrator:
    """
    解析状态 -> 评估访问 -> 构建链接。

    不持有任何可变状态，对相同输入是幂等的；
    add 只在翻译不存在时出现，因此不会与 edit/delete 同时出现。
    """

    def __init__(
        self,
        resolver: TranslationStateResolver,
        evaluator: AccessEvaluator,
        links: LinkBuilder,
    ):
        self.resolver = resolver
        self.evaluator = evaluator
        self.links = links

    def operations_for(
        self,
        item: TranslatableItem,
        viewer: Viewer,
        source_langcode: str | None,
        target_langcode: str | None,
        destination: str | None = None,
    ) -> list[OperationLink]:
        if not is_canonical_lang_code(target_langcode):
            return []
        state = self.resolver.resolve(item, target_langcode)

        # 新增翻译只能以已存在的语言版本为来源
        source = source_langcode
        if not source or not item.has_translation(source):
            source = item.default_langcode

        decision = self.evaluator.evaluate(item, viewer, source, target_langcode, state)

        operations = [
            self.links.build(
                kind, item, state, source, target_langcode, destination=destination
            )
            for kind in LINK_ORDER
            if decision.allows(LINK_OPERATIONS[kind])
        ]
        logger.debug(
            "操作链接已生成",
            item_id=item.id,
            viewer_id=viewer.id,
            target_langcode=target_langcode,
            links=[link.kind.value for link in operations],
        )
        return operations


def create_orchestrator(
    config: TranslationViewsConfig,
    *,
    store: EntityStore,
    entity_access: EntityAccessHandler,
    routes: RouteBuilder,
    skills: SkillRegistry | None = None,
) -> OperationOrchestrator:
    """
    根据配置组装编排器。
    提供者变体、修订支持和返回地址开关都在这里一次性决定，之后逐行复用。
    """
    provider = create_permission_provider(config, skills)
    return OperationOrchestrator(
        resolver=TranslationStateResolver(store, config.revisions_enabled),
        evaluator=AccessEvaluator(entity_access, provider),
        links=LinkBuilder(routes, append_destination=config.append_destination),
    )
