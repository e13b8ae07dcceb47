# translation_views/access.py
"""本模块包含访问评估器：根据翻译状态决定 create/update/delete 是否被允许。"""

from __future__ import annotations

import structlog

from translation_views.core import (
    AccessDecision,
    EntityAccessHandler,
    Operation,
    PermissionProvider,
    TranslatableItem,
    TranslationState,
    Viewer,
)
from translation_views.providers import ContentTranslationProvider

logger = structlog.get_logger(__name__)

ENTITY_LINK_TEMPLATES: dict[Operation, str] = {
    Operation.UPDATE: "edit-form",
    Operation.DELETE: "delete-form",
}
"""默认语言行上，update/delete 所需要的实体链接模板。"""


class AccessEvaluator:
    """
    按固定优先级对每个操作求值，结果只是建议性的布尔值。

    1. 目标语言是默认语言：update/delete 取决于粗粒度的实体访问检查，
       且实体类型必须有对应的 edit-form / delete-form 链接模板。
    2. 目标语言是已存在的翻译：update/delete 交给唯一生效的权限提供者。
    3. 翻译不存在：若存在待定修订则按第 2 条评估 update；
       否则在条目可翻译且目标语言有效时评估 create。

    未传入提供者时视为没有启用技能型提供者，回退到内容翻译权限检查。
    """

    def __init__(
        self,
        entity_access: EntityAccessHandler,
        provider: PermissionProvider | None = None,
    ):
        self.entity_access = entity_access
        self.provider = provider or ContentTranslationProvider()

    def evaluate(
        self,
        item: TranslatableItem,
        viewer: Viewer,
        source_langcode: str | None,
        target_langcode: str | None,
        state: TranslationState,
    ) -> AccessDecision:
        if not target_langcode:
            return AccessDecision(source_langcode=source_langcode)

        allowed: dict[str, bool] = {}
        if state.is_default:
            allowed["update"] = self._entity_access(item, viewer, Operation.UPDATE)
            allowed["delete"] = self._entity_access(item, viewer, Operation.DELETE)
        elif state.exists:
            allowed["update"] = self._translation_access(
                item, viewer, Operation.UPDATE, target_langcode
            )
            allowed["delete"] = self._translation_access(
                item, viewer, Operation.DELETE, target_langcode
            )
        elif state.has_pending_revision:
            allowed["update"] = self._translation_access(
                item, viewer, Operation.UPDATE, target_langcode
            )
        elif item.is_translatable:
            allowed["create"] = self._translation_access(
                item, viewer, Operation.CREATE, target_langcode, source_langcode
            )

        decision = AccessDecision(
            source_langcode=source_langcode,
            target_langcode=target_langcode,
            **allowed,
        )
        logger.debug(
            "访问评估完成",
            item_id=item.id,
            target_langcode=target_langcode,
            provider=self.provider.name,
            create=decision.create,
            update=decision.update,
            delete=decision.delete,
        )
        return decision

    def _entity_access(
        self, item: TranslatableItem, viewer: Viewer, operation: Operation
    ) -> bool:
        template = ENTITY_LINK_TEMPLATES[operation]
        if not item.entity_type.has_link_template(template):
            return False
        return self.entity_access.access(item, operation, viewer)

    def _translation_access(
        self,
        item: TranslatableItem,
        viewer: Viewer,
        operation: Operation,
        target_langcode: str,
        source_langcode: str | None = None,
    ) -> bool:
        if operation is not Operation.CREATE:
            source_langcode = None
        return self.provider.check(
            item, viewer, operation, target_langcode, source_langcode
        )
