# translation_views/state.py
"""本模块负责解析某个条目在目标语言上的翻译状态。"""

from __future__ import annotations

import structlog

from translation_views.core import (
    EntityStore,
    RevisionState,
    TranslatableItem,
    TranslationState,
)

logger = structlog.get_logger(__name__)


class TranslationStateResolver:
    """
    计算 {exists, is_default, has_pending_revision}。

    待定修订检查只在组装阶段开启了修订支持、且实体类型支持修订时才会执行。
    缺失或无效的语言代码一律按“不存在”处理，本解析器从不抛出异常。
    """

    def __init__(self, store: EntityStore | None = None, revisions_enabled: bool = False):
        self.store = store
        self.revisions_enabled = revisions_enabled and store is not None

    def resolve(
        self, item: TranslatableItem, target_langcode: str | None
    ) -> TranslationState:
        if not isinstance(target_langcode, str) or not target_langcode:
            return TranslationState()

        exists = item.has_translation(target_langcode)
        is_default = target_langcode == item.default_langcode
        pending = False
        if self.revisions_enabled and item.entity_type.revisionable:
            pending = self.revision_state(item, target_langcode).pending

        return TranslationState(
            exists=exists, is_default=is_default, has_pending_revision=pending
        )

    def revision_state(self, item: TranslatableItem, langcode: str) -> RevisionState:
        """查询影响该语言的最新修订，判断它是否尚未成为默认修订。"""
        state = RevisionState(item_id=item.id, langcode=langcode)
        if self.store is None:
            return state

        try:
            latest_id = self.store.get_latest_translation_affected_revision_id(
                item, langcode
            )
            if latest_id is None:
                return state
            revision = self.store.load_revision(item, latest_id)
        except Exception:
            logger.warning(
                "查询最新修订失败，按无待定修订处理",
                item_id=item.id,
                langcode=langcode,
                exc_info=True,
            )
            return state

        if revision is None:
            return state.model_copy(update={"latest_revision_id": latest_id})

        # 草稿中已删除该语言时，没有可编辑的待定翻译
        pending = langcode in revision.translation_langcodes and (
            not revision.is_default_revision or not item.has_translation(langcode)
        )
        return state.model_copy(
            update={"latest_revision_id": latest_id, "pending": pending}
        )
