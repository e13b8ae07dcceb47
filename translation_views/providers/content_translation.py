# translation_views/providers/content_translation.py
"""与语言无关的内容翻译权限检查。"""

from __future__ import annotations

from translation_views.core import Operation, TranslatableItem, Viewer

TRANSLATE_ANY_PERMISSION = "translate any entity"


def translate_permission_name(item: TranslatableItem) -> str | None:
    """
    按实体类型的权限粒度返回所需的“翻译”权限名称。
    粒度为 None 的实体类型不需要单独的翻译权限。
    """
    granularity = item.entity_type.permission_granularity
    if granularity == "bundle":
        return f"translate {item.bundle} {item.entity_type_id}"
    if granularity == "entity_type":
        return f"translate {item.entity_type_id}"
    return None


def has_translate_permission(item: TranslatableItem, viewer: Viewer) -> bool:
    if viewer.has_permission(TRANSLATE_ANY_PERMISSION):
        return True
    permission = translate_permission_name(item)
    return permission is None or viewer.has_permission(permission)


class ContentTranslationProvider:
    """
    默认提供者：要求用户既有翻译权限，又有 "{op} content translations" 权限。
    不区分源语言和目标语言。
    """

    name = "content_translation"

    def check(
        self,
        item: TranslatableItem,
        viewer: Viewer,
        operation: Operation,
        target_langcode: str,
        source_langcode: str | None = None,
    ) -> bool:
        return has_translate_permission(item, viewer) and viewer.has_permission(
            f"{operation.value} content translations"
        )
