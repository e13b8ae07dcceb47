# translation_views/links.py
"""本模块负责为已被允许的操作构建结构化的链接描述。"""

from __future__ import annotations

from translation_views.core import (
    LinkKind,
    OperationLink,
    RouteBuilder,
    TranslatableItem,
    TranslationState,
)

LINK_TITLES: dict[LinkKind, str] = {
    LinkKind.ADD: "Add",
    LinkKind.EDIT: "Edit",
    LinkKind.DELETE: "Delete",
}

DESTINATION_QUERY_KEY = "destination"


class LinkBuilder:
    """
    两种地址模式：默认语言的编辑/删除指向实体自身的表单，
    翻译行的编辑/删除以及新增翻译指向专门的翻译管理路由。

    本类从不判断权限，只为访问评估器已允许的操作生成链接。
    """

    def __init__(self, routes: RouteBuilder, append_destination: bool = False):
        self.routes = routes
        self.append_destination = append_destination

    def build(
        self,
        kind: LinkKind,
        item: TranslatableItem,
        state: TranslationState,
        source_langcode: str,
        target_langcode: str,
        destination: str | None = None,
    ) -> OperationLink:
        entity_type_id = item.entity_type_id

        if kind is LinkKind.ADD:
            route_name = f"entity.{entity_type_id}.content_translation_add"
            parameters = {
                entity_type_id: item.id,
                "source": source_langcode,
                "target": target_langcode,
            }
        elif state.is_default:
            form = "edit_form" if kind is LinkKind.EDIT else "delete_form"
            route_name = f"entity.{entity_type_id}.{form}"
            parameters = {entity_type_id: item.id}
        else:
            action = "edit" if kind is LinkKind.EDIT else "delete"
            route_name = f"entity.{entity_type_id}.content_translation_{action}"
            parameters = {entity_type_id: item.id, "language": target_langcode}

        query: dict[str, str] = {}
        if self.append_destination and destination:
            query[DESTINATION_QUERY_KEY] = destination

        return OperationLink(
            kind=kind,
            url=self.routes.url(
                route_name, parameters, language=target_langcode, query=query
            ),
            language=target_langcode,
            title=LINK_TITLES[kind],
            route_name=route_name,
            route_parameters=parameters,
            query=query,
        )
