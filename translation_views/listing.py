# translation_views/listing.py
"""
列表层辅助函数：翻译状态、翻译计数、行筛选，以及逐行调用编排器。
行只是 (条目, 行语言) 对，分页和查询构建不在本项目范围内。
"""

from __future__ import annotations

from collections.abc import Iterable

import structlog
from pydantic import BaseModel, ConfigDict, Field

from translation_views.core import OperationLink, TranslatableItem, Viewer
from translation_views.operations import OperationOrchestrator

logger = structlog.get_logger(__name__)


class ListingRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    item: TranslatableItem
    langcode: str


class RenderedRow(BaseModel):
    row: ListingRow
    translated: bool
    translation_count: int
    operations: list[OperationLink] = Field(default_factory=list)


def translation_status(item: TranslatableItem, target_langcode: str | None) -> bool:
    """条目是否已翻译为目标语言。"""
    return item.has_translation(target_langcode)


def translation_count(item: TranslatableItem) -> int:
    """翻译数量，不计默认语言。"""
    return sum(
        1 for code in item.translation_langcodes() if code != item.default_langcode
    )


def build_rows(
    items: Iterable[TranslatableItem], row_langcode: str | None = None
) -> list[ListingRow]:
    """
    每个已存在的翻译对应一行；指定 `row_langcode` 时只保留该语言的行
    （`row_langcode` 为 "default" 时取每个条目的默认语言）。
    """
    rows: list[ListingRow] = []
    for item in items:
        if row_langcode == "default":
            rows.append(ListingRow(item=item, langcode=item.default_langcode))
        elif row_langcode is not None:
            if item.has_translation(row_langcode):
                rows.append(ListingRow(item=item, langcode=row_langcode))
        else:
            rows.extend(
                ListingRow(item=item, langcode=code)
                for code in item.translation_langcodes()
            )
    return rows


def filter_by_status(
    rows: Iterable[ListingRow], target_langcode: str | None, translated: bool
) -> list[ListingRow]:
    return [
        row
        for row in rows
        if translation_status(row.item, target_langcode) is translated
    ]


def remove_source_rows(
    rows: Iterable[ListingRow], target_langcode: str | None
) -> list[ListingRow]:
    """移除行语言与目标语言相同的行。"""
    return [row for row in rows if row.langcode != target_langcode]


def render_listing(
    rows: Iterable[ListingRow],
    viewer: Viewer,
    orchestrator: OperationOrchestrator,
    target_langcode: str | None,
    *,
    translated: bool | None = None,
    remove_source: bool = True,
    destination: str | None = None,
) -> list[RenderedRow]:
    """对筛选后的每一行独立求值，行与行之间没有共享状态。"""
    selected = list(rows)
    if remove_source:
        selected = remove_source_rows(selected, target_langcode)
    if translated is not None:
        selected = filter_by_status(selected, target_langcode, translated)

    rendered = [
        RenderedRow(
            row=row,
            translated=translation_status(row.item, target_langcode),
            translation_count=translation_count(row.item),
            operations=orchestrator.operations_for(
                row.item,
                viewer,
                row.langcode,
                target_langcode,
                destination=destination,
            ),
        )
        for row in selected
    ]
    logger.debug(
        "列表渲染完成", target_langcode=target_langcode, rows=len(rendered)
    )
    return rendered
