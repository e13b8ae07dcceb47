# translation_views/cli/operations.py
"""'operations' 子命令：按夹具渲染翻译管理列表及每行的操作链接。"""

import enum
import json
from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from translation_views.cli.state import State
from translation_views.cli.utils import (
    console,
    create_fixture_orchestrator,
    fail,
    load_bundle_or_exit,
)
from translation_views.core import TranslationViewsError
from translation_views.listing import RenderedRow, build_rows, render_listing
from translation_views.memory import StaticLanguageRegistry
from translation_views.target_language import (
    TARGET_EXPOSED_KEY,
    build_language_options,
    normalize_exposed_input,
    resolve_target_language,
)


class StatusFilter(str, enum.Enum):
    ALL = "all"
    TRANSLATED = "translated"
    UNTRANSLATED = "untranslated"


def _rows_as_json(rows: list[RenderedRow]) -> str:
    payload = [
        {
            "id": r.row.item.id,
            "entity_type": r.row.item.entity_type_id,
            "langcode": r.row.langcode,
            "translated": r.translated,
            "translation_count": r.translation_count,
            "operations": [
                {"kind": op.kind.value, "title": op.title, "url": op.url}
                for op in r.operations
            ],
        }
        for r in rows
    ]
    return json.dumps(payload, ensure_ascii=False, indent=2)


def _rows_as_table(rows: list[RenderedRow], target_langcode: str) -> Table:
    table = Table(title=f"目标语言: {target_langcode}")
    table.add_column("ID", style="cyan")
    table.add_column("行语言")
    table.add_column("已翻译")
    table.add_column("翻译数", justify="right")
    table.add_column("操作")
    for r in rows:
        table.add_row(
            f"{r.row.item.entity_type_id}:{r.row.item.id}",
            r.row.langcode,
            "✅" if r.translated else "—",
            str(r.translation_count),
            "\n".join(f"{op.title} → {op.url}" for op in r.operations) or "-",
        )
    return table


def operations(
    ctx: typer.Context,
    fixture: Annotated[Path, typer.Argument(help="JSON 夹具文件路径。")],
    viewer_id: Annotated[str, typer.Option("--viewer", "-u", help="当前用户 ID。")],
    target: Annotated[
        str | None,
        typer.Option("--target", "-t", help="目标语言代码，缺省为站点默认语言。"),
    ] = None,
    row_langcode: Annotated[
        str,
        typer.Option("--row-lang", help="行语言；'default' 表示每个条目的原始语言。"),
    ] = "default",
    status: Annotated[
        StatusFilter, typer.Option("--status", help="按翻译状态筛选。")
    ] = StatusFilter.ALL,
    destination: Annotated[
        str | None, typer.Option("--destination", help="操作完成后返回的地址。")
    ] = None,
    as_json: Annotated[bool, typer.Option("--json", help="以 JSON 输出。")] = False,
) -> None:
    """渲染翻译管理列表，每行附带 Edit / Delete / Add 链接。"""
    state: State = ctx.obj
    config = state.config
    bundle = load_bundle_or_exit(fixture)
    languages = StaticLanguageRegistry(config.site_default_language, config.languages)

    try:
        viewer = bundle.viewer(viewer_id)
        exposed = {TARGET_EXPOSED_KEY: target} if target else {}
        options = build_language_options(
            languages, config.target_language, bundle.skills.get_skills(viewer.id)
        )
        exposed = normalize_exposed_input(
            exposed, options, languages, config.target_language
        )
        target_langcode = resolve_target_language(exposed, languages)
        if target_langcode is None:
            raise typer.BadParameter("没有可用的目标语言。", param_hint="--target")

        orchestrator = create_fixture_orchestrator(config, bundle)
        rows = render_listing(
            build_rows(bundle.store.items(), row_langcode),
            viewer,
            orchestrator,
            target_langcode,
            translated=None
            if status is StatusFilter.ALL
            else status is StatusFilter.TRANSLATED,
            remove_source=config.target_language.remove_source_rows,
            destination=destination,
        )
    except TranslationViewsError as e:
        fail(e)

    if as_json:
        typer.echo(_rows_as_json(rows))
    else:
        console.print(_rows_as_table(rows, target_langcode))
