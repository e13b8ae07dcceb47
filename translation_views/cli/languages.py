# translation_views/cli/languages.py
"""'languages' 子命令：列出目标语言选择器的选项。"""

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from translation_views.cli.state import State
from translation_views.cli.utils import console, fail, load_bundle_or_exit
from translation_views.core import TranslationViewsError
from translation_views.memory import StaticLanguageRegistry
from translation_views.target_language import build_language_options


def languages(
    ctx: typer.Context,
    fixture: Annotated[Path, typer.Argument(help="JSON 夹具文件路径。")],
    viewer_id: Annotated[
        str | None, typer.Option("--viewer", "-u", help="按该用户的翻译技能限制。")
    ] = None,
    limit: Annotated[
        bool | None,
        typer.Option("--limit/--no-limit", help="覆盖配置中的 limit_by_skills。"),
    ] = None,
) -> None:
    """列出目标语言下拉框中的选项。"""
    state: State = ctx.obj
    config = state.config
    filter_config = config.target_language
    if limit is not None:
        filter_config = filter_config.model_copy(update={"limit_by_skills": limit})

    bundle = load_bundle_or_exit(fixture)
    registry = StaticLanguageRegistry(config.site_default_language, config.languages)
    try:
        skills = bundle.skills.get_skills(bundle.viewer(viewer_id).id) if viewer_id else []
    except TranslationViewsError as e:
        fail(e)

    options = build_language_options(registry, filter_config, skills)
    table = Table(title="目标语言选项")
    table.add_column("值", style="cyan")
    table.add_column("名称")
    for value, name in options.items():
        table.add_row(value, name)
    console.print(table)
