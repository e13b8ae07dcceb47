# translation_views/cli/utils.py
"""提供 CLI 命令使用的共享工具函数。"""

from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console

from translation_views.config import TranslationViewsConfig
from translation_views.core import TranslationViewsError
from translation_views.fixtures import FixtureBundle, load_fixture
from translation_views.memory import PathRouteBuilder, PermissionEntityAccess
from translation_views.operations import OperationOrchestrator, create_orchestrator

console = Console()


def load_bundle_or_exit(path: Path) -> FixtureBundle:
    try:
        return load_fixture(path)
    except TranslationViewsError as e:
        console.print(f"[bold red]❌ 加载夹具失败: {e}[/bold red]")
        raise typer.Exit(code=1) from e


def create_fixture_orchestrator(
    config: TranslationViewsConfig, bundle: FixtureBundle
) -> OperationOrchestrator:
    """
    用夹具中的内存后端组装编排器。
    这是 CLI 中创建编排器的唯一入口。
    """
    return create_orchestrator(
        config,
        store=bundle.store,
        entity_access=PermissionEntityAccess(),
        routes=PathRouteBuilder(config.site_default_language),
        skills=bundle.skills,
    )


def fail(error: Exception) -> NoReturn:
    """打印错误并以退出码 1 结束命令。"""
    console.print(f"[bold red]❌ {error}[/bold red]")
    raise typer.Exit(code=1) from error
