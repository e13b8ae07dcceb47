# translation_views/cli/main.py
"""translation-views CLI 的主入口点。"""

from typing import Annotated

import typer
from rich.console import Console

import translation_views
from translation_views.cli.languages import languages
from translation_views.cli.operations import operations
from translation_views.cli.state import State
from translation_views.config import TranslationViewsConfig
from translation_views.logging_config import setup_logging

app = typer.Typer(
    name="translation-views",
    help="🌐 translation-views: 翻译管理列表的操作链接决策引擎。",
    add_completion=False,
    no_args_is_help=True,
)

app.command("operations")(operations)
app.command("languages")(languages)

console = Console()


def version_callback(value: bool) -> None:
    """处理 --version 选项的回调函数。"""
    if value:
        console.print(
            f"translation-views [bold cyan]v{translation_views.__version__}[/bold cyan]"
        )
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="显示版本信息并退出。",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """主回调函数，在任何子命令执行前加载配置并配置日志。"""
    try:
        config = TranslationViewsConfig()
        setup_logging(log_level=config.logging.level, log_format=config.logging.format)
        ctx.obj = State(config=config)
    except Exception as e:
        console.print("[bold red]❌ 启动失败：无法加载配置或初始化日志。[/bold red]")
        console.print(f"[dim]{e}[/dim]")
        raise typer.Exit(code=1) from e
