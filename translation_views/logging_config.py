# translation_views/logging_config.py
"""
本模块负责集中配置项目的日志系统。
console 格式使用 Rich 渲染为紧凑的单行加键值表格，json 格式用于生产环境。
"""

import logging
from collections.abc import MutableMapping
from typing import Any, Literal

import structlog
from rich.console import Console, Group, RenderableType
from rich.table import Table
from rich.text import Text
from structlog.typing import Processor

APP_LOGGER_NAME = "translation_views"


class RichLineRenderer:
    """
    一个 structlog 处理器，把事件渲染为带颜色级别标签的一行，
    附带的上下文键值对以对齐的表格形式跟在下面。
    """

    _LEVEL_STYLES = {
        "debug": ("blue", "DEBUG   "),
        "info": ("green", "INFO    "),
        "warning": ("yellow", "WARNING "),
        "error": ("bold red", "ERROR   "),
        "critical": ("bold magenta", "CRITICAL"),
    }

    def __init__(
        self,
        show_timestamp: bool = True,
        show_logger_name: bool = True,
        kv_truncate_at: int = 80,
        kv_key_width: int = 18,
    ):
        self._console = Console(stderr=True)
        self._show_timestamp = show_timestamp
        self._show_logger_name = show_logger_name
        self._kv_truncate_at = kv_truncate_at
        self._kv_key_width = kv_key_width

    def __call__(
        self, logger: Any, name: str, event_dict: MutableMapping[str, Any]
    ) -> str:
        event = str(event_dict.pop("event", "")).strip()
        if not event:
            return ""

        timestamp = event_dict.pop("timestamp", "")
        level = str(event_dict.pop("level", "info")).lower()
        logger_name = event_dict.pop("logger", "unknown")
        style, level_text = self._LEVEL_STYLES.get(level, ("default", level.upper()))

        head = Text()
        if self._show_timestamp and timestamp:
            head.append(f"{timestamp} ", style="dim")
        head.append(level_text, style=style)
        head.append(f" {event}")
        if self._show_logger_name:
            head.append(f" ({logger_name})", style="cyan dim")

        renderables: list[RenderableType] = [head]
        if event_dict:
            renderables.append(self._render_kv(event_dict))

        with self._console.capture() as capture:
            self._console.print(Group(*renderables))
        return capture.get().rstrip()

    def _render_kv(self, kv: MutableMapping[str, Any]) -> Table:
        table = Table(show_header=False, show_edge=False, box=None, padding=(0, 1))
        table.add_column(style="dim", justify="right", width=self._kv_key_width)
        table.add_column(overflow="fold")
        for key, value in sorted(kv.items()):
            value_repr = repr(value)
            if len(value_repr) > self._kv_truncate_at:
                value_repr = value_repr[: self._kv_truncate_at] + "…"
            table.add_row(f"{key} :", Text(value_repr))
        return table


def setup_logging(
    log_level: str = "INFO",
    log_format: Literal["json", "console"] = "console",
    show_timestamp: bool = True,
    show_logger_name: bool = True,
) -> None:
    """
    配置全局的 structlog 日志系统。这是整个应用的日志配置入口。

    Args:
        log_level: 应用日志记录器的最低级别 (DEBUG, INFO, WARNING, ERROR, CRITICAL)。
        log_format: 'console' 用于开发环境的 Rich 输出，'json' 用于机器可读输出。
        show_timestamp: console 模式下是否显示时间戳。
        show_logger_name: console 模式下是否显示记录器名称。

    """
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", utc=False),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if log_format == "console":
        processors.append(
            RichLineRenderer(
                show_timestamp=show_timestamp, show_logger_name=show_logger_name
            )
        )
    else:
        processors[3] = structlog.processors.TimeStamper(fmt="iso", utc=True)
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()

    class PassthroughFormatter(logging.Formatter):
        """直接传递 structlog 已经渲染好的字符串。"""

        def format(self, record: logging.LogRecord) -> str:
            return str(record.getMessage())

    handler.setFormatter(PassthroughFormatter())

    root_logger = logging.getLogger()
    if root_logger.hasHandlers():
        root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)  # 屏蔽第三方库的噪音

    app_logger = logging.getLogger(APP_LOGGER_NAME)
    app_logger.setLevel(log_level.upper())
    app_logger.propagate = True

    structlog.get_logger("translation_views.logging_config").debug(
        "日志系统已配置完成。",
        log_format=log_format,
        app_log_level=log_level.upper(),
    )
