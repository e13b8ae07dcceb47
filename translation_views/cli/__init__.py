# translation_views/cli/__init__.py
"""translation-views CLI 模块入口。"""

from .main import app

__all__ = ["app"]
