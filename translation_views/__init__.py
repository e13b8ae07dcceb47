# translation_views/__init__.py
"""translation-views: 翻译管理列表的操作链接决策引擎。

给定内容条目、当前用户、源语言和目标语言，决定该行应显示哪些
翻译管理链接（Edit / Delete / Add），并提供驱动它的列表层辅助函数。
"""

__version__ = "1.0.0"

from .access import AccessEvaluator
from .config import PermissionProviderName, TranslationViewsConfig
from .links import LinkBuilder
from .operations import OperationOrchestrator, create_orchestrator
from .state import TranslationStateResolver

__all__ = [
    "__version__",
    "AccessEvaluator",
    "LinkBuilder",
    "OperationOrchestrator",
    "PermissionProviderName",
    "TranslationStateResolver",
    "TranslationViewsConfig",
    "create_orchestrator",
]
