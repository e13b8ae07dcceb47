# translation_views/core/__init__.py
"""
本核心包定义了 translation-views 中最基础、最稳定的构建块。

这里包含了系统的核心数据类型、接口协议和自定义异常，它们共同构成了
整个应用的“契约”。所有其他模块都依赖于此核心包，但本包不依赖于
项目中的任何其他模块。
"""

from .exceptions import (
    ConfigurationError,
    EntityNotFoundError,
    FixtureError,
    RouteNotFoundError,
    TranslationViewsError,
)
from .interfaces import (
    EntityAccessHandler,
    EntityStore,
    LanguageRegistry,
    PermissionProvider,
    RouteBuilder,
    SkillRegistry,
    Viewer,
)
from .types import (
    LINK_OPERATIONS,
    AccessDecision,
    EntityTypeInfo,
    LanguageSkill,
    LinkKind,
    Operation,
    OperationLink,
    Revision,
    RevisionState,
    TranslatableItem,
    TranslationState,
)

__all__ = [
    # from exceptions.py
    "TranslationViewsError",
    "ConfigurationError",
    "EntityNotFoundError",
    "RouteNotFoundError",
    "FixtureError",
    # from interfaces.py
    "Viewer",
    "EntityStore",
    "EntityAccessHandler",
    "PermissionProvider",
    "SkillRegistry",
    "RouteBuilder",
    "LanguageRegistry",
    # from types.py
    "Operation",
    "LinkKind",
    "LINK_OPERATIONS",
    "EntityTypeInfo",
    "TranslatableItem",
    "Revision",
    "RevisionState",
    "TranslationState",
    "AccessDecision",
    "OperationLink",
    "LanguageSkill",
]
