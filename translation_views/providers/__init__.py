# translation_views/providers/__init__.py
"""本模块作为权限提供者的公共入口，导出各提供者以及工厂函数。"""

import structlog

from translation_views.config import PermissionProviderName, TranslationViewsConfig
from translation_views.core.exceptions import ConfigurationError
from translation_views.core.interfaces import PermissionProvider, SkillRegistry

from .content_translation import ContentTranslationProvider, has_translate_permission
from .skills import LocalTranslationProvider, TranslatorsProvider

logger = structlog.get_logger(__name__)


def create_permission_provider(
    config: TranslationViewsConfig, skills: SkillRegistry | None = None
) -> PermissionProvider:
    """
    根据配置创建并返回唯一生效的权限提供者。
    这是选择提供者变体的唯一入口，每次组装只调用一次。
    """
    name = config.permission_provider
    provider: PermissionProvider

    if name is PermissionProviderName.CONTENT_TRANSLATION:
        provider = ContentTranslationProvider()
    elif skills is None:
        raise ConfigurationError(f"权限提供者 '{name.value}' 需要一个技能注册表。")
    elif name is PermissionProviderName.LOCAL_TRANSLATION:
        provider = LocalTranslationProvider(skills, config.skill_cache)
    elif name is PermissionProviderName.TRANSLATORS:
        provider = TranslatorsProvider(skills, config.skill_cache)
    else:
        raise ConfigurationError(f"不支持的权限提供者: '{name}'")

    logger.debug("权限提供者已选定。", provider=provider.name)
    return provider


__all__ = [
    "create_permission_provider",
    "ContentTranslationProvider",
    "LocalTranslationProvider",
    "TranslatorsProvider",
    "has_translate_permission",
]
