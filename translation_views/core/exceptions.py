# translation_views/core/exceptions.py
"""
本模块定义了 translation-views 项目中所有自定义的、语义化的异常类型。

注意：链接决策流程本身从不抛出异常（任何未被授予的操作都视为拒绝），
这些异常只用于外层：配置、夹具加载、路由渲染以及调用方的实体加载。
"""


class TranslationViewsError(Exception):
    """
    所有 translation-views 自定义异常的通用基类。
    捕获此异常可以处理所有源自本项目的预期错误。
    """

    pass


class ConfigurationError(TranslationViewsError):
    """
    表示在加载、解析或组装配置时发生的错误。
    例如，选择了技能型权限提供者却没有提供技能注册表。
    """

    pass


class EntityNotFoundError(TranslationViewsError, KeyError):
    """
    表示调用方尝试加载一个不存在的内容实体。
    继承自 KeyError 是为了保持与字典查找行为的一致性。
    """

    pass


class RouteNotFoundError(TranslationViewsError, KeyError):
    """表示路由构建器不认识给定的路由名称。"""

    pass


class FixtureError(TranslationViewsError):
    """表示 CLI 使用的 JSON 夹具文件缺失或格式不正确。"""

    pass
