# translation_views/core/types.py
"""
本模块定义了 translation-views 系统的核心数据类型。
所有对象都是请求范围内的瞬时对象，本项目不拥有任何持久化存储。
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Operation(str, Enum):
    """翻译访问检查所针对的操作。"""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class LinkKind(str, Enum):
    """操作链接的种类，声明顺序即渲染顺序。"""

    EDIT = "edit"
    DELETE = "delete"
    ADD = "add"


LINK_OPERATIONS: dict[LinkKind, Operation] = {
    LinkKind.EDIT: Operation.UPDATE,
    LinkKind.DELETE: Operation.DELETE,
    LinkKind.ADD: Operation.CREATE,
}
"""每种链接所需要的访问操作。"""


class EntityTypeInfo(BaseModel):
    """实体类型的元信息：可用的链接模板、是否可翻译、是否支持修订。"""

    model_config = ConfigDict(frozen=True)

    id: str
    link_templates: frozenset[str] = frozenset({"canonical", "edit-form", "delete-form"})
    translatable: bool = True
    revisionable: bool = False
    permission_granularity: Literal["bundle", "entity_type"] | None = "bundle"

    def has_link_template(self, name: str) -> bool:
        return name in self.link_templates


class TranslatableItem(BaseModel):
    """
    一个可翻译的内容条目。

    `translations` 是语言代码到“翻译是否存在”的映射；
    默认（原始）语言始终映射为 True，由校验器保证。
    """

    model_config = ConfigDict(frozen=True)

    id: str
    entity_type: EntityTypeInfo
    bundle: str
    default_langcode: str
    translations: dict[str, bool] = Field(default_factory=dict)
    owner_id: str | None = None
    translatable: bool = True

    @model_validator(mode="before")
    @classmethod
    def ensure_default_translation(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("default_langcode"):
            default = data["default_langcode"]
            # 默认语言排在最前，行和语言列表总是先列出源语言
            translations = {
                default: True,
                **{
                    code: present
                    for code, present in (data.get("translations") or {}).items()
                    if code != default
                },
            }
            data = {**data, "translations": translations}
        return data

    @property
    def entity_type_id(self) -> str:
        return self.entity_type.id

    @property
    def is_translatable(self) -> bool:
        """条目本身及其实体类型都可翻译时才为 True。"""
        return self.translatable and self.entity_type.translatable

    def has_translation(self, langcode: str | None) -> bool:
        if not langcode:
            return False
        return self.translations.get(langcode, False)

    def translation_langcodes(self) -> list[str]:
        """返回所有已存在翻译的语言代码（包含默认语言）。"""
        return [code for code, present in self.translations.items() if present]


class Revision(BaseModel):
    """实体存储中某个修订的摘要。"""

    model_config = ConfigDict(frozen=True)

    revision_id: int
    is_default_revision: bool
    # 该修订中存在的翻译语言
    translation_langcodes: frozenset[str] = frozenset()


class RevisionState(BaseModel):
    """某个条目在某个语言上的修订状态。`pending` 表示存在尚未成为默认修订的新修订。"""

    model_config = ConfigDict(frozen=True)

    item_id: str
    langcode: str
    latest_revision_id: int | None = None
    pending: bool = False


class TranslationState(BaseModel):
    """状态解析器的输出。"""

    model_config = ConfigDict(frozen=True)

    exists: bool = False
    is_default: bool = False
    has_pending_revision: bool = False


class AccessDecision(BaseModel):
    """访问评估器的输出，只是建议性的布尔值。"""

    model_config = ConfigDict(frozen=True)

    create: bool = False
    update: bool = False
    delete: bool = False
    source_langcode: str | None = None
    target_langcode: str | None = None

    def allows(self, operation: Operation) -> bool:
        return bool(getattr(self, operation.value))


class OperationLink(BaseModel):
    """单行渲染时生成的一个操作链接，从不跨渲染缓存。"""

    model_config = ConfigDict(frozen=True)

    kind: LinkKind
    url: str
    language: str
    title: str
    route_name: str
    route_parameters: dict[str, str] = Field(default_factory=dict)
    query: dict[str, str] = Field(default_factory=dict)


class LanguageSkill(BaseModel):
    """技能型权限提供者使用的语言对技能。"""

    model_config = ConfigDict(frozen=True)

    language_from: str
    language_to: str

    def languages(self) -> tuple[str, str]:
        return (self.language_from, self.language_to)

    def covers(self, source: str, target: str) -> bool:
        """语言对技能是双向的：en->fr 的技能同样覆盖 fr->en。"""
        return {source, target} == {self.language_from, self.language_to}
