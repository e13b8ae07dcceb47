# translation_views/utils.py
"""
本模块包含项目范围内的通用工具函数。
语言代码校验全面采用 langcodes 库。
"""

import re

from langcodes import Language
from langcodes.tag_parser import LanguageTagError

# 语言子标签应该由 2-3 个字母组成 (BCP 47)
LANGUAGE_SUBTAG_PATTERN = re.compile(r"^[a-zA-Z]{2,3}$")


def validate_lang_codes(lang_codes: list[str]) -> None:
    """使用 `langcodes` 库校验语言代码列表中的每个代码是否符合 BCP 47 规范。"""
    for code in lang_codes:
        try:
            lang = Language.get(code)
            if not lang.language or not LANGUAGE_SUBTAG_PATTERN.match(lang.language):
                raise LanguageTagError(
                    f"Tag '{code}' lacks a valid 2-3 letter language subtag."
                )
        except LanguageTagError as e:
            raise ValueError(f"提供的语言代码 '{code}' 格式无效。原因: {e}") from e


def is_valid_lang_code(code: object) -> bool:
    """与 `validate_lang_codes` 相同的规则，但以布尔值返回，从不抛出异常。"""
    if not isinstance(code, str) or not code.strip():
        return False
    try:
        validate_lang_codes([code])
    except ValueError:
        return False
    return True


def is_canonical_lang_code(code: object) -> bool:
    """
    有效且已是规范写法（大小写、分隔符）的语言代码。
    翻译映射以规范代码为键，"FR" 或 "en_GB" 这样的写法无法与之匹配。
    """
    if not isinstance(code, str) or not is_valid_lang_code(code):
        return False
    return Language.get(code, normalize=False).to_tag() == code
