"""视图路由标识常量.

替代字符串形式的控制器标识,视图构建器与参数过滤器均以此枚举分派.
"""

from __future__ import annotations

from enum import Enum


class ViewRoute(str, Enum):
    """内容编辑相关的视图路由."""

    CONTENT_CREATE_WITHOUT_DRAFT = "content_edit:create_without_draft"
    CONTENT_EDIT_DRAFT = "content_edit:edit_version_draft"

    @classmethod
    def from_identifier(cls, identifier: str | ViewRoute) -> ViewRoute | None:
        """将控制器标识解析为路由枚举.

        Args:
            identifier: 路由枚举或其字符串值.

        Returns:
            匹配的路由,未知标识返回 None.

        """
        if isinstance(identifier, cls):
            return identifier
        try:
            return cls(identifier)
        except ValueError:
            return None


class FieldTypeIdentifier:
    """已内置映射器的字段类型标识."""

    KEYWORD = "ezkeyword"
    TEXT_LINE = "ezstring"


# 表单翻译域
DEFAULT_TRANSLATION_DOMAIN = "repoforms_content_type"
