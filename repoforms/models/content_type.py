"""内容类型与字段定义值对象."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class FieldDefinition:
    """内容类型中单个字段的只读描述.

    Attributes:
        id: 字段定义 ID.
        identifier: 字段标识,在内容类型内唯一.
        field_type_identifier: 字段类型标识,例如 ``ezkeyword``.
        names: 语言代码到显示名称的映射.
        is_required: 是否必填.
        position: 表单中的排序位置.
        default_value: 新建内容时的默认值.
        field_settings: 字段类型相关的设置.
        is_translatable: 是否可翻译.

    """

    id: int
    identifier: str
    field_type_identifier: str
    names: Mapping[str, str] = field(default_factory=dict)
    is_required: bool = False
    position: int = 0
    default_value: object | None = None
    field_settings: Mapping[str, object] = field(default_factory=dict)
    is_translatable: bool = True

    def get_name(self, language_code: str | None) -> str | None:
        """返回指定语言的名称,不存在时返回 None."""
        if language_code is None:
            return None
        return self.names.get(language_code)

    def get_names(self) -> Mapping[str, str]:
        return self.names


@dataclass(frozen=True, slots=True)
class ContentType:
    """内容类型."""

    id: int
    identifier: str
    main_language_code: str
    names: Mapping[str, str] = field(default_factory=dict)
    field_definitions: tuple[FieldDefinition, ...] = ()

    def get_field_definition(self, identifier: str) -> FieldDefinition | None:
        """按标识查找字段定义."""
        for definition in self.field_definitions:
            if definition.identifier == identifier:
                return definition
        return None

    def get_name(self, language_code: str | None = None) -> str | None:
        return self.names.get(language_code or self.main_language_code)
