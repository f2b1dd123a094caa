"""内容创建/编辑表单绑定的数据传输对象."""

from __future__ import annotations

from dataclasses import dataclass, field

from repoforms.models import Content, ContentType, Field, FieldDefinition


@dataclass(slots=True)
class FieldData:
    """单个字段在表单中的数据.

    Attributes:
        field_definition: 字段定义,只读.
        field: 编辑时对应的已有字段值,新建时为 None.
        value: 表单绑定的字段值,提交后被回写.

    """

    field_definition: FieldDefinition
    field: Field | None = None
    value: object | None = None

    @property
    def identifier(self) -> str:
        return self.field_definition.identifier


@dataclass(slots=True)
class ContentCreateData:
    """新建内容表单数据."""

    content_type: ContentType
    main_language_code: str
    location_ids: list[int] = field(default_factory=list)
    fields_data: list[FieldData] = field(default_factory=list)

    @property
    def is_new(self) -> bool:
        return True

    def field_values(self) -> dict[str, object]:
        """按字段标识汇总当前值."""
        return {item.identifier: item.value for item in self.fields_data}


@dataclass(slots=True)
class ContentUpdateData:
    """编辑草稿表单数据."""

    content_draft: Content
    content_type: ContentType
    initial_language_code: str
    fields_data: list[FieldData] = field(default_factory=list)

    @property
    def is_new(self) -> bool:
        return False

    def field_values(self) -> dict[str, object]:
        """按字段标识汇总当前值."""
        return {item.identifier: item.value for item in self.fields_data}


ContentFormData = ContentCreateData | ContentUpdateData
