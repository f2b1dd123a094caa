"""仓储值对象到表单数据的映射器.

映射是纯函数式的: 不访问仓储,不修改输入对象.
"""

from __future__ import annotations

from repoforms.data.content import ContentCreateData, ContentUpdateData, FieldData
from repoforms.models import Content, ContentType, FieldDefinition, Location


def _ordered_definitions(content_type: ContentType) -> list[FieldDefinition]:
    return sorted(content_type.field_definitions, key=lambda definition: definition.position)


class ContentCreateMapper:
    """将内容类型映射为新建内容表单数据."""

    def map_to_form_data(
        self,
        content_type: ContentType,
        *,
        main_language_code: str,
        parent_location: Location,
    ) -> ContentCreateData:
        """构建新建表单数据.

        Args:
            content_type: 待创建内容的类型.
            main_language_code: 新内容的主语言.
            parent_location: 新内容将放置的父位置.

        Returns:
            每个字段定义对应一个 FieldData,值取字段定义默认值.

        """
        fields_data = [
            FieldData(field_definition=definition, field=None, value=definition.default_value)
            for definition in _ordered_definitions(content_type)
        ]
        return ContentCreateData(
            content_type=content_type,
            main_language_code=main_language_code,
            location_ids=[parent_location.id],
            fields_data=fields_data,
        )


class ContentUpdateMapper:
    """将内容草稿映射为编辑表单数据."""

    def map_to_form_data(
        self,
        content: Content,
        *,
        language_code: str,
        content_type: ContentType,
    ) -> ContentUpdateData:
        """构建编辑表单数据.

        字段值优先取编辑语言,其次取内容主语言,都不存在时回退到字段定义默认值.

        Args:
            content: 内容草稿.
            language_code: 正在编辑的语言.
            content_type: 内容草稿的类型.

        Returns:
            ContentUpdateData: 绑定到编辑表单的数据.

        """
        fields_data: list[FieldData] = []
        for definition in _ordered_definitions(content_type):
            current = content.get_field(definition.identifier, language_code) or content.get_field(
                definition.identifier,
            )
            fields_data.append(
                FieldData(
                    field_definition=definition,
                    field=current,
                    value=current.value if current is not None else definition.default_value,
                ),
            )
        return ContentUpdateData(
            content_draft=content,
            content_type=content_type,
            initial_language_code=language_code,
            fields_data=fields_data,
        )
