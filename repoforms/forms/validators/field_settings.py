"""字段设置约束.

作为 WTForms 校验器挂在字段定义表单的 ``field_settings`` 字段上,
由字段类型服务判定设置是否合法.宿主在自己的字段定义表单形态中
以 ``FieldSettings(field_type_service)`` 挂载.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from wtforms.validators import ValidationError

if TYPE_CHECKING:
    from wtforms.fields import Field
    from wtforms.form import BaseForm

    from repoforms.core.types import FieldTypeService

FIELD_SETTINGS_MESSAGE_KEY = "field_definition.field_settings"


class FieldSettings:
    """校验字段设置.

    Args:
        field_type_service: 字段类型服务.
        message: 错误消息键,默认 ``field_definition.field_settings``.
        field_type_field: 同一表单中保存字段类型标识的字段名.

    """

    def __init__(
        self,
        field_type_service: FieldTypeService,
        message: str | None = None,
        *,
        field_type_field: str = "field_type_identifier",
    ) -> None:
        self.field_type_service = field_type_service
        self.message = message or FIELD_SETTINGS_MESSAGE_KEY
        self.field_type_field = field_type_field

    def __call__(self, form: BaseForm, field: Field) -> None:
        field_type_identifier = form[self.field_type_field].data
        errors = self.field_type_service.validate_field_settings(field_type_identifier, field.data or {})
        if errors:
            raise ValidationError(f"{self.message}: {'; '.join(errors)}")
