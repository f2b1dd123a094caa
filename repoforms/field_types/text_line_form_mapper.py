"""单行文本(ezstring)字段类型的表单映射器."""

from __future__ import annotations

from typing import TYPE_CHECKING

from wtforms.fields import StringField
from wtforms.validators import Length

from repoforms.field_types.mapper import FieldValueFormMapper

if TYPE_CHECKING:
    from repoforms.data import FieldData
    from repoforms.forms.form import Form


class TextLineFormMapper(FieldValueFormMapper):
    """单行文本,长度限制取自字段设置 ``min_length``/``max_length``."""

    def map_field_value_form(self, field_form: Form, data: FieldData) -> None:
        definition = data.field_definition
        validators = self.required_validators(definition)

        settings = definition.field_settings
        min_length = int(settings.get("min_length") or 0)  # type: ignore[call-overload]
        max_length = int(settings.get("max_length") or 0)  # type: ignore[call-overload]
        if min_length or max_length:
            validators.append(Length(min=min_length or -1, max=max_length or -1))

        field_form.add(
            "value",
            StringField(self.resolve_label(field_form, data), validators=validators),
            auto_initialize=False,
        )
