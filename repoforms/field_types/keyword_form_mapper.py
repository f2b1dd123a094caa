"""关键字(ezkeyword)字段类型的表单映射器."""

from __future__ import annotations

from typing import TYPE_CHECKING

from repoforms.constants import DEFAULT_TRANSLATION_DOMAIN
from repoforms.field_types.mapper import FieldValueFormMapper, FieldValueOptions
from repoforms.forms.types.field_values import KeywordField

if TYPE_CHECKING:
    from repoforms.data import FieldData
    from repoforms.forms.form import Form


class KeywordValueOptions(FieldValueOptions):
    translation_domain: str = DEFAULT_TRANSLATION_DOMAIN


class KeywordFormMapper(FieldValueFormMapper):
    """为关键字字段添加逗号分隔的输入控件."""

    options_class = KeywordValueOptions
    options: KeywordValueOptions

    def map_field_value_form(self, field_form: Form, data: FieldData) -> None:
        definition = data.field_definition
        field_form.add(
            "value",
            KeywordField(
                self.resolve_label(field_form, data),
                validators=self.required_validators(definition),
                render_kw={"data-translation-domain": self.options.translation_domain},
            ),
            auto_initialize=False,
        )
