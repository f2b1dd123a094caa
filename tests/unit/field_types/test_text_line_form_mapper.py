from __future__ import annotations

import pytest
from werkzeug.datastructures import MultiDict
from wtforms.fields import StringField
from wtforms.validators import Length

from repoforms.constants import FieldTypeIdentifier
from repoforms.data import FieldData
from repoforms.field_types import TextLineFormMapper
from repoforms.forms import Form
from repoforms.forms.types import ContentFieldOptions
from repoforms.models import FieldDefinition


def _mapped_form(field_settings: dict[str, object], is_required: bool = False) -> Form:
    definition = FieldDefinition(
        id=1,
        identifier="title",
        field_type_identifier=FieldTypeIdentifier.TEXT_LINE,
        names={"eng-GB": "Title"},
        is_required=is_required,
        field_settings=field_settings,
    )
    data = FieldData(field_definition=definition)
    form = Form("title", data=data, options=ContentFieldOptions(main_language_code="eng-GB"))
    TextLineFormMapper().map_field_value_form(form, data)
    return form


@pytest.mark.unit
def test_text_line_uses_string_field_without_length_by_default() -> None:
    form = _mapped_form({})

    value_field = form.field("value")
    assert isinstance(value_field, StringField)
    assert not any(isinstance(validator, Length) for validator in value_field.validators)


@pytest.mark.unit
def test_text_line_applies_length_settings() -> None:
    form = _mapped_form({"min_length": 2, "max_length": 5}, is_required=True)

    result = form.submit(MultiDict([("title-value", "abcdef")]))

    assert result.valid is False
    assert "value" in result.errors

    form = _mapped_form({"min_length": 2, "max_length": 5}, is_required=True)
    assert form.submit(MultiDict([("title-value", "abc")])).valid is True
    assert form.get_data().value == "abc"


@pytest.mark.unit
def test_optional_text_line_accepts_empty_value() -> None:
    form = _mapped_form({"min_length": 3})

    assert form.submit(MultiDict([("title-value", "")])).valid is True
