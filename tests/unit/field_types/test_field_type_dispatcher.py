from __future__ import annotations

import pytest

from repoforms.constants import FieldTypeIdentifier
from repoforms.data import FieldData
from repoforms.field_types import (
    FieldTypeFormMapperDispatcher,
    FieldValueFormMapper,
    KeywordFormMapper,
    TextLineFormMapper,
)
from repoforms.forms import Form
from repoforms.models import FieldDefinition


class _RecordingMapper(FieldValueFormMapper):
    def __init__(self) -> None:
        super().__init__()
        self.calls: list[tuple[Form, FieldData]] = []

    def map_field_value_form(self, field_form, data) -> None:
        self.calls.append((field_form, data))


def _data(field_type_identifier: str) -> FieldData:
    return FieldData(
        field_definition=FieldDefinition(id=1, identifier="body", field_type_identifier=field_type_identifier),
    )


@pytest.mark.unit
def test_dispatch_calls_registered_mapper_once() -> None:
    mapper = _RecordingMapper()
    dispatcher = FieldTypeFormMapperDispatcher()
    dispatcher.add_mapper(mapper, "ezrichtext")
    field_form = Form("body")
    data = _data("ezrichtext")

    dispatcher.map(field_form, data)

    assert mapper.calls == [(field_form, data)]
    assert dispatcher.has_mapper("ezrichtext") is True


@pytest.mark.unit
def test_unregistered_field_type_is_skipped() -> None:
    dispatcher = FieldTypeFormMapperDispatcher()
    field_form = Form("body")

    dispatcher.map(field_form, _data("ezimage"))

    assert list(field_form) == []
    assert dispatcher.has_mapper("ezimage") is False


@pytest.mark.unit
def test_default_mappers_cover_builtin_field_types() -> None:
    dispatcher = FieldTypeFormMapperDispatcher.with_default_mappers("custom_domain")

    assert dispatcher.has_mapper(FieldTypeIdentifier.KEYWORD) is True
    assert dispatcher.has_mapper(FieldTypeIdentifier.TEXT_LINE) is True


@pytest.mark.unit
def test_add_mapper_replaces_existing_registration() -> None:
    replacement = _RecordingMapper()
    dispatcher = FieldTypeFormMapperDispatcher(
        {FieldTypeIdentifier.KEYWORD: KeywordFormMapper(), FieldTypeIdentifier.TEXT_LINE: TextLineFormMapper()},
    )

    dispatcher.add_mapper(replacement, FieldTypeIdentifier.KEYWORD)
    dispatcher.map(Form("tags"), _data(FieldTypeIdentifier.KEYWORD))

    assert len(replacement.calls) == 1
