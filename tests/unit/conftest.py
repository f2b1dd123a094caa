# tests/unit/conftest.py
"""单元测试专用 fixtures.

提供隔离环境变量以及内容类型、语言、位置等常用值对象.
"""

from __future__ import annotations

import pytest

from repoforms.constants import FieldTypeIdentifier
from repoforms.models import (
    Content,
    ContentInfo,
    ContentType,
    Field,
    FieldDefinition,
    Language,
    Location,
    VersionInfo,
)


@pytest.fixture(autouse=True)
def _unit_test_env(monkeypatch):
    """为 unit tests 强制注入隔离环境变量.

    避免开发者本机环境变量与 `.env` 影响测试稳定性.
    """
    monkeypatch.setenv("FLASK_ENV", "testing")
    monkeypatch.setenv("SECRET_KEY", "unit-test-secret")
    monkeypatch.setenv("WTF_CSRF_ENABLED", "false")
    monkeypatch.delenv("VIEW_TEMPLATES", raising=False)
    monkeypatch.delenv("ENABLE_DEBUG_LOG", raising=False)


@pytest.fixture
def english() -> Language:
    return Language(id=1, language_code="eng-GB", name="English")


@pytest.fixture
def parent_location() -> Location:
    return Location(id=2, content_id=1, path_string="/1/2/")


@pytest.fixture
def article_type() -> ContentType:
    return ContentType(
        id=10,
        identifier="article",
        main_language_code="eng-GB",
        names={"eng-GB": "Article"},
        field_definitions=(
            FieldDefinition(
                id=102,
                identifier="tags",
                field_type_identifier=FieldTypeIdentifier.KEYWORD,
                names={"eng-GB": "Tags"},
                position=2,
            ),
            FieldDefinition(
                id=101,
                identifier="title",
                field_type_identifier=FieldTypeIdentifier.TEXT_LINE,
                names={"eng-GB": "Title"},
                is_required=True,
                position=1,
                field_settings={"max_length": 20},
            ),
        ),
    )


@pytest.fixture
def article_draft(article_type: ContentType) -> Content:
    return Content(
        content_info=ContentInfo(
            id=42,
            content_type_id=article_type.id,
            main_language_code="eng-GB",
            name="Hello",
            main_location_id=None,
        ),
        version_info=VersionInfo(content_id=42, version_no=3, language_codes=("eng-GB",)),
        fields=(
            Field(field_def_identifier="title", language_code="eng-GB", value="Hello"),
            Field(field_def_identifier="tags", language_code="eng-GB", value=["news", "cms"]),
        ),
    )

