"""内容表单 - WSGI 入口文件, 使用内存仓储提供本地演示."""

from __future__ import annotations

import os

from repoforms import create_app
from repoforms.constants import FieldTypeIdentifier
from repoforms.models import ContentType, FieldDefinition, Language, Location
from repoforms.repositories import InMemoryRepository

os.environ.setdefault("FLASK_ENV", "development")


def _build_demo_repository() -> InMemoryRepository:
    article = ContentType(
        id=1,
        identifier="article",
        main_language_code="eng-GB",
        names={"eng-GB": "Article", "chi-CN": "文章"},
        field_definitions=(
            FieldDefinition(
                id=1,
                identifier="title",
                field_type_identifier=FieldTypeIdentifier.TEXT_LINE,
                names={"eng-GB": "Title", "chi-CN": "标题"},
                is_required=True,
                position=1,
                field_settings={"max_length": 255},
            ),
            FieldDefinition(
                id=2,
                identifier="tags",
                field_type_identifier=FieldTypeIdentifier.KEYWORD,
                names={"eng-GB": "Tags", "chi-CN": "标签"},
                position=2,
            ),
        ),
    )
    return InMemoryRepository(
        languages=[Language(id=1, language_code="eng-GB", name="English"), Language(id=2, language_code="chi-CN", name="中文")],
        locations=[Location(id=2, content_id=1, path_string="/1/2/")],
        content_types=[article],
    )


application = app = create_app(repository=_build_demo_repository())


def _resolve_host_and_port() -> tuple[str, int]:
    """解析 WSGI 运行时绑定信息, 默认使用 127.0.0.1。."""
    host = os.environ.get("FLASK_HOST", "127.0.0.1")
    port = int(os.environ.get("FLASK_PORT", "5001"))
    return host, port


if __name__ == "__main__":
    host, port = _resolve_host_and_port()
    application.run(host=host, port=port, debug=False)
