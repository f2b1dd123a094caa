"""路由测试 fixtures: 使用内存仓储创建应用."""

from __future__ import annotations

import pytest

from repoforms import create_app
from repoforms.repositories import InMemoryRepository
from repoforms.settings import Settings


@pytest.fixture
def repository(english, parent_location, article_type, article_draft) -> InMemoryRepository:
    return InMemoryRepository(
        languages=[english],
        locations=[parent_location],
        content_types=[article_type],
        contents=[article_draft],
    )


@pytest.fixture
def app(repository):
    app = create_app(repository=repository, settings=Settings.load())
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
