from __future__ import annotations

from dataclasses import replace
from typing import Any, cast

import pytest

from repoforms.constants import ViewRoute
from repoforms.data import ContentUpdateMapper
from repoforms.errors import MissingParameterError
from repoforms.forms import FormFactory, FormView
from repoforms.forms.types import ContentEditType
from repoforms.models import Location
from repoforms.repositories import InMemoryRepository
from repoforms.views.builders import ContentEditViewBuilder
from repoforms.views.configurator import TemplateMatchConfigurator
from repoforms.views.content_views import ContentEditView
from repoforms.views.parameters_injector import CustomParametersInjector

DEFAULT_TEMPLATE = "content/edit.html"


def _edit_form(article_draft, article_type):
    data = ContentUpdateMapper().map_to_form_data(
        article_draft,
        language_code="eng-GB",
        content_type=article_type,
    )
    return FormFactory().create(
        ContentEditType,
        data,
        {"language_code": "eng-GB", "main_language_code": "eng-GB", "drafts_enabled": True},
    )


def _builder(repository, view_templates=None) -> ContentEditViewBuilder:
    return ContentEditViewBuilder(
        cast(Any, repository),
        TemplateMatchConfigurator(view_templates),
        CustomParametersInjector(),
        DEFAULT_TEMPLATE,
    )


@pytest.mark.unit
def test_builder_matches_only_the_edit_route() -> None:
    builder = _builder(InMemoryRepository())

    assert builder.matches(ViewRoute.CONTENT_EDIT_DRAFT) is True
    assert builder.matches(ViewRoute.CONTENT_CREATE_WITHOUT_DRAFT) is False


@pytest.mark.unit
def test_builds_view_from_supplied_objects(english, article_type, article_draft) -> None:
    form = _edit_form(article_draft, article_type)

    view = _builder(InMemoryRepository(languages=[english])).build_view(
        {
            "language": english,
            "content": article_draft,
            "content_type": article_type,
            "form": form,
        },
    )

    assert isinstance(view, ContentEditView)
    assert view.template_identifier == DEFAULT_TEMPLATE
    assert view.content is article_draft
    assert view.content_type is article_type
    assert view.language is english
    # 草稿从未发布过,没有主位置
    assert view.location is None
    assert view.form is form
    assert view.get_parameter("location") is None
    form_view = view.get_parameter("form")
    assert isinstance(form_view, FormView)
    assert form_view["title"]["value"].data == "Hello"
    assert form_view["tags"]["value"].data == ["news", "cms"]
    assert "save_draft" in form_view
    assert "cancel" in form_view


@pytest.mark.unit
def test_loads_draft_type_and_main_location_from_repository(english, article_type, article_draft) -> None:
    location = Location(id=77, content_id=article_draft.id, parent_location_id=2)
    draft = replace(article_draft, content_info=replace(article_draft.content_info, main_location_id=77))
    repository = InMemoryRepository(
        languages=[english],
        locations=[location],
        content_types=[article_type],
        contents=[draft],
    )

    view = _builder(repository, {"content_edit": {"article": "content/edit_article.html"}}).build_view(
        {
            "language": "eng-GB",
            "content_id": 42,
            "version_no": 3,
            "form": _edit_form(draft, article_type),
            "params": {"section": "news"},
            "layout": False,
        },
    )

    assert isinstance(view, ContentEditView)
    assert view.content == draft
    assert view.content_type == article_type
    assert view.language == english
    assert view.location == location
    assert view.template_identifier == "content/edit_article.html"
    assert view.get_parameter("section") == "news"
    assert view.get_parameter("no_layout") is True


@pytest.mark.unit
def test_explicit_location_id_wins_over_main_location(english, article_type, article_draft) -> None:
    other = Location(id=5, content_id=article_draft.id)
    repository = InMemoryRepository(languages=[english], locations=[other], content_types=[article_type])

    view = _builder(repository).build_view(
        {
            "language_code": "eng-GB",
            "content": article_draft,
            "location_id": 5,
            "form": _edit_form(article_draft, article_type),
        },
    )

    assert view.location == other


@pytest.mark.unit
def test_missing_content_raises(english, article_type, article_draft) -> None:
    with pytest.raises(MissingParameterError) as exc_info:
        _builder(InMemoryRepository(languages=[english])).build_view(
            {"language": english, "form": _edit_form(article_draft, article_type)},
        )

    assert exc_info.value.argument_name == "Content"


@pytest.mark.unit
def test_missing_form_raises(english, article_type, article_draft) -> None:
    with pytest.raises(MissingParameterError) as exc_info:
        _builder(InMemoryRepository(languages=[english])).build_view(
            {"language": english, "content": article_draft, "content_type": article_type},
        )

    assert exc_info.value.argument_name == "Form"
