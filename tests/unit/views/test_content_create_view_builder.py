from __future__ import annotations

from typing import Any, cast

import pytest
from werkzeug.datastructures import MultiDict
from werkzeug.wrappers import Response

from repoforms.constants import ViewRoute
from repoforms.data import ContentCreateData, ContentCreateMapper
from repoforms.errors import MissingParameterError
from repoforms.forms import FormFactory, FormView
from repoforms.forms.types import ContentEditType
from repoforms.views.builders import ContentCreateViewBuilder
from repoforms.views.content_views import ContentCreateSuccessView, ContentCreateView

DEFAULT_TEMPLATE = "content/create.html"


class _StubDispatcher:
    def __init__(self, response: Response | None = None) -> None:
        self.response = response
        self.calls: list[tuple[object, object, object, object]] = []

    def dispatch_form_action(self, form, data, action_name=None, options=None) -> None:
        self.calls.append((form, data, action_name, options))

    def get_response(self) -> Response | None:
        return self.response if self.calls else None


class _RecordingConfigurator:
    def __init__(self) -> None:
        self.views: list[object] = []

    def configure(self, view) -> None:
        self.views.append(view)


class _RecordingInjector:
    def __init__(self) -> None:
        self.calls: list[tuple[object, object]] = []

    def inject_view_parameters(self, view, parameters) -> None:
        self.calls.append((view, parameters))
        view.add_parameters({"injected": True})


def _build_form(article_type, parent_location, submitted: MultiDict | None = None):
    data = ContentCreateMapper().map_to_form_data(
        article_type,
        main_language_code="eng-GB",
        parent_location=parent_location,
    )
    form = FormFactory().create(
        ContentEditType,
        data,
        {"language_code": "eng-GB", "main_language_code": "eng-GB", "drafts_enabled": True},
    )
    if submitted is not None:
        form.submit(submitted)
    return form


def _builder(dispatcher, configurator=None, injector=None) -> ContentCreateViewBuilder:
    return ContentCreateViewBuilder(
        cast(Any, object()),
        configurator or _RecordingConfigurator(),
        injector or _RecordingInjector(),
        DEFAULT_TEMPLATE,
        cast(Any, dispatcher),
    )


@pytest.mark.unit
def test_builder_matches_only_the_create_route() -> None:
    builder = _builder(_StubDispatcher())

    assert builder.matches(ViewRoute.CONTENT_CREATE_WITHOUT_DRAFT) is True
    assert builder.matches(ViewRoute.CONTENT_EDIT_DRAFT) is False


@pytest.mark.unit
def test_unsubmitted_form_builds_populated_view(english, parent_location, article_type) -> None:
    dispatcher = _StubDispatcher()
    configurator = _RecordingConfigurator()
    injector = _RecordingInjector()
    form = _build_form(article_type, parent_location)
    parameters = {
        "language": english,
        "parent_location": parent_location,
        "content_type": article_type,
        "form": form,
    }

    view = _builder(dispatcher, configurator, injector).build_view(parameters)

    assert isinstance(view, ContentCreateView)
    assert view.template_identifier == DEFAULT_TEMPLATE
    assert view.content_type is article_type
    assert view.language is english
    assert view.location is parent_location
    assert view.form is form
    assert view.get_parameter("content_type") is article_type
    assert view.get_parameter("language") is english
    assert view.get_parameter("parent_location") is parent_location
    assert isinstance(view.get_parameter("form"), FormView)
    assert view.get_parameter("injected") is True
    assert dispatcher.calls == []
    assert configurator.views == [view]
    assert injector.calls == [(view, parameters)]


@pytest.mark.unit
def test_valid_clicked_form_short_circuits_with_dispatcher_response(
    english,
    parent_location,
    article_type,
) -> None:
    response = Response("redirected", status=302)
    dispatcher = _StubDispatcher(response)
    configurator = _RecordingConfigurator()
    injector = _RecordingInjector()
    form = _build_form(
        article_type,
        parent_location,
        MultiDict(
            [
                ("content_edit-fields_data-title-value", "Hello"),
                ("content_edit-fields_data-tags-value", "news, cms"),
                ("content_edit-publish", "发布"),
            ],
        ),
    )

    view = _builder(dispatcher, configurator, injector).build_view(
        {
            "language": english,
            "parent_location": parent_location,
            "content_type": article_type,
            "form": form,
        },
    )

    assert isinstance(view, ContentCreateSuccessView)
    assert view.response is response
    assert configurator.views == []
    assert injector.calls == []

    assert len(dispatcher.calls) == 1
    dispatched_form, data, action_name, options = dispatcher.calls[0]
    assert dispatched_form is form
    assert isinstance(data, ContentCreateData)
    assert data.field_values() == {"title": "Hello", "tags": ["news", "cms"]}
    assert action_name == "publish"
    assert options == {"referrer_location": parent_location}


@pytest.mark.unit
def test_dispatch_without_response_falls_through_to_populated_view(
    english,
    parent_location,
    article_type,
) -> None:
    dispatcher = _StubDispatcher(None)
    form = _build_form(
        article_type,
        parent_location,
        MultiDict([("content_edit-fields_data-title-value", "Hello"), ("content_edit-save_draft", "保存草稿")]),
    )

    view = _builder(dispatcher).build_view(
        {"language": english, "parent_location": parent_location, "content_type": article_type, "form": form},
    )

    assert isinstance(view, ContentCreateView)
    assert dispatcher.calls[0][2] == "save_draft"


@pytest.mark.unit
def test_invalid_form_is_not_dispatched(english, parent_location, article_type) -> None:
    dispatcher = _StubDispatcher(Response("unused"))
    form = _build_form(
        article_type,
        parent_location,
        MultiDict([("content_edit-fields_data-title-value", ""), ("content_edit-publish", "发布")]),
    )

    view = _builder(dispatcher).build_view(
        {"language": english, "parent_location": parent_location, "content_type": article_type, "form": form},
    )

    assert isinstance(view, ContentCreateView)
    assert dispatcher.calls == []
    form_view = view.get_parameter("form")
    assert isinstance(form_view, FormView)
    assert form_view.submitted is True
    assert form_view.valid is False
    assert "title" in form_view.errors


@pytest.mark.unit
def test_valid_form_without_clicked_button_is_not_dispatched(english, parent_location, article_type) -> None:
    dispatcher = _StubDispatcher(Response("unused"))
    form = _build_form(
        article_type,
        parent_location,
        MultiDict([("content_edit-fields_data-title-value", "Hello")]),
    )

    view = _builder(dispatcher).build_view(
        {"language": english, "parent_location": parent_location, "content_type": article_type, "form": form},
    )

    assert isinstance(view, ContentCreateView)
    assert form.is_valid() is True
    assert dispatcher.calls == []


@pytest.mark.unit
def test_missing_form_raises(english, parent_location, article_type) -> None:
    with pytest.raises(MissingParameterError) as exc_info:
        _builder(_StubDispatcher()).build_view(
            {"language": english, "parent_location": parent_location, "content_type": article_type},
        )

    assert exc_info.value.argument_name == "Form"


@pytest.mark.unit
def test_missing_language_raises_before_dispatch(parent_location, article_type) -> None:
    dispatcher = _StubDispatcher(Response("unused"))
    form = _build_form(
        article_type,
        parent_location,
        MultiDict([("content_edit-fields_data-title-value", "Hello"), ("content_edit-publish", "发布")]),
    )

    with pytest.raises(MissingParameterError) as exc_info:
        _builder(dispatcher).build_view(
            {"parent_location": parent_location, "content_type": article_type, "form": form},
        )

    assert exc_info.value.argument_name == "Language"
    assert dispatcher.calls == []
