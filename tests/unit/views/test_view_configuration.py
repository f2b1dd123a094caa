from __future__ import annotations

import pytest

from repoforms.views.configurator import TemplateMatchConfigurator
from repoforms.views.content_views import BaseView, ContentCreateView, ContentEditView
from repoforms.views.parameters_injector import CustomParametersInjector


@pytest.mark.unit
def test_configurator_matches_view_type_and_content_type(article_type) -> None:
    configurator = TemplateMatchConfigurator(
        {
            "content_create": {"article": "content/create_article.html"},
            "content_edit": {"blog_post": "content/edit_blog.html"},
        },
    )
    create_view = ContentCreateView("content/create.html")
    create_view.content_type = article_type
    edit_view = ContentEditView("content/edit.html")
    edit_view.content_type = article_type

    configurator.configure(create_view)
    configurator.configure(edit_view)

    assert create_view.template_identifier == "content/create_article.html"
    assert edit_view.template_identifier == "content/edit.html"


@pytest.mark.unit
def test_configurator_ignores_views_without_content_type() -> None:
    view = BaseView("default.html")

    TemplateMatchConfigurator({"view": {"article": "other.html"}}).configure(view)

    assert view.template_identifier == "default.html"


@pytest.mark.unit
def test_injector_merges_custom_params_and_layout_flag() -> None:
    view = BaseView(parameters={"form": "kept"})

    CustomParametersInjector().inject_view_parameters(view, {"params": {"section": "news"}, "layout": False})

    assert view.get_parameters() == {"form": "kept", "section": "news", "no_layout": True}


@pytest.mark.unit
def test_injector_without_custom_keys_changes_nothing() -> None:
    view = BaseView(parameters={"form": "kept"})

    CustomParametersInjector().inject_view_parameters(view, {"params": "not a mapping", "layout": True})

    assert view.get_parameters() == {"form": "kept"}
    with pytest.raises(KeyError):
        view.get_parameter("no_layout")
