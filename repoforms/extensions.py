"""运行期挂载到 Flask 应用上的服务集合."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from flask import current_app

from repoforms.actions import ContentActionDispatcher, ContentFormProcessor
from repoforms.field_types import FieldTypeFormMapperDispatcher
from repoforms.forms import FormFactory
from repoforms.forms.types import ContentFieldType
from repoforms.views.builders import (
    ContentCreateViewBuilder,
    ContentEditViewBuilder,
    ViewBuilderRegistry,
)
from repoforms.views.configurator import TemplateMatchConfigurator
from repoforms.views.filters import ContentEditViewFilter
from repoforms.views.parameters_injector import CustomParametersInjector
from repoforms.views.pipeline import ViewBuilderPipeline

if TYPE_CHECKING:
    from repoforms.actions import ContentUrlBuilder
    from repoforms.core.types import Repository
    from repoforms.settings import Settings

EXTENSION_KEY = "repoforms"


@dataclass(slots=True)
class RepoFormsServices:
    """应用级服务.

    有状态的对象(动作分派器、流水线)按请求创建,此处只保存无状态协作者.
    """

    settings: Settings
    repository: Repository
    form_factory: FormFactory
    processor: ContentFormProcessor
    view_configurator: TemplateMatchConfigurator
    parameters_injector: CustomParametersInjector

    @classmethod
    def build(
        cls,
        settings: Settings,
        repository: Repository,
        url_builder: ContentUrlBuilder,
    ) -> RepoFormsServices:
        form_factory = FormFactory(
            [ContentFieldType(FieldTypeFormMapperDispatcher.with_default_mappers(settings.translation_domain))],
        )
        return cls(
            settings=settings,
            repository=repository,
            form_factory=form_factory,
            processor=ContentFormProcessor(repository.content_service, url_builder),
            view_configurator=TemplateMatchConfigurator(settings.view_templates),
            parameters_injector=CustomParametersInjector(),
        )

    def create_dispatcher(self) -> ContentActionDispatcher:
        """创建已订阅表单处理器的动作分派器."""
        dispatcher = ContentActionDispatcher()
        self.processor.subscribe(dispatcher)
        return dispatcher

    def create_pipeline(self, dispatcher: ContentActionDispatcher) -> ViewBuilderPipeline:
        """组装视图构建流水线."""
        registry = ViewBuilderRegistry(
            [
                ContentCreateViewBuilder(
                    self.repository,
                    self.view_configurator,
                    self.parameters_injector,
                    self.settings.content_create_template,
                    dispatcher,
                ),
                ContentEditViewBuilder(
                    self.repository,
                    self.view_configurator,
                    self.parameters_injector,
                    self.settings.content_edit_template,
                ),
            ],
        )
        edit_filter = ContentEditViewFilter(
            self.repository.content_service,
            self.repository.content_type_service,
            self.form_factory,
        )
        return ViewBuilderPipeline(registry, [edit_filter])


def get_services() -> RepoFormsServices:
    """读取当前应用挂载的服务集合."""
    return current_app.extensions[EXTENSION_KEY]


__all__ = ["EXTENSION_KEY", "RepoFormsServices", "get_services"]
