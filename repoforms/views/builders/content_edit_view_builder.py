"""编辑草稿视图构建器."""

from __future__ import annotations

from typing import TYPE_CHECKING

from repoforms.constants import ViewRoute
from repoforms.errors import MissingParameterError
from repoforms.utils.structlog_config import log_debug
from repoforms.views.content_views import ContentEditView
from repoforms.views.resolution import ContextResolver

if TYPE_CHECKING:
    from repoforms.core.types import Repository, ViewParameters
    from repoforms.forms.form import Form
    from repoforms.models import Content, ContentType, Language, Location
    from repoforms.views.configurator import ViewConfigurator
    from repoforms.views.parameters_injector import ParametersInjector


class ContentEditViewBuilder:
    """构建编辑草稿视图.

    表单由 ContentEditViewFilter 预先放入参数;本构建器只负责解析上下文与组装视图,
    不分派表单动作.
    """

    def __init__(
        self,
        repository: Repository,
        view_configurator: ViewConfigurator,
        parameters_injector: ParametersInjector,
        default_template: str,
    ) -> None:
        self._repository = repository
        self._resolver = ContextResolver(repository)
        self._view_configurator = view_configurator
        self._parameters_injector = parameters_injector
        self._default_template = default_template

    def matches(self, route: ViewRoute) -> bool:
        return route is ViewRoute.CONTENT_EDIT_DRAFT

    def build_view(self, parameters: ViewParameters) -> ContentEditView:
        """构建视图.

        Raises:
            MissingParameterError: 缺少语言、内容或表单.
            NotFoundError: 引用的对象不存在.
            UnauthorizedError: 无权读取内容或位置.

        """
        view = ContentEditView(self._default_template)

        language = self._resolver.resolve_language(parameters)
        content = self._resolve_content(parameters, language)
        content_type = self._resolve_content_type(parameters, content, language)
        location = self._resolve_location(parameters, content)
        form: Form | None = parameters.get("form")  # type: ignore[assignment]
        if form is None:
            raise MissingParameterError("Form", "视图参数中缺少表单")

        view.content = content
        view.content_type = content_type
        view.language = language
        view.location = location
        view.form = form

        view.add_parameters(
            {
                "content": content,
                "content_type": content_type,
                "language": language,
                "location": location,
                "form": form.create_view(),
            },
        )

        self._parameters_injector.inject_view_parameters(view, parameters)
        self._view_configurator.configure(view)

        log_debug(
            "编辑草稿视图已构建",
            module="views",
            content_id=content.id,
            version_no=content.version_info.version_no,
            language=language.language_code,
        )
        return view

    def _resolve_content(self, parameters: ViewParameters, language: Language) -> Content:
        content = parameters.get("content")
        if content is not None:
            return content  # type: ignore[return-value]

        content_id = parameters.get("content_id")
        if content_id is not None:
            version_no = parameters.get("version_no")
            return self._repository.content_service.load_content(
                int(content_id),  # type: ignore[call-overload]
                [language.language_code],
                int(version_no) if version_no is not None else None,  # type: ignore[call-overload]
            )

        raise MissingParameterError("Content", "无法从参数中加载内容")

    def _resolve_content_type(
        self,
        parameters: ViewParameters,
        content: Content,
        language: Language,
    ) -> ContentType:
        content_type = parameters.get("content_type")
        if content_type is not None:
            return content_type  # type: ignore[return-value]
        return self._repository.content_type_service.load_content_type(
            content.content_type_id,
            [language.language_code],
        )

    def _resolve_location(self, parameters: ViewParameters, content: Content) -> Location | None:
        location = parameters.get("location")
        if location is not None:
            return location  # type: ignore[return-value]

        location_id = parameters.get("location_id")
        if location_id is not None:
            return self._repository.location_service.load_location(int(location_id))  # type: ignore[call-overload]

        # 从未发布过的草稿没有主位置
        main_location_id = content.content_info.main_location_id
        if main_location_id is not None:
            return self._repository.location_service.load_location(main_location_id)
        return None
