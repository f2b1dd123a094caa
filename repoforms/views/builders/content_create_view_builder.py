"""新建内容视图构建器."""

from __future__ import annotations

from typing import TYPE_CHECKING

from repoforms.constants import ViewRoute
from repoforms.errors import MissingParameterError
from repoforms.utils.structlog_config import log_debug, log_info
from repoforms.views.content_views import ContentCreateSuccessView, ContentCreateView
from repoforms.views.resolution import ContextResolver

if TYPE_CHECKING:
    from repoforms.actions.dispatcher import ActionDispatcher
    from repoforms.core.types import Repository, ViewParameters
    from repoforms.forms.form import Form
    from repoforms.views.configurator import ViewConfigurator
    from repoforms.views.content_views import ContentCreateResult
    from repoforms.views.parameters_injector import ParametersInjector


class ContentCreateViewBuilder:
    """构建新建内容视图.

    解析语言、父位置与内容类型;表单有效且点击了提交按钮时分派表单动作,
    动作产生响应则直接返回短路视图,否则组装完整的 ContentCreateView.
    """

    def __init__(
        self,
        repository: Repository,
        view_configurator: ViewConfigurator,
        parameters_injector: ParametersInjector,
        default_template: str,
        action_dispatcher: ActionDispatcher,
    ) -> None:
        self._resolver = ContextResolver(repository)
        self._view_configurator = view_configurator
        self._parameters_injector = parameters_injector
        self._default_template = default_template
        self._action_dispatcher = action_dispatcher

    def matches(self, route: ViewRoute) -> bool:
        return route is ViewRoute.CONTENT_CREATE_WITHOUT_DRAFT

    def build_view(self, parameters: ViewParameters) -> ContentCreateResult:
        """构建视图.

        Args:
            parameters: 视图参数,需包含语言、父位置、内容类型的任一可接受键以及 ``form``.

        Returns:
            ContentCreateSuccessView 或 ContentCreateView.

        Raises:
            MissingParameterError: 缺少语言、父位置、内容类型或表单.
            NotFoundError: 引用的对象不存在.
            UnauthorizedError: 无权读取父位置.

        """
        view = ContentCreateView(self._default_template)

        context = self._resolver.resolve(parameters)
        form: Form | None = parameters.get("form")  # type: ignore[assignment]
        if form is None:
            raise MissingParameterError("Form", "视图参数中缺少表单")

        clicked_button = form.clicked_button
        if form.is_valid() and clicked_button is not None:
            self._action_dispatcher.dispatch_form_action(
                form,
                form.get_data(),
                clicked_button.short_name,
                {"referrer_location": context.parent_location},
            )
            response = self._action_dispatcher.get_response()
            if response is not None:
                log_info(
                    "表单动作已产生响应,跳过视图组装",
                    module="views",
                    action=clicked_button.short_name,
                    content_type=context.content_type.identifier,
                )
                return ContentCreateSuccessView(response)

        view.content_type = context.content_type
        view.language = context.language
        view.location = context.parent_location
        view.form = form

        view.add_parameters(
            {
                "content_type": context.content_type,
                "language": context.language,
                "parent_location": context.parent_location,
                "form": form.create_view(),
            },
        )

        self._parameters_injector.inject_view_parameters(view, parameters)
        self._view_configurator.configure(view)

        log_debug(
            "新建内容视图已构建",
            module="views",
            content_type=context.content_type.identifier,
            language=context.language.language_code,
            parent_location_id=context.parent_location.id,
            template=view.template_identifier,
        )
        return view
