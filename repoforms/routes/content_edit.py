"""内容新建/编辑路由."""

from __future__ import annotations

from typing import TYPE_CHECKING

from flask import Blueprint, render_template, request

from repoforms.constants import ViewRoute
from repoforms.data import ContentCreateMapper
from repoforms.extensions import get_services
from repoforms.forms.types import ContentEditType
from repoforms.utils.route_safety import safe_route_call
from repoforms.utils.structlog_config import log_info
from repoforms.views.content_views import ContentCreateSuccessView, ContentEditView

if TYPE_CHECKING:
    from flask.typing import ResponseReturnValue

    from repoforms.actions import ContentActionDispatcher
    from repoforms.views.content_views import BaseView

content_edit_bp = Blueprint("content_edit", __name__)

_NO_LAYOUT_VALUES = frozenset({"0", "false", "no"})


def _layout_parameters() -> dict[str, object]:
    layout = request.args.get("layout")
    if layout is not None and layout.strip().lower() in _NO_LAYOUT_VALUES:
        return {"layout": False}
    return {}


def _render_view(view: BaseView) -> ResponseReturnValue:
    if isinstance(view, ContentCreateSuccessView):
        return view.response
    return render_template(view.template_identifier, **view.get_parameters())


def _dispatch_edit_action(view: ContentEditView, dispatcher: ContentActionDispatcher) -> ResponseReturnValue | None:
    form = view.form
    if form is None or not form.is_valid() or form.clicked_button is None:
        return None
    dispatcher.dispatch_form_action(
        form,
        form.get_data(),
        form.clicked_button.short_name,
        {"referrer_location": view.location},
    )
    return dispatcher.get_response()


@content_edit_bp.route(
    "/content/create/nodraft/<content_type_identifier>/<language_code>/<int:parent_location_id>",
    methods=["GET", "POST"],
)
def create_without_draft(
    content_type_identifier: str,
    language_code: str,
    parent_location_id: int,
) -> ResponseReturnValue:
    """新建内容(不预先创建草稿).

    Args:
        content_type_identifier: 内容类型标识.
        language_code: 新内容的主语言.
        parent_location_id: 父位置 ID.

    Returns:
        渲染后的新建页面,或动作处理器返回的跳转响应.

    """

    def _execute() -> ResponseReturnValue:
        services = get_services()
        repository = services.repository
        language = repository.content_language_service.load_language(language_code)
        content_type = repository.content_type_service.load_content_type_by_identifier(
            content_type_identifier,
            [language_code],
        )
        parent_location = repository.location_service.load_location(parent_location_id)

        data = ContentCreateMapper().map_to_form_data(
            content_type,
            main_language_code=language_code,
            parent_location=parent_location,
        )
        form = services.form_factory.create(
            ContentEditType,
            data,
            {
                "language_code": language_code,
                "main_language_code": language_code,
                "drafts_enabled": True,
            },
        ).handle_request(request)

        pipeline = services.create_pipeline(services.create_dispatcher())
        view = pipeline.build_view(
            ViewRoute.CONTENT_CREATE_WITHOUT_DRAFT,
            request,
            {
                "language": language,
                "content_type": content_type,
                "parent_location": parent_location,
                "form": form,
                **_layout_parameters(),
            },
        )
        return _render_view(view)

    return safe_route_call(
        _execute,
        module="content_edit",
        action="create_without_draft",
        public_error="加载新建内容页面失败",
        context={
            "content_type": content_type_identifier,
            "language": language_code,
            "parent_location_id": parent_location_id,
        },
    )


@content_edit_bp.route(
    "/content/edit/draft/<int:content_id>/<int:version_no>/<language>",
    methods=["GET", "POST"],
)
def edit_version_draft(content_id: int, version_no: int, language: str) -> ResponseReturnValue:
    """编辑内容草稿.

    编辑表单由 ContentEditViewFilter 在构建视图前挂载;
    表单提交有效时在此分派动作.
    """

    def _execute() -> ResponseReturnValue:
        services = get_services()
        dispatcher = services.create_dispatcher()
        pipeline = services.create_pipeline(dispatcher)
        view = pipeline.build_view(
            ViewRoute.CONTENT_EDIT_DRAFT,
            request,
            {
                "content_id": content_id,
                "version_no": version_no,
                "language": language,
                **_layout_parameters(),
            },
        )
        if isinstance(view, ContentEditView):
            response = _dispatch_edit_action(view, dispatcher)
            if response is not None:
                log_info(
                    "草稿表单动作已产生响应",
                    module="content_edit",
                    content_id=content_id,
                    version_no=version_no,
                )
                return response
        return _render_view(view)

    return safe_route_call(
        _execute,
        module="content_edit",
        action="edit_version_draft",
        public_error="加载草稿编辑页面失败",
        context={"content_id": content_id, "version_no": version_no, "language": language},
    )
