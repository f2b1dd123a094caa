"""编辑草稿表单挂载过滤器."""

from __future__ import annotations

from typing import TYPE_CHECKING

from repoforms.constants import ViewRoute
from repoforms.data.mapper import ContentUpdateMapper
from repoforms.forms.types.content import ContentEditType
from repoforms.utils.structlog_config import log_info

if TYPE_CHECKING:
    from repoforms.core.types import ContentService, ContentTypeService
    from repoforms.data import ContentUpdateData
    from repoforms.forms.factory import FormFactory
    from repoforms.forms.form import Form
    from repoforms.models import Content
    from repoforms.views.filters.events import FilterViewBuilderParametersEvent


class ContentEditViewFilter:
    """在编辑草稿视图构建前加载草稿并挂载已绑定请求的表单.

    只对 ``ViewRoute.CONTENT_EDIT_DRAFT`` 生效,其他路由的参数保持不变.
    """

    def __init__(
        self,
        content_service: ContentService,
        content_type_service: ContentTypeService,
        form_factory: FormFactory,
    ) -> None:
        self._content_service = content_service
        self._content_type_service = content_type_service
        self._form_factory = form_factory

    def subscribed_routes(self) -> frozenset[ViewRoute]:
        return frozenset({ViewRoute.CONTENT_EDIT_DRAFT})

    def handle(self, event: FilterViewBuilderParametersEvent) -> None:
        self.handle_content_edit_form(event)

    def handle_content_edit_form(self, event: FilterViewBuilderParametersEvent) -> None:
        """加载草稿与内容类型,构建编辑表单并写入 ``parameters["form"]``.

        Args:
            event: 参数过滤事件,请求的 ``view_args`` 需包含 content_id、version_no、language.

        Raises:
            NotFoundError: 草稿或内容类型不存在.
            UnauthorizedError: 无权读取草稿.

        """
        if ViewRoute.from_identifier(event.route) is not ViewRoute.CONTENT_EDIT_DRAFT:
            return

        request = event.request
        view_args = request.view_args or {}
        language_code: str = view_args.get("language")
        content_draft = self._content_service.load_content(
            view_args.get("content_id"),
            [language_code],
            view_args.get("version_no"),
        )
        content_type = self._content_type_service.load_content_type(content_draft.content_type_id)

        content_update = ContentUpdateMapper().map_to_form_data(
            content_draft,
            language_code=language_code,
            content_type=content_type,
        )
        form = self._resolve_content_edit_form(content_update, language_code, content_draft)

        event.parameters.update({"form": form.handle_request(request)})
        log_info(
            "编辑表单已挂载",
            module="views",
            content_id=content_draft.id,
            version_no=content_draft.version_info.version_no,
            language=language_code,
            submitted=form.is_submitted(),
        )

    def _resolve_content_edit_form(
        self,
        content_update: ContentUpdateData,
        language_code: str,
        content: Content,
    ) -> Form:
        return self._form_factory.create(
            ContentEditType,
            content_update,
            {
                "language_code": language_code,
                "main_language_code": content.content_info.main_language_code,
                "drafts_enabled": True,
            },
        )
