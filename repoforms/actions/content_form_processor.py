"""内容表单动作处理器."""

from __future__ import annotations

from typing import TYPE_CHECKING

from flask import redirect

from repoforms.constants.system_constants import SuccessMessages
from repoforms.data import ContentCreateData, ContentUpdateData
from repoforms.errors import ValidationError
from repoforms.utils.structlog_config import log_info

if TYPE_CHECKING:
    from repoforms.actions.dispatcher import ContentActionDispatcher, FormActionEvent
    from repoforms.actions.url_builder import ContentUrlBuilder
    from repoforms.core.types import ContentService
    from repoforms.models import Content, Location


class ContentFormProcessor:
    """处理发布、保存草稿与取消动作.

    通过 ``subscribe`` 连接到某个分派器的 ``content.edit.<动作>`` 信号,
    处理完成后把跳转响应写入事件.
    """

    def __init__(self, content_service: ContentService, url_builder: ContentUrlBuilder) -> None:
        self._content_service = content_service
        self._url_builder = url_builder

    def subscribe(self, dispatcher: ContentActionDispatcher) -> None:
        """连接到分派器发送的动作信号."""
        dispatcher.signal("publish").connect(self._on_publish, sender=dispatcher, weak=False)
        dispatcher.signal("save_draft").connect(self._on_save_draft, sender=dispatcher, weak=False)
        dispatcher.signal("cancel").connect(self._on_cancel, sender=dispatcher, weak=False)

    def _on_publish(self, sender: object, *, event: FormActionEvent) -> None:
        del sender
        self.process_publish(event)

    def _on_save_draft(self, sender: object, *, event: FormActionEvent) -> None:
        del sender
        self.process_save_draft(event)

    def _on_cancel(self, sender: object, *, event: FormActionEvent) -> None:
        del sender
        self.process_cancel(event)

    def process_publish(self, event: FormActionEvent) -> None:
        """保存草稿后发布,并跳转到已发布内容."""
        draft = self._save_draft(event.data)
        content = self._content_service.publish_version(draft.version_info)
        event.response = redirect(self._url_builder.content_url(content))
        log_info(
            SuccessMessages.CONTENT_PUBLISHED,
            module="actions",
            content_id=content.id,
            version_no=content.version_info.version_no,
        )

    def process_save_draft(self, event: FormActionEvent) -> None:
        """保存草稿并跳转到草稿编辑页."""
        draft = self._save_draft(event.data)
        language_code = self._language_code(event.data)
        event.response = redirect(self._url_builder.draft_edit_url(draft, language_code))
        log_info(
            SuccessMessages.DRAFT_SAVED,
            module="actions",
            content_id=draft.id,
            version_no=draft.version_info.version_no,
            language=language_code,
        )

    def process_cancel(self, event: FormActionEvent) -> None:
        """不做持久化,跳回来源位置."""
        referrer: Location | None = event.options.get("referrer_location")  # type: ignore[assignment]
        event.response = redirect(self._url_builder.location_url(referrer))
        log_info(
            "内容编辑已取消",
            module="actions",
            referrer_location_id=referrer.id if referrer is not None else None,
        )

    def _save_draft(self, data: object | None) -> Content:
        if isinstance(data, ContentCreateData):
            return self._content_service.create_content(
                data.content_type,
                data.main_language_code,
                data.field_values(),
                data.location_ids,
            )
        if isinstance(data, ContentUpdateData):
            return self._content_service.update_content(
                data.content_draft.version_info,
                data.initial_language_code,
                data.field_values(),
            )
        raise ValidationError(
            "表单数据不是内容新建或编辑数据",
            extra={"data_type": type(data).__name__},
        )

    @staticmethod
    def _language_code(data: object | None) -> str:
        if isinstance(data, ContentCreateData):
            return data.main_language_code
        if isinstance(data, ContentUpdateData):
            return data.initial_language_code
        raise ValidationError("表单数据缺少语言信息", extra={"data_type": type(data).__name__})
