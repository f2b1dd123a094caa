"""表单动作分派.

基于 blinker 信号: 每次分派先发送通用的 ``content.edit`` 信号,
再发送 ``content.edit.<动作名>`` 信号;接收方通过 ``event.response`` 返回响应.
每个分派器持有自己的信号命名空间,订阅随分派器一同释放.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol

from blinker import Namespace, Signal
from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from repoforms.errors import InvalidOptionsError
from repoforms.utils.structlog_config import log_debug

if TYPE_CHECKING:
    from werkzeug.wrappers import Response

    from repoforms.forms.form import Form

CONTENT_EDIT_EVENT = "content.edit"


class ActionDispatcher(Protocol):
    """表单动作分派器."""

    def dispatch_form_action(
        self,
        form: Form,
        data: object | None,
        action_name: str | None = None,
        options: Mapping[str, object] | None = None,
    ) -> None:
        """协议方法: 分派表单动作."""
        ...

    def get_response(self) -> Response | None:
        """协议方法: 最近一次分派产生的响应."""
        ...


class ContentActionOptions(BaseModel):
    """内容动作可接受的选项."""

    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)

    referrer_location: Any = None


@dataclass(slots=True)
class FormActionEvent:
    """一次表单动作.

    Attributes:
        form: 已提交的表单.
        data: 表单绑定的数据对象.
        action_name: 点击的按钮名,可能为 None.
        options: 已校验的动作选项.
        response: 接收方写入的响应.

    """

    form: Form
    data: object | None
    action_name: str | None
    options: dict[str, object] = field(default_factory=dict)
    response: Response | None = None

    def has_response(self) -> bool:
        return self.response is not None


class ContentActionDispatcher:
    """内容表单动作分派器.

    信号属于分派器自己的命名空间,不同分派器的订阅互不影响.
    """

    def __init__(self) -> None:
        self._signals = Namespace()
        self._response: Response | None = None

    def signal(self, action_name: str | None = None) -> Signal:
        """返回动作对应的信号,缺省为通用信号."""
        if action_name is None:
            return self._signals.signal(CONTENT_EDIT_EVENT)
        return self._signals.signal(f"{CONTENT_EDIT_EVENT}.{action_name}")

    def dispatch_form_action(
        self,
        form: Form,
        data: object | None,
        action_name: str | None = None,
        options: Mapping[str, object] | None = None,
    ) -> None:
        """分派表单动作.

        Args:
            form: 已提交的表单.
            data: 表单绑定的数据对象.
            action_name: 点击的按钮名.
            options: 动作选项,仅接受 ``referrer_location``.

        Raises:
            InvalidOptionsError: 选项包含未声明的键.

        """
        try:
            resolved = ContentActionOptions.model_validate(dict(options or {}))
        except PydanticValidationError as exc:
            raise InvalidOptionsError(
                "表单动作选项无效",
                extra={"action": action_name, "errors": exc.errors(include_url=False)},
            ) from exc

        event = FormActionEvent(
            form=form,
            data=data,
            action_name=action_name,
            options=dict(resolved),
        )
        self._response = None

        self.signal().send(self, event=event)
        if action_name is not None:
            self.signal(action_name).send(self, event=event)

        self._response = event.response
        log_debug(
            "表单动作已分派",
            module="actions",
            action=action_name,
            has_response=event.has_response(),
        )

    def get_response(self) -> Response | None:
        return self._response


__all__ = [
    "CONTENT_EDIT_EVENT",
    "ActionDispatcher",
    "ContentActionDispatcher",
    "ContentActionOptions",
    "FormActionEvent",
]
