"""视图对象.

视图构建器返回的结果: 要么是携带模板与参数的填充视图,
要么是已经得到响应的短路视图.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from werkzeug.wrappers import Response

    from repoforms.forms.form import Form
    from repoforms.models import Content, ContentType, Language, Location


class BaseView:
    """视图基类.

    Attributes:
        template_identifier: 渲染所用模板,由配置器最终确定.
        view_type: 视图类型,配置器据此匹配模板规则.

    """

    view_type: ClassVar[str] = "view"

    def __init__(
        self,
        template_identifier: str | None = None,
        parameters: Mapping[str, object] | None = None,
    ) -> None:
        self.template_identifier = template_identifier
        self._parameters: dict[str, object] = dict(parameters or {})

    def add_parameters(self, parameters: Mapping[str, object]) -> None:
        self._parameters.update(parameters)

    def get_parameters(self) -> dict[str, object]:
        return dict(self._parameters)

    def get_parameter(self, name: str) -> object:
        """读取参数.

        Raises:
            KeyError: 参数不存在时抛出.

        """
        return self._parameters[name]

    def has_parameter(self, name: str) -> bool:
        return name in self._parameters


class ContentCreateView(BaseView):
    """新建内容视图."""

    view_type = "content_create"

    def __init__(
        self,
        template_identifier: str | None = None,
        parameters: Mapping[str, object] | None = None,
    ) -> None:
        super().__init__(template_identifier, parameters)
        self.content_type: ContentType | None = None
        self.language: Language | None = None
        self.location: Location | None = None
        self.form: Form | None = None


class ContentCreateSuccessView(BaseView):
    """动作分派已产生响应时的短路结果."""

    view_type = "content_create_success"

    def __init__(self, response: Response) -> None:
        super().__init__(None)
        self.response = response


class ContentEditView(BaseView):
    """编辑草稿视图."""

    view_type = "content_edit"

    def __init__(
        self,
        template_identifier: str | None = None,
        parameters: Mapping[str, object] | None = None,
    ) -> None:
        super().__init__(template_identifier, parameters)
        self.content: Content | None = None
        self.content_type: ContentType | None = None
        self.language: Language | None = None
        self.location: Location | None = None
        self.form: Form | None = None


ContentCreateResult = ContentCreateView | ContentCreateSuccessView
