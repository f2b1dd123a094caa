"""视图模板配置器."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Protocol

from repoforms.utils.structlog_config import log_debug

if TYPE_CHECKING:
    from repoforms.views.content_views import BaseView


class ViewConfigurator(Protocol):
    """为视图分配最终模板."""

    def configure(self, view: BaseView) -> None:
        """协议方法: 以副作用方式设置 ``view.template_identifier``."""
        ...


class TemplateMatchConfigurator:
    """按 (视图类型, 内容类型标识) 匹配模板.

    Args:
        view_templates: ``{view_type: {content_type_identifier: template}}``,
            未命中时保留视图的默认模板.

    """

    def __init__(self, view_templates: Mapping[str, Mapping[str, str]] | None = None) -> None:
        self._view_templates = {view_type: dict(rules) for view_type, rules in (view_templates or {}).items()}

    def configure(self, view: BaseView) -> None:
        content_type = getattr(view, "content_type", None)
        if content_type is None:
            return
        template = self._view_templates.get(view.view_type, {}).get(content_type.identifier)
        if template:
            log_debug(
                "视图模板已匹配",
                module="views",
                view_type=view.view_type,
                content_type=content_type.identifier,
                template=template,
            )
            view.template_identifier = template
