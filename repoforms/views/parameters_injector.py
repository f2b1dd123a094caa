"""视图参数注入器."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from repoforms.core.types import ViewParameters
    from repoforms.views.content_views import BaseView


class ParametersInjector(Protocol):
    """把调用方提供的额外参数合并进视图."""

    def inject_view_parameters(self, view: BaseView, parameters: ViewParameters) -> None:
        """协议方法: 注入视图参数."""
        ...


class CustomParametersInjector:
    """注入自定义参数.

    - ``params``: 映射,原样合并到视图参数.
    - ``layout``: 显式为 False 时设置 ``no_layout=True``.
    """

    def inject_view_parameters(self, view: BaseView, parameters: ViewParameters) -> None:
        custom = parameters.get("params")
        if isinstance(custom, Mapping):
            view.add_parameters(dict(custom))

        if parameters.get("layout") is False:
            view.add_parameters({"no_layout": True})
