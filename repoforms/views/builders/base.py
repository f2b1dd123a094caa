"""视图构建器协议与注册表."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol

from repoforms.errors import ViewBuilderNotFoundError

if TYPE_CHECKING:
    from repoforms.constants import ViewRoute
    from repoforms.core.types import ViewParameters
    from repoforms.views.content_views import BaseView


class ViewBuilder(Protocol):
    """视图构建器."""

    def matches(self, route: ViewRoute) -> bool:
        """协议方法: 是否处理该路由."""
        ...

    def build_view(self, parameters: ViewParameters) -> BaseView:
        """协议方法: 根据参数构建视图."""
        ...


class ViewBuilderRegistry:
    """按路由查找视图构建器."""

    def __init__(self, builders: Iterable[ViewBuilder] = ()) -> None:
        self._builders: list[ViewBuilder] = list(builders)

    def add_builder(self, builder: ViewBuilder) -> None:
        self._builders.append(builder)

    def get_from_registry(self, route: ViewRoute) -> ViewBuilder:
        """返回第一个匹配的构建器.

        Raises:
            ViewBuilderNotFoundError: 没有构建器匹配该路由.

        """
        for builder in self._builders:
            if builder.matches(route):
                return builder
        raise ViewBuilderNotFoundError(
            f"未找到处理路由 {route.value} 的视图构建器",
            extra={"route": route.value},
        )
