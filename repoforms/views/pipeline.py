"""视图构建流水线.

显式组合: 先运行关注该路由的参数过滤器,再交给匹配的视图构建器.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from repoforms.views.filters.events import FilterViewBuilderParametersEvent

if TYPE_CHECKING:
    from repoforms.constants import ViewRoute
    from repoforms.views.builders.base import ViewBuilderRegistry
    from repoforms.views.content_views import BaseView
    from repoforms.views.filters.events import ViewParametersFilter


class ViewBuilderPipeline:
    """按路由构建视图."""

    def __init__(
        self,
        registry: ViewBuilderRegistry,
        filters: Iterable[ViewParametersFilter] = (),
    ) -> None:
        self._registry = registry
        self._filters = list(filters)

    def build_view(
        self,
        route: ViewRoute,
        request: Any,
        parameters: Mapping[str, object] | None = None,
    ) -> BaseView:
        """构建视图.

        Args:
            route: 视图路由.
            request: 当前请求.
            parameters: 初始视图参数,不会被修改.

        Returns:
            视图构建器返回的视图.

        Raises:
            ViewBuilderNotFoundError: 没有构建器处理该路由.

        """
        event = FilterViewBuilderParametersEvent(route=route, request=request, parameters=dict(parameters or {}))
        for view_filter in self._filters:
            if route in view_filter.subscribed_routes():
                view_filter.handle(event)

        builder = self._registry.get_from_registry(route)
        return builder.build_view(event.parameters)
