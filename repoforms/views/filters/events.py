"""视图构建前的参数过滤事件."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from repoforms.constants import ViewRoute


@dataclass(slots=True)
class FilterViewBuilderParametersEvent:
    """携带可变参数映射与原始请求.

    Attributes:
        route: 当前视图路由.
        request: 原始请求对象.
        parameters: 将交给视图构建器的参数,过滤器可直接修改.

    """

    route: ViewRoute
    request: Any
    parameters: dict[str, object] = field(default_factory=dict)


class ViewParametersFilter(Protocol):
    """视图参数过滤器."""

    def subscribed_routes(self) -> frozenset[ViewRoute]:
        """协议方法: 关注的路由集合."""
        ...

    def handle(self, event: FilterViewBuilderParametersEvent) -> None:
        """协议方法: 处理事件."""
        ...
