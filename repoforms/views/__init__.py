"""视图构建: 参数解析、视图构建器、参数过滤器与流水线."""

from .content_views import (
    BaseView,
    ContentCreateResult,
    ContentCreateSuccessView,
    ContentCreateView,
    ContentEditView,
)
from .resolution import ContextResolver, ResolvedContext

__all__ = [
    "BaseView",
    "ContentCreateResult",
    "ContentCreateSuccessView",
    "ContentCreateView",
    "ContentEditView",
    "ContextResolver",
    "ResolvedContext",
]
