"""视图构建器."""

from .base import ViewBuilder, ViewBuilderRegistry
from .content_create_view_builder import ContentCreateViewBuilder
from .content_edit_view_builder import ContentEditViewBuilder

__all__ = [
    "ContentCreateViewBuilder",
    "ContentEditViewBuilder",
    "ViewBuilder",
    "ViewBuilderRegistry",
]
