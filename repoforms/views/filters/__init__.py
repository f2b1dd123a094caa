"""视图参数过滤器."""

from .content_edit_view_filter import ContentEditViewFilter
from .events import FilterViewBuilderParametersEvent, ViewParametersFilter

__all__ = [
    "ContentEditViewFilter",
    "FilterViewBuilderParametersEvent",
    "ViewParametersFilter",
]
