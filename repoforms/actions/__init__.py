"""表单动作分派与处理."""

from .content_form_processor import ContentFormProcessor
from .dispatcher import (
    ActionDispatcher,
    ContentActionDispatcher,
    FormActionEvent,
)
from .url_builder import ContentUrlBuilder, RouteUrlBuilder

__all__ = [
    "ActionDispatcher",
    "ContentActionDispatcher",
    "ContentFormProcessor",
    "ContentUrlBuilder",
    "FormActionEvent",
    "RouteUrlBuilder",
]
