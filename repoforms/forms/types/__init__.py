"""表单形态集合."""

from .field_values import KeywordField
from .content import (
    ContentEditOptions,
    ContentEditType,
    ContentFieldOptions,
    ContentFieldType,
)

__all__ = [
    "ContentEditOptions",
    "ContentEditType",
    "ContentFieldOptions",
    "ContentFieldType",
    "KeywordField",
]
