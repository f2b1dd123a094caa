"""字段类型表单映射器."""

from .keyword_form_mapper import KeywordFormMapper, KeywordValueOptions
from .mapper import FieldTypeFormMapperDispatcher, FieldValueFormMapper, FieldValueOptions
from .text_line_form_mapper import TextLineFormMapper

__all__ = [
    "FieldTypeFormMapperDispatcher",
    "FieldValueFormMapper",
    "FieldValueOptions",
    "KeywordFormMapper",
    "KeywordValueOptions",
    "TextLineFormMapper",
]
