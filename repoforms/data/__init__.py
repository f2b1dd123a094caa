"""表单数据传输对象与映射器."""

from .content import ContentCreateData, ContentFormData, ContentUpdateData, FieldData
from .mapper import ContentCreateMapper, ContentUpdateMapper

__all__ = [
    "ContentCreateData",
    "ContentCreateMapper",
    "ContentFormData",
    "ContentUpdateData",
    "ContentUpdateMapper",
    "FieldData",
]
