"""仓储值对象.

这些对象由外部仓储服务返回,本包只读取不修改.
"""

from .content import Content, ContentInfo, Field, VersionInfo, VersionStatus
from .content_type import ContentType, FieldDefinition
from .language import Language
from .location import Location

__all__ = [
    "Content",
    "ContentInfo",
    "ContentType",
    "Field",
    "FieldDefinition",
    "Language",
    "Location",
    "VersionInfo",
    "VersionStatus",
]
