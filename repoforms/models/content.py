"""内容、版本与字段值对象."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class VersionStatus(str, Enum):
    """版本状态."""

    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


@dataclass(frozen=True, slots=True)
class ContentInfo:
    """内容元信息."""

    id: int
    content_type_id: int
    main_language_code: str
    name: str = ""
    main_location_id: int | None = None
    published: bool = False


@dataclass(frozen=True, slots=True)
class VersionInfo:
    """内容版本信息."""

    content_id: int
    version_no: int
    language_codes: tuple[str, ...] = ()
    status: VersionStatus = VersionStatus.DRAFT

    @property
    def is_draft(self) -> bool:
        return self.status is VersionStatus.DRAFT


@dataclass(frozen=True, slots=True)
class Field:
    """某一语言下的字段值."""

    field_def_identifier: str
    language_code: str
    value: object | None = None


@dataclass(frozen=True, slots=True)
class Content:
    """内容对象(已发布内容或草稿)."""

    content_info: ContentInfo
    version_info: VersionInfo
    fields: tuple[Field, ...] = ()

    @property
    def id(self) -> int:
        return self.content_info.id

    @property
    def content_type_id(self) -> int:
        return self.content_info.content_type_id

    def get_field(self, identifier: str, language_code: str | None = None) -> Field | None:
        """查找字段值.

        Args:
            identifier: 字段定义标识.
            language_code: 语言代码,缺省时使用内容主语言.

        Returns:
            匹配的字段,不存在时返回 None.

        """
        code = language_code or self.content_info.main_language_code
        for item in self.fields:
            if item.field_def_identifier == identifier and item.language_code == code:
                return item
        return None
