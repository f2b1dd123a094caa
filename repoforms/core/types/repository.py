"""内容仓储服务协议.

持久化与权限校验完全由宿主应用提供,本包只依赖以下最小接口.
加载失败时实现方应抛出 ``NotFoundError``,无读取权限时抛出 ``UnauthorizedError``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Protocol

from repoforms.models import Content, ContentType, Language, Location, VersionInfo


class LocationService(Protocol):
    """位置服务协议."""

    def load_location(self, location_id: int) -> Location:
        """协议方法: 按 ID 加载位置."""
        ...


class LanguageService(Protocol):
    """语言服务协议."""

    def load_language(self, language_code: str) -> Language:
        """协议方法: 按语言代码加载语言."""
        ...


class ContentTypeService(Protocol):
    """内容类型服务协议."""

    def load_content_type(
        self,
        content_type_id: int,
        prioritized_languages: Sequence[str] = (),
    ) -> ContentType:
        """协议方法: 按 ID 加载内容类型."""
        ...

    def load_content_type_by_identifier(
        self,
        identifier: str,
        prioritized_languages: Sequence[str] = (),
    ) -> ContentType:
        """协议方法: 按标识加载内容类型."""
        ...


class ContentService(Protocol):
    """内容服务协议."""

    def load_content(
        self,
        content_id: int,
        languages: Sequence[str] | None = None,
        version_no: int | None = None,
    ) -> Content:
        """协议方法: 加载内容或指定版本的草稿."""
        ...

    def create_content(
        self,
        content_type: ContentType,
        main_language_code: str,
        field_values: Mapping[str, object],
        location_ids: Sequence[int],
    ) -> Content:
        """协议方法: 创建内容草稿."""
        ...

    def update_content(
        self,
        version_info: VersionInfo,
        language_code: str,
        field_values: Mapping[str, object],
    ) -> Content:
        """协议方法: 更新草稿字段."""
        ...

    def publish_version(self, version_info: VersionInfo) -> Content:
        """协议方法: 发布草稿版本."""
        ...


class FieldTypeService(Protocol):
    """字段类型服务协议."""

    def validate_field_settings(
        self,
        field_type_identifier: str,
        settings: Mapping[str, object],
    ) -> list[str]:
        """协议方法: 校验字段设置,返回错误信息列表."""
        ...


class Repository(Protocol):
    """仓储门面,聚合各领域服务."""

    location_service: LocationService
    content_language_service: LanguageService
    content_type_service: ContentTypeService
    content_service: ContentService


__all__ = [
    "ContentService",
    "ContentTypeService",
    "FieldTypeService",
    "LanguageService",
    "LocationService",
    "Repository",
]
