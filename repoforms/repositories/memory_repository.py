"""内存仓储.

职责:
- 以字典保存语言、位置、内容类型与内容版本,实现 ``Repository`` 协议
- 供本地启动与路由测试使用,不做权限校验
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import replace

from repoforms.errors import NotFoundError
from repoforms.models import (
    Content,
    ContentInfo,
    ContentType,
    Field,
    Language,
    Location,
    VersionInfo,
    VersionStatus,
)


class InMemoryLocationService:
    def __init__(self, locations: Iterable[Location] = ()) -> None:
        self._locations = {location.id: location for location in locations}

    def add(self, location: Location) -> None:
        self._locations[location.id] = location

    def load_location(self, location_id: int) -> Location:
        location = self._locations.get(location_id)
        if location is None:
            raise NotFoundError(f"位置 {location_id} 不存在", extra={"location_id": location_id})
        return location


class InMemoryLanguageService:
    def __init__(self, languages: Iterable[Language] = ()) -> None:
        self._languages = {language.language_code: language for language in languages}

    def load_language(self, language_code: str) -> Language:
        language = self._languages.get(language_code)
        if language is None or not language.enabled:
            raise NotFoundError(f"语言 {language_code} 不存在", extra={"language_code": language_code})
        return language


class InMemoryContentTypeService:
    def __init__(self, content_types: Iterable[ContentType] = ()) -> None:
        self._content_types = {content_type.id: content_type for content_type in content_types}

    def load_content_type(self, content_type_id: int, prioritized_languages: Sequence[str] = ()) -> ContentType:
        del prioritized_languages
        content_type = self._content_types.get(content_type_id)
        if content_type is None:
            raise NotFoundError(f"内容类型 {content_type_id} 不存在", extra={"content_type_id": content_type_id})
        return content_type

    def load_content_type_by_identifier(
        self,
        identifier: str,
        prioritized_languages: Sequence[str] = (),
    ) -> ContentType:
        del prioritized_languages
        for content_type in self._content_types.values():
            if content_type.identifier == identifier:
                return content_type
        raise NotFoundError(f"内容类型 {identifier} 不存在", extra={"identifier": identifier})


class InMemoryContentService:
    """按 (内容 ID, 版本号) 保存内容版本."""

    def __init__(self, location_service: InMemoryLocationService) -> None:
        self._location_service = location_service
        self._versions: dict[tuple[int, int], Content] = {}
        self._next_content_id = 1
        self._next_location_id = 1000
        # 新建内容在发布前只记录父位置
        self._pending_locations: dict[int, list[int]] = {}

    def add(self, content: Content) -> None:
        self._versions[(content.id, content.version_info.version_no)] = content
        self._next_content_id = max(self._next_content_id, content.id + 1)

    def load_content(
        self,
        content_id: int,
        languages: Sequence[str] | None = None,
        version_no: int | None = None,
    ) -> Content:
        del languages
        if version_no is None:
            versions = [no for (cid, no) in self._versions if cid == content_id]
            version_no = max(versions, default=0)
        content = self._versions.get((content_id, version_no))
        if content is None:
            raise NotFoundError(
                f"内容 {content_id} 版本 {version_no} 不存在",
                extra={"content_id": content_id, "version_no": version_no},
            )
        return content

    def create_content(
        self,
        content_type: ContentType,
        main_language_code: str,
        field_values: Mapping[str, object],
        location_ids: Sequence[int],
    ) -> Content:
        content_id = self._next_content_id
        content = Content(
            content_info=ContentInfo(
                id=content_id,
                content_type_id=content_type.id,
                main_language_code=main_language_code,
                name=str(next(iter(field_values.values()), "") or ""),
            ),
            version_info=VersionInfo(
                content_id=content_id,
                version_no=1,
                language_codes=(main_language_code,),
            ),
            fields=tuple(
                Field(field_def_identifier=identifier, language_code=main_language_code, value=value)
                for identifier, value in field_values.items()
            ),
        )
        self.add(content)
        self._pending_locations[content_id] = list(location_ids)
        return content

    def update_content(
        self,
        version_info: VersionInfo,
        language_code: str,
        field_values: Mapping[str, object],
    ) -> Content:
        draft = self.load_content(version_info.content_id, version_no=version_info.version_no)
        kept = tuple(
            item
            for item in draft.fields
            if not (item.language_code == language_code and item.field_def_identifier in field_values)
        )
        updated = tuple(
            Field(field_def_identifier=identifier, language_code=language_code, value=value)
            for identifier, value in field_values.items()
        )
        language_codes = tuple(dict.fromkeys((*draft.version_info.language_codes, language_code)))
        content = replace(
            draft,
            version_info=replace(draft.version_info, language_codes=language_codes),
            fields=kept + updated,
        )
        self.add(content)
        return content

    def publish_version(self, version_info: VersionInfo) -> Content:
        draft = self.load_content(version_info.content_id, version_no=version_info.version_no)
        content_info = draft.content_info
        if content_info.main_location_id is None:
            parent_ids = self._pending_locations.pop(content_info.id, [])
            if parent_ids:
                location = Location(
                    id=self._next_location_id,
                    content_id=content_info.id,
                    parent_location_id=parent_ids[0],
                )
                self._next_location_id += 1
                self._location_service.add(location)
                content_info = replace(content_info, main_location_id=location.id)
        content = replace(
            draft,
            content_info=replace(content_info, published=True),
            version_info=replace(draft.version_info, status=VersionStatus.PUBLISHED),
        )
        self.add(content)
        return content


class InMemoryRepository:
    """聚合内存服务的仓储门面."""

    def __init__(
        self,
        *,
        languages: Iterable[Language] = (),
        locations: Iterable[Location] = (),
        content_types: Iterable[ContentType] = (),
        contents: Iterable[Content] = (),
    ) -> None:
        self.location_service = InMemoryLocationService(locations)
        self.content_language_service = InMemoryLanguageService(languages)
        self.content_type_service = InMemoryContentTypeService(content_types)
        self.content_service = InMemoryContentService(self.location_service)
        for content in contents:
            self.content_service.add(content)
