"""表单动作完成后的跳转地址."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from flask import url_for

if TYPE_CHECKING:
    from repoforms.models import Content, Location


class ContentUrlBuilder(Protocol):
    """跳转地址生成协议."""

    def content_url(self, content: Content) -> str:
        """协议方法: 已发布内容的地址."""
        ...

    def draft_edit_url(self, content: Content, language_code: str) -> str:
        """协议方法: 草稿编辑页地址."""
        ...

    def location_url(self, location: Location | None) -> str:
        """协议方法: 位置地址,位置为空时返回首页."""
        ...


class RouteUrlBuilder:
    """按路径模板生成地址,草稿编辑页使用蓝图路由.

    Args:
        content_view_url: 内容地址模板,支持 ``{content_id}``.
        location_view_url: 位置地址模板,支持 ``{location_id}``.

    """

    def __init__(
        self,
        content_view_url: str = "/view/content/{content_id}",
        location_view_url: str = "/view/location/{location_id}",
    ) -> None:
        self._content_view_url = content_view_url
        self._location_view_url = location_view_url

    def content_url(self, content: Content) -> str:
        return self._content_view_url.format(content_id=content.id)

    def draft_edit_url(self, content: Content, language_code: str) -> str:
        return url_for(
            "content_edit.edit_version_draft",
            content_id=content.id,
            version_no=content.version_info.version_no,
            language=language_code,
        )

    def location_url(self, location: Location | None) -> str:
        if location is None:
            return "/"
        return self._location_view_url.format(location_id=location.id)
