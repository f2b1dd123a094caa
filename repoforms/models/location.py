"""位置值对象."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Location:
    """内容树中的一个位置节点.

    Attributes:
        id: 位置 ID.
        content_id: 该位置承载的内容 ID.
        parent_location_id: 父位置 ID,根节点为 None.
        path_string: 形如 ``/1/2/42/`` 的路径串.

    """

    id: int
    content_id: int
    parent_location_id: int | None = None
    path_string: str = ""
