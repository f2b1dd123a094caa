"""通用结构化类型别名."""

from __future__ import annotations

from collections.abc import Mapping

JsonValue = str | int | float | bool | None | list["JsonValue"] | dict[str, "JsonValue"]
JsonDict = dict[str, JsonValue]
ContextDict = dict[str, object]
LoggerExtra = dict[str, object]

# 视图构建请求参数: 同一概念可能以多个兼容键名出现
ViewParameters = Mapping[str, object]
