"""视图参数解析.

同一概念在请求参数中可能以多个兼容键名出现,每个概念按固定顺序尝试,
首个命中的键决定结果;一个都没有时抛出 MissingParameterError,绝不静默回退.
值为 None 的键视为不存在.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from repoforms.errors import MissingParameterError
from repoforms.models import ContentType, Language, Location

if TYPE_CHECKING:
    from repoforms.core.types import Repository, ViewParameters

# 各概念接受的键名,按优先级排列
LANGUAGE_KEYS = ("language_code", "language")
PARENT_LOCATION_KEYS = ("parent_location", "parent_location_id")
CONTENT_TYPE_KEYS = ("content_type", "content_type_identifier")


@dataclass(frozen=True, slots=True)
class ResolvedContext:
    """构建内容表单所需的上下文."""

    language: Language
    content_type: ContentType
    parent_location: Location


class ContextResolver:
    """从请求参数解析语言、父位置与内容类型.

    每个概念最多读取一次仓储,不做缓存,重复调用会重新加载.
    """

    def __init__(self, repository: Repository) -> None:
        self._repository = repository

    def resolve(self, parameters: ViewParameters) -> ResolvedContext:
        """依次解析语言、父位置与内容类型.

        Args:
            parameters: 视图构建请求参数.

        Returns:
            ResolvedContext: 解析出的上下文.

        Raises:
            MissingParameterError: 任一概念缺少可接受的键.
            NotFoundError: 引用的对象在仓储中不存在.
            UnauthorizedError: 无权读取父位置.

        """
        language = self.resolve_language(parameters)
        parent_location = self.resolve_location(parameters)
        content_type = self.resolve_content_type(parameters, language)
        return ResolvedContext(language=language, content_type=content_type, parent_location=parent_location)

    def resolve_language(self, parameters: ViewParameters) -> Language:
        language_code = parameters.get("language_code")
        if language_code is not None:
            return self._load_language(str(language_code))

        language = parameters.get("language")
        if language is not None:
            # 兼容旧路由: language 可能是语言代码而非语言对象
            if isinstance(language, str):
                return self._load_language(language)
            return language  # type: ignore[return-value]

        raise MissingParameterError(
            "Language",
            "未提供语言信息, 是否缺少 language 或 language_code 参数",
            extra={"accepted_keys": list(LANGUAGE_KEYS)},
        )

    def resolve_location(self, parameters: ViewParameters) -> Location:
        parent_location = parameters.get("parent_location")
        if parent_location is not None:
            return parent_location  # type: ignore[return-value]

        parent_location_id = parameters.get("parent_location_id")
        if parent_location_id is not None:
            return self._repository.location_service.load_location(int(parent_location_id))  # type: ignore[call-overload]

        raise MissingParameterError(
            "ParentLocation",
            "无法从参数中加载父位置",
            extra={"accepted_keys": list(PARENT_LOCATION_KEYS)},
        )

    def resolve_content_type(self, parameters: ViewParameters, language: Language) -> ContentType:
        content_type = parameters.get("content_type")
        if content_type is not None:
            return content_type  # type: ignore[return-value]

        identifier = parameters.get("content_type_identifier")
        if identifier is not None:
            return self._repository.content_type_service.load_content_type_by_identifier(
                str(identifier),
                [language.language_code],
            )

        raise MissingParameterError(
            "ContentType",
            "无法从参数中加载内容类型",
            extra={"accepted_keys": list(CONTENT_TYPE_KEYS)},
        )

    def _load_language(self, language_code: str) -> Language:
        return self._repository.content_language_service.load_language(language_code)
