"""核心类型定义."""

from .repository import (
    ContentService,
    ContentTypeService,
    FieldTypeService,
    LanguageService,
    LocationService,
    Repository,
)
from .structures import (
    ContextDict,
    JsonDict,
    JsonValue,
    LoggerExtra,
    ViewParameters,
)

__all__ = [
    "ContentService",
    "ContentTypeService",
    "ContextDict",
    "FieldTypeService",
    "JsonDict",
    "JsonValue",
    "LanguageService",
    "LocationService",
    "LoggerExtra",
    "Repository",
    "ViewParameters",
]
