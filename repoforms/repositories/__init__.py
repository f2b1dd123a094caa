"""仓储实现."""

from .memory_repository import (
    InMemoryContentService,
    InMemoryContentTypeService,
    InMemoryLanguageService,
    InMemoryLocationService,
    InMemoryRepository,
)

__all__ = [
    "InMemoryContentService",
    "InMemoryContentTypeService",
    "InMemoryLanguageService",
    "InMemoryLocationService",
    "InMemoryRepository",
]
