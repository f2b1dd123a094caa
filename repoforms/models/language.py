"""语言值对象."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Language:
    """内容仓储中的语言."""

    id: int
    language_code: str
    name: str = ""
    enabled: bool = True
