"""字段值输入控件."""

from __future__ import annotations

from collections.abc import Iterable

from wtforms.fields import StringField


def _split_keywords(raw: str) -> list[str]:
    return [keyword.strip() for keyword in raw.split(",") if keyword.strip()]


class KeywordField(StringField):
    """以逗号分隔文本编辑关键字列表.

    ``data`` 始终为关键字列表,渲染时拼接为 ``a, b, c``.
    """

    def process_data(self, value: object) -> None:
        if value is None:
            self.data = []
        elif isinstance(value, str):
            self.data = _split_keywords(value)
        elif isinstance(value, Iterable):
            self.data = [str(item) for item in value]
        else:
            self.data = [str(value)]

    def process_formdata(self, valuelist: list[str]) -> None:
        if valuelist:
            self.data = _split_keywords(valuelist[0])

    def _value(self) -> str:
        if not self.data:
            return ""
        return ", ".join(self.data)
