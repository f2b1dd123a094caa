"""字段值表单映射器及其分派器.

每种字段类型对应一个无状态映射器,表单构建流程对每个字段定义调用一次.
新增字段类型只需注册新的映射器,分派逻辑保持不变.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, ClassVar

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from wtforms.validators import InputRequired, Optional

from repoforms.errors import InvalidOptionsError
from repoforms.utils.structlog_config import log_debug

if TYPE_CHECKING:
    from repoforms.data import FieldData
    from repoforms.forms.form import Form
    from repoforms.models import FieldDefinition


class FieldValueOptions(BaseModel):
    """映射器选项基类."""

    model_config = ConfigDict(extra="forbid", frozen=True)


class FieldValueFormMapper:
    """字段值表单映射器基类.

    子类实现 ``map_field_value_form``,通过 ``options_class`` 声明自身的选项结构.
    """

    options_class: ClassVar[type[FieldValueOptions]] = FieldValueOptions

    def __init__(self, options: Mapping[str, object] | None = None) -> None:
        self.options = self.configure_options(options)

    def map_field_value_form(self, field_form: Form, data: FieldData) -> None:
        """向字段表单添加名为 ``value`` 的值字段."""
        raise NotImplementedError

    def configure_options(self, options: Mapping[str, object] | None = None) -> FieldValueOptions:
        """以默认值为基础校验选项.

        Raises:
            InvalidOptionsError: 选项未声明或类型不符.

        """
        try:
            return self.options_class.model_validate(dict(options or {}))
        except PydanticValidationError as exc:
            raise InvalidOptionsError(
                f"映射器 {type(self).__name__} 的选项无效",
                extra={"mapper": type(self).__name__, "errors": exc.errors(include_url=False)},
            ) from exc

    def option_schema(self) -> frozenset[str]:
        return frozenset(self.options_class.model_fields)

    @staticmethod
    def resolve_label(field_form: Form, data: FieldData) -> str:
        """解析字段标签.

        优先使用表单主语言下的名称;缺失或为空时,按语言代码字典序取第一个非空名称;
        字段定义没有任何名称时使用字段标识.

        Args:
            field_form: 字段表单,其选项中包含 ``main_language_code``.
            data: 字段数据.

        Returns:
            标签文本.

        """
        definition = data.field_definition
        main_language_code = getattr(field_form.options, "main_language_code", None)
        label = definition.get_name(main_language_code)
        if label:
            return label
        names = definition.get_names()
        for language_code in sorted(names):
            if names[language_code]:
                return names[language_code]
        return definition.identifier

    @staticmethod
    def required_validators(definition: FieldDefinition) -> list[object]:
        if definition.is_required:
            return [InputRequired()]
        return [Optional()]


class FieldTypeFormMapperDispatcher:
    """按字段类型标识分派到对应的映射器."""

    def __init__(self, mappers: Mapping[str, FieldValueFormMapper] | None = None) -> None:
        self._mappers: dict[str, FieldValueFormMapper] = dict(mappers or {})

    @classmethod
    def with_default_mappers(cls, translation_domain: str | None = None) -> FieldTypeFormMapperDispatcher:
        """创建已注册内置映射器的分派器.

        Args:
            translation_domain: 关键字字段的翻译域,缺省使用映射器默认值.

        """
        # 延迟导入: 具体映射器依赖本模块的基类
        from repoforms.constants import FieldTypeIdentifier
        from repoforms.field_types.keyword_form_mapper import KeywordFormMapper
        from repoforms.field_types.text_line_form_mapper import TextLineFormMapper

        return cls(
            {
                FieldTypeIdentifier.KEYWORD: KeywordFormMapper(
                    {"translation_domain": translation_domain} if translation_domain else None,
                ),
                FieldTypeIdentifier.TEXT_LINE: TextLineFormMapper(),
            },
        )

    def add_mapper(self, mapper: FieldValueFormMapper, field_type_identifier: str) -> None:
        self._mappers[field_type_identifier] = mapper

    def has_mapper(self, field_type_identifier: str) -> bool:
        return field_type_identifier in self._mappers

    def map(self, field_form: Form, data: FieldData) -> None:
        """调用字段类型对应的映射器,未注册的类型不做处理."""
        field_type_identifier = data.field_definition.field_type_identifier
        mapper = self._mappers.get(field_type_identifier)
        if mapper is None:
            log_debug(
                "字段类型未注册映射器,跳过",
                module="field_types",
                field_type=field_type_identifier,
                field=data.field_definition.identifier,
            )
            return
        mapper.map_field_value_form(field_form, data)
