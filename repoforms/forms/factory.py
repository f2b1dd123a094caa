"""表单形态与表单工厂."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from repoforms.errors import InvalidOptionsError
from repoforms.forms.form import Form

FormTypeT = TypeVar("FormTypeT", bound="FormType")


class FormOptions(BaseModel):
    """表单选项基类,未声明的选项视为非法."""

    model_config = ConfigDict(extra="forbid", frozen=True)


class FormType:
    """表单形态基类.

    子类声明 ``options_class`` 描述可接受的选项,并在 ``build_form`` 中添加字段.
    """

    block_prefix: ClassVar[str] = "form"
    options_class: ClassVar[type[FormOptions]] = FormOptions

    def build_form(self, form: Form, options: FormOptions) -> None:
        """向表单添加字段与子表单,默认不做任何事."""
        del form, options


class FormFactory:
    """按形态构造表单实例.

    已注册的形态实例会被复用;未注册的形态在首次使用时以无参构造并缓存.
    """

    def __init__(self, form_types: Iterable[FormType] = ()) -> None:
        self._types: dict[type[FormType], FormType] = {}
        for form_type in form_types:
            self.register(form_type)

    def register(self, form_type: FormType) -> None:
        self._types[type(form_type)] = form_type

    def get_type(self, form_type: type[FormTypeT]) -> FormTypeT:
        instance = self._types.get(form_type)
        if instance is None:
            instance = form_type()
            self._types[form_type] = instance
        return instance  # type: ignore[return-value]

    def create(
        self,
        form_type: type[FormType],
        data: object | None = None,
        options: Mapping[str, object] | None = None,
        *,
        name: str | None = None,
        prefix: str | None = None,
    ) -> Form:
        """构造表单.

        Args:
            form_type: 表单形态类.
            data: 绑定的数据对象.
            options: 表单选项,按形态的 ``options_class`` 校验.
            name: 表单名称,缺省为形态的 ``block_prefix``.
            prefix: 请求字段前缀,缺省与名称相同.

        Returns:
            Form: 已构建但尚未提交的表单.

        Raises:
            InvalidOptionsError: 选项未声明或类型不符时抛出.

        """
        type_instance = self.get_type(form_type)
        try:
            resolved = type_instance.options_class.model_validate(dict(options or {}))
        except PydanticValidationError as exc:
            raise InvalidOptionsError(
                f"表单 {form_type.__name__} 的选项无效",
                extra={"form_type": form_type.__name__, "errors": exc.errors(include_url=False)},
            ) from exc

        form = Form(
            name or type_instance.block_prefix,
            data=data,
            options=resolved,
            factory=self,
            prefix=prefix,
        )
        type_instance.build_form(form, resolved)
        return form
