"""绑定到数据对象的表单实例.

在 WTForms ``BaseForm`` 之上补充子表单、按钮点击识别以及延迟初始化能力.
两阶段约定: 先由 FormFactory 构造,再通过 ``submit``/``handle_request`` 绑定请求数据.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from wtforms.fields import SubmitField
from wtforms.form import BaseForm
from wtforms.utils import unset_value

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pydantic import BaseModel
    from werkzeug.datastructures import MultiDict
    from wtforms.fields import Field
    from wtforms.fields.core import UnboundField

    from repoforms.forms.factory import FormFactory

SUBMIT_METHODS = frozenset({"POST", "PUT", "PATCH"})

FormErrors = dict[str, Any]


@dataclass(frozen=True, slots=True)
class BindResult:
    """一次提交的绑定结果."""

    valid: bool
    data: object | None
    errors: FormErrors = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class FormView:
    """供模板渲染的只读表单视图."""

    name: str
    fields: dict[str, Field]
    children: dict[str, FormView]
    errors: FormErrors
    submitted: bool = False
    valid: bool = False

    def __getitem__(self, name: str) -> Field | FormView:
        if name in self.fields:
            return self.fields[name]
        return self.children[name]

    def __contains__(self, name: object) -> bool:
        return name in self.fields or name in self.children


class Form:
    """表单实例.

    Attributes:
        name: 表单名称.
        prefix: 请求字段前缀,子表单为 ``父前缀-fields_data-字段标识``.
        data: 绑定的数据对象,提交后字段值回写到同名属性.
        options: 经表单形态校验后的选项.
        factory: 创建该表单的工厂,供映射器构造子字段时使用.

    """

    def __init__(
        self,
        name: str,
        *,
        data: object | None = None,
        options: BaseModel | None = None,
        factory: FormFactory | None = None,
        prefix: str | None = None,
    ) -> None:
        self.name = name
        self.prefix = prefix or name
        self.data = data
        self.options = options
        self.factory = factory
        self.fields = BaseForm((), prefix=self.prefix)
        self.children: dict[str, Form] = {}
        self._deferred: set[str] = set()
        self._submitted = False
        self._valid = False
        self._clicked: Field | None = None

    def __contains__(self, name: object) -> bool:
        return name in self.fields or name in self.children

    def __iter__(self) -> Iterator[Field]:
        return iter(self.fields)

    # ------------------------------------------------------------------ #
    # 构造
    # ------------------------------------------------------------------ #
    def add(self, name: str, unbound_field: UnboundField, *, auto_initialize: bool = True) -> Form:
        """添加字段.

        Args:
            name: 字段名.
            unbound_field: 未绑定的 WTForms 字段.
            auto_initialize: 为 False 时字段不会立即以数据对象初始化,
                由创建者调用 ``initialize_field`` 或在提交/生成视图时处理.

        Returns:
            当前表单,便于链式调用.

        """
        self.fields[name] = unbound_field
        if auto_initialize:
            self._deferred.discard(name)
            self.initialize_field(name)
        else:
            self._deferred.add(name)
        return self

    def add_child(self, child: Form) -> Form:
        self.children[child.name] = child
        return self

    def field(self, name: str) -> Field:
        return self.fields[name]

    def child(self, name: str) -> Form:
        return self.children[name]

    def is_initialized(self, name: str) -> bool:
        return name in self.fields and name not in self._deferred

    def initialize_field(self, name: str) -> None:
        """以数据对象上的同名属性初始化字段."""
        self._deferred.discard(name)
        initial = getattr(self.data, name) if self.data is not None and hasattr(self.data, name) else unset_value
        self.fields[name].process(None, initial)

    # ------------------------------------------------------------------ #
    # 绑定
    # ------------------------------------------------------------------ #
    def submit(self, formdata: MultiDict[str, str]) -> BindResult:
        """应用请求数据并校验.

        Args:
            formdata: 请求表单数据.

        Returns:
            BindResult: 是否有效、回写后的数据对象与错误信息.

        """
        self.fields.process(formdata, obj=self.data)
        self._deferred.clear()
        children_valid = [child.submit(formdata).valid for child in self.children.values()]

        self._submitted = True
        self._clicked = next(
            (item for item in self.fields if isinstance(item, SubmitField) and item.data),
            None,
        )
        own_valid = self.fields.validate()
        self._write_back()
        self._valid = own_valid and all(children_valid)
        return BindResult(valid=self._valid, data=self.data, errors=self.errors)

    def handle_request(self, request: Any) -> Form:
        """若请求提交了本表单,则绑定请求数据.

        仅在 POST/PUT/PATCH 且请求中包含本表单前缀的字段时提交.

        Args:
            request: werkzeug/Flask 请求对象.

        Returns:
            当前表单.

        """
        if request.method not in SUBMIT_METHODS:
            return self
        formdata = request.form
        marker = f"{self.prefix}-"
        if not any(key.startswith(marker) for key in formdata.keys()):
            return self
        self.submit(formdata)
        return self

    def _write_back(self) -> None:
        if self.data is None:
            return
        for item in self.fields:
            if isinstance(item, SubmitField):
                continue
            if hasattr(self.data, item.short_name):
                setattr(self.data, item.short_name, item.data)

    # ------------------------------------------------------------------ #
    # 状态
    # ------------------------------------------------------------------ #
    def is_submitted(self) -> bool:
        return self._submitted

    def is_valid(self) -> bool:
        """未提交的表单视为无效."""
        return self._submitted and self._valid

    @property
    def clicked_button(self) -> Field | None:
        return self._clicked

    @property
    def errors(self) -> FormErrors:
        errors: FormErrors = dict(self.fields.errors)
        for name, child in self.children.items():
            if child.errors:
                errors[name] = child.errors
        return errors

    def get_data(self) -> object | None:
        return self.data

    def create_view(self) -> FormView:
        """生成模板视图,尚未初始化的字段在此时初始化."""
        for name in list(self._deferred):
            self.initialize_field(name)
        return FormView(
            name=self.name,
            fields={item.short_name: item for item in self.fields},
            children={name: child.create_view() for name, child in self.children.items()},
            errors=self.errors,
            submitted=self._submitted,
            valid=self.is_valid(),
        )
