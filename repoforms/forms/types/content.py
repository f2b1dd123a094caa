"""内容编辑表单形态."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from wtforms.fields import SubmitField

from repoforms.field_types.mapper import FieldTypeFormMapperDispatcher
from repoforms.forms.factory import FormFactory, FormOptions, FormType

if TYPE_CHECKING:
    from repoforms.data import FieldData
    from repoforms.forms.form import Form


class ContentFieldOptions(FormOptions):
    language_code: str | None = None
    main_language_code: str | None = None


class ContentEditOptions(FormOptions):
    """内容编辑表单选项.

    Attributes:
        language_code: 正在编辑的语言.
        main_language_code: 内容主语言,用于字段标签.
        drafts_enabled: 是否提供保存草稿与取消按钮.

    """

    language_code: str | None = None
    main_language_code: str | None = None
    drafts_enabled: bool = False


class ContentFieldType(FormType):
    """单个字段的表单,值字段由字段类型映射器添加."""

    block_prefix = "content_field"
    options_class = ContentFieldOptions

    def __init__(self, dispatcher: FieldTypeFormMapperDispatcher | None = None) -> None:
        self.dispatcher = dispatcher or FieldTypeFormMapperDispatcher.with_default_mappers()

    def build_form(self, form: Form, options: FormOptions) -> None:
        del options
        field_data: FieldData = form.get_data()  # type: ignore[assignment]
        self.dispatcher.map(form, field_data)


class ContentEditType(FormType):
    """内容新建/编辑共用的表单形态.

    每个 FieldData 对应一个子表单,并附带发布(以及可选的保存草稿、取消)按钮.
    """

    block_prefix = "content_edit"
    options_class = ContentEditOptions

    def build_form(self, form: Form, options: FormOptions) -> None:
        options = cast("ContentEditOptions", options)
        factory = cast("FormFactory", form.factory)
        fields_data: list[FieldData] = getattr(form.get_data(), "fields_data", [])
        for field_data in fields_data:
            child = factory.create(
                ContentFieldType,
                field_data,
                {
                    "language_code": options.language_code,
                    "main_language_code": options.main_language_code,
                },
                name=field_data.identifier,
                prefix=f"{form.prefix}-fields_data-{field_data.identifier}",
            )
            form.add_child(child)

        form.add("publish", SubmitField("发布"))
        if options.drafts_enabled:
            form.add("save_draft", SubmitField("保存草稿"))
            form.add("cancel", SubmitField("取消", render_kw={"formnovalidate": True}))
