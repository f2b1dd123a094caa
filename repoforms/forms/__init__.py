"""
表单包

提供表单实例、表单工厂以及内容编辑相关的表单形态。
"""

from .factory import FormFactory, FormOptions, FormType
from .form import BindResult, Form, FormView

__all__ = [
    "BindResult",
    "Form",
    "FormFactory",
    "FormOptions",
    "FormType",
    "FormView",
]
