"""表单校验器."""

from .field_settings import FIELD_SETTINGS_MESSAGE_KEY, FieldSettings

__all__ = ["FIELD_SETTINGS_MESSAGE_KEY", "FieldSettings"]
