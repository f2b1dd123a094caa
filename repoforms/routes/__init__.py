"""HTTP 路由."""

from .content_edit import content_edit_bp

__all__ = ["content_edit_bp"]
