from .callbacks_filters import register_filter_callbacks
from .callbacks_render import register_render_callbacks

__all__ = ["register_filter_callbacks", "register_render_callbacks"]
