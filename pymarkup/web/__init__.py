from .document import Document
from .listeners import js, materialize_handler, render_listener_script
from .renderer import Renderer, RenderResult, render_to_string_sync

__all__ = [
    "Document",
    "Renderer",
    "RenderResult",
    "js",
    "materialize_handler",
    "render_listener_script",
    "render_to_string_sync",
]
