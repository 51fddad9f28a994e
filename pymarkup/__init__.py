from .core import FRAGMENT, Component, component, h
from .web import Document, Renderer, js, render_to_string_sync

__all__ = [
    "FRAGMENT",
    "Component",
    "Document",
    "Renderer",
    "component",
    "h",
    "js",
    "render_to_string_sync",
]
