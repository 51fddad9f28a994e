# pymarkup/core/__init__.py
from .context import ListenerBinding, RenderPassContext
from .core import (
    FRAGMENT,
    UNDEFINED,
    Boolean,
    Component,
    ComponentKind,
    ComponentRef,
    Element,
    Fragment,
    Node,
    NodeList,
    Null,
    Number,
    Symbol,
    Text,
    component,
    h,
    to_node,
)
from .errors import (
    ConfigError,
    HandlerMaterializationError,
    MarkupError,
    MaxResolutionDepthError,
    UnsupportedNodeError,
)
from .resolver import Resolver

__all__ = [
    "FRAGMENT",
    "UNDEFINED",
    "Boolean",
    "Component",
    "ComponentKind",
    "ComponentRef",
    "ConfigError",
    "Element",
    "Fragment",
    "HandlerMaterializationError",
    "ListenerBinding",
    "MarkupError",
    "MaxResolutionDepthError",
    "Node",
    "NodeList",
    "Null",
    "Number",
    "RenderPassContext",
    "Resolver",
    "Symbol",
    "Text",
    "UnsupportedNodeError",
    "component",
    "h",
    "to_node",
]
