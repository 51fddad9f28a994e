# core.py ----------------------------------------------------
import enum
import inspect
from dataclasses import dataclass, field
from functools import wraps
from typing import Any, Callable, Mapping, Tuple, Union

from .errors import UnsupportedNodeError


class _Undefined:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "UNDEFINED"

    def __bool__(self):
        return False


# distinct from None: renders "undefined" as text, omitted as attribute
UNDEFINED = _Undefined()


class Symbol:
    """Opaque marker value; attributes holding one are never rendered."""

    def __init__(self, description: str = "") -> None:
        self.description = description

    def __repr__(self):
        return f"Symbol({self.description!r})"


class ComponentKind(enum.Enum):
    FUNCTION = "function"
    CLASS = "class"


# ----------------------------------------------------------------------------
# Node variants
# ----------------------------------------------------------------------------


@dataclass(frozen=True)
class Text:
    value: str


@dataclass(frozen=True)
class Number:
    value: Union[int, float]


@dataclass(frozen=True)
class Boolean:
    value: bool


@dataclass(frozen=True)
class Null:
    undefined: bool = False


@dataclass(frozen=True)
class NodeList:
    items: Tuple["Node", ...] = ()


@dataclass(frozen=True)
class Fragment:
    children: "Node" = field(default_factory=NodeList)


@dataclass(frozen=True)
class Element:
    tag_name: str
    attributes: Mapping[str, Any] = field(default_factory=dict)
    children: "Node" = field(default_factory=NodeList)


@dataclass(frozen=True)
class ComponentRef:
    kind: ComponentKind
    callable: Callable
    props: Mapping[str, Any] = field(default_factory=dict)
    children: "Node" = field(default_factory=NodeList)

    @property
    def name(self) -> str:
        return getattr(self.callable, "__name__", type(self.callable).__name__)


Node = Union[Text, Number, Boolean, Null, NodeList, Fragment, Element, ComponentRef]

NODE_TYPES = (Text, Number, Boolean, Null, NodeList, Fragment, Element, ComponentRef)


class Component:
    """Base for class components.

    The class is instantiated with ``(props, children)``; ``render`` returns
    the subtree (or an awaitable of it).
    """

    def __init__(self, props: Mapping[str, Any], children: "Node") -> None:
        self.props = props
        self.children = children

    def render(self):
        raise NotImplementedError


# marker passed to h() for fragments
FRAGMENT = Symbol("fragment")


def to_node(value: Any) -> Node:
    """Adapt a caller-supplied value into the canonical Node union."""
    if isinstance(value, NODE_TYPES):
        return value
    # bool before int: True is an int
    if isinstance(value, bool):
        return Boolean(value)
    if isinstance(value, (int, float)):
        return Number(value)
    if isinstance(value, str):
        return Text(value)
    if value is None:
        return Null()
    if value is UNDEFINED:
        return Null(undefined=True)
    if isinstance(value, (list, tuple)) or inspect.isgenerator(value):
        return NodeList(tuple(to_node(v) for v in value))
    raise UnsupportedNodeError(value)


def _children_node(children: tuple) -> Node:
    if len(children) == 1:
        return to_node(children[0])
    return NodeList(tuple(to_node(ch) for ch in children))


def _component_kind(fn) -> ComponentKind:
    return ComponentKind.CLASS if inspect.isclass(fn) else ComponentKind.FUNCTION


def h(type_, props: Mapping[str, Any] = None, *children) -> Node:
    """Build a node the way ``createElement`` does.

    ``type_`` may be a tag name, ``FRAGMENT``, a component class or a
    component function. Positional children win over a ``children`` prop.
    """
    props = dict(props or {})
    if children:
        props.pop("children", None)
        kids = _children_node(children)
    elif "children" in props and not isinstance(type_, str):
        kids = to_node(props.pop("children"))
    else:
        kids = NodeList()

    if isinstance(type_, str):
        # a "children" prop on an element is handled by the attribute extractor
        return Element(type_, props, kids)
    if type_ is FRAGMENT:
        return Fragment(kids)
    type_ = getattr(type_, "__pymarkup_component__", type_)
    if callable(type_):
        return ComponentRef(_component_kind(type_), type_, props, kids)
    raise UnsupportedNodeError(type_)


def component(fn):
    """Turn ``fn(props, children)`` into a factory returning ComponentRef nodes.

    Usage:
        @component
        def Card(props, children):
            return h("div", {"className": "card"}, children)

        Card("body", title="x")
    """

    @wraps(fn)
    def wrapper(*children, **props):
        # same rule as h(): positional children win over a children prop
        if children:
            props.pop("children", None)
            kids = _children_node(children)
        elif "children" in props:
            kids = to_node(props.pop("children"))
        else:
            kids = NodeList()
        return ComponentRef(_component_kind(fn), fn, props, kids)

    wrapper.__pymarkup_component__ = fn
    return wrapper
