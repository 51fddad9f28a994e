# pymarkup/web/attributes.py
from dataclasses import dataclass, field
from typing import Any, Callable, List, Mapping, Optional, Tuple

from pymarkup.core.core import UNDEFINED, Symbol

HandlerMaterializer = Callable[[Callable], str]


@dataclass(frozen=True)
class EventBinding:
    event_type: str
    handler_source: str


@dataclass
class ExtractedAttributes:
    text: str = ""
    children: Any = None
    has_children: bool = False
    events: List[EventBinding] = field(default_factory=list)


def literal_text(v: Any) -> str:
    """Textual form of a scalar, spelled the way a browser script would."""
    if v is True:
        return "true"
    if v is False:
        return "false"
    if v is None:
        return "null"
    if v is UNDEFINED:
        return "undefined"
    if isinstance(v, float):
        if v != v:
            return "NaN"
        if v in (float("inf"), float("-inf")):
            return "Infinity" if v > 0 else "-Infinity"
        if v.is_integer():
            return str(int(v))
        return repr(v)
    return str(v)


def style_to_str(v: Mapping[str, Any]) -> str:
    """Convert a style mapping to a CSS declaration string.

    Example: ``{"color": "red", "fontWeight": "bold"} -> "color:red;fontWeight:bold"``
    """
    return ";".join(f"{k}:{literal_text(val)}" for k, val in v.items())


def normalize_name(k: str) -> str:
    """Map Python-friendly attribute names onto markup names.

    Rules:
      - ``className`` / ``class_`` -> ``class``
      - ``data_xxx`` -> ``data-xxx``
      - ``aria_xxx`` -> ``aria-xxx``
    """
    if k in ("className", "class_"):
        return "class"
    if k.startswith("data_"):
        return "data-" + k[5:].replace("_", "-")
    if k.startswith("aria_"):
        return "aria-" + k[5:].replace("_", "-")
    return k


def is_event_attribute(k: str, v: Any) -> bool:
    return k.lower().startswith("on") and callable(v)


def extract_attributes(
    attributes: Mapping[str, Any],
    materializer: Optional[HandlerMaterializer] = None,
) -> ExtractedAttributes:
    """Split an attribute mapping into markup text, children and event bindings.

    Keys are visited in insertion order. Event handlers never become markup;
    their source text comes from ``materializer`` and is left empty when none
    is given.
    """
    out = ExtractedAttributes()
    parts: List[str] = []

    for k, v in attributes.items():
        if k == "children":
            out.children = v
            out.has_children = True
            continue

        if is_event_attribute(k, v):
            source = materializer(v) if materializer is not None else ""
            out.events.append(EventBinding(k[2:].lower(), source))
            continue

        if k.lower() == "style" and isinstance(v, Mapping):
            parts.append(f'style="{style_to_str(v)}"')
            continue

        # booleans as valueless attributes
        if v is True:
            parts.append(normalize_name(k))
            continue
        if v is False or v is None or v is UNDEFINED:
            continue
        if isinstance(v, Symbol):
            continue

        if isinstance(v, (list, tuple)):
            v = " ".join(literal_text(item) for item in v)
        parts.append(f'{normalize_name(k)}="{literal_text(v)}"')

    out.text = (" " + " ".join(parts)) if parts else ""
    return out


def listener_attributes(identifier: str, events: List[EventBinding]) -> str:
    types = ", ".join(ev.event_type for ev in events)
    return f' data-identifier="{identifier}" data-listeners="{types}"'


def _content_text(children: Any) -> str:
    if isinstance(children, (list, tuple)):
        return "".join(_content_text(ch) for ch in children)
    return literal_text(children)


def format_tag(
    tag: str, attributes: Mapping[str, Any], content: Optional[str] = None
) -> Tuple[str, List[EventBinding]]:
    """Render a standalone tag from attributes, without identifier minting.

    Used for pre-rendered metadata fragments. Returns the tag text and any
    event attributes that were found (and not rendered).
    """
    extracted = extract_attributes(attributes)
    if content is None:
        content = _content_text(extracted.children) if extracted.has_children else ""
    return f"<{tag}{extracted.text}>{content}</{tag}>", extracted.events
