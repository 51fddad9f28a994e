"""Debug helpers for inspecting node trees and render passes.

This module intentionally avoids importing from ``pymarkup.core.resolver`` to
prevent circular imports. Trace functions take plain names and depths; the
tree printer works on the Node union from ``pymarkup.core.core``.
"""

import time
from contextvars import ContextVar
from typing import Any, Dict, List, Optional

from .core import (
    Boolean,
    ComponentRef,
    Element,
    Fragment,
    NODE_TYPES,
    Node,
    NodeList,
    Null,
    Number,
    Text,
)

# ANSI constants (single source for this module)
RESET = "\x1b[0m"
BOLD = "\x1b[1m"
DIM = "\x1b[2m"
FG_GRAY = "\x1b[90m"
FG_YELLOW = "\x1b[33m"
FG_MAGENTA = "\x1b[35m"
FG_CYAN = "\x1b[36m"
FG_BLUE = "\x1b[34m"
FG_GREEN = "\x1b[32m"


def _fmt_val(v, depth: int = 0) -> str:
    if depth > 1:
        return f"{DIM}…{RESET}"
    if v is None or isinstance(v, bool):
        return f"{FG_CYAN}{repr(v)}{RESET}"
    if isinstance(v, (int, float)):
        return f"{FG_BLUE}{repr(v)}{RESET}"
    if isinstance(v, str):
        s = v.replace("\n", "\\n")
        text = s if len(s) <= 60 else s[:57] + "…"
        return f"{FG_YELLOW}{repr(text)}{RESET}"
    if isinstance(v, dict):
        items = []
        for i, (k, val) in enumerate(v.items()):
            if i >= 5:
                items.append(f"{DIM}…{RESET}")
                break
            items.append(f"{FG_CYAN}{k}{RESET}={_fmt_val(val, depth + 1)}")
        return "{" + ", ".join(items) + "}"
    if callable(v):
        name = getattr(v, "__name__", None) or type(v).__name__
        return f"{FG_GREEN}<fn {name}>{RESET}"
    return f"{FG_GREEN}<{type(v).__name__}>{RESET}"


def format_tree(node: Node, indent: int = 0) -> List[str]:
    """Return one colored line per node of the tree rooted at ``node``."""
    pad = "  " * indent
    bullet = f"{pad}{FG_GRAY}-{RESET} "

    if isinstance(node, (Text, Number, Boolean)):
        return [bullet + _fmt_val(node.value)]
    if isinstance(node, Null):
        word = "undefined" if node.undefined else "null"
        return [bullet + f"{FG_CYAN}{word}{RESET}"]
    if isinstance(node, NodeList):
        lines = [bullet + f"{DIM}[{len(node.items)}]{RESET}"]
        for item in node.items:
            lines.extend(format_tree(item, indent + 1))
        return lines
    if isinstance(node, Fragment):
        return [bullet + f"{FG_MAGENTA}<>{RESET}"] + format_tree(
            node.children, indent + 1
        )
    if isinstance(node, Element):
        attrs = {k: v for k, v in node.attributes.items() if k != "children"}
        line = f"{FG_MAGENTA}<{node.tag_name}>{RESET}"
        if attrs:
            line += f" {FG_GRAY}attrs={RESET}{_fmt_val(attrs)}"
        lines = [bullet + line]
        children = node.attributes.get("children", node.children)
        if isinstance(children, NODE_TYPES):
            lines.extend(format_tree(children, indent + 1))
        else:
            lines.append(f"{pad}  {FG_GRAY}-{RESET} {_fmt_val(children)}")
        return lines
    if isinstance(node, ComponentRef):
        line = f"{BOLD}{FG_MAGENTA}{node.name}{RESET} {FG_GRAY}{node.kind.value}{RESET}"
        if node.props:
            line += f" {FG_GRAY}props={RESET}{_fmt_val(dict(node.props))}"
        if node.children == NodeList():
            return [bullet + line]
        return [bullet + line] + format_tree(node.children, indent + 1)
    return [bullet + _fmt_val(node)]


def render_tree(node: Node, indent: int = 0) -> None:
    """Pretty-print the tree starting at ``node`` to stdout."""
    for line in format_tree(node, indent):
        print(line)


# ----------------------------------------------------------------------------
# Render trace instrumentation
# ----------------------------------------------------------------------------

_TRACE_CTX: ContextVar[Optional[Dict[str, Any]]] = ContextVar(
    "_TRACE_CTX", default=None
)
_TRACE_ENABLED: bool = False

# Keep a log of recent traces (each trace is a dict with events)
_TRACE_LOG: List[Dict[str, Any]] = []
_TRACE_LOG_LIMIT = 50


def start_trace(root_name: str) -> Any:
    if not _TRACE_ENABLED:
        return None
    trace = {
        "id": f"tr-{int(time.time() * 1000)}-{len(_TRACE_LOG)}",
        "root_name": root_name,
        "ts": time.time(),
        "events": [],
    }
    _TRACE_LOG.append(trace)
    if len(_TRACE_LOG) > _TRACE_LOG_LIMIT:
        del _TRACE_LOG[:-_TRACE_LOG_LIMIT]
    return _TRACE_CTX.set(trace)


def end_trace(token: Any) -> None:
    if token is not None:
        _TRACE_CTX.reset(token)


def record_expansion(name: str, depth: int, kind: str) -> None:
    trace = _TRACE_CTX.get()
    if trace is None:
        return
    trace["events"].append(
        {"t": time.time(), "kind": kind, "depth": depth, "name": name}
    )


def last_trace() -> Optional[Dict[str, Any]]:
    return _TRACE_LOG[-1] if _TRACE_LOG else None


def print_last_trace() -> None:
    trace = last_trace()
    if trace is None:
        print(f"{FG_GRAY}[debug]{RESET} no render trace available yet.")
        return
    print(f"\n{BOLD}{FG_CYAN}=== Render Trace ==={RESET}")
    print(f"{FG_GRAY}root:{RESET} {FG_YELLOW}{trace['root_name']}{RESET}")
    for ev in trace["events"]:
        pad = "  " * int(ev.get("depth", 0))
        print(f"{pad}- {ev.get('kind', '?')}: {ev.get('name', '?')}")
    print(f"{BOLD}{FG_CYAN}===================={RESET}\n")


def enable_tracing() -> None:
    global _TRACE_ENABLED
    _TRACE_ENABLED = True


def disable_tracing() -> None:
    global _TRACE_ENABLED
    _TRACE_ENABLED = False


def is_tracing_enabled() -> bool:
    return _TRACE_ENABLED


def clear_traces() -> None:
    del _TRACE_LOG[:]
