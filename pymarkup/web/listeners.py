# pymarkup/web/listeners.py
import inspect
import re
import textwrap
import warnings
from typing import Callable, Iterable, List

from pymarkup.core.context import ListenerBinding
from pymarkup.core.errors import HandlerMaterializationError


class js:
    """A client-side handler given as source text.

    ``js("() => alert('hi')")`` can be passed wherever an event handler is
    accepted; its source is emitted verbatim in the listener script.
    """

    def __init__(self, source: str) -> None:
        self.__js__ = source

    def __call__(self, *args, **kwargs):
        raise RuntimeError("js handlers only run in the browser.")

    def __repr__(self):
        return f"js({self.__js__!r})"


def materialize_handler(handler: Callable) -> str:
    """Default handler materializer: client source for ``handler``.

    Prefers an explicit ``__js__`` source; falls back to the Python source
    of the callable with a warning.
    """
    source = getattr(handler, "__js__", None)
    if isinstance(source, str):
        return source

    name = getattr(handler, "__name__", type(handler).__name__)
    try:
        source = inspect.getsource(handler)
    except (OSError, TypeError) as e:
        raise HandlerMaterializationError(
            f"cannot materialize handler {name!r}: no source available"
        ) from e

    warnings.warn(
        f"handler {name!r} has no client source; emitting its Python source",
        RuntimeWarning,
        stacklevel=2,
    )
    return textwrap.dedent(source).strip()


def dom_content_loaded(body: str) -> str:
    return f'document.addEventListener("DOMContentLoaded", () => {{\n{body}}});\n'


def listener_statements(bindings: Iterable[ListenerBinding]) -> List[str]:
    """One statement block per element, bindings kept in registry order."""
    blocks: List[str] = []
    current = None
    lines: List[str] = []
    for b in bindings:
        # custom element tags may contain "-"
        var = re.sub(r"\W", "_", b.identifier)
        if b.identifier != current:
            if lines:
                blocks.append("\n".join(lines))
            current = b.identifier
            lines = [
                f"const {var} = document.querySelector('[data-identifier=\"{b.identifier}\"]');"
            ]
        lines.append(f'{var}.addEventListener("{b.event_type}", {b.handler_source});')
    if lines:
        blocks.append("\n".join(lines))
    return blocks


def render_listener_script(bindings: Iterable[ListenerBinding]) -> str:
    """Render the deferred ``<script>`` that wires every binding."""
    blocks = listener_statements(bindings)
    body = "".join(block + "\n" for block in blocks)
    return f"<script>\n{dom_content_loaded(body)}</script>"
