# pymarkup/web/document.py
import warnings
from typing import Any, Callable, Dict, List, Optional, Union

from pymarkup.config import Settings
from pymarkup.core.debug import enable_tracing
from pymarkup.core.resolver import CreateComponent

from .attributes import format_tag
from .listeners import dom_content_loaded
from .renderer import Renderer
from .templates import render_document

Attributes = Dict[str, Any]
ScriptContent = Union[str, Callable, None]


class Document:
    """Page builder around a Renderer.

    Collects metadata fragments (title, metas, links, styles, scripts) and
    wraps the rendered body into a full HTML page.

    Usage:
        doc = Document().set_title("Home").add_meta({"charset": "utf-8"})
        html = await doc.render_to_dynamic_markup(h(Page))
    """

    def __init__(
        self, renderer: Optional[Renderer] = None, settings: Optional[Settings] = None
    ) -> None:
        settings = settings or Settings()
        if settings.trace:
            enable_tracing()
        self.renderer = renderer or Renderer(max_depth=settings.max_depth)
        self._lang: str = settings.lang
        self._title: str = settings.title
        self._no_script: str = settings.no_script
        self._metas: List[str] = []
        self._links: List[str] = []
        self._styles: List[str] = []
        self._header_scripts: List[str] = []
        self._body_scripts: List[str] = []

    # -------------------------------
    # Builders
    # -------------------------------
    def set_create_component_callback(self, create_component: Optional[CreateComponent]):
        """Set the creation hook used for every non-root component.

        Ex: doc.set_create_component_callback(lambda fn, props, children: fn(props, doc, children))
        """
        self.renderer.set_create_component_callback(create_component)
        return self

    def set_lang(self, lang: str):
        self._lang = lang
        return self

    def set_title(self, title: str):
        self._title = title
        return self

    def set_no_script(self, content: str):
        self._no_script = content
        return self

    def add_meta(self, attributes: Attributes):
        self._metas.append(self._tag("meta", attributes))
        return self

    def add_link(self, attributes: Attributes):
        self._links.append(self._tag("link", attributes))
        return self

    def add_style(self, attributes: Attributes, content: Optional[str] = None):
        self._styles.append(self._tag("style", attributes, content))
        return self

    def add_header_script(
        self,
        attributes: Attributes,
        content: ScriptContent = None,
        wait_dom_content_loaded: bool = True,
    ):
        self._header_scripts.append(
            self._script(attributes, content, wait_dom_content_loaded)
        )
        return self

    def add_body_script(
        self,
        attributes: Attributes,
        content: ScriptContent = None,
        wait_dom_content_loaded: bool = True,
    ):
        """Add a script at the end of the body, before the listener script."""
        self._body_scripts.append(
            self._script(attributes, content, wait_dom_content_loaded)
        )
        return self

    # -------------------------------
    # Rendering
    # -------------------------------
    async def render_to_dynamic_markup(self, node) -> str:
        """Render ``node`` into a complete page with its listener script.

        The node must not contain doctype/html/head/body tags; they are added
        here.
        """
        result = await self.renderer.render(node)
        head = "\n".join(
            self._metas + self._links + self._styles + self._header_scripts
        )
        body = "\n".join([result.markup, *self._body_scripts, result.script])
        return render_document(
            lang=self._lang,
            title=self._title,
            head=head,
            body=body,
            no_script=self._no_script,
        )

    def _tag(self, tag: str, attributes: Attributes, content: Optional[str] = None) -> str:
        html, events = format_tag(tag, attributes, content)
        if events:
            warnings.warn(
                f"<{tag}> metadata tags cannot carry event handlers; dropped "
                + ", ".join(ev.event_type for ev in events),
                RuntimeWarning,
                stacklevel=3,
            )
        return html

    def _script(self, attributes: Attributes, content: ScriptContent, wait: bool) -> str:
        if content is None:
            return self._tag("script", attributes)
        if callable(content):
            # a function is the listener itself
            source = self.renderer.materializer(content)
            body = f'document.addEventListener("DOMContentLoaded", {source});' if wait else source
        else:
            body = dom_content_loaded(content + "\n") if wait else content
        return self._tag("script", attributes, body)
