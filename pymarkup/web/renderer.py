# pymarkup/web/renderer.py
import asyncio
from dataclasses import dataclass
from typing import List, Optional

from pymarkup.core.context import ListenerBinding, RenderPassContext
from pymarkup.core.core import (
    Boolean,
    Element,
    Fragment,
    Node,
    NodeList,
    Null,
    Number,
    Text,
    to_node,
)
from pymarkup.core.debug import end_trace, start_trace
from pymarkup.core.errors import MaxResolutionDepthError, UnsupportedNodeError
from pymarkup.core.resolver import DEFAULT_MAX_DEPTH, CreateComponent, Resolver

from .attributes import (
    HandlerMaterializer,
    extract_attributes,
    listener_attributes,
    literal_text,
)
from .listeners import materialize_handler, render_listener_script


@dataclass(frozen=True)
class RenderResult:
    markup: str
    script: str
    bindings: List[ListenerBinding]

    def __str__(self) -> str:
        return self.markup + self.script


class Serializer:
    """Depth-first walk turning a node tree into markup.

    Every node goes through the resolver right before it is written, so
    identifiers are minted in output order.
    """

    def __init__(self, resolver: Resolver, materializer: HandlerMaterializer) -> None:
        self.resolver = resolver
        self.materializer = materializer

    async def serialize(
        self, node: Node, ctx: RenderPassContext, depth: int = 0, *, root: bool = False
    ) -> str:
        node, depth = await self.resolver.resolve(node, depth, root=root)

        if isinstance(node, Text):
            return node.value
        if isinstance(node, (Number, Boolean)):
            return literal_text(node.value)
        if isinstance(node, Null):
            return "undefined" if node.undefined else "null"

        # flattened, no wrapping tag; siblings strictly one after another
        if isinstance(node, NodeList):
            depth = self.resolver.descend("list", depth)
            out = []
            for item in node.items:
                out.append(await self.serialize(item, ctx, depth))
            return "".join(out)
        if isinstance(node, Fragment):
            depth = self.resolver.descend("fragment", depth)
            return await self.serialize(node.children, ctx, depth)

        if isinstance(node, Element):
            depth = self.resolver.descend(node.tag_name, depth)
            return await self._serialize_element(node, ctx, depth)

        raise UnsupportedNodeError(node)

    async def _serialize_element(
        self, node: Element, ctx: RenderPassContext, depth: int
    ) -> str:
        tag = node.tag_name
        extracted = extract_attributes(node.attributes, self.materializer)
        html = f"<{tag}{extracted.text}"

        if extracted.events:
            identifier = ctx.mint_identifier(tag)
            html += listener_attributes(identifier, extracted.events)
            for ev in extracted.events:
                ctx.register(ListenerBinding(identifier, ev.event_type, ev.handler_source))

        children = to_node(extracted.children) if extracted.has_children else node.children
        inner = await self.serialize(children, ctx, depth)
        return f"{html}>{inner}</{tag}>"


class Renderer:
    """Renders node trees into markup plus one deferred listener script.

    Usage:
        renderer = Renderer()
        html = await renderer.render_to_string(h(App))
    """

    def __init__(
        self,
        create_component: Optional[CreateComponent] = None,
        *,
        materializer: Optional[HandlerMaterializer] = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        self.resolver = Resolver(create_component, max_depth=max_depth)
        self.materializer = materializer or materialize_handler

    def set_create_component_callback(self, create_component: Optional[CreateComponent]):
        """Replace the creation strategy used for every non-root component."""
        self.resolver.create_component = create_component
        return self

    async def render(self, node, context: Optional[RenderPassContext] = None) -> RenderResult:
        ctx = context if context is not None else RenderPassContext()
        root = to_node(node)
        ctx.claim()
        name = getattr(root, "name", type(root).__name__)
        token = start_trace(name)
        try:
            serializer = Serializer(self.resolver, self.materializer)
            markup = await serializer.serialize(root, ctx, root=True)
        except MaxResolutionDepthError:
            raise
        except RecursionError as e:
            # max_depth set above what the interpreter stack can hold
            raise MaxResolutionDepthError(
                name, self.resolver.max_depth, "interpreter recursion limit reached first"
            ) from e
        finally:
            end_trace(token)
            ctx.release()
        bindings = list(ctx.registry)
        return RenderResult(markup, render_listener_script(bindings), bindings)

    async def render_to_string(self, node) -> str:
        return str(await self.render(node))


def render_to_string_sync(node, **renderer_kwargs) -> str:
    """Render ``node`` on a fresh event loop. Not usable inside a running loop."""
    return asyncio.run(Renderer(**renderer_kwargs).render_to_string(node))
