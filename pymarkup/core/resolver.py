# resolver.py ----------------------------------------------------
import inspect
from typing import Any, Awaitable, Callable, Mapping, Optional, Tuple, Union

from .core import Component, ComponentKind, ComponentRef, Node, to_node
from .debug import record_expansion
from .errors import MaxResolutionDepthError

CreateComponent = Callable[
    [Callable, Mapping[str, Any], Node], Union[Any, Awaitable[Any]]
]

# each level costs a few interpreter frames; stays below the default recursion limit
DEFAULT_MAX_DEPTH = 200


async def _settle(value):
    if inspect.isawaitable(value):
        value = await value
    return value


async def create_function_component(fn, props, children):
    return await _settle(fn(props, children))


async def render_instance(instance):
    """Settle a created component: instances with ``render()`` are rendered."""
    instance = await _settle(instance)
    if isinstance(instance, Component) or callable(getattr(instance, "render", None)):
        return await _settle(instance.render())
    return instance


async def create_class_component(cls, props, children):
    return await render_instance(cls(props, children))


DEFAULT_STRATEGIES = {
    ComponentKind.FUNCTION: create_function_component,
    ComponentKind.CLASS: create_class_component,
}


class Resolver:
    """Expands ComponentRef nodes until a primitive node comes out.

    ``create_component`` replaces the default strategies for every
    non-root component; the root component always uses the defaults.
    """

    def __init__(
        self,
        create_component: Optional[CreateComponent] = None,
        *,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        self.create_component = create_component
        self.max_depth = max_depth

    async def _create(self, ref: ComponentRef, *, root: bool) -> Any:
        if self.create_component is not None and not root:
            return await render_instance(
                self.create_component(ref.callable, ref.props, ref.children)
            )
        strategy = DEFAULT_STRATEGIES[ref.kind]
        return await strategy(ref.callable, ref.props, ref.children)

    def descend(self, name: str, depth: int) -> int:
        depth += 1
        if depth > self.max_depth:
            raise MaxResolutionDepthError(name, self.max_depth)
        return depth

    async def resolve(
        self, node: Node, depth: int = 0, *, root: bool = False
    ) -> Tuple[Node, int]:
        """Return ``(node, depth)`` with every top-level ComponentRef expanded.

        ``depth`` counts nesting levels (components, elements, lists and
        fragments) along the current path and is handed back so the caller
        resolves the subtree below it.
        """
        while isinstance(node, ComponentRef):
            depth = self.descend(node.name, depth)
            record_expansion(node.name, depth, node.kind.value)
            output = await self._create(node, root=root)
            # only the very first expansion counts as root
            root = False
            node = to_node(output)
        return node, depth
