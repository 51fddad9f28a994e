# context.py ----------------------------------------------------
from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class ListenerBinding:
    identifier: str
    event_type: str
    handler_source: str


@dataclass
class RenderPassContext:
    """Mutable state of one top-level render call.

    Threaded through every resolve/serialize call of the pass and never
    shared between passes.
    """

    identifier_counter: int = 0
    registry: List[ListenerBinding] = field(default_factory=list)
    in_use: bool = False

    def mint_identifier(self, tag_name: str) -> str:
        identifier = f"{tag_name}_{self.identifier_counter}"
        self.identifier_counter += 1
        return identifier

    def register(self, binding: ListenerBinding) -> None:
        self.registry.append(binding)

    def claim(self) -> None:
        if self.in_use:
            raise RuntimeError(
                "RenderPassContext is already owned by a running render pass."
            )
        self.in_use = True

    def release(self) -> None:
        self.in_use = False
