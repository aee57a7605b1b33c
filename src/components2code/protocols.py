"""Host capability Protocols: the narrow seam between the pipeline and a design tool.

The pipeline never touches a live host object model.  It asks for exactly
two things, both asynchronous because the host may suspend while answering:

- the main component an instance was created from, and
- the default values declared by a component's property schema.

A third, synchronous capability reports the current selection for the
plugin session.  Any class with conformant methods passes ``isinstance``
checks; no inheritance required.

Example::

    from components2code.protocols import DesignHost
    from components2code.tree.nodes import ComponentRef

    class MyHost:
        async def resolve_main_component(self, instance_id):
            return ComponentRef(id="1:2", name="Button")

        async def resolve_component_defaults(self, component_id):
            return {"Size": "medium"}

    assert isinstance(MyHost(), DesignHost)  # True, structural conformance
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from components2code.tree.nodes import ComponentRef, PropertyValue, RawNode


@runtime_checkable
class DesignHost(Protocol):
    """Structural protocol for design-tool lookups used during ingestion.

    ``resolve_main_component`` returns ``None`` when the instance has no
    resolvable main component.  ``resolve_component_defaults`` returns a
    mapping of raw property key to default value and may raise on failure;
    callers treat any exception as "schema unavailable".
    """

    async def resolve_main_component(self, instance_id: str) -> ComponentRef | None: ...

    async def resolve_component_defaults(
        self, component_id: str
    ) -> Mapping[str, PropertyValue]: ...


@runtime_checkable
class SelectionSource(Protocol):
    """Structural protocol for reading the host's current selection."""

    def current_selection(self) -> Sequence[RawNode]: ...


@runtime_checkable
class PluginHost(DesignHost, SelectionSource, Protocol):
    """A host that answers lookups and reports its selection."""
