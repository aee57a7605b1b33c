"""Shared fixtures: RawNode factories and an in-memory recording host.

Tests run with ``--import-mode=importlib``, so helpers are exposed as
fixtures rather than imported from this module.
"""

from __future__ import annotations

import asyncio
import itertools
from collections.abc import Callable, Mapping
from typing import Any

import pytest

from components2code.errors import HostLookupError
from components2code.tree.nodes import ComponentRef, NodeKind, RawNode


class RecordingHost:
    """DesignHost fake with scripted answers and a call log.

    Args:
        mains:    instance id -> main component id (missing -> None).
        defaults: component id -> raw key -> default value.
        failing:  ids whose lookups raise HostLookupError.
        delay:    seconds to sleep inside every lookup.
    """

    def __init__(
        self,
        mains: Mapping[str, str] | None = None,
        defaults: Mapping[str, Mapping[str, Any]] | None = None,
        failing: set[str] | None = None,
        delay: float = 0.0,
    ) -> None:
        self.mains = dict(mains or {})
        self.defaults = {key: dict(value) for key, value in (defaults or {}).items()}
        self.failing = set(failing or ())
        self.delay = delay
        self.calls: list[tuple[str, str]] = []

    async def resolve_main_component(self, instance_id: str) -> ComponentRef | None:
        self.calls.append(("main", instance_id))
        if self.delay:
            await asyncio.sleep(self.delay)
        if instance_id in self.failing:
            raise HostLookupError(instance_id, "Main component unavailable")
        main_id = self.mains.get(instance_id)
        return ComponentRef(id=main_id, name=main_id) if main_id else None

    async def resolve_component_defaults(self, component_id: str) -> Mapping[str, Any]:
        self.calls.append(("defaults", component_id))
        if self.delay:
            await asyncio.sleep(self.delay)
        if component_id in self.failing or component_id not in self.defaults:
            raise HostLookupError(component_id, "Defaults unavailable")
        return self.defaults[component_id]


@pytest.fixture
def make_node() -> Callable[..., RawNode]:
    """Factory for RawNodes with auto-generated ids.

    ``kind`` accepts a NodeKind or a host type string such as "INSTANCE".
    """
    counter = itertools.count(1)

    def _make(
        name: str,
        kind: NodeKind | str = NodeKind.FRAME,
        children: tuple[RawNode, ...] | list[RawNode] = (),
        **fields: Any,
    ) -> RawNode:
        if isinstance(kind, str) and not isinstance(kind, NodeKind):
            fields.setdefault("host_type", kind)
            kind = NodeKind.from_host_type(kind)
        node_id = fields.pop("id", f"n{next(counter)}")
        return RawNode(id=node_id, name=name, kind=kind, children=tuple(children), **fields)

    return _make


@pytest.fixture
def host_factory() -> Callable[..., RecordingHost]:
    """Factory for RecordingHost instances."""
    return RecordingHost


@pytest.fixture
def empty_host() -> RecordingHost:
    """A host that knows nothing: every defaults lookup fails."""
    return RecordingHost()
