"""DefaultsCache: LRU-backed caching proxy for any DesignHost.

Many instances on a screen share the same main component, and every one of
them needs that component's defaults.  Wrapping the host in a
``DefaultsCache`` turns those repeated host round-trips into one lookup per
component id.  Failed lookups are never cached, so each instance still gets
its own chance to resolve (and its own graceful fallback).

Each ``DefaultsCache`` instance owns its own ``LRUCache`` and the generator
creates a fresh one per request, so nothing persists between invocations.

Example::

    from components2code.cache import DefaultsCache

    cache = DefaultsCache(host, max_size=256)

    # First call hits the host
    defaults = await cache.resolve_component_defaults("1:2")

    # Second call is served from memory; the host is not called
    defaults_again = await cache.resolve_component_defaults("1:2")
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from cachetools import LRUCache

if TYPE_CHECKING:
    from components2code.protocols import DesignHost
    from components2code.tree.nodes import ComponentRef, PropertyValue


class DefaultsCache:
    """LRU-backed caching proxy around any DesignHost.

    Satisfies the ``DesignHost`` Protocol structurally (no inheritance
    required).  Only ``resolve_component_defaults`` is cached; main-component
    lookups are keyed by instance id and never repeat within a request.

    Args:
        host: Any object satisfying the ``DesignHost`` Protocol.
        max_size: Maximum number of component schemas held in memory.
            Defaults to 256.  When exceeded, the least-recently-used entry
            is silently evicted.
    """

    def __init__(self, host: DesignHost, max_size: int = 256) -> None:
        # Store as Any at runtime: structural duck-typing, no Protocol coupling.
        self._host: Any = host
        self._cache: LRUCache[str, dict[str, PropertyValue]] = LRUCache(
            maxsize=max_size
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # DesignHost Protocol surface
    # ------------------------------------------------------------------

    async def resolve_main_component(self, instance_id: str) -> ComponentRef | None:
        """Delegate straight to the wrapped host."""
        return await self._host.resolve_main_component(instance_id)

    async def resolve_component_defaults(
        self, component_id: str
    ) -> Mapping[str, PropertyValue]:
        """Return the defaults for ``component_id``, hitting the host on a miss.

        Exceptions from the host propagate unchanged and nothing is stored.
        """
        cached = self._cache.get(component_id)
        if cached is not None:
            return cached

        defaults = dict(await self._host.resolve_component_defaults(component_id))
        self._cache[component_id] = defaults
        return defaults
