"""TreeIngestor: converts a forest of host RawNodes into ClassifiedNodes.

Walks the raw tree depth-first.  A node is finalized only after all of its
children have been ingested (including their asynchronous host lookups);
sibling subtrees are independent and are resolved concurrently with
``asyncio.gather``, which joins them before the parent continues.  When one
sibling fails, the others are cancelled before the error propagates.

Classification (kind -> data type):
- TEXT                              -> TEXT, payload is the literal text
- FRAME / GROUP / SECTION / RECTANGLE -> CONTAINER
- COMPONENT / COMPONENT_SET / INSTANCE -> COMPONENT, properties resolved
- anything else                     -> untyped (kept, classified later)
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING

from components2code.algorithm.resolver import PropertyResolver
from components2code.config import GeneratorConfig
from components2code.tree.nodes import ClassifiedNode, DataType, NodeKind, RawNode

if TYPE_CHECKING:
    from components2code.protocols import DesignHost

__all__ = ["TreeIngestor"]

logger = logging.getLogger(__name__)


class TreeIngestor:
    """Builds the classified tree for one generation request.

    The ingestor is a pure transform over the read-only input plus host
    lookups.  Property resolution is delegated to a ``PropertyResolver``,
    which absorbs lookup failures, so one inaccessible main component never
    aborts the rest of the forest.

    Example::

        ingestor = TreeIngestor(host)
        nodes = await ingestor.ingest(host.current_selection())
    """

    def __init__(self, host: DesignHost, config: GeneratorConfig | None = None) -> None:
        self._config = config if config is not None else GeneratorConfig()
        self._resolver = PropertyResolver(host, self._config)

    async def ingest(self, roots: Sequence[RawNode]) -> list[ClassifiedNode]:
        """Ingest an ordered forest, preserving order.

        Args:
            roots: The raw nodes to classify (a selection may hold several).

        Returns:
            One ClassifiedNode per input node, in input order.
        """
        if not roots:
            return []
        tasks = [asyncio.ensure_future(self._ingest_node(node)) for node in roots]
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for task in tasks:
                task.cancel()
            raise

    async def _ingest_node(self, node: RawNode) -> ClassifiedNode:
        children = await self.ingest(node.children)
        data_type = DataType.for_kind(node.kind)
        classified = ClassifiedNode(
            id=node.id,
            name=node.name,
            kind=node.kind,
            data_type=data_type,
            visible=node.visible,
            children=children,
        )

        if data_type is DataType.TEXT:
            classified.text = node.characters or ""
        elif data_type is DataType.COMPONENT:
            classified.properties = await self._resolve_properties(node)
            if node.kind is NodeKind.COMPONENT_SET:
                classified.variant_properties = (
                    self._resolver.clean_variant_properties(node.variant_properties)
                )

        logger.debug(
            "Ingested %s %r (%s, %d children)",
            node.kind,
            node.name,
            data_type or "untyped",
            len(children),
        )
        return classified

    async def _resolve_properties(self, node: RawNode) -> dict[str, str | bool]:
        properties = await self._resolver.resolve(node)
        if node.kind is not NodeKind.INSTANCE:
            return properties

        metadata = self._find_properties_node(node)
        if metadata is not None:
            extra = await self._resolver.resolve(metadata)
            logger.debug(
                "Merging %d properties from %r into %r",
                len(extra),
                metadata.name,
                node.name,
            )
            properties.update(extra)
        return properties

    def _find_properties_node(self, instance: RawNode) -> RawNode | None:
        """First descendant (pre-order) named with the properties suffix."""
        suffix = self._config.properties_suffix
        for candidate in _walk_descendants(instance):
            if candidate.name.endswith(suffix):
                return candidate
        return None


def _walk_descendants(node: RawNode) -> Iterator[RawNode]:
    """Pre-order descendants, hidden ones included.

    Nested instances are yielded but not entered: their metadata children
    belong to them, not to the outer instance.
    """
    for child in node.children:
        yield child
        if child.kind is not NodeKind.INSTANCE:
            yield from _walk_descendants(child)
