"""SnapshotHost: a DesignHost backed by exported node JSON.

Reads the node shape the design tool's plugin and REST APIs share::

    {
        "id": "1:2", "name": "UButton", "type": "INSTANCE",
        "visible": true, "locked": false,
        "componentId": "1:1",
        "componentProperties": {"Size#0:1": {"type": "VARIANT", "value": "large"}},
        "children": [...]
    }

Component and component-set nodes carry ``componentPropertyDefinitions``
(``{key: {"type": ..., "defaultValue": ...}}``); text nodes carry
``characters``.  Main components that live outside the selection can be
supplied as a separate ``library`` forest.

This host satisfies both ``DesignHost`` and ``SelectionSource``
structurally, and doubles as the in-memory fake used throughout the tests.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from components2code.errors import HostLookupError
from components2code.tree.nodes import (
    ComponentRef,
    NodeKind,
    PropertyDefinition,
    PropertyValue,
    RawNode,
)

__all__ = ["SnapshotHost", "parse_node"]

logger = logging.getLogger(__name__)

NodeData = Mapping[str, Any]


def _plain(value: Any) -> PropertyValue:
    """Booleans stay booleans; every other value is kept as text."""
    if isinstance(value, bool):
        return value
    if value is None:
        return ""
    return str(value)


def _current_value(entry: Any) -> Any:
    # componentProperties entries are {"type": ..., "value": ...}; accept bare values too
    if isinstance(entry, Mapping):
        return entry.get("value")
    return entry


def parse_node(data: NodeData) -> RawNode:
    """Convert one exported node (and its subtree) into a RawNode.

    Args:
        data: Node mapping in the host's export shape.

    Returns:
        The equivalent read-only RawNode tree.
    """
    host_type = str(data.get("type", ""))
    kind = NodeKind.from_host_type(host_type)

    definitions = {
        str(key): PropertyDefinition(
            type=str(entry.get("type", "")),
            default_value=_plain(entry.get("defaultValue")),
        )
        for key, entry in (data.get("componentPropertyDefinitions") or {}).items()
        if isinstance(entry, Mapping)
    }
    properties = {
        str(key): _plain(_current_value(entry))
        for key, entry in (data.get("componentProperties") or {}).items()
    }
    variants = {
        str(key): str(value)
        for key, value in (data.get("variantProperties") or {}).items()
    }
    main_component = data.get("mainComponent") or {}
    main_component_id = data.get("componentId") or main_component.get("id")

    return RawNode(
        id=str(data.get("id", "")),
        name=str(data.get("name", "")),
        kind=kind,
        visible=bool(data.get("visible", True)),
        locked=bool(data.get("locked", False)),
        children=tuple(parse_node(child) for child in data.get("children") or ()),
        characters=str(data["characters"]) if "characters" in data else None,
        property_definitions=definitions,
        component_properties=properties,
        variant_properties=variants,
        main_component_id=str(main_component_id) if main_component_id else None,
        host_type=host_type,
    )


class SnapshotHost:
    """In-memory design host over parsed snapshot nodes.

    Every node of the selection and of the library is indexed by id, so
    instances can resolve main components defined anywhere in either
    forest.  A variant component resolves its defaults from its component
    set, found structurally (the set is its parent) or through the
    exported ``componentSetId`` link.

    Args:
        selection: Root nodes reported as the current selection.
        library:   Extra nodes (usually component definitions) that are
                   looked up but never selected.
        set_links: Variant component id -> component set id, for variants
                   whose set is not their structural parent.

    Example::

        host = SnapshotHost.from_document(json.loads(text))
        nodes = host.current_selection()
    """

    def __init__(
        self,
        selection: Sequence[RawNode],
        library: Sequence[RawNode] = (),
        set_links: Mapping[str, str] | None = None,
    ) -> None:
        self._selection = tuple(selection)
        self._index: dict[str, RawNode] = {}
        self._set_links: dict[str, str] = dict(set_links or {})
        for root in (*self._selection, *library):
            self._index_tree(root)
        logger.debug(
            "Snapshot indexed %d nodes (%d selected)",
            len(self._index),
            len(self._selection),
        )

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_document(cls, document: Any) -> SnapshotHost:
        """Build a host from decoded snapshot JSON.

        Accepted shapes:
        - a single node mapping, or a list of node mappings (the selection);
        - ``{"selection": [...], "library": [...]}``;
        - ``{"document": {...}}``, optionally with ``"library"``;
        - a REST nodes response, ``{"nodes": {id: {"document": {...}}}}``.
        """
        library_data: Sequence[NodeData] = ()
        if isinstance(document, Mapping):
            library_data = document.get("library") or ()
            if "selection" in document:
                selection_data = document["selection"] or []
            elif "document" in document:
                selection_data = [document["document"]]
            elif "nodes" in document:
                selection_data = [
                    entry["document"]
                    for entry in document["nodes"].values()
                    if entry and "document" in entry
                ]
            else:
                selection_data = [document]
        elif isinstance(document, list):
            selection_data = document
        else:
            msg = f"Unsupported snapshot document: {type(document).__name__}"
            raise TypeError(msg)

        set_links: dict[str, str] = {}
        for data in (*selection_data, *library_data):
            _collect_set_links(data, set_links)

        return cls(
            selection=[parse_node(data) for data in selection_data],
            library=[parse_node(data) for data in library_data],
            set_links=set_links,
        )

    @classmethod
    def from_file(cls, path: str | Path) -> SnapshotHost:
        """Load a snapshot JSON file."""
        with Path(path).open(encoding="utf-8") as fh:
            return cls.from_document(json.load(fh))

    # ------------------------------------------------------------------
    # SelectionSource / DesignHost Protocol surface
    # ------------------------------------------------------------------

    def current_selection(self) -> Sequence[RawNode]:
        return self._selection

    async def resolve_main_component(self, instance_id: str) -> ComponentRef | None:
        """Return the main component of ``instance_id``, or None if it has none.

        Raises:
            HostLookupError: If ``instance_id`` is not part of the snapshot.
        """
        instance = self._index.get(instance_id)
        if instance is None:
            raise HostLookupError(instance_id, "Unknown node")
        if instance.main_component_id is None:
            return None
        component = self._index.get(instance.main_component_id)
        name = component.name if component is not None else ""
        return ComponentRef(id=instance.main_component_id, name=name)

    async def resolve_component_defaults(
        self, component_id: str
    ) -> Mapping[str, PropertyValue]:
        """Return raw key -> default value from the component's schema.

        Raises:
            HostLookupError: If the component is unknown or declares no
                property definitions.
        """
        component = self._index.get(component_id)
        if component is None:
            raise HostLookupError(component_id, "Unknown component")

        owner = component
        set_id = self._set_links.get(component_id)
        if component.kind is NodeKind.COMPONENT and set_id in self._index:
            owner = self._index[set_id]

        if not owner.property_definitions:
            raise HostLookupError(component_id, "No property definitions")
        return {
            key: definition.default_value
            for key, definition in owner.property_definitions.items()
        }

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _index_tree(self, node: RawNode) -> None:
        self._index[node.id] = node
        for child in node.children:
            if node.kind is NodeKind.COMPONENT_SET and child.kind is NodeKind.COMPONENT:
                self._set_links.setdefault(child.id, node.id)
            self._index_tree(child)


def _collect_set_links(data: NodeData, links: dict[str, str]) -> None:
    set_id = data.get("componentSetId")
    if set_id and data.get("id"):
        links[str(data["id"])] = str(set_id)
    for child in data.get("children") or ():
        _collect_set_links(child, links)
