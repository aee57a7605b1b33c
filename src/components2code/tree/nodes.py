"""Node types for the design-tree representation.

Two views of the same scene graph live here:

- ``RawNode``: a read-only snapshot of one host node, exactly as the design
  tool reports it (kind tag, visibility, and kind-specific payloads).
- ``ClassifiedNode``: the owned, normalized node produced by the ingestor.
  Its ``data_type`` is fixed at creation from the raw kind and drives every
  downstream decision (filtering, promotion, tag derivation).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any

PropertyValue = str | bool


class NodeKind(StrEnum):
    """Closed set of host node kinds the pipeline distinguishes.

    StrEnum values are the lowercased member names:
    - TEXT          -> "text"          : text layer
    - FRAME         -> "frame"         : container-like
    - GROUP         -> "group"         : container-like
    - SECTION       -> "section"       : container-like
    - RECTANGLE     -> "rectangle"     : container-like
    - COMPONENT     -> "component"     : component definition (or a variant)
    - COMPONENT_SET -> "component_set" : family of variants
    - INSTANCE      -> "instance"      : occurrence of a component
    - OTHER         -> "other"         : anything else (vectors, lines, ...)
    """

    TEXT = auto()
    FRAME = auto()
    GROUP = auto()
    SECTION = auto()
    RECTANGLE = auto()
    COMPONENT = auto()
    COMPONENT_SET = auto()
    INSTANCE = auto()
    OTHER = auto()

    @classmethod
    def from_host_type(cls, host_type: str) -> NodeKind:
        """Map a host type string (``"COMPONENT_SET"``, ``"TEXT"``) to a kind.

        Unknown strings map to ``OTHER`` rather than raising.
        """
        try:
            return cls(host_type.strip().lower())
        except ValueError:
            return cls.OTHER

    @property
    def is_container(self) -> bool:
        return self in _CONTAINER_KINDS

    @property
    def is_component(self) -> bool:
        return self in _COMPONENT_KINDS


_CONTAINER_KINDS = frozenset(
    {NodeKind.FRAME, NodeKind.GROUP, NodeKind.SECTION, NodeKind.RECTANGLE}
)
_COMPONENT_KINDS = frozenset(
    {NodeKind.COMPONENT, NodeKind.COMPONENT_SET, NodeKind.INSTANCE}
)


class DataType(StrEnum):
    """Three-way semantic classification of an ingested node."""

    TEXT = auto()
    CONTAINER = auto()
    COMPONENT = auto()

    @classmethod
    def for_kind(cls, kind: NodeKind) -> DataType | None:
        """Return the classification for ``kind``; ``None`` means untyped."""
        if kind is NodeKind.TEXT:
            return cls.TEXT
        if kind.is_container:
            return cls.CONTAINER
        if kind.is_component:
            return cls.COMPONENT
        return None


@dataclass(frozen=True, slots=True)
class PropertyDefinition:
    """One declared component property: its host type and authored default."""

    type: str
    default_value: PropertyValue


@dataclass(frozen=True, slots=True)
class ComponentRef:
    """Result of a main-component lookup for an instance."""

    id: str
    name: str = ""


@dataclass(frozen=True, slots=True)
class RawNode:
    """Read-only view of one host scene-graph node.

    Attributes:
        id:                   Host identity.
        name:                 Display name as authored in the design tool.
        kind:                 Host node kind (see NodeKind).
        visible:              The node's own visibility flag.
        locked:               The node's own lock flag.
        children:             Child nodes in host order.
        characters:           Literal text content (TEXT nodes only).
        property_definitions: Declared property schema (COMPONENT and
                              COMPONENT_SET nodes), keyed by raw key.
        component_properties: Current property values (INSTANCE nodes),
                              keyed by raw key (``"Size#12:0"``).
        variant_properties:   Variant values (COMPONENT variants and
                              COMPONENT_SET nodes).
        main_component_id:    Originating component (INSTANCE nodes).
        host_type:            The host's own type string, unnormalized
                              (``"VECTOR"``, ``"INSTANCE"``).
    """

    id: str
    name: str
    kind: NodeKind
    visible: bool = True
    locked: bool = False
    children: tuple[RawNode, ...] = ()
    characters: str | None = None
    property_definitions: Mapping[str, PropertyDefinition] = field(
        default_factory=dict
    )
    component_properties: Mapping[str, PropertyValue] = field(default_factory=dict)
    variant_properties: Mapping[str, str] = field(default_factory=dict)
    main_component_id: str | None = None
    host_type: str = ""


@dataclass(slots=True)
class ClassifiedNode:
    """A node of the internal, owned tree produced by the ingestor.

    Attributes:
        id:                 Host identity, carried through for reporting.
        name:               Display name.
        kind:               Original host kind.
        data_type:          TEXT, CONTAINER, COMPONENT, or None for untyped.
        visible:            The node's own visibility flag.
        children:           Child nodes; the parent exclusively owns them.
        text:               Text payload for TEXT nodes, or inline text the
                            filter attached to a kept element.
        properties:         Resolved non-default properties (COMPONENT only).
        variant_properties: Variant mapping (component sets only).
    """

    id: str
    name: str
    kind: NodeKind
    data_type: DataType | None
    visible: bool = True
    children: list[ClassifiedNode] = field(default_factory=list)
    text: str | None = None
    properties: dict[str, PropertyValue] | None = None
    variant_properties: dict[str, str] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Render the JSON-oriented shape of this subtree."""
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "type": str(self.kind),
            "dataType": str(self.data_type) if self.data_type else None,
            "visible": self.visible,
        }
        if self.text is not None:
            data["text"] = self.text
        if self.properties is not None:
            data["properties"] = dict(self.properties)
        if self.variant_properties is not None:
            data["variantProperties"] = dict(self.variant_properties)
        data["children"] = [child.to_dict() for child in self.children]
        return data
