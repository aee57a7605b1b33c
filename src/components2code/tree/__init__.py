"""Tree subpackage for design-tree primitives.

Re-exports the public API for the tree module:
- RawNode / ClassifiedNode: host view and owned, classified view of a node
- NodeKind / DataType: closed kind set and three-way classification
- NameNormalizer: PascalCase tag names and property-key cleanup
- TreeIngestor: converts a RawNode forest into ClassifiedNodes
"""

from components2code.tree.ingestor import TreeIngestor
from components2code.tree.nodes import (
    ClassifiedNode,
    ComponentRef,
    DataType,
    NodeKind,
    PropertyDefinition,
    RawNode,
)
from components2code.tree.normalizer import NameNormalizer

__all__ = [
    "ClassifiedNode",
    "ComponentRef",
    "DataType",
    "NameNormalizer",
    "NodeKind",
    "PropertyDefinition",
    "RawNode",
    "TreeIngestor",
]
