"""Markup subpackage: the materialized markup tree and its serializer.

Re-exports:
- MarkupNode / MarkupAttribute: immutable markup values
- MarkupSerializer: ClassifiedNode -> MarkupNode -> indented text
"""

from components2code.markup.nodes import MarkupAttribute, MarkupNode
from components2code.markup.serializer import MarkupSerializer

__all__ = ["MarkupAttribute", "MarkupNode", "MarkupSerializer"]
