"""MarkupNode and MarkupAttribute: the materialized markup tree.

The serializer first maps filtered ClassifiedNodes onto these immutable
values, then renders them.  Keeping the two steps apart lets tests assert on
tags and attributes without parsing text.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["MarkupAttribute", "MarkupNode"]


@dataclass(frozen=True, slots=True)
class MarkupAttribute:
    """One attribute of a markup tag.

    Attributes:
        key:        Attribute name (unused for slot markers).
        value:      Attribute value as text.
        is_boolean: Render as a bound attribute, ``:key="true"``.
        is_slot:    Render as a bare slot marker, ``#value``.
    """

    key: str
    value: str
    is_boolean: bool = False
    is_slot: bool = False

    def render(self) -> str:
        if self.is_slot:
            return f"#{self.value}"
        value = self.value.replace('"', "&quot;")
        if self.is_boolean:
            return f':{self.key}="{value}"'
        return f'{self.key}="{value}"'


@dataclass(frozen=True, slots=True)
class MarkupNode:
    """One markup element, or a bare text line when ``tag`` is None.

    Attributes:
        tag:        Tag name; None for a text-only node.
        attributes: Attributes in render order.
        text:       Inline text between the opening and closing tags.
        children:   Nested elements.
    """

    tag: str | None
    attributes: tuple[MarkupAttribute, ...] = ()
    text: str | None = None
    children: tuple[MarkupNode, ...] = ()
