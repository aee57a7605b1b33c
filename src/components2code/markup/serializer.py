"""MarkupSerializer: renders a filtered ClassifiedNode forest as indented markup.

Tag names:
- component nodes -> ``template`` for kept slot templates, otherwise the
  PascalCase name with the configured prefix (``Button`` -> ``UButton``);
- container (and untyped) nodes -> the generic container tag, with the
  design name emitted as ``class``.

Attributes come from the resolved properties, then the variant properties.
Booleans render bound (``:key="true"``); a template's slot renders as a bare
``#name`` marker; everything else renders ``key="value"``.

Layout: one opening line per element, ``indent_width`` extra spaces per
level, ``<Tag />`` without content, ``<Tag>text</Tag>`` for inline text,
and an opening line / children / closing line block otherwise.  Siblings are
joined by single newlines and no trailing newline is added.
"""

from __future__ import annotations

import html
from collections.abc import Sequence

from components2code.config import GeneratorConfig
from components2code.markup.nodes import MarkupAttribute, MarkupNode
from components2code.tree.nodes import ClassifiedNode, DataType, PropertyValue
from components2code.tree.normalizer import NameNormalizer

__all__ = ["MarkupSerializer"]

_normalizer = NameNormalizer()

TEMPLATE_TAG = "template"


class MarkupSerializer:
    """Two-step serializer: ClassifiedNode -> MarkupNode -> text.

    Malformed input degrades instead of raising: an empty component name
    yields just the prefix as its tag, an empty container name an empty
    ``class``.

    Example::

        serializer = MarkupSerializer(GeneratorConfig(prefix="U"))
        serializer.serialize(filtered_nodes)
        # '<UButton size="large" />'
    """

    def __init__(self, config: GeneratorConfig | None = None) -> None:
        self._config = config if config is not None else GeneratorConfig()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def serialize(self, nodes: Sequence[ClassifiedNode], indent: int = 0) -> str:
        """Render ``nodes`` starting at ``indent`` spaces."""
        return self.render(self.to_markup(nodes), indent=indent)

    def to_markup(self, nodes: Sequence[ClassifiedNode]) -> list[MarkupNode]:
        """Map classified nodes onto the markup tree, preserving order."""
        return [self._to_markup_node(node) for node in nodes]

    def render(self, nodes: Sequence[MarkupNode], indent: int = 0) -> str:
        """Render markup nodes, one sibling per line group."""
        return "\n".join(self._render_node(node, indent) for node in nodes)

    def tag_for(self, node: ClassifiedNode) -> str:
        """Derive the tag name of a classified node."""
        if node.data_type is DataType.COMPONENT:
            if self._is_slot_template(node):
                return TEMPLATE_TAG
            return _normalizer.tag_name(node.name, self._config.prefix)
        return self._config.container_tag

    # ------------------------------------------------------------------
    # ClassifiedNode -> MarkupNode
    # ------------------------------------------------------------------

    def _to_markup_node(self, node: ClassifiedNode) -> MarkupNode:
        if node.data_type is DataType.TEXT:
            return MarkupNode(tag=None, text=node.text or "")

        tag = self.tag_for(node)
        if node.data_type is DataType.COMPONENT:
            attributes = self._component_attributes(node, tag)
        else:
            attributes = (MarkupAttribute(key="class", value=node.name),)

        return MarkupNode(
            tag=tag,
            attributes=attributes,
            text=node.text,
            children=tuple(self._to_markup_node(child) for child in node.children),
        )

    def _component_attributes(
        self, node: ClassifiedNode, tag: str
    ) -> tuple[MarkupAttribute, ...]:
        merged: dict[str, PropertyValue] = dict(node.properties or {})
        merged.update(node.variant_properties or {})

        attributes: list[MarkupAttribute] = []
        for key, value in merged.items():
            if isinstance(value, bool):
                attributes.append(
                    MarkupAttribute(
                        key=key, value="true" if value else "false", is_boolean=True
                    )
                )
            elif tag == TEMPLATE_TAG and key == self._config.slot_key:
                attributes.append(MarkupAttribute(key=key, value=value, is_slot=True))
            else:
                attributes.append(MarkupAttribute(key=key, value=value))
        return tuple(attributes)

    def _is_slot_template(self, node: ClassifiedNode) -> bool:
        if node.name.lower() != self._config.template_name.lower():
            return False
        slot = (node.properties or {}).get(self._config.slot_key)
        return isinstance(slot, str) and bool(slot)

    # ------------------------------------------------------------------
    # MarkupNode -> text
    # ------------------------------------------------------------------

    def _render_node(self, node: MarkupNode, indent: int) -> str:
        pad = " " * indent
        if node.tag is None:
            return pad + html.escape(node.text or "", quote=False)

        rendered = [attribute.render() for attribute in node.attributes]
        limit = self._config.max_inline_attributes
        wrapped = limit is not None and len(rendered) > limit

        if wrapped:
            attr_pad = " " * (indent + self._config.indent_width)
            opening = f"{pad}<{node.tag}" + "".join(
                f"\n{attr_pad}{attribute}" for attribute in rendered
            )
            open_end = f"\n{pad}>"
            self_close = f"\n{pad}/>"
        else:
            opening = f"{pad}<{node.tag}" + "".join(
                f" {attribute}" for attribute in rendered
            )
            open_end = ">"
            self_close = " />"

        if node.children:
            body = self.render(node.children, indent + self._config.indent_width)
            return f"{opening}{open_end}\n{body}\n{pad}</{node.tag}>"
        if node.text is not None:
            text = html.escape(node.text, quote=False)
            return f"{opening}{open_end}{text}</{node.tag}>"
        return f"{opening}{self_close}"
