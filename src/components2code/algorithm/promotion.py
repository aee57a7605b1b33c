"""PromotionFilter: prunes the classified tree down to meaningful markup.

Children are filtered before their parent decides what to do with them
(post-order).  Each node is either

- kept:     it becomes a markup element carrying its filtered children,
- promoted: it disappears, and its filtered children are hoisted into the
            parent's result, or
- dropped:  it disappears together with its whole subtree.

Rules, in evaluation order:

1. Invisible nodes are dropped.  Visibility is not inherited; a dropped
   ancestor simply never recurses into its descendants.
2. Ignored names (private prefix, instance marker, metadata suffix) are
   dropped.
3. Components:
   - "template" carrying a slot identifier   -> kept
   - "template" without a slot identifier   -> promoted
   - name containing the reference token    -> promoted
   - name following the prefix convention   -> kept
   - anything else                          -> dropped
4. Non-components below a kept or promoted component are dropped; the
   component already encapsulates that markup.
5. Containers are kept (dropped when they end up empty, unless configured
   otherwise).  Untyped nodes are promoted.  Text never becomes an element:
   it is attached as inline text to a kept container or slot template, or
   dropped.

The result lists kept nodes first, then promoted ones, each group in
original order.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from components2code.config import GeneratorConfig
from components2code.tree.nodes import ClassifiedNode, DataType
from components2code.tree.normalizer import NameNormalizer

__all__ = ["PromotionFilter"]

_normalizer = NameNormalizer()


class PromotionFilter:
    """Applies the keep / promote / drop rules to a classified forest.

    The input tree is never mutated; kept nodes are shallow copies with
    freshly filtered child lists.

    Args:
        config: Naming conventions.  Defaults to ``GeneratorConfig()``.
    """

    def __init__(self, config: GeneratorConfig | None = None) -> None:
        self._config = config if config is not None else GeneratorConfig()

    def apply(
        self,
        nodes: Sequence[ClassifiedNode],
        from_component: bool = False,
    ) -> list[ClassifiedNode]:
        """Filter ``nodes`` and return the surviving forest.

        Args:
            nodes:          Sibling nodes in original order.
            from_component: True when an ancestor on the current path is a
                            kept or promoted component.

        Returns:
            Kept nodes (original order) followed by promoted nodes
            (original order).
        """
        kept: list[ClassifiedNode] = []
        promoted: list[ClassifiedNode] = []

        for node in nodes:
            if not node.visible or self.is_ignored(node.name):
                continue

            if node.data_type is DataType.COMPONENT:
                self._visit_component(node, kept, promoted)
                continue

            if from_component:
                continue

            if node.data_type is DataType.CONTAINER:
                element = self._keep(node, from_component=False, inline_text=True)
                if (
                    element.children
                    or element.text is not None
                    or self._config.keep_empty_containers
                ):
                    kept.append(element)
            elif node.data_type is None:
                promoted.extend(self.apply(node.children, from_component=False))

        return [*kept, *promoted]

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    def is_ignored(self, name: str) -> bool:
        """Private names, instance markers and metadata nodes never emit markup."""
        config = self._config
        return (
            _normalizer.is_private(name, config.private_prefixes)
            or config.instance_marker in name
            or name.endswith(config.properties_suffix)
        )

    def is_template(self, node: ClassifiedNode) -> bool:
        return node.name.lower() == self._config.template_name.lower()

    def has_slot(self, node: ClassifiedNode) -> bool:
        slot = (node.properties or {}).get(self._config.slot_key)
        return isinstance(slot, str) and bool(slot)

    def is_reference(self, node: ClassifiedNode) -> bool:
        return self._config.reference_token in node.name

    def matches_prefix(self, node: ClassifiedNode) -> bool:
        if not self._config.match_prefix:
            return True
        return node.name.lower().startswith(self._config.prefix.lower())

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _visit_component(
        self,
        node: ClassifiedNode,
        kept: list[ClassifiedNode],
        promoted: list[ClassifiedNode],
    ) -> None:
        if self.is_template(node):
            if self.has_slot(node):
                kept.append(self._keep(node, from_component=True, inline_text=True))
            else:
                promoted.extend(self.apply(node.children, from_component=True))
        elif self.is_reference(node):
            promoted.extend(self.apply(node.children, from_component=True))
        elif self.matches_prefix(node):
            kept.append(self._keep(node, from_component=True))

    def _keep(
        self, node: ClassifiedNode, from_component: bool, inline_text: bool = False
    ) -> ClassifiedNode:
        """Copy ``node`` with filtered children, and inline text when allowed."""
        children = self.apply(node.children, from_component=from_component)
        text = node.text
        if inline_text and not children:
            text = self._inline_text(node) or text
        return replace(node, children=children, text=text)

    def _inline_text(self, node: ClassifiedNode) -> str | None:
        parts = [
            child.text
            for child in node.children
            if child.data_type is DataType.TEXT
            and child.visible
            and child.text
            and not self.is_ignored(child.name)
        ]
        if not parts:
            return None
        return " ".join(parts)
