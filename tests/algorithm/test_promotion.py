"""Tests for PromotionFilter keep / promote / drop rules.

Covers:
- Invisibility (non-inherited) and ignored names
- Template with / without slot, reference proxies, prefix matching
- Non-components under components are dropped
- Containers kept, empty containers dropped, untyped nodes promoted
- Inline text attachment and standalone text dropping
- Kept-then-promoted ordering
- Input tree is not mutated
"""

from __future__ import annotations

import copy
from typing import Any

import pytest

from components2code.algorithm.promotion import PromotionFilter
from components2code.config import GeneratorConfig
from components2code.tree.nodes import ClassifiedNode, DataType, NodeKind

# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def component(name: str, *children: ClassifiedNode, **fields: Any) -> ClassifiedNode:
    fields.setdefault("properties", {})
    return ClassifiedNode(
        id=name, name=name, kind=NodeKind.INSTANCE, data_type=DataType.COMPONENT,
        children=list(children), **fields,
    )


def container(name: str, *children: ClassifiedNode, **fields: Any) -> ClassifiedNode:
    return ClassifiedNode(
        id=name, name=name, kind=NodeKind.FRAME, data_type=DataType.CONTAINER,
        children=list(children), **fields,
    )


def text(name: str, value: str, **fields: Any) -> ClassifiedNode:
    return ClassifiedNode(
        id=name, name=name, kind=NodeKind.TEXT, data_type=DataType.TEXT, text=value, **fields
    )


def untyped(name: str, *children: ClassifiedNode) -> ClassifiedNode:
    return ClassifiedNode(
        id=name, name=name, kind=NodeKind.OTHER, data_type=None, children=list(children)
    )


def names(nodes: list[ClassifiedNode]) -> list[str]:
    return [node.name for node in nodes]


@pytest.fixture
def flt() -> PromotionFilter:
    return PromotionFilter()


# ---------------------------------------------------------------------------
# Visibility and ignored names
# ---------------------------------------------------------------------------


class TestVisibilityAndIgnored:
    def test_invisible_dropped_with_subtree(self, flt: PromotionFilter) -> None:
        node = component("UCard", component("UButton"), visible=False)
        assert flt.apply([node]) == []

    def test_visible_child_of_visible_parent_kept(self, flt: PromotionFilter) -> None:
        [card] = flt.apply([component("UCard", component("UButton"))])
        assert names(card.children) == ["UButton"]

    def test_invisible_child_only(self, flt: PromotionFilter) -> None:
        [card] = flt.apply([component("UCard", component("UButton", visible=False))])
        assert card.children == []

    @pytest.mark.parametrize(
        "name", ["_UPrivate", ".UBase", "UIconInstance", "button_properties"]
    )
    def test_ignored_names(self, flt: PromotionFilter, name: str) -> None:
        assert flt.apply([component(name)]) == []

    def test_ignored_containers(self, flt: PromotionFilter) -> None:
        assert flt.apply([container("_Layout", component("UButton"))]) == []


# ---------------------------------------------------------------------------
# Component rules
# ---------------------------------------------------------------------------


class TestComponents:
    def test_prefix_match_kept(self, flt: PromotionFilter) -> None:
        assert names(flt.apply([component("UButton")])) == ["UButton"]

    def test_prefix_match_is_case_insensitive(self, flt: PromotionFilter) -> None:
        assert names(flt.apply([component("ubutton")])) == ["ubutton"]

    def test_non_prefixed_component_dropped(self, flt: PromotionFilter) -> None:
        assert flt.apply([component("Button", component("UIcon"))]) == []

    def test_match_prefix_disabled_keeps_everything(self) -> None:
        flt = PromotionFilter(GeneratorConfig(match_prefix=False))
        assert names(flt.apply([component("Button")])) == ["Button"]

    def test_custom_prefix(self) -> None:
        flt = PromotionFilter(GeneratorConfig(prefix="El"))
        assert names(flt.apply([component("ElInput"), component("UButton")])) == ["ElInput"]

    def test_template_with_slot_kept(self, flt: PromotionFilter) -> None:
        node = component("template", component("UButton"), properties={"slot": "footer"})
        [kept] = flt.apply([node])
        assert kept.name == "template"
        assert names(kept.children) == ["UButton"]

    @pytest.mark.parametrize("properties", [{}, {"slot": ""}, {"slot": True}])
    def test_template_without_slot_promotes_children(
        self, flt: PromotionFilter, properties: dict[str, Any]
    ) -> None:
        node = component("Template", component("UButton"), properties=properties)
        assert names(flt.apply([node])) == ["UButton"]

    def test_reference_promotes_children(self, flt: PromotionFilter) -> None:
        node = component("button reference", component("UButton"), component("UIcon"))
        assert names(flt.apply([node])) == ["UButton", "UIcon"]

    def test_non_components_under_component_dropped(self, flt: PromotionFilter) -> None:
        node = component(
            "UCard",
            container("Body", component("UButton")),
            untyped("Vector"),
            component("UTag"),
        )
        [card] = flt.apply([node])
        assert names(card.children) == ["UTag"]

    def test_non_components_under_promoted_component_dropped(
        self, flt: PromotionFilter
    ) -> None:
        node = component("ref reference", container("Wrapper", component("UButton")))
        assert flt.apply([node]) == []


# ---------------------------------------------------------------------------
# Containers, untyped nodes and text
# ---------------------------------------------------------------------------


class TestContainersAndText:
    def test_container_kept_with_children(self, flt: PromotionFilter) -> None:
        [card] = flt.apply([container("Card", component("UButton"))])
        assert card.data_type is DataType.CONTAINER
        assert names(card.children) == ["UButton"]

    def test_empty_container_dropped(self, flt: PromotionFilter) -> None:
        assert flt.apply([container("Spacer")]) == []

    def test_container_emptied_by_filtering_dropped(self, flt: PromotionFilter) -> None:
        assert flt.apply([container("Card", component("Plain"))]) == []

    def test_empty_container_kept_when_configured(self) -> None:
        flt = PromotionFilter(GeneratorConfig(keep_empty_containers=True))
        assert names(flt.apply([container("Spacer")])) == ["Spacer"]

    def test_container_with_text_keeps_inline_text(self, flt: PromotionFilter) -> None:
        [label] = flt.apply([container("Label", text("t", "Hello"))])
        assert label.text == "Hello"
        assert label.children == []

    def test_untyped_node_promoted(self, flt: PromotionFilter) -> None:
        node = untyped("Vector", component("UIcon"), container("Box", component("UTag")))
        assert names(flt.apply([node])) == ["UIcon", "Box"]

    def test_standalone_text_dropped(self, flt: PromotionFilter) -> None:
        assert flt.apply([text("t", "Orphan")]) == []

    def test_inline_text_joins_visible_parts(self, flt: PromotionFilter) -> None:
        node = container(
            "Label",
            text("a", "Save"),
            text("b", "hidden", visible=False),
            text("_c", "private"),
            text("d", ""),
            text("e", "now"),
        )
        [label] = flt.apply([node])
        assert label.text == "Save now"

    def test_inline_text_ignored_when_children_kept(self, flt: PromotionFilter) -> None:
        node = container("Toolbar", component("UIcon"), text("a", "Save"))
        [toolbar] = flt.apply([node])
        assert toolbar.text is None
        assert names(toolbar.children) == ["UIcon"]

    def test_prefixed_component_text_suppressed(self, flt: PromotionFilter) -> None:
        [button] = flt.apply([component("UButton", text("a", "Save"))])
        assert button.text is None
        assert button.children == []

    def test_template_name_match_is_exact(self, flt: PromotionFilter) -> None:
        node = component(" template ", component("UItem"), properties={"slot": "header"})
        assert flt.apply([node]) == []

    def test_template_name_match_ignores_case(self, flt: PromotionFilter) -> None:
        node = component("Template", text("t", "Hi"), properties={"slot": "header"})
        [kept] = flt.apply([node])
        assert kept.text == "Hi"

    def test_template_with_slot_and_text(self, flt: PromotionFilter) -> None:
        node = component("template", text("t", "Hello"), properties={"slot": "header"})
        [kept] = flt.apply([node])
        assert kept.text == "Hello"


# ---------------------------------------------------------------------------
# Ordering and purity
# ---------------------------------------------------------------------------


class TestOrdering:
    def test_kept_before_promoted(self, flt: PromotionFilter) -> None:
        forest = [
            component("x reference", component("UPromotedA")),
            component("UKeptA"),
            untyped("Vector", component("UPromotedB")),
            component("UKeptB"),
        ]
        assert names(flt.apply(forest)) == ["UKeptA", "UKeptB", "UPromotedA", "UPromotedB"]

    def test_ordering_applies_inside_kept_parents(self, flt: PromotionFilter) -> None:
        node = component(
            "UList",
            component("template", component("UItemA")),
            component("UItemB"),
        )
        [kept] = flt.apply([node])
        assert names(kept.children) == ["UItemB", "UItemA"]

    def test_input_not_mutated(self, flt: PromotionFilter) -> None:
        forest = [
            container("Card", component("UButton", text("t", "Go")), text("x", "y")),
            untyped("Vector", component("UIcon")),
        ]
        snapshot = copy.deepcopy(forest)
        flt.apply(forest)
        assert forest == snapshot

    def test_idempotent_on_own_output(self, flt: PromotionFilter) -> None:
        forest = [container("Card", component("UButton"), component("UTag"))]
        once = flt.apply(forest)
        assert flt.apply(once) == once
