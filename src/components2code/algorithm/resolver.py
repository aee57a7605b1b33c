"""PropertyResolver: effective (non-default) properties of component nodes.

An instance reports every property value, including the ones nobody
touched.  Only values that differ from the authored defaults are worth
emitting, so the resolver diffs the current values against the main
component's schema:

1. Look up the instance's main component, then that component's defaults.
2. Without a schema, drop values that look like no-ops (sentinels such as
   "default", "none", "off", "basic", "false").
3. With a schema, drop values equal to the default for the same key.
4. Keys lose their ``#<id>`` suffix before comparison and output.
5. Private keys and instance-reference keys are never emitted.
6. "true"/"false" strings become real booleans.

Resolution never raises.  A failed host lookup is logged and degrades to
the sentinel heuristic for that one node.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from components2code.config import GeneratorConfig
from components2code.tree.nodes import NodeKind, PropertyValue, RawNode
from components2code.tree.normalizer import NameNormalizer

if TYPE_CHECKING:
    from components2code.protocols import DesignHost

__all__ = ["PropertyResolver", "coerce_value", "is_default"]

logger = logging.getLogger(__name__)

_normalizer = NameNormalizer()


def coerce_value(value: Any) -> PropertyValue:
    """Turn "true"/"false" into booleans; everything else becomes a string."""
    if isinstance(value, bool):
        return value
    text = str(value)
    if text == "true":
        return True
    if text == "false":
        return False
    return text


def is_default(value: Any, default: Any) -> bool:
    """True when ``value`` equals ``default`` once both are coerced."""
    return coerce_value(value) == coerce_value(default)


class PropertyResolver:
    """Computes the non-default property mapping of component-kind nodes.

    Args:
        host:   Any ``DesignHost``-conformant object (usually a DefaultsCache).
        config: Naming conventions and sentinel values.  Defaults to
                ``GeneratorConfig()``.
    """

    def __init__(self, host: DesignHost, config: GeneratorConfig | None = None) -> None:
        self._host: Any = host
        self._config = config if config is not None else GeneratorConfig()

    async def resolve(self, node: RawNode) -> dict[str, PropertyValue]:
        """Return the cleaned, non-default properties of ``node``.

        Instances are diffed against their main component's defaults.
        Component variants are diffed against their own (set-level) defaults.
        Component sets and every other kind have no current values.
        """
        if node.kind is NodeKind.INSTANCE:
            if not node.component_properties:
                return {}
            defaults = await self._instance_defaults(node)
            return self.diff(node.component_properties, defaults)

        if node.kind is NodeKind.COMPONENT:
            if not node.variant_properties:
                return {}
            defaults = await self._component_defaults(node.id)
            return self.diff(node.variant_properties, defaults)

        return {}

    def diff(
        self,
        current: Mapping[str, Any],
        defaults: Mapping[str, Any] | None,
    ) -> dict[str, PropertyValue]:
        """Drop every entry of ``current`` that is a default (or a sentinel).

        Args:
            current:  Raw key -> current value.
            defaults: Raw key -> default value, or None when no schema could
                      be resolved.

        Returns:
            Cleaned key -> coerced value, in ``current`` order.
        """
        schema: dict[str, PropertyValue] | None = None
        if defaults is not None:
            schema = {
                _normalizer.strip_key_suffix(key): coerce_value(value)
                for key, value in defaults.items()
            }

        resolved: dict[str, PropertyValue] = {}
        for raw_key, raw_value in current.items():
            key = _normalizer.strip_key_suffix(raw_key)
            if self.is_skipped_key(key):
                continue
            value = coerce_value(raw_value)
            if schema is None:
                if self.is_sentinel(value):
                    continue
            elif key in schema and schema[key] == value:
                continue
            resolved[key] = value
        return resolved

    def clean_variant_properties(self, variants: Mapping[str, Any]) -> dict[str, str]:
        """Clean a component set's variant mapping: keys stripped, no-ops dropped."""
        cleaned: dict[str, str] = {}
        for raw_key, raw_value in variants.items():
            key = _normalizer.strip_key_suffix(raw_key)
            if self.is_skipped_key(key) or self.is_sentinel(raw_value):
                continue
            cleaned[key] = str(raw_value)
        return cleaned

    def is_skipped_key(self, key: str) -> bool:
        """Private keys and instance-reference keys are never emitted."""
        return (
            _normalizer.is_private(key, self._config.private_prefixes)
            or self._config.instance_marker in key
        )

    def is_sentinel(self, value: Any) -> bool:
        if isinstance(value, bool):
            value = "true" if value else "false"
        return str(value) in self._config.sentinel_values

    # ------------------------------------------------------------------
    # Host round-trips
    # ------------------------------------------------------------------

    async def _instance_defaults(self, node: RawNode) -> Mapping[str, Any] | None:
        try:
            main = await self._host.resolve_main_component(node.id)
        except Exception as exc:  # noqa: BLE001
            logger.warning(
                "Main component lookup failed for %r (%s); using sentinel defaults",
                node.name,
                exc,
            )
            return None
        if main is None:
            logger.debug("Instance %r has no main component", node.name)
            return None
        return await self._component_defaults(main.id)

    async def _component_defaults(self, component_id: str) -> Mapping[str, Any] | None:
        try:
            return await self._host.resolve_component_defaults(component_id)
        except Exception as exc:  # noqa: BLE001
            logger.warning(
                "Defaults lookup failed for component %s (%s); using sentinel defaults",
                component_id,
                exc,
            )
            return None
