"""GeneratorConfig: immutable settings for one markup generation request.

The tag prefix used to be process-wide mutable state in the plugin; here it
is an explicit field threaded through the filter and the serializer.
``with_prefix`` applies a per-request override without mutating anything.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

_PREFIX_RE = re.compile(r"[A-Za-z0-9]*")

DEFAULT_PREFIX = "U"
DEFAULT_SENTINELS = frozenset({"default", "none", "off", "basic", "false"})


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Immutable configuration for the design-to-markup pipeline.

    Attributes:
        prefix: Tag prefix and component naming convention ("U" -> UButton).
        match_prefix: When True, component nodes whose name does not start
            with ``prefix`` (case-insensitive) are dropped by the filter.
        properties_suffix: Name suffix of the hidden metadata child whose
            properties are merged into its owning instance.
        private_prefixes: Name/key prefixes marking private nodes and keys.
        instance_marker: Case-sensitive substring marking internal
            instance-reference keys and nodes.
        reference_token: Substring marking proxy nodes that are discarded
            while their children are promoted.
        template_name: Name (case-insensitive) of slot/template nodes.
        slot_key: Property key carrying a template's slot identifier.
        sentinel_values: Values treated as no-ops when the component's
            defaults cannot be resolved.
        container_tag: Tag emitted for kept container nodes.
        indent_width: Spaces added per nesting level.
        max_inline_attributes: When set, tags with more attributes than this
            put each attribute on its own line.  None keeps them inline.
        keep_empty_containers: Keep containers that end up with no kept
            children and no inline text.
    """

    prefix: str = DEFAULT_PREFIX
    match_prefix: bool = True
    properties_suffix: str = "_properties"
    private_prefixes: tuple[str, ...] = ("_", ".")
    instance_marker: str = "Instance"
    reference_token: str = "reference"
    template_name: str = "template"
    slot_key: str = "slot"
    sentinel_values: frozenset[str] = DEFAULT_SENTINELS
    container_tag: str = "div"
    indent_width: int = 2
    max_inline_attributes: int | None = None
    keep_empty_containers: bool = False

    def __post_init__(self) -> None:
        if not _PREFIX_RE.fullmatch(self.prefix):
            msg = f"prefix must be ASCII alphanumeric, got {self.prefix!r}"
            raise ValueError(msg)
        if self.indent_width < 0:
            msg = f"indent_width must be >= 0, got {self.indent_width}"
            raise ValueError(msg)
        if self.max_inline_attributes is not None and self.max_inline_attributes < 0:
            msg = (
                "max_inline_attributes must be None or >= 0, "
                f"got {self.max_inline_attributes}"
            )
            raise ValueError(msg)
        if not self.properties_suffix:
            msg = "properties_suffix must not be empty"
            raise ValueError(msg)
        if not self.template_name:
            msg = "template_name must not be empty"
            raise ValueError(msg)

    def with_prefix(self, prefix: str | None) -> GeneratorConfig:
        """Return a copy using ``prefix``; a missing or empty override keeps ours."""
        if not prefix:
            return self
        return replace(self, prefix=prefix)
