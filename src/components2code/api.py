"""Public API functions for components2code.

This module provides the user-facing functions: generate_markup,
generate_json and render_snapshot.  Each call creates a fresh
MarkupGenerator to guarantee zero shared state between calls.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from components2code.config import GeneratorConfig
from components2code.generator import MarkupGenerator
from components2code.hosts.snapshot import SnapshotHost

if TYPE_CHECKING:
    from components2code.protocols import DesignHost
    from components2code.tree.nodes import RawNode

__all__ = ["generate_json", "generate_markup", "render_snapshot"]


def _resolve_config(config: GeneratorConfig | None, prefix: str | None) -> GeneratorConfig:
    return (config if config is not None else GeneratorConfig()).with_prefix(prefix)


async def generate_markup(
    roots: Sequence[RawNode],
    host: DesignHost,
    prefix: str | None = None,
    config: GeneratorConfig | None = None,
) -> str:
    """Render the selected nodes as component markup.

    Args:
        roots:  Selected raw nodes.
        host:   DesignHost used for main-component and defaults lookups.
        prefix: Per-request tag prefix override.  None or "" keeps the
                configured prefix (``"U"`` by default).
        config: Pipeline settings.  Defaults to ``GeneratorConfig()``.

    Returns:
        The markup string; empty when nothing survives filtering.

    Raises:
        EmptySelectionError: If ``roots`` is empty.
        GenerationError: If the pipeline fails.
    """
    generator = MarkupGenerator(host, config=_resolve_config(config, prefix))
    result = await generator.generate(roots)
    return result.markup


async def generate_json(
    roots: Sequence[RawNode],
    host: DesignHost,
    prefix: str | None = None,
    config: GeneratorConfig | None = None,
) -> Any:
    """Return the filtered node tree as plain dicts.

    One surviving top-level node is returned as a dict; otherwise a list.
    Arguments and errors are the same as for ``generate_markup``.
    """
    generator = MarkupGenerator(host, config=_resolve_config(config, prefix))
    return await generator.generate_json(roots)


def render_snapshot(
    document: Any,
    prefix: str | None = None,
    config: GeneratorConfig | None = None,
) -> str:
    """Render decoded snapshot JSON synchronously.

    Builds a ``SnapshotHost`` from ``document`` and renders its selection.
    Must not be called from a running event loop.

    Example::

        render_snapshot({"id": "1", "name": "u-tag", "type": "COMPONENT"})
        # '<UTag />'
    """
    host = SnapshotHost.from_document(document)
    return asyncio.run(
        generate_markup(host.current_selection(), host, prefix=prefix, config=config)
    )
