"""MarkupGenerator: orchestrator that wires TreeIngestor + PromotionFilter + MarkupSerializer.

This is the central wiring layer between the pipeline stages and the
public API.  Data flows strictly forward:

- ingest: the raw forest becomes ClassifiedNodes; instance properties are
  resolved against their defaults on the way (host lookups go through a
  per-request ``DefaultsCache``);
- filter: the classified forest is pruned and promoted into a new tree;
- serialize: the filtered forest is rendered as markup (``generate``) or
  exported as plain dicts (``generate_json``).

An empty selection is refused up front with ``EmptySelectionError``.  Any
other failure is wrapped in ``GenerationError`` with a fixed prefix; no
partial output is ever returned.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from components2code.algorithm.promotion import PromotionFilter
from components2code.cache import DefaultsCache
from components2code.config import GeneratorConfig
from components2code.errors import EmptySelectionError, GenerationError
from components2code.markup.serializer import MarkupSerializer
from components2code.result import GenerationResult
from components2code.tree.ingestor import TreeIngestor
from components2code.tree.nodes import ClassifiedNode, RawNode

if TYPE_CHECKING:
    from components2code.protocols import DesignHost

__all__ = ["MarkupGenerator"]

logger = logging.getLogger(__name__)


class MarkupGenerator:
    """Runs the design-to-markup pipeline for one host.

    Every call builds a fresh ``DefaultsCache`` around the host, so two
    requests never share lookups and nothing persists between them.

    Example::

        from components2code.generator import MarkupGenerator

        generator = MarkupGenerator(host)
        result = await generator.generate(host.current_selection())
        print(result.markup)   # <UButton size="large" />
    """

    def __init__(
        self,
        host: DesignHost,
        config: GeneratorConfig | None = None,
        max_cache_size: int = 256,
    ) -> None:
        """Initialise the generator.

        Args:
            host: A DesignHost-conformant object.
            config: Pipeline settings.  Defaults to ``GeneratorConfig()``.
            max_cache_size: Maximum number of component schemas cached per
                request.  This is an infrastructure parameter, not part of
                ``GeneratorConfig``.
        """
        self._host = host
        self._config: GeneratorConfig = config if config is not None else GeneratorConfig()
        self._max_cache_size = max_cache_size
        self._filter = PromotionFilter(self._config)
        self._serializer = MarkupSerializer(self._config)

    @property
    def config(self) -> GeneratorConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def generate(self, roots: Sequence[RawNode]) -> GenerationResult:
        """Ingest, filter and render ``roots`` as markup.

        Args:
            roots: Selected raw nodes, in selection order.

        Returns:
            A ``GenerationResult`` with markup, filtered nodes and timing.

        Raises:
            EmptySelectionError: If ``roots`` is empty.
            GenerationError: If any pipeline stage fails.
        """
        t0 = time.perf_counter()
        filtered, node_count = await self._run(roots)
        try:
            markup = self._serializer.serialize(filtered)
        except Exception as exc:
            logger.exception("Markup generation failed")
            raise GenerationError(exc) from exc

        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        logger.info(
            "Generated markup for %d root(s): %d node(s) ingested, %d kept at top level in %.1f ms",
            len(roots),
            node_count,
            len(filtered),
            elapsed_ms,
        )
        return GenerationResult(
            markup=markup,
            nodes=tuple(filtered),
            node_count=node_count,
            computation_time_ms=elapsed_ms,
        )

    async def generate_json(self, roots: Sequence[RawNode]) -> Any:
        """Return the filtered tree as plain dicts.

        A single surviving top-level node is unwrapped to one object;
        otherwise the ordered list is returned (possibly empty).

        Raises:
            EmptySelectionError: If ``roots`` is empty.
            GenerationError: If any pipeline stage fails.
        """
        filtered, _ = await self._run(roots)
        data = [node.to_dict() for node in filtered]
        if len(data) == 1:
            return data[0]
        return data

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    async def _run(self, roots: Sequence[RawNode]) -> tuple[list[ClassifiedNode], int]:
        if not roots:
            raise EmptySelectionError()

        ingestor = TreeIngestor(
            DefaultsCache(self._host, max_size=self._max_cache_size), self._config
        )
        try:
            classified = await ingestor.ingest(roots)
            filtered = self._filter.apply(classified)
        except Exception as exc:
            logger.exception("Markup generation failed")
            raise GenerationError(exc) from exc

        return filtered, _count_nodes(classified)


def _count_nodes(nodes: Sequence[ClassifiedNode]) -> int:
    return sum(1 + _count_nodes(node.children) for node in nodes)
