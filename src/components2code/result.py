"""GenerationResult dataclass for markup generation output.

This module provides the result type returned by MarkupGenerator.generate().
"""

from __future__ import annotations

from dataclasses import dataclass

from components2code.tree.nodes import ClassifiedNode

__all__ = ["GenerationResult"]


@dataclass(frozen=True, slots=True)
class GenerationResult:
    """Result of one generation request.

    Attributes:
        markup: Rendered markup; empty when nothing survived filtering.
        nodes: Filtered top-level nodes the markup was rendered from.
        node_count: Number of nodes ingested (whole forest, before filtering).
        computation_time_ms: Wall-clock duration of the request in milliseconds.
    """

    markup: str
    nodes: tuple[ClassifiedNode, ...]
    node_count: int
    computation_time_ms: float
