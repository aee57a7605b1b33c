"""Exception hierarchy for components2code.

Only two failures ever reach a caller: an empty selection and a wrapped
pipeline failure.  Per-instance default lookups raise ``HostLookupError``
inside hosts, but the resolver absorbs it.
"""

from __future__ import annotations

__all__ = [
    "Components2CodeError",
    "EmptySelectionError",
    "GenerationError",
    "HostLookupError",
]

EMPTY_SELECTION_MESSAGE = "Please select at least one node"
GENERATION_FAILED_PREFIX = "Failed to generate markup"


class Components2CodeError(Exception):
    """Base class for all errors raised by this package."""


class EmptySelectionError(Components2CodeError):
    """Raised when generation is requested with no selected nodes."""

    def __init__(self, message: str = EMPTY_SELECTION_MESSAGE) -> None:
        super().__init__(message)


class GenerationError(Components2CodeError):
    """Unexpected failure during ingestion, filtering or serialization.

    The message always carries the fixed prefix followed by the cause's
    message, e.g. ``"Failed to generate markup: boom"``.
    """

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        detail = str(cause) or type(cause).__name__
        super().__init__(f"{GENERATION_FAILED_PREFIX}: {detail}")


class HostLookupError(Components2CodeError):
    """A host could not resolve a node, component or its defaults."""

    def __init__(self, node_id: str, reason: str) -> None:
        self.node_id = node_id
        self.reason = reason
        super().__init__(f"{reason}: {node_id!r}")
