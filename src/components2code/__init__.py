"""components2code - compile design-tool component trees into template markup."""

from __future__ import annotations

from components2code.api import generate_json, generate_markup, render_snapshot
from components2code.config import GeneratorConfig
from components2code.errors import (
    Components2CodeError,
    EmptySelectionError,
    GenerationError,
    HostLookupError,
)
from components2code.generator import MarkupGenerator
from components2code.result import GenerationResult

__version__: str = "0.1.0"
__all__: list[str] = [
    "Components2CodeError",
    "EmptySelectionError",
    "GenerationError",
    "GenerationResult",
    "GeneratorConfig",
    "HostLookupError",
    "MarkupGenerator",
    "generate_json",
    "generate_markup",
    "render_snapshot",
]
