"""PluginSession: message-level surface between the plugin UI and the pipeline.

The UI panel talks in small JSON messages.  Inbound:

- ``{"type": "init"}`` / ``{"type": "refresh"}``: report the selection.
- ``{"type": "generateData", "prefix": "U"}``: render markup.
- ``{"type": "generateJson", "prefix": "U"}``: export the filtered tree.

Outbound (returned from ``handle``):

- ``{"type": "selectionUpdate", "selection": [...]}``
- ``{"type": "dataResult", "data": "<UButton />"}``
- ``{"type": "jsonResult", "data": {...} | [...]}``
- ``{"type": "error", "error": "..."}``

Only one request is expected in flight at a time; the session holds no
request-scoped state, so nothing needs guarding.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from components2code.config import GeneratorConfig
from components2code.errors import Components2CodeError, GenerationError
from components2code.generator import MarkupGenerator

if TYPE_CHECKING:
    from components2code.protocols import PluginHost

__all__ = ["PluginSession"]

logger = logging.getLogger(__name__)


class PluginSession:
    """Dispatches UI messages for one host.

    Args:
        host:   A ``PluginHost``: lookups plus the current selection.
        config: Base pipeline settings; a message's ``prefix`` overrides
                the tag prefix for that request only.
    """

    def __init__(self, host: PluginHost, config: GeneratorConfig | None = None) -> None:
        self._host = host
        self._config = config if config is not None else GeneratorConfig()

    async def handle(self, message: Mapping[str, Any]) -> dict[str, Any] | None:
        """Handle one inbound message and return the outbound reply.

        Unknown message types are logged and answered with None.
        """
        msg_type = message.get("type")
        if msg_type in ("init", "refresh"):
            return self.selection_update()
        if msg_type == "generateData":
            return await self._generate(message, as_json=False)
        if msg_type == "generateJson":
            return await self._generate(message, as_json=True)

        logger.debug("Ignoring unknown message type %r", msg_type)
        return None

    def selection_update(self) -> dict[str, Any]:
        """Summarize the current selection for the UI panel."""
        selection = [
            {
                "id": node.id,
                "name": node.name,
                "type": node.host_type or str(node.kind).upper(),
                "visible": node.visible,
                "locked": node.locked,
            }
            for node in self._host.current_selection()
        ]
        return {"type": "selectionUpdate", "selection": selection}

    async def _generate(self, message: Mapping[str, Any], as_json: bool) -> dict[str, Any]:
        roots = self._host.current_selection()
        try:
            config = self._config.with_prefix(message.get("prefix"))
            generator = MarkupGenerator(self._host, config=config)
            if as_json:
                return {"type": "jsonResult", "data": await generator.generate_json(roots)}
            result = await generator.generate(roots)
        except Components2CodeError as exc:
            logger.warning("Generation refused: %s", exc)
            return {"type": "error", "error": str(exc)}
        except Exception as exc:  # noqa: BLE001
            logger.exception("Unexpected failure while generating")
            return {"type": "error", "error": str(GenerationError(exc))}
        return {"type": "dataResult", "data": result.markup}
