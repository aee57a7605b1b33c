"""pytest plugin for components2code.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from components2code.api import render_snapshot
from components2code.config import GeneratorConfig


@pytest.fixture(scope="session")
def assert_markup() -> Any:
    """Fixture that returns a callable snapshot-to-markup asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to render_snapshot() which creates a fresh generator per call).

    Usage in tests::

        def test_button(assert_markup):
            assert_markup(
                {"id": "1", "name": "u-button", "type": "COMPONENT"},
                "<UButton />",
            )

    Returns:
        A callable ``_assert(document, expected, prefix=None, config=None) -> None``
        that raises ``AssertionError`` when the rendered markup differs.
    """

    def _assert(
        document: Any,
        expected: str,
        prefix: str | None = None,
        config: GeneratorConfig | None = None,
    ) -> None:
        """Assert that a snapshot document renders to ``expected``.

        Args:
            document: Snapshot JSON (node, list of nodes, or selection/library
                      mapping) as accepted by ``SnapshotHost.from_document``.
            expected: The exact markup expected.
            prefix:   Optional tag prefix override.
            config:   Optional GeneratorConfig.

        Raises:
            AssertionError: When the rendered markup differs, with both texts
                in the message.
        """
        actual = render_snapshot(document, prefix=prefix, config=config)
        if actual != expected:
            raise AssertionError(
                "Rendered markup does not match:\n"
                f"--- actual ---\n{actual}\n"
                f"--- expected ---\n{expected}"
            )

    return _assert
