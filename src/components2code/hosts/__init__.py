"""Hosts subpackage for components2code.

The base install provides ``SnapshotHost``, a design host over exported
node JSON.  Live plugin bindings only need to satisfy the ``DesignHost``
Protocol structurally; see ``components2code.protocols``.
"""

from components2code.hosts.snapshot import SnapshotHost, parse_node

__all__ = ["SnapshotHost", "parse_node"]
