"""Protocol conformance tests for DesignHost, SelectionSource and PluginHost.

Verifies that structural typing works without inheritance, that objects
missing a method are rejected, and that DefaultsCache is itself a host.
"""

from __future__ import annotations

from components2code.cache import DefaultsCache
from components2code.hosts.snapshot import SnapshotHost
from components2code.protocols import DesignHost, PluginHost, SelectionSource


class _FullHost:
    async def resolve_main_component(self, instance_id):
        return None

    async def resolve_component_defaults(self, component_id):
        return {}

    def current_selection(self):
        return ()


class _LookupOnly:
    async def resolve_main_component(self, instance_id):
        return None


def test_structural_design_host() -> None:
    assert isinstance(_FullHost(), DesignHost)


def test_structural_selection_source() -> None:
    assert isinstance(_FullHost(), SelectionSource)


def test_missing_method_rejected() -> None:
    assert not isinstance(_LookupOnly(), DesignHost)
    assert not isinstance(_LookupOnly(), SelectionSource)


def test_recording_host_conforms(host_factory) -> None:
    assert isinstance(host_factory(), DesignHost)


def test_defaults_cache_is_a_design_host() -> None:
    assert isinstance(DefaultsCache(_FullHost()), DesignHost)


def test_plugin_host_needs_both_capabilities(host_factory) -> None:
    assert isinstance(_FullHost(), PluginHost)
    assert not isinstance(host_factory(), PluginHost)


def test_snapshot_host_is_a_plugin_host() -> None:
    assert isinstance(SnapshotHost.from_document([]), PluginHost)
