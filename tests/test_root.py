"""Tests for RootDirResolver."""

import pytest

from pathresolvers.errors import ResolutionError
from pathresolvers.introspection import FixedProbe, FixedStackInspector
from pathresolvers.resolvers import RootDirResolver, VendorResolver
from tests.conftest import CountingProbe, make_root


class TestRootDirResolver:
    def test_parent_of_vendor(self, root):
        assert root.get() == "/proj"

    def test_custom_path(self, root):
        assert root.get("www") == "/proj/www"

    def test_nested_custom_path(self, root):
        assert root.get("var/cache") == "/proj/var/cache"

    def test_backslash_vendor_path(self):
        assert make_root("C:\\proj\\vendor").get("temp") == "C:/proj/temp"

    def test_backslash_host(self, monkeypatch):
        monkeypatch.setattr("pathresolvers._paths.HOST_SEP", "\\")
        assert make_root("/app/vendor").get("temp") == "\\app\\temp"

    def test_reuses_memoized_vendor(self):
        probe = CountingProbe("/proj/vendor")
        root = RootDirResolver(VendorResolver(probe, FixedStackInspector()))
        root.get()
        root.get("a")
        root.get("b")
        assert probe.calls == 1

    def test_propagates_vendor_failure(self):
        root = RootDirResolver(VendorResolver(FixedProbe(None), FixedStackInspector()))
        with pytest.raises(ResolutionError, match="vendorDir"):
            root.get()
