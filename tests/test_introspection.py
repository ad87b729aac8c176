"""Tests for the stack inspectors and environment probes."""

import os
import sys

import pytest

import pathresolvers.resolvers.vendor as vendor_module
from pathresolvers.introspection import (
    CallStackInspector,
    EnvironmentProbe,
    FixedProbe,
    FixedStackInspector,
    ModuleOriginProbe,
    StackFrame,
    StackInspector,
    VirtualEnvProbe,
)
from tests.conftest import run_python_c


class TestCallStackInspector:
    def test_innermost_frame_is_caller(self):
        frames = CallStackInspector().frames()
        assert os.path.abspath(frames[0].source_file) == os.path.abspath(__file__)

    def test_outermost_frame_has_file(self):
        frames = CallStackInspector().frames()
        assert frames[-1].source_file is not None

    def test_satisfies_protocol(self):
        assert isinstance(CallStackInspector(), StackInspector)


class TestFixedStackInspector:
    def test_wraps_plain_paths(self):
        inspector = FixedStackInspector(["/a.py", None, StackFrame("/b.py")])
        assert inspector.frames() == [StackFrame("/a.py"), StackFrame(None), StackFrame("/b.py")]

    def test_returns_copy(self):
        inspector = FixedStackInspector(["/a.py"])
        inspector.frames().clear()
        assert len(inspector.frames()) == 1


class TestModuleOriginProbe:
    def test_two_levels_up(self):
        probe = ModuleOriginProbe("pathresolvers.resolvers.vendor")
        expected = os.path.dirname(os.path.dirname(vendor_module.__file__))
        assert probe.locate() == expected

    def test_custom_levels(self):
        probe = ModuleOriginProbe("pathresolvers.resolvers.vendor", levels=1)
        assert probe.locate() == os.path.dirname(vendor_module.__file__)

    def test_missing_module(self):
        assert ModuleOriginProbe("pathresolvers_no_such_module").locate() is None

    def test_missing_parent_raises_import_error(self):
        with pytest.raises(ImportError):
            ModuleOriginProbe("pathresolvers_no_such_pkg.child").locate()

    def test_builtin_module(self):
        assert ModuleOriginProbe("sys").locate() is None

    def test_rejects_zero_levels(self):
        with pytest.raises(ValueError):
            ModuleOriginProbe("os", levels=0)

    def test_satisfies_protocol(self):
        assert isinstance(ModuleOriginProbe("os"), EnvironmentProbe)


class TestVirtualEnvProbe:
    def test_inside_virtualenv(self, monkeypatch):
        monkeypatch.setattr(sys, "prefix", "/proj/.venv")
        monkeypatch.setattr(sys, "base_prefix", "/usr")
        assert VirtualEnvProbe().locate() == "/proj/.venv"

    def test_outside_virtualenv(self, monkeypatch):
        monkeypatch.setattr(sys, "prefix", "/usr")
        monkeypatch.setattr(sys, "base_prefix", "/usr")
        assert VirtualEnvProbe().locate() is None


class TestFixedProbe:
    def test_returns_path(self):
        assert FixedProbe("/proj/vendor").locate() == "/proj/vendor"

    def test_none(self):
        assert FixedProbe(None).locate() is None


class TestCommandStringEntry:
    def test_outermost_frame_has_no_file(self):
        result = run_python_c(
            "from pathresolvers.introspection import CallStackInspector\n"
            "print(CallStackInspector().frames())\n"
        )
        assert result.returncode == 0, result.stderr
        assert result.stdout.strip() == "[StackFrame(source_file=None)]"
