"""Tests for host platform identifiers."""

import pytest

from bintrack.hostinfo import current_architectures, current_os, normalize_arch


class TestArchitectures:
    @pytest.mark.parametrize("machine", ["x86_64", "AMD64", "amd64"])
    def test_amd64_adds_legacy_alias(self, machine):
        assert current_architectures(machine) == ["amd64", "x86_64"]

    @pytest.mark.parametrize(
        "machine,expected",
        [("aarch64", "arm64"), ("arm64", "arm64"), ("i686", "386"), ("armv7l", "arm"), ("riscv64", "riscv64")],
    )
    def test_other_arch_single_entry(self, machine, expected):
        assert current_architectures(machine) == [expected]

    def test_host_query(self):
        archs = current_architectures()
        assert 1 <= len(archs) <= 2
        assert archs[0] == normalize_arch(archs[0])


class TestOS:
    def test_lowercases(self):
        assert current_os("Linux") == ["linux"]
        assert current_os("Darwin") == ["darwin"]

    def test_host_query(self):
        result = current_os()
        assert len(result) == 1
        assert result[0] == result[0].lower()
