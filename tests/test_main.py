"""Tests for the python -m bintrack entry point."""

from __future__ import annotations

import json
import os
from pathlib import Path

import pytest

from bintrack.__main__ import main
from bintrack.registry import Binary, ConfigStore


@pytest.fixture
def config_path(tmp_path: Path, monkeypatch) -> Path:
    path = tmp_path / ".bin" / "config.json"
    bindir = tmp_path / "bin"
    bindir.mkdir()
    os.chmod(bindir, 0o777)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("BINTRACK_CONFIG", str(path))
    monkeypatch.setenv("PATH", str(bindir))
    return path


class TestMain:
    def test_list_empty(self, config_path: Path, capsys):
        assert main(["list"]) == 0
        assert "No binaries tracked." in capsys.readouterr().out

    def test_list_sorted(self, config_path: Path, capsys):
        store = ConfigStore(config_path)
        store.load()
        store.upsert_binary(Binary(path="/b/zz", version="2"))
        store.upsert_binary(Binary(path="/b/aa", version="1"))

        assert main([]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert [line.split("\t")[0] for line in lines] == ["/b/aa", "/b/zz"]

    def test_path(self, config_path: Path, tmp_path: Path, capsys):
        assert main(["path"]) == 0
        assert capsys.readouterr().out.strip() == str(tmp_path / "bin")

    def test_remove(self, config_path: Path):
        store = ConfigStore(config_path)
        store.load()
        store.upsert_binary(Binary(path="/b/aa"))

        assert main(["remove", "/b/aa", "/b/unknown"]) == 0
        assert json.loads(config_path.read_text())["bins"] == {}

    def test_prune(self, config_path: Path, capsys):
        store = ConfigStore(config_path)
        store.load()
        store.upsert_binary(Binary(path="/definitely/not/here"))

        assert main(["prune"]) == 0
        assert "Pruned /definitely/not/here" in capsys.readouterr().out

    def test_parse_error_exit_code(self, config_path: Path):
        config_path.parent.mkdir(parents=True)
        config_path.write_text("{broken")
        assert main(["list"]) == 1

    def test_unknown_command(self, config_path: Path, capsys):
        assert main(["frobnicate"]) == 1
        assert "Usage" in capsys.readouterr().out

    def test_remove_without_paths(self, config_path: Path):
        assert main(["remove"]) == 1
