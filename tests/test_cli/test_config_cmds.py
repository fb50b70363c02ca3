"""Tests for `machinpi config` commands."""

from __future__ import annotations

import json
from pathlib import Path

from machinpi.core.config import default_config, serialize_config


class TestConfigShow:
    """config show prints the effective configuration."""

    def test_defaults_without_file(self, invoke) -> None:
        r = invoke("config", "show")
        assert r.exit_code == 0, r.output
        assert r.output == serialize_config(default_config())

    def test_merges_file(self, invoke, workdir: Path) -> None:
        (workdir / "machinpi.json").write_text(json.dumps({"parallel": True}))
        r = invoke("config", "show", "--json")
        assert r.exit_code == 0, r.output
        data = json.loads(r.output)["data"]
        assert data["parallel"] is True
        assert data["default_digits"] == 1000

    def test_missing_explicit_file(self, invoke, workdir: Path) -> None:
        r = invoke("config", "show", "--config", str(workdir / "nope.json"), "--json")
        assert r.exit_code == 1
        assert json.loads(r.output)["error"]["code"] == "CONFIG_ERROR"


class TestConfigInit:
    """config init writes a default machinpi.json."""

    def test_writes_default_file(self, invoke, workdir: Path) -> None:
        r = invoke("config", "init")
        assert r.exit_code == 0, r.output
        written = (workdir / "machinpi.json").read_text()
        assert written == serialize_config(default_config())

    def test_writes_into_path(self, invoke, workdir: Path) -> None:
        target = workdir / "sub"
        target.mkdir()
        r = invoke("config", "init", "--path", str(target), "--json")
        assert r.exit_code == 0, r.output
        assert (target / "machinpi.json").is_file()
        assert json.loads(r.output)["data"]["path"].endswith("machinpi.json")

    def test_refuses_overwrite_without_force(self, invoke, workdir: Path) -> None:
        (workdir / "machinpi.json").write_text("existing")
        r = invoke("config", "init", "--json")
        assert r.exit_code == 1
        assert json.loads(r.output)["error"]["code"] == "CONFLICT"
        assert (workdir / "machinpi.json").read_text() == "existing"

    def test_force_overwrites(self, invoke, workdir: Path) -> None:
        (workdir / "machinpi.json").write_text("existing")
        r = invoke("config", "init", "--force")
        assert r.exit_code == 0, r.output
        assert json.loads((workdir / "machinpi.json").read_text()) == default_config()

    def test_written_file_is_loaded_by_compute(self, invoke) -> None:
        invoke("config", "init")
        r = invoke("compute", "5")
        assert r.exit_code == 0, r.output
        assert r.output.strip() == "3.14159"
