"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner, Result

from machinpi.cli.main import cli


@pytest.fixture()
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Return an empty cwd with no config discovery from the environment."""
    monkeypatch.delenv("MACHINPI_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture()
def invoke(workdir: Path):
    """Return a helper that runs the CLI inside *workdir*."""
    runner = CliRunner()

    def _invoke(*args: str) -> Result:
        return runner.invoke(cli, list(args))

    return _invoke
