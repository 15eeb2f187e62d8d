"""Shared pytest fixtures for the mernkit test suite.

Provides reusable fixtures for:
- A Config rooted in a temporary base directory
- A fake external-command runner standing in for node, git, npm and npx
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable
from unittest.mock import patch

import pytest

from mernkit.config import Config
from mernkit.utils import COMMAND_NOT_FOUND


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

@pytest.fixture
def make_config(tmp_path: Path) -> Callable[..., Config]:
    """Factory for a Config whose project lands under ``tmp_path``."""
    def factory(project_name: str = "shop", **overrides: Any) -> Config:
        return Config(project_name=project_name, base_dir=tmp_path, **overrides)

    return factory


@pytest.fixture
def config(make_config: Callable[..., Config]) -> Config:
    return make_config()


# ---------------------------------------------------------------------------
# External commands
# ---------------------------------------------------------------------------

class FakeRunner:
    """Records command invocations and returns canned exit codes.

    ``returncodes`` maps a program name (``"git"``, ``"npm"``...) to the
    exit code it should report. ``missing`` lists programs that behave as
    if they were not installed. A successful ``npx create-react-app`` call
    creates the target directory the way the real generator would.
    """

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self.returncodes: dict[str, int] = {}
        self.missing: set[str] = set()
        self.node_version = "v20.11.0"

    async def __call__(
        self,
        cmd: list[str],
        cwd: str | Path | None = None,
        capture: bool = False,
    ) -> tuple[int, str, str]:
        self.calls.append({"cmd": list(cmd), "cwd": cwd, "capture": capture})
        program = cmd[0]
        if program in self.missing:
            return (COMMAND_NOT_FOUND, "", f"{program}: No such file or directory")

        returncode = self.returncodes.get(program, 0)
        if program == "node":
            return (returncode, self.node_version, "")
        if program == "npx" and returncode == 0:
            Path(cmd[-1]).mkdir(parents=True, exist_ok=True)
        return (returncode, "", "")

    @property
    def programs(self) -> list[str]:
        return [call["cmd"][0] for call in self.calls]

    def call_for(self, program: str) -> dict[str, Any]:
        for call in self.calls:
            if call["cmd"][0] == program:
                return call
        raise AssertionError(f"{program} was never invoked")


@pytest.fixture
def fake_runner() -> FakeRunner:
    """Patch every external command the provisioner runs.

    Usage:
        def test_something(fake_runner):
            fake_runner.returncodes["npm"] = 1
            ...
    """
    runner = FakeRunner()
    with patch("mernkit.environment.run_command", runner), patch(
        "mernkit.provisioner.run_command", runner
    ):
        yield runner
