"""Node.js runtime version gate.

The generated backend and ``create-react-app`` both need a recent Node.js,
so the run is refused up front when the installed major version is too old.
"""

from __future__ import annotations

import re

from mernkit.config import Config
from mernkit.results import StepResult
from mernkit.utils import run_command

STEP_NAME = "environment"

_VERSION_RE = re.compile(r"^v?(\d+)(?:\.\d+)*")


def parse_major_version(version: str) -> int | None:
    """Extract the major version from ``node --version`` output.

    Examples::

        parse_major_version("v18.17.0") -> 18
        parse_major_version("20.1")     -> 20
        parse_major_version("garbage")  -> None
    """
    match = _VERSION_RE.match(version.strip())
    if not match:
        return None
    return int(match.group(1))


async def node_version() -> str | None:
    """Return the installed Node.js version string, or ``None`` if unavailable."""
    returncode, stdout, _ = await run_command(["node", "--version"], capture=True)
    if returncode != 0 or not stdout:
        return None
    return stdout.splitlines()[0].strip()


async def check_node_version(config: Config) -> StepResult:
    """Fail fatally unless Node.js >= ``config.min_node_major`` is installed."""
    required = config.min_node_major
    current = await node_version()
    if current is None:
        return StepResult.fatal(
            STEP_NAME,
            f"Node.js was not found. Please install Node.js {required}.x or higher.",
        )

    major = parse_major_version(current)
    if major is None:
        return StepResult.fatal(
            STEP_NAME, f"Could not determine the Node.js version from '{current}'."
        )

    if major < required:
        return StepResult.fatal(
            STEP_NAME,
            f"Your Node.js version ({current}) is not supported. "
            f"Please use Node.js {required}.x or higher.",
        )
    return StepResult.success(STEP_NAME)
