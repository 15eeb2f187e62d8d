"""Shared utility functions for mernkit.

Provides async external-command execution and Rich-based console reporting.
Progress goes to ``console`` (stdout); errors and warnings go to
``err_console`` (stderr).
"""

from __future__ import annotations

import asyncio
import shutil
from pathlib import Path

from rich.console import Console

console = Console()
err_console = Console(stderr=True)

# Return code used when the executable cannot be found or started, matching
# the shell's "command not found" status.
COMMAND_NOT_FOUND = 127

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    capture: bool = False,
) -> tuple[int, str, str]:
    """Run an external command and wait for it to exit.

    There is no timeout: a child that never exits blocks the caller.

    Args:
        cmd: Program and arguments. The program is resolved on ``PATH`` so
            that ``npm``/``npx`` shims (``npm.cmd`` on Windows) are found.
        cwd: Working directory for the child process.
        capture: Whether to capture stdout/stderr. By default both streams
            are inherited so the child's output goes straight to the terminal.

    Returns:
        A ``(returncode, stdout, stderr)`` tuple. If *capture* is ``False``
        the stdout/stderr strings will be empty. A program that cannot be
        started yields ``COMMAND_NOT_FOUND`` with the OS error in *stderr*.
    """
    stdout_pipe = asyncio.subprocess.PIPE if capture else None
    stderr_pipe = asyncio.subprocess.PIPE if capture else None

    program = shutil.which(cmd[0]) or cmd[0]
    try:
        process = await asyncio.create_subprocess_exec(
            program,
            *cmd[1:],
            stdout=stdout_pipe,
            stderr=stderr_pipe,
            cwd=str(cwd) if cwd else None,
        )
    except OSError as exc:
        return (COMMAND_NOT_FOUND, "", f"{cmd[0]}: {exc.strerror or exc}")

    stdout_bytes, stderr_bytes = await process.communicate()

    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return (process.returncode or 0, stdout_str, stderr_str)


def describe_failure(cmd: list[str], returncode: int, stderr: str = "") -> str:
    """Build the human-readable cause for a failed command."""
    if stderr:
        return stderr
    return f"Command failed: {' '.join(cmd)} (exit code {returncode})"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_step(message: str) -> None:
    """Print the status line announcing a stage, e.g. ``📦 Creating backend app...``."""
    console.print(message)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message to stderr.

    Markup and emoji codes are disabled so project names and OS error text
    (which may contain brackets or ``:name:`` sequences) are shown verbatim.
    """
    err_console.print(message, style="bold red", markup=False, emoji=False)


def print_warning(message: str) -> None:
    """Print a yellow warning message to stderr."""
    err_console.print(message, style="bold yellow", markup=False, emoji=False)

