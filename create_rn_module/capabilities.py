"""Filesystem and process capabilities used by the generators.

The generators never touch ``pathlib`` or ``subprocess`` directly; they go
through a ``FileSystem`` and a ``CommandRunner``.  The local implementations
here are the ones the CLI uses; tests pass in fakes.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from create_rn_module.errors import CommandError
from create_rn_module.utils import format_command, run_command


class FileSystem(Protocol):
    """Directory creation and file writing."""

    async def ensure_dir(self, path: Path) -> None:
        """Create *path* and its parents; succeed if it already exists."""
        ...

    async def write(self, path: Path, content: str) -> None:
        """Write *content* to *path*, replacing any existing file."""
        ...


class CommandRunner(Protocol):
    """External command execution."""

    async def run(self, command: Sequence[str], cwd: Path | None = None) -> int:
        """Run the argument vector *command* to completion.

        Returns:
            The exit status (always ``0``).

        Raises:
            CommandError: If the command cannot be started or exits with a
                non-zero status.
        """
        ...


class LocalFileSystem:
    """``FileSystem`` backed by the local disk.

    Blocking calls run in a worker thread so concurrent renders do not stall
    the event loop.  ``Path.mkdir(exist_ok=True)`` tolerates another caller
    creating the same directory at the same time.
    """

    async def ensure_dir(self, path: Path) -> None:
        await asyncio.to_thread(Path(path).mkdir, parents=True, exist_ok=True)

    async def write(self, path: Path, content: str) -> None:
        await asyncio.to_thread(Path(path).write_text, content, encoding="utf-8")


# Exit status reported when the program itself cannot be started.
COMMAND_NOT_FOUND = 127


class ProcessRunner:
    """``CommandRunner`` that spawns the program directly, without a shell.

    Output is not captured: the child inherits this process's stdout and
    stderr so the operator sees third-party tool output as it happens.
    """

    async def run(self, command: Sequence[str], cwd: Path | None = None) -> int:
        try:
            returncode = await run_command(command, cwd=cwd)
        except OSError as exc:
            raise CommandError(format_command(command), COMMAND_NOT_FOUND) from exc
        if returncode != 0:
            raise CommandError(format_command(command), returncode)
        return returncode
