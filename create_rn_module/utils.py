"""Shared utility functions for the module generator.

Provides async command execution, JSON manifest editing, name-case helpers,
and Rich-based console reporting.
"""

from __future__ import annotations

import asyncio
import json
import re
import shlex
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.rule import Rule
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: Sequence[str],
    cwd: str | Path | None = None,
) -> int:
    """Run a command asynchronously and wait for it to exit.

    The command is an argument vector and is executed without a shell, so
    no argument is ever interpreted as shell syntax.  The child inherits this
    process's stdout and stderr, so its output shows up live.

    Args:
        cmd: Program followed by its arguments.
        cwd: Working directory for the child process.

    Returns:
        The child's exit status.

    Raises:
        OSError: If the program cannot be started (e.g. it is not installed).
    """
    process = await asyncio.create_subprocess_exec(
        *cmd,
        cwd=str(cwd) if cwd else None,
    )
    return await process.wait()


def format_command(cmd: Sequence[str]) -> str:
    """Render an argument vector as one shell-quoted line for messages."""
    return shlex.join(cmd)


# ---------------------------------------------------------------------------
# Name helpers
# ---------------------------------------------------------------------------


def param_case(name: str) -> str:
    """Convert ``SomeThing`` or ``some_thing`` to ``some-thing``.

    Examples::

        param_case("FooBar") -> "foo-bar"
        param_case("my lib") -> "my-lib"
    """
    s1 = re.sub(r"([a-z0-9])([A-Z])", r"\1-\2", name.strip())
    slug = re.sub(r"[^a-zA-Z0-9]+", "-", s1).lower()
    return slug.strip("-")


def pascal_case(name: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``SomeThing``.

    Existing inner capitals are kept, so ``fooBar`` becomes ``FooBar``.
    """
    parts = re.split(r"[^a-zA-Z0-9]+", name)
    return "".join(word[0].upper() + word[1:] for word in parts if word)


def package_path(identifier: str) -> str:
    """Convert a Java package identifier to its source path (``a.b`` -> ``a/b``)."""
    return identifier.replace(".", "/")


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> dict[str, Any]:
    """Load and parse a JSON file that holds a top-level object.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the top-level value is not an object.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path} must hold a JSON object, got {type(data).__name__}")
    return data


def save_json(data: dict[str, Any], path: str | Path) -> None:
    """Save data as pretty-printed JSON with a trailing newline."""
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")


def npm_add_script(manifest_path: str | Path, key: str, value: str) -> None:
    """Set ``scripts[key]`` in an npm ``package.json``, replacing any old value.

    A missing ``scripts`` entry, or one that is not an object, is replaced
    by a fresh object.
    """
    manifest = load_json(manifest_path)
    scripts = manifest.get("scripts")
    if not isinstance(scripts, dict):
        scripts = manifest["scripts"] = {}
    scripts[key] = value
    save_json(manifest, manifest_path)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


PHASE_NAMES: dict[int, str] = {
    1: "MODULE",
    2: "EXAMPLE",
}

PHASE_COLORS: dict[int, str] = {
    1: "bright_green",
    2: "bright_cyan",
}


def print_phase_header(phase: int, name: str) -> None:
    """Print a full-width rule announcing a generation phase."""
    color = PHASE_COLORS.get(phase, "white")
    console.print()
    console.print(
        Rule(
            f"[bold {color}] Phase {phase}: {name.upper()} [/bold {color}]",
            style=color,
        )
    )
    console.print()


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Option", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_info(message: str) -> None:
    """Print a plain progress line."""
    console.print(message)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
