"""Shared pytest fixtures for the create-rn-module test suite.

Provides reusable fixtures for:
- Generation configs built through normalization
- A fake command runner that records commands and fakes ``react-native init``
- A filesystem wrapper that can be told to fail for chosen paths
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any, Callable

import pytest

from create_rn_module.capabilities import LocalFileSystem
from create_rn_module.config import GenerationConfig, normalize_options
from create_rn_module.errors import CommandError
from create_rn_module.utils import format_command


# ---------------------------------------------------------------------------
# Fake capabilities
# ---------------------------------------------------------------------------


class FakeRunner:
    """Records every command, as its quoted command line, instead of spawning it.

    ``react-native init <name>`` creates ``<cwd>/<name>/package.json`` the way
    the real tool would.  Commands starting with any prefix in ``fail_on``
    raise ``CommandError``.
    """

    def __init__(self, fail_on: tuple[str, ...] = ()) -> None:
        self.fail_on = fail_on
        self.calls: list[tuple[str, Path | None]] = []

    @property
    def commands(self) -> list[str]:
        return [command for command, _ in self.calls]

    async def run(self, command: Sequence[str], cwd: Path | None = None) -> int:
        line = format_command(command)
        self.calls.append((line, cwd))
        if any(line.startswith(prefix) for prefix in self.fail_on):
            raise CommandError(line, 1)
        if list(command[:2]) == ["react-native", "init"]:
            app_name = command[2]
            app_dir = Path(cwd or ".") / app_name
            app_dir.mkdir(parents=True, exist_ok=True)
            (app_dir / "package.json").write_text(
                json.dumps({"name": app_name, "scripts": {"start": "react-native start"}}),
                encoding="utf-8",
            )
            (app_dir / "App.js").write_text("// generated by init\n", encoding="utf-8")
        return 0


class FlakyFileSystem(LocalFileSystem):
    """Local filesystem whose ``ensure_dir`` fails for paths ending in ``fail_dirs``."""

    def __init__(self, fail_dirs: tuple[str, ...] = ()) -> None:
        self.fail_dirs = fail_dirs
        self.ensured: list[Path] = []
        self.writes: list[Path] = []

    async def ensure_dir(self, path: Path) -> None:
        self.ensured.append(Path(path))
        if any(Path(path).as_posix().endswith(suffix) for suffix in self.fail_dirs):
            raise PermissionError(f"cannot create {path}")
        await super().ensure_dir(path)

    async def write(self, path: Path, content: str) -> None:
        self.writes.append(Path(path))
        await super().write(path, content)


@pytest.fixture
def fake_runner() -> FakeRunner:
    """A runner where every command succeeds."""
    return FakeRunner()


@pytest.fixture
def make_runner() -> Callable[..., FakeRunner]:
    """Factory for runners that fail on the given command prefixes."""

    def factory(*fail_on: str) -> FakeRunner:
        return FakeRunner(fail_on=tuple(fail_on))

    return factory


@pytest.fixture
def make_flaky_fs() -> Callable[..., FlakyFileSystem]:
    """Factory for filesystems that refuse to create the given directories."""

    def factory(*fail_dirs: str) -> FlakyFileSystem:
        return FlakyFileSystem(fail_dirs=tuple(fail_dirs))

    return factory


# ---------------------------------------------------------------------------
# Configs
# ---------------------------------------------------------------------------


@pytest.fixture
def make_config() -> Callable[..., GenerationConfig]:
    """Factory for normalized configs; keyword arguments override options."""

    def factory(**options: Any) -> GenerationConfig:
        merged: dict[str, Any] = {
            "name": "foo",
            "module_name": "rn-foo",
            "package_identifier": "com.example.foo",
        }
        merged.update(options)
        return normalize_options(merged)

    return factory


@pytest.fixture
def ios_config(make_config) -> GenerationConfig:
    """Module ``rn-foo`` for iOS only, no example."""
    return make_config(platforms=["ios"])


@pytest.fixture
def example_config(make_config) -> GenerationConfig:
    """Module ``rn-foo`` for both platforms with an example app."""
    return make_config(platforms=["android", "ios"], generate_example=True)


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Empty directory generated modules are written into."""
    out = tmp_path / "out"
    out.mkdir()
    return out
