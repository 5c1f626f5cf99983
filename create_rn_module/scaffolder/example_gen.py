"""Example application generation.

Creates a runnable React Native app next to the generated module sources and
wires the module into it:

1. scaffold the app shell with ``react-native init``
2. render the example templates over it
3. add a ``postinstall`` cleanup script to the app's ``package.json``
4. install the module as a ``file:../`` dependency with yarn
5. run ``react-native link``

Each stage waits for the previous one.  Nothing is retried and nothing is
rolled back on failure.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Sequence
from pathlib import Path

from create_rn_module.capabilities import CommandRunner, FileSystem, LocalFileSystem
from create_rn_module.config import GenerationConfig
from create_rn_module.errors import CommandError, ExampleScaffoldError
from create_rn_module.utils import format_command, npm_add_script, print_error, print_info

from .registry import EXAMPLE_TEMPLATES, ExampleRenderArgs, TemplateUnit
from .templates import render_template


POSTINSTALL_KEY = "postinstall"
POSTINSTALL_SCRIPT = "node ../scripts/examples_postinstall.js"

INSTALL_COMMAND = ("yarn", "add", "file:../")
LINK_COMMAND = ("react-native", "link")


class ExampleGenerator:
    """Bootstraps an example app that depends on the generated module."""

    def __init__(
        self,
        runner: CommandRunner,
        fs: FileSystem | None = None,
        templates: Sequence[TemplateUnit] = EXAMPLE_TEMPLATES,
        add_script: Callable[[Path, str, str], None] = npm_add_script,
    ) -> None:
        self.runner = runner
        self.fs = fs or LocalFileSystem()
        self.templates = tuple(templates)
        self.add_script = add_script

    async def generate(
        self, config: GenerationConfig, output_dir: str | Path = "."
    ) -> Path:
        """Create, patch and link the example app.

        The module directory must already hold the generated module; the app
        is created inside it as ``<module_name>/<example_name>``.

        Returns:
            Path to the example app.

        Raises:
            ExampleScaffoldError: If ``react-native init`` fails.  Nothing of
                the example has been rendered at that point.
            CommandError: If installing or linking the module fails.
        """
        module_root = Path(output_dir) / config.module_name

        example_root = await self._scaffold(config, module_root)
        await self._render_templates(config, module_root)
        manifest = await self._patch_manifest(example_root)
        await self._install_module(manifest.parent)
        await self._link_native(manifest.parent)
        return example_root

    # -- Stages --------------------------------------------------------------

    async def _scaffold(self, config: GenerationConfig, module_root: Path) -> Path:
        command = (
            "react-native",
            "init",
            config.example_name,
            "--version",
            config.example_react_native_version,
        )
        display = format_command(command)
        print_info(f"CREATE example app with the following command: {display}")
        try:
            await self.runner.run(command, cwd=module_root)
        except CommandError as exc:
            raise ExampleScaffoldError(display) from exc
        return module_root / config.example_name

    async def _render_templates(
        self, config: GenerationConfig, module_root: Path
    ) -> list[Path]:
        args = ExampleRenderArgs.from_config(config)
        results = await asyncio.gather(
            *(render_template(module_root, template, args, self.fs) for template in self.templates),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, Exception):
                raise result
        return [path for path in results if path is not None]

    async def _patch_manifest(self, example_root: Path) -> Path:
        print_info("Adding cleanup postinstall task to the example app")
        manifest = example_root / "package.json"
        await asyncio.to_thread(self.add_script, manifest, POSTINSTALL_KEY, POSTINSTALL_SCRIPT)
        return manifest

    async def _install_module(self, example_root: Path) -> None:
        print_info("Linking the new module library to the example app")
        try:
            await self.runner.run(INSTALL_COMMAND, cwd=example_root)
        except CommandError:
            print_error("Yarn failure for example, aborting")
            raise

    async def _link_native(self, example_root: Path) -> None:
        try:
            await self.runner.run(LINK_COMMAND, cwd=example_root)
        except CommandError:
            print_error("react-native link failure for example, aborting")
            raise
