"""Module generation.

Takes a ``GenerationConfig`` and renders the applicable module templates into
``<output_dir>/<module_name>``, producing the library's package descriptor,
JS entry point and the native Android/iOS sources.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable, Sequence
from pathlib import Path

from create_rn_module.capabilities import FileSystem, LocalFileSystem
from create_rn_module.config import GenerationConfig, Platform
from create_rn_module.errors import ModuleDirectoryError, ModuleGenerationError

from .registry import MODULE_TEMPLATES, ModuleRenderArgs, TemplateUnit
from .templates import render_template


class ModuleGenerator:
    """Renders the module skeleton from the module template registry.

    Renders are independent of each other and run concurrently; the order in
    which files appear on disk is unspecified.
    """

    def __init__(
        self,
        fs: FileSystem | None = None,
        templates: Sequence[TemplateUnit] = MODULE_TEMPLATES,
    ) -> None:
        self.fs = fs or LocalFileSystem()
        self.templates = tuple(templates)

    def select_templates(self, platforms: Iterable[Platform]) -> list[TemplateUnit]:
        """Return the units that apply to *platforms*, in registry order.

        Untagged units always apply; tagged units only when their platform is
        one of *platforms*.
        """
        wanted = set(platforms)
        return [t for t in self.templates if t.platform is None or t.platform in wanted]

    async def generate(
        self, config: GenerationConfig, output_dir: str | Path = "."
    ) -> list[Path]:
        """Generate the module directory.

        Args:
            config: Validated generation options.
            output_dir: Directory the module folder is created in.

        Returns:
            Paths of the files written.  Units whose name is falsy for this
            configuration contribute nothing.

        Raises:
            ModuleDirectoryError: If the module directory cannot be created.
                No template has been rendered at that point.
            ModuleGenerationError: If any render fails.  Files written by
                renders that already finished are left in place.
        """
        module_root = Path(output_dir) / config.module_name
        try:
            await self.fs.ensure_dir(module_root)
        except OSError as exc:
            raise ModuleDirectoryError(config.module_name) from exc

        args = ModuleRenderArgs.from_config(config)
        renders = [
            render_template(module_root, template, args, self.fs)
            for template in self.select_templates(config.platforms)
            if template.name is not None
        ]

        # Every render is joined before a failure is reported.
        results = await asyncio.gather(*renders, return_exceptions=True)
        for result in results:
            if isinstance(result, Exception):
                raise ModuleGenerationError(config.module_name) from result

        return [path for path in results if path is not None]
