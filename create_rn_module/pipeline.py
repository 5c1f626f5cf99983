"""Generation orchestrator.

Runs the two generation phases in order:

Phase 1: MODULE  -- render the native library module from its templates.
Phase 2: EXAMPLE -- (optional) scaffold an example app and link the module.

Usage::

    python -m create_rn_module.pipeline foo --platforms ios
    python -m create_rn_module.pipeline foo --generate-example -o ./work
"""

from __future__ import annotations

import asyncio
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from rich.markup import escape

from create_rn_module.capabilities import (
    CommandRunner,
    FileSystem,
    LocalFileSystem,
    ProcessRunner,
)
from create_rn_module.config import (
    ALL_PLATFORMS,
    GenerationConfig,
    GenerationDefaults,
    normalize_options,
)
from create_rn_module.errors import CommandError, PrerequisiteCheckError, ScaffoldError
from create_rn_module.scaffolder.example_gen import ExampleGenerator
from create_rn_module.scaffolder.generator import ModuleGenerator
from create_rn_module.utils import (
    PHASE_NAMES,
    console,
    format_command,
    print_info,
    print_phase_header,
    print_success,
    print_summary_table,
    print_warning,
)

PREREQUISITE_COMMANDS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("react-native", "--version"), "react-native-cli"),
    (("yarn", "--version"), "Yarn CLI"),
)


@dataclass
class GenerationResult:
    """What a generation run produced."""

    module_root: Path
    module_files: list[Path] = field(default_factory=list)
    example_root: Path | None = None


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------


class GenerationPipeline:
    """Drives module generation and, when requested, example generation.

    Attributes:
        config: Validated generation options.
        output_dir: Directory the module folder is created in.
        defaults: Defaults the configuration was normalized with; used to
            spot an uncustomized package identifier.
    """

    def __init__(
        self,
        config: GenerationConfig,
        *,
        output_dir: str | Path = ".",
        fs: FileSystem | None = None,
        runner: CommandRunner | None = None,
        defaults: GenerationDefaults | None = None,
        module_generator: ModuleGenerator | None = None,
        example_generator: ExampleGenerator | None = None,
    ) -> None:
        self.config = config
        self.output_dir = Path(output_dir)
        self.defaults = defaults or GenerationDefaults()
        fs = fs or LocalFileSystem()
        self.runner = runner or ProcessRunner()
        self.module_generator = module_generator or ModuleGenerator(fs)
        self.example_generator = example_generator or ExampleGenerator(self.runner, fs)

    async def run(self) -> GenerationResult:
        """Generate the module, then the example app if requested.

        Raises:
            PrerequisiteCheckError: If example generation was requested and
                ``react-native`` or ``yarn`` is unusable.  Raised before any
                file is written.
            ScaffoldError: Any failure from either phase.
        """
        config = self.config
        if config.package_identifier == self.defaults.package_identifier:
            print_warning(
                f"While `{self.defaults.package_identifier}` is the default package "
                "identifier, it is recommended to customize the package identifier."
            )
        print_summary_table(
            config.summary(), title="CREATE new React Native module with the following options"
        )

        if config.generate_example:
            await self.check_prerequisites()

        print_phase_header(1, PHASE_NAMES[1])
        print_info("CREATE: Generating the React Native library module")
        module_files = await self.module_generator.generate(config, self.output_dir)
        result = GenerationResult(
            module_root=self.output_dir / config.module_name,
            module_files=module_files,
        )

        if config.generate_example:
            print_phase_header(2, PHASE_NAMES[2])
            result.example_root = await self.example_generator.generate(
                config, self.output_dir
            )

        return result

    async def check_prerequisites(self) -> None:
        """Probe the CLI tools needed to generate the example app."""
        for command, tool in PREREQUISITE_COMMANDS:
            print_info(
                f"CREATE: Check for valid {tool} tool version, "
                "as needed to generate the example project"
            )
            try:
                await self.runner.run(command)
            except (CommandError, OSError) as exc:
                raise PrerequisiteCheckError(format_command(command)) from exc
            print_info(f"{format_command(command)} ok")


async def generate(config: GenerationConfig, **kwargs: Any) -> GenerationResult:
    """Run a :class:`GenerationPipeline` for *config*."""
    return await GenerationPipeline(config, **kwargs).run()


async def create_library(
    options: dict[str, Any],
    defaults: GenerationDefaults | None = None,
    **kwargs: Any,
) -> GenerationResult:
    """Normalize raw *options* and generate the module they describe."""
    defaults = defaults or GenerationDefaults()
    config = normalize_options(options, defaults)
    return await generate(config, defaults=defaults, **kwargs)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def build_parser(defaults: GenerationDefaults):
    """Build the argument parser; option defaults shown in help come from *defaults*."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="create-rn-module",
        description="Create a React Native library module for Android and iOS",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-rn-module foo\n"
            "  create-rn-module foo --platforms ios --use-cocoapods\n"
            "  create-rn-module foo --generate-example -o ./work\n"
        ),
    )
    parser.add_argument("name", help="Name of the module (e.g. 'foo' or 'react-native-foo')")
    parser.add_argument(
        "--output", "-o",
        default=".",
        help="Directory the module folder is created in (default: .)",
    )
    parser.add_argument("--prefix", default=None, help="Prefix for the native class name")
    parser.add_argument("--module-name", default=None, help="Override the module/package name")
    parser.add_argument(
        "--module-prefix",
        default=None,
        help=f"Prefix for the derived module name (default: {defaults.module_prefix})",
    )
    parser.add_argument(
        "--package-identifier",
        default=None,
        help=f"Java package for Android sources (default: {defaults.package_identifier})",
    )
    parser.add_argument("--namespace", default=None, help="Namespace (default: class name)")
    parser.add_argument(
        "--platforms",
        default=None,
        help=(
            "Comma-separated platforms to generate "
            f"(default: {','.join(p.value for p in defaults.platforms)}; "
            f"choices: {','.join(p.value for p in ALL_PLATFORMS)})"
        ),
    )
    parser.add_argument("--github-account", default=None, help="GitHub account for URLs")
    parser.add_argument("--author-name", default=None, help="Author name")
    parser.add_argument("--author-email", default=None, help="Author email")
    parser.add_argument("--license", default=None, help=f"License (default: {defaults.license})")
    parser.add_argument(
        "--view", action="store_true", default=None,
        help="Generate a native UI view instead of a module",
    )
    parser.add_argument(
        "--use-cocoapods", action="store_true", default=None,
        help="Generate a Podfile for the example app",
    )
    parser.add_argument(
        "--generate-example", action="store_true", default=None,
        help="Also generate an example app linked to the module",
    )
    parser.add_argument(
        "--example-name",
        default=None,
        help=f"Name of the example app (default: {defaults.example_name})",
    )
    parser.add_argument(
        "--example-react-native-version",
        default=None,
        help=(
            "React Native version for the example app "
            f"(default: {defaults.example_react_native_version})"
        ),
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``create-rn-module``."""
    defaults = GenerationDefaults.from_env()
    args = build_parser(defaults).parse_args(argv)

    options = vars(args)
    output_dir = Path(options.pop("output"))

    try:
        result = asyncio.run(
            create_library(options, defaults=defaults, output_dir=output_dir)
        )
    except (ScaffoldError, ValidationError, ValueError) as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        sys.exit(1)

    print_success(f"Module created in {result.module_root}")
    if result.example_root is not None:
        print_success(f"Example app created in {result.example_root}")


if __name__ == "__main__":
    main()
