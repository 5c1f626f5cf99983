"""Exceptions raised while generating a native module and its example app.

Every error here is terminal for the run: nothing is retried and files
written before the failing step stay on disk.
"""

from __future__ import annotations


class ScaffoldError(Exception):
    """Base class for all generation failures."""


class PrerequisiteCheckError(ScaffoldError):
    """A CLI tool needed for example generation is missing or broken."""

    REMEDY = (
        "both react-native-cli and yarn CLI tools are needed to generate "
        "example project"
    )

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f"{command} failed; {self.REMEDY}")


class TemplateDirectoryError(ScaffoldError):
    """The parent directory of a rendered template could not be created."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Error creating template {name} directory")


class ModuleDirectoryError(ScaffoldError):
    """The root module directory could not be created."""

    def __init__(self, module_name: str) -> None:
        self.module_name = module_name
        super().__init__(f"Error creating root module ({module_name}) directory")


class ModuleGenerationError(ScaffoldError):
    """A template render failed while generating the module."""

    def __init__(self, module_name: str) -> None:
        self.module_name = module_name
        super().__init__(f"Error generating module {module_name} from templates")


class ExampleScaffoldError(ScaffoldError):
    """The external command creating the example app shell failed."""

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f"Error executing example init command: {command}")


class CommandError(ScaffoldError):
    """An external command exited with a non-zero status."""

    def __init__(self, command: str, returncode: int) -> None:
        self.command = command
        self.returncode = returncode
        super().__init__(f"Command failed with exit status {returncode}: {command}")
