"""Template units and the module/example template registries.

A ``TemplateUnit`` knows how to render one file: ``name(args)`` gives its
path relative to the module root (or a falsy value when the file does not
apply to *args*) and ``content(args)`` gives its text.  A unit tagged with a
``platform`` is only considered when that platform is being generated.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field

from create_rn_module.config import GenerationConfig, Platform
from create_rn_module.utils import package_path

from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Render arguments
# ---------------------------------------------------------------------------


class ModuleRenderArgs(BaseModel):
    """Arguments shared by every module template in one run."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Native class name")
    module_name: str
    package_identifier: str
    namespace: str
    platforms: list[Platform]
    github_account: str
    author_name: str
    author_email: str
    license: str
    view: bool
    use_cocoapods: bool
    generate_example: bool
    example_name: str

    @classmethod
    def from_config(cls, config: GenerationConfig) -> "ModuleRenderArgs":
        return cls(
            name=config.class_name,
            module_name=config.module_name,
            package_identifier=config.package_identifier,
            namespace=config.namespace,
            platforms=config.platforms,
            github_account=config.github_account,
            author_name=config.author_name,
            author_email=config.author_email,
            license=config.license,
            view=config.view,
            use_cocoapods=config.use_cocoapods,
            generate_example=config.generate_example,
            example_name=config.example_name,
        )


class ExampleRenderArgs(BaseModel):
    """Arguments shared by every example template in one run."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Native class name")
    module_name: str
    view: bool
    use_cocoapods: bool
    example_name: str

    @classmethod
    def from_config(cls, config: GenerationConfig) -> "ExampleRenderArgs":
        return cls(
            name=config.class_name,
            module_name=config.module_name,
            view=config.view,
            use_cocoapods=config.use_cocoapods,
            example_name=config.example_name,
        )


# ---------------------------------------------------------------------------
# Template units
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TemplateUnit:
    """One renderable file."""

    name: Optional[Callable[[Any], Optional[str]]]
    content: Callable[[Any], str]
    platform: Optional[Platform] = None


@lru_cache(maxsize=1)
def _default_renderer() -> TemplateRenderer:
    return TemplateRenderer()


def jinja_unit(
    template_path: str,
    name: Callable[[Any], Optional[str]],
    platform: Optional[Platform] = None,
) -> TemplateUnit:
    """Build a unit whose content is the packaged Jinja2 body *template_path*."""

    def content(args: BaseModel) -> str:
        return _default_renderer().render(template_path, args.model_dump(mode="json"))

    return TemplateUnit(name=name, content=content, platform=platform)


def _java_dir(args: ModuleRenderArgs) -> str:
    return f"android/src/main/java/{package_path(args.package_identifier)}"


# ---------------------------------------------------------------------------
# Registries
# ---------------------------------------------------------------------------

MODULE_TEMPLATES: tuple[TemplateUnit, ...] = (
    jinja_unit("package.json.j2", lambda a: "package.json"),
    jinja_unit("README.md.j2", lambda a: "README.md"),
    jinja_unit("index.js.j2", lambda a: "index.js"),
    jinja_unit("gitignore.j2", lambda a: ".gitignore"),
    jinja_unit(
        "scripts/examples_postinstall.js.j2",
        lambda a: "scripts/examples_postinstall.js" if a.generate_example else None,
    ),
    # Android
    jinja_unit(
        "android/build.gradle.j2",
        lambda a: "android/build.gradle",
        Platform.ANDROID,
    ),
    jinja_unit(
        "android/AndroidManifest.xml.j2",
        lambda a: "android/src/main/AndroidManifest.xml",
        Platform.ANDROID,
    ),
    jinja_unit(
        "android/Module.java.j2",
        lambda a: None if a.view else f"{_java_dir(a)}/{a.name}Module.java",
        Platform.ANDROID,
    ),
    jinja_unit(
        "android/Manager.java.j2",
        lambda a: f"{_java_dir(a)}/{a.name}Manager.java" if a.view else None,
        Platform.ANDROID,
    ),
    jinja_unit(
        "android/Package.java.j2",
        lambda a: f"{_java_dir(a)}/{a.name}Package.java",
        Platform.ANDROID,
    ),
    # iOS
    jinja_unit("ios/header.h.j2", lambda a: f"ios/{a.name}.h", Platform.IOS),
    jinja_unit("ios/source.m.j2", lambda a: f"ios/{a.name}.m", Platform.IOS),
    jinja_unit(
        "ios/contents.xcworkspacedata.j2",
        lambda a: f"ios/{a.name}.xcworkspace/contents.xcworkspacedata",
        Platform.IOS,
    ),
    jinja_unit("podspec.j2", lambda a: f"{a.module_name}.podspec", Platform.IOS),
)

EXAMPLE_TEMPLATES: tuple[TemplateUnit, ...] = (
    jinja_unit("example/App.js.j2", lambda a: f"{a.example_name}/App.js"),
    jinja_unit(
        "example/Podfile.j2",
        lambda a: f"{a.example_name}/ios/Podfile" if a.use_cocoapods else None,
    ),
)
