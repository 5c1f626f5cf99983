"""Generation configuration.

Typed, validated configuration for a module generation run. The defaults
live in one immutable ``GenerationDefaults`` record that the entry point
creates once and hands to :func:`normalize_options`; nothing below the entry
point reads defaults on its own.
"""

from __future__ import annotations

import os
import re
from enum import Enum
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from create_rn_module.utils import param_case, pascal_case


class Platform(str, Enum):
    """Target platforms a module can be generated for."""
    ANDROID = "android"
    IOS = "ios"


ALL_PLATFORMS: list[Platform] = [Platform.ANDROID, Platform.IOS]

_REACT_NATIVE_PREFIX = "react-native-"

# Example app names become a directory and an Xcode target.
_EXAMPLE_NAME_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
# One npm package spec, not an option.
_PACKAGE_SPEC_RE = re.compile(r"[^\s-]\S*")


def _split_platforms(value: Any) -> Any:
    """Accept ``"android,ios"`` as well as a list of platform names."""
    if isinstance(value, str):
        return [p.strip() for p in value.split(",") if p.strip()]
    return value


PlatformList = Annotated[list[Platform], BeforeValidator(_split_platforms)]


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------


class GenerationDefaults(BaseModel):
    """Default option values, injected once at the top-level entry point."""

    model_config = ConfigDict(frozen=True)

    prefix: str = Field(default="")
    module_prefix: str = Field(default="react-native")
    package_identifier: str = Field(default="com.reactlibrary")
    platforms: PlatformList = Field(default_factory=lambda: list(ALL_PLATFORMS))
    github_account: str = Field(default="github_account")
    author_name: str = Field(default="Your Name")
    author_email: str = Field(default="yourname@email.com")
    license: str = Field(default="Apache-2.0")
    view: bool = Field(default=False)
    use_cocoapods: bool = Field(default=False)
    generate_example: bool = Field(default=False)
    example_name: str = Field(default="example")
    example_react_native_version: str = Field(default="react-native@0.59")

    @classmethod
    def from_env(cls) -> "GenerationDefaults":
        """Build defaults with overrides from ``CRNM_*`` environment variables.

        Recognised variables (all optional):
            CRNM_PACKAGE_IDENTIFIER, CRNM_PLATFORMS, CRNM_GITHUB_ACCOUNT,
            CRNM_AUTHOR_NAME, CRNM_AUTHOR_EMAIL, CRNM_LICENSE,
            CRNM_EXAMPLE_NAME, CRNM_EXAMPLE_REACT_NATIVE_VERSION.
        """
        overrides: dict[str, Any] = {}
        for field_name in (
            "package_identifier",
            "platforms",
            "github_account",
            "author_name",
            "author_email",
            "license",
            "example_name",
            "example_react_native_version",
        ):
            value = os.environ.get(f"CRNM_{field_name.upper()}")
            if value:
                overrides[field_name] = value
        return cls(**overrides)


# ---------------------------------------------------------------------------
# Validated configuration
# ---------------------------------------------------------------------------


class GenerationConfig(BaseModel):
    """Fully populated options for one generation run.

    Produced by :func:`normalize_options`; read-only afterwards.
    """

    model_config = ConfigDict(frozen=True)

    module_name: str = Field(..., min_length=1, description="Package and directory name")
    name: str = Field(..., min_length=1, description="Root name the module was requested with")
    class_name: str = Field(..., min_length=1, description="Native class name")
    prefix: str = Field(default="")
    module_prefix: str = Field(default="react-native")
    package_identifier: str = Field(default="com.reactlibrary")
    namespace: str = Field(default="")
    platforms: PlatformList = Field(default_factory=lambda: list(ALL_PLATFORMS))
    github_account: str = Field(default="github_account")
    author_name: str = Field(default="Your Name")
    author_email: str = Field(default="yourname@email.com")
    license: str = Field(default="Apache-2.0")
    view: bool = Field(default=False, description="Generate a native UI view instead of a module")
    use_cocoapods: bool = Field(default=False)
    generate_example: bool = Field(default=False)
    example_name: str = Field(default="example")
    example_react_native_version: str = Field(default="react-native@0.59")

    @field_validator("platforms")
    @classmethod
    def _platforms_not_empty(cls, value: list[Platform]) -> list[Platform]:
        if not value:
            raise ValueError("at least one platform is required")
        return list(dict.fromkeys(value))

    @field_validator("example_name")
    @classmethod
    def _example_name_is_identifier(cls, value: str) -> str:
        if value and not _EXAMPLE_NAME_RE.fullmatch(value):
            raise ValueError(
                "example_name must start with a letter or underscore and contain "
                "only letters, digits and underscores"
            )
        return value

    @field_validator("example_react_native_version")
    @classmethod
    def _version_is_package_spec(cls, value: str) -> str:
        if value and not _PACKAGE_SPEC_RE.fullmatch(value):
            raise ValueError(
                "example_react_native_version must be a single package spec "
                "such as react-native@0.59"
            )
        return value

    @model_validator(mode="after")
    def _example_fields_present(self) -> "GenerationConfig":
        if self.generate_example:
            if not self.example_name:
                raise ValueError("example_name is required to generate an example")
            if not self.example_react_native_version:
                raise ValueError(
                    "example_react_native_version is required to generate an example"
                )
        return self

    def summary(self) -> dict[str, str]:
        """Return the option summary shown before generation starts."""
        return {
            "root moduleName": self.module_name,
            "name": self.class_name,
            "prefix": self.prefix,
            "modulePrefix": self.module_prefix,
            "packageIdentifier": self.package_identifier,
            "platforms": ",".join(p.value for p in self.platforms),
            "githubAccount": self.github_account,
            "authorName": self.author_name,
            "authorEmail": self.author_email,
            "license": self.license,
            "view": str(self.view).lower(),
            "useCocoapods": str(self.use_cocoapods).lower(),
            "generateExample": str(self.generate_example).lower(),
            "exampleName": self.example_name,
        }


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------


def normalize_options(
    options: dict[str, Any],
    defaults: GenerationDefaults | None = None,
) -> GenerationConfig:
    """Fill in derived names and defaults for raw user options.

    Args:
        options: Raw options keyed by ``GenerationConfig`` field names.  Only
            ``name`` is required; ``None`` values count as missing.
        defaults: Default values. A plain ``GenerationDefaults()`` is used
            when omitted.

    Raises:
        ValueError: If ``name`` is missing or not a string.
        pydantic.ValidationError: If the resulting configuration is invalid.
    """
    defaults = defaults or GenerationDefaults()
    given = {k: v for k, v in options.items() if v is not None}

    name = given.get("name")
    if not isinstance(name, str) or not name.strip():
        raise ValueError("Please specify a module name")
    name = name.strip()

    root = name[len(_REACT_NATIVE_PREFIX):] if name.startswith(_REACT_NATIVE_PREFIX) else name
    prefix = given.get("prefix", defaults.prefix)
    module_prefix = given.get("module_prefix", defaults.module_prefix)

    module_name = given.get("module_name")
    if not module_name:
        module_name = (
            f"{module_prefix}-{param_case(root)}" if module_prefix else param_case(root)
        )
    class_name = given.get("class_name") or f"{prefix}{pascal_case(root)}"

    merged = defaults.model_dump()
    merged.update(given)
    merged.update(
        name=root,
        prefix=prefix,
        module_prefix=module_prefix,
        module_name=module_name,
        class_name=class_name,
        namespace=given.get("namespace") or class_name,
    )
    return GenerationConfig(**merged)
