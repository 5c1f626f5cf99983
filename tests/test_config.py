"""Unit tests for generation configuration (create_rn_module.config).

Tests cover:
- GenerationDefaults values and from_env overrides
- GenerationConfig invariants (platforms, example fields, immutability)
- normalize_options name derivation and default filling
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from create_rn_module.config import (
    ALL_PLATFORMS,
    GenerationConfig,
    GenerationDefaults,
    Platform,
    normalize_options,
)


# ---------------------------------------------------------------------------
# GenerationDefaults
# ---------------------------------------------------------------------------


class TestGenerationDefaults:
    @pytest.mark.unit
    def test_default_values(self):
        defaults = GenerationDefaults()
        assert defaults.prefix == ""
        assert defaults.module_prefix == "react-native"
        assert defaults.package_identifier == "com.reactlibrary"
        assert defaults.platforms == [Platform.ANDROID, Platform.IOS]
        assert defaults.license == "Apache-2.0"
        assert defaults.use_cocoapods is False
        assert defaults.generate_example is False
        assert defaults.example_name == "example"
        assert defaults.example_react_native_version == "react-native@0.59"

    @pytest.mark.unit
    def test_defaults_are_immutable(self):
        defaults = GenerationDefaults()
        with pytest.raises(ValidationError):
            defaults.license = "MIT"

    @pytest.mark.unit
    def test_from_env_no_vars(self, monkeypatch):
        for key in ("CRNM_PACKAGE_IDENTIFIER", "CRNM_PLATFORMS", "CRNM_LICENSE"):
            monkeypatch.delenv(key, raising=False)
        assert GenerationDefaults.from_env() == GenerationDefaults()

    @pytest.mark.unit
    def test_from_env_overrides(self, monkeypatch):
        monkeypatch.setenv("CRNM_PACKAGE_IDENTIFIER", "org.acme")
        monkeypatch.setenv("CRNM_PLATFORMS", "ios")
        monkeypatch.setenv("CRNM_AUTHOR_NAME", "Ada")
        monkeypatch.setenv("CRNM_EXAMPLE_REACT_NATIVE_VERSION", "react-native@0.60")
        defaults = GenerationDefaults.from_env()
        assert defaults.package_identifier == "org.acme"
        assert defaults.platforms == [Platform.IOS]
        assert defaults.author_name == "Ada"
        assert defaults.example_react_native_version == "react-native@0.60"
        assert defaults.license == "Apache-2.0"  # untouched

    @pytest.mark.unit
    def test_from_env_ignores_empty_values(self, monkeypatch):
        monkeypatch.setenv("CRNM_LICENSE", "")
        assert GenerationDefaults.from_env().license == "Apache-2.0"


# ---------------------------------------------------------------------------
# GenerationConfig
# ---------------------------------------------------------------------------


def _config(**overrides) -> GenerationConfig:
    fields = {"module_name": "rn-foo", "name": "foo", "class_name": "Foo"}
    fields.update(overrides)
    return GenerationConfig(**fields)


class TestGenerationConfig:
    @pytest.mark.unit
    def test_minimal(self):
        config = _config()
        assert config.platforms == ALL_PLATFORMS
        assert config.generate_example is False

    @pytest.mark.unit
    def test_empty_platforms_rejected(self):
        with pytest.raises(ValidationError):
            _config(platforms=[])

    @pytest.mark.unit
    def test_unknown_platform_rejected(self):
        with pytest.raises(ValidationError):
            _config(platforms=["windows"])

    @pytest.mark.unit
    def test_platforms_from_comma_string(self):
        assert _config(platforms="ios, android").platforms == [Platform.IOS, Platform.ANDROID]

    @pytest.mark.unit
    def test_duplicate_platforms_collapsed(self):
        assert _config(platforms=["ios", "ios"]).platforms == [Platform.IOS]

    @pytest.mark.unit
    def test_example_requires_example_name(self):
        with pytest.raises(ValidationError):
            _config(generate_example=True, example_name="")

    @pytest.mark.unit
    def test_example_requires_react_native_version(self):
        with pytest.raises(ValidationError):
            _config(generate_example=True, example_react_native_version="")

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "example_name",
        ["x; touch pwned; true", "my app", "../escape", "9lives", "demo\n", "$(id)"],
    )
    def test_unsafe_example_name_rejected(self, example_name):
        with pytest.raises(ValidationError, match="example_name"):
            _config(generate_example=True, example_name=example_name)

    @pytest.mark.unit
    @pytest.mark.parametrize("example_name", ["example", "Demo_App", "_demo2"])
    def test_identifier_example_names_accepted(self, example_name):
        assert _config(generate_example=True, example_name=example_name).example_name == example_name

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "version", ["react-native@0.59 ; rm -rf /", "--template foo", "0.59\n"]
    )
    def test_unsafe_react_native_version_rejected(self, version):
        with pytest.raises(ValidationError, match="example_react_native_version"):
            _config(generate_example=True, example_react_native_version=version)

    @pytest.mark.unit
    def test_empty_example_name_allowed_without_example(self):
        assert _config(example_name="").example_name == ""

    @pytest.mark.unit
    def test_empty_module_name_rejected(self):
        with pytest.raises(ValidationError):
            _config(module_name="")

    @pytest.mark.unit
    def test_frozen(self):
        config = _config()
        with pytest.raises(ValidationError):
            config.module_name = "other"

    @pytest.mark.unit
    def test_summary(self):
        summary = _config(platforms=["ios"], view=True).summary()
        assert summary["root moduleName"] == "rn-foo"
        assert summary["name"] == "Foo"
        assert summary["platforms"] == "ios"
        assert summary["view"] == "true"
        assert summary["generateExample"] == "false"


# ---------------------------------------------------------------------------
# normalize_options
# ---------------------------------------------------------------------------


class TestNormalizeOptions:
    @pytest.mark.unit
    def test_derives_names(self):
        config = normalize_options({"name": "foo"})
        assert config.name == "foo"
        assert config.module_name == "react-native-foo"
        assert config.class_name == "Foo"
        assert config.namespace == "Foo"

    @pytest.mark.unit
    def test_strips_react_native_prefix(self):
        config = normalize_options({"name": "react-native-image-picker"})
        assert config.name == "image-picker"
        assert config.module_name == "react-native-image-picker"
        assert config.class_name == "ImagePicker"

    @pytest.mark.unit
    def test_camel_case_name(self):
        config = normalize_options({"name": "fooBar"})
        assert config.module_name == "react-native-foo-bar"
        assert config.class_name == "FooBar"

    @pytest.mark.unit
    def test_class_prefix(self):
        config = normalize_options({"name": "foo", "prefix": "RN"})
        assert config.class_name == "RNFoo"
        assert config.namespace == "RNFoo"

    @pytest.mark.unit
    def test_empty_module_prefix(self):
        assert normalize_options({"name": "foo", "module_prefix": ""}).module_name == "foo"

    @pytest.mark.unit
    def test_explicit_names_win(self):
        config = normalize_options({
            "name": "foo",
            "module_name": "rn-foo",
            "class_name": "FooModule",
            "namespace": "Acme.Foo",
        })
        assert config.module_name == "rn-foo"
        assert config.class_name == "FooModule"
        assert config.namespace == "Acme.Foo"

    @pytest.mark.unit
    def test_none_values_use_defaults(self):
        config = normalize_options({"name": "foo", "license": None, "view": None})
        assert config.license == "Apache-2.0"
        assert config.view is False

    @pytest.mark.unit
    def test_injected_defaults(self):
        defaults = GenerationDefaults(license="MIT", platforms=["ios"], module_prefix="rn")
        config = normalize_options({"name": "foo"}, defaults)
        assert config.license == "MIT"
        assert config.platforms == [Platform.IOS]
        assert config.module_name == "rn-foo"

    @pytest.mark.unit
    @pytest.mark.parametrize("options", [{}, {"name": ""}, {"name": "   "}, {"name": 42}])
    def test_missing_name(self, options):
        with pytest.raises(ValueError, match="module name"):
            normalize_options(options)

    @pytest.mark.unit
    def test_example_with_empty_version_rejected(self):
        with pytest.raises(ValidationError):
            normalize_options({
                "name": "foo",
                "generate_example": True,
                "example_react_native_version": "",
            })
