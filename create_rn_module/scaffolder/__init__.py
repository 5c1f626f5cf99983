"""React Native module scaffolder -- renders module and example templates.

Quick usage::

    from create_rn_module.config import normalize_options
    from create_rn_module.scaffolder import ModuleGenerator

    config = normalize_options({"name": "foo", "platforms": ["ios"]})
    written = await ModuleGenerator().generate(config, "/tmp/output")
"""

from create_rn_module.scaffolder.example_gen import ExampleGenerator
from create_rn_module.scaffolder.generator import ModuleGenerator
from create_rn_module.scaffolder.registry import (
    EXAMPLE_TEMPLATES,
    MODULE_TEMPLATES,
    ExampleRenderArgs,
    ModuleRenderArgs,
    TemplateUnit,
)
from create_rn_module.scaffolder.templates import TemplateRenderer, render_template

__all__ = [
    "EXAMPLE_TEMPLATES",
    "MODULE_TEMPLATES",
    "ExampleGenerator",
    "ExampleRenderArgs",
    "ModuleGenerator",
    "ModuleRenderArgs",
    "TemplateRenderer",
    "TemplateUnit",
    "render_template",
]
