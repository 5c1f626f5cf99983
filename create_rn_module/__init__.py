"""create-rn-module -- scaffolds React Native native library modules.

Generates an Android/iOS native module from templates and, optionally, an
example app that depends on it.

Quick usage::

    import asyncio
    from create_rn_module import create_library

    asyncio.run(create_library({"name": "foo", "platforms": "ios"}))
"""

from create_rn_module.config import (
    GenerationConfig,
    GenerationDefaults,
    Platform,
    normalize_options,
)
from create_rn_module.pipeline import (
    GenerationPipeline,
    GenerationResult,
    create_library,
    generate,
)

__all__ = [
    "GenerationConfig",
    "GenerationDefaults",
    "GenerationPipeline",
    "GenerationResult",
    "Platform",
    "create_library",
    "generate",
    "normalize_options",
]
