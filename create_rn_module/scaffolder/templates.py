"""Template rendering for module scaffolding.

Two layers live here:

* ``TemplateRenderer`` loads Jinja2 template bodies from the
  ``create_rn_module/scaffolder/templates/`` directory and renders them with
  a context dictionary.
* :func:`render_template` renders one ``TemplateUnit`` into a root
  directory: it asks the unit for its relative path, creates the parent
  directory and writes the unit's content there.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from create_rn_module.errors import TemplateDirectoryError
from create_rn_module.utils import package_path, param_case, pascal_case

if TYPE_CHECKING:
    from create_rn_module.capabilities import FileSystem
    from create_rn_module.scaffolder.registry import TemplateUnit


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 template bodies for generated module files.

    Bodies are ``.j2`` files under a configurable template directory and are
    rendered with the per-phase render arguments as context.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["pascal_case"] = pascal_case
        self.env.filters["param_case"] = param_case
        self.env.filters["package_path"] = package_path

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"android/build.gradle.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)


# ---------------------------------------------------------------------------
# Unit rendering
# ---------------------------------------------------------------------------


async def render_template(
    root: str | Path,
    template: TemplateUnit,
    args: Any,
    fs: FileSystem,
) -> Path | None:
    """Render one template unit below *root*.

    A unit whose ``name`` returns a falsy value does not apply to *args*;
    nothing is written and ``None`` is returned.  Otherwise the file at
    ``root / name`` is written (an existing file is replaced) and its path is
    returned.

    Raises:
        TemplateDirectoryError: If the file's parent directory cannot be
            created.
    """
    name = template.name(args)
    if not name:
        return None

    filename = Path(root) / name
    try:
        await fs.ensure_dir(filename.parent)
    except OSError as exc:
        raise TemplateDirectoryError(name) from exc

    await fs.write(filename, template.content(args))
    return filename
