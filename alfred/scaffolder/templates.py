"""Jinja2 template rendering for generated Kotlin sources.

Provides the TemplateRenderer class which loads ``*.kt.j2`` templates from
the ``alfred/scaffolder/templates/`` directory and renders them with a
render context (class name, package, referenced packages, interface list).
Undefined context slots raise instead of rendering as empty text, so a
template/context mismatch surfaces as a ``RenderError``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    select_autoescape,
)

from ..errors import RenderError
from ..utils import create_file


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

# Template names, relative to the template directory
ABSTRACT_VIEWSTATE_VIEWMODEL = "AbstractViewStateViewModel.kt.j2"
UISTATE = "UiState.kt.j2"
ATOMICJOB = "AtomicJob.kt.j2"
ANDROID_PLATFORM_VIEWMODEL = "AndroidPlatformViewModel.kt.j2"
IOS_PLATFORM_VIEWMODEL = "IosPlatformViewModel.kt.j2"
VIEWSTATE_VIEWMODEL = "ViewStateViewModel.kt.j2"
COMPOSE = "Compose.kt.j2"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for Kotlin scaffolding.

    Rendering is deterministic: the same template and context always
    produce the same text.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([], default_for_string=False),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Raises:
            RenderError: If the template is missing, malformed, or refers to
                a slot the context does not provide.
        """
        try:
            template = self.env.get_template(template_path)
            return template.render(**context)
        except TemplateError as exc:
            raise RenderError(exc.message or str(exc), template=template_path) from exc

    def render_to_file(
        self,
        template_path: str,
        root: str | Path,
        name: str,
        context: dict[str, Any],
        *,
        overwrite: bool = True,
    ) -> Path:
        """Render a template and write it to ``<root>/<name>.kt``.

        The template is rendered before anything touches the filesystem, so
        a rendering failure leaves no partial file behind.
        """
        content = self.render(template_path, context)
        return create_file(root, name, content, overwrite=overwrite)
