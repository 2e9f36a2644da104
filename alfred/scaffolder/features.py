"""Feature boilerplate generation.

Generates the two per-feature classes:

- a common view-model under the common source set, extending the generated
  ``ViewStateViewModel`` base and using ``AtomicJob``;
- an Android composable bound to that view-model.

Both first run the ``FoundationScaffolder`` so the classes they reference
exist, then read the packages of those classes back from disk. A
foundational file without a ``package`` line is tolerated: the reference is
rendered empty instead of failing.

Files created by the foundation step stay in place if the final write
fails; re-running is safe for them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..config import AlfredConfig
from ..constants import (
    ATOMICJOB_PACKAGE,
    NAME,
    PACKAGE,
    UISTATE_PACKAGE,
    VIEWSTATE_VIEWMODEL_PACKAGE,
)
from ..discovery import ArtifactKind, ScanEntry, find_package, scan_dir
from ..paths import ProjectLayout, join_packages, package_to_path
from ..prompts import normalize_package, validate_class_name
from ..utils import print_info, print_warning
from . import templates
from .foundation import FoundationScaffolder
from .templates import TemplateRenderer


class FeatureGenerator:
    """Generates feature view-models and composables.

    Inputs are plain strings. They are validated here, before any directory
    is scanned or written, so callers may pass either prompted answers or
    command-line values.
    """

    def __init__(
        self,
        config: AlfredConfig,
        layout: ProjectLayout | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.layout = layout or ProjectLayout(config)
        self.renderer = renderer or TemplateRenderer()
        self.foundation = FoundationScaffolder(config, self.layout, self.renderer)

    # -- Public API --------------------------------------------------------

    def create_viewmodel(self, package: str, class_name: str) -> Path:
        """Generate ``<common root>/<package>/<class_name>.kt``.

        Args:
            package: Package relative to the common base package, dot or
                slash separated (``feature.login``).
            class_name: PascalCase class name.

        Returns:
            Path of the generated file.

        Raises:
            ValidationError: If *package* or *class_name* is malformed.
            FileExistsError: If the target file already exists.
        """
        relative, class_name = _validated(package, class_name)

        self.foundation.ensure()

        common_entries = scan_dir(self.layout.common_package_dir())
        uistate_package = self._package_of(common_entries, ArtifactKind.UI_STATE)
        atomicjob_package = self._package_of(common_entries, ArtifactKind.ATOMIC_JOB)
        viewmodel_package = self._package_of(common_entries, ArtifactKind.VIEW_STATE_VIEW_MODEL)

        context: dict[str, Any] = {
            NAME: class_name,
            PACKAGE: join_packages(self.layout.common_base_package, relative),
            UISTATE_PACKAGE: uistate_package,
            ATOMICJOB_PACKAGE: atomicjob_package,
            VIEWSTATE_VIEWMODEL_PACKAGE: viewmodel_package,
        }
        target_dir = self.layout.common_package_dir() / package_to_path(relative)
        return self.renderer.render_to_file(
            templates.VIEWSTATE_VIEWMODEL, target_dir, class_name, context, overwrite=False
        )

    def create_composable(self, package: str, class_name: str) -> Path:
        """Generate ``<android root>/<package>/<class_name>.kt``.

        The composable imports ``UiState`` and ``ViewStateViewModel`` by
        their fully qualified names, read from the common source set.

        Raises:
            ValidationError: If *package* or *class_name* is malformed.
            FileExistsError: If the target file already exists.
        """
        relative, class_name = _validated(package, class_name)

        self.foundation.ensure()

        common_entries = scan_dir(self.layout.common_package_dir())
        uistate_ref = _qualified(
            self._package_of(common_entries, ArtifactKind.UI_STATE),
            ArtifactKind.UI_STATE,
        )
        viewmodel_ref = _qualified(
            self._package_of(common_entries, ArtifactKind.VIEW_STATE_VIEW_MODEL),
            ArtifactKind.VIEW_STATE_VIEW_MODEL,
        )

        context: dict[str, Any] = {
            NAME: class_name,
            PACKAGE: join_packages(self.layout.android_base_package, relative),
            UISTATE_PACKAGE: uistate_ref,
            VIEWSTATE_VIEWMODEL_PACKAGE: viewmodel_ref,
        }
        target_dir = self.layout.android_dir() / package_to_path(relative)
        return self.renderer.render_to_file(
            templates.COMPOSE, target_dir, class_name, context, overwrite=False
        )

    # -- Helpers -----------------------------------------------------------

    def _package_of(self, entries: list[ScanEntry], kind: ArtifactKind) -> str:
        package = find_package(entries, kind)
        if package is None:
            print_warning(f"no package found for {kind.value}, leaving reference empty")
            return ""
        print_info(f"{kind.value} is in package {package}")
        return package


def _validated(package: str, class_name: str) -> tuple[str, str]:
    relative = normalize_package(package.strip())
    return relative, validate_class_name(class_name.strip())


def _qualified(package: str, kind: ArtifactKind) -> str:
    """``com.example`` + ``UiState`` -> ``com.example.UiState``; empty stays empty."""
    if not package:
        return ""
    return f"{package}.{kind.value}"
