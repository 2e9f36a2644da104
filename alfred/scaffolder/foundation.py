"""Foundational artifact scaffolding.

Every generated feature builds on five hand-off classes: the common
``ViewStateViewModel`` base, the ``UiState`` marker, the ``AtomicJob``
helper, and one ``PlatformViewModel`` per platform source set. The
``FoundationScaffolder`` makes sure each of them exists, creating only the
ones a fresh scan cannot find. Running it again on an unchanged tree writes
nothing.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable

from ..config import AlfredConfig
from ..constants import IMPORTS, INTERFACES, KOIN_IMPORT, KOIN_INTERFACES, PACKAGE
from ..discovery import ArtifactKind, locate, scan_dir
from ..paths import ProjectLayout
from ..utils import print_info
from . import templates
from .templates import TemplateRenderer


@dataclass(frozen=True)
class FoundationArtifact:
    """One artifact the scaffolder guarantees, and where it lives."""

    label: str
    kind: ArtifactKind
    template: str
    root: Callable[[ProjectLayout], Path]


FOUNDATION_ARTIFACTS: tuple[FoundationArtifact, ...] = (
    FoundationArtifact(
        "common view-model base",
        ArtifactKind.VIEW_STATE_VIEW_MODEL,
        templates.ABSTRACT_VIEWSTATE_VIEWMODEL,
        ProjectLayout.common_package_dir,
    ),
    FoundationArtifact(
        "common ui-state marker",
        ArtifactKind.UI_STATE,
        templates.UISTATE,
        ProjectLayout.common_package_dir,
    ),
    FoundationArtifact(
        "common atomic job",
        ArtifactKind.ATOMIC_JOB,
        templates.ATOMICJOB,
        ProjectLayout.common_package_dir,
    ),
    FoundationArtifact(
        "android platform view-model",
        ArtifactKind.PLATFORM_VIEW_MODEL,
        templates.ANDROID_PLATFORM_VIEWMODEL,
        ProjectLayout.common_android_package_dir,
    ),
    FoundationArtifact(
        "ios platform view-model",
        ArtifactKind.PLATFORM_VIEW_MODEL,
        templates.IOS_PLATFORM_VIEWMODEL,
        ProjectLayout.common_ios_package_dir,
    ),
)


class FoundationScaffolder:
    """Creates whichever foundational artifacts are missing.

    Args:
        config: Loaded configuration.
        layout: Directory layout; built from *config* and the working
            directory when omitted.
        renderer: Template renderer; the packaged templates by default.
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

    def ensure(self) -> list[Path]:
        """Create every missing foundational artifact.

        Returns:
            Paths of the files written by this call, empty when all five
            already existed.
        """
        created: list[Path] = []
        for artifact in FOUNDATION_ARTIFACTS:
            path = self.ensure_artifact(artifact)
            if path is not None:
                created.append(path)
        return created

    def ensure_artifact(self, artifact: FoundationArtifact) -> Path | None:
        """Create a single artifact unless a scan of its root finds it.

        Returns the written path, or ``None`` when the artifact was present.
        """
        root = artifact.root(self.layout)
        existing = locate(scan_dir(root), artifact.kind)
        if existing is not None:
            print_info(f"found {artifact.label} at {existing}")
            return None

        return self.renderer.render_to_file(
            artifact.template,
            root,
            artifact.kind.value,
            self.build_context(artifact),
        )

    def build_context(self, artifact: FoundationArtifact) -> dict[str, Any]:
        """Render context for *artifact*, derived from configuration only."""
        context: dict[str, Any] = {PACKAGE: self.layout.common_base_package}
        if artifact.kind is ArtifactKind.VIEW_STATE_VIEW_MODEL:
            if self.config.koin_enabled:
                context[INTERFACES] = KOIN_INTERFACES
                context[IMPORTS] = [KOIN_IMPORT]
            else:
                context[INTERFACES] = ""
                context[IMPORTS] = []
        return context
