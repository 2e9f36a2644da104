"""Directory layout resolution.

Maps an ``AlfredConfig`` onto the concrete source directories of a Kotlin
Multiplatform project::

    <cwd>/<module>/src/<source set>/kotlin/<base package path>   (common module)
    <cwd>/<module>/src/main/[kotlin|java]/<base package path>    (android module)

Nothing here is cached: every call recomputes the path from the
configuration and the working directory captured by ``ProjectLayout``.
"""

from __future__ import annotations

import re
from pathlib import Path

from .config import AlfredConfig, AndroidConfig, CommonConfig
from .constants import JAVA_DIR, KOTLIN_DIR, MAIN_DIR, SRC_DIR

_SEGMENT_SPLIT = re.compile(r"[./\\]+")


# ---------------------------------------------------------------------------
# Package helpers
# ---------------------------------------------------------------------------


def package_segments(value: str) -> list[str]:
    """Split a dotted or slashed package into its non-empty segments."""
    return [seg for seg in _SEGMENT_SPLIT.split(value.strip()) if seg]


def package_to_path(value: str) -> Path:
    """Convert ``com.example.app`` (or ``com/example/app``) to a relative path."""
    return Path(*package_segments(value))


def path_to_package(value: str) -> str:
    """Convert ``com/example/app`` (or ``com.example.app``) to ``com.example.app``."""
    return ".".join(package_segments(value))


def join_packages(*parts: str) -> str:
    """Join package fragments with ``.``, normalising each fragment first."""
    segments: list[str] = []
    for part in parts:
        segments.extend(package_segments(part))
    return ".".join(segments)


def base_package(section: CommonConfig | AndroidConfig) -> str:
    """Dotted base package of a module section."""
    return path_to_package(section.base_package_dir)


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


class ProjectLayout:
    """Resolves the absolute directory roots of a project.

    Args:
        config: Loaded configuration.
        cwd: Project root. Defaults to the process working directory, read
            once at construction.
    """

    def __init__(self, config: AlfredConfig, cwd: str | Path | None = None) -> None:
        self.config = config
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()

    # -- Common module -----------------------------------------------------

    def common_main_dir(self) -> Path:
        """``<cwd>/<common module>/src/<common source set>``."""
        common = self.config.common
        return self.cwd / common.module_name / SRC_DIR / common.common_source_set_name

    def common_package_dir(self) -> Path:
        """Base package directory of the common source set."""
        return self._source_set_package_dir(self.config.common.common_source_set_name)

    def common_android_package_dir(self) -> Path:
        """Base package directory of the common module's android source set."""
        return self._source_set_package_dir(self.config.common.android_source_set_name)

    def common_ios_package_dir(self) -> Path:
        """Base package directory of the common module's ios source set."""
        return self._source_set_package_dir(self.config.common.ios_source_set_name)

    def _source_set_package_dir(self, source_set: str) -> Path:
        common = self.config.common
        return (
            self.cwd
            / common.module_name
            / SRC_DIR
            / source_set
            / KOTLIN_DIR
            / package_to_path(common.base_package_dir)
        )

    # -- Android module ----------------------------------------------------

    def android_main_dir(self) -> Path:
        """``<cwd>/<android module>/src/main``."""
        return self.cwd / self.config.android.module_name / SRC_DIR / MAIN_DIR

    def android_dir(self) -> Path:
        """Base package directory of the Android module.

        Prefers a ``kotlin`` language directory, then ``java``. When neither
        exists the language segment is left out and the path is returned
        anyway.
        """
        main_dir = self.android_main_dir()
        language = _first_existing_dir(main_dir, (KOTLIN_DIR, JAVA_DIR))
        root = main_dir / language if language else main_dir
        return root / package_to_path(self.config.android.base_package_dir)

    # -- Packages ----------------------------------------------------------

    @property
    def common_base_package(self) -> str:
        return base_package(self.config.common)

    @property
    def android_base_package(self) -> str:
        return base_package(self.config.android)


def _first_existing_dir(base: Path, names: tuple[str, ...]) -> str | None:
    for name in names:
        try:
            if (base / name).is_dir():
                return name
        except OSError:
            continue
    return None
