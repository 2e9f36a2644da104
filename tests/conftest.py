"""Shared pytest fixtures for the alfred test suite.

Provides reusable fixtures for:
- A temporary project root used as the working directory
- Configuration objects and on-disk ``alfred.yaml`` files
- Layouts and generators bound to the temporary project
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from alfred.config import AlfredConfig, AndroidConfig, CommonConfig
from alfred.paths import ProjectLayout
from alfred.scaffolder import FeatureGenerator, FoundationScaffolder
from alfred.utils import set_verbose


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty project root, also made the current working directory."""
    root = tmp_path / "project"
    root.mkdir()
    monkeypatch.chdir(root)
    monkeypatch.delenv("ALFRED_CONFIG", raising=False)
    yield root


@pytest.fixture(autouse=True)
def _quiet_output():
    set_verbose(False)
    yield
    set_verbose(False)


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

SAMPLE_CONFIG_YAML = textwrap.dedent(
    """\
    use_koin: false
    common:
      module: common
      base_package_dir: com/example/app
    android:
      module: androidApp
      base_package_dir: com/example/app
    """
)


@pytest.fixture
def config() -> AlfredConfig:
    """Configuration matching ``SAMPLE_CONFIG_YAML``."""
    return AlfredConfig(
        use_koin=False,
        common=CommonConfig(module="common", base_package_dir="com/example/app"),
        android=AndroidConfig(module="androidApp", base_package_dir="com/example/app"),
    )


@pytest.fixture
def koin_config() -> AlfredConfig:
    return AlfredConfig(
        use_koin=True,
        common=CommonConfig(base_package_dir="com/example/app"),
        android=AndroidConfig(base_package_dir="com/example/app"),
    )


@pytest.fixture
def config_file(project_dir: Path) -> Path:
    """``alfred.yaml`` written to the project root."""
    path = project_dir / "alfred.yaml"
    path.write_text(SAMPLE_CONFIG_YAML, encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Layout & generators
# ---------------------------------------------------------------------------


@pytest.fixture
def layout(config: AlfredConfig, project_dir: Path) -> ProjectLayout:
    return ProjectLayout(config, project_dir)


@pytest.fixture
def foundation(config: AlfredConfig, layout: ProjectLayout) -> FoundationScaffolder:
    return FoundationScaffolder(config, layout)


@pytest.fixture
def generator(config: AlfredConfig, layout: ProjectLayout) -> FeatureGenerator:
    return FeatureGenerator(config, layout)
