"""alfred configuration.

Typed, immutable configuration loaded from ``alfred.yaml``. The models use
Pydantic v2 so a malformed file is rejected at load time, before any
directory is scanned or written. A single ``AlfredConfig`` instance is built
by the CLI and passed explicitly to every component that needs it.

Example ``alfred.yaml``::

    use_koin: true
    common:
      module: common
      base_package_dir: com/example/app
    android:
      module: androidApp
      base_package_dir: com/example/app/android
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from .constants import (
    CONFIG_ENV_VAR,
    CONFIG_FILE_NAME,
    DEFAULT_ANDROID_MODULE,
    DEFAULT_ANDROID_SOURCE_SET,
    DEFAULT_COMMON_MODULE,
    DEFAULT_COMMON_SOURCE_SET,
    DEFAULT_IOS_SOURCE_SET,
)
from .errors import ConfigError


class CommonConfig(BaseModel):
    """Settings for the shared (multiplatform) module."""

    model_config = ConfigDict(frozen=True)

    module: Optional[str] = Field(default=None, description="Module directory name")
    base_package_dir: str = Field(..., description="Base package, slash or dot separated")
    common_source_set: Optional[str] = Field(default=None)
    android_source_set: Optional[str] = Field(default=None)
    ios_source_set: Optional[str] = Field(default=None)

    @property
    def module_name(self) -> str:
        return self.module or DEFAULT_COMMON_MODULE

    @property
    def common_source_set_name(self) -> str:
        return self.common_source_set or DEFAULT_COMMON_SOURCE_SET

    @property
    def android_source_set_name(self) -> str:
        return self.android_source_set or DEFAULT_ANDROID_SOURCE_SET

    @property
    def ios_source_set_name(self) -> str:
        return self.ios_source_set or DEFAULT_IOS_SOURCE_SET


class AndroidConfig(BaseModel):
    """Settings for the Android application module."""

    model_config = ConfigDict(frozen=True)

    module: Optional[str] = Field(default=None, description="Module directory name")
    base_package_dir: str = Field(..., description="Base package, slash or dot separated")

    @property
    def module_name(self) -> str:
        return self.module or DEFAULT_ANDROID_MODULE


class AlfredConfig(BaseModel):
    """Top-level alfred configuration."""

    model_config = ConfigDict(frozen=True)

    use_koin: Optional[bool] = Field(
        default=None, description="Generate view-models as Koin components"
    )
    common: CommonConfig
    android: AndroidConfig

    @property
    def koin_enabled(self) -> bool:
        return bool(self.use_koin)


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def resolve_config_path(
    config_path: str | Path | None = None, cwd: Path | None = None
) -> Path:
    """Return the absolute path of the configuration file to load.

    Precedence: explicit *config_path*, then the ``ALFRED_CONFIG``
    environment variable, then ``alfred.yaml``. Relative paths are resolved
    against *cwd* (the current working directory by default).
    """
    raw = config_path or os.environ.get(CONFIG_ENV_VAR) or CONFIG_FILE_NAME
    path = Path(raw)
    if path.is_absolute():
        return path
    base = cwd if cwd is not None else Path.cwd()
    return base / path


def load_config(
    config_path: str | Path | None = None, cwd: Path | None = None
) -> AlfredConfig:
    """Load and validate the YAML configuration.

    Raises:
        ConfigError: If the file does not exist or cannot be read, is not
            valid YAML, or does not match the expected schema.
    """
    full_path = resolve_config_path(config_path, cwd)
    display = str(config_path or os.environ.get(CONFIG_ENV_VAR) or CONFIG_FILE_NAME)

    try:
        raw = full_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ConfigError(f"could not find file {full_path}", path=str(full_path)) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"could not read file {full_path}", path=str(full_path)) from exc

    try:
        data: Any = yaml.safe_load(raw)
        if not isinstance(data, dict):
            raise ConfigError(f"could not parse file {display}", path=str(full_path))
        return AlfredConfig.model_validate(data)
    except (yaml.YAMLError, PydanticValidationError) as exc:
        raise ConfigError(f"could not parse file {display}", path=str(full_path)) from exc
