"""Fixed names and defaults shared across the scaffolder.

Artifact names must match the generated class names exactly, otherwise the
existence checks in :mod:`alfred.discovery` stop recognising files that were
created by an earlier run.
"""

from __future__ import annotations

CONFIG_FILE_NAME = "alfred.yaml"
CONFIG_ENV_VAR = "ALFRED_CONFIG"

KOTLIN_EXTENSION = ".kt"

# ---------------------------------------------------------------------------
# Module / source-set defaults
# ---------------------------------------------------------------------------

DEFAULT_COMMON_MODULE = "common"
DEFAULT_ANDROID_MODULE = "androidApp"
DEFAULT_COMMON_SOURCE_SET = "commonMain"
DEFAULT_ANDROID_SOURCE_SET = "androidMain"
DEFAULT_IOS_SOURCE_SET = "iosMain"

SRC_DIR = "src"
MAIN_DIR = "main"
KOTLIN_DIR = "kotlin"
JAVA_DIR = "java"

# ---------------------------------------------------------------------------
# Render context slots
# ---------------------------------------------------------------------------

NAME = "name"
PACKAGE = "package"
UISTATE_PACKAGE = "uistate_package"
VIEWSTATE_VIEWMODEL_PACKAGE = "viewstate_viewmodel_package"
ATOMICJOB_PACKAGE = "atomicjob_package"
INTERFACES = "interfaces"
IMPORTS = "imports"

KOIN_INTERFACES = ", KoinComponent"
KOIN_IMPORT = "org.koin.core.component.KoinComponent"
