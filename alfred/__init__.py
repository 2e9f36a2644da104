"""alfred -- view-model scaffolding for Kotlin Multiplatform projects.

Quick usage::

    from alfred import FeatureGenerator, load_config

    config = load_config("alfred.yaml")
    FeatureGenerator(config).create_viewmodel("feature.login", "LoginViewModel")
"""

from alfred.config import AlfredConfig, AndroidConfig, CommonConfig, load_config
from alfred.paths import ProjectLayout
from alfred.scaffolder import FeatureGenerator, FoundationScaffolder, TemplateRenderer

__version__ = "0.1.0"

__all__ = [
    "AlfredConfig",
    "AndroidConfig",
    "CommonConfig",
    "FeatureGenerator",
    "FoundationScaffolder",
    "ProjectLayout",
    "TemplateRenderer",
    "load_config",
]
