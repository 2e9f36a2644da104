"""alfred scaffolder -- renders and writes Kotlin sources.

``FoundationScaffolder`` guarantees the base classes every feature builds
on; ``FeatureGenerator`` renders the per-feature view-model and composable.

Quick usage::

    from alfred.scaffolder import FoundationScaffolder

    created = FoundationScaffolder(config).ensure()
"""

from alfred.scaffolder.features import FeatureGenerator
from alfred.scaffolder.foundation import FOUNDATION_ARTIFACTS, FoundationScaffolder
from alfred.scaffolder.templates import TemplateRenderer

__all__ = [
    "FOUNDATION_ARTIFACTS",
    "FeatureGenerator",
    "FoundationScaffolder",
    "TemplateRenderer",
]
