"""alfred command-line interface.

Usage::

    alfred init
    alfred create viewmodel --package feature.login --name LoginViewModel
    alfred create composable
    alfred create feature
    alfred --config path/to/alfred.yaml init

Values not supplied as flags are asked for interactively. The process exits
with status 0 on success and 1 on any error, printing the error message to
standard output.
"""

from __future__ import annotations

import argparse
from typing import Callable

from .config import AlfredConfig, load_config
from .errors import AlfredError
from .paths import ProjectLayout
from .prompts import (
    normalize_package,
    prompt_class_name,
    prompt_package,
    validate_class_name,
)
from .scaffolder import FeatureGenerator, FoundationScaffolder
from .utils import print_error, print_success, set_verbose


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="alfred",
        description="Scaffold view-models and composables for a Kotlin Multiplatform project.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  alfred init\n"
            "  alfred create viewmodel --package feature.login --name LoginViewModel\n"
            "  alfred --config ../alfred.yaml create feature\n"
        ),
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="Path to the configuration file (default: ./alfred.yaml or $ALFRED_CONFIG)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Report artifacts that were found and left untouched.",
    )
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser(
        "init",
        help="Create any missing base classes and print the files that were created.",
    )

    create_parser = subparsers.add_parser("create", help="Generate feature classes.")
    create_sub = create_parser.add_subparsers(dest="target", required=True)

    viewmodel_parser = create_sub.add_parser("viewmodel", help="Create a common view-model.")
    _add_package_option(viewmodel_parser)
    viewmodel_parser.add_argument("--name", help="View-model class name")

    composable_parser = create_sub.add_parser("composable", help="Create an Android composable.")
    _add_package_option(composable_parser)
    composable_parser.add_argument("--name", help="Composable name")

    feature_parser = create_sub.add_parser(
        "feature", help="Create a common view-model and an Android composable."
    )
    _add_package_option(feature_parser)
    feature_parser.add_argument("--viewmodel-name", help="View-model class name")
    feature_parser.add_argument("--composable-name", help="Composable name")

    return parser


def _add_package_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--package", "-p",
        help="Package relative to the module's base package (e.g. feature.login)",
    )


# ---------------------------------------------------------------------------
# Answer collection
# ---------------------------------------------------------------------------


def _answer(
    value: str | None,
    validator: Callable[[str], str],
    prompt: Callable[[str], str],
    message: str,
) -> str:
    """Use *value* when given (after validation), otherwise ask for it."""
    if value is not None:
        return validator(value)
    return prompt(message)


def _viewmodel_answers(
    layout: ProjectLayout, package: str | None, name: str | None
) -> tuple[str, str]:
    package = _answer(
        package,
        normalize_package,
        prompt_package,
        f"ViewModel package (relative to {layout.common_package_dir()})",
    )
    name = _answer(name, validate_class_name, prompt_class_name, "ViewModel class name")
    return package, name


def _composable_answers(
    layout: ProjectLayout, package: str | None, name: str | None
) -> tuple[str, str]:
    package = _answer(
        package,
        normalize_package,
        prompt_package,
        f"Composable package (relative to {layout.android_dir()})",
    )
    name = _answer(name, validate_class_name, prompt_class_name, "Composable class name")
    return package, name


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def _run_init(config: AlfredConfig) -> None:
    FoundationScaffolder(config).ensure()
    print_success("init successful")


def _run_create(config: AlfredConfig, args: argparse.Namespace) -> None:
    generator = FeatureGenerator(config)
    layout = generator.layout

    if args.target == "viewmodel":
        generator.create_viewmodel(*_viewmodel_answers(layout, args.package, args.name))
    elif args.target == "composable":
        generator.create_composable(*_composable_answers(layout, args.package, args.name))
    elif args.target == "feature":
        viewmodel = _viewmodel_answers(layout, args.package, args.viewmodel_name)
        composable = _composable_answers(layout, args.package, args.composable_name)
        generator.create_viewmodel(*viewmodel)
        generator.create_composable(*composable)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``alfred`` and ``python -m alfred``."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    set_verbose(bool(args.verbose))

    if args.command is None:
        parser.print_help()
        return 0

    try:
        config = load_config(args.config)
        if args.command == "init":
            _run_init(config)
        elif args.command == "create":
            _run_create(config, args)
    except (AlfredError, OSError) as exc:
        print_error(str(exc))
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
