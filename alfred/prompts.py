"""Interactive input and validation for feature names.

Validation lives here, separate from generation: the generators accept plain
strings and call :func:`validate_package` / :func:`validate_class_name`
themselves, so they can be driven from flags, tests, or the prompts below.
"""

from __future__ import annotations

import re
from typing import Callable

from rich.prompt import Prompt

from .errors import PromptAborted, ValidationError
from .utils import console

PACKAGE_PATTERN = re.compile(r"^\w+(?:\.\w+)*$")
CLASS_NAME_PATTERN = re.compile(r"^[A-Z]+[a-zA-Z0-9]*$")

INVALID_PACKAGE = "invalid package syntax"
INVALID_CLASS_NAME = "invalid class name syntax"


# ---------------------------------------------------------------------------
# Validators
# ---------------------------------------------------------------------------


def is_valid_package(value: str) -> bool:
    """``feature.login`` style: one or more dot-separated word segments."""
    return PACKAGE_PATTERN.fullmatch(value) is not None


def is_valid_class_name(value: str) -> bool:
    """PascalCase starting with an uppercase letter."""
    return CLASS_NAME_PATTERN.fullmatch(value) is not None


def validate_package(value: str) -> str:
    if not is_valid_package(value):
        raise ValidationError(INVALID_PACKAGE, value=value)
    return value


def normalize_package(value: str) -> str:
    """Validate a relative package, accepting ``/`` in place of ``.``.

    Only the slash is translated. Empty segments and other separators are
    left in place so that validation rejects them.
    """
    return validate_package(value.replace("/", "."))


def validate_class_name(value: str) -> str:
    if not is_valid_class_name(value):
        raise ValidationError(INVALID_CLASS_NAME, value=value)
    return value


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------


def prompt_validated(
    message: str, validator: Callable[[str], str], failure: str
) -> str:
    """Ask until *validator* accepts the answer.

    Rejected answers are reported and the question is repeated. End of
    input or Ctrl-C abort the run.

    Raises:
        PromptAborted: If the prompt could not be completed.
    """
    while True:
        try:
            answer = Prompt.ask(message, console=console)
        except (EOFError, KeyboardInterrupt):
            raise PromptAborted(failure)
        try:
            return validator(answer.strip())
        except ValidationError as exc:
            console.print(str(exc), markup=False, style="bold red")


def prompt_package(message: str) -> str:
    return prompt_validated(message, normalize_package, "package prompt failed")


def prompt_class_name(message: str) -> str:
    return prompt_validated(message, validate_class_name, "class name prompt failed")
