"""Discovery of previously generated artifacts.

The scaffolder keeps no manifest of what it generated. Instead, every run
walks the relevant source directories, looks for the well-known artifact
files by name, and reads their ``package`` declaration when it needs to
reference them from new code.

The directory walk is best-effort: entries that fail while being listed are
skipped, so a scan may be incomplete. The worst outcome is that an artifact
looks absent and gets generated again.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .constants import KOTLIN_EXTENSION

_PACKAGE_LINE = re.compile(r"^package\s+(.*)$")


class ArtifactKind(str, Enum):
    """Well-known generated classes, keyed by their class name."""

    VIEW_STATE_VIEW_MODEL = "ViewStateViewModel"
    UI_STATE = "UiState"
    ATOMIC_JOB = "AtomicJob"
    PLATFORM_VIEW_MODEL = "PlatformViewModel"

    @property
    def file_name(self) -> str:
        return kt_file(self.value)


@dataclass(frozen=True)
class ScanEntry:
    """One filesystem entry found by :func:`scan_dir`."""

    path: Path
    is_dir: bool

    @property
    def name(self) -> str:
        return self.path.name


def kt_file(name: str) -> str:
    """``Foo`` -> ``Foo.kt``."""
    return f"{name}{KOTLIN_EXTENSION}"


def scan_dir(root: str | Path) -> list[ScanEntry]:
    """Recursively list every entry under *root*, root included.

    A missing root yields an empty list. Directories that cannot be listed
    are skipped without raising. Sibling entries are visited in sorted
    order so repeated scans of an unchanged tree agree with each other.
    """
    root_path = Path(root)
    if not root_path.is_dir():
        return []

    entries: list[ScanEntry] = [ScanEntry(root_path, True)]
    for dirpath, dirnames, filenames in os.walk(root_path):
        dirnames.sort()
        current = Path(dirpath)
        for name in dirnames:
            entries.append(ScanEntry(current / name, True))
        for name in sorted(filenames):
            entries.append(ScanEntry(current / name, False))
    return entries


def locate(entries: list[ScanEntry], kind: ArtifactKind) -> Path | None:
    """Return the first scanned file named ``<kind>.kt``, or ``None``.

    The match is exact and case-sensitive. When several files share the
    name, whichever the scan listed first wins.
    """
    return find_kt_file(entries, kind.value)


def find_kt_file(entries: list[ScanEntry], name: str) -> Path | None:
    target = kt_file(name)
    for entry in entries:
        if not entry.is_dir and entry.name == target:
            return entry.path
    return None


def extract_package(path: str | Path) -> str | None:
    """Return the package declared in a Kotlin source file.

    Lines are read in order and the trimmed remainder of the first one
    starting with ``package`` followed by whitespace is returned. ``None``
    means the file has no package declaration.

    Raises:
        OSError: If the file cannot be opened.
    """
    with open(path, "r", encoding="utf-8", errors="replace") as fh:
        for line in fh:
            match = _PACKAGE_LINE.match(line.rstrip("\r\n"))
            if match:
                return match.group(1).strip()
    return None


def find_package(entries: list[ScanEntry], kind: ArtifactKind) -> str | None:
    """Locate *kind* in *entries* and read its package, if both exist."""
    path = locate(entries, kind)
    if path is None:
        return None
    return extract_package(path)
