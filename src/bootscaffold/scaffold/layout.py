"""
The fixed package layout created under the base package directory.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Iterator, Tuple

MAIN_JAVA_ROOT = Path("src/main/java")
SOURCE_FILE_EXTENSIONS: Tuple[str, ...] = (".java", ".kt")
PLACEHOLDER_PREFIX = "// Placeholder for "

COMMON_PATHS: Tuple[str, ...] = (
    "common/constants",
    "common/exceptionHandlers",
    "common/model/dtos",
    "common/model/enums",
    "common/utility",
    "common/GlobalExceptionHandler.java",
)

FEATURE_PATHS: Tuple[str, ...] = (
    "feature1/boundaries/controller",
    "feature1/boundaries/validator",
    "feature1/boundaries/model/dtos",
    "feature1/boundaries/model/enums",
    "feature1/service/impl",
    "feature1/repository",
    "feature1/IntegrationServices",
)


@dataclass(frozen=True)
class PathGroup:
    """A named, ordered group of relative layout entries."""
    name: str
    entries: Tuple[str, ...]


LAYOUT_GROUPS: Tuple[PathGroup, ...] = (
    PathGroup("common", COMMON_PATHS),
    PathGroup("feature1", FEATURE_PATHS),
)


def is_source_file(entry: str) -> bool:
    """Entries with a recognised source extension are files; everything else is a directory."""
    return entry.endswith(SOURCE_FILE_EXTENSIONS)


def placeholder_content(entry: str) -> str:
    return f"{PLACEHOLDER_PREFIX}{entry}"


def iter_layout() -> Iterator[Tuple[PathGroup, str]]:
    """Yield (group, entry) pairs in creation order."""
    for group in LAYOUT_GROUPS:
        for entry in group.entries:
            yield group, entry


def base_package_path(base_package: str) -> Path:
    """
    Translate a dotted package name into a relative path.

    Dots are the only separators translated: ``com.example.app`` -> ``com/example/app``.
    """
    return Path(*PurePosixPath(base_package.replace(".", "/")).parts)


def main_java_dir(project_root: Path, base_package: str) -> Path:
    """Return ``<project_root>/src/main/java/<base package path>``."""
    return project_root / MAIN_JAVA_ROOT / base_package_path(base_package)
