"""
Error taxonomy for scaffold runs.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional


class ScaffoldErrorKind(str, Enum):
    MISSING_REQUIRED_INPUT = "missing_required_input"
    INVALID_BASE_PACKAGE = "invalid_base_package"
    MISSING_BASE_PACKAGE_DIRECTORY = "missing_base_package_directory"
    IO_FAILURE = "io_failure"


class ScaffoldError(RuntimeError):
    """Base class for every failure a scaffold run can report."""

    kind: ScaffoldErrorKind = ScaffoldErrorKind.IO_FAILURE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingRequiredInput(ScaffoldError):
    """Raised when a required property (basePackage) is absent or blank."""

    kind = ScaffoldErrorKind.MISSING_REQUIRED_INPUT

    def __init__(self, name: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"{name} property is required.")
        self.name = name


class InvalidBasePackage(MissingRequiredInput):
    """Raised when basePackage is present but is not a dotted Java package name."""

    kind = ScaffoldErrorKind.INVALID_BASE_PACKAGE

    def __init__(self, base_package: str, reason: str) -> None:
        super().__init__("basePackage", f"Invalid basePackage {base_package!r}: {reason}")
        self.base_package = base_package


class MissingBasePackageDirectory(ScaffoldError):
    """Raised when src/main/java/<basePackage> does not exist."""

    kind = ScaffoldErrorKind.MISSING_BASE_PACKAGE_DIRECTORY

    def __init__(self, path: Path) -> None:
        super().__init__(f"Base package directory not found: {path}")
        self.path = path


class IOFailure(ScaffoldError):
    """Wraps the OSError raised while creating or writing a path."""

    kind = ScaffoldErrorKind.IO_FAILURE

    def __init__(self, action: str, path: Path, cause: OSError) -> None:
        super().__init__(f"Failed to {action} {path}: {cause}")
        self.action = action
        self.path = path
        self.cause = cause
