"""
Pydantic model for validating a scaffold request.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ValidationError, field_validator

from ..errors import InvalidBasePackage, MissingRequiredInput

BASE_PACKAGE_PROPERTY = "basePackage"

JAVA_KEYWORDS = frozenset(
    """
    abstract assert boolean break byte case catch char class const continue default do
    double else enum extends final finally float for goto if implements import instanceof
    int interface long native new package private protected public return short static
    strictfp super switch synchronized this throw throws transient try void volatile while
    true false null _
    """.split()
)


def _is_java_identifier(segment: str) -> bool:
    # Java identifiers are Unicode-aware like Python's, plus "$".
    return segment.replace("$", "_").isidentifier() and segment not in JAVA_KEYWORDS


class ScaffoldRequest(BaseModel):
    """
    Inputs for a single scaffold run.

    Attributes:
        project_root: Root directory of the Gradle project.
        base_package: Dotted Java package (e.g. "com.example.app"); its directory must
            already exist under src/main/java.
    """
    project_root: Path
    base_package: str

    model_config = {
        "frozen": True,
        "str_strip_whitespace": True,
    }

    @field_validator("base_package")
    @classmethod
    def _check_base_package(cls, value: str) -> str:
        if not value:
            raise ValueError("must not be empty")
        for segment in value.split("."):
            if not segment:
                raise ValueError("contains an empty segment")
            if not _is_java_identifier(segment):
                raise ValueError(f"segment {segment!r} is not a valid Java identifier")
        return value

    @classmethod
    def build(cls, project_root: Path | str, base_package: Optional[str]) -> "ScaffoldRequest":
        """
        Construct a request, mapping bad input onto the scaffold error taxonomy.

        Raises:
            MissingRequiredInput: If base_package is None or blank.
            InvalidBasePackage: If base_package is not a dotted Java package name.
        """
        if base_package is None or not base_package.strip():
            raise MissingRequiredInput(BASE_PACKAGE_PROPERTY, f"{BASE_PACKAGE_PROPERTY} property is required.")
        try:
            return cls(project_root=Path(project_root).expanduser().resolve(), base_package=base_package)
        except ValidationError as exc:
            reason = exc.errors()[0].get("msg", str(exc))
            raise InvalidBasePackage(base_package.strip(), reason) from exc
