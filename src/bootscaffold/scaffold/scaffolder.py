"""
Create the Spring Boot package layout under a project's base package and reset
its build file to the standard template.
"""

from __future__ import annotations

import errno
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Union

from ..config import ScaffoldRequest
from ..errors import IOFailure, MissingBasePackageDirectory, ScaffoldError
from ..util import ensure_directory, write_text_file
from .build_gradle import BUILD_GRADLE_TEMPLATE_REVISION, update_build_gradle
from .layout import is_source_file, iter_layout, main_java_dir, placeholder_content

logger = logging.getLogger(__name__)

LoggerLike = Union[logging.Logger, logging.LoggerAdapter]


@dataclass
class ScaffoldReport:
    """
    Stores what changed when scaffolding ran.

    Attributes:
        project_root: The project that was scaffolded.
        base_dir: The base package directory under src/main/java.
        directories_created: Newly created layout directories.
        placeholders_written: Newly created placeholder source files.
        existing: Layout entries left alone because they already existed.
        build_file: Path of the build file that was checked.
        build_file_written: True if build.gradle was overwritten.
        build_file_skipped: True if build.gradle was missing.
        template_revision: Revision of the build.gradle template in use.
        dry_run: True if nothing was actually written.
    """
    project_root: Path
    base_dir: Optional[Path] = None
    directories_created: List[Path] = field(default_factory=list)
    placeholders_written: List[Path] = field(default_factory=list)
    existing: List[Path] = field(default_factory=list)
    build_file: Optional[Path] = None
    build_file_written: bool = False
    build_file_skipped: bool = False
    template_revision: str = BUILD_GRADLE_TEMPLATE_REVISION
    dry_run: bool = False

    @property
    def created(self) -> List[Path]:
        return [*self.directories_created, *self.placeholders_written]

    def summary_rows(self) -> Iterable[tuple[str, str]]:
        yield ("Project", str(self.project_root))
        yield ("Base package dir", str(self.base_dir) if self.base_dir else "-")
        yield ("Directories created", str(len(self.directories_created)))
        yield ("Placeholders written", str(len(self.placeholders_written)))
        yield ("Already present", str(len(self.existing)))
        if self.build_file_skipped:
            build_state = "skipped (not found)"
        elif self.build_file_written:
            build_state = f"overwritten ({self.template_revision})"
        else:
            build_state = "not reached"
        yield ("build.gradle", build_state)
        if self.dry_run:
            yield ("Dry run", "yes")


@dataclass
class ScaffoldOutcome:
    """Result of a scaffold run: the report plus the error that stopped it, if any."""
    report: ScaffoldReport
    error: Optional[ScaffoldError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> ScaffoldReport:
        if self.error is not None:
            raise self.error
        return self.report


class ProjectScaffolder:
    """
    Ensure the fixed package layout exists and reset build.gradle.

    The logger is injected so callers (and tests) decide where progress goes.
    """

    def __init__(self, log: Optional[LoggerLike] = None, *, dry_run: bool = False) -> None:
        self.log = log or logger
        self.dry_run = dry_run

    def scaffold(self, request: ScaffoldRequest) -> ScaffoldOutcome:
        """
        Run every step for request.

        Failures never raise: the first error stops the run and is returned on the
        outcome. Work done before the failure stays on disk.
        """
        report = ScaffoldReport(project_root=request.project_root, dry_run=self.dry_run)
        self.log.info("Starting Spring Boot project generation...")
        try:
            self.generate_project_structure(request, report)
            update_build_gradle(request.project_root, report, log=self.log, dry_run=self.dry_run)
        except ScaffoldError as exc:
            self.log.error("Error generating project: %s", exc)
            return ScaffoldOutcome(report=report, error=exc)
        self.log.info("Project generated successfully!")
        return ScaffoldOutcome(report=report)

    def generate_project_structure(self, request: ScaffoldRequest, report: ScaffoldReport) -> None:
        """
        Create the layout entries under the base package directory.

        Raises:
            MissingBasePackageDirectory: If src/main/java/<base package> is absent.
            IOFailure: If a directory or placeholder cannot be created.
        """
        self.log.info("Generating project structure at: %s", request.project_root)
        base_dir = main_java_dir(request.project_root, request.base_package)
        if not base_dir.is_dir():
            self.log.error("Base package directory not found: %s", base_dir)
            raise MissingBasePackageDirectory(base_dir)
        report.base_dir = base_dir

        current_group = None
        for group, entry in iter_layout():
            if group is not current_group:
                self.log.info("Creating %s folders...", group.name)
                current_group = group
            self._ensure_entry(base_dir, entry, report)

    def _ensure_entry(self, base_dir: Path, entry: str, report: ScaffoldReport) -> None:
        target = base_dir / entry
        if target.exists():
            self.log.info("Already exists: %s", target)
            report.existing.append(target)
            return

        if self.dry_run:
            self._check_ancestors(base_dir, entry, target)

        if is_source_file(entry):
            self.log.debug("Creating file: %s", target)
            if not self.dry_run:
                try:
                    write_text_file(target, placeholder_content(entry))
                except OSError as exc:
                    raise IOFailure("create file", target, exc) from exc
            report.placeholders_written.append(target)
        else:
            self.log.debug("Creating directory: %s", target)
            if not self.dry_run:
                try:
                    ensure_directory(target)
                except OSError as exc:
                    raise IOFailure("create directory", target, exc) from exc
            report.directories_created.append(target)

    def _check_ancestors(self, base_dir: Path, entry: str, target: Path) -> None:
        """Raise the IOFailure a real run would hit when a file sits where a parent directory must go."""
        for parent in target.parents:
            if parent == base_dir:
                return
            if parent.exists() and not parent.is_dir():
                action = "create file" if is_source_file(entry) else "create directory"
                cause = NotADirectoryError(errno.ENOTDIR, "Not a directory", str(parent))
                raise IOFailure(action, target, cause)


def scaffold_project(
    project_root: Path | str,
    base_package: Optional[str],
    *,
    log: Optional[LoggerLike] = None,
    dry_run: bool = False,
) -> ScaffoldOutcome:
    """
    Validate the inputs and scaffold the project in one call.

    A missing or invalid base package is reported on the outcome before anything
    on disk is touched.
    """
    try:
        request = ScaffoldRequest.build(project_root, base_package)
    except ScaffoldError as exc:
        (log or logger).error("%s", exc)
        report = ScaffoldReport(project_root=Path(project_root).expanduser().resolve(), dry_run=dry_run)
        return ScaffoldOutcome(report=report, error=exc)
    return ProjectScaffolder(log, dry_run=dry_run).scaffold(request)
