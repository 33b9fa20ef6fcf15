"""
Project scaffolding: package layout, placeholders and the build.gradle template.
"""

from .build_gradle import BUILD_GRADLE_FILENAME, BUILD_GRADLE_TEMPLATE, update_build_gradle
from .layout import COMMON_PATHS, FEATURE_PATHS, LAYOUT_GROUPS, is_source_file, main_java_dir
from .scaffolder import ProjectScaffolder, ScaffoldOutcome, ScaffoldReport, scaffold_project

__all__ = [
    "BUILD_GRADLE_FILENAME",
    "BUILD_GRADLE_TEMPLATE",
    "COMMON_PATHS",
    "FEATURE_PATHS",
    "LAYOUT_GROUPS",
    "ProjectScaffolder",
    "ScaffoldOutcome",
    "ScaffoldReport",
    "is_source_file",
    "main_java_dir",
    "scaffold_project",
    "update_build_gradle",
]
