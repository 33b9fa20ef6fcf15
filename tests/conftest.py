from pathlib import Path
import logging
import os

import pytest
from typer.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_gradle_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Keep the real Gradle user home and ORG_GRADLE_PROJECT_* variables out of tests.
    """
    gradle_home = tmp_path / "gradle-home"
    gradle_home.mkdir()
    monkeypatch.setenv("GRADLE_USER_HOME", str(gradle_home))
    monkeypatch.delenv("BOOTSCAFFOLD_LOG_LEVEL", raising=False)
    for key in list(os.environ):
        if key.startswith("ORG_GRADLE_PROJECT_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def quiet_logger() -> logging.Logger:
    log = logging.getLogger("bootscaffold.tests.quiet")
    log.addHandler(logging.NullHandler())
    log.propagate = False
    return log


@pytest.fixture
def java_project(tmp_path: Path) -> Path:
    """
    A Gradle project with src/main/java/com/example and a hand-written build.gradle.
    """
    project = tmp_path / "demo"
    (project / "src" / "main" / "java" / "com" / "example").mkdir(parents=True)
    (project / "build.gradle").write_text("plugins {\n    id 'java'\n}\n", encoding="utf-8")
    return project
