from pathlib import Path
import os
import tempfile

from bootscaffold.util import ensure_directory, project_lock, write_text_file
from bootscaffold.util.filesystem import project_lock_path


def test_write_text_file_creates_parents_and_keeps_bytes(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "build.gradle"

    write_text_file(target, "line one\r\nline two\n")

    assert target.read_bytes() == b"line one\r\nline two\n"
    assert [p.name for p in target.parent.iterdir()] == ["build.gradle"]


def test_write_text_file_preserves_permissions(tmp_path: Path) -> None:
    target = tmp_path / "build.gradle"
    target.write_text("old", encoding="utf-8")
    os.chmod(target, 0o640)

    write_text_file(target, "new")

    assert target.read_text(encoding="utf-8") == "new"
    assert target.stat().st_mode & 0o777 == 0o640


def test_ensure_directory_is_idempotent(tmp_path: Path) -> None:
    first = ensure_directory(tmp_path / "x" / "y")
    second = ensure_directory(tmp_path / "x" / "y")
    assert first == second
    assert first.is_dir()


def test_project_lock_lives_outside_the_project(tmp_path: Path) -> None:
    project = tmp_path / "demo"
    project.mkdir()

    with project_lock(project):
        pass

    lock_path = project_lock_path(project)
    assert lock_path.parent == Path(tempfile.gettempdir())
    assert list(project.iterdir()) == []
    assert project_lock_path(project) != project_lock_path(tmp_path)


def test_project_lock_file_is_reused_across_runs(tmp_path: Path) -> None:
    project = tmp_path / "demo"
    project.mkdir()
    lock_path = project_lock_path(project)

    with project_lock(project):
        assert lock_path.exists()
    with project_lock(project, timeout=0):
        pass

    assert lock_path.exists()
    assert lock_path.stat().st_size == 0
    assert list(project.iterdir()) == []
