"""
Filesystem helpers shared by the scaffolding steps.
"""

from __future__ import annotations

import hashlib
import logging
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path

from filelock import FileLock

logger = logging.getLogger(__name__)

LOCK_PREFIX = "bootscaffold-"


def ensure_directory(path: Path | str) -> Path:
    """
    Ensure a directory exists, returning the resolved Path.
    """
    resolved = Path(path).expanduser().resolve()
    resolved.mkdir(parents=True, exist_ok=True)
    return resolved


def _ensure_parent(target: Path) -> None:
    """Ensure the parent directory for target exists."""
    if target.parent and not target.parent.exists():
        target.parent.mkdir(parents=True, exist_ok=True)


def project_lock_path(project_root: Path | str) -> Path:
    """
    Location of the run lock for a project.

    The lock lives in the system temp directory so nothing is left behind in the
    project tree. The lock file itself stays there after release (filelock does not
    unlink it on POSIX); it is empty and reused by later runs on the same project.
    """
    resolved = Path(project_root).expanduser().resolve()
    digest = hashlib.sha1(str(resolved).encode("utf-8")).hexdigest()[:16]
    return Path(tempfile.gettempdir()) / f"{LOCK_PREFIX}{digest}.lock"


@contextmanager
def project_lock(project_root: Path | str, timeout: float = -1):
    """
    Hold an inter-process lock for the duration of a scaffold run on project_root.
    """
    lock_path = project_lock_path(project_root)
    logger.debug("Acquiring project lock %s", lock_path)
    with FileLock(str(lock_path), timeout=timeout):
        yield


def _atomic_write_text(target: Path, content: str, encoding: str) -> None:
    """Write text atomically by staging a temp file and renaming."""
    _ensure_parent(target)
    # mkstemp creates 0600 files; keep the target's existing permissions instead.
    mode = target.stat().st_mode & 0o777 if target.exists() else 0o644
    fd, tmp_path = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    try:
        os.chmod(tmp_path, mode)
        with os.fdopen(fd, "w", encoding=encoding, newline="") as handle:
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_path, target)
    finally:
        try:
            os.unlink(tmp_path)
        except FileNotFoundError:
            pass
        except OSError:
            pass


def write_text_file(path: Path | str, content: str, encoding: str = "utf-8") -> Path:
    """
    Write text to a file, creating parent directories as needed.

    Content is written verbatim (no newline translation) so templates land on disk
    byte-for-byte.
    """
    target = Path(path).expanduser().resolve()
    _atomic_write_text(target, content, encoding=encoding)
    return target
