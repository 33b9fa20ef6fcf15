"""
Shared filesystem helpers.
"""

from .filesystem import ensure_directory, project_lock, write_text_file

__all__ = [
    "ensure_directory",
    "project_lock",
    "write_text_file",
]
