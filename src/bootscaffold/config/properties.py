"""
Project property lookup, resolved the way a Gradle build resolves ``findProperty``.

Sources, highest precedence first:

1. ``-P key=value`` command-line options;
2. ``ORG_GRADLE_PROJECT_<key>`` environment variables (a project ``.env`` file
   is read with python-dotenv and takes precedence over the process environment);
3. ``gradle.properties`` in the Gradle user home (``$GRADLE_USER_HOME`` or ``~/.gradle``);
4. ``gradle.properties`` in the project root.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from dotenv import dotenv_values

logger = logging.getLogger(__name__)

PROPERTIES_FILENAME = "gradle.properties"
ENV_PREFIX = "ORG_GRADLE_PROJECT_"
DOTENV_FILENAME = ".env"

SOURCE_COMMAND_LINE = "command line"
SOURCE_ENVIRONMENT = "environment"
SOURCE_USER_HOME = "user gradle.properties"
SOURCE_PROJECT = "project gradle.properties"

_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


class PropertiesError(RuntimeError):
    """Raised when a property source cannot be read or parsed."""


@dataclass
class ProjectProperties:
    """
    Merged view over every property source for one project.

    Attributes:
        project_root: The project the properties belong to.
        values: Resolved property values.
        sources: Which source supplied each resolved key.
    """
    project_root: Path
    values: Dict[str, str] = field(default_factory=dict)
    sources: Dict[str, str] = field(default_factory=dict)

    def find_property(self, name: str) -> Optional[str]:
        return self.values.get(name)

    def source_of(self, name: str) -> Optional[str]:
        return self.sources.get(name)


def _logical_lines(text: str) -> Iterable[str]:
    """Join backslash-continued lines; drop blanks and comments."""
    pending = ""
    for raw in text.splitlines():
        line = raw.lstrip() if pending else raw.strip()
        if not pending and (not line or line[0] in "#!"):
            continue
        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2 == 1:
            pending += line[:-1]
            continue
        yield pending + line
        pending = ""
    if pending:
        yield pending


def _unescape(value: str) -> str:
    out: List[str] = []
    index = 0
    while index < len(value):
        char = value[index]
        if char != "\\" or index + 1 >= len(value):
            out.append(char)
            index += 1
            continue
        nxt = value[index + 1]
        if nxt == "u" and index + 6 <= len(value):
            try:
                out.append(chr(int(value[index + 2:index + 6], 16)))
                index += 6
                continue
            except ValueError:
                pass
        out.append(_ESCAPES.get(nxt, nxt))
        index += 2
    return "".join(out)


def _split_line(line: str) -> Tuple[str, str]:
    index = 0
    while index < len(line):
        char = line[index]
        if char == "\\":
            index += 2
            continue
        if char in "=:" or char.isspace():
            break
        index += 1
    key = line[:index]
    rest = line[index:].lstrip()
    if rest[:1] in ("=", ":"):
        rest = rest[1:].lstrip()
    return _unescape(key), _unescape(rest.rstrip())


def parse_properties(text: str) -> Dict[str, str]:
    """
    Parse Java ``.properties`` text.

    Supports ``key=value``, ``key:value`` and ``key value`` pairs, ``#``/``!`` comments,
    backslash line continuation and the usual escapes. Later keys win.
    """
    values: Dict[str, str] = {}
    for line in _logical_lines(text):
        key, value = _split_line(line)
        if key:
            values[key] = value
    return values


def load_properties_file(path: Path) -> Dict[str, str]:
    """
    Load a properties file, returning an empty mapping when it does not exist.

    Raises:
        PropertiesError: If the file exists but cannot be read.
    """
    if not path.exists():
        return {}
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise PropertiesError(f"Unable to read {path}: {exc}") from exc
    logger.debug("Loaded properties from %s", path)
    return parse_properties(text)


def parse_property_options(options: Optional[Iterable[str]]) -> Dict[str, str]:
    """
    Turn ``-P`` style ``key=value`` strings into a mapping.

    A bare ``key`` maps to an empty string, as Gradle does.

    Raises:
        PropertiesError: If an option has no key.
    """
    values: Dict[str, str] = {}
    for option in options or ():
        key, _, value = option.partition("=")
        key = key.strip()
        if not key:
            raise PropertiesError(f"Invalid property {option!r}; expected key=value")
        values[key] = value.strip()
    return values


def gradle_user_home(environ: Optional[Mapping[str, str]] = None) -> Path:
    env = os.environ if environ is None else environ
    configured = env.get("GRADLE_USER_HOME")
    if configured:
        return Path(configured).expanduser()
    return Path.home() / ".gradle"


def _environment_properties(environ: Mapping[str, str]) -> Dict[str, str]:
    return {
        key[len(ENV_PREFIX):]: value
        for key, value in environ.items()
        if key.startswith(ENV_PREFIX) and len(key) > len(ENV_PREFIX)
    }


def _project_environment(project_root: Path, environ: Optional[Mapping[str, str]], use_dotenv: bool) -> Dict[str, str]:
    merged: Dict[str, str] = dict(os.environ if environ is None else environ)
    dotenv_path = project_root / DOTENV_FILENAME
    if use_dotenv and dotenv_path.is_file():
        logger.debug("Reading %s", dotenv_path)
        merged.update({key: value for key, value in dotenv_values(dotenv_path).items() if value is not None})
    return merged


def resolve_project_properties(
    project_root: Path | str,
    overrides: Optional[Mapping[str, str]] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
    use_dotenv: bool = True,
) -> ProjectProperties:
    """
    Merge every property source for a project.

    Args:
        project_root: Project directory holding gradle.properties (and optionally .env).
        overrides: Command-line properties; these always win.
        environ: Environment to read instead of ``os.environ``.
        use_dotenv: Whether to read ``<project_root>/.env``.

    Returns:
        The merged ProjectProperties.
    """
    root = Path(project_root).expanduser().resolve()
    env = _project_environment(root, environ, use_dotenv)

    layers = [
        (SOURCE_PROJECT, load_properties_file(root / PROPERTIES_FILENAME)),
        (SOURCE_USER_HOME, load_properties_file(gradle_user_home(env) / PROPERTIES_FILENAME)),
        (SOURCE_ENVIRONMENT, _environment_properties(env)),
        (SOURCE_COMMAND_LINE, dict(overrides or {})),
    ]

    properties = ProjectProperties(project_root=root)
    for source, values in layers:
        for key, value in values.items():
            properties.values[key] = value
            properties.sources[key] = source
    return properties
