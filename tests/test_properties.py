from pathlib import Path
import textwrap

import pytest

from bootscaffold.config import (
    PropertiesError,
    parse_properties,
    parse_property_options,
    resolve_project_properties,
)
from bootscaffold.config.properties import (
    SOURCE_COMMAND_LINE,
    SOURCE_ENVIRONMENT,
    SOURCE_PROJECT,
    SOURCE_USER_HOME,
    gradle_user_home,
)


def test_parse_properties_formats() -> None:
    text = textwrap.dedent(
        r"""
        # comment
        ! also a comment
        basePackage=com.example
        org.gradle.jvmargs : -Xmx2g
        spaced value here
        multi = first, \
                second
        path=C\:\\work\\demo
        empty=
        """
    )

    values = parse_properties(text)

    assert values == {
        "basePackage": "com.example",
        "org.gradle.jvmargs": "-Xmx2g",
        "spaced": "value here",
        "multi": "first, second",
        "path": "C:\\work\\demo",
        "empty": "",
    }


def test_parse_property_options() -> None:
    assert parse_property_options(["basePackage=com.example", "flag", "k = v "]) == {
        "basePackage": "com.example",
        "flag": "",
        "k": "v",
    }
    assert parse_property_options(None) == {}
    with pytest.raises(PropertiesError):
        parse_property_options(["=value"])


def test_gradle_user_home_default() -> None:
    assert gradle_user_home({"GRADLE_USER_HOME": "/opt/gradle"}) == Path("/opt/gradle")
    assert gradle_user_home({}) == Path.home() / ".gradle"


def test_precedence_across_sources(tmp_path: Path) -> None:
    project = tmp_path / "demo"
    project.mkdir()
    (project / "gradle.properties").write_text(
        "basePackage=from.project\nonlyProject=p\nshared=project\n", encoding="utf-8"
    )
    home = tmp_path / "home"
    home.mkdir()
    (home / "gradle.properties").write_text("shared=home\nonlyHome=h\nenvWins=home\n", encoding="utf-8")
    environ = {
        "GRADLE_USER_HOME": str(home),
        "ORG_GRADLE_PROJECT_envWins": "env",
        "ORG_GRADLE_PROJECT_basePackage": "from.env",
    }

    props = resolve_project_properties(project, {"basePackage": "from.cli"}, environ=environ)

    assert props.find_property("basePackage") == "from.cli"
    assert props.source_of("basePackage") == SOURCE_COMMAND_LINE
    assert props.find_property("envWins") == "env"
    assert props.source_of("envWins") == SOURCE_ENVIRONMENT
    assert props.find_property("shared") == "home"
    assert props.source_of("shared") == SOURCE_USER_HOME
    assert props.find_property("onlyProject") == "p"
    assert props.source_of("onlyProject") == SOURCE_PROJECT
    assert props.find_property("missing") is None


def test_project_dotenv_overrides_environment(tmp_path: Path) -> None:
    project = tmp_path / "demo"
    project.mkdir()
    (project / ".env").write_text("ORG_GRADLE_PROJECT_basePackage=from.dotenv\n", encoding="utf-8")
    environ = {
        "GRADLE_USER_HOME": str(tmp_path / "nowhere"),
        "ORG_GRADLE_PROJECT_basePackage": "from.env",
    }

    props = resolve_project_properties(project, environ=environ)
    assert props.find_property("basePackage") == "from.dotenv"

    props = resolve_project_properties(project, environ=environ, use_dotenv=False)
    assert props.find_property("basePackage") == "from.env"


def test_unreadable_properties_file(tmp_path: Path) -> None:
    project = tmp_path / "demo"
    project.mkdir()
    (project / "gradle.properties").write_bytes(b"basePackage=\xff\xfe\n")

    with pytest.raises(PropertiesError):
        resolve_project_properties(project, environ={"GRADLE_USER_HOME": str(tmp_path / "nowhere")})
