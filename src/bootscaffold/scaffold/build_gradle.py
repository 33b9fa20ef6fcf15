"""
The build.gradle template written over the project's build file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

from ..util import write_text_file
from ..errors import IOFailure

if TYPE_CHECKING:
    from .scaffolder import ScaffoldReport

logger = logging.getLogger(__name__)

BUILD_GRADLE_FILENAME = "build.gradle"
# Bump whenever the template text below changes.
BUILD_GRADLE_TEMPLATE_REVISION = "spring-boot-3.3.3"

# Verbatim, including the eight-space indent on every non-blank line.
BUILD_GRADLE_TEMPLATE = """\
        plugins {
            id 'java'
            id 'org.springframework.boot' version '3.3.3'
            id 'io.spring.dependency-management' version '1.1.6'
            id 'jacoco'
            id 'application'
        }

        application {
            mainClassName = 'com.vibranium.app.VibraniumApplication'
        }

        group = 'com.vibranium'
        version = '0.0.1-SNAPSHOT'

        java {
            toolchain {
                languageVersion = JavaLanguageVersion.of(17)
            }
        }

        repositories {
            mavenCentral()
        }

        dependencies {
            implementation 'org.springframework.boot:spring-boot-starter-web'
            testImplementation 'org.springframework.boot:spring-boot-starter-test'
            testRuntimeOnly 'org.junit.platform:junit-platform-launcher'
            implementation 'org.springframework.boot:spring-boot-starter-webflux'
            implementation 'org.springframework.boot:spring-boot-starter-validation'

            compileOnly 'org.projectlombok:lombok:1.18.28' // Check for latest version
            annotationProcessor 'org.projectlombok:lombok:1.18.28'
            implementation 'org.springframework.boot:spring-boot-starter-actuator'

            implementation 'org.slf4j:slf4j-api:2.0.9' // SLF4J API
            implementation 'org.springdoc:springdoc-openapi-starter-webmvc-ui:2.1.0'
        }

        tasks.named('test') {
            useJUnitPlatform()
        }

        tasks.withType(Test).configureEach {
            failFast=true
            testLogging {
                exceptionFormat = 'full'
                events 'started', 'skipped', 'passed', 'failed'
                showStandardStreams = true
            }
        }

        jacoco {
            toolVersion = "0.8.12"
            reportsDirectory = layout.buildDirectory.dir('customJacocoReportDir')
        }

        jacocoTestReport {
            reports {
                xml.required = false
                csv.required = false
                html.outputLocation = layout.buildDirectory.dir('jacocoHtml')
            }
        }

        jacocoTestCoverageVerification {
            violationRules {
                rule {
                    limit {
                        minimum = 0.5
                    }
                }

                rule {
                    enabled = false
                    element = 'CLASS'
                    includes = ['org.gradle.*']

                    limit {
                        counter = 'LINE'
                        value = 'TOTALCOUNT'
                        maximum = 0.3
                    }
                }
            }
        }
"""


def build_gradle_path(project_root: Path) -> Path:
    return project_root / BUILD_GRADLE_FILENAME


def update_build_gradle(
    project_root: Path,
    report: "ScaffoldReport",
    *,
    log: Optional[Union[logging.Logger, logging.LoggerAdapter]] = None,
    dry_run: bool = False,
) -> bool:
    """
    Replace the whole of ``build.gradle`` with the template.

    A missing build file is not an error: the step is skipped with a warning and
    the file is not created.

    Args:
        project_root: Directory holding the build file.
        report: Report object to update.
        log: Logger receiving progress messages.
        dry_run: If True, record the outcome without writing.

    Returns:
        True if the file was (or, on a dry run, would be) overwritten.

    Raises:
        IOFailure: If the write fails.
    """
    log = log or logger
    target = build_gradle_path(project_root)
    report.build_file = target
    if not target.exists():
        log.warning("%s file not found at: %s", BUILD_GRADLE_FILENAME, target)
        report.build_file_skipped = True
        return False

    if dry_run:
        log.info("Dry-run: would overwrite %s", target)
        report.build_file_written = True
        return True

    log.info("Updating %s file...", BUILD_GRADLE_FILENAME)
    try:
        write_text_file(target, BUILD_GRADLE_TEMPLATE)
    except OSError as exc:
        raise IOFailure("write", target, exc) from exc
    report.build_file_written = True
    log.info("%s file updated successfully!", BUILD_GRADLE_FILENAME)
    return True
