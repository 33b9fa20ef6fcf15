"""
Configuration helpers: request validation and project property lookup.
"""

from .models import BASE_PACKAGE_PROPERTY, ScaffoldRequest
from .properties import (
    ProjectProperties,
    PropertiesError,
    parse_properties,
    parse_property_options,
    resolve_project_properties,
)

__all__ = [
    "BASE_PACKAGE_PROPERTY",
    "ScaffoldRequest",
    "ProjectProperties",
    "PropertiesError",
    "parse_properties",
    "parse_property_options",
    "resolve_project_properties",
]
