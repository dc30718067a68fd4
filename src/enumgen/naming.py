"""Derive the generated enum's type name, package and file name from its owner."""

from __future__ import annotations

import re

from enumgen.codegen.java import JAVA_EXTENSION

TYPE_SUFFIX_RE = re.compile(r"(DO|DTO|VO|PO|POJO|Entity)$")
DEFAULT_ENUM_SUFFIX = "Enum"


def strip_type_suffix(class_name: str) -> str:
    """Drop a trailing data-object marker: ``OrderDTO`` -> ``Order``."""
    return TYPE_SUFFIX_RE.sub("", class_name, count=1)


def capitalize_field(field_name: str) -> str:
    if not field_name:
        return "Field"
    return field_name[0].upper() + field_name[1:]


def enum_type_name(
    class_name: str | None, field_name: str, suffix: str = DEFAULT_ENUM_SUFFIX
) -> str:
    base = strip_type_suffix(class_name or "Unknown")
    return base + capitalize_field(field_name) + suffix


def package_of(qualified_name: str | None) -> str:
    if not qualified_name or "." not in qualified_name:
        return ""
    return qualified_name.rsplit(".", 1)[0]


def enum_file_name(type_name: str, extension: str = JAVA_EXTENSION) -> str:
    return type_name + extension
