"""End-to-end helpers: documentation text or a Java field -> enum file."""

from __future__ import annotations

from pathlib import Path

from enumgen.codegen.java import GenerationRequest, JavaEnumConfig, synthesize
from enumgen.javadoc.parser import parse_entries
from enumgen.javadoc.source import find_field, scan_java_source
from enumgen.logging import get_logger
from enumgen.naming import DEFAULT_ENUM_SUFFIX, enum_type_name, package_of
from enumgen.writer import write_enum_file

log = get_logger(__name__)


class NoEntriesError(ValueError):
    """Raised when documentation yields no recognizable code/description pairs."""


def request_for_comment(comment: str, type_name: str, namespace: str = "") -> GenerationRequest:
    return GenerationRequest(namespace=namespace, type_name=type_name, entries=parse_entries(comment))


def request_for_field(
    source_path: Path, field_name: str, suffix: str = DEFAULT_ENUM_SUFFIX
) -> GenerationRequest:
    """Build a request from a documented field of a Java source file.

    Raises LookupError when the field is missing or has no Javadoc.
    """
    source = scan_java_source(source_path.read_text(encoding="utf-8"))
    documented = find_field(source, field_name)
    log.debug("found Javadoc for %s at line %d", field_name, documented.line)
    return GenerationRequest(
        namespace=package_of(source.qualified_name),
        type_name=enum_type_name(source.class_name, documented.name, suffix),
        entries=parse_entries(documented.doc),
    )


def generate_file(
    request: GenerationRequest,
    output_dir: Path,
    config: JavaEnumConfig | None = None,
    overwrite: bool = False,
) -> Path:
    """Synthesize and write the enum; empty requests raise NoEntriesError."""
    if not request.entries:
        raise NoEntriesError(f"No enum entries found for {request.type_name}")
    generated = synthesize(request, config)
    return write_enum_file(output_dir, generated, overwrite=overwrite)
