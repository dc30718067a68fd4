"""Minimal Java source scanner for Javadoc-documented fields.

Supports a subset:
- ``package`` declaration and the first top-level class/interface/enum/record
- fields preceded by a ``/** ... */`` block, optionally annotated and initialized
- generics and array types in the field declaration
Only fields declared directly in the top-level type body are collected;
methods, nested types and non-Javadoc comments are skipped. Nesting is
tracked by brace depth with comments and string/char literals blanked out.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

PACKAGE_RE = re.compile(r"^\s*package\s+([\w$.]+)\s*;", re.MULTILINE)
TYPE_DECL_RE = re.compile(r"\b(?:class|interface|enum|record)\s+([A-Za-z_$][\w$]*)")
NOISE_RE = re.compile(
    r"""/\*.*?\*/|//[^\n]*|"(?:\\.|[^"\\\n])*"|'(?:\\.|[^'\\\n])*'""", re.DOTALL
)
NON_NEWLINE_RE = re.compile(r"[^\n]")
FIELD_DOC_RE = re.compile(
    r"(/\*\*(?:[^*]|\*(?!/))*\*/)\s*"
    r"(?:@[\w$.]+(?:\s*\([^)]*\))?\s*)*"
    r"(?:(?:public|protected|private|static|final|transient|volatile)\s+)*"
    r"[\w$.]+(?:\s*<[^;{}()=]*>)?(?:\s*\[\s*\])*\s+"
    r"([A-Za-z_$][\w$]*)\s*(?:=[^;]*)?;"
)


@dataclass
class DocumentedField:
    name: str
    doc: str
    line: int


@dataclass
class JavaSource:
    package: str
    class_name: str | None
    fields: list[DocumentedField] = field(default_factory=list)

    @property
    def qualified_name(self) -> str | None:
        if self.class_name is None:
            return None
        return f"{self.package}.{self.class_name}" if self.package else self.class_name


def _blank_noise(text: str) -> str:
    """Replace comments and literals with spaces, keeping offsets and line breaks."""
    return NOISE_RE.sub(lambda m: NON_NEWLINE_RE.sub(" ", m.group()), text)


def _top_level_fields(text: str, code: str) -> list[DocumentedField]:
    fields: list[DocumentedField] = []
    depth = 0
    pos = 0
    for m in FIELD_DOC_RE.finditer(text):
        depth += code.count("{", pos, m.start()) - code.count("}", pos, m.start())
        pos = m.start()
        if depth != 1:
            continue
        fields.append(
            DocumentedField(
                name=m.group(2),
                doc=m.group(1),
                line=text.count("\n", 0, m.start(2)) + 1,
            )
        )
    return fields


def scan_java_source(text: str) -> JavaSource:
    package_match = PACKAGE_RE.search(text)
    # prose like "this class ..." must not be taken as a declaration
    code = _blank_noise(text)
    type_match = TYPE_DECL_RE.search(code)
    fields = _top_level_fields(text, code)
    return JavaSource(
        package=package_match.group(1) if package_match else "",
        class_name=type_match.group(1) if type_match else None,
        fields=fields,
    )


def find_field(source: JavaSource, field_name: str) -> DocumentedField:
    for documented in source.fields:
        if documented.name == field_name:
            return documented
    raise LookupError(f"Field '{field_name}' has no Javadoc comment or does not exist")
