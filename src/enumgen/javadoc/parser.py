"""Permissive parser for code/description lists found in field documentation.

Recognizes entries such as ``0-待处理, 1:处理中, 2：完成, 3 = 失败, 4 - 已归档``:
- entries are separated by ASCII/full-width commas or newlines
- each entry is ``<digits> <sep> <description>`` with sep one of - : = ： － ＝
- anything else (prose, @tags, HTML) is dropped without raising
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from enumgen.logging import get_logger

log = get_logger(__name__)

JAVA_INT_MAX = 2**31 - 1
JAVA_INT_MAX_DIGITS = len(str(JAVA_INT_MAX))

COMMENT_OPEN_RE = re.compile(r"^/\*+")
COMMENT_CLOSE_RE = re.compile(r"\*+/$")
LINE_MARKER_RE = re.compile(r"^(?:\s*(?:\*+|//+))+")
SEGMENT_SPLIT_RE = re.compile(r"[,，\n]+")
ENTRY_RE = re.compile(r"([0-9]+)\s*[-:=：－＝]\s*(.+)")
TRAILING_PUNCT_RE = re.compile(r"[.．;；。]+$")
NON_IDENT_RE = re.compile(r"[^A-Za-z0-9]+")
UNDERSCORES_RE = re.compile(r"_+")


@dataclass(frozen=True)
class EnumEntry:
    name: str
    code: int
    description: str


def clean_comment(raw: str) -> str:
    """Strip ``/** */`` delimiters and leading ``*``/``//`` markers from every line."""
    text = raw.strip()
    text = COMMENT_OPEN_RE.sub("", text)
    text = COMMENT_CLOSE_RE.sub("", text)
    lines = [LINE_MARKER_RE.sub("", line, count=1).strip() for line in text.splitlines()]
    return "\n".join(lines).strip()


def split_segments(text: str) -> list[str]:
    segments = (seg.strip() for seg in SEGMENT_SPLIT_RE.split(text))
    return [seg for seg in segments if seg]


def normalize_description(description: str) -> str:
    return TRAILING_PUNCT_RE.sub("", description.strip()).strip()


def derive_constant_name(description: str, code: int) -> str:
    """Turn a description into an upper-case Java constant name.

    Non-alphanumeric runs become ``_``; a description with no ASCII letters or
    digits falls back to ``C<code>`` and a name starting with a digit gets a
    ``C_`` prefix, e.g. ``"3x"`` -> ``C_3X``.
    """
    base = NON_IDENT_RE.sub("_", description)
    base = UNDERSCORES_RE.sub("_", base)
    base = base.removeprefix("_").removesuffix("_")
    if not base:
        base = f"C{code}"
    if not base[0].isalpha():
        base = "C_" + base
    # base is pure ASCII at this point, so upper() cannot change its length
    return base.upper()


def _unique_name(name: str, used: set[str]) -> str:
    candidate = name
    counter = 2
    while candidate in used:
        candidate = f"{name}_{counter}"
        counter += 1
    return candidate


def parse_entries(raw: str) -> list[EnumEntry]:
    """Extract ordered, de-duplicated entries from raw comment text.

    Never raises on malformed input; an empty list means nothing matched.
    """
    entries: list[EnumEntry] = []
    used_codes: set[int] = set()
    used_names: set[str] = set()

    for segment in split_segments(clean_comment(raw)):
        match = ENTRY_RE.fullmatch(segment)
        if not match:
            log.debug("skipping unrecognized segment %r", segment)
            continue
        digits = match.group(1).lstrip("0") or "0"
        # length check first: int() refuses very long digit strings
        if len(digits) > JAVA_INT_MAX_DIGITS or int(digits) > JAVA_INT_MAX:
            log.debug("skipping out-of-range code %.20s (%d digits)", digits, len(digits))
            continue
        code = int(digits)
        if code in used_codes:
            log.debug("skipping duplicate code %d in %r", code, segment)
            continue
        used_codes.add(code)

        description = normalize_description(match.group(2))
        name = _unique_name(derive_constant_name(description, code), used_names)
        used_names.add(name)
        entries.append(EnumEntry(name=name, code=code, description=description))
    return entries
