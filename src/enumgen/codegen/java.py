"""Java enum source generator driven by parsed code/description entries."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from enumgen.javadoc.parser import EnumEntry

JAVA_IDENTIFIER_RE = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")
JAVA_KEYWORDS = frozenset(
    """
    abstract assert boolean break byte case catch char class const continue
    default do double else enum extends final finally float for goto if
    implements import instanceof int interface long native new package private
    protected public return short static strictfp super switch synchronized
    this throw throws transient try void volatile while true false null _
    """.split()
)
JAVA_EXTENSION = ".java"


@dataclass
class JavaEnumConfig:
    lombok: bool = True  # emit @Getter/@RequiredArgsConstructor instead of boilerplate
    indent: str = "    "
    find_method: str = "find"
    require_method: str = "require"
    lookup_field: str = "ENUM_MAP"


@dataclass(frozen=True)
class GenerationRequest:
    namespace: str
    type_name: str
    entries: Sequence[EnumEntry]


@dataclass(frozen=True)
class GeneratedSource:
    type_name: str
    file_name: str
    source: str


def is_java_identifier(name: str) -> bool:
    return bool(JAVA_IDENTIFIER_RE.fullmatch(name)) and name not in JAVA_KEYWORDS


def escape_java_string(value: str) -> str:
    # backslashes first so the quote escapes are not doubled
    return value.replace("\\", "\\\\").replace('"', '\\"')


def _check_request(
    namespace: str, type_name: str, entries: Sequence[EnumEntry], cfg: JavaEnumConfig
) -> None:
    if not entries:
        raise ValueError("at least one enum entry is required")
    if not is_java_identifier(type_name):
        raise ValueError(f"invalid Java type name: {type_name!r}")
    if namespace and not all(is_java_identifier(part) for part in namespace.split(".")):
        raise ValueError(f"invalid Java package name: {namespace!r}")
    for member in (cfg.find_method, cfg.require_method, cfg.lookup_field):
        if not is_java_identifier(member):
            raise ValueError(f"invalid Java member name: {member!r}")
    seen: set[str] = set()
    for entry in entries:
        if not is_java_identifier(entry.name):
            raise ValueError(f"invalid enum constant name: {entry.name!r}")
        if entry.name in seen:
            raise ValueError(f"duplicate enum constant name: {entry.name}")
        if entry.name == cfg.lookup_field:
            raise ValueError(
                f"enum constant {entry.name} clashes with the lookup field; "
                "set a different lookup_field"
            )
        seen.add(entry.name)


def _imports(cfg: JavaEnumConfig) -> list[str]:
    imports = []
    if cfg.lombok:
        imports += ["lombok.Getter", "lombok.RequiredArgsConstructor"]
    imports += ["java.util.Collections", "java.util.HashMap", "java.util.Map", "java.util.Optional"]
    return [f"import {name};" for name in imports]


def _constants(entries: Sequence[EnumEntry], cfg: JavaEnumConfig) -> str:
    lines = [
        f'{cfg.indent}{entry.name}({entry.code}, "{escape_java_string(entry.description)}")'
        for entry in entries
    ]
    return ",\n".join(lines) + ";"


def _boilerplate(type_name: str, cfg: JavaEnumConfig) -> list[str]:
    i1, i2 = cfg.indent, cfg.indent * 2
    return [
        f"{i1}{type_name}(int code, String description) {{",
        f"{i2}this.code = code;",
        f"{i2}this.description = description;",
        f"{i1}}}",
        "",
        f"{i1}public int getCode() {{",
        f"{i2}return code;",
        f"{i1}}}",
        "",
        f"{i1}public String getDescription() {{",
        f"{i2}return description;",
        f"{i1}}}",
        "",
    ]


def generate_source(
    namespace: str,
    type_name: str,
    entries: Sequence[EnumEntry],
    config: JavaEnumConfig | None = None,
) -> str:
    """Render a Java enum with an eager code map plus find/require lookups.

    Raises ValueError when called with no entries or with names that are not
    valid Java identifiers.
    """
    cfg = config or JavaEnumConfig()
    _check_request(namespace, type_name, entries, cfg)
    i1, i2, i3 = cfg.indent, cfg.indent * 2, cfg.indent * 3
    table = cfg.lookup_field

    lines: list[str] = []
    if namespace:
        lines += [f"package {namespace};", ""]
    lines += _imports(cfg)
    lines.append("")
    if cfg.lombok:
        lines += ["@Getter", "@RequiredArgsConstructor"]
    lines += [f"public enum {type_name} {{", "", _constants(entries, cfg), ""]
    lines += [
        f"{i1}private final int code;",
        "",
        f"{i1}private final String description;",
        "",
        f"{i1}private static final Map<Integer, {type_name}> {table};",
        "",
        f"{i1}static {{",
        f"{i2}Map<Integer, {type_name}> m = new HashMap<>();",
        f"{i2}for ({type_name} e : values()) {{",
        f"{i3}m.put(e.code, e);",
        f"{i2}}}",
        f"{i2}{table} = Collections.unmodifiableMap(m);",
        f"{i1}}}",
        "",
    ]
    if not cfg.lombok:
        lines += _boilerplate(type_name, cfg)
    lines += [
        f"{i1}public static Optional<{type_name}> {cfg.find_method}(int code) {{",
        f"{i2}return Optional.ofNullable({table}.get(code));",
        f"{i1}}}",
        "",
        f"{i1}public static {type_name} {cfg.require_method}(int code) {{",
        f"{i2}{type_name} e = {table}.get(code);",
        f"{i2}if (e == null) {{",
        f'{i3}throw new IllegalArgumentException("Unknown code: " + code);',
        f"{i2}}}",
        f"{i2}return e;",
        f"{i1}}}",
        "}",
    ]
    return "\n".join(lines) + "\n"


def synthesize(request: GenerationRequest, config: JavaEnumConfig | None = None) -> GeneratedSource:
    source = generate_source(request.namespace, request.type_name, request.entries, config)
    return GeneratedSource(
        type_name=request.type_name,
        file_name=request.type_name + JAVA_EXTENSION,
        source=source,
    )
