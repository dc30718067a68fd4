"""Persist generated enum sources next to their owning type."""

from __future__ import annotations

from pathlib import Path

from enumgen.codegen.java import GeneratedSource
from enumgen.logging import get_logger

log = get_logger(__name__)


def write_enum_file(directory: Path, generated: GeneratedSource, overwrite: bool = False) -> Path:
    """Write ``generated`` into ``directory`` and return the target path.

    Raises FileExistsError when the target exists and ``overwrite`` is false.
    """
    directory.mkdir(parents=True, exist_ok=True)
    target = directory / generated.file_name
    if target.exists() and not overwrite:
        raise FileExistsError(f"File already exists: {target}")
    target.write_text(generated.source, encoding="utf-8")
    log.info("wrote %s (%d bytes)", target, len(generated.source.encode("utf-8")))
    return target
