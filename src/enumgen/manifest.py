from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from enumgen.codegen.java import GenerationRequest, JavaEnumConfig
from enumgen.logging import get_logger
from enumgen.naming import DEFAULT_ENUM_SUFFIX
from enumgen.pipeline import (
    NoEntriesError,
    generate_file,
    request_for_comment,
    request_for_field,
)

log = get_logger(__name__)


@dataclass
class EnumJob:
    name: str
    output_dir: Path
    comment: str | None = None
    comment_file: Path | None = None
    source: Path | None = None
    field: str | None = None
    type_name: str | None = None
    namespace: str = ""
    suffix: str = DEFAULT_ENUM_SUFFIX
    overwrite: bool = False
    lombok: bool = True

    @staticmethod
    def from_mapping(payload: dict[str, Any], base_dir: Path | None = None) -> EnumJob:
        base = base_dir or Path(".")

        def _path(key: str) -> Path | None:
            value = payload.get(key)
            return base / value if value else None

        source = _path("source")
        has_comment = bool(payload.get("comment") or payload.get("comment_file"))
        if source is None and not has_comment:
            raise ValueError(f"Job {payload.get('name')!r} needs 'source' or 'comment'/'comment_file'")
        if source is not None and not payload.get("field"):
            raise ValueError(f"Job {payload.get('name')!r} sets 'source' without 'field'")
        if source is None and not payload.get("type_name"):
            raise ValueError(f"Job {payload.get('name')!r} needs 'type_name' for comment input")

        default_dir = source.parent if source is not None else base
        return EnumJob(
            name=str(payload.get("name") or payload.get("field") or payload.get("type_name")),
            output_dir=_path("output_dir") or default_dir,
            comment=payload.get("comment"),
            comment_file=_path("comment_file"),
            source=source,
            field=payload.get("field"),
            type_name=payload.get("type_name"),
            namespace=str(payload.get("namespace") or ""),
            suffix=str(payload.get("suffix", DEFAULT_ENUM_SUFFIX)),
            overwrite=bool(payload.get("overwrite", False)),
            lombok=bool(payload.get("lombok", True)),
        )

    def to_request(self) -> GenerationRequest:
        if self.source is not None and self.field is not None:
            request = request_for_field(self.source, self.field, suffix=self.suffix)
            if self.type_name:
                request = GenerationRequest(request.namespace, self.type_name, request.entries)
            return request
        comment = self.comment
        if comment is None and self.comment_file is not None:
            comment = self.comment_file.read_text(encoding="utf-8")
        return request_for_comment(comment or "", self.type_name or "", self.namespace)


def run_job(job: EnumJob) -> dict[str, Any]:
    result: dict[str, Any] = {
        "name": job.name,
        "type_name": job.type_name,
        "entries": 0,
        "file": None,
        "warnings": [],
    }
    try:
        request = job.to_request()
    except FileNotFoundError:
        result["warnings"].append("input_missing")
        return result
    except LookupError:
        result["warnings"].append("field_not_documented")
        return result
    except UnicodeDecodeError:
        result["warnings"].append("input_not_utf8")
        return result

    result["type_name"] = request.type_name
    result["entries"] = len(request.entries)
    try:
        path = generate_file(
            request,
            job.output_dir,
            config=JavaEnumConfig(lombok=job.lombok),
            overwrite=job.overwrite,
        )
    except NoEntriesError:
        result["warnings"].append("no_entries")
    except FileExistsError:
        result["warnings"].append("file_exists")
    except ValueError as exc:
        result["warnings"].append("invalid_request")
        result["error"] = str(exc)
    else:
        result["file"] = str(path)
    if result["warnings"]:
        log.warning("job %s: %s", job.name, ", ".join(result["warnings"]))
    return result


def load_manifest(path: Path) -> list[EnumJob]:
    if path.suffix.lower() in {".yml", ".yaml"}:
        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
    else:
        payload = json.loads(path.read_text(encoding="utf-8"))
    jobs = payload.get("jobs", []) if isinstance(payload, dict) else payload
    if not isinstance(jobs, list):
        raise ValueError(f"Manifest {path} must contain a list of jobs")
    return [EnumJob.from_mapping(job, base_dir=path.parent) for job in jobs]


def run_manifest(path: Path) -> dict[str, Any]:
    results = [run_job(job) for job in load_manifest(path)]
    return {
        "manifest": str(path),
        "jobs": len(results),
        "written": sum(1 for r in results if r["file"]),
        "results": results,
    }


def sample_manifest() -> dict[str, Any]:
    return {
        "jobs": [
            {
                "name": "order_status",
                "source": "src/main/java/com/example/order/OrderDO.java",
                "field": "status",
            },
            {
                "name": "pay_channel",
                "comment": "1-alipay, 2-wechat, 3-card",
                "type_name": "PayChannelEnum",
                "namespace": "com.example.pay",
                "output_dir": "src/main/java/com/example/pay",
                "lombok": False,
            },
        ]
    }
