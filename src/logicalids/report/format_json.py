from __future__ import annotations

import json
from pathlib import Path

from .models import (
    SCHEMA_VERSION,
    AllocationReport,
    LogicalIdEntry,
    ReportError,
    ReportStats,
)


def to_json(report: AllocationReport) -> str:
    return json.dumps(report.to_dict(), indent=2)


def write_json(report: AllocationReport, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_json(report), encoding="utf-8")


def read_json(path: Path) -> AllocationReport:
    raw = json.loads(path.read_text(encoding="utf-8"))
    entries = []
    for e in raw.get("entries", []):
        entries.append(
            LogicalIdEntry(
                path=str(e.get("path", "")),
                candidate=str(e.get("candidate", "")),
                logical_id=str(e.get("logical_id", "")),
                renamed=bool(e.get("renamed", False)),
            )
        )
    errors = []
    for err in raw.get("errors", []):
        logical_id = err.get("logical_id")
        path_str = err.get("path")
        errors.append(
            ReportError(
                kind=str(err.get("kind", "")),
                message=str(err.get("message", "")),
                logical_id=str(logical_id) if logical_id is not None else None,
                originals=[str(x) for x in err.get("originals", [])] if isinstance(err.get("originals"), list) else [],
                path=str(path_str) if path_str is not None else None,
            )
        )
    stats = None
    stats_raw = raw.get("stats")
    if isinstance(stats_raw, dict):
        stats = ReportStats(
            paths_total=int(stats_raw.get("paths_total", 0)),
            assigned_total=int(stats_raw.get("assigned_total", 0)),
            renamed_total=int(stats_raw.get("renamed_total", 0)),
            errors_total=int(stats_raw.get("errors_total", 0)),
            error_counts={str(k): int(v) for k, v in dict(stats_raw.get("error_counts", {})).items()},
        )
    unused = raw.get("unused_renames", [])
    return AllocationReport(
        schema_version=int(raw.get("schema_version", SCHEMA_VERSION)),
        generated_at=str(raw.get("generated_at", "")),
        scheme=str(raw.get("scheme", "")),
        entries=entries,
        errors=errors,
        unused_renames=[str(x) for x in unused] if isinstance(unused, list) else [],
        stats=stats,
    )
