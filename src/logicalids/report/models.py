from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

SCHEMA_VERSION = 1


@dataclass(frozen=True)
class LogicalIdEntry:
    path: str
    candidate: str
    logical_id: str
    renamed: bool = False


@dataclass(frozen=True)
class ReportError:
    kind: str
    message: str
    logical_id: str | None = None
    originals: list[str] = field(default_factory=list)
    path: str | None = None


@dataclass(frozen=True)
class ReportStats:
    paths_total: int
    assigned_total: int
    renamed_total: int
    errors_total: int
    error_counts: dict[str, int]


@dataclass(frozen=True)
class AllocationReport:
    schema_version: int
    generated_at: str
    scheme: str
    entries: list[LogicalIdEntry]
    errors: list[ReportError]
    unused_renames: list[str] = field(default_factory=list)
    stats: ReportStats | None = None

    @property
    def ok(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        if data.get("stats") is None:
            data.pop("stats", None)
        return data
