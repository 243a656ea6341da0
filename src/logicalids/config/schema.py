from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Rename:
    original: str
    override: str


@dataclass(frozen=True)
class LogicalIdsConfig:
    scheme: str = "hashed"
    renames: list[Rename] = field(default_factory=list)
    check_unused_renames: bool = True
    fail_fast: bool = False
