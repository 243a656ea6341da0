from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime, timezone
from types import MappingProxyType

from logicalids.addressing.identity import join_path, split_path
from logicalids.addressing.scheme import AddressingScheme, HashedAddressingScheme
from logicalids.errors import (
    DuplicateRenameError,
    IdentifierCollisionError,
    LogicalIdError,
    UnusedRenamesError,
)
from logicalids.registry.validate import validate_logical_id
from logicalids.report.models import (
    SCHEMA_VERSION,
    AllocationReport,
    LogicalIdEntry,
    ReportError,
    ReportStats,
)

log = logging.getLogger(__name__)

PathLike = str | Sequence[str]


def _components(path: PathLike) -> list[str]:
    if isinstance(path, str):
        return split_path(path)
    return list(path)


@dataclass(frozen=True)
class Resolution:
    path: list[str]
    entry: LogicalIdEntry | None = None
    error: LogicalIdError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def logical_id(self) -> str | None:
        return self.entry.logical_id if self.entry else None


class LogicalIds:
    """Keeps track of the logical IDs assigned during one synthesis pass.

    Generated IDs can be renamed; the registry makes sure that no two
    construct paths end up with the same final ID, whether through renames
    or because their generated IDs coincide, and that every registered
    rename was used.
    Create one instance per pass and pass it along explicitly.
    """

    def __init__(self, scheme: AddressingScheme | None = None) -> None:
        self.scheme: AddressingScheme = scheme if scheme is not None else HashedAddressingScheme()
        # old -> new
        self._renames: dict[str, str] = {}
        # new -> old, may be identical
        self._reverse: dict[str, str] = {}
        # new -> path that first received it
        self._paths: dict[str, str] = {}

    @property
    def renames(self) -> Mapping[str, str]:
        return MappingProxyType(self._renames)

    @property
    def assigned(self) -> Mapping[str, str]:
        return MappingProxyType(self._reverse)

    def __contains__(self, logical_id: object) -> bool:
        return logical_id in self._reverse

    def __len__(self) -> int:
        return len(self._reverse)

    def register_rename(self, original: str, override: str) -> None:
        if original in self._renames:
            raise DuplicateRenameError(original)
        self._renames[original] = override
        log.debug("Registered rename %s -> %s", original, override)

    def register_renames(self, renames: Iterable[tuple[str, str]]) -> None:
        for original, override in renames:
            self.register_rename(original, override)

    def resolve(self, path: PathLike) -> str:
        return self._allocate(_components(path)).logical_id

    def try_resolve(self, path: PathLike) -> Resolution:
        components = _components(path)
        try:
            entry = self._allocate(components)
        except LogicalIdError as exc:
            return Resolution(path=components, error=exc)
        return Resolution(path=components, entry=entry)

    def unused_renames(self) -> list[str]:
        keys = set(self._renames)
        keys.difference_update(self._reverse.values())
        return sorted(keys)

    def assert_all_renames_applied(self) -> None:
        unused = self.unused_renames()
        if unused:
            raise UnusedRenamesError(unused)

    def resolve_all(
        self,
        paths: Iterable[PathLike],
        check_unused: bool = True,
        fail_fast: bool = False,
    ) -> AllocationReport:
        entries: list[LogicalIdEntry] = []
        errors: list[LogicalIdError] = []
        paths_total = 0
        stopped = False
        for path in paths:
            paths_total += 1
            result = self.try_resolve(path)
            if result.entry is not None:
                entries.append(result.entry)
                continue
            if result.error is not None:
                errors.append(result.error)
                if fail_fast:
                    stopped = True
                    break

        unused: list[str] = []
        if check_unused and not stopped:
            unused = self.unused_renames()
            if unused:
                errors.append(UnusedRenamesError(unused))

        report_errors = [_report_error(err) for err in errors]
        error_counts = Counter(err.kind for err in report_errors)
        return AllocationReport(
            schema_version=SCHEMA_VERSION,
            generated_at=datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
            scheme=self.scheme.name,
            entries=entries,
            errors=report_errors,
            unused_renames=unused,
            stats=ReportStats(
                paths_total=paths_total,
                assigned_total=len(entries),
                renamed_total=sum(1 for e in entries if e.renamed),
                errors_total=len(report_errors),
                error_counts=dict(error_counts),
            ),
        )

    def _allocate(self, components: list[str]) -> LogicalIdEntry:
        candidate = self.scheme.allocate(components)
        final = self._renames.get(candidate, candidate)
        validate_logical_id(final, components)

        path_str = join_path(components)
        # a final ID may only be handed out again to the same path
        existing = self._reverse.get(final)
        if existing is not None:
            if existing != candidate:
                raise IdentifierCollisionError(final, existing, candidate, components)
            owner = self._paths[final]
            if owner != path_str:
                raise IdentifierCollisionError(final, existing, candidate, components, existing_path=owner)
        self._reverse[final] = candidate
        self._paths[final] = path_str

        renamed = final != candidate
        if renamed:
            log.debug("Renamed %s -> %s (%s)", candidate, final, path_str)
        return LogicalIdEntry(
            path=path_str,
            candidate=candidate,
            logical_id=final,
            renamed=renamed,
        )


def _report_error(err: LogicalIdError) -> ReportError:
    return ReportError(
        kind=err.kind.value,
        message=err.message,
        logical_id=err.logical_id,
        originals=list(err.originals),
        path=join_path(err.path) if err.path else None,
    )
