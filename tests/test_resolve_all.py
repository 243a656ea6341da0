from __future__ import annotations

from logicalids.errors import ErrorKind
from logicalids.registry.ledger import LogicalIds


def test_try_resolve_returns_error_instead_of_raising() -> None:
    ids = LogicalIds()
    result = ids.try_resolve("1Bad")
    assert not result.ok
    assert result.logical_id is None
    assert result.error is not None
    assert result.error.kind is ErrorKind.INVALID_IDENTIFIER_FORMAT
    assert result.path == ["1Bad"]

    good = ids.try_resolve("Stack/Queue")
    assert good.ok
    assert good.entry is not None
    assert good.logical_id == good.entry.logical_id
    assert good.entry.path == "Stack/Queue"


def test_resolve_all_collects_every_problem() -> None:
    ids = LogicalIds()
    ids.register_rename("Bar", "Foo")
    ids.register_rename("Typo", "Whatever")

    report = ids.resolve_all(["Foo", "Bar", "1Bad", "Stack/Bucket"])

    assert not report.ok
    assert report.entries[0].logical_id == "Foo"
    assert report.entries[1].logical_id.startswith("StackBucket")
    kinds = [err.kind for err in report.errors]
    assert kinds == ["identifier_collision", "invalid_identifier_format", "unused_renames"]
    # a rename whose resolve failed was never applied
    assert report.unused_renames == ["Bar", "Typo"]
    assert report.stats is not None
    assert report.stats.paths_total == 4
    assert report.stats.assigned_total == 2
    assert report.stats.errors_total == 3
    assert report.stats.error_counts["identifier_collision"] == 1


def test_resolve_all_marks_renamed_entries() -> None:
    ids = LogicalIds()
    ids.register_rename("Old", "New")
    report = ids.resolve_all(["Old", "Other"])
    assert report.ok
    assert report.entries[0].renamed
    assert report.entries[0].candidate == "Old"
    assert report.entries[0].logical_id == "New"
    assert not report.entries[1].renamed
    assert report.stats is not None
    assert report.stats.renamed_total == 1
    assert report.scheme == "hashed"


def test_resolve_all_fail_fast_stops_and_skips_audit() -> None:
    ids = LogicalIds()
    ids.register_rename("Typo", "Whatever")
    report = ids.resolve_all(["1Bad", "Foo"], fail_fast=True)
    assert [err.kind for err in report.errors] == ["invalid_identifier_format"]
    assert report.entries == []
    assert report.unused_renames == []
    assert report.stats is not None
    assert report.stats.paths_total == 1


def test_resolve_all_without_unused_check() -> None:
    ids = LogicalIds()
    ids.register_rename("Typo", "Whatever")
    report = ids.resolve_all(["Foo"], check_unused=False)
    assert report.ok
    assert ids.unused_renames() == ["Typo"]


def test_report_error_carries_path() -> None:
    generated = LogicalIds().resolve("Stack/1Bad")
    assert generated.startswith("Stack1Bad")
    ids = LogicalIds()
    ids.register_rename(generated, "9Lives")
    failed = ids.resolve_all(["Stack/1Bad"])
    assert failed.errors[0].path == "Stack/1Bad"
    assert failed.errors[0].logical_id == "9Lives"
