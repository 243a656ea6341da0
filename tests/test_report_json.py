from __future__ import annotations

import json
from pathlib import Path

from logicalids.registry.ledger import LogicalIds
from logicalids.report.format_json import read_json, write_json
from logicalids.report.format_md import to_markdown
from logicalids.report.models import SCHEMA_VERSION


def _report():
    ids = LogicalIds()
    ids.register_rename("Legacy", "Renamed")
    ids.register_rename("Typo", "Whatever")
    return ids.resolve_all(["Legacy", "Stack/Bucket/Resource", "1Bad"])


def test_json_roundtrip(tmp_path: Path) -> None:
    report = _report()
    path = tmp_path / "out" / "logicalids.json"
    write_json(report, path)
    loaded = read_json(path)

    assert loaded == report
    assert loaded.schema_version == SCHEMA_VERSION
    assert loaded.entries[0].renamed
    assert loaded.errors[-1].kind == "unused_renames"
    assert loaded.errors[-1].originals == ["Typo"]
    assert loaded.stats is not None
    assert loaded.stats.error_counts == {"invalid_identifier_format": 1, "unused_renames": 1}


def test_json_omits_missing_stats(tmp_path: Path) -> None:
    path = tmp_path / "report.json"
    path.write_text(json.dumps({"schema_version": 1, "entries": [], "errors": []}), encoding="utf-8")
    loaded = read_json(path)
    assert loaded.stats is None
    assert "stats" not in loaded.to_dict()
    assert loaded.ok


def test_markdown_lists_ids_and_errors() -> None:
    md = to_markdown(_report())
    assert md.startswith("# Logical ID report")
    assert "| `Legacy` | `Renamed` | `Legacy` |" in md
    assert "`Stack/Bucket/Resource`" in md
    assert "## Errors" in md
    assert "invalid_identifier_format" in md
    assert "- Errors: `2`" in md
