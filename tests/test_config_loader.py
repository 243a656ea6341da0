from __future__ import annotations

import logging
from pathlib import Path

from logicalids.config.loader import load_config
from logicalids.config.schema import LogicalIdsConfig, Rename


def test_missing_default_config_gives_defaults(tmp_path: Path) -> None:
    assert load_config(tmp_path) == LogicalIdsConfig()


def test_default_config_file_is_picked_up(tmp_path: Path) -> None:
    (tmp_path / ".logicalids.yml").write_text(
        "scheme: PassThrough\nrenames:\n  Old: New\nfail_fast: yes\n",
        encoding="utf-8",
    )
    cfg = load_config(tmp_path)
    assert cfg.scheme == "passthrough"
    assert cfg.renames == [Rename(original="Old", override="New")]
    assert cfg.fail_fast is True
    assert cfg.check_unused_renames is True


def test_load_multiple_configs_merges_renames(tmp_path: Path) -> None:
    cfg1 = tmp_path / "a.yml"
    cfg2 = tmp_path / "b.yml"
    cfg1.write_text("renames:\n  A: NewA\n  B: NewB\n", encoding="utf-8")
    cfg2.write_text("renames:\n  A: OtherA\ncheck_unused_renames: false\n", encoding="utf-8")

    cfg = load_config(tmp_path, [cfg1, cfg2])

    assert [(r.original, r.override) for r in cfg.renames] == [
        ("A", "NewA"),
        ("B", "NewB"),
        ("A", "OtherA"),
    ]
    assert cfg.check_unused_renames is False


def test_unreadable_and_missing_configs_are_skipped(tmp_path: Path) -> None:
    bad = tmp_path / "bad.yml"
    bad.write_text("renames: [unclosed\n", encoding="utf-8")
    listed = tmp_path / "list.yml"
    listed.write_text("- a\n- b\n", encoding="utf-8")

    cfg = load_config(tmp_path, [bad, listed, Path("missing.yml")])

    assert cfg == LogicalIdsConfig()


def test_non_string_renames_are_skipped_with_warning(tmp_path: Path, caplog) -> None:
    (tmp_path / ".logicalids.yml").write_text(
        "renames:\n  On: New\n  Old: Fine\n  Legacy: yes\n  '1Quoted': Kept\n",
        encoding="utf-8",
    )
    with caplog.at_level(logging.WARNING, logger="logicalids.config.loader"):
        cfg = load_config(tmp_path)

    assert cfg.renames == [Rename(original="Old", override="Fine"), Rename(original="1Quoted", override="Kept")]
    assert not any(r.original == "True" or r.override == "True" for r in cfg.renames)
    assert sum("not a pair of strings" in rec.getMessage() for rec in caplog.records) == 2
