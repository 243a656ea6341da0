from __future__ import annotations

from pathlib import Path

from logicalids.config.validate import validate_config_path, validate_raw_config


def test_validate_unknown_key() -> None:
    errors = validate_raw_config({"unknown": True})
    assert any("Unknown key" in err for err in errors)


def test_validate_scheme() -> None:
    assert validate_raw_config({"scheme": "hashed"}) == []
    errors = validate_raw_config({"scheme": "sha256"})
    assert any("scheme must be one of" in err for err in errors)


def test_validate_rename_targets() -> None:
    errors = validate_raw_config({"renames": {"Old": "1New", "Other": "Fine"}})
    assert len(errors) == 1
    assert "renames[Old]" in errors[0]


def test_validate_renames_sharing_a_target() -> None:
    errors = validate_raw_config({"renames": {"A": "Same", "B": "Same"}})
    assert any("both target 'Same'" in err for err in errors)


def test_validate_types() -> None:
    errors = validate_raw_config({"renames": ["A"], "fail_fast": "sometimes"})
    assert "renames must be a mapping of original ID to new ID" in errors
    assert "fail_fast must be a boolean" in errors


def test_validate_config_path_not_mapping(tmp_path: Path) -> None:
    path = tmp_path / "cfg.yml"
    path.write_text("- renames\n", encoding="utf-8")
    errors = validate_config_path(path)
    assert errors == [f"{path}: config must be a mapping"]
