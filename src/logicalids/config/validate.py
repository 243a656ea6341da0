from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from logicalids.addressing.scheme import SCHEMES
from logicalids.registry.validate import LOGICAL_ID_PATTERN, is_valid_logical_id

KNOWN_KEYS = {
    "scheme",
    "renames",
    "check_unused_renames",
    "fail_fast",
}


def _validate_optional_bool(raw: dict[str, Any], key: str, errors: list[str]) -> None:
    if key not in raw:
        return
    value = raw.get(key)
    if value is None:
        return
    if not isinstance(value, bool):
        errors.append(f"{key} must be a boolean")


def _validate_optional_str_choice(raw: dict[str, Any], key: str, choices: set[str], errors: list[str]) -> None:
    if key not in raw:
        return
    value = raw.get(key)
    if value is None:
        return
    if not isinstance(value, str):
        errors.append(f"{key} must be a string")
        return
    if value.strip().lower() not in choices:
        errors.append(f"{key} must be one of: {', '.join(sorted(choices))}")


def _validate_renames(raw: dict[str, Any], errors: list[str]) -> None:
    if "renames" not in raw:
        return
    value = raw.get("renames")
    if value is None:
        return
    if not isinstance(value, dict):
        errors.append("renames must be a mapping of original ID to new ID")
        return
    targets: dict[str, str] = {}
    for original, override in value.items():
        if not isinstance(original, str) or not original.strip():
            errors.append(f"renames key {original!r} must be a non-empty string")
            continue
        if not isinstance(override, str) or not override.strip():
            errors.append(f"renames[{original}] must be a non-empty string")
            continue
        if not is_valid_logical_id(override):
            errors.append(f"renames[{original}] '{override}' does not match {LOGICAL_ID_PATTERN}")
        if override in targets:
            errors.append(f"renames[{original}] and renames[{targets[override]}] both target '{override}'")
        else:
            targets[override] = original


def validate_raw_config(raw: dict[str, Any]) -> list[str]:
    errors: list[str] = []
    for key in raw.keys():
        if key not in KNOWN_KEYS:
            errors.append(f"Unknown key: {key}")

    _validate_optional_str_choice(raw, "scheme", set(SCHEMES), errors)
    for key in ["check_unused_renames", "fail_fast"]:
        _validate_optional_bool(raw, key, errors)
    _validate_renames(raw, errors)

    return errors


def validate_config_path(path: Path) -> list[str]:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except Exception as exc:
        return [f"{path}: failed to read ({exc})"]
    if not isinstance(raw, dict):
        return [f"{path}: config must be a mapping"]
    errors = validate_raw_config(raw)
    return [f"{path}: {err}" for err in errors]


def validate_config_paths(paths: Iterable[Path]) -> list[str]:
    errors: list[str] = []
    for path in paths:
        errors.extend(validate_config_path(path))
    return errors
