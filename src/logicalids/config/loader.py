from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from .schema import LogicalIdsConfig, Rename

log = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = ".logicalids.yml"


def _load_raw_config(path: Path) -> dict[str, Any]:
    try:
        return yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except Exception as e:
        log.warning("Failed to load %s (%s). Skipping.", path, e)
        return {}


def _get_optional_str(raw: dict[str, Any], key: str) -> str | None:
    if key not in raw:
        return None
    v = raw.get(key)
    if v is None:
        return None
    return str(v)


def _get_bool(raw: dict[str, Any], key: str, default: bool) -> bool:
    if key not in raw:
        return default
    v = raw.get(key)
    if isinstance(v, bool):
        return v
    if isinstance(v, (int, float)):
        return bool(v)
    if isinstance(v, str):
        if v.strip().lower() in {"true", "yes", "1", "on"}:
            return True
        if v.strip().lower() in {"false", "no", "0", "off"}:
            return False
    return default


def _get_renames(raw: dict[str, Any]) -> list[Rename]:
    out: list[Rename] = []
    raw_renames = raw.get("renames", {})
    if not isinstance(raw_renames, dict):
        return out
    for original, override in raw_renames.items():
        if original is None or override is None:
            continue
        # YAML 1.1 reads unquoted On/Yes/No as booleans
        if not isinstance(original, str) or not isinstance(override, str):
            log.warning("Rename %r -> %r is not a pair of strings (quote it); skipping.", original, override)
            continue
        original_str = original.strip()
        override_str = override.strip()
        if not original_str or not override_str:
            continue
        out.append(Rename(original=original_str, override=override_str))
    return out


def _merge_config(base: LogicalIdsConfig, raw: dict[str, Any]) -> LogicalIdsConfig:
    scheme = _get_optional_str(raw, "scheme")
    if scheme is None:
        scheme = base.scheme
    # duplicates across files are kept so the registry can reject them
    renames = [*base.renames, *_get_renames(raw)]
    check_unused_renames = _get_bool(raw, "check_unused_renames", base.check_unused_renames)
    fail_fast = _get_bool(raw, "fail_fast", base.fail_fast)
    return LogicalIdsConfig(
        scheme=scheme.strip().lower(),
        renames=renames,
        check_unused_renames=check_unused_renames,
        fail_fast=fail_fast,
    )


def _resolve_config_paths(root: Path, config_paths: Iterable[Path] | None) -> list[Path]:
    if config_paths is None:
        return [root / DEFAULT_CONFIG_NAME]
    resolved: list[Path] = []
    for path in config_paths:
        p = path
        if not p.is_absolute():
            p = root / p
        resolved.append(p)
    return resolved


def load_config(root: Path, config_paths: Iterable[Path] | None = None) -> LogicalIdsConfig:
    paths = _resolve_config_paths(root, config_paths)
    if config_paths is None and not paths[0].exists():
        return LogicalIdsConfig()

    cfg = LogicalIdsConfig()
    for path in paths:
        if not path.exists():
            log.warning("Config %s not found; skipping.", path)
            continue
        raw = _load_raw_config(path)
        if not isinstance(raw, dict):
            log.warning("Config %s is not a mapping; skipping.", path)
            continue
        cfg = _merge_config(cfg, raw)
    return cfg
