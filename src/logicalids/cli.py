from __future__ import annotations

import argparse
import dataclasses
import logging
from pathlib import Path

import yaml

from logicalids import __version__
from logicalids.addressing.scheme import SCHEMES, scheme_from_name
from logicalids.config.loader import DEFAULT_CONFIG_NAME, load_config
from logicalids.config.templates import CONFIG_PRESETS
from logicalids.config.validate import validate_config_paths
from logicalids.errors import LogicalIdError
from logicalids.registry.ledger import LogicalIds
from logicalids.report.format_json import write_json
from logicalids.report.format_md import to_markdown
from logicalids.util.logging import setup_logging

log = logging.getLogger(__name__)


def _resolve_against(root: Path, value: str) -> Path:
    path = Path(value)
    if not path.is_absolute():
        path = root / path
    return path


def _resolve_config_paths(root: Path, config_args: list[str] | None) -> list[Path]:
    if not config_args:
        return [root / DEFAULT_CONFIG_NAME]
    return [_resolve_against(root, p) for p in config_args]


def _read_paths_file(path: Path) -> list[str]:
    out: list[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        value = line.strip()
        if not value or value.startswith("#"):
            continue
        out.append(value)
    return out


def _parse_rename(value: str) -> tuple[str, str] | None:
    original, sep, override = value.partition("=")
    original = original.strip()
    override = override.strip()
    if not sep or not original or not override:
        return None
    return original, override


def cmd_resolve(args: argparse.Namespace) -> int:
    root = Path(args.root).resolve()
    config_paths = [Path(p) for p in args.config] if args.config else None
    cfg = load_config(root, config_paths)

    try:
        scheme = scheme_from_name(args.scheme or cfg.scheme)
    except ValueError as exc:
        log.error("%s", exc)
        return 2

    paths: list[str] = list(args.paths or [])
    if args.paths_file:
        paths_file = _resolve_against(root, args.paths_file)
        if not paths_file.exists():
            log.error("Paths file %s not found.", paths_file)
            return 2
        paths.extend(_read_paths_file(paths_file))
    if not paths:
        log.error("No construct paths given. Pass them as arguments or with --paths-file.")
        return 2

    renames = [(r.original, r.override) for r in cfg.renames]
    for value in args.rename or []:
        parsed = _parse_rename(value)
        if parsed is None:
            log.error("Invalid --rename %r (expected OLD=NEW).", value)
            return 2
        renames.append(parsed)

    ids = LogicalIds(scheme)
    try:
        ids.register_renames(renames)
    except LogicalIdError as exc:
        log.error("%s", exc)
        return 1

    check_unused = cfg.check_unused_renames and not args.no_unused_check
    fail_fast = cfg.fail_fast or args.fail_fast
    report = ids.resolve_all(paths, check_unused=check_unused, fail_fast=fail_fast)

    if args.json_path:
        write_json(report, _resolve_against(root, args.json_path))
        log.info("Wrote JSON report to %s", args.json_path)
    md = to_markdown(report)
    if args.md_path:
        md_path = _resolve_against(root, args.md_path)
        md_path.parent.mkdir(parents=True, exist_ok=True)
        md_path.write_text(md, encoding="utf-8")
        log.info("Wrote Markdown report to %s", args.md_path)
    else:
        print(md)

    if not report.ok:
        for err in report.errors:
            log.warning("%s", err.message)
        return 1
    return 0


def cmd_init(args: argparse.Namespace) -> int:
    root = Path(args.path).resolve()
    target = Path(args.output) if args.output else root / DEFAULT_CONFIG_NAME
    if not target.is_absolute():
        target = root / target
    preset = str(args.preset or "full").lower()
    template = CONFIG_PRESETS.get(preset, CONFIG_PRESETS["full"])
    if target.exists() and not args.force:
        log.error("Config %s already exists. Use --force to overwrite.", target)
        return 1
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(template, encoding="utf-8")
    log.info("Wrote config to %s", target)
    return 0


def cmd_config_show(args: argparse.Namespace) -> int:
    root = Path(args.path).resolve()
    config_paths = [Path(p) for p in args.config] if args.config else None
    cfg = load_config(root, config_paths)
    data = dataclasses.asdict(cfg)
    data["renames"] = {r["original"]: r["override"] for r in data["renames"]}
    text = yaml.safe_dump(data, sort_keys=False)
    if args.output:
        out_path = _resolve_against(root, args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text, encoding="utf-8")
    else:
        print(text)
    return 0


def cmd_config_validate(args: argparse.Namespace) -> int:
    root = Path(args.path).resolve()
    config_paths = _resolve_config_paths(root, args.config)
    if not args.config and not config_paths[0].exists():
        log.error("Config %s not found.", config_paths[0])
        return 1
    errors = validate_config_paths(config_paths)
    if errors:
        for err in errors:
            log.error("%s", err)
        return 1
    log.info("Config valid.")
    return 0


def _add_config_arg(a: argparse.ArgumentParser) -> None:
    a.add_argument(
        "--config",
        action="append",
        default=None,
        help="Config file path (repeatable, root-relative or absolute)",
    )


def _add_resolve_args(a: argparse.ArgumentParser) -> None:
    a.add_argument("paths", nargs="*", help="Construct paths, components separated by '/'")
    a.add_argument("--paths-file", default=None, help="File with one construct path per line")
    a.add_argument("--root", default=".", help="Project root for config and relative paths (default: .)")
    _add_config_arg(a)
    a.add_argument(
        "--rename",
        action="append",
        default=None,
        help="Rename a generated logical ID, as OLD=NEW (repeatable)",
    )
    a.add_argument(
        "--scheme",
        default=None,
        choices=sorted(SCHEMES),
        help="Addressing scheme (default: from config, else hashed)",
    )
    a.add_argument("--json", dest="json_path", default=None, help="Write JSON report to path")
    a.add_argument("--md", dest="md_path", default=None, help="Write Markdown report to path (else prints)")
    a.add_argument(
        "--no-unused-check",
        action="store_true",
        help="Do not fail when a rename was never applied",
    )
    a.add_argument("--fail-fast", action="store_true", help="Stop at the first naming error")


def _add_init_args(a: argparse.ArgumentParser) -> None:
    a.add_argument("path", nargs="?", default=".", help="Project root (default: .)")
    a.add_argument("--output", default=None, help=f"Output path (default: {DEFAULT_CONFIG_NAME})")
    a.add_argument(
        "--preset",
        default="full",
        choices=sorted(CONFIG_PRESETS.keys()),
        help="Template preset (default: full)",
    )
    a.add_argument("--force", action="store_true", help="Overwrite existing config if present")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="logicalids", description="Stable logical IDs for construct trees")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")

    sub = p.add_subparsers(dest="cmd", required=True)

    r = sub.add_parser("resolve", help="Assign logical IDs to construct paths")
    _add_resolve_args(r)
    r.set_defaults(func=cmd_resolve)

    c = sub.add_parser("config", help="Config utilities")
    c_sub = c.add_subparsers(dest="config_cmd", required=True)
    c_show = c_sub.add_parser("show", help="Show merged config")
    c_show.add_argument("path", nargs="?", default=".", help="Project root (default: .)")
    _add_config_arg(c_show)
    c_show.add_argument("--output", default=None, help="Write output to path instead of stdout")
    c_show.set_defaults(func=cmd_config_show)

    c_validate = c_sub.add_parser("validate", help="Validate config file(s)")
    c_validate.add_argument("path", nargs="?", default=".", help="Project root (default: .)")
    _add_config_arg(c_validate)
    c_validate.set_defaults(func=cmd_config_validate)

    i = sub.add_parser("init", help="Create a logicalids configuration file")
    _add_init_args(i)
    i.set_defaults(func=cmd_init)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(bool(args.verbose))
    return int(args.func(args))
