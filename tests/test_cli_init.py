from __future__ import annotations

import subprocess
import sys
from pathlib import Path


def test_cli_init_writes_config(tmp_path: Path) -> None:
    result = subprocess.run(
        [sys.executable, "-m", "logicalids", "init", str(tmp_path), "--preset", "minimal"],
        capture_output=True,
        text=True,
        check=False,
    )
    assert result.returncode == 0
    cfg = tmp_path / ".logicalids.yml"
    assert cfg.exists()
    assert "renames:" in cfg.read_text(encoding="utf-8")


def test_cli_init_refuses_to_overwrite(tmp_path: Path) -> None:
    cfg = tmp_path / ".logicalids.yml"
    cfg.write_text("scheme: hashed\n", encoding="utf-8")
    result = subprocess.run(
        [sys.executable, "-m", "logicalids", "init", str(tmp_path)],
        capture_output=True,
        text=True,
        check=False,
    )
    assert result.returncode == 1
    assert cfg.read_text(encoding="utf-8") == "scheme: hashed\n"
