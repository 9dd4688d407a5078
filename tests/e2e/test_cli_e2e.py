from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Invokes the entry point script via subprocess and checks exit codes,
stdout/stderr and the files materialized on disk.
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import Any, Dict, List

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "sitecrafter" / "main.py"


def run_cli(args: List[str], home: Path) -> subprocess.CompletedProcess[str]:
    """
    Execute the CLI in a separate process with an isolated HOME.

    Args:
        args: Command line arguments (excluding interpreter and script).
        home: Directory used as the user's home for config storage.

    Returns:
        subprocess.CompletedProcess: returncode, stdout and stderr.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")
    env["HOME"] = str(home)
    env["LOCALAPPDATA"] = str(home)

    cmd = [sys.executable, str(ENTRY_POINT)] + args

    return subprocess.run(
        cmd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


def _write(path: Path, records: List[Dict[str, Any]]) -> Path:
    path.write_text(json.dumps(records), encoding="utf-8")
    return path


@pytest.fixture
def first_batch(tmp_path: Path) -> Path:
    return _write(tmp_path / "first.json", [
        {"type": "CreateFile", "path": "index.html", "code": "<html></html>"},
        {"type": "CreateFile", "path": "src/App.tsx", "code": "v1"},
        {"type": "RunScript", "code": "npm install"},
    ])


@pytest.fixture
def second_batch(tmp_path: Path) -> Path:
    return _write(tmp_path / "second.json", [
        {"type": "CreateFile", "path": "src/App.tsx", "code": "v2"},
        {"type": "CreateFile", "path": "src/main.tsx", "code": "main"},
    ])


def test_cli_builds_and_materializes_project(tmp_path: Path, first_batch: Path, second_batch: Path) -> None:
    out_dir = tmp_path / "site"

    result = run_cli([str(first_batch), str(second_batch), "-o", str(out_dir)], tmp_path)

    assert result.returncode == 0, f"CLI failed with stderr: {result.stderr}"
    assert (out_dir / "index.html").read_text(encoding="utf-8") == "<html></html>"
    assert (out_dir / "src" / "App.tsx").read_text(encoding="utf-8") == "v2"
    assert "├── index.html" in result.stdout
    assert "└── src/" in result.stdout
    assert "1 pending" in result.stdout


def test_cli_json_output(tmp_path: Path, first_batch: Path) -> None:
    result = run_cli([str(first_batch), "--json"], tmp_path)

    assert result.returncode == 0, result.stderr
    descriptor = json.loads(result.stdout)
    assert list(descriptor.keys()) == ["index.html", "src"]
    assert descriptor["src"]["directory"]["App.tsx"] == {"file": {"contents": "v1"}}


def test_cli_writes_mount_json(tmp_path: Path, first_batch: Path) -> None:
    mount_file = tmp_path / "mount.json"

    result = run_cli([str(first_batch), "--mount-json", str(mount_file), "--no-print-tree"], tmp_path)

    assert result.returncode == 0, result.stderr
    assert "index.html" in json.loads(mount_file.read_text(encoding="utf-8"))
    assert "├──" not in result.stdout


def test_cli_all_policy_completes_scripts(tmp_path: Path, first_batch: Path) -> None:
    result = run_cli([str(first_batch), "--policy", "all"], tmp_path)

    assert result.returncode == 0, result.stderr
    assert "0 pending" in result.stdout


def test_cli_handles_missing_input(tmp_path: Path) -> None:
    result = run_cli([str(tmp_path / "missing.json")], tmp_path)

    assert result.returncode == 2
    assert "ERROR" in result.stderr


def test_cli_reports_kind_conflict(tmp_path: Path) -> None:
    batch = _write(tmp_path / "conflict.json", [
        {"type": "CreateFile", "path": "a", "code": "file"},
        {"type": "CreateFile", "path": "a/b.txt", "code": "x"},
    ])

    result = run_cli([str(batch)], tmp_path)

    assert result.returncode == 1
    assert "/a" in result.stderr


def test_cli_rejects_malformed_action_file(tmp_path: Path) -> None:
    bad = tmp_path / "bad.json"
    bad.write_text("{oops", encoding="utf-8")

    result = run_cli([str(bad)], tmp_path)

    assert result.returncode == 1


def test_cli_dump_config(tmp_path: Path) -> None:
    result = run_cli(["--use-defaults", "--dump-config", "--policy", "all"], tmp_path)

    assert result.returncode == 0
    conf = json.loads(result.stdout)
    assert conf["completion_policy"] == "all"
    assert conf["backend_url"] == "http://localhost:3000"


def test_cli_saves_reconciled_actions(tmp_path: Path, first_batch: Path) -> None:
    state = tmp_path / "state.json"

    result = run_cli([str(first_batch), "--save-actions", str(state), "--no-print-tree"], tmp_path)

    assert result.returncode == 0, result.stderr
    records = json.loads(state.read_text(encoding="utf-8"))
    assert [r["status"] for r in records] == ["completed", "completed", "pending"]
    assert records[1]["path"] == "src/App.tsx"
