from __future__ import annotations

"""
Integration tests for FileSystem Infrastructure.

Validates user data dir resolution, path normalization, mount
materialization and action file reading.
"""

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from sitecrafter.core.services.session import BuildSession
from sitecrafter.domain.action_models import ActionKind, create_file_action
from sitecrafter.domain.errors import ActionFormatError, MountError
from sitecrafter.infra.action_files import read_actions_file, write_actions_file
from sitecrafter.infra.fs import (
    DirectoryMountTarget,
    get_user_data_dir,
    normalize_path,
    safe_mkdir,
    write_descriptor_json,
)

# -----------------------------------------------------------------------------
# PATH RESOLUTION TESTS
# -----------------------------------------------------------------------------

def test_get_user_data_dir_unix(tmp_path: Path) -> None:
    with patch("os.name", "posix"):
        path = get_user_data_dir()
    assert Path(path) == tmp_path / "home" / ".sitecrafter"
    assert Path(path).is_dir()


def test_normalize_path_expansion() -> None:
    with patch.dict(os.environ, {"TEST_VAR": "my_folder"}):
        path = normalize_path("$TEST_VAR/sub", fallback=".")
        assert path.endswith(os.path.join("my_folder", "sub"))


def test_normalize_path_fallback() -> None:
    assert normalize_path("   ", fallback="/tmp") == os.path.abspath("/tmp")


def test_safe_mkdir(tmp_path: Path) -> None:
    ok, err = safe_mkdir(str(tmp_path / "a" / "b"))
    assert ok is True
    assert err is None

# -----------------------------------------------------------------------------
# MOUNT MATERIALIZATION TESTS
# -----------------------------------------------------------------------------

def test_directory_mount_writes_descriptor(tmp_path: Path) -> None:
    target = DirectoryMountTarget(str(tmp_path / "site"))
    session = BuildSession(mount_target=target)

    session.enqueue([
        create_file_action("index.html", "<html></html>"),
        create_file_action("src/components/App.tsx", "app"),
    ])

    assert (tmp_path / "site" / "index.html").read_text(encoding="utf-8") == "<html></html>"
    assert (tmp_path / "site" / "src" / "components" / "App.tsx").read_text(encoding="utf-8") == "app"
    assert target.files_written == 2


def test_directory_mount_rejects_escaping_names(tmp_path: Path) -> None:
    target = DirectoryMountTarget(str(tmp_path / "site"))

    with pytest.raises(MountError):
        target.mount({"..": {"directory": {"evil.txt": {"file": {"contents": "x"}}}}})


def test_directory_mount_rejects_unnamed_file(tmp_path: Path) -> None:
    target = DirectoryMountTarget(str(tmp_path / "site"))

    with pytest.raises(MountError, match="empty name"):
        target.mount({"src": {"directory": {"": {"file": {"contents": "x"}}}}})

    assert (tmp_path / "site" / "src").is_dir()


def test_directory_mount_reports_blocked_root(tmp_path: Path) -> None:
    blocker = tmp_path / "site"
    blocker.write_text("not a dir", encoding="utf-8")

    with pytest.raises(MountError, match="mount root"):
        DirectoryMountTarget(str(blocker)).mount({"a.txt": {"file": {"contents": "A"}}})


def test_directory_mount_rejects_unknown_entries(tmp_path: Path) -> None:
    target = DirectoryMountTarget(str(tmp_path / "site"))

    with pytest.raises(MountError):
        target.mount({"a": {"symlink": "b"}})


def test_write_descriptor_json(tmp_path: Path) -> None:
    out = tmp_path / "out" / "mount.json"
    descriptor = {"a.txt": {"file": {"contents": "A"}}}

    write_descriptor_json(str(out), descriptor)

    assert json.loads(out.read_text(encoding="utf-8")) == descriptor

# -----------------------------------------------------------------------------
# ACTION FILE TESTS
# -----------------------------------------------------------------------------

def test_action_file_round_trip(tmp_path: Path) -> None:
    path = str(tmp_path / "actions.json")
    actions = [create_file_action("a.txt", "A", action_id=1)]

    write_actions_file(path, actions)

    assert read_actions_file(path) == actions


def test_action_file_accepts_wrapped_list(tmp_path: Path) -> None:
    path = tmp_path / "actions.json"
    path.write_text(json.dumps({"actions": [{"type": "RunScript", "code": "npm i"}]}), encoding="utf-8")

    actions = read_actions_file(str(path))

    assert actions[0].kind is ActionKind.RUN_SCRIPT


@pytest.mark.parametrize("content", ["{broken", '{"actions": 3}', '"text"'])
def test_action_file_rejects_invalid_content(tmp_path: Path, content: str) -> None:
    path = tmp_path / "actions.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ActionFormatError):
        read_actions_file(str(path))
