from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path so the package imports without
   installation.
2. Provides shared action and tree fixtures.
"""

import os
import sys
from typing import List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from sitecrafter.domain.action_models import (  # noqa: E402
    Action,
    ActionKind,
    create_file_action,
)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def vite_actions() -> List[Action]:
    """
    A typical first batch from the backend: a script, then nested files.
    """
    return [
        create_file_action("package.json", '{"name": "site"}'),
        create_file_action("src/main.tsx", "import App from './App';"),
        create_file_action("src/components/Header.tsx", "export const Header = () => null;"),
        create_file_action("index.html", "<html></html>"),
        Action(kind=ActionKind.RUN_SCRIPT, payload="npm install"),
    ]


@pytest.fixture(autouse=True)
def isolated_user_data(tmp_path, monkeypatch) -> None:
    """Keep config and logs written by the code under test inside tmp_path."""
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setenv("LOCALAPPDATA", str(tmp_path / "appdata"))
