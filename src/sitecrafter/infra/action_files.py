from __future__ import annotations

"""
Action File Reader.

Loads batches of actions from JSON files. A file holds either a list of
action records or an object with an 'actions' list.
"""

import json
import logging
from typing import Any, List

from sitecrafter.domain.action_models import Action, action_from_dict, action_to_dict
from sitecrafter.domain.errors import ActionFormatError

logger = logging.getLogger(__name__)


def read_actions_file(path: str) -> List[Action]:
    """
    Decode every action record stored in a JSON file.

    Raises:
        OSError: If the file cannot be read.
        ActionFormatError: On invalid JSON or invalid records.
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            data: Any = json.load(f)
        except ValueError as e:
            raise ActionFormatError(f"Invalid JSON in '{path}': {e}") from e

    if isinstance(data, dict):
        data = data.get("actions")
    if not isinstance(data, list):
        raise ActionFormatError(f"'{path}' does not contain an action list.")

    actions = [action_from_dict(record) for record in data]
    logger.debug(f"Loaded {len(actions)} action(s) from {path}")
    return actions


def write_actions_file(path: str, actions: List[Action]) -> None:
    """Persist actions in the format accepted by read_actions_file."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump([action_to_dict(a) for a in actions], f, ensure_ascii=False, indent=2)
