from __future__ import annotations

"""
Build Action Domain Models.

Defines the immutable action records produced by the generation backend
(after markup parsing) and consumed by the tree reconciler. Includes the
conversion helpers used to read and write action files.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Optional

from sitecrafter.domain.errors import ActionFormatError

# -----------------------------------------------------------------------------
# ENUMERATIONS
# -----------------------------------------------------------------------------

class ActionKind(str, Enum):
    """Build step taxonomy emitted by the model."""
    CREATE_FILE = "CreateFile"
    CREATE_FOLDER = "CreateFolder"
    EDIT_FILE = "EditFile"
    DELETE_FILE = "DeleteFile"
    RUN_SCRIPT = "RunScript"


class ActionStatus(str, Enum):
    """Two-state lifecycle. Transitions only from PENDING to COMPLETED."""
    PENDING = "pending"
    COMPLETED = "completed"

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Action:
    """
    A single build instruction.

    Attributes:
        kind: Action type.
        path: Slash-delimited relative path (may be None for commands).
        payload: File contents for CREATE_FILE, command line for RUN_SCRIPT.
        status: Lifecycle state.
        title: Human readable label shown in the steps list.
        action_id: Sequence number assigned by the parser.
    """
    kind: ActionKind
    path: Optional[str] = None
    payload: Optional[str] = None
    status: ActionStatus = ActionStatus.PENDING
    title: str = ""
    action_id: int = 0

    @property
    def is_pending(self) -> bool:
        return self.status is ActionStatus.PENDING

    def completed(self) -> Action:
        """Return a copy of this action with COMPLETED status."""
        if self.status is ActionStatus.COMPLETED:
            return self
        return replace(self, status=ActionStatus.COMPLETED)

    def pending(self) -> Action:
        """Return a copy of this action with PENDING status."""
        if self.status is ActionStatus.PENDING:
            return self
        return replace(self, status=ActionStatus.PENDING)


def create_file_action(path: str, payload: str, **kwargs: Any) -> Action:
    """Shortcut factory for the most common action type."""
    return Action(kind=ActionKind.CREATE_FILE, path=path, payload=payload, **kwargs)

# -----------------------------------------------------------------------------
# SERIALIZATION
# -----------------------------------------------------------------------------

def action_from_dict(data: Any) -> Action:
    """
    Build an Action from its JSON representation.

    Expected keys: 'type' (required), 'path', 'code', 'status', 'title', 'id'.

    Raises:
        ActionFormatError: If the record is not a mapping or has an unknown
                           type or status.
    """
    if not isinstance(data, dict):
        raise ActionFormatError(
            f"Invalid action record: expected object, received {type(data).__name__}."
        )

    raw_kind = data.get("type")
    try:
        kind = ActionKind(raw_kind)
    except ValueError:
        raise ActionFormatError(f"Unknown action type: {raw_kind!r}") from None

    raw_status = data.get("status") or ActionStatus.PENDING.value
    try:
        status = ActionStatus(str(raw_status).lower())
    except ValueError:
        raise ActionFormatError(f"Unknown action status: {raw_status!r}") from None

    try:
        action_id = int(data.get("id") or 0)
    except (TypeError, ValueError):
        raise ActionFormatError(f"Invalid action id: {data.get('id')!r}") from None

    path = data.get("path")
    payload = data.get("code")
    return Action(
        kind=kind,
        path=str(path) if path is not None else None,
        payload=str(payload) if payload is not None else None,
        status=status,
        title=str(data.get("title") or ""),
        action_id=action_id,
    )


def action_to_dict(action: Action) -> Dict[str, Any]:
    """Inverse of action_from_dict."""
    return {
        "id": action.action_id,
        "type": action.kind.value,
        "title": action.title,
        "path": action.path,
        "code": action.payload,
        "status": action.status.value,
    }
