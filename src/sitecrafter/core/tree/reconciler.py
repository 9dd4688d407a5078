from __future__ import annotations

"""
Action Reconciler.

Folds pending file-creation actions into the project tree. Parent folders
are created lazily by walking the action path one segment at a time and
searching (or inserting into) each level's children. Re-sent paths overwrite
the stored content, which makes repeated application idempotent.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from sitecrafter.domain.action_models import Action, ActionKind
from sitecrafter.domain.constants import COMPLETION_POLICIES, DEFAULT_COMPLETION_POLICY
from sitecrafter.domain.errors import NodeKindConflictError
from sitecrafter.domain.tree_models import (
    PATH_SEPARATOR,
    FileNode,
    FolderNode,
    Node,
    NodeKind,
    Tree,
    join_path,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# RESULT MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ReconcileResult:
    """
    Outcome of a single reconciliation pass.

    Attributes:
        tree: The updated root sequence (same list object as the input tree).
        actions: The action list with statuses transitioned.
        applied: Actions folded into the tree during this pass.
        changed: False when the pass was a no-op.
    """
    tree: Tree
    actions: List[Action]
    applied: List[Action] = field(default_factory=list)
    changed: bool = False

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def reconcile_actions(
        tree: Tree,
        actions: Sequence[Action],
        *,
        completion_policy: str = DEFAULT_COMPLETION_POLICY,
) -> ReconcileResult:
    """
    Apply every pending CREATE_FILE action to the tree exactly once.

    Status transition depends on the completion policy:
    - 'applied': only the CREATE_FILE actions processed in this pass become
      COMPLETED; other kinds keep whatever status their consumer manages.
      A list without pending file actions is left untouched.
    - 'all': any pending action triggers a pass and every action in the
      list becomes COMPLETED.

    On a kind conflict the pass stops at the offending action. The raised
    error carries that action and a partial ReconcileResult in which the
    actions processed so far (offender included) are COMPLETED and the
    remaining ones are still PENDING, regardless of the policy.

    Args:
        tree: Current root nodes. Mutated in place.
        actions: Full action list, in arrival order.
        completion_policy: 'applied' or 'all'.

    Returns:
        ReconcileResult: Updated tree and actions. 'changed' is True only
                         when the tree was modified.

    Raises:
        ValueError: If the completion policy is unknown.
        NodeKindConflictError: If an action path crosses a file where a folder
                               is required, or targets an existing folder.
    """
    if completion_policy not in COMPLETION_POLICIES:
        raise ValueError(f"Unknown completion policy: {completion_policy!r}")

    pending = [a for a in actions if a.is_pending]
    file_actions = [a for a in pending if a.kind is ActionKind.CREATE_FILE]
    if not file_actions and (not pending or completion_policy != "all"):
        return ReconcileResult(tree=tree, actions=list(actions))

    logger.debug(f"Reconciling {len(file_actions)} pending file action(s).")

    processed: List[Action] = []
    applied: List[Action] = []
    for action in file_actions:
        try:
            node = apply_create_file(tree, action.path, action.payload)
        except NodeKindConflictError as e:
            processed.append(action)
            e.action = action
            e.result = ReconcileResult(
                tree=tree,
                actions=_settle(actions, processed, "applied"),
                applied=applied,
                changed=bool(applied),
            )
            raise
        processed.append(action)
        if node is not None:
            applied.append(action)

    updated = _settle(actions, processed, completion_policy)

    logger.info(f"Reconciliation pass applied {len(applied)} file action(s).")
    return ReconcileResult(tree=tree, actions=updated, applied=applied, changed=bool(applied))


def apply_create_file(tree: Tree, path: Optional[str], content: Optional[str]) -> Optional[FileNode]:
    """
    Create or overwrite a single file, creating missing parent folders.

    Empty segments (leading, doubled or trailing separators) are kept as
    literal names, so an empty string path creates a file named '' at '/'.
    A missing (None) path is silently ignored.

    Args:
        tree: Root nodes. Mutated in place.
        path: Slash-delimited relative path.
        content: File contents to store.

    Returns:
        Optional[FileNode]: The created or updated file node, None if the
                            path was missing.
    """
    if path is None:
        logger.debug("Dropping file action without a path.")
        return None

    segments = path.split(PATH_SEPARATOR)
    level: List[Node] = tree
    prefix = ""

    # Parent folders
    for segment in segments[:-1]:
        prefix = join_path(prefix, segment)
        node = _find_at_level(level, prefix)
        if node is None:
            node = FolderNode(name=segment, path=prefix)
            level.append(node)
        elif not isinstance(node, FolderNode):
            raise NodeKindConflictError(prefix, NodeKind.FILE.value, NodeKind.FOLDER.value)
        level = node.children

    # Leaf
    name = segments[-1]
    prefix = join_path(prefix, name)
    node = _find_at_level(level, prefix)
    if node is None:
        leaf = FileNode(name=name, path=prefix, content=content)
        level.append(leaf)
        return leaf
    if not isinstance(node, FileNode):
        raise NodeKindConflictError(prefix, NodeKind.FOLDER.value, NodeKind.FILE.value)

    node.content = content
    return node

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _settle(actions: Sequence[Action], processed: List[Action], completion_policy: str) -> List[Action]:
    if completion_policy == "all":
        return [a.completed() for a in actions]
    done = {id(a) for a in processed}
    return [a.completed() if id(a) in done else a for a in actions]


def _find_at_level(level: List[Node], path: str) -> Optional[Node]:
    for node in level:
        if node.path == path:
            return node
    return None
