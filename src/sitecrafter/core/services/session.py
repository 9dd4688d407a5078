from __future__ import annotations

"""
Build Session Service.

Owns the project tree and the action list for one generation session.
All mutation funnels through reconcile() and edit(); after every change the
tree is re-projected and handed to the mount target and registered
listeners.
"""

import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from sitecrafter.core.tree.editor import edit_content, find_node
from sitecrafter.core.tree.projector import MountDescriptor, project_mount
from sitecrafter.core.tree.reconciler import ReconcileResult, reconcile_actions
from sitecrafter.domain.action_models import Action
from sitecrafter.domain.constants import DEFAULT_COMPLETION_POLICY
from sitecrafter.domain.errors import MountError, NodeKindConflictError, SiteCrafterError
from sitecrafter.domain.mount import MountTarget
from sitecrafter.domain.tree_models import Node, Tree

logger = logging.getLogger(__name__)

Listener = Callable[[MountDescriptor], None]


class BuildSession:
    """
    Single writer over the in-memory project tree.
    """

    def __init__(
            self,
            mount_target: Optional[MountTarget] = None,
            completion_policy: str = DEFAULT_COMPLETION_POLICY,
    ) -> None:
        self._tree: Tree = []
        self._actions: List[Action] = []
        self._mount_target = mount_target
        self._completion_policy = completion_policy
        self._listeners: List[Listener] = []
        self._rejected: List[Action] = []

    # -------------------------------------------------------------------------
    # READ API
    # -------------------------------------------------------------------------

    @property
    def tree(self) -> Tuple[Node, ...]:
        return tuple(self._tree)

    @property
    def actions(self) -> Tuple[Action, ...]:
        return tuple(self._actions)

    @property
    def rejected(self) -> Tuple[Action, ...]:
        """Actions dropped because of a kind conflict, in rejection order."""
        return tuple(self._rejected)

    def find(self, path: str) -> Optional[Node]:
        return find_node(self._tree, path)

    def mount_descriptor(self) -> MountDescriptor:
        return project_mount(self._tree)

    def add_listener(self, callback: Listener) -> None:
        """Register a callback receiving the descriptor after each change."""
        self._listeners.append(callback)

    # -------------------------------------------------------------------------
    # MUTATION API
    # -------------------------------------------------------------------------

    def enqueue(self, actions: Iterable[Action]) -> ReconcileResult:
        """
        Queue a batch of actions as PENDING and reconcile immediately.

        Args:
            actions: Newly arrived actions, in order.

        Returns:
            ReconcileResult: Outcome of the triggered pass.
        """
        batch = [a.pending() for a in actions]
        self._actions.extend(batch)
        logger.debug(f"Queued {len(batch)} action(s); total {len(self._actions)}.")
        return self.reconcile()

    def reconcile(self) -> ReconcileResult:
        """
        Fold pending actions into the tree and refresh the mount.

        Raises:
            NodeKindConflictError: Propagated from the reconciler after the
                                   session has recorded the partial pass: the
                                   offending action is COMPLETED and listed in
                                   'rejected', actions applied before it are
                                   COMPLETED and published, later ones stay
                                   PENDING for the next pass.
            MountError: If the mount target fails.
        """
        try:
            result = reconcile_actions(
                self._tree, self._actions, completion_policy=self._completion_policy
            )
        except NodeKindConflictError as e:
            if e.result is None:
                raise
            self._actions = e.result.actions
            self._rejected.append(e.action)
            logger.warning(f"Rejected action for '{e.action.path}': {e}")
            if e.result.changed:
                self._publish()
            raise

        self._actions = result.actions
        if result.changed:
            self._publish()
        return result

    def edit(self, path: str, content: str) -> bool:
        """
        Replace the content of an existing file and refresh the mount.

        Returns:
            bool: True if a file was updated.
        """
        updated = edit_content(self._tree, path, content)
        if updated:
            logger.debug(f"Edited content of '{path}'.")
            self._publish()
        return updated

    # -------------------------------------------------------------------------
    # PRIVATE HELPERS
    # -------------------------------------------------------------------------

    def _publish(self) -> None:
        descriptor = self.mount_descriptor()

        for callback in self._listeners:
            callback(descriptor)

        if self._mount_target is None:
            return
        try:
            self._mount_target.mount(descriptor)
        except SiteCrafterError:
            raise
        except Exception as e:
            logger.error(f"Mount target failed: {e}")
            raise MountError(f"Mount failed: {e}") from e


def summarize_session(session: BuildSession) -> Dict[str, Any]:
    """Compact status counters for reporting."""
    pending = sum(1 for a in session.actions if a.is_pending)
    return {
        "actions": len(session.actions),
        "pending": pending,
        "completed": len(session.actions) - pending,
        "roots": len(session.tree),
    }
