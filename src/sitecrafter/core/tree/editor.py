from __future__ import annotations

"""
Tree Lookup and Edit Operations.

Provides the read helpers used by presentation layers and the single
externally triggered mutation besides reconciliation: replacing the content
of an existing file.
"""

import logging
from typing import Iterable, Optional, Tuple

from sitecrafter.domain.errors import NodeKindConflictError
from sitecrafter.domain.tree_models import (
    FileNode,
    FolderNode,
    Node,
    NodeKind,
    normalize_node_path,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# LOOKUP
# -----------------------------------------------------------------------------

def find_node(tree: Iterable[Node], path: str) -> Optional[Node]:
    """
    Locate a node by path anywhere in the tree.

    Accepts both the stored form ('/src/App.tsx') and the relative action
    form ('src/App.tsx').
    """
    if not path:
        return None
    target = normalize_node_path(path)
    for node in tree:
        if node.path == target:
            return node
        if isinstance(node, FolderNode) and _is_ancestor(node.path, target):
            return find_node(node.children, target)
    return None


def count_nodes(tree: Iterable[Node]) -> Tuple[int, int]:
    """
    Count folders and files in the tree.

    Returns:
        Tuple[int, int]: (folders, files).
    """
    folders = files = 0
    for node in tree:
        if isinstance(node, FolderNode):
            folders += 1
            sub_folders, sub_files = count_nodes(node.children)
            folders += sub_folders
            files += sub_files
        else:
            files += 1
    return folders, files

# -----------------------------------------------------------------------------
# MUTATION
# -----------------------------------------------------------------------------

def edit_content(tree: Iterable[Node], path: str, content: str) -> bool:
    """
    Replace the content of the file stored at path.

    Only the target node is touched: siblings, ancestors and their children
    lists keep their identity.

    Args:
        tree: Root nodes.
        path: File path (stored or relative form).
        content: New file contents.

    Returns:
        bool: True if a file was updated, False if nothing exists at path.

    Raises:
        NodeKindConflictError: If path designates a folder.
    """
    node = find_node(tree, path)
    if node is None:
        logger.debug(f"Edit ignored, no node at '{path}'.")
        return False
    if not isinstance(node, FileNode):
        raise NodeKindConflictError(node.path, NodeKind.FOLDER.value, NodeKind.FILE.value)

    node.content = content
    return True

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _is_ancestor(folder_path: str, target: str) -> bool:
    return target.startswith(folder_path + "/")
