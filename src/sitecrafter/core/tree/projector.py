from __future__ import annotations

"""
Mount Projector.

Derives the nested directory/file descriptor consumed by the execution
sandbox's mount call. The descriptor is rebuilt from scratch on every
invocation and follows the tree's own child order.
"""

from typing import Any, Dict, Iterable

from sitecrafter.domain.tree_models import FileNode, FolderNode, Node

MountDescriptor = Dict[str, Any]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def project_mount(tree: Iterable[Node]) -> MountDescriptor:
    """
    Project the root nodes into a mount descriptor.

    Files become {'file': {'contents': str}} and folders become
    {'directory': {...}}, keyed by node name. Missing content projects as an
    empty string; a folder without children projects as an empty directory.

    Args:
        tree: Ordered root nodes.

    Returns:
        MountDescriptor: Mapping from root names to descriptors.
    """
    return {node.name: project_node(node) for node in tree}


def project_node(node: Node) -> MountDescriptor:
    """Project a single node (and its subtree)."""
    if isinstance(node, FolderNode):
        children = getattr(node, "children", None) or []
        return {"directory": {child.name: project_node(child) for child in children}}

    if isinstance(node, FileNode):
        return {"file": {"contents": node.content or ""}}

    # Fallback for unclassified nodes
    return {"directory": {}}
