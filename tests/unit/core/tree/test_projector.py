from __future__ import annotations

"""
Unit tests for the Mount Projector.
"""

import json

from sitecrafter.core.tree.projector import project_mount
from sitecrafter.core.tree.reconciler import reconcile_actions
from sitecrafter.domain.action_models import create_file_action
from sitecrafter.domain.tree_models import FileNode, FolderNode


def test_single_root_file_shape():
    tree = [FileNode(name="index.html", path="/index.html", content="<html></html>")]

    assert project_mount(tree) == {"index.html": {"file": {"contents": "<html></html>"}}}


def test_nested_folders_become_directories():
    tree = reconcile_actions([], [
        create_file_action("src/components/App.tsx", "app"),
        create_file_action("src/main.tsx", "main"),
    ]).tree

    assert project_mount(tree) == {
        "src": {
            "directory": {
                "components": {"directory": {"App.tsx": {"file": {"contents": "app"}}}},
                "main.tsx": {"file": {"contents": "main"}},
            }
        }
    }


def test_key_order_follows_creation_order():
    tree = reconcile_actions([], [
        create_file_action("a/b.txt", "1"),
        create_file_action("a/c.txt", "2"),
        create_file_action("a/b.txt", "3"),
    ]).tree

    descriptor = project_mount(tree)

    assert list(descriptor["a"]["directory"].keys()) == ["b.txt", "c.txt"]
    assert descriptor["a"]["directory"]["b.txt"]["file"]["contents"] == "3"


def test_key_order_is_not_alphabetical():
    tree = reconcile_actions([], [
        create_file_action("zeta.js", ""),
        create_file_action("alpha.js", ""),
    ]).tree

    assert list(project_mount(tree).keys()) == ["zeta.js", "alpha.js"]


def test_missing_content_projects_as_empty_string():
    tree = [FileNode(name="empty.txt", path="/empty.txt", content=None)]

    assert project_mount(tree)["empty.txt"] == {"file": {"contents": ""}}
    # Storage keeps the absent value
    assert tree[0].content is None


def test_folder_without_children_projects_as_empty_directory():
    folder = FolderNode(name="assets", path="/assets")
    folder.children = None

    assert project_mount([folder]) == {"assets": {"directory": {}}}


def test_empty_tree_projects_to_empty_mapping():
    assert project_mount([]) == {}


def test_projection_is_json_serializable_and_pure(vite_actions):
    tree = reconcile_actions([], vite_actions).tree
    before = repr(tree)

    descriptor = project_mount(tree)

    json.dumps(descriptor)
    assert repr(tree) == before
    assert project_mount(tree) == descriptor
