"""
Unit tests for find_parent().

Covers direct/nested lookups, the not-found cases (absent id, root, floating
window), very deep trees, and randomly generated trees.
"""

import random

import pytest

from i3_ratiosplit.models.tree import ContainerNode, NodeKind, NodeLayout
from i3_ratiosplit.services.parent_locator import find_parent
from tests.fixtures.mock_i3 import (
    MockI3Con,
    create_container,
    create_tree,
    create_window,
    create_workspace,
)


@pytest.fixture
def snapshot():
    """root -> output -> content -> [ws 10 (splith: 11, con 12 (splitv: 13, 14)), ws 20 (15)]"""
    tree = create_tree(
        create_workspace(
            10, "1", "splith",
            create_window(11),
            create_container(12, "splitv", create_window(13), create_window(14)),
        ),
        create_workspace(20, "2", "splitv", create_window(15)),
    )
    return ContainerNode.from_i3_con(tree)


def random_tree(rng: random.Random, size: int) -> tuple[ContainerNode, dict[int, int]]:
    """Build a random tree with unique ids; returns (root, {child_id: parent_id})."""
    parents: dict[int, int] = {}
    children: dict[int, list[int]] = {0: []}
    for node_id in range(1, size):
        parent_id = rng.randrange(node_id)
        parents[node_id] = parent_id
        children[parent_id].append(node_id)
        children[node_id] = []

    built: dict[int, ContainerNode] = {}
    for node_id in reversed(range(size)):
        built[node_id] = ContainerNode(
            id=node_id,
            kind=NodeKind.ROOT if node_id == 0 else NodeKind.CON,
            layout=rng.choice(list(NodeLayout)),
            nodes=tuple(built[c] for c in children[node_id]),
        )
    return built[0], parents


class TestFindParent:
    """Test direct and nested parent lookup."""

    def test_direct_child_of_workspace(self, snapshot):
        parent = find_parent(11, snapshot)

        assert parent is not None
        assert parent.id == 10

    def test_nested_child(self, snapshot):
        parent = find_parent(14, snapshot)

        assert parent.id == 12
        assert parent.child_ids == [13, 14]

    def test_container_child(self, snapshot):
        assert find_parent(12, snapshot).id == 10

    def test_second_workspace(self, snapshot):
        assert find_parent(15, snapshot).id == 20

    def test_workspace_parent_is_content(self, snapshot):
        assert find_parent(20, snapshot).id == 3


class TestNotFound:
    """Test the cases that have no parent in the snapshot."""

    def test_absent_id(self, snapshot):
        assert find_parent(424242, snapshot) is None

    def test_root_has_no_parent(self, snapshot):
        assert find_parent(snapshot.id, snapshot) is None

    def test_floating_window_has_no_parent(self):
        workspace = create_workspace(10, "1", "splith", create_window(11))
        workspace.floating_nodes.append(
            MockI3Con(id=50, type="floating_con", layout="splith", nodes=[create_window(51)])
        )
        snapshot = ContainerNode.from_i3_con(create_tree(workspace))

        assert find_parent(51, snapshot) is None
        assert find_parent(50, snapshot) is None

    def test_single_node_tree(self):
        assert find_parent(1, ContainerNode(id=1)) is None


class TestDeepAndRandomTrees:
    """Test traversal on pathological and generated trees."""

    def test_deep_chain(self):
        depth = 10000
        node = ContainerNode(id=depth)
        for node_id in reversed(range(depth)):
            node = ContainerNode(id=node_id, layout=NodeLayout.SPLITV, nodes=(node,))

        parent = find_parent(depth, node)

        assert parent is not None
        assert parent.id == depth - 1

    @pytest.mark.parametrize("seed", range(20))
    def test_every_node_finds_its_parent(self, seed):
        rng = random.Random(seed)
        tree, parents = random_tree(rng, rng.randint(2, 200))

        for child_id, parent_id in parents.items():
            assert find_parent(child_id, tree).id == parent_id

    @pytest.mark.parametrize("seed", range(10))
    def test_absent_ids_are_not_found(self, seed):
        rng = random.Random(seed)
        size = rng.randint(1, 100)
        tree, _ = random_tree(rng, size)

        for absent_id in (-1, size, size + rng.randint(1, 1000)):
            assert find_parent(absent_id, tree) is None
