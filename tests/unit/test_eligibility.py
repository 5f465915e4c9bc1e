"""Unit tests for the parent eligibility classifier."""

import itertools

import pytest

from i3_ratiosplit.models.tree import ContainerNode, NodeKind, NodeLayout
from i3_ratiosplit.services.eligibility import classify_parent


def make_parent(kind: NodeKind, layout: NodeLayout, child_count: int) -> ContainerNode:
    return ContainerNode(
        id=100,
        kind=kind,
        layout=layout,
        nodes=tuple(ContainerNode(id=200 + i, window=300 + i) for i in range(child_count)),
    )


ELIGIBLE_KINDS = {NodeKind.CON, NodeKind.WORKSPACE}
ELIGIBLE_LAYOUTS = {NodeLayout.SPLITH, NodeLayout.SPLITV}


@pytest.mark.parametrize(
    "kind,layout,child_count",
    list(itertools.product(NodeKind, NodeLayout, range(0, 5))),
)
def test_eligibility_grid(kind, layout, child_count):
    """Only con/workspace with splith/splitv and exactly two children qualify."""
    parent = make_parent(kind, layout, child_count)
    expected = kind in ELIGIBLE_KINDS and layout in ELIGIBLE_LAYOUTS and child_count == 2

    assert bool(classify_parent(parent)) is expected


class TestReasons:
    """Test skip reasons used for logging."""

    def test_tabbed_reason_mentions_type_and_layout(self):
        result = classify_parent(make_parent(NodeKind.CON, NodeLayout.TABBED, 2))

        assert not result.eligible
        assert "type con" in result.reason
        assert "tabbed" in result.reason

    def test_child_count_reason(self):
        result = classify_parent(make_parent(NodeKind.WORKSPACE, NodeLayout.SPLITH, 3))

        assert not result.eligible
        assert result.reason == "Parent node has 3 children, skipping"

    def test_eligible_reason(self):
        result = classify_parent(make_parent(NodeKind.WORKSPACE, NodeLayout.SPLITV, 2))

        assert result.eligible
        assert "splitv" in result.reason

    def test_layout_checked_before_child_count(self):
        result = classify_parent(make_parent(NodeKind.OUTPUT, NodeLayout.OUTPUT, 5))

        assert "type output" in result.reason
