"""Eligibility of a parent container for golden-ratio resizing."""

from dataclasses import dataclass

from ..models.tree import ContainerNode, NodeKind, NodeLayout

ELIGIBLE_KINDS = frozenset({NodeKind.CON, NodeKind.WORKSPACE})
ELIGIBLE_LAYOUTS = frozenset({NodeLayout.SPLITH, NodeLayout.SPLITV})
REQUIRED_CHILDREN = 2


@dataclass(frozen=True)
class Eligibility:
    """Outcome of classifying a parent container."""

    eligible: bool
    reason: str

    def __bool__(self) -> bool:
        return self.eligible


def classify_parent(parent: ContainerNode) -> Eligibility:
    """Decide whether ``parent`` qualifies for automatic resizing.

    Both must hold:
    - kind is con or workspace, and layout is splith or splitv
    - exactly two children (more would resize unrelated siblings)
    """
    if parent.kind not in ELIGIBLE_KINDS or parent.layout not in ELIGIBLE_LAYOUTS:
        return Eligibility(
            False,
            f"Parent node is type {parent.kind.value} with layout {parent.layout.value}, not resizing",
        )

    if parent.child_count != REQUIRED_CHILDREN:
        return Eligibility(
            False,
            f"Parent node has {parent.child_count} children, skipping",
        )

    return Eligibility(True, f"Parent node is a two-way {parent.layout.value} split, resizing")
