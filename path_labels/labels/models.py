"""Read-only label definition tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional


@dataclass(frozen=True)
class LabelNode:
    id: str
    name: str = ""
    children: tuple["LabelNode", ...] = field(default_factory=tuple)

    @property
    def display_name(self) -> str:
        return self.name or self.id


def parse_label_nodes(raw_nodes: Any) -> list[LabelNode]:
    """Build nodes from the ``labels`` array, skipping entries without a string id."""
    if not isinstance(raw_nodes, list):
        return []
    nodes: list[LabelNode] = []
    for raw in raw_nodes:
        if not isinstance(raw, dict) or not isinstance(raw.get("id"), str):
            continue
        name = raw.get("name")
        nodes.append(
            LabelNode(
                id=raw["id"],
                name=name if isinstance(name, str) else "",
                children=tuple(parse_label_nodes(raw.get("children"))),
            )
        )
    return nodes


def find_label(labels: Iterable[LabelNode], label_id: str) -> Optional[LabelNode]:
    """Depth-first search in document order; the first node with ``label_id`` wins."""
    stack = list(reversed(list(labels)))
    visited: set[int] = set()
    while stack:
        node = stack.pop()
        if id(node) in visited:
            continue
        visited.add(id(node))
        if node.id == label_id:
            return node
        stack.extend(reversed(node.children))
    return None
