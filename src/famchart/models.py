"""
Data models for connector and image geometry.

The host diagram positions its nodes and hands them over as TreeNode and
LinkDatum instances (or as the d3-style dictionaries they are built from).
Nothing here is mutated by the geometry code.

Classes:
    GeometryError: Base class for famchart errors.
    InvalidGeometryInput: Raised in strict mode for unusable input.
    TreeNode: A positioned node of the family tree.
    LinkDatum: The nodes taking part in one connector.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional


class GeometryError(Exception):
    """Base class for errors raised by famchart."""

    pass


class InvalidGeometryInput(GeometryError):
    """Raised when a coordinate or orientation constant is unusable."""

    pass


@dataclass(frozen=True)
class TreeNode:
    """
    A node positioned by the host layout.

    Attributes:
        x: X coordinate of the box center.
        y: Y coordinate of the box center.
        family: Zero-based index of the family (marriage) this node
            belongs to.
        person: Person payload, or None for an empty/unknown person.
        node_id: Optional identifier, only used for diagnostics.
    """

    x: float
    y: float
    family: int = 0
    person: Optional[Any] = None
    node_id: Optional[str] = None

    @property
    def is_placeholder(self) -> bool:
        """True if the node stands for no actual person."""
        return self.person is None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "TreeNode":
        """
        Build a node from its d3 hierarchy representation.

        The expected shape is {"x": .., "y": .., "data": {"family": ..,
        "data": ..}}; "id" is picked up from the outer or inner mapping.
        Missing coordinates are kept as None and treated as garbage input
        by the geometry code.
        """
        data = raw.get("data") or {}
        return cls(
            x=raw.get("x"),
            y=raw.get("y"),
            family=data.get("family", 0) or 0,
            person=data.get("data"),
            node_id=raw.get("id", data.get("id")),
        )


@dataclass(frozen=True)
class LinkDatum:
    """
    One connector to draw.

    A datum with a target describes a parent (and optional spouse) to child
    link. A datum without a target describes the line between a person and
    their spouse(s); coords then lists the additional spouses between the
    first spouse and the source, in drawing order.

    Attributes:
        source: The person the link starts at.
        target: The child, or None for a spouse link.
        spouse: The (first) spouse of the source, if any.
        coords: Additional spouses, or None.
    """

    source: TreeNode
    target: Optional[TreeNode] = None
    spouse: Optional[TreeNode] = None
    coords: Optional[List[TreeNode]] = None

    @property
    def is_spouse_link(self) -> bool:
        return self.target is None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "LinkDatum":
        """Build a link from its JSON representation."""
        coords = raw.get("coords")
        return cls(
            source=TreeNode.from_dict(raw["source"]),
            target=_optional_node(raw.get("target")),
            spouse=_optional_node(raw.get("spouse")),
            coords=None if coords is None else [TreeNode.from_dict(c) for c in coords],
        )

    def to_dict(self) -> Dict[str, Any]:
        """Inverse of from_dict."""
        return {
            "source": _node_dict(self.source),
            "target": None if self.target is None else _node_dict(self.target),
            "spouse": None if self.spouse is None else _node_dict(self.spouse),
            "coords": (
                None if self.coords is None else [_node_dict(c) for c in self.coords]
            ),
        }


def _optional_node(raw: Optional[Mapping[str, Any]]) -> Optional[TreeNode]:
    if raw is None:
        return None
    return TreeNode.from_dict(raw)


def _node_dict(node: TreeNode) -> Dict[str, Any]:
    result = {
        "x": node.x,
        "y": node.y,
        "data": {"family": node.family, "data": node.person},
    }
    if node.node_id is not None:
        result["id"] = node.node_id
    return result


def coordinate(node: Optional[TreeNode], axis: str, strict: bool = False) -> float:
    """
    Read the x or y coordinate of a node.

    Args:
        node: The node to read from (may be None for a missing node).
        axis: "x" or "y".
        strict: Raise instead of returning NaN for unusable values.

    Returns:
        The coordinate as a float, or NaN for missing or non-numeric values
        when not in strict mode.

    Raises:
        InvalidGeometryInput: In strict mode, if the node is missing or the
            coordinate is not a finite number.
    """
    value = getattr(node, axis, None)

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        if strict:
            label = "missing node" if node is None else _describe(node)
            raise InvalidGeometryInput(
                f"{axis!r} coordinate of {label} is not a number: {value!r}"
            )
        return math.nan

    if strict and not math.isfinite(value):
        raise InvalidGeometryInput(
            f"{axis!r} coordinate of {_describe(node)} is not finite: {value!r}"
        )
    return float(value)


def _describe(node: TreeNode) -> str:
    if node.node_id is not None:
        return f"node {node.node_id!r}"
    return "node"
