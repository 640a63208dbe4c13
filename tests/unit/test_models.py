"""Unit tests for the data models."""

import math

import pytest

from famchart import InvalidGeometryInput, LinkDatum, TreeNode
from famchart.models import coordinate


class TestTreeNode:
    """Tests for TreeNode dataclass."""

    def test_defaults(self):
        """A bare node is a placeholder on the first family."""
        node = TreeNode(10, 20)
        assert node.family == 0
        assert node.person is None
        assert node.is_placeholder

    def test_person_is_not_placeholder(self):
        """Any person payload, even an empty one, is a real person."""
        assert not TreeNode(0, 0, person={}).is_placeholder

    def test_from_dict(self):
        """d3 hierarchy nodes are unpacked."""
        node = TreeNode.from_dict(
            {"x": 5, "y": 6, "id": "I1", "data": {"family": 2, "data": {"name": "Ann"}}}
        )
        assert node == TreeNode(5, 6, family=2, person={"name": "Ann"}, node_id="I1")

    def test_from_dict_without_data(self):
        """Missing data gives a placeholder on the first family."""
        node = TreeNode.from_dict({"x": 1, "y": 2})
        assert node.family == 0
        assert node.is_placeholder

    def test_from_dict_null_family(self):
        """A null family index counts as the first family."""
        assert TreeNode.from_dict({"x": 1, "y": 2, "data": {"family": None}}).family == 0


class TestLinkDatum:
    """Tests for LinkDatum dataclass."""

    def test_spouse_link(self):
        """A link without target is a spouse link."""
        link = LinkDatum(source=TreeNode(0, 0), spouse=TreeNode(1, 0))
        assert link.is_spouse_link

    def test_child_link(self):
        """A link with target is a child link."""
        link = LinkDatum(source=TreeNode(0, 0), target=TreeNode(0, 1))
        assert not link.is_spouse_link

    def test_from_dict(self):
        """Nested nodes and coords are converted."""
        link = LinkDatum.from_dict(
            {
                "source": {"x": 700, "y": 100, "data": {"family": 0, "data": {}}},
                "spouse": {"x": 100, "y": 100},
                "target": None,
                "coords": [{"x": 400, "y": 100}],
            }
        )
        assert link.is_spouse_link
        assert link.spouse == TreeNode(100, 100)
        assert link.coords == [TreeNode(400, 100)]

    def test_from_dict_requires_source(self):
        """The source node is mandatory."""
        with pytest.raises(KeyError):
            LinkDatum.from_dict({"target": {"x": 0, "y": 0}})

    def test_to_dict(self):
        """to_dict produces the shape from_dict reads."""
        link = LinkDatum(
            source=TreeNode(1, 2, family=1, person={"name": "Ann"}, node_id="I1"),
            target=TreeNode(3, 4),
        )
        assert link.to_dict() == {
            "source": {
                "x": 1,
                "y": 2,
                "data": {"family": 1, "data": {"name": "Ann"}},
                "id": "I1",
            },
            "target": {"x": 3, "y": 4, "data": {"family": 0, "data": None}},
            "spouse": None,
            "coords": None,
        }
        assert LinkDatum.from_dict(link.to_dict()) == link


class TestCoordinate:
    """Tests for coordinate()."""

    def test_reads_axis(self):
        """Numbers are returned as floats."""
        node = TreeNode(3, 4)
        assert coordinate(node, "x") == 3.0
        assert coordinate(node, "y") == 4.0

    @pytest.mark.parametrize("value", [None, "12", True])
    def test_lenient_non_numbers(self, value):
        """Non-numeric values become NaN."""
        assert math.isnan(coordinate(TreeNode(value, 0), "x"))

    def test_lenient_missing_node(self):
        """A missing node gives NaN."""
        assert math.isnan(coordinate(None, "y"))

    def test_lenient_keeps_infinity(self):
        """Infinite values pass through in lenient mode."""
        assert coordinate(TreeNode(math.inf, 0), "x") == math.inf

    @pytest.mark.parametrize("value", [None, "12", math.nan, -math.inf])
    def test_strict(self, value):
        """Strict mode raises for unusable values."""
        with pytest.raises(InvalidGeometryInput, match="'x' coordinate"):
            coordinate(TreeNode(value, 0), "x", strict=True)
