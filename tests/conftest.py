"""Pytest configuration and shared fixtures for famchart tests."""

import pytest

from famchart import LinkDatum, TreeNode, create_orientation


@pytest.fixture
def top_bottom():
    """Top-to-bottom orientation with a 200x80 box."""
    return create_orientation(
        "top-bottom", box_width=200, box_height=80, x_offset=40, y_offset=20
    )


@pytest.fixture
def bottom_top():
    """Bottom-to-top orientation with a 200x80 box."""
    return create_orientation(
        "bottom-top", box_width=200, box_height=80, x_offset=40, y_offset=20
    )


@pytest.fixture
def left_right():
    """Left-to-right orientation with a 260x80 box."""
    return create_orientation(
        "left-right", box_width=260, box_height=80, x_offset=40, y_offset=20
    )


@pytest.fixture
def right_left():
    """Right-to-left orientation with a 260x80 box."""
    return create_orientation(
        "right-left", box_width=260, box_height=80, x_offset=40, y_offset=20
    )


@pytest.fixture
def person():
    """Factory for positioned nodes that represent an actual person."""

    def make(x, y, family=0, name="Person"):
        return TreeNode(x=x, y=y, family=family, person={"name": name}, node_id=name)

    return make


@pytest.fixture
def worked_example(person):
    """Single parent directly above a single child."""
    return LinkDatum(source=person(100, 100), target=person(100, 300, name="Child"))
