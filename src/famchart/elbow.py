"""
Orthogonal connector paths between person boxes.

Two kinds of connectors exist:
- parent to child: drops from the parents (or the gap between a couple)
  to the generation gap, runs along it and ends in a short stub just in
  front of the child box;
- spouse lines: straight lines along the sibling axis linking a person to
  one or more partners, kept slightly apart from the boxes they approach.

Both are computed in a frame where generations advance along y. Sideways
orientations evaluate the same construction in a transposed frame and
transpose the resulting path back.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from .config import DEFAULT_CONFIG, GeometryConfig
from .models import LinkDatum, TreeNode, coordinate
from .orientation import Orientation
from .path import Path

logger = logging.getLogger(__name__)


class SegmentPosition(Enum):
    """Position of a segment within a chain of spouse lines."""

    FIRST = "first"
    INTERIOR = "interior"
    LAST = "last"


# (inset at start, inset at end) per segment position
SEGMENT_INSETS: Dict[SegmentPosition, Tuple[bool, bool]] = {
    SegmentPosition.FIRST: (False, True),
    SegmentPosition.INTERIOR: (True, True),
    SegmentPosition.LAST: (True, True),
}


def segment_position(index: int, count: int) -> SegmentPosition:
    """Classify segment `index` of a chain of `count` segments."""
    if index == 0:
        return SegmentPosition.FIRST
    if index == count - 1:
        return SegmentPosition.LAST
    return SegmentPosition.INTERIOR


def segment_insets(position: SegmentPosition, inset: float) -> Tuple[float, float]:
    """Return the start and end insets for a segment position."""
    start, end = SEGMENT_INSETS[position]
    return (inset if start else 0, inset if end else 0)


@dataclass(frozen=True)
class _Frame:
    """
    Orientation constants seen from a frame where generations advance
    along y and siblings/spouses are laid out along x.
    """

    box_width: float
    box_height: float
    x_offset: float
    y_offset: float
    direction: int
    transposed: bool
    strict: bool

    @classmethod
    def from_orientation(cls, orientation: Orientation, strict: bool) -> "_Frame":
        if orientation.is_sideways:
            return cls(
                box_width=orientation.box_height,
                box_height=orientation.box_width,
                x_offset=orientation.y_offset,
                y_offset=orientation.x_offset,
                direction=orientation.direction(),
                transposed=True,
                strict=strict,
            )
        return cls(
            box_width=orientation.box_width,
            box_height=orientation.box_height,
            x_offset=orientation.x_offset,
            y_offset=orientation.y_offset,
            direction=orientation.direction(),
            transposed=False,
            strict=strict,
        )

    def point(self, node: Optional[TreeNode]) -> Tuple[float, float]:
        """Coordinates of a node in this frame."""
        x = coordinate(node, "x", self.strict)
        y = coordinate(node, "y", self.strict)
        return (y, x) if self.transposed else (x, y)

    def to_chart(self, path: Path) -> Path:
        return path.transposed() if self.transposed else path


def connector_path(
    datum: LinkDatum,
    orientation: Orientation,
    config: GeometryConfig = DEFAULT_CONFIG,
) -> Path:
    """
    Build the connector for one link.

    Args:
        datum: The link to draw. A datum without target is a spouse link.
        orientation: Orientation of the chart.
        config: Line offsets and validation mode.

    Returns:
        The connector as a Path in chart coordinates.

    Raises:
        InvalidGeometryInput: In strict mode, if a required coordinate or
            orientation constant is missing or not finite.
    """
    if config.strict:
        orientation.validate()

    frame = _Frame.from_orientation(orientation, config.strict)

    if datum.target is not None:
        path = _child_line(datum, frame)
    else:
        path = _spouse_lines(datum, frame, config)

    path = frame.to_chart(path)
    logger.debug(
        "%s link from %s: %s",
        "spouse" if datum.target is None else "child",
        datum.source.node_id,
        path,
    )
    return path


def build_path(
    datum: LinkDatum,
    orientation: Orientation,
    config: GeometryConfig = DEFAULT_CONFIG,
) -> str:
    """Return the SVG path description of the connector for `datum`."""
    return str(connector_path(datum, orientation, config))


def _child_line(datum: LinkDatum, frame: _Frame) -> Path:
    """Line from the parent(s) down to the child box."""
    source = datum.source
    direction = frame.direction
    half_box_height = frame.box_height / 2

    source_x, source_y = frame.point(source)

    if datum.spouse is not None and source.family == 0:
        # First family: start between the person and the spouse
        spouse_x, _ = frame.point(datum.spouse)
        source_x -= (source_x - spouse_x) / 2
    elif source.family > 0 or source.is_placeholder:
        # Further families, and unknown persons without spouse, start at the
        # box edge nearest the children
        source_y += half_box_height * direction

    if source.is_placeholder:
        source_x -= (frame.box_width / 2) + (frame.x_offset / 4)
        source_y += half_box_height * direction

    target_x, target_y = frame.point(datum.target)
    target_y -= direction * (half_box_height + frame.y_offset / 2)

    path = Path()
    path.move_to(source_x, source_y)
    path.line_to(source_x, target_y)
    path.line_to(target_x, target_y)
    path.line_to(target_x, target_y + direction * (frame.y_offset / 2))
    return path


def _spouse_lines(datum: LinkDatum, frame: _Frame, config: GeometryConfig) -> Path:
    """Lines between a person and each of their spouses."""
    source = datum.source
    half_box_width = frame.box_width / 2

    source_x, line_y = frame.point(source)
    spouse_x, spouse_y = frame.point(datum.spouse)

    # Stack the lines of additional marriages so they don't overlap
    if source.family > 0:
        line_y = spouse_y - (source.family * frame.direction * config.spouse_line_offset)

    path = Path()

    if not datum.coords:
        path.move_to(spouse_x + half_box_width, line_y)
        path.line_to(source_x - half_box_width, line_y)
        return path

    stops = [spouse_x]
    stops.extend(frame.point(node)[0] for node in datum.coords)
    stops.append(source_x)

    count = len(stops) - 1
    for index in range(count):
        position = segment_position(index, count)
        start_inset, end_inset = segment_insets(position, config.line_start_offset)

        path.move_to(stops[index] + half_box_width + start_inset, line_y)
        path.line_to(stops[index + 1] - half_box_width - end_inset, line_y)

    return path
