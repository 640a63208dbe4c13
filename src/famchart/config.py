"""
Configuration for famchart geometry.

All spacing constants used by the image box and connector calculations are
collected here so they can be passed explicitly into the geometry functions
instead of being buried in the arithmetic.

Classes:
    GeometryConfig: Padding, line offsets and validation mode.

Constants:
    DEFAULT_CONFIG: Shared default configuration.
    DEFAULT_BOX_CONSTANTS: Default box size and spacing per orientation.
"""

from dataclasses import dataclass, replace
from typing import Dict


@dataclass(frozen=True)
class GeometryConfig:
    """
    Constants consumed by the geometry calculations.

    Attributes:
        fixed_node_height: Reference box height used to size the portrait.
        image_padding_x: Horizontal padding around the portrait.
        image_padding_y: Vertical padding for top/bottom orientations.
        sideways_image_padding_y: Vertical padding for left/right orientations.
        spouse_line_offset: Distance between stacked marriage lines.
        line_start_offset: Gap left between a spouse line and a box.
        strict: Validate inputs and raise InvalidGeometryInput instead of
            letting NaN propagate into the output.
    """

    fixed_node_height: float = 80
    image_padding_x: float = 5
    image_padding_y: float = 10
    sideways_image_padding_y: float = 5
    spouse_line_offset: float = 5
    line_start_offset: float = 2
    strict: bool = False

    def replace(self, **changes) -> "GeometryConfig":
        """Return a copy with the given fields changed."""
        return replace(self, **changes)


DEFAULT_CONFIG = GeometryConfig()

# box_width, box_height, x_offset, y_offset keyed by orientation name
DEFAULT_BOX_CONSTANTS: Dict[str, Dict[str, float]] = {
    "top-bottom": {"box_width": 150, "box_height": 175, "x_offset": 30, "y_offset": 40},
    "bottom-top": {"box_width": 150, "box_height": 175, "x_offset": 30, "y_offset": 40},
    "left-right": {"box_width": 260, "box_height": 80, "x_offset": 40, "y_offset": 20},
    "right-left": {"box_width": 260, "box_height": 80, "x_offset": 40, "y_offset": 20},
}
