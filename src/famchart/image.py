"""
Portrait image geometry inside a person box.

Coordinates are relative to the box center at (0, 0). The image is always a
square bounding box whose corners are rounded to follow the box corners.
"""

from typing import Dict

from .config import DEFAULT_CONFIG, GeometryConfig
from .orientation import Orientation


class ImageBoxGeometry:
    """
    Position, size and corner radius of the portrait of a person box.

    Sideways layouts keep the text next to the image, so the image hugs the
    leading edge of the box with equal padding. Top/bottom layouts keep the
    text below the image and reserve more vertical padding.

    Example:
        >>> from famchart import create_orientation
        >>> geometry = ImageBoxGeometry(create_orientation("left-right"), 20)
        >>> geometry.width == geometry.height == 70
        True
    """

    def __init__(
        self,
        orientation: Orientation,
        corner_radius: float,
        config: GeometryConfig = DEFAULT_CONFIG,
    ):
        """
        Args:
            orientation: The orientation of the chart.
            corner_radius: Corner radius of the person box.
            config: Padding and reference node height.
        """
        if config.strict:
            orientation.validate()

        self._orientation = orientation
        self._corner_radius = corner_radius
        self._padding_x = config.image_padding_x
        self._padding_y = (
            config.sideways_image_padding_y
            if orientation.is_sideways
            else config.image_padding_y
        )
        self._image_radius = (config.fixed_node_height - (self._padding_x * 2)) / 2

        self._x = self._calculate_x()
        self._y = -(orientation.box_height / 2) + self._padding_y
        self._width = self._image_radius * 2
        self._height = self._image_radius * 2
        self._rx = corner_radius - self._padding_x
        self._ry = corner_radius - self._padding_x

    def _calculate_x(self) -> float:
        half_width = self._orientation.box_width / 2
        if self._orientation.is_sideways:
            return -(half_width - self._padding_x)
        return -(half_width - self._image_radius + self._padding_x)

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def rx(self) -> float:
        """Horizontal corner radius."""
        return self._rx

    @property
    def ry(self) -> float:
        """Vertical corner radius."""
        return self._ry

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def image_radius(self) -> float:
        return self._image_radius

    @property
    def image_padding_x(self) -> float:
        return self._padding_x

    @property
    def image_padding_y(self) -> float:
        return self._padding_y

    def as_dict(self) -> Dict[str, float]:
        """Return the fields the host needs to draw the image clip."""
        return {
            "x": self._x,
            "y": self._y,
            "rx": self._rx,
            "ry": self._ry,
            "width": self._width,
            "height": self._height,
        }

    def __repr__(self) -> str:
        return (
            f"ImageBoxGeometry(x={self._x}, y={self._y}, width={self._width}, "
            f"height={self._height}, rx={self._rx}, ry={self._ry})"
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, ImageBoxGeometry):
            return NotImplemented
        return self.as_dict() == other.as_dict()

