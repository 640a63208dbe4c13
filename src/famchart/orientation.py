"""
Diagram orientation.

A descendants chart can grow in four directions. Each direction is a member
of the closed OrientationKind enum which knows whether it is sideways and
which sign children are laid out with. An Orientation combines a kind with
the box size and spacing constants of one render.
"""

import math
from dataclasses import dataclass, fields
from enum import Enum
from typing import Union

from .config import DEFAULT_BOX_CONSTANTS
from .models import InvalidGeometryInput


class OrientationKind(Enum):
    """Direction in which generations advance."""

    TOP_BOTTOM = "top-bottom"
    BOTTOM_TOP = "bottom-top"
    LEFT_RIGHT = "left-right"
    RIGHT_LEFT = "right-left"

    @property
    def is_sideways(self) -> bool:
        """True for the left/right layouts."""
        return self in (OrientationKind.LEFT_RIGHT, OrientationKind.RIGHT_LEFT)

    @property
    def sign(self) -> int:
        """+1 when children come after their parents on the axis, else -1."""
        if self in (OrientationKind.TOP_BOTTOM, OrientationKind.LEFT_RIGHT):
            return 1
        return -1

    @classmethod
    def from_name(cls, name: Union[str, "OrientationKind"]) -> "OrientationKind":
        """
        Resolve an orientation from one of its host names.

        Accepts the enum value ("top-bottom"), the member name ("TOP_BOTTOM"),
        the short form ("TB") or the chart layout names ("down", "up",
        "right", "left").

        Raises:
            ValueError: If the name is not a known orientation.
        """
        if isinstance(name, cls):
            return name

        key = str(name).strip().lower().replace("_", "-")
        kind = _ALIASES.get(key)
        if kind is None:
            raise ValueError(f"Unknown orientation: {name!r}")
        return kind


_ALIASES = {
    "top-bottom": OrientationKind.TOP_BOTTOM,
    "tb": OrientationKind.TOP_BOTTOM,
    "down": OrientationKind.TOP_BOTTOM,
    "bottom-top": OrientationKind.BOTTOM_TOP,
    "bt": OrientationKind.BOTTOM_TOP,
    "up": OrientationKind.BOTTOM_TOP,
    "left-right": OrientationKind.LEFT_RIGHT,
    "lr": OrientationKind.LEFT_RIGHT,
    "right": OrientationKind.LEFT_RIGHT,
    "right-left": OrientationKind.RIGHT_LEFT,
    "rl": OrientationKind.RIGHT_LEFT,
    "left": OrientationKind.RIGHT_LEFT,
}


@dataclass(frozen=True)
class Orientation:
    """
    Orientation constants for one render.

    Attributes:
        kind: Which of the four layout directions this is.
        box_width: Width of a person box.
        box_height: Height of a person box.
        x_offset: Horizontal spacing between boxes.
        y_offset: Vertical spacing between boxes.
    """

    kind: OrientationKind
    box_width: float
    box_height: float
    x_offset: float
    y_offset: float

    @property
    def is_sideways(self) -> bool:
        return self.kind.is_sideways

    def direction(self) -> int:
        """Signed multiplier applied along the generation axis."""
        return self.kind.sign

    def validate(self) -> None:
        """
        Check that every constant is a finite number.

        Raises:
            InvalidGeometryInput: If a constant is missing or not finite.
        """
        if not isinstance(self.kind, OrientationKind):
            raise InvalidGeometryInput(f"Orientation kind is invalid: {self.kind!r}")

        for f in fields(self):
            if f.name == "kind":
                continue
            value = getattr(self, f.name)
            if (
                isinstance(value, bool)
                or not isinstance(value, (int, float))
                or not math.isfinite(value)
            ):
                raise InvalidGeometryInput(
                    f"Orientation field {f.name!r} must be a finite number, "
                    f"got {value!r}"
                )


def create_orientation(
    kind: Union[str, OrientationKind] = OrientationKind.TOP_BOTTOM, **overrides
) -> Orientation:
    """
    Build an orientation from the default constants of its kind.

    Args:
        kind: Orientation kind or one of its names (see
            OrientationKind.from_name).
        **overrides: box_width, box_height, x_offset and/or y_offset.

    Returns:
        A new Orientation.

    Example:
        >>> create_orientation("top-bottom", box_width=200).box_width
        200
    """
    resolved = OrientationKind.from_name(kind)
    constants = dict(DEFAULT_BOX_CONSTANTS[resolved.value])

    unknown = set(overrides) - set(constants)
    if unknown:
        raise TypeError(f"Unknown orientation constants: {sorted(unknown)}")

    constants.update(overrides)
    return Orientation(kind=resolved, **constants)
