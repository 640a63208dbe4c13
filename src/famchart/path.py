"""
Path accumulator producing SVG path descriptions.

Connectors are built from move-to and line-to commands only, so a path is
kept as a list of commands and serialised the way d3-path does it
("M100,100L100,250").
"""

import math
from typing import List, Tuple

Point = Tuple[float, float]
Segment = Tuple[Point, Point]


def format_number(value: float) -> str:
    """
    Format a coordinate like JavaScript's number to string conversion.

    Integral values lose their fractional part, NaN becomes "NaN" and
    infinities become "Infinity"/"-Infinity".
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


class Path:
    """
    Ordered sequence of move-to/line-to commands.

    Example:
        >>> path = Path()
        >>> path.move_to(0, 0)
        >>> path.line_to(0, 10)
        >>> str(path)
        'M0,0L0,10'
    """

    def __init__(self):
        self.commands: List[Tuple[str, float, float]] = []

    def move_to(self, x: float, y: float) -> None:
        self.commands.append(("M", x, y))

    def line_to(self, x: float, y: float) -> None:
        self.commands.append(("L", x, y))

    def segments(self) -> List[Segment]:
        """
        Return the drawn line segments.

        A line-to without a preceding move-to starts at the previous point,
        as in SVG; a leading line-to is ignored.
        """
        result: List[Segment] = []
        current = None
        for command, x, y in self.commands:
            if command == "L" and current is not None:
                result.append((current, (x, y)))
            current = (x, y)
        return result

    def transposed(self) -> "Path":
        """Return a copy with the x and y axes swapped."""
        swapped = Path()
        swapped.commands = [(command, y, x) for command, x, y in self.commands]
        return swapped

    def __len__(self) -> int:
        return len(self.commands)

    def __str__(self) -> str:
        return "".join(
            f"{command}{format_number(x)},{format_number(y)}"
            for command, x, y in self.commands
        )

    def __repr__(self) -> str:
        return f"Path({str(self)!r})"
