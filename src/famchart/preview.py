"""
PNG preview of connector and image geometry.

Rasterizes person boxes, their portrait clip and the connector paths with
Pillow so computed geometry can be inspected visually while developing.
The preview does not draw any box content.
"""

import logging
import math
from typing import Iterable, List, Optional, Sequence, Tuple

from PIL import Image, ImageDraw

from .image import ImageBoxGeometry
from .models import TreeNode
from .orientation import Orientation
from .path import Path, Segment

logger = logging.getLogger(__name__)


class PreviewRenderer:
    """Renders boxes and connectors to a PNG image."""

    def __init__(
        self,
        orientation: Orientation,
        corner_radius: float = 20,
        scale: int = 2,
        margin: int = 30,
        line_width: int = 1,
    ):
        self.orientation = orientation
        self.corner_radius = corner_radius
        self.scale = scale
        self.margin = margin
        self.line_width = line_width

        # Colors
        self.bg_color = (255, 255, 255)
        self.box_fill = (245, 245, 245)
        self.box_outline = (120, 120, 120)
        self.image_fill = (200, 210, 225)
        self.line_color = (0, 0, 0)

    def _box_bounds(self, node: TreeNode) -> Tuple[float, float, float, float]:
        half_w = self.orientation.box_width / 2
        half_h = self.orientation.box_height / 2
        return node.x - half_w, node.y - half_h, node.x + half_w, node.y + half_h

    def _extent(
        self, boxes: Sequence[TreeNode], segments: Sequence[Segment]
    ) -> Tuple[float, float, float, float]:
        """Bounding box of everything that will be drawn."""
        xs: List[float] = []
        ys: List[float] = []
        for node in boxes:
            left, top, right, bottom = self._box_bounds(node)
            xs.extend((left, right))
            ys.extend((top, bottom))
        for (x1, y1), (x2, y2) in segments:
            xs.extend((x1, x2))
            ys.extend((y1, y2))

        if not xs:
            return 0, 0, 0, 0
        return min(xs), min(ys), max(xs), max(ys)

    def render(
        self,
        paths: Iterable[Path],
        boxes: Iterable[TreeNode] = (),
        output_path: str = "preview.png",
    ) -> str:
        """
        Render the preview.

        Args:
            paths: Connector paths in chart coordinates.
            boxes: Positioned nodes to draw person boxes for.
            output_path: Path to save the PNG file.

        Returns:
            Path to the saved PNG file.
        """
        boxes = [node for node in boxes if _finite(node.x, node.y)]
        segments = []
        for path in paths:
            for segment in path.segments():
                (x1, y1), (x2, y2) = segment
                if _finite(x1, y1, x2, y2):
                    segments.append(segment)
                else:
                    logger.warning("Skipping non-finite segment %s", segment)

        min_x, min_y, max_x, max_y = self._extent(boxes, segments)
        width = int(math.ceil((max_x - min_x + 2 * self.margin) * self.scale)) or 1
        height = int(math.ceil((max_y - min_y + 2 * self.margin) * self.scale)) or 1

        def to_canvas(x: float, y: float) -> Tuple[float, float]:
            return (
                (x - min_x + self.margin) * self.scale,
                (y - min_y + self.margin) * self.scale,
            )

        img = Image.new("RGB", (width, height), self.bg_color)
        draw = ImageDraw.Draw(img)

        image_box = ImageBoxGeometry(self.orientation, self.corner_radius)
        for node in boxes:
            self._draw_box(draw, node, image_box, to_canvas)

        for start, end in segments:
            draw.line(
                [to_canvas(*start), to_canvas(*end)],
                fill=self.line_color,
                width=self.line_width * self.scale,
            )

        img.save(output_path, "PNG")
        logger.info(
            "Wrote preview with %d boxes and %d segments to %s",
            len(boxes),
            len(segments),
            output_path,
        )
        return output_path

    def _draw_box(self, draw: ImageDraw.ImageDraw, node, image_box, to_canvas):
        """Draw a person box and its portrait clip."""
        left, top, right, bottom = self._box_bounds(node)
        draw.rounded_rectangle(
            [to_canvas(left, top), to_canvas(right, bottom)],
            radius=max(0, self.corner_radius * self.scale),
            fill=self.box_fill,
            outline=self.box_outline,
            width=self.scale,
        )

        image_left = node.x + image_box.x
        image_top = node.y + image_box.y
        draw.rounded_rectangle(
            [
                to_canvas(image_left, image_top),
                to_canvas(image_left + image_box.width, image_top + image_box.height),
            ],
            radius=max(0, image_box.rx * self.scale),
            fill=self.image_fill,
        )


def _finite(*values: Optional[float]) -> bool:
    return all(
        isinstance(v, (int, float)) and not isinstance(v, bool) and math.isfinite(v)
        for v in values
    )


def render_preview(
    paths: Iterable[Path],
    orientation: Orientation,
    boxes: Iterable[TreeNode] = (),
    output_path: str = "preview.png",
    **kwargs,
) -> str:
    """
    Convenience function to render a PNG preview.

    Args:
        paths: Connector paths in chart coordinates.
        orientation: Orientation used to build the paths.
        boxes: Positioned nodes to draw person boxes for.
        output_path: Path to save the PNG file.
        **kwargs: Additional arguments for PreviewRenderer.

    Returns:
        Path to the saved PNG file.
    """
    renderer = PreviewRenderer(orientation, **kwargs)
    return renderer.render(paths, boxes, output_path)
