"""
famchart - Connector and portrait geometry for descendants charts

Computes, for an already positioned family tree diagram, the orthogonal
connector paths between parents, spouses and children and the geometry of
the portrait image inside each person box.

Example:
    >>> from famchart import LinkDatum, TreeNode, build_path, create_orientation
    >>> orientation = create_orientation(
    ...     "top-bottom", box_width=200, box_height=80, x_offset=40, y_offset=20
    ... )
    >>> link = LinkDatum(
    ...     source=TreeNode(100, 100, person={}), target=TreeNode(100, 300)
    ... )
    >>> build_path(link, orientation)
    'M100,100L100,250L100,250L100,260'
"""

from .config import DEFAULT_CONFIG, GeometryConfig
from .elbow import (
    SegmentPosition,
    build_path,
    connector_path,
    segment_insets,
    segment_position,
)
from .image import ImageBoxGeometry
from .links import build_paths, collect_links
from .models import GeometryError, InvalidGeometryInput, LinkDatum, TreeNode
from .orientation import Orientation, OrientationKind, create_orientation
from .path import Path
from .preview import PreviewRenderer, render_preview

__version__ = "0.3.0"

__all__ = [
    # Configuration
    "GeometryConfig",
    "DEFAULT_CONFIG",
    # Orientation
    "Orientation",
    "OrientationKind",
    "create_orientation",
    # Models
    "TreeNode",
    "LinkDatum",
    "GeometryError",
    "InvalidGeometryInput",
    # Geometry
    "ImageBoxGeometry",
    "Path",
    "build_path",
    "connector_path",
    "SegmentPosition",
    "segment_position",
    "segment_insets",
    # Graph links
    "collect_links",
    "build_paths",
    # Preview
    "PreviewRenderer",
    "render_preview",
]
