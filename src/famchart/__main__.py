"""
Command line interface.

Reads a JSON document with positioned links and prints the connector paths
and the portrait geometry:

    famchart links.json --orientation left-right --png preview.png

The input looks like {"orientation": "top-bottom", "corner_radius": 20,
"links": [{"source": {...}, "target": {...}, "spouse": {...},
"coords": [...]}, ...]}. Command line options override the document.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .config import DEFAULT_CONFIG
from .elbow import connector_path
from .image import ImageBoxGeometry
from .logging_config import setup_logging
from .models import GeometryError, LinkDatum
from .orientation import create_orientation
from .preview import render_preview

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="famchart",
        description="Compute connector paths and image geometry for a family chart.",
    )
    parser.add_argument("input", help="JSON file with links ('-' for stdin)")
    parser.add_argument(
        "-o", "--orientation", help="top-bottom, bottom-top, left-right or right-left"
    )
    parser.add_argument("-r", "--corner-radius", type=float, help="box corner radius")
    parser.add_argument("--png", help="also write a PNG preview to this file")
    parser.add_argument(
        "--strict", action="store_true", help="reject non-finite coordinates"
    )
    parser.add_argument("-v", "--verbose", action="count", default=0)
    return parser.parse_args(argv)


def _load(source: str) -> dict:
    if source == "-":
        return json.load(sys.stdin)
    with open(source, encoding="utf-8") as handle:
        return json.load(handle)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if args.verbose > 1:
        setup_logging(logging.DEBUG)
    elif args.verbose:
        setup_logging(logging.INFO)
    else:
        setup_logging()

    try:
        document = _load(args.input)
    except (OSError, json.JSONDecodeError) as exc:
        print(f"famchart: cannot read {args.input}: {exc}", file=sys.stderr)
        return 1

    if not isinstance(document, dict):
        print(
            f"famchart: {args.input} must contain a JSON object, "
            f"got {type(document).__name__}",
            file=sys.stderr,
        )
        return 1

    config = DEFAULT_CONFIG.replace(strict=args.strict)

    try:
        orientation = create_orientation(
            args.orientation or document.get("orientation", "top-bottom"),
            **document.get("constants", {}),
        )
        corner_radius = (
            args.corner_radius
            if args.corner_radius is not None
            else document.get("corner_radius", 20)
        )
        links = [LinkDatum.from_dict(raw) for raw in document.get("links", [])]
        paths = [connector_path(link, orientation, config) for link in links]
        image = ImageBoxGeometry(orientation, corner_radius, config)
    except (GeometryError, ValueError, TypeError, KeyError, AttributeError) as exc:
        print(f"famchart: {exc}", file=sys.stderr)
        return 1

    json.dump(
        {"paths": [str(path) for path in paths], "image": image.as_dict()},
        sys.stdout,
        indent=2,
    )
    sys.stdout.write("\n")

    if args.png:
        boxes = {}
        for link in links:
            for node in [link.source, link.target, link.spouse, *(link.coords or [])]:
                if node is not None:
                    boxes[(node.x, node.y)] = node
        render_preview(
            paths, orientation, boxes.values(), args.png, corner_radius=corner_radius
        )

    return 0


if __name__ == "__main__":
    sys.exit(main())
