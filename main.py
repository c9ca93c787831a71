#!/usr/bin/env python3
import argparse
import logging
import os

from cloudsketch.core.events import SavePng
from cloudsketch.core.state import CloudKind, RenderSession
from cloudsketch.render.export import DEFAULT_EXPORT_NAME
from cloudsketch.shared.theme import load_theme
from cloudsketch.ui.studio import CloudStudio


def _parse_size(value):
    parts = value.lower().split("x")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError("size must be like 960x640")
    try:
        width, height = int(parts[0]), int(parts[1])
    except ValueError:
        raise argparse.ArgumentTypeError("size must be like 960x640")
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError("size must be positive")
    return width, height


def _parse_seed(value):
    try:
        seed = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError("seed must be an integer")
    if seed < 1:
        raise argparse.ArgumentTypeError("seed must be >= 1")
    return seed


def build_parser():
    parser = argparse.ArgumentParser(description="Procedural cloud sketch")
    parser.add_argument("--kind", choices=[k.value for k in CloudKind], default=CloudKind.CUMULUS.value)
    parser.add_argument("--png", default=DEFAULT_EXPORT_NAME, help="Output PNG path")
    parser.add_argument("--size", type=_parse_size, default=(960, 640), help="Canvas size, e.g. 960x640")
    parser.add_argument("--seed", type=_parse_seed, default=None, help="Seed used for this render")
    parser.add_argument("--show-origin", action="store_true", help="Draw the debug origin cross")
    parser.add_argument("--theme", default="", help="Path to a JSON theme file")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    theme = {}
    if args.theme:
        if not os.path.exists(args.theme):
            raise FileNotFoundError(args.theme)
        theme = load_theme(args.theme)

    show_origin = args.show_origin or bool(theme.get("show_origin", False))
    if args.seed is not None:
        session = RenderSession.starting_at(args.seed, show_origin=show_origin)
    else:
        session = RenderSession(show_origin=show_origin)

    width, height = args.size
    studio = CloudStudio(width, height, session=session, theme=theme)
    result = studio.render(CloudKind(args.kind))
    path = studio.handle(SavePng(args.png))
    logging.info("%s seed=%d -> %s", result.kind.value, result.seed, path)
    return path


if __name__ == "__main__":
    main()
