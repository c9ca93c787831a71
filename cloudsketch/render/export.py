from __future__ import annotations

import logging
import os

log = logging.getLogger(__name__)

DEFAULT_EXPORT_NAME = "cloud.png"


def save_png(image, path=None) -> str:
    path = path or DEFAULT_EXPORT_NAME
    root, ext = os.path.splitext(path)
    if not ext:
        path = root + ".png"
    parent = os.path.dirname(os.path.abspath(path))
    os.makedirs(parent, exist_ok=True)
    image.save(path, format="PNG")
    log.info("saved %s (%dx%d)", path, image.width, image.height)
    return path
