"""Lazily created resource manifests shared across a document."""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Dict, Optional

from .model import DrawParam, DrawParams, MultiMedia, MultiMedias, Res, Resource

__all__ = ["ResourceKind", "ResourceRegistry"]

LOGGER = logging.getLogger("ofd_graphics.resources")


class ResourceKind(str, Enum):
    MEDIA = "media"
    DRAW_PARAM = "draw_param"


_FACTORIES = {
    ResourceKind.MEDIA: MultiMedias,
    ResourceKind.DRAW_PARAM: DrawParams,
}


class ResourceRegistry:
    """Hands out at most one manifest per :class:`ResourceKind`.

    A manifest is appended to the public resource listing the first time it
    is requested, so manifests that never receive an entry are not packaged.
    """

    def __init__(self, public_res: Res) -> None:
        self.public_res = public_res
        self._manifests: Dict[ResourceKind, Resource] = {}
        self._lock = threading.RLock()

    def obtain(self, kind: ResourceKind) -> Resource:
        kind = ResourceKind(kind)
        with self._lock:
            manifest = self._manifests.get(kind)
            if manifest is None:
                manifest = _FACTORIES[kind]()
                self.public_res.add_resource(manifest)
                self._manifests[kind] = manifest
                LOGGER.debug("Registered %s manifest in public resources", kind.value)
            return manifest

    def get(self, kind: ResourceKind) -> Optional[Resource]:
        with self._lock:
            return self._manifests.get(ResourceKind(kind))

    def register_media(self, media: MultiMedia) -> None:
        with self._lock:
            self.obtain(ResourceKind.MEDIA).add(media)

    def register_draw_param(self, param: DrawParam) -> None:
        with self._lock:
            self.obtain(ResourceKind.DRAW_PARAM).add(param)
