"""Page handle returned by :meth:`OFDGraphicsDocument.new_page`."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from .identifiers import STID
from .model import Box, ImageObject, PageArea, PageContent
from .package.container import PageDir

if TYPE_CHECKING:  # pragma: no cover
    from .document import OFDGraphicsDocument

__all__ = ["PageGraphics"]


class PageGraphics:
    """Handle bound to one page container.

    It remembers the resolved page size and places registered media on the
    page's content layer. Painting primitives are not part of this handle.
    """

    def __init__(
        self,
        document: "OFDGraphicsDocument",
        page_dir: PageDir,
        content: PageContent,
        size: PageArea,
        page_id: STID,
    ) -> None:
        self.document = document
        self.page_dir = page_dir
        self.content = content
        self.size = size
        self.page_id = page_id
        self._lock = threading.Lock()

    @property
    def index(self) -> int:
        return self.page_dir.index

    @property
    def box(self) -> Box:
        return self.size.box

    @property
    def width(self) -> float:
        return self.box.width

    @property
    def height(self) -> float:
        return self.box.height

    def new_id(self) -> STID:
        return self.document.new_id()

    def draw_image(self, resource_id: int, x: float, y: float, width: float, height: float) -> STID:
        """Place the media resource *resource_id* at ``(x, y)`` scaled to ``width x height``."""

        if not self.document.has_media(resource_id):
            raise ValueError(f"Unknown media resource: {resource_id}")
        boundary = Box(x, y, width, height)
        with self._lock:
            if self.content.layer_id is None:
                self.content.layer_id = self.document.new_id()
            obj = ImageObject(id=self.document.new_id(), resource_id=STID(int(resource_id)), boundary=boundary)
            self.content.objects.append(obj)
        return obj.id

    def __repr__(self) -> str:
        return f"PageGraphics(index={self.index}, id={int(self.page_id)}, box='{self.box}')"
