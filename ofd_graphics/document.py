"""Graphics OFD document: identifiers, resources, pages and packaging."""

from __future__ import annotations

import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import List, Optional

from PIL import Image

from .config import DocumentConfig
from .exceptions import (
    ConfigurationError,
    DocumentClosedError,
    OFDGraphicsError,
    PackagingError,
    ResourceIngestionError,
)
from .identifiers import STID, IDAllocator
from .images import ImageSource, TARGET_FORMAT, normalize_image, write_png
from .model import (
    OFD,
    CommonData,
    DocBody,
    DocInfo,
    Document,
    DrawParam,
    MultiMedia,
    PageArea,
    PageContent,
    PageRef,
    Res,
)
from .package import OFDDir
from .package.namespaces import DOC_ROOT_NAME, PUBLIC_RES_NAME
from .page import PageGraphics
from .resources import ResourceKind, ResourceRegistry
from .utils import PathLike, validate_output_path

LOGGER = logging.getLogger("ofd_graphics.document")

__all__ = ["OFDGraphicsDocument"]


class OFDGraphicsDocument:
    """In-memory OFD document that is packaged when closed.

    Example usage:
        with OFDGraphicsDocument("out.ofd") as doc:
            page = doc.new_page(100, 200)
            res_id = doc.add_image("logo.png")
            page.draw_image(res_id, 10, 10, 40, 40)

    All mutating operations are thread-safe and rejected once the document
    is closed. Closing commits ``MaxUnitID``, writes the archive and always
    removes the working area, even if packaging fails.
    """

    def __init__(self, out_path: Optional[PathLike], *, config: Optional[DocumentConfig] = None) -> None:
        self.out_path: Optional[Path] = validate_output_path(out_path)
        self.config = config or DocumentConfig.from_env()
        self.closed = False
        self._lock = threading.RLock()
        self.allocator = IDAllocator()

        self.ofd_dir = OFDDir(self.config.resolve_working_root())
        self.doc_dir = self.ofd_dir.new_doc()

        doc_info = DocInfo(
            creator=self.config.creator,
            creator_version=self.config.creator_version,
        )
        body = DocBody(doc_info=doc_info, doc_root=f"Doc_{self.doc_dir.index}/{DOC_ROOT_NAME}")
        self.ofd_dir.set_ofd(OFD().add_doc_body(body))

        # Pages list is filled as pages are created.
        self.cdata = CommonData(page_area=self.config.default_page_area)
        self.document = Document(common_data=self.cdata)
        self.doc_dir.set_document(self.document)

        self.public_res = Res(base_loc="Res")
        self.doc_dir.set_public_res(self.public_res)
        self.cdata.add_public_res(PUBLIC_RES_NAME)
        self.resources = ResourceRegistry(self.public_res)

        LOGGER.debug("Created OFD document %s -> %s", doc_info.doc_id, self.out_path)

    # ------------------------------------------------------------------
    # Identifiers
    # ------------------------------------------------------------------
    @property
    def max_unit_id(self) -> int:
        """Highest identifier issued so far."""

        return self.allocator.current

    def _ensure_open(self) -> None:
        if self.closed:
            raise DocumentClosedError()

    def new_id(self) -> STID:
        """Generate a new object identifier within this document."""

        with self._lock:
            self._ensure_open()
            return self.allocator.next_id()

    # ------------------------------------------------------------------
    # Pages
    # ------------------------------------------------------------------
    @property
    def pages(self) -> List[PageRef]:
        return list(self.document.pages)

    @property
    def page_count(self) -> int:
        return len(self.document.pages)

    def new_page(
        self,
        width: Optional[float] = None,
        height: Optional[float] = None,
        *,
        area: Optional[PageArea] = None,
    ) -> PageGraphics:
        """Create a page and return its handle.

        Sizes are in millimetres. Without ``area`` or ``width``/``height`` the
        document default page size is used and not repeated on the page.
        """

        if area is None and (width is not None or height is not None):
            if width is None or height is None:
                raise ValueError("Both width and height are required to size a page")
            area = PageArea.of_size(width, height)

        with self._lock:
            self._ensure_open()
            pages_dir = self.doc_dir.obtain_pages()
            page_dir = pages_dir.new_page_dir()
            page_id = self.allocator.next_id()
            page_ref = PageRef(id=page_id, base_loc=f"Pages/Page_{page_dir.index}/Content.xml")
            self.document.pages.append(page_ref)

            content = PageContent(area=area)
            page_dir.set_content(content)

        LOGGER.debug("Added page %s with ID %s", page_dir.index, page_id)
        return PageGraphics(self, page_dir, content, area or self.cdata.page_area, page_id)

    # ------------------------------------------------------------------
    # Resources
    # ------------------------------------------------------------------
    def has_media(self, resource_id: Optional[int]) -> bool:
        manifest = self.resources.get(ResourceKind.MEDIA)
        if resource_id is None or manifest is None:
            return False
        return int(resource_id) in manifest.items

    def add_image(self, image: Optional[ImageSource]) -> Optional[STID]:
        """Store *image* as a PNG media resource and return its identifier.

        Returns ``None`` when *image* is ``None``. The image is decoded before
        anything is written, and a failed or interrupted ingestion leaves no
        file behind in the working area.

        Raises:
            TypeError: If *image* is not a supported image source.
            ResourceIngestionError: If the image cannot be decoded or written.
            DocumentClosedError: If the document was closed before the image
                could be registered.
        """

        if image is None:
            return None
        self._ensure_open()

        try:
            normalized = normalize_image(image)
        except (OSError, ValueError, Image.DecompressionBombError) as exc:
            LOGGER.error("Failed to decode image resource: %s", exc)
            raise ResourceIngestionError(f"Failed to decode image resource: {exc}") from exc

        res_dir = self.doc_dir.obtain_res()
        try:
            fd, name = tempfile.mkstemp(prefix="res", suffix=".png", dir=res_dir.container_path)
            os.close(fd)
        except OSError as exc:
            self._ensure_open()
            raise ResourceIngestionError(f"Unable to create image resource file: {exc}") from exc

        img_path = Path(name)
        registered = False
        try:
            try:
                write_png(normalized, img_path)
            except (OSError, ValueError) as exc:
                self._ensure_open()
                LOGGER.error("Failed to write image resource %s: %s", img_path.name, exc)
                raise ResourceIngestionError(f"Failed to write image resource: {exc}") from exc

            with self._lock:
                self._ensure_open()
                res_id = self.allocator.next_id()
                media = MultiMedia(
                    id=res_id,
                    media_file=res_dir.loc_of(img_path.name),
                    type="Image",
                    format=TARGET_FORMAT,
                )
                self.resources.register_media(media)
                registered = True
        finally:
            if not registered:
                img_path.unlink(missing_ok=True)

        LOGGER.debug("Registered image %s as media %s", media.media_file, res_id)
        return res_id

    def add_draw_param(self, draw_param: Optional[DrawParam]) -> Optional[STID]:
        """Register *draw_param* in the public resources and return its identifier."""

        if draw_param is None:
            return None
        with self._lock:
            self._ensure_open()
            obj_id = self.allocator.next_id()
            draw_param.obj_id = obj_id
            self.resources.register_draw_param(draw_param)
        LOGGER.debug("Registered draw parameter %s", obj_id)
        return obj_id

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def close(self) -> None:
        """Package the document and remove the working area.

        Calling ``close`` again is a no-op.

        Raises:
            ConfigurationError: If no output path is configured.
            PackagingError: If serialization or archiving fails.
        """

        with self._lock:
            if self.closed:
                return
            self.closed = True

        try:
            self.cdata.max_unit_id = self.allocator.current
            if self.out_path is None:
                raise ConfigurationError("OFD output path is not set; nothing was written")
            target = Path(self.out_path).resolve()
            try:
                self.ofd_dir.jar(target, compression=self.config.compression)
            except OFDGraphicsError:
                raise
            except Exception as exc:
                LOGGER.error("Failed to package OFD document to %s: %s", target, exc)
                raise PackagingError(f"Failed to package OFD document to {target}: {exc}") from exc
            LOGGER.info(
                "Wrote OFD document %s (%d page(s), MaxUnitID=%d)",
                target,
                self.page_count,
                self.cdata.max_unit_id,
            )
        finally:
            self.ofd_dir.clean()

    finalize = close

    def __enter__(self) -> "OFDGraphicsDocument":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"OFDGraphicsDocument(out_path='{self.out_path}', pages={self.page_count}, {state})"
