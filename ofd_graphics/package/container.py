"""Staging directories mirroring the layout of an OFD archive.

Every container owns a directory inside a temporary working area. Files such
as image resources are written there as soon as they are added; XML parts are
serialized into the same tree when the package is archived.
"""

from __future__ import annotations

import logging
import shutil
import tempfile
import threading
from pathlib import Path
from typing import List, Optional

from ..model import OFD, Document, PageContent, Res

__all__ = ["Container", "ResDir", "PageDir", "PagesDir", "DocDir", "OFDDir"]

LOGGER = logging.getLogger("ofd_graphics.package")


class Container:
    """A directory inside the staging area addressed by an archive location."""

    def __init__(self, path: Path, root: Path) -> None:
        self.path = path
        self.root = root
        self.path.mkdir(parents=True, exist_ok=True)

    @property
    def container_path(self) -> Path:
        return self.path

    @property
    def abs_loc(self) -> str:
        """Absolute location inside the archive, e.g. ``/Doc_0/Res``."""

        relative = self.path.relative_to(self.root).as_posix()
        return "/" if relative == "." else f"/{relative}"

    def loc_of(self, name: str) -> str:
        base = self.abs_loc.rstrip("/")
        return f"{base}/{name}"


class ResDir(Container):
    """Holds resource files (images) referenced from ``PublicRes.xml``."""


class PageDir(Container):
    def __init__(self, path: Path, root: Path, index: int) -> None:
        super().__init__(path, root)
        self.index = index
        self.content: Optional[PageContent] = None

    def set_content(self, content: PageContent) -> "PageDir":
        self.content = content
        return self


class PagesDir(Container):
    def __init__(self, path: Path, root: Path) -> None:
        super().__init__(path, root)
        self.page_dirs: List[PageDir] = []
        self._lock = threading.Lock()

    def new_page_dir(self) -> PageDir:
        with self._lock:
            index = self.page_dirs[-1].index + 1 if self.page_dirs else 0
            page_dir = PageDir(self.path / f"Page_{index}", self.root, index)
            self.page_dirs.append(page_dir)
        LOGGER.debug("Created page container %s", page_dir.abs_loc)
        return page_dir


class DocDir(Container):
    """Working directory of one document (``Doc_N``)."""

    def __init__(self, path: Path, root: Path, index: int) -> None:
        super().__init__(path, root)
        self.index = index
        self.document: Optional[Document] = None
        self.public_res: Optional[Res] = None
        self._pages: Optional[PagesDir] = None
        self._res: Optional[ResDir] = None
        self._lock = threading.Lock()

    def set_document(self, document: Document) -> "DocDir":
        self.document = document
        return self

    def set_public_res(self, res: Res) -> "DocDir":
        self.public_res = res
        return self

    def obtain_pages(self) -> PagesDir:
        with self._lock:
            if self._pages is None:
                self._pages = PagesDir(self.path / "Pages", self.root)
            return self._pages

    def obtain_res(self) -> ResDir:
        with self._lock:
            if self._res is None:
                base = self.public_res.base_loc if self.public_res is not None else "Res"
                self._res = ResDir(self.path / base, self.root)
            return self._res

    @property
    def pages(self) -> Optional[PagesDir]:
        return self._pages

    @property
    def res(self) -> Optional[ResDir]:
        return self._res


class OFDDir:
    """Root of the staging area and the packaging entry point."""

    def __init__(self, working_root: Optional[Path] = None) -> None:
        if working_root is not None:
            working_root.mkdir(parents=True, exist_ok=True)
        self.root = Path(
            tempfile.mkdtemp(prefix="ofd-", dir=str(working_root) if working_root else None)
        )
        self.ofd: Optional[OFD] = None
        self.docs: List[DocDir] = []
        self.cleaned = False
        LOGGER.debug("Created working area %s", self.root)

    def set_ofd(self, ofd: OFD) -> "OFDDir":
        self.ofd = ofd
        return self

    def new_doc(self) -> DocDir:
        index = len(self.docs)
        doc_dir = DocDir(self.root / f"Doc_{index}", self.root, index)
        self.docs.append(doc_dir)
        return doc_dir

    def jar(self, output_path: Path, *, compression: Optional[int] = None) -> Path:
        """Serialize the tree into the working area and archive it to *output_path*."""

        from .writer import write_package

        if self.cleaned:
            raise RuntimeError("Working area has already been cleaned")
        kwargs = {} if compression is None else {"compression": compression}
        return write_package(self, output_path, **kwargs)

    def clean(self) -> None:
        """Remove the working area; safe to call repeatedly."""

        if self.cleaned:
            return
        self.cleaned = True
        try:
            shutil.rmtree(self.root)
        except FileNotFoundError:
            pass
        except OSError as exc:
            LOGGER.warning("Failed to remove working area %s: %s", self.root, exc)
        else:
            LOGGER.debug("Removed working area %s", self.root)
