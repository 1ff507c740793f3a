"""Read summary information back from a packaged OFD archive."""

from __future__ import annotations

import posixpath
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional
from xml.etree.ElementTree import Element, ParseError, fromstring
from zipfile import BadZipFile, ZipFile

from .namespaces import OFD_NS

__all__ = ["PackageInfo", "read_package_info"]

_NS = {"ofd": OFD_NS}


@dataclass
class PackageInfo:
    """
    Summary of an OFD archive.

    Attributes:
        path: Archive location
        file_size: Archive size in bytes
        doc_id: Identifier from ``DocInfo``
        creator: Creator application stamp
        max_unit_id: ``MaxUnitID`` of the first document
        page_locations: ``BaseLoc`` of every page in order
        page_ids: Object identifiers of the pages in order
        media_files: Locations of registered media files
        draw_params: Number of registered draw parameters
        entries: Names of all archive members
    """
    path: Path
    file_size: int
    doc_id: Optional[str] = None
    creator: Optional[str] = None
    max_unit_id: int = 0
    page_locations: List[str] = field(default_factory=list)
    page_ids: List[int] = field(default_factory=list)
    media_files: List[str] = field(default_factory=list)
    draw_params: int = 0
    entries: List[str] = field(default_factory=list)

    @property
    def num_pages(self) -> int:
        return len(self.page_locations)


def _parse(archive: ZipFile, name: str) -> Element:
    try:
        return fromstring(archive.read(name))
    except KeyError as exc:
        raise ValueError(f"OFD archive is missing part {name!r}") from exc
    except ParseError as exc:
        raise ValueError(f"OFD part {name!r} is not well-formed: {exc}") from exc


def _text(element: Element, path: str) -> Optional[str]:
    found = element.find(path, _NS)
    return found.text if found is not None else None


def read_package_info(path: Path) -> PackageInfo:
    """Inspect the OFD archive at *path*.

    Raises:
        ValueError: If the file is not a readable OFD archive.
    """

    path = Path(path)
    try:
        archive = ZipFile(path)
    except BadZipFile as exc:
        raise ValueError(f"Not an OFD archive: {path}") from exc

    with archive:
        info = PackageInfo(path=path, file_size=path.stat().st_size, entries=sorted(archive.namelist()))
        ofd = _parse(archive, "OFD.xml")
        info.doc_id = _text(ofd, "ofd:DocBody/ofd:DocInfo/ofd:DocID")
        info.creator = _text(ofd, "ofd:DocBody/ofd:DocInfo/ofd:Creator")
        doc_root = _text(ofd, "ofd:DocBody/ofd:DocRoot")
        if not doc_root:
            raise ValueError("OFD.xml does not declare a DocRoot")

        doc_base = posixpath.dirname(doc_root)
        document = _parse(archive, doc_root)
        info.max_unit_id = int(_text(document, "ofd:CommonData/ofd:MaxUnitID") or 0)
        for page in document.findall("ofd:Pages/ofd:Page", _NS):
            info.page_ids.append(int(page.attrib["ID"]))
            info.page_locations.append(page.attrib["BaseLoc"])

        for res_loc in document.findall("ofd:CommonData/ofd:PublicRes", _NS):
            res = _parse(archive, posixpath.join(doc_base, res_loc.text or ""))
            for media in res.findall("ofd:MultiMedias/ofd:MultiMedia", _NS):
                media_file = _text(media, "ofd:MediaFile")
                if media_file:
                    info.media_files.append(media_file)
            info.draw_params += len(res.findall("ofd:DrawParams/ofd:DrawParam", _NS))
    return info
