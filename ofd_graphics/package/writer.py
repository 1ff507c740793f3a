"""Serialize a staged OFD tree and write it as a zip archive."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable
from zipfile import ZIP_DEFLATED, ZipFile, ZipInfo

from ..model import MultiMedias
from .container import DocDir, OFDDir
from .namespaces import CONTENT_NAME, DOC_ROOT_NAME, OFD_ZIP_TIMESTAMP, PUBLIC_RES_NAME
from .parts import build_content_xml, build_document_xml, build_ofd_xml, build_public_res_xml

__all__ = ["write_package", "stage_xml_parts"]

LOGGER = logging.getLogger("ofd_graphics.package")


def _zipinfo(name: str, compression: int) -> ZipInfo:
    info = ZipInfo(name)
    info.date_time = OFD_ZIP_TIMESTAMP
    info.compress_type = compression
    info.external_attr = 0o644 << 16
    return info


def _stage_doc(doc_dir: DocDir) -> None:
    if doc_dir.document is None:
        raise ValueError(f"Document container {doc_dir.abs_loc} has no document")
    (doc_dir.path / DOC_ROOT_NAME).write_bytes(build_document_xml(doc_dir.document))
    if doc_dir.public_res is not None:
        (doc_dir.path / PUBLIC_RES_NAME).write_bytes(build_public_res_xml(doc_dir.public_res))
    pages = doc_dir.pages
    if pages is None:
        return
    for page_dir in pages.page_dirs:
        if page_dir.content is None:
            raise ValueError(f"Page container {page_dir.abs_loc} has no content")
        (page_dir.path / CONTENT_NAME).write_bytes(build_content_xml(page_dir.content))


def stage_xml_parts(package: OFDDir) -> None:
    """Write every XML part of the tree into the working area."""

    if package.ofd is None:
        raise ValueError("OFD entry document is not set")
    (package.root / "OFD.xml").write_bytes(build_ofd_xml(package.ofd))
    for doc_dir in package.docs:
        _stage_doc(doc_dir)


def _referenced_files(package: OFDDir) -> Iterable[Path]:
    """XML parts plus every media file registered in a public resource manifest."""

    files = [package.root / "OFD.xml"]
    for doc_dir in package.docs:
        files.append(doc_dir.path / DOC_ROOT_NAME)
        if doc_dir.public_res is not None:
            files.append(doc_dir.path / PUBLIC_RES_NAME)
            for resource in doc_dir.public_res.resources:
                if isinstance(resource, MultiMedias):
                    files.extend(
                        package.root / media.media_file.lstrip("/") for media in resource.items.values()
                    )
        if doc_dir.pages is not None:
            files.extend(page_dir.path / CONTENT_NAME for page_dir in doc_dir.pages.page_dirs)
    return sorted(set(files))


def write_package(package: OFDDir, output_path: Path, *, compression: int = ZIP_DEFLATED) -> Path:
    """Archive *package* to ``output_path`` and return the written path.

    Only the XML parts and the media files referenced from the public
    resources are archived; stray files in the working area are ignored.
    The archive is written next to the target and moved into place only once
    complete, so a failure never leaves a truncated file at ``output_path``.
    """

    output_path = Path(output_path).resolve()
    stage_xml_parts(package)

    files = list(_referenced_files(package))
    LOGGER.info("Packaging %d file(s) into %s", len(files), output_path)

    fd, temp_name = tempfile.mkstemp(prefix=".ofd-", suffix=".tmp", dir=output_path.parent)
    os.close(fd)
    temp_path = Path(temp_name)
    try:
        with ZipFile(temp_path, "w", compression=compression) as archive:
            for path in files:
                name = path.relative_to(package.root).as_posix()
                archive.writestr(_zipinfo(name, compression), path.read_bytes())
        temp_path.replace(output_path)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise
    return output_path
