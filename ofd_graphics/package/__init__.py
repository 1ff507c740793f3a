"""OFD package staging, XML part generation and archiving."""

from __future__ import annotations

from .container import Container, DocDir, OFDDir, PageDir, PagesDir, ResDir
from .reader import PackageInfo, read_package_info
from .writer import stage_xml_parts, write_package

__all__ = [
    "Container",
    "DocDir",
    "OFDDir",
    "PageDir",
    "PagesDir",
    "ResDir",
    "PackageInfo",
    "read_package_info",
    "stage_xml_parts",
    "write_package",
]
