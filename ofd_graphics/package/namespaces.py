"""Namespace configuration and constants for OFD package generation."""

from __future__ import annotations

from datetime import datetime, timezone
from xml.etree.ElementTree import register_namespace

__all__ = [
    "OFD_NS",
    "OFD_PREFIX",
    "DEFAULT_TIMESTAMP",
    "OFD_ZIP_TIMESTAMP",
    "DOC_ROOT_NAME",
    "PUBLIC_RES_NAME",
    "CONTENT_NAME",
]

OFD_NS = "http://www.ofdspec.org/2016"
OFD_PREFIX = f"{{{OFD_NS}}}"

register_namespace("ofd", OFD_NS)

DOC_ROOT_NAME = "Document.xml"
PUBLIC_RES_NAME = "PublicRes.xml"
CONTENT_NAME = "Content.xml"

DEFAULT_TIMESTAMP = datetime(2023, 1, 1, tzinfo=timezone.utc)
OFD_ZIP_TIMESTAMP = (
    DEFAULT_TIMESTAMP.year,
    DEFAULT_TIMESTAMP.month,
    DEFAULT_TIMESTAMP.day,
    DEFAULT_TIMESTAMP.hour,
    DEFAULT_TIMESTAMP.minute,
    DEFAULT_TIMESTAMP.second,
)
