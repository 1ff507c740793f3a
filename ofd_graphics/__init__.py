"""
OFD Graphics - Assemble fixed-layout OFD documents in memory and package them.

Quick Start:
    >>> from ofd_graphics import OFDGraphicsDocument
    >>> with OFDGraphicsDocument('out.ofd') as doc:
    ...     page = doc.new_page(100, 200)
    ...     image_id = doc.add_image('logo.png')
    ...     page.draw_image(image_id, 0, 0, 50, 50)

Main Classes:
    - OFDGraphicsDocument: Document handle, packaged on close
    - PageGraphics: Handle for a single page
    - DocumentConfig: Page size, creator stamp and working area settings

Exceptions:
    - OFDGraphicsError: Base exception
    - ConfigurationError: Missing or invalid output path
    - ResourceIngestionError: Image could not be staged
    - PackagingError: Archive could not be written
    - DocumentClosedError: Document modified after close

For CLI usage, use the 'ofd-graphics' command after installation.
"""

__version__ = "1.0.0"
__author__ = "OFD Graphics Contributors"
__license__ = "MIT"

# Core classes
from ofd_graphics.document import OFDGraphicsDocument
from ofd_graphics.page import PageGraphics
from ofd_graphics.config import DocumentConfig

# Document tree
from ofd_graphics.identifiers import STID, IDAllocator
from ofd_graphics.model import Box, DrawParam, MultiMedia, PageArea, PageRef
from ofd_graphics.resources import ResourceKind, ResourceRegistry

# Exceptions
from ofd_graphics.exceptions import (
    OFDGraphicsError,
    ConfigurationError,
    ResourceIngestionError,
    PackagingError,
    DocumentClosedError,
)

__all__ = [
    # Main classes
    "OFDGraphicsDocument",
    "PageGraphics",
    "DocumentConfig",
    # Document tree
    "STID",
    "IDAllocator",
    "Box",
    "DrawParam",
    "MultiMedia",
    "PageArea",
    "PageRef",
    "ResourceKind",
    "ResourceRegistry",
    # Exceptions
    "OFDGraphicsError",
    "ConfigurationError",
    "ResourceIngestionError",
    "PackagingError",
    "DocumentClosedError",
    # Version info
    "__version__",
]
