"""Configuration for document assembly and packaging."""

from __future__ import annotations

import dataclasses
import os
import tempfile
import zipfile
from pathlib import Path
from typing import Mapping, Optional

from .model import PageArea

__all__ = ["DocumentConfig", "WORKDIR_ENV", "DEFAULT_PAGE_WIDTH", "DEFAULT_PAGE_HEIGHT"]

WORKDIR_ENV = "OFD_GRAPHICS_WORKDIR"

# A4, millimetres
DEFAULT_PAGE_WIDTH = 210.0
DEFAULT_PAGE_HEIGHT = 297.0


def _package_version() -> str:
    from . import __version__

    return __version__


@dataclasses.dataclass(slots=True)
class DocumentConfig:
    """Settings applied when a document skeleton is created and packaged."""

    page_width: float = DEFAULT_PAGE_WIDTH
    page_height: float = DEFAULT_PAGE_HEIGHT
    creator: str = "OFD R&W"
    creator_version: str = dataclasses.field(default_factory=_package_version)
    working_root: Optional[Path] = None
    compression: int = zipfile.ZIP_DEFLATED

    def __post_init__(self) -> None:
        if self.working_root is not None:
            self.working_root = Path(self.working_root).expanduser()

    @property
    def default_page_area(self) -> PageArea:
        return PageArea.of_size(self.page_width, self.page_height)

    def resolve_working_root(self) -> Path:
        """Directory under which staging areas are created."""

        if self.working_root is not None:
            return self.working_root
        return Path(tempfile.gettempdir())

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "DocumentConfig":
        env = os.environ if environ is None else environ
        workdir = env.get(WORKDIR_ENV)
        if workdir and "working_root" not in overrides:
            overrides["working_root"] = Path(workdir)
        return cls(**overrides)
