from __future__ import annotations

import io
from pathlib import Path
from typing import Callable
import sys

import pytest
from PIL import Image

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ofd_graphics import DocumentConfig, OFDGraphicsDocument  # noqa: E402


@pytest.fixture()
def workdir(tmp_path: Path) -> Path:
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture()
def config(workdir: Path) -> DocumentConfig:
    return DocumentConfig(working_root=workdir)


@pytest.fixture()
def out_path(tmp_path: Path) -> Path:
    return tmp_path / "out.ofd"


@pytest.fixture()
def document(out_path: Path, config: DocumentConfig) -> OFDGraphicsDocument:
    doc = OFDGraphicsDocument(out_path, config=config)
    yield doc
    doc.ofd_dir.clean()


@pytest.fixture()
def rgba_image() -> Image.Image:
    return Image.new("RGBA", (4, 3), (255, 0, 0, 128))


@pytest.fixture()
def png_bytes() -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (2, 2), (0, 128, 255)).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture()
def image_factory(tmp_path: Path) -> Callable[[str, str, tuple[int, int]], Path]:
    def _create(filename: str, mode: str = "RGB", size: tuple[int, int] = (8, 6)) -> Path:
        path = tmp_path / filename
        Image.new(mode, size).save(path)
        return path

    return _create
