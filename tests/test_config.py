from __future__ import annotations

import tempfile
import zipfile
from pathlib import Path

from ofd_graphics import DocumentConfig, PageArea, __version__
from ofd_graphics.config import WORKDIR_ENV


def test_defaults() -> None:
    config = DocumentConfig()

    assert config.default_page_area == PageArea.of_size(210, 297)
    assert config.creator == "OFD R&W"
    assert config.creator_version == __version__
    assert config.compression == zipfile.ZIP_DEFLATED
    assert config.resolve_working_root() == Path(tempfile.gettempdir())


def test_from_env_reads_working_root(tmp_path: Path) -> None:
    config = DocumentConfig.from_env({WORKDIR_ENV: str(tmp_path)})
    assert config.working_root == tmp_path
    assert config.resolve_working_root() == tmp_path


def test_explicit_overrides_win_over_environment(tmp_path: Path) -> None:
    explicit = tmp_path / "explicit"
    config = DocumentConfig.from_env(
        {WORKDIR_ENV: str(tmp_path / "env")},
        working_root=explicit,
        page_width=100,
        page_height=150,
    )

    assert config.working_root == explicit
    assert config.default_page_area == PageArea.of_size(100, 150)


def test_from_env_without_variable_uses_temp_dir() -> None:
    config = DocumentConfig.from_env({})
    assert config.working_root is None
