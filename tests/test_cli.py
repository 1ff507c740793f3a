from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner

from ofd_graphics.cli import _placement, cli
from ofd_graphics.package import read_package_info


def test_build_creates_one_page_per_image(tmp_path: Path, image_factory) -> None:
    first = image_factory("one.png", mode="RGBA")
    second = image_factory("two.jpg")
    output = tmp_path / "images.ofd"

    runner = CliRunner()
    result = runner.invoke(
        cli, ["build", str(output), str(first), str(second), "--workdir", str(tmp_path / "work")]
    )

    assert result.exit_code == 0, result.output
    info = read_package_info(output)
    assert info.num_pages == 2
    assert len(info.media_files) == 2
    # two pages, two images, one layer and one image object per page
    assert info.max_unit_id == 8
    assert list((tmp_path / "work").iterdir()) == []


def test_build_with_custom_page_size(tmp_path: Path, image_factory) -> None:
    image = image_factory("logo.png")
    output = tmp_path / "sized.ofd"

    result = CliRunner().invoke(
        cli, ["build", str(output), str(image), "-w", "100", "-h", "50", "--no-fit"]
    )

    assert result.exit_code == 0, result.output
    assert read_package_info(output).num_pages == 1


def test_build_requires_both_dimensions(tmp_path: Path, image_factory) -> None:
    image = image_factory("logo.png")

    result = CliRunner().invoke(cli, ["build", str(tmp_path / "x.ofd"), str(image), "-w", "100"])

    assert result.exit_code == 1
    assert "Error" in result.output


def test_build_reports_unreadable_images(tmp_path: Path) -> None:
    broken = tmp_path / "broken.png"
    broken.write_bytes(b"nope")

    result = CliRunner().invoke(cli, ["build", str(tmp_path / "x.ofd"), str(broken)])

    assert result.exit_code == 1
    assert "Error" in result.output
    assert not (tmp_path / "x.ofd").exists()


def test_build_with_unreadable_image_writes_nothing(tmp_path: Path, image_factory) -> None:
    good = image_factory("good.png")
    broken = tmp_path / "broken.png"
    broken.write_bytes(b"nope")
    output = tmp_path / "x.ofd"

    result = CliRunner().invoke(cli, ["build", str(output), str(good), str(broken)])

    assert result.exit_code == 1
    assert not output.exists()


def test_build_removes_partial_document(tmp_path: Path, image_factory, monkeypatch) -> None:
    from ofd_graphics.document import OFDGraphicsDocument
    from ofd_graphics.exceptions import ResourceIngestionError

    original_add_image = OFDGraphicsDocument.add_image
    calls: list[int] = []

    def failing_second_image(self, image):
        calls.append(1)
        if len(calls) == 2:
            raise ResourceIngestionError("disk full")
        return original_add_image(self, image)

    monkeypatch.setattr(OFDGraphicsDocument, "add_image", failing_second_image)
    output = tmp_path / "partial.ofd"

    result = CliRunner().invoke(
        cli, ["build", str(output), str(image_factory("a.png")), str(image_factory("b.png"))]
    )

    assert result.exit_code == 1
    assert "disk full" in result.output
    assert not output.exists()


def test_info_command(tmp_path: Path, image_factory) -> None:
    output = tmp_path / "doc.ofd"
    runner = CliRunner()
    runner.invoke(cli, ["build", str(output), str(image_factory("a.png"))])

    result = runner.invoke(cli, ["info", str(output)])

    assert result.exit_code == 0, result.output
    assert "MaxUnitID" in result.output


def test_info_rejects_non_ofd_files(tmp_path: Path) -> None:
    bogus = tmp_path / "bogus.ofd"
    bogus.write_text("plain text")

    result = CliRunner().invoke(cli, ["info", str(bogus)])

    assert result.exit_code == 1


def test_placement_fits_and_centres() -> None:
    x, y, width, height = _placement(200, 100, 100, 100, True, 96)
    assert (round(width, 6), round(height, 6)) == (100, 50)
    assert (round(x, 6), round(y, 6)) == (0, 25)

    # small images keep their natural size without fitting
    x, y, width, height = _placement(96, 96, 100, 100, False, 96)
    assert round(width, 3) == 25.4
    assert round(x, 3) == round((100 - 25.4) / 2, 3)
