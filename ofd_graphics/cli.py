"""
Command-line interface for OFD Graphics.
"""

import os
import sys

import click
from rich.console import Console
from rich.progress import Progress, BarColumn, TaskProgressColumn, TextColumn
from rich.table import Table

from ofd_graphics import __version__
from ofd_graphics.config import DocumentConfig
from ofd_graphics.document import OFDGraphicsDocument
from ofd_graphics.exceptions import OFDGraphicsError
from ofd_graphics.images import load_image
from ofd_graphics.package.reader import read_package_info
from ofd_graphics.utils import format_file_size

console = Console()

MM_PER_INCH = 25.4


def _placement(img_width, img_height, page_width, page_height, fit, dpi):
    """Return ``(x, y, width, height)`` in millimetres for an image on a page."""
    width = img_width / dpi * MM_PER_INCH
    height = img_height / dpi * MM_PER_INCH
    if fit or width > page_width or height > page_height:
        scale = min(page_width / width, page_height / height)
        width *= scale
        height *= scale
    x = (page_width - width) / 2
    y = (page_height - height) / 2
    return x, y, width, height


@click.group()
@click.version_option(version=__version__)
def cli():
    """
    OFD Graphics CLI - Build and inspect OFD documents.
    """
    pass


@cli.command(name="build")
@click.argument('output', type=click.Path(dir_okay=False))
@click.argument('images', nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option('--width', '-w', type=float, default=None, help='Page width in millimetres')
@click.option('--height', '-h', type=float, default=None, help='Page height in millimetres')
@click.option('--fit/--no-fit', default=True, help='Scale each image to fill its page')
@click.option('--dpi', default=96.0, type=float, help='Resolution used when images are not scaled')
@click.option(
    '--workdir',
    type=click.Path(file_okay=False),
    default=None,
    help='Directory for the temporary working area'
)
def build(output, images, width, height, fit, dpi, workdir):
    """
    Build an OFD document with one page per image.

    Examples:

        ofd-graphics build out.ofd scan1.png scan2.jpg

        ofd-graphics build out.ofd logo.png -w 100 -h 100 --no-fit
    """
    if (width is None) != (height is None):
        console.print("[bold red]✗ Error:[/bold red] --width and --height must be given together")
        sys.exit(1)

    partial = False
    try:
        loaded = [load_image(image_path) for image_path in images]
        config = DocumentConfig.from_env(**({"working_root": workdir} if workdir else {}))
        with OFDGraphicsDocument(output, config=config) as doc:
            partial = True
            with Progress(
                TextColumn("[progress.description]{task.description}"),
                BarColumn(),
                TaskProgressColumn(),
                console=console
            ) as progress:
                task = progress.add_task("Adding pages", total=len(loaded))
                for image in loaded:
                    page = doc.new_page(width, height) if width is not None else doc.new_page()
                    res_id = doc.add_image(image)
                    page.draw_image(
                        res_id,
                        *_placement(image.width, image.height, page.width, page.height, fit, dpi),
                    )
                    progress.update(task, advance=1)
        partial = False

        info = read_package_info(output)
        table = Table(title="OFD Document", show_header=False)
        table.add_column("Property", style="cyan")
        table.add_column("Value", style="green")
        table.add_row("File", os.path.abspath(output))
        table.add_row("Pages", str(info.num_pages))
        table.add_row("Images", str(len(info.media_files)))
        table.add_row("MaxUnitID", str(info.max_unit_id))
        table.add_row("Size", format_file_size(info.file_size))
        console.print(table)
        console.print(f"\n[bold green]✓ Wrote {info.num_pages} page(s)[/bold green]")

    except (OFDGraphicsError, OSError, ValueError) as e:
        if partial and os.path.exists(output):
            os.remove(output)
        console.print(f"\n[bold red]✗ Error:[/bold red] {e}")
        sys.exit(1)


@cli.command(name="info")
@click.argument('archive', type=click.Path(exists=True, dir_okay=False))
def show_info(archive):
    """
    Display information about an OFD file.

    Example:

        ofd-graphics info document.ofd
    """
    try:
        info = read_package_info(archive)
    except (OSError, ValueError) as e:
        console.print(f"[bold red]✗ Error:[/bold red] {e}")
        sys.exit(1)

    table = Table(title="OFD Information", show_header=False)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("File", os.path.basename(archive))
    table.add_row("Size", format_file_size(info.file_size))
    table.add_row("DocID", info.doc_id or "-")
    table.add_row("Creator", info.creator or "-")
    table.add_row("Pages", str(info.num_pages))
    table.add_row("MaxUnitID", str(info.max_unit_id))
    table.add_row("Images", str(len(info.media_files)))
    table.add_row("Draw parameters", str(info.draw_params))
    console.print(table)


if __name__ == '__main__':
    cli()
