"""
Command-line interface for PDF Convert.
"""

import logging
import os
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from pdfconvert.backends import registry as backend_registry
from pdfconvert.exceptions import InvalidPageExpression, NodeOperationError, PDFConvertException
from pdfconvert.node import PdfConvertNode
from pdfconvert.pages import describe_selection, parse_page_expression
from pdfconvert.types import BinaryData, NodeItem
from pdfconvert.utils import configure_logging, format_file_size, get_pdf_info

console = Console()


def _load_items(input_pdfs):
    items = []
    for pdf_path in input_pdfs:
        name = os.path.basename(pdf_path)
        attachment = BinaryData.from_bytes(
            Path(pdf_path).read_bytes(),
            mime_type="application/pdf",
            file_name=name,
            file_extension="pdf",
        )
        items.append(NodeItem(json={"fileName": name}, binary={"data": attachment}))
    return items


def _unique_output_dir(output_dir, stem, index, used_dirs):
    """Pick a sub-directory for one input; repeated stems get the input index appended."""
    name = stem if stem not in used_dirs else f"{stem}_{index}"
    used_dirs.add(name)
    return output_dir / name


@click.group()
@click.version_option(version="1.0.0")
def cli():
    """
    PDF Convert CLI - Render PDF pages to PNG or JPEG images.
    """
    pass


@cli.command(name="convert")
@click.argument('input_pdfs', nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option(
    '--output-dir', '-o',
    default='./images',
    help='Output directory; each PDF gets a sub-directory',
    type=click.Path()
)
@click.option(
    '--backend', '-b',
    default='pdfium',
    type=click.Choice(sorted(backend_registry.names())),
    help='Rendering backend'
)
@click.option(
    '--format', '-f', 'image_format',
    default='png',
    type=click.Choice(['png', 'jpeg'], case_sensitive=False),
    help='Output image format'
)
@click.option('--scale', type=float, default=None, help='Scale factor for the pdfium backend (0.5-5.0)')
@click.option('--density', type=int, default=None, help='DPI for the poppler backend')
@click.option('--pages', '-p', default='', help="Pages to convert (e.g., '1,3-5'); empty for all", type=str)
@click.option('--output-property', default='images', help='Base name of the image attachments', type=str)
@click.option('--poppler-path', default=None, help='Directory holding the poppler binaries', type=click.Path())
@click.option('--continue-on-fail', is_flag=True, help='Keep going when a PDF fails')
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def convert(input_pdfs, output_dir, backend, image_format, scale, density, pages,
            output_property, poppler_path, continue_on_fail, verbose):
    """
    Convert one or more PDF files to images.

    Examples:

        pdfconvert convert input.pdf

        pdfconvert convert input.pdf -p '1-3' -f jpeg --scale 2

        pdfconvert convert a.pdf b.pdf -b poppler --density 300 -o out
    """
    configure_logging(logging.DEBUG if verbose else logging.WARNING)

    backend_options = {}
    if backend == 'poppler' and poppler_path:
        backend_options['poppler_path'] = poppler_path

    parameters = {
        'format': image_format.lower(),
        'pages': pages,
        'outputProperty': output_property,
    }
    quality_parameter = backend_registry.get(backend).quality_parameter
    for option, value in (('scale', scale), ('density', density)):
        if value is None:
            continue
        if option != quality_parameter:
            console.print(
                f"[yellow]⚠ --{option} does not apply to the {backend} backend; "
                f"use --{quality_parameter} instead. Ignoring it.[/yellow]"
            )
            continue
        parameters[option] = value

    try:
        node = PdfConvertNode(backend, **backend_options)
        items = _load_items(input_pdfs)

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console
        ) as progress:
            task = progress.add_task(f"Converting {len(items)} PDF(s) with {backend}...", total=None)
            results = node.run(items, parameters, continue_on_fail=continue_on_fail)
            progress.update(task, completed=True)
    except NodeOperationError as e:
        failed_file = os.path.basename(input_pdfs[e.item_index]) if e.item_index is not None else "input"
        console.print(f"\n[bold red]✗ Error in {escape(failed_file)}:[/bold red] {escape(e.message)}")
        sys.exit(1)
    except PDFConvertException as e:
        console.print(f"\n[bold red]✗ Error:[/bold red] {escape(str(e))}")
        sys.exit(1)

    summary_table = Table(title="Conversion Summary")
    summary_table.add_column("File", style="cyan")
    summary_table.add_column("Pages", style="green")
    summary_table.add_column("Result")

    failures = 0
    used_dirs = set()
    for index, (pdf_path, result) in enumerate(zip(input_pdfs, results)):
        name = os.path.basename(pdf_path)
        if result.failed:
            failures += 1
            summary_table.add_row(name, "-", f"[red]✗ {escape(result.json['error'])}[/red]")
            continue

        target_dir = _unique_output_dir(Path(output_dir), Path(pdf_path).stem, index, used_dirs)
        target_dir.mkdir(parents=True, exist_ok=True)
        for attachment in result.binary.values():
            (target_dir / attachment.file_name).write_bytes(attachment.to_bytes())

        summary = result.json[output_property]
        summary_table.add_row(name, str(summary['totalPages']), f"[green]✓ {target_dir}[/green]")

    console.print()
    console.print(summary_table)
    console.print()

    if failures:
        sys.exit(1)


@cli.command(name="pages")
@click.argument('expression', type=str)
def show_pages(expression):
    """
    Show how a page expression is interpreted.

    Example:

        pdfconvert pages '1,3-5,4'
    """
    try:
        page_list = parse_page_expression(expression)
    except InvalidPageExpression as e:
        console.print(f"[bold red]✗ Error:[/bold red] {escape(str(e))}")
        sys.exit(1)

    console.print(f"Pages: {', '.join(map(str, page_list))}")
    console.print(f"[dim]Normalized: {describe_selection(page_list)} ({len(page_list)} page(s))[/dim]")


@cli.command(name="info")
@click.argument('input_pdf', type=click.Path(exists=True, dir_okay=False))
def show_info(input_pdf):
    """
    Display information about a PDF file.

    Example:

        pdfconvert info input.pdf
    """
    try:
        info = get_pdf_info(Path(input_pdf).read_bytes())
    except PDFConvertException as e:
        console.print(f"[bold red]✗ Error:[/bold red] {escape(str(e))}")
        sys.exit(1)

    table = Table(title=f"PDF Information: {os.path.basename(input_pdf)}")
    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    table.add_row("File Path", os.path.abspath(input_pdf))
    table.add_row("File Size", format_file_size(info.file_size))
    table.add_row("Number of Pages", str(info.num_pages))
    table.add_row("Encrypted", "Yes" if info.is_encrypted else "No")
    if info.title:
        table.add_row("Title", info.title)

    console.print()
    console.print(table)
    console.print()


if __name__ == '__main__':
    cli()
