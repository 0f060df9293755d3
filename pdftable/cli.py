#!/usr/bin/env python3
"""
Command Line Interface for pdftable
===================================

Renders a CSV file as a paginated PDF table.

Usage:
    pdftable data.csv -o table.pdf
    pdftable data.csv -o table.pdf --columns name,city --shade
    pdftable --help
"""

import argparse
import sys
from pathlib import Path

import pandas as pd

from pdftable import __version__, config
from pdftable.exceptions import PdfTableError
from pdftable.plugins import HeaderStylePlugin, RowShader
from pdftable.surface import FPDFSurface, StyleManager, create_document
from pdftable.table import PdfTable
from pdftable.utils import columns_from_dataframe, configure_logging, get_logger

logger = get_logger()


def parse_args(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        prog="pdftable",
        description="Render tabular data as a paginated PDF table",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s people.csv -o people.pdf
  %(prog)s people.csv -o people.pdf --columns name,age --width 400 --shade
  %(prog)s people.csv -o people.pdf --title "People" --no-headers
        """,
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("input", type=str, help="CSV file to render")

    output_group = parser.add_argument_group("Output Configuration")
    output_group.add_argument("--output", "-o", type=str, default="table.pdf",
                              help="PDF file to write (default: table.pdf)")
    output_group.add_argument("--title", "-t", type=str,
                              help="Title printed above the table")

    table_group = parser.add_argument_group("Table Configuration")
    table_group.add_argument("--columns", "-c", type=str,
                             help="Comma separated CSV columns to render (default: all)")
    table_group.add_argument("--width", "-w", type=float,
                             help="Total table width (default: page width minus margins)")
    table_group.add_argument("--no-headers", action="store_true",
                             help="Do not draw the header row")
    table_group.add_argument("--shade", action="store_true",
                             help="Shade rows with alternating colours")
    table_group.add_argument("--bottom-margin", type=float, default=None,
                             help=f"Space kept free at the page bottom (default: {config.BOTTOM_MARGIN})")
    table_group.add_argument("--min-row-height", type=float, default=None,
                             help=f"Lines of spacing after each row (default: {config.MIN_ROW_HEIGHT})")

    parser.add_argument("--log-level", type=str, default=config.LOG_LEVEL,
                        help=f"Log level (default: {config.LOG_LEVEL})")

    return parser.parse_args(argv)


def load_data(input_path, columns=None):
    """Load the CSV file, optionally keeping only the given columns"""
    df = pd.read_csv(input_path)
    if columns:
        missing = [column for column in columns if column not in df.columns]
        if missing:
            raise ValueError(f"Columns not found in {input_path}: {missing}")
        df = df[columns]
    return df


def build_table(df, args):
    """Create a document and a table drawing df on it"""
    pdf = create_document()
    surface = FPDFSurface(pdf)

    if args.title:
        StyleManager(pdf).apply_table_title_style()
        pdf.cell(0, surface.line_height * 1.5, args.title, new_x="LMARGIN", new_y="NEXT")
        pdf.ln(surface.line_height)

    table = PdfTable(
        surface,
        min_row_height=args.min_row_height,
        bottom_margin=args.bottom_margin,
        show_headers=not args.no_headers,
        columns_defaults={"padding": (2, 4), "border": "B", "header_fill": True},
        new_page_fn=lambda t: t.surface.add_page(),
    )
    table.add_plugin(HeaderStylePlugin())
    if args.shade:
        table.add_plugin(RowShader(offset_header=table.show_headers))

    width = args.width or (pdf.w - pdf.l_margin - pdf.r_margin)
    table.add_columns(columns_from_dataframe(df, width))
    table.add_body(df)
    return pdf, table


def main(argv=None):
    """Main CLI entry point"""
    args = parse_args(argv)
    configure_logging(args.log_level)

    input_path = Path(args.input)
    if not input_path.exists():
        logger.error(f"Input file not found: {input_path}")
        return 1

    columns = [c.strip() for c in args.columns.split(",")] if args.columns else None

    try:
        df = load_data(input_path, columns)
        logger.info(f"Loaded {len(df)} rows and {len(df.columns)} columns from {input_path}")

        pdf, table = build_table(df, args)

        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        pdf.output(str(output_path))
        logger.info(f"Table written to {output_path} ({table.context.page_index + 1} pages)")
        return 0

    except (PdfTableError, ValueError, pd.errors.ParserError) as e:
        logger.error(f"Error rendering table: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
