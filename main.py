#!/usr/bin/env python3
"""
Table Cell Titles - Main Entry Point

Renders markdown to HTML with every table body cell carrying its column
header as an attribute (``data-title`` by default):
- Render a markdown file to HTML
- Dump the annotated syntax tree as JSON

Usage:
    python main.py render <markdown_file> [--output FILE | --output-dir DIR]
    python main.py tree <markdown_file>
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from src.transformers.components.file_writer import FileWriter
from src.transformers.components.markdown_file_reader import MarkdownFileReader
from src.transformers.data_models import TableCellTitlesOptions
from src.transformers.header_transforms import slugify_header
from src.transformers.processor import MarkdownProcessor
from src.transformers.table_cell_titles import table_cell_titles
from src.utils.config import get_default_options

logger = logging.getLogger(__name__)


def configure_logging(debug: bool = False) -> None:
    """Configure root logging for command line use."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def build_options(args) -> TableCellTitlesOptions:
    """Merge command line flags over the environment defaults."""
    options = get_default_options()
    return TableCellTitlesOptions(
        attribute_name=(
            args.attribute_name if args.attribute_name is not None else options.attribute_name
        ),
        skip_empty_headers=args.skip_empty_headers or options.skip_empty_headers,
        header_transform=slugify_header if args.slugify else options.header_transform,
    )


def build_processor(args) -> MarkdownProcessor:
    """Create a processor with the table cell titles plugin registered."""
    processor = MarkdownProcessor(allow_html=not args.escape_html)
    return processor.use(table_cell_titles, build_options(args))


def cmd_render(args):
    """Render a markdown file to HTML."""
    reader = MarkdownFileReader(args.markdown_file)
    markdown = reader.read_file()
    logger.info(f"Read {reader.get_line_count()} lines from {reader.file_path}")

    html = build_processor(args).process(markdown)

    if args.output:
        writer = FileWriter(Path(args.output).parent)
        output_path = writer.write(Path(args.output), html, create_backup=not args.no_backup)
    elif args.output_dir:
        writer = FileWriter(Path(args.output_dir))
        output_path = writer.write_rendered_file(
            reader.file_path, html, create_backup=not args.no_backup
        )
    else:
        sys.stdout.write(html)
        return

    print(f"✅ Rendered {reader.file_path} -> {output_path}")


def cmd_tree(args):
    """Print the annotated syntax tree of a markdown file as JSON."""
    reader = MarkdownFileReader(args.markdown_file)
    processor = build_processor(args)
    tree = processor.run(processor.parse(reader.read_file()))
    print(json.dumps(tree.to_dict(), indent=2, ensure_ascii=False))


def add_option_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the annotation flags shared by all commands."""
    parser.add_argument('markdown_file', help='Markdown file to process')
    parser.add_argument('--attribute-name', default=None,
                        help='Attribute written to body cells (default: data-title)')
    parser.add_argument('--skip-empty-headers', action='store_true',
                        help='Do not annotate cells whose column header is empty')
    parser.add_argument('--slugify', action='store_true',
                        help='Lower-case header text and replace spaces with dashes')
    parser.add_argument('--escape-html', action='store_true',
                        help='Escape raw HTML instead of passing it through')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Annotate markdown table cells with their column headers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py render docs/pricing.md
  python main.py render docs/pricing.md --output-dir build/
  python main.py render docs/pricing.md --output build/pricing.html --attribute-name data-header
  python main.py tree docs/pricing.md --skip-empty-headers
        """
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Render command
    render_parser = subparsers.add_parser('render', help='Render markdown to HTML')
    add_option_arguments(render_parser)
    output_group = render_parser.add_mutually_exclusive_group()
    output_group.add_argument('--output', default=None, help='Output HTML file')
    output_group.add_argument('--output-dir', default=None,
                              help='Output directory (file named <stem>.html)')
    render_parser.add_argument('--no-backup', action='store_true',
                               help='Skip backup of an existing output file')

    # Tree command
    tree_parser = subparsers.add_parser('tree', help='Print the annotated syntax tree as JSON')
    add_option_arguments(tree_parser)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    configure_logging(args.debug)

    # Route to appropriate command handler
    command_handlers = {
        'render': cmd_render,
        'tree': cmd_tree,
    }

    try:
        command_handlers[args.command](args)
    except KeyboardInterrupt:
        print("\nOperation cancelled.")
        sys.exit(130)
    except Exception as e:
        print(f"❌ Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
