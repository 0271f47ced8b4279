"""
docxfield - HTML/Markdown to WordprocessingML converter

Renders rich-text template field content as <w:p> body markup.
"""

import argparse
import copy
import os
import sys
import logging

from . import __version__
from .config import DEFAULT_CONFIG
from .converter_api import convert_file
from .exceptions import DocxFieldError

logger = logging.getLogger('docxfield')

INPUT_EXTENSIONS = ['.html', '.htm', '.md', '.markdown']


def setup_logging(verbose=False, quiet=False):
    """Configure logging based on CLI flags.

    Args:
        verbose: If True, show DEBUG level messages
        quiet: If True, suppress all non-error output
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    root_logger = logging.getLogger('docxfield')
    root_logger.setLevel(level)
    root_logger.addHandler(handler)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="docxfield",
        description="Convert HTML or Markdown rich text to WordprocessingML paragraphs.",
        epilog="Examples:\n"
               "  docxfield field.html -o field.xml\n"
               "  docxfield notes.md -o notes.xml --numbering-start 2000\n"
               "  docxfield field.txt --format html -o field.xml --verbose",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument("input_file", help="Input file (.html, .htm, .md, .markdown)")
    parser.add_argument("-o", "--output", required=True,
                        help="Output file (.xml)")
    parser.add_argument("--format", choices=["html", "markdown"], default=None,
                        help="Input syntax (default: from front matter or file extension)")
    parser.add_argument("--numbering-start", type=int, default=None,
                        help="Numbering id after which list ids are allocated "
                             f"(default: {DEFAULT_CONFIG.NUMBERING_START_ID})")
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--verbose", action="store_true", default=False,
                        help="Show detailed debug output")
    parser.add_argument("-q", "--quiet", action="store_true", default=False,
                        help="Suppress all non-error output")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    # Set up logging
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    input_file = args.input_file

    input_ext = os.path.splitext(input_file)[1].lower()
    if args.format is None and input_ext not in INPUT_EXTENSIONS:
        logger.error("Cannot infer input format from %r; pass --format", input_ext)
        sys.exit(1)

    if not os.path.exists(input_file):
        logger.error("Input file not found: %s", input_file)
        sys.exit(1)

    output_ext = os.path.splitext(args.output)[1].lower()
    if output_ext != ".xml":
        logger.error("Unsupported output format: %s", output_ext)
        logger.error("Supported formats: .xml")
        sys.exit(1)

    config = copy.copy(DEFAULT_CONFIG)
    if args.numbering_start is not None:
        config.NUMBERING_START_ID = args.numbering_start

    try:
        convert_file(input_file, args.output, config=config, source_format=args.format)
    except DocxFieldError as e:
        logger.error("%s", e)
        sys.exit(1)
    except Exception as e:
        logger.error("Unexpected error: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
