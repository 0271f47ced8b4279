"""
High-level convenience API for docxfield.

Provides simple functions to convert HTML or Markdown strings and files to
WordprocessingML body markup without needing to understand the internal
pipeline.
"""

import logging
import os

from .config import DEFAULT_CONFIG
from .exceptions import SecurityError
from .frontmatter_parser import apply_metadata_overrides, metadata_format, parse_file_with_frontmatter
from .HtmlToDocx import HtmlToDocx
from .numbering import NumberingRegistry

logger = logging.getLogger('docxfield')

MARKDOWN_EXTENSIONS = ('.md', '.markdown')


def convert_string(html_string, numbering=None, config=None):
    """Convert an HTML fragment to WordprocessingML body XML.

    Args:
        html_string: HTML fragment
        numbering: Optional NumberingRegistry shared across conversions
        config: Optional ConversionConfig instance. Uses DEFAULT_CONFIG if None.

    Raises:
        UnsupportedElementError: If the fragment uses an unsupported element.
    """
    return HtmlToDocx(numbering=numbering, config=config).process(html_string)


def convert_markdown_string(markdown_string, numbering=None, config=None):
    """Convert Markdown text to WordprocessingML body XML."""
    return HtmlToDocx(numbering=numbering, config=config).process_markdown(markdown_string)


def convert_file(input_path, output_path, numbering=None, config=None, source_format=None):
    """Convert an HTML or Markdown file (with optional front matter) and write the XML.

    The input syntax is source_format when given, else the 'format' front
    matter key, falling back to the file extension.

    Returns:
        The rendered XML string.

    Raises:
        SecurityError: If the input file exceeds MAX_INPUT_FILE_SIZE.
        ConversionError: If conversion fails.
    """
    if config is None:
        config = DEFAULT_CONFIG

    input_size = os.path.getsize(input_path)
    if input_size > config.MAX_INPUT_FILE_SIZE:
        raise SecurityError(
            f"Input file too large: {input_size} bytes "
            f"(max {config.MAX_INPUT_FILE_SIZE} bytes)"
        )

    metadata, content = parse_file_with_frontmatter(input_path)
    config = apply_metadata_overrides(config, metadata)

    ext = os.path.splitext(input_path)[1].lower()
    if source_format is None:
        source_format = metadata_format(metadata, 'markdown' if ext in MARKDOWN_EXTENSIONS else 'html')

    if numbering is None:
        numbering = NumberingRegistry(config.NUMBERING_START_ID)

    if source_format == 'markdown':
        xml = convert_markdown_string(content, numbering=numbering, config=config)
    else:
        xml = convert_string(content, numbering=numbering, config=config)

    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(xml)

    logger.info("Successfully converted %s (%s) to %s", input_path, source_format, output_path)
    return xml
