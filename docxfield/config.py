"""
Configuration constants for the docxfield converter.

This module centralizes all style names, limits and default values used
throughout the conversion process. Values can be overridden by:
1. YAML front matter on the input document
2. CLI arguments (numbering start id)
"""


class ConversionConfig:
    """Default configuration values for HTML to WordprocessingML conversion."""

    # === Markup Parsing ===
    # html.parser keeps fragments as-is (no <html>/<body> wrapper is added)
    HTML_PARSER = 'html.parser'

    # === Paragraph Styles ===
    DIV_STYLE = 'Normal'
    PARAGRAPH_STYLE = 'Paragraph'
    HEADING_STYLE_PREFIX = 'Heading'  # h2 -> Heading2

    # === Lists ===
    LIST_STYLE = 'ListParagraph'
    NUMBERING_START_ID = 1000  # first registered list gets 1001
    MAX_LIST_LEVEL = 8  # w:ilvl is 0-8 in a numbering definition

    # === Font Size ===
    POINTS_PER_PX = 0.75  # 96 DPI

    # === Images ===
    IMAGE_DPI = 96
    EMU_PER_INCH = 914400

    # === Security Limits ===
    MAX_INPUT_FILE_SIZE = 10 * 1024 * 1024  # 10 MB max input file
    MAX_IMAGE_FILE_SIZE = 20 * 1024 * 1024  # 20 MB max embedded image


# Global default config instance
DEFAULT_CONFIG = ConversionConfig()
