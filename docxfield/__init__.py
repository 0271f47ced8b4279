"""
docxfield - Convert HTML rich text to WordprocessingML (DOCX) body markup

This package renders the HTML-flavored content of a document template field
as <w:p> paragraphs with styled runs, including nested numbered lists.
Markdown input is supported through marko.
"""

__version__ = "0.1.0"

from .HtmlToDocx import HtmlToDocx
from .MarkdownToHtml import MarkdownToHtml
from .text_format import TextFormat
from .nodes import Collection, Root, Paragraph, ListParagraph, Text, Newline
from .visitors import Visitor, GrepVisitor, LastNewlineRemoverVisitor
from .numbering import NumberingRegistry, NumberingDefinition
from .colors import highlight_from_hex
from .package import ImageDefinition, OleImageDefinition, RelationshipInjector, collect_images, add_images_to_zip
from .config import ConversionConfig, DEFAULT_CONFIG
from .exceptions import (
    DocxFieldError,
    ConversionError,
    UnsupportedElementError,
    StyleError,
    ImageError,
    SecurityError,
)
from .converter_api import convert_string, convert_markdown_string, convert_file

__all__ = [
    "HtmlToDocx",
    "MarkdownToHtml",
    "TextFormat",
    "Collection",
    "Root",
    "Paragraph",
    "ListParagraph",
    "Text",
    "Newline",
    "Visitor",
    "GrepVisitor",
    "LastNewlineRemoverVisitor",
    "NumberingRegistry",
    "NumberingDefinition",
    "highlight_from_hex",
    "ImageDefinition",
    "OleImageDefinition",
    "RelationshipInjector",
    "collect_images",
    "add_images_to_zip",
    "ConversionConfig",
    "DEFAULT_CONFIG",
    "DocxFieldError",
    "ConversionError",
    "UnsupportedElementError",
    "StyleError",
    "ImageError",
    "SecurityError",
    "convert_string",
    "convert_markdown_string",
    "convert_file",
]
