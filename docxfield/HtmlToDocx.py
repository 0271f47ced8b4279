import logging
import re

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

from .builder import AstBuilder
from .colors import highlight_from_hex, normalize_hex
from .config import DEFAULT_CONFIG
from .exceptions import ConversionError, StyleError, UnsupportedElementError
from .nodes import Collection, ListParagraph, Newline, Paragraph, Text
from .numbering import NumberingRegistry
from .text_format import TextFormat
from .visitors import LastNewlineRemoverVisitor

logger = logging.getLogger('docxfield')


class HtmlToDocx:
    """Convert an HTML fragment into WordprocessingML body markup.

    Block elements are processed by a loop over the builder's layers, inline
    content by recursive descent. Block elements found inside inline content
    are handed back to the builder and become sibling paragraphs.
    """

    HEADING_PATTERN = re.compile(r'h(\d+)')
    FONT_SIZE_PATTERN = re.compile(r'^(\d+(?:\.\d+)?)\s*(pt|px)?$')
    BLOCK_ELEMENTS = frozenset(['ul', 'ol', 'p', 'div'])
    QUOTES = ('"', "'")

    # Inline element name -> TextFormat toggle applied to its children
    INLINE_TOGGLES = {
        'strong': TextFormat.with_bold,
        'b': TextFormat.with_bold,
        'em': TextFormat.with_italic,
        'i': TextFormat.with_italic,
        'u': TextFormat.with_underline,
        'sub': TextFormat.with_subscript,
        'sup': TextFormat.with_superscript,
        'super': TextFormat.with_superscript,
    }

    def __init__(self, numbering=None, config=None, base_format=None):
        # Configuration (use default if not provided)
        self.config = config if config is not None else DEFAULT_CONFIG

        # Shared allocator for list numbering ids
        self.numbering = numbering if numbering is not None else NumberingRegistry(self.config.NUMBERING_START_ID)

        # Format every top-level run extraction starts from
        self.base_format = base_format if base_format is not None else TextFormat.default()

        self._builder = None
        self._definition = None

    def process(self, html):
        """Convert HTML and return the rendered body XML."""
        return self.processed_ast(html).render()

    def process_markdown(self, markdown_text):
        """Convert Markdown (via the restricted HTML renderer) to body XML."""
        from .MarkdownToHtml import MarkdownToHtml

        return self.process(MarkdownToHtml().convert(markdown_text))

    def processed_ast(self, html):
        ast = self.build_ast(html)
        ast.accept(LastNewlineRemoverVisitor())
        return ast

    def build_ast(self, html):
        fragment = BeautifulSoup(html, self.config.HTML_PARSER)
        self._builder = AstBuilder(fragment.contents)
        self._definition = None

        while not self._builder.done():
            self._next_paragraph()

        ast = self._builder.to_ast()
        logger.debug("Built %d paragraph(s) from %d characters of HTML", len(ast), len(html))
        return ast

    # --- Block Level ---

    def _next_paragraph(self):
        node = self._builder.next()

        if isinstance(node, NavigableString):
            # Text and comments between blocks carry no paragraph
            return

        name = node.name
        heading = self.HEADING_PATTERN.fullmatch(name)

        if name == 'div':
            self._builder.new_layer()
            self._builder.emit(Paragraph(self.config.DIV_STYLE, self._ast_text(node.contents)))
        elif name == 'p':
            self._builder.new_layer()
            self._builder.emit(Paragraph(self.config.PARAGRAPH_STYLE, self._ast_text(node.contents)))
        elif heading:
            self._builder.new_layer()
            style = f"{self.config.HEADING_STYLE_PREFIX}{heading.group(1)}"
            self._builder.emit(Paragraph(style, self._ast_text(node.contents)))
        elif name in ('ul', 'ol'):
            self._builder.new_layer(ilvl=True)
            if not self._builder.nested():
                self._definition = self.numbering.register(self.config.LIST_STYLE)
            self._builder.push_all(node.contents)
        elif name == 'li':
            self._handle_list_item(node)
        else:
            raise UnsupportedElementError(name, 'block')

    def _handle_list_item(self, node):
        if self._definition is None or self._builder.ilvl() < 0:
            raise ConversionError("List item <li> found outside of a <ul> or <ol>")

        self._builder.new_layer()
        runs = self._ast_text(node.contents)
        self._builder.emit(ListParagraph(
            self._definition.style, runs, self._definition.numid, self._list_level()
        ))

    def _list_level(self):
        level = self._builder.ilvl()
        if level > self.config.MAX_LIST_LEVEL:
            logger.warning("List nesting depth limit reached (%d). Flattening.", self.config.MAX_LIST_LEVEL)
            level = self.config.MAX_LIST_LEVEL
        return level

    # --- Inline Level ---

    def _ast_text(self, nodes, format=None):
        """Extract runs from nodes, threading the formatting state down."""
        if format is None:
            format = self.base_format

        runs = []
        for node in nodes:
            if isinstance(node, PreformattedString):
                # Comments, CDATA, doctypes
                continue

            node_format = format.clone()
            if isinstance(node, Tag):
                self._apply_styles(node, node_format)

            if isinstance(node, NavigableString):
                runs.append(Text(str(node), node_format))
                continue

            name = node.name
            if name == 'br':
                runs.append(Newline())
            elif name in self.INLINE_TOGGLES:
                toggle = self.INLINE_TOGGLES[name]
                runs.extend(self._ast_text(node.contents, format=toggle(node_format)).nodes)
            elif name == 'span':
                runs.extend(self._ast_text(node.contents, format=node_format).nodes)
            elif name in self.BLOCK_ELEMENTS or self.HEADING_PATTERN.fullmatch(name):
                self._builder.push(node)
            else:
                raise UnsupportedElementError(name, 'inline')

        return Collection(runs)

    def _apply_styles(self, node, node_format):
        """Apply the element's inline style declarations to node_format.

        Malformed declarations are skipped individually with a warning.
        """
        style = node.get('style')
        if not style:
            return

        for declaration in style.split(';'):
            if not declaration.strip():
                continue
            prop, sep, value = declaration.partition(':')
            prop = prop.strip().lower()
            value = value.strip()
            if not sep or not prop or not value:
                logger.warning("Ignoring malformed style declaration %r on <%s>", declaration, node.name)
                continue

            try:
                if prop == 'color':
                    node_format.set_color(normalize_hex(value))
                elif prop == 'background-color':
                    node_format.set_highlight(highlight_from_hex(normalize_hex(value)))
                elif prop == 'font-family':
                    node_format.set_font_family(self._unquote(value))
                elif prop == 'font-size':
                    node_format.set_font_size(self._parse_font_size(value))
            except (ValueError, StyleError) as e:
                logger.warning("Ignoring style declaration %r on <%s>: %s", declaration, node.name, e)

    def _unquote(self, value):
        if len(value) >= 2 and value[0] == value[-1] and value[0] in self.QUOTES:
            return value[1:-1].strip()
        return value

    def _parse_font_size(self, value):
        """Return a CSS font size (pt, px or unitless points) in points."""
        match = self.FONT_SIZE_PATTERN.match(value.lower())
        if not match:
            raise ValueError(f"Unsupported font size: {value!r}")
        size = float(match.group(1))
        if match.group(2) == 'px':
            size *= self.config.POINTS_PER_PX
        return size
