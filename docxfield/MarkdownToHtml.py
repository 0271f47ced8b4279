"""
Markdown input support.

Markdown is rendered with marko into the HTML vocabulary HtmlToDocx
understands, so constructs without a WordprocessingML counterpart in the
converter (links, images, code, quotes) degrade to their text.
"""

from marko import Markdown
from marko.html_renderer import HTMLRenderer


class RichTextRenderer(HTMLRenderer):
    """HTML renderer restricted to paragraphs, headings, lists and run styles."""

    _list_item_depth = 0

    def render_paragraph(self, element):
        children = self.render_children(element)
        if self._list_item_depth:
            # Paragraphs inside list items become line breaks within the item
            return f"{children}<br />"
        return f"<p>{children}</p>\n"

    def render_list(self, element):
        tag = 'ol' if element.ordered else 'ul'
        return f"<{tag}>{self.render_children(element)}</{tag}>"

    def render_list_item(self, element):
        self._list_item_depth += 1
        try:
            children = self.render_children(element)
        finally:
            self._list_item_depth -= 1
        return f"<li>{children}</li>"

    def render_quote(self, element):
        return self.render_children(element)

    def render_fenced_code(self, element):
        return self._render_code_lines(element.children[0].children)

    def render_code_block(self, element):
        return self._render_code_lines(element.children[0].children)

    def _render_code_lines(self, code):
        lines = [self.escape_html(line) for line in code.rstrip('\n').split('\n')]
        return f"<p>{'<br />'.join(lines)}</p>\n"

    def render_thematic_break(self, element):
        return ''

    def render_code_span(self, element):
        return self.escape_html(element.children)

    def render_link(self, element):
        return self.render_children(element)

    def render_auto_link(self, element):
        return self.render_children(element)

    def render_image(self, element):
        return self.render_children(element)


class MarkdownToHtml:
    def __init__(self):
        self.md = Markdown(renderer=RichTextRenderer)

    def convert(self, markdown_text):
        """Render Markdown text to an HTML fragment."""
        return self.md.convert(markdown_text)
