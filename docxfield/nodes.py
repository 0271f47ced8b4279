"""
Intermediate document tree produced by HtmlToDocx.

Every node supports ``accept(visitor)`` for traversal and ``render()`` for
WordprocessingML serialization. Rendering is pure: the tree can be rendered
any number of times with identical output.
"""

from .xml_utils import escape_attr, escape_text

NBSP = '\u00a0'


class Node:
    def accept(self, visitor):
        visitor.visit(self)

    def render(self):
        raise NotImplementedError

    @classmethod
    def node_name(cls):
        return cls.__name__


class Collection(Node):
    def __init__(self, nodes=None):
        self.nodes = list(nodes) if nodes is not None else []

    def accept(self, visitor):
        super().accept(visitor)
        for node in self.nodes:
            node.accept(visitor)

    def render(self):
        return ''.join(node.render() for node in self.nodes)

    def __len__(self):
        return len(self.nodes)

    def __repr__(self):
        return f"[{', '.join(repr(node) for node in self.nodes)}]"


class Root(Collection):
    def grep(self, pattern):
        """Return all nodes matching pattern, in visit order.

        pattern may be a Node subclass (isinstance match) or a regular
        expression matched against the start of each node's repr.
        """
        from .visitors import GrepVisitor

        visitor = GrepVisitor(pattern)
        self.accept(visitor)
        return visitor.result

    def __repr__(self):
        return f"<Root: {super().__repr__()}>"


class Paragraph(Node):
    PATTERN = (
        '<w:p>'
        '<w:pPr>'
        '<w:pStyle w:val="{style}" />'
        '{extra}'
        '</w:pPr>'
        '{runs}'
        '</w:p>'
    )

    def __init__(self, style, runs):
        self.style = style
        self.runs = runs

    def accept(self, visitor):
        super().accept(visitor)
        self.runs.accept(visitor)

    def render(self):
        return self.PATTERN.format(
            style=escape_attr(self.style),
            extra=self._ppr_docx(),
            runs=self.runs.render(),
        )

    def _ppr_docx(self):
        """Extra paragraph properties placed after the style reference."""
        return ''

    def __repr__(self):
        return f"<Paragraph{{{self.style}}}: {self.runs!r}>"


class ListParagraph(Paragraph):
    LIST_STYLE = (
        '<w:numPr>'
        '<w:ilvl w:val="{ilvl}" />'
        '<w:numId w:val="{numid}" />'
        '</w:numPr>'
    )

    def __init__(self, style, runs, numid, ilvl):
        super().__init__(style, runs)
        self.numid = numid
        self.ilvl = ilvl

    def _ppr_docx(self):
        return self.LIST_STYLE.format(ilvl=self.ilvl, numid=escape_attr(self.numid))

    def __repr__(self):
        return f"<ListParagraph{{{self.style}}}({self.numid}, {self.ilvl}): {self.runs!r}>"


class Text(Node):
    def __init__(self, content, format):
        self.content = content
        self.format = format

    def render(self):
        return (
            f'<w:r>{self.format.render()}'
            f'<w:t xml:space="preserve">{escape_text(self._normalized_content())}</w:t>'
            '</w:r>'
        )

    def _normalized_content(self):
        return self.content.replace(NBSP, ' ')

    def __repr__(self):
        return f"<Text{{{self.format!r}}}: {self.content}>"


class Newline(Node):
    def render(self):
        return '<w:r><w:br/></w:r>'

    def __repr__(self):
        return '<Newline>'
