"""Tests for the search and cleanup visitors."""

from docxfield.nodes import Collection, ListParagraph, Newline, Paragraph, Root, Text
from docxfield.text_format import TextFormat
from docxfield.visitors import GrepVisitor, LastNewlineRemoverVisitor, Visitor


def _text(content):
    return Text(content, TextFormat())


def _sample_root():
    return Root([
        Paragraph('Paragraph', Collection([_text('a'), Newline(), Newline()])),
        ListParagraph('ListParagraph', Collection([_text('b'), Newline()]), 1001, 0),
        Paragraph('Normal', Collection([Newline(), _text('c')])),
    ])


class TestVisitorDispatch:
    def test_dispatch_by_node_name(self):
        class Counter(Visitor):
            def __init__(self):
                self.texts = 0
                self.others = 0

            def visit_Text(self, node):
                self.texts += 1

            def generic_visit(self, node):
                self.others += 1

        counter = Counter()
        _sample_root().accept(counter)
        assert counter.texts == 3
        # root + 3 paragraphs + 3 run collections + 4 newlines
        assert counter.others == 11


class TestGrepVisitor:
    def test_grep_by_class_includes_subclasses(self):
        root = _sample_root()
        found = root.grep(Paragraph)
        assert [node.style for node in found] == ['Paragraph', 'ListParagraph', 'Normal']

    def test_grep_by_pattern_in_visit_order(self):
        root = _sample_root()
        found = root.grep(r'<Text')
        assert [node.content for node in found] == ['a', 'b', 'c']

    def test_pattern_is_anchored_at_start(self):
        root = _sample_root()
        assert root.grep(r'<Paragraph') == [root.nodes[0], root.nodes[2]]
        assert root.grep(r'<Root') == [root]

    def test_visitor_collects_result(self):
        visitor = GrepVisitor(Newline)
        _sample_root().accept(visitor)
        assert len(visitor.result) == 4


class TestLastNewlineRemover:
    def test_trailing_newlines_removed(self):
        root = _sample_root()
        root.accept(LastNewlineRemoverVisitor())
        first, second, third = root.nodes
        assert [type(n) for n in first.runs.nodes] == [Text]
        assert [type(n) for n in second.runs.nodes] == [Text]
        # leading newline is kept
        assert [type(n) for n in third.runs.nodes] == [Newline, Text]

    def test_idempotent(self):
        root = _sample_root()
        root.accept(LastNewlineRemoverVisitor())
        once = repr(root)
        root.accept(LastNewlineRemoverVisitor())
        assert repr(root) == once

    def test_empty_paragraph(self):
        root = Root([Paragraph('Paragraph', Collection([Newline()]))])
        root.accept(LastNewlineRemoverVisitor())
        assert root.nodes[0].runs.nodes == []
