"""Tests for the numbering registry."""

import threading

import pytest

from docxfield.exceptions import StyleError
from docxfield.numbering import NumberingDefinition, NumberingRegistry


class TestNumberingRegistry:
    def test_register_allocates_sequential_ids(self, registry):
        first = registry.register('ListParagraph')
        second = registry.register('ListBullet')
        assert first == NumberingDefinition(1001, 'ListParagraph')
        assert second.numid == 1002
        assert second.style == 'ListBullet'
        assert registry.definitions == (first, second)

    def test_custom_start(self):
        registry = NumberingRegistry(start_id=5)
        assert registry.register('ListParagraph').numid == 6

    def test_reset(self, registry):
        registry.register('ListParagraph')
        registry.reset()
        assert registry.definitions == ()
        assert registry.register('ListParagraph').numid == 1001

    def test_thread_safe_allocation(self, registry):
        def worker():
            for _ in range(50):
                registry.register('ListParagraph')

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        ids = [definition.numid for definition in registry.definitions]
        assert len(ids) == 200
        assert len(set(ids)) == 200

    def test_to_xml(self, registry):
        registry.register('ListParagraph')
        registry.register('ListParagraph')
        assert registry.to_xml({'ListParagraph': 3}) == (
            '<w:num w:numId="1001"><w:abstractNumId w:val="3" /></w:num>'
            '<w:num w:numId="1002"><w:abstractNumId w:val="3" /></w:num>'
        )

    def test_to_xml_missing_style(self, registry):
        registry.register('ListNumber')
        with pytest.raises(StyleError):
            registry.to_xml({'ListParagraph': 3})

    def test_unrecorded_registry_only_allocates(self):
        registry = NumberingRegistry(record=False)
        first = registry.register('ListParagraph')
        second = registry.register('ListParagraph')
        assert (first.numid, second.numid) == (1001, 1002)
        assert registry.definitions == ()
        assert registry.to_xml({}) == ''
