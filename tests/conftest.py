"""Shared fixtures for docxfield tests."""

import io

import pytest
from PIL import Image

from docxfield.HtmlToDocx import HtmlToDocx
from docxfield.numbering import NumberingRegistry


@pytest.fixture
def registry():
    """A fresh numbering registry starting at the default id."""
    return NumberingRegistry()


@pytest.fixture
def converter(registry):
    return HtmlToDocx(numbering=registry)


@pytest.fixture
def build(converter):
    """Helper: HTML -> cleaned AST root."""
    return converter.processed_ast


@pytest.fixture
def png_bytes():
    """A 4x2 pixel PNG image."""
    buf = io.BytesIO()
    Image.new('RGB', (4, 2), color=(255, 0, 0)).save(buf, format='PNG')
    return buf.getvalue()
