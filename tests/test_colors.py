"""Tests for hex normalization and the highlight palette."""

import pytest

from docxfield.colors import (
    HIGHLIGHT_BOUNDARIES,
    HIGHLIGHT_NAMES,
    highlight_from_hex,
    normalize_hex,
)


class TestNormalizeHex:
    @pytest.mark.parametrize('raw,expected', [
        ('#FF0000', 'FF0000'),
        (' # ff 00 00 ;', 'ff0000'),
        ('abc', 'aabbcc'),
        ('#0F0', '00FF00'),
    ])
    def test_valid(self, raw, expected):
        assert normalize_hex(raw) == expected

    @pytest.mark.parametrize('raw', ['red', '#12345', '#GGGGGG', '', 'rgb(0,0,0)'])
    def test_invalid(self, raw):
        with pytest.raises(ValueError):
            normalize_hex(raw)


class TestHighlightFromHex:
    def test_sixteen_names(self):
        assert len(set(HIGHLIGHT_NAMES)) == 16

    def test_boundaries_are_contiguous(self):
        for (_, high, _), (low, _, _) in zip(HIGHLIGHT_BOUNDARIES, HIGHLIGHT_BOUNDARIES[1:]):
            assert high == low

    @pytest.mark.parametrize('value,expected', [
        (0x000000, 'black'),
        (0x000080, 'black'),
        (0x000081, 'darkBlue'),
        (0x0000FF, 'darkBlue'),
        (0x008000, 'blue'),
        (0x00FF00, 'darkCyan'),
        (0x800000, 'cyan'),
        (0x808080, 'darkYellow'),
        (0xC0C0C0, 'darkGray'),
        (0xFF0000, 'lightGray'),
        (0xFF0001, 'red'),
        (0xFFFF00, 'magenta'),
        (0xFFFF01, 'yellow'),
        (0xFFFFFF, 'yellow'),
    ])
    def test_first_matching_bucket_wins(self, value, expected):
        assert highlight_from_hex(value) == expected

    def test_boundary_belongs_to_lower_bucket(self):
        for index, (_, high, name) in enumerate(HIGHLIGHT_BOUNDARIES[:-1]):
            assert highlight_from_hex(high) == name
            assert highlight_from_hex(high + 1) == HIGHLIGHT_BOUNDARIES[index + 1][2]

    def test_total_over_sampled_range(self):
        for value in range(0, 0x1000000, 0x10101):
            assert highlight_from_hex(value) in HIGHLIGHT_NAMES

    def test_above_range_is_white(self):
        assert highlight_from_hex(0x1000000) == 'white'

    def test_hex_string_input(self):
        assert highlight_from_hex('#000080') == 'black'
        assert highlight_from_hex('C0C0C1') == 'lightGray'

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            highlight_from_hex(-1)
