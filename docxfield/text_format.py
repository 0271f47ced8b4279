"""
Run formatting state carried through inline extraction.

A TextFormat is treated as a value: the ``with_*`` toggles return a new
instance, while the ``set_*`` setters mutate in place and are only meant for
a fresh ``clone()`` owned by a single element.
"""

import math

from .exceptions import StyleError
from .xml_utils import escape_attr


class TextFormat:
    FIELDS = (
        'bold', 'italic', 'underline', 'subscript', 'superscript',
        'color', 'highlight', 'font_family', 'font_size',
    )

    _default = None

    def __init__(self, bold=False, italic=False, underline=False, subscript=False,
                 superscript=False, color=None, highlight=None, font_family=None,
                 font_size=None, frozen=False):
        self.bold = bold
        self.italic = italic
        self.underline = underline
        self.subscript = subscript
        self.superscript = superscript
        self.color = color
        self.highlight = highlight
        self.font_family = font_family
        self.font_size = font_size
        self._frozen = frozen

    @classmethod
    def default(cls):
        """Return the shared, read-only format with nothing set."""
        if cls._default is None:
            cls._default = cls(frozen=True)
        return cls._default

    def _replace(self, **changes):
        values = {name: getattr(self, name) for name in self.FIELDS}
        values.update(changes)
        return TextFormat(**values)

    def clone(self):
        return self._replace()

    # --- Toggles (value semantics) ---

    def with_bold(self):
        return self._replace(bold=True)

    def with_italic(self):
        return self._replace(italic=True)

    def with_underline(self):
        return self._replace(underline=True)

    def with_subscript(self):
        return self._replace(subscript=True)

    def with_superscript(self):
        return self._replace(superscript=True)

    # --- Setters (in place) ---

    def _check_mutable(self):
        if self._frozen:
            raise StyleError("The shared default TextFormat is read-only; clone() it first")

    def set_color(self, color):
        self._check_mutable()
        self.color = str(color)

    def set_highlight(self, highlight):
        self._check_mutable()
        self.highlight = str(highlight)

    def set_font_family(self, font_family):
        self._check_mutable()
        self.font_family = str(font_family)

    def set_font_size(self, font_size):
        """Set the font size in points (int, float or numeric string)."""
        self._check_mutable()
        try:
            points = float(font_size)
        except (TypeError, ValueError):
            raise StyleError(f"Invalid font size: {font_size!r}")
        if not math.isfinite(points) or points <= 0:
            raise StyleError(f"Font size must be a positive number: {font_size!r}")
        self.font_size = f"{points:g}"

    def clear_color(self):
        # color and highlight are cleared together
        self._check_mutable()
        self.color = None
        self.highlight = None

    # --- Rendering ---

    def _half_points(self):
        return int(round(float(self.font_size) * 2))

    def render(self):
        styles = []
        if self.bold:
            styles.append('<w:b />')
        if self.italic:
            styles.append('<w:i />')
        if self.underline:
            styles.append('<w:u w:val="single"/>')
        # Only one vertical alignment is possible; superscript wins
        if self.superscript:
            styles.append('<w:vertAlign w:val="superscript" />')
        elif self.subscript:
            styles.append('<w:vertAlign w:val="subscript" />')
        if self.color:
            styles.append(f'<w:color w:val="{escape_attr(self.color)}" />')
        if self.highlight:
            styles.append(f'<w:highlight w:val="{escape_attr(self.highlight)}" />')
        if self.font_family:
            font = escape_attr(self.font_family)
            styles.append(f'<w:rFonts w:ascii="{font}" w:hAnsi="{font}" w:cs="{font}"/>')
        if self.font_size:
            size = self._half_points()
            styles.append(f'<w:sz w:val="{size}"/><w:szCs w:val="{size}"/>')

        if not styles:
            return ''
        return f"<w:rPr>{''.join(styles)}</w:rPr>"

    def __eq__(self, other):
        if not isinstance(other, TextFormat):
            return NotImplemented
        return all(getattr(self, name) == getattr(other, name) for name in self.FIELDS)

    def __repr__(self):
        parts = []
        if self.bold:
            parts.append('bold')
        if self.italic:
            parts.append('italic')
        if self.underline:
            parts.append('underline')
        if self.subscript:
            parts.append('subscript')
        if self.superscript:
            parts.append('superscript')
        if self.color:
            parts.append(f'color {self.color}')
        if self.highlight:
            parts.append(f'highlight {self.highlight}')
        if self.font_family:
            parts.append(f'font_family {self.font_family}')
        if self.font_size:
            parts.append(f'font_size {self.font_size}')
        return '|'.join(parts)
