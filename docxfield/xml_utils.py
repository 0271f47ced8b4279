"""
XML namespaces and escaping helpers shared by the renderers.
"""

import xml.sax.saxutils as saxutils

# XML Namespaces for WordprocessingML packages
NS_PACKAGE_RELS = 'http://schemas.openxmlformats.org/package/2006/relationships'
NS_OFFICE_RELS = 'http://schemas.openxmlformats.org/officeDocument/2006/relationships'

RELTYPE_IMAGE = f'{NS_OFFICE_RELS}/image'


def escape_text(text):
    """Escape text content for XML elements."""
    return saxutils.escape(text)


def escape_attr(value):
    """Escape value for use in XML attributes (handles &, <, >, ", ')."""
    if value is None:
        return ''
    return saxutils.escape(str(value), {'"': '&quot;', "'": '&apos;'})
