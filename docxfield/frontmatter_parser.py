"""
YAML front matter parser using python-frontmatter.

Front matter lets an input document pick its syntax and override the
paragraph/list style names used for the conversion.
"""

import copy
import logging

import frontmatter

from .exceptions import ConversionError

logger = logging.getLogger('docxfield')

# front matter key -> ConversionConfig attribute
METADATA_OVERRIDES = {
    'paragraph_style': 'PARAGRAPH_STYLE',
    'div_style': 'DIV_STYLE',
    'heading_style_prefix': 'HEADING_STYLE_PREFIX',
    'list_style': 'LIST_STYLE',
    'numbering_start_id': 'NUMBERING_START_ID',
}

INPUT_FORMATS = ('html', 'markdown')


def parse_file_with_frontmatter(file_path: str) -> tuple[dict, str]:
    """
    Parse an HTML or Markdown file with YAML front matter.

    Args:
        file_path: Path to the input file

    Returns:
        (metadata_dict, content_without_frontmatter)
    """
    post = frontmatter.load(file_path)
    return dict(post.metadata), post.content


def parse_string_with_frontmatter(text: str) -> tuple[dict, str]:
    """
    Parse a string with YAML front matter.

    Args:
        text: HTML or Markdown content as string

    Returns:
        (metadata_dict, content_without_frontmatter)
    """
    post = frontmatter.loads(text)
    return dict(post.metadata), post.content


def apply_metadata_overrides(config, metadata: dict):
    """
    Return a copy of config with front matter overrides applied.

    Unknown keys are ignored; 'format' is read separately by the caller.
    """
    config = copy.copy(config)
    for key, value in metadata.items():
        attr = METADATA_OVERRIDES.get(key)
        if attr is None:
            if key != 'format':
                logger.debug("Ignoring front matter key: %s", key)
            continue
        if attr == 'NUMBERING_START_ID':
            try:
                value = int(value)
            except (TypeError, ValueError):
                raise ConversionError(f"Invalid {key} in front matter: {value!r}")
        else:
            value = str(value)
        setattr(config, attr, value)
    return config


def metadata_format(metadata: dict, default=None):
    """Return the input format named in front matter, if any."""
    value = metadata.get('format')
    if value is None:
        return default
    value = str(value).lower()
    if value not in INPUT_FORMATS:
        raise ConversionError(f"Unknown input format in front matter: {value}")
    return value
