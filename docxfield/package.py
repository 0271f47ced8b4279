"""
Image assets for the document package.

Template data may carry ImageDefinition objects anywhere inside nested
mappings, sequences or attribute objects. They are collected, given
relationship ids in the document part's .rels, and written to word/media/.
"""

import io
import logging
import os
import posixpath
import xml.etree.ElementTree as ET
from collections.abc import Iterable, Mapping

from PIL import Image, UnidentifiedImageError

from .config import DEFAULT_CONFIG
from .exceptions import ImageError, SecurityError
from .xml_utils import NS_PACKAGE_RELS, RELTYPE_IMAGE

logger = logging.getLogger('docxfield')

MEDIA_DIR = posixpath.join('word', 'media')


class ImageDefinition:
    def __init__(self, name, data):
        self.name = name
        self.data = data
        self.rid = None

    @classmethod
    def from_path(cls, path, base_dir=None, config=None):
        """Load an image file.

        Args:
            path: Image file path, relative to base_dir when given
            base_dir: Directory the image must stay within
            config: Optional ConversionConfig for the size limit

        Raises:
            SecurityError: If the path escapes base_dir or the file is too large
            ImageError: If the file does not exist
        """
        config = config if config is not None else DEFAULT_CONFIG

        if base_dir is not None:
            base = os.path.realpath(base_dir)
            resolved = os.path.realpath(os.path.join(base, path))
            if os.path.commonpath([base, resolved]) != base:
                raise SecurityError(f"Image path escapes {base_dir}: {path}")
        else:
            resolved = os.path.abspath(path)

        if not os.path.isfile(resolved):
            raise ImageError(f"Image not found: {path}")

        size = os.path.getsize(resolved)
        if size > config.MAX_IMAGE_FILE_SIZE:
            raise SecurityError(
                f"Image file too large: {size} bytes "
                f"(max {config.MAX_IMAGE_FILE_SIZE} bytes)"
            )

        with open(resolved, 'rb') as f:
            return cls(os.path.basename(resolved), f.read())

    @property
    def stem(self):
        return posixpath.splitext(self.name)[0]

    @property
    def size(self):
        """Pixel (width, height) as reported by Pillow."""
        try:
            with Image.open(io.BytesIO(self.data)) as im:
                return im.size
        except (UnidentifiedImageError, OSError) as e:
            raise ImageError(f"Cannot read image {self.name}: {e}")

    def extent_emu(self, dpi=None):
        """Image size in English Metric Units at the given DPI."""
        dpi = dpi or DEFAULT_CONFIG.IMAGE_DPI
        width, height = self.size
        emu_per_px = DEFAULT_CONFIG.EMU_PER_INCH / dpi
        return int(width * emu_per_px), int(height * emu_per_px)

    def __repr__(self):
        return f"<ImageDefinition {self.name} rid={self.rid}>"


class OleImageDefinition:
    """An embedded OLE object paired with the image shown in its place."""

    def __init__(self, ole, image):
        self.ole = ole
        self.image = image

    def __repr__(self):
        return f"<OleImageDefinition {self.ole}:{self.image}>"


def collect_images(content):
    """Recursively collect every ImageDefinition inside content.

    Mapping entries contribute their value, or their key when the value is
    empty. Objects with attributes (e.g. SimpleNamespace) are walked through
    their __dict__. For an OleImageDefinition only the preview image is
    collected; the OLE payload is not a media part.
    """
    if isinstance(content, ImageDefinition):
        return [content]
    if isinstance(content, OleImageDefinition):
        return collect_images(content.image)
    if not content or isinstance(content, (str, bytes, bytearray)):
        return []

    result = []
    if isinstance(content, Mapping):
        for key, value in content.items():
            result.extend(collect_images(value if value else key))
    elif isinstance(content, Iterable):
        for item in content:
            result.extend(collect_images(item))
    elif hasattr(content, '__dict__'):
        result.extend(collect_images(vars(content)))
    return result


class RelationshipInjector:
    """Adds image relationships to a part's relationships tree."""

    def __init__(self, rels_root):
        self.rels_root = rels_root

    def _relationships(self):
        return self.rels_root.findall(f'{{{NS_PACKAGE_RELS}}}Relationship')

    def next_rel_id(self):
        """Return one more than the highest numeric rIdN in the part."""
        highest = 0
        for rel in self._relationships():
            try:
                rel_id = int(rel.get('Id', '')[3:])
            except ValueError:
                rel_id = 0
            highest = max(highest, rel_id)
        return highest + 1

    def inject(self, images):
        """Register images and return a mapping of image stem -> numeric id."""
        next_id = self.next_rel_id()
        ids = {}
        for image in images:
            ET.SubElement(self.rels_root, f'{{{NS_PACKAGE_RELS}}}Relationship', {
                'Id': f'rId{next_id}',
                'Type': RELTYPE_IMAGE,
                'Target': f'media/{image.name}',
            })
            image.rid = next_id
            ids[image.stem] = next_id
            logger.debug("Added relationship rId%d for %s", next_id, image.name)
            next_id += 1
        return ids


def add_images_to_zip(images, zip_out):
    """Write each image into word/media/ of an open output ZipFile."""
    for image in images:
        zip_out.writestr(posixpath.join(MEDIA_DIR, image.name), image.data)
