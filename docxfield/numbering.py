"""
Registry handing out numbering ids for converted lists.

One definition is registered per outermost list; nested lists reuse it and
only change the indent level. The registry outlives single conversions, so
ids keep increasing across calls until ``reset()``. A registry created
with ``record=False`` only allocates ids and keeps no definitions.
"""

import logging
import threading
from collections import namedtuple

from .config import DEFAULT_CONFIG
from .exceptions import StyleError
from .xml_utils import escape_attr

logger = logging.getLogger('docxfield')

NumberingDefinition = namedtuple('NumberingDefinition', ['numid', 'style'])


class NumberingRegistry:
    NUM_XML = '<w:num w:numId="{numid}"><w:abstractNumId w:val="{abstract_id}" /></w:num>'

    def __init__(self, start_id=None, record=True):
        self.start_id = DEFAULT_CONFIG.NUMBERING_START_ID if start_id is None else start_id
        self.record = record
        self._lock = threading.Lock()
        self.reset()

    def reset(self):
        with self._lock:
            self._numid = self.start_id
            self._definitions = []

    @property
    def definitions(self):
        return tuple(self._definitions)

    def register(self, style):
        with self._lock:
            self._numid += 1
            definition = NumberingDefinition(self._numid, style)
            if self.record:
                self._definitions.append(definition)
        logger.debug("Registered numbering %d for style %s", definition.numid, style)
        return definition

    def to_xml(self, abstract_num_ids):
        """Render a <w:num> instance per definition.

        Args:
            abstract_num_ids: Mapping of list style name -> abstractNumId taken
                from the target document's numbering part

        Raises:
            StyleError: If a registered style has no abstract numbering
        """
        result = []
        for definition in self.definitions:
            if definition.style not in abstract_num_ids:
                raise StyleError(f"No abstract numbering for list style: {definition.style}")
            result.append(self.NUM_XML.format(
                numid=definition.numid,
                abstract_id=escape_attr(abstract_num_ids[definition.style]),
            ))
        return ''.join(result)
