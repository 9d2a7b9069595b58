"""Thin facade bundling the JSON codec with a `ProcessingOptions` record.

Usage:
    mapper = GeoJsonMapper(ProcessingOptions.rfc7946())
    obj = mapper.loads(text)          # decoded and processed
    text = mapper.dumps(obj)
"""

import logging
from pathlib import Path
from typing import Any, Optional, Union

from geojson_compliance.config import ProcessingOptions
from geojson_compliance.compliance.processor import process as _process
from geojson_compliance.io import codec
from geojson_compliance.model import GeoJsonObject

logger = logging.getLogger(__name__)


class GeoJsonMapper:
    """Reads and writes GeoJSON, applying its options on the way in.

    Defaults to legacy options, i.e. objects are decoded as written.
    """

    def __init__(self, options: Optional[ProcessingOptions] = None):
        self.options = options if options is not None else ProcessingOptions.legacy()

    @classmethod
    def rfc7946(cls) -> 'GeoJsonMapper':
        return cls(ProcessingOptions.rfc7946())

    def with_options(self, **changes: bool) -> 'GeoJsonMapper':
        """Return a new mapper whose options have `changes` applied."""
        return GeoJsonMapper(self.options.replace(**changes))

    def process(self, obj: GeoJsonObject):
        return _process(obj, self.options)

    def loads(self, text: str, process: bool = True):
        obj = codec.loads(text)
        if process:
            obj = self.process(obj)
        return obj

    def dumps(self, obj: GeoJsonObject, **kwargs: Any) -> str:
        return codec.dumps(obj, **kwargs)

    def read(self, path: Union[str, Path], process: bool = True):
        """Load a GeoJSON file (UTF-8) and process it."""
        path = Path(path)
        logger.debug('reading GeoJSON from %s', path)
        return self.loads(path.read_text(encoding='utf-8'), process=process)

    def write(self, obj: GeoJsonObject, path: Union[str, Path], **kwargs: Any) -> Path:
        """Write `obj` as GeoJSON to `path` and return the path."""
        path = Path(path)
        path.write_text(self.dumps(obj, **kwargs), encoding='utf-8')
        logger.debug('wrote GeoJSON to %s', path)
        return path
