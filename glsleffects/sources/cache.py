import threading

from ..utils import logger
from .errors import SectionNotFound


class SourceCache:
    """A cache for resolved shader sources, keyed by composite id (e.g. "Blur.Fragment").

    On a miss, the file for the id is parsed and *all* of its sections are
    stored, so that sibling stages are hits later. Entries are never
    replaced or evicted. Failed lookups are not stored.
    """

    def __init__(self, file_index, parser, filesystem):
        self._index = file_index
        self._parser = parser
        self._fs = filesystem
        self._sources = {}
        self._lock = threading.RLock()
        self.hits = 0
        self.misses = 0

    def __len__(self):
        return len(self._sources)

    def __contains__(self, shader_id):
        return shader_id in self._sources

    def ids(self):
        """Get a sorted list of the cached ids."""
        return sorted(self._sources)

    def get_stats(self):
        """Get the number of entries, hits and misses."""
        return len(self._sources), self.hits, self.misses

    def insert(self, shader_id, text):
        """Store text for the given id, unless the id is already present.
        Returns the stored text.
        """
        with self._lock:
            return self._sources.setdefault(shader_id, text)

    def get(self, shader_id):
        """Get the resolved text for the given composite id.

        Raises FileNotIndexed if there is no file for the id,
        SectionNotFound if the file does not define the section, and
        CircularInclude if the section has an include cycle.
        """
        if not isinstance(shader_id, str):
            raise TypeError(f"Shader id must be a str, not {shader_id!r}")
        text = self._sources.get(shader_id)
        if text is not None:
            with self._lock:
                self.hits += 1
            return text

        with self._lock:
            # Another thread may have parsed the file in the meantime
            text = self._sources.get(shader_id)
            if text is not None:
                self.hits += 1
                return text
            self.misses += 1
            logger.debug(f"Shader cache miss for '{shader_id}'")

            base_name = shader_id.partition(".")[0]
            path = self._index.resolve(base_name + self._index.extension)
            raw_text = self._fs.read_text(path)
            effect = self._parser.parse(base_name, raw_text, path)
            for section_id, section_text in effect.sections.items():
                self.insert(section_id, section_text)

            text = self._sources.get(shader_id)
            if text is None:
                if shader_id in effect.failed:
                    raise effect.failed[shader_id]
                raise SectionNotFound(shader_id)
            return text
