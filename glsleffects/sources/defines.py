from ..utils import logger
from .errors import FileNotIndexed, UndefinedKey
from .templating import render_define_block


GLOBAL_DEFINES_NAME = "GlobalDefines.glsl"


class DefineTable:
    """The ambient macro environment that is prepended to every shader section.

    It combines two sources: a global block, which is the verbatim content
    of ``GlobalDefines.glsl`` (if such a file is indexed), and a table of
    key/value pairs. The keys can also be used in include directives, e.g.
    ``#include LIGHTING_MODEL`` with ``LIGHTING_MODEL`` set to ``"Phong.glsl"``.
    """

    def __init__(self, defines=None):
        self._global_block = ""
        self._defines = {}
        for key, value in (defines or {}).items():
            self.set(key, value)

    def __contains__(self, key):
        return key in self._defines

    def load_global_block(self, file_index, filesystem):
        """Load the global block from the indexed ``GlobalDefines.glsl``.

        A missing file simply means an empty global block.
        """
        try:
            path = file_index.resolve(GLOBAL_DEFINES_NAME)
        except FileNotIndexed:
            self._global_block = ""
            return
        try:
            self._global_block = filesystem.read_text(path)
        except OSError as err:
            logger.error(f"Unexpected error while loading {GLOBAL_DEFINES_NAME}: {err}")
            self._global_block = ""

    def global_block(self):
        """Get the contents of the global defines file."""
        return self._global_block

    def set(self, key, value):
        """Register a define. The value is converted to str."""
        if not (isinstance(key, str) and key and key.split() == [key]):
            raise ValueError(f"Invalid define key: {key!r}")
        self._defines[key] = str(value)

    def remove(self, key):
        """Remove a define, if it is registered."""
        self._defines.pop(key, None)

    def keys(self):
        return sorted(self._defines)

    def lookup(self, key):
        """Get the value for the given key. Raises UndefinedKey."""
        try:
            return self._defines[key]
        except KeyError:
            raise UndefinedKey(key) from None

    def render_define_block(self):
        """Get the ``#define`` statements for all registered keys, followed by the global block."""
        items = [(key, self._defines[key]) for key in self.keys()]
        return render_define_block(items, self._global_block)
