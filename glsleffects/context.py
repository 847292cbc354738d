"""
The shader context owns the file index, the define table and the source
cache. Create one at startup and pass it to whatever needs shader
sources; there is no global state.
"""

from .utils import logger, get_shader_dir
from .sources import (
    ShaderSourceError,
    LocalFileSystem,
    FileIndex,
    DefineTable,
    IncludeResolver,
    EffectParser,
    SourceCache,
)


class ShaderContext:
    """Context to resolve shader sources from a directory of shader files.

    Parameters
    ----------
    root : str | None
        The directory to scan for shader files. Default ``get_shader_dir()``.
    filesystem : FileSystem | None
        The file system to read from. Default the local file system.
    defines : dict | None
        Initial preprocessor defines.
    strict_index : bool
        Whether duplicate bare file names are an error. By default the file
        that is scanned last wins.
    """

    def __init__(self, root=None, *, filesystem=None, defines=None, strict_index=False):
        self._root = root or get_shader_dir()
        self._fs = filesystem or LocalFileSystem()

        # The order matters: the global defines are found through the index,
        # and must be loaded before any section is assembled.
        self._file_index = FileIndex(self._fs, strict=strict_index)
        self._file_index.index(self._root)
        self._defines = DefineTable(defines)
        self._defines.load_global_block(self._file_index, self._fs)

        resolver = IncludeResolver(self._file_index, self._defines, self._fs)
        self._parser = EffectParser(resolver, self._defines)
        self._source_cache = SourceCache(self._file_index, self._parser, self._fs)

    @property
    def root(self):
        """The directory that is scanned for shader files."""
        return self._root

    @property
    def file_index(self):
        """The FileIndex mapping bare file names to paths."""
        return self._file_index

    @property
    def defines(self):
        """The DefineTable that is prepended to every section."""
        return self._defines

    @property
    def source_cache(self):
        """The SourceCache with all resolved sections."""
        return self._source_cache

    def reindex(self):
        """Scan the root directory again, e.g. to pick up new files.

        Sections that are already cached are not affected.
        """
        return self._file_index.index(self._root)

    def add_preprocessor_define(self, key, value):
        """Add a define that is prepended to sections resolved from now on."""
        self._defines.set(key, value)

    def remove_preprocessor_define(self, key):
        self._defines.remove(key)

    def get_shader(self, shader_id):
        """Get the resolved source for a composite id like "Blur.Fragment".

        Raises a ShaderSourceError subclass if it cannot be resolved.
        """
        return self._source_cache.get(shader_id)

    def get_shader_string(self, shader_id):
        """Get the resolved source for a composite id, or an empty string
        (after logging the error) if it cannot be resolved.
        """
        try:
            return self._source_cache.get(shader_id)
        except ShaderSourceError as err:
            logger.error(f"Cannot get shader '{shader_id}': {err}")
        except OSError as err:
            logger.error(f"Cannot read shader file for '{shader_id}': {err}")
        return ""
