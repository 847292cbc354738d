import os

from ..utils import logger, SHADER_EXTENSION
from .errors import FileNotIndexed
from .filesystem import LocalFileSystem


class FileIndex:
    """Maps bare file names to full paths, e.g. "Blur.glsl" ->
    "Data/Shaders/PostProcessing/Blur.glsl". The directory structure is
    irrelevant for lookups, so shaders can include each other by name.

    Parameters
    ----------
    filesystem : FileSystem | None
        The file system to scan. Default the local one.
    extension : str
        Only files with this extension (matched case-sensitively) are indexed.
    strict : bool
        If True, a bare name that occurs twice raises a ValueError. Otherwise
        the file scanned last wins.
    """

    def __init__(self, filesystem=None, *, extension=SHADER_EXTENSION, strict=False):
        self._fs = filesystem or LocalFileSystem()
        self._extension = extension
        self._strict = bool(strict)
        self._paths = {}

    def __len__(self):
        return len(self._paths)

    def __contains__(self, name):
        return name in self._paths

    @property
    def extension(self):
        """The extension of the files in this index."""
        return self._extension

    def names(self):
        """Get a sorted list of all indexed bare names."""
        return sorted(self._paths)

    def index(self, root):
        """Scan ``root`` recursively and add every shader file to the index.

        Can be called again to pick up new files. In strict mode, a
        duplicate name raises a ValueError and leaves the index unchanged.
        """
        found = {}
        for path in self._fs.iter_files(root):
            if not path.endswith(self._extension):
                continue
            name = os.path.basename(path)
            previous = found.get(name)
            if previous is not None and previous != path:
                if self._strict:
                    raise ValueError(
                        f"Duplicate shader file name '{name}': {previous} and {path}"
                    )
                logger.warning(
                    f"Duplicate shader file name '{name}': {path} replaces {previous}"
                )
            found[name] = path
        self._paths.update(found)
        logger.info(f"Indexed {len(found)} shader files in {root}")
        return len(found)

    def resolve(self, name):
        """Get the full path for the given bare name. Raises FileNotIndexed."""
        try:
            return self._paths[name]
        except KeyError:
            raise FileNotIndexed(name) from None
