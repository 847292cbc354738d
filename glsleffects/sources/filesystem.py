"""
The file-system service used by the index and the resolvers. Only two
things are needed: listing files below a directory and reading raw bytes.
"""

import os


class FileSystem:
    """Define what a file system must look like from the pov of the shader sources."""

    def iter_files(self, root):
        """Yield the paths of all files below ``root`` (recursively)."""
        raise NotImplementedError()

    def read_bytes(self, path):
        """Return the raw content of the file at ``path``."""
        raise NotImplementedError()

    def read_text(self, path):
        """Return the content of the file at ``path`` as a str."""
        return self.read_bytes(path).decode("utf-8", errors="replace")


class LocalFileSystem(FileSystem):
    """The file system of the host, accessed via ``os``."""

    def iter_files(self, root):
        if not os.path.isdir(root):
            raise OSError(f"Not a directory: {root}")
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames.sort()
            for fname in sorted(filenames):
                yield os.path.join(dirpath, fname)

    def read_bytes(self, path):
        with open(path, "rb") as f:
            return f.read()
