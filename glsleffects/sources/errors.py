"""
The errors raised while resolving shader sources. All of them are
recoverable: the public entrypoints log them and hand back a best-effort
text, so that the shader compiler reports a concrete error downstream.
"""


class ShaderSourceError(Exception):
    """Base class for all shader source resolution errors."""


class FileNotIndexed(ShaderSourceError, LookupError):
    """A bare file name was never seen while indexing the shader directory."""

    def __init__(self, name):
        super().__init__(f"Unknown shader file name '{name}'.")
        self.name = name


class SectionNotFound(ShaderSourceError, LookupError):
    """The file exists, but does not define the requested section."""

    def __init__(self, shader_id):
        super().__init__(f"Could not find the shader '{shader_id}'.")
        self.shader_id = shader_id


class MissingInclude(ShaderSourceError):
    """An include directive names a file that cannot be resolved."""

    def __init__(self, line, reason=""):
        msg = f"Cannot resolve include directive: {line}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)
        self.line = line


class UndefinedKey(ShaderSourceError, LookupError):
    """An include directive refers to a define key that is not registered."""

    def __init__(self, key, line=""):
        super().__init__(f"Include refers to undefined key '{key}': {line}")
        self.key = key
        self.line = line


class CircularInclude(ShaderSourceError):
    """A file includes itself, directly or via other files."""

    def __init__(self, chain):
        self.chain = tuple(chain)
        super().__init__("Circular include: " + " -> ".join(self.chain))
