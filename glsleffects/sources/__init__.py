"""
This subpackage turns shader files on disk into source text that is
ready to be compiled.

Shader files are found by their bare file name, regardless of the
directory they live in. A single file can hold multiple stages, separated
by ``-- Name`` marker lines, and each stage is addressed with a composite
id like ``Blur.Fragment``. Includes are expanded recursively, ``#version``
and ``#extension`` lines are moved to the top, and a block of global
defines is prepended. The ``#line`` markers that are injected along the
way keep the compiler's error messages pointing at the original files.
"""

from .errors import (  # noqa
    ShaderSourceError,
    FileNotIndexed,
    SectionNotFound,
    MissingInclude,
    UndefinedKey,
    CircularInclude,
)
from .filesystem import FileSystem, LocalFileSystem  # noqa
from .fileindex import FileIndex  # noqa
from .defines import DefineTable, GLOBAL_DEFINES_NAME  # noqa
from .includes import IncludeResolver, HoistedDirectives  # noqa
from .effects import EffectParser, ParsedEffect  # noqa
from .cache import SourceCache  # noqa
