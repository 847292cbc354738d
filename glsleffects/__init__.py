"""Shader source management: effect files, includes and global defines."""

# ruff: noqa: F401

from ._version import __version__, version_info

from .sources import (
    ShaderSourceError,
    FileNotIndexed,
    SectionNotFound,
    MissingInclude,
    UndefinedKey,
    CircularInclude,
    FileSystem,
    LocalFileSystem,
    FileIndex,
    DefineTable,
    IncludeResolver,
    EffectParser,
    SourceCache,
)
from .context import ShaderContext
from .program import (
    CompileResult,
    ShaderCompiler,
    ShaderProgram,
    create_shader_program,
    shader_type_from_id,
)
from .utils import enums, logger, get_shader_dir
from .utils.enums import *
