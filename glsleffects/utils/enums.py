"""
The enums used in glsleffects. The enums are all available from the root ``glsleffects`` namespace.

.. currentmodule:: glsleffects.utils.enums

.. autosummary::
    :toctree: utils/enums
    :template: ../_templates/custom_layout.rst

    ShaderType

"""

from wgpu.utils import BaseEnum


__all__ = [
    "ShaderType",
]


class Enum(BaseEnum):
    """Enum base class for glsleffects."""


class ShaderType(Enum):
    """The ShaderType enum specifies the pipeline stage a shader source is compiled for."""

    vertex = None  #: A vertex shader.
    fragment = None  #: A fragment (pixel) shader.
    geometry = None  #: A geometry shader.
    tesselation_evaluation = None  #: A tesselation evaluation shader.
    tesselation_control = None  #: A tesselation control shader.
    compute = None  #: A compute shader.
