import os


# Files with this extension are picked up when indexing the shader directory.
SHADER_EXTENSION = ".glsl"

DEFAULT_SHADER_DIR = os.path.join(".", "Data", "Shaders")


def get_shader_dir():
    """Get the directory that is scanned for shader files.

    Set ``GLSLEFFECTS_SHADER_DIR`` to override the default ``./Data/Shaders``.
    """
    # Set by user
    dir = os.getenv("GLSLEFFECTS_SHADER_DIR")
    if dir:
        return os.path.abspath(dir)
    return os.path.abspath(DEFAULT_SHADER_DIR)
