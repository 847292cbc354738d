"""
Assembling shader programs. Compilation and linking are done by an
external ShaderCompiler (e.g. a wrapper around an OpenGL context); this
module only resolves the sources and passes them along.
"""

from .utils import logger
from .utils.enums import ShaderType


# Checked in order, on the lowercase id.
_suffix_types = [
    ("vertex", ShaderType.vertex),
    ("fragment", ShaderType.fragment),
    ("geometry", ShaderType.geometry),
    ("tesselationevaluation", ShaderType.tesselation_evaluation),
    ("tesselationcontrol", ShaderType.tesselation_control),
    ("compute", ShaderType.compute),
]


def shader_type_from_id(shader_id):
    """Get the ShaderType for a composite id, e.g. "Blur.Fragment" -> "fragment".

    The id is first matched on its ending, then on abbreviations such as
    "vert" or "frag". Unknown ids are logged and treated as vertex shaders.
    """
    name = shader_id.lower()
    for suffix, shader_type in _suffix_types:
        if name.endswith(suffix):
            return shader_type

    if "vert" in name:
        return ShaderType.vertex
    elif "frag" in name:
        return ShaderType.fragment
    elif "geom" in name:
        return ShaderType.geometry
    elif "tess" in name:
        if "eval" in name:
            return ShaderType.tesselation_evaluation
        elif "control" in name:
            return ShaderType.tesselation_control
    elif "comp" in name:
        return ShaderType.compute

    logger.error(f"Unknown shader type (id: '{shader_id}')")
    return ShaderType.vertex


class CompileResult:
    """The outcome of compiling or linking: a success flag and the compiler's log."""

    def __init__(self, ok, log=""):
        self.ok = bool(ok)
        self.log = log

    def __repr__(self):
        return f"<CompileResult ok={self.ok}>"


class ShaderCompiler:
    """Define what a compiler must look like from the pov of the program assembly."""

    def compile_shader(self, shader_type, text, file_id):
        """Compile a single stage. Must return a CompileResult."""
        raise NotImplementedError()

    def link_program(self, shaders):
        """Link the given CompiledShader objects. Must return a CompileResult."""
        raise NotImplementedError()


class CompiledShader:
    """A single stage of a shader program."""

    def __init__(self, file_id, shader_type, text, result):
        self.file_id = file_id
        self.shader_type = shader_type
        self.text = text
        self.result = result


class ShaderProgram:
    """The stages that make up a program, and the result of linking them."""

    def __init__(self, shaders, link_result):
        self.shaders = list(shaders)
        self.link_result = link_result

    @property
    def ok(self):
        """Whether all stages compiled and the program linked."""
        return self.link_result.ok and all(s.result.ok for s in self.shaders)


def create_shader_program(context, shader_ids, compiler, *, dump_text=False):
    """Resolve, compile and link the given shader ids.

    Parameters
    ----------
    context : ShaderContext
        The context to resolve the sources with.
    shader_ids : list of str
        The composite ids of the stages, e.g. ``["Blur.Vertex", "Blur.Fragment"]``.
    compiler : ShaderCompiler
        The compiler to pass the sources to.
    dump_text : bool
        Whether to print the resolved source of each stage.
    """
    shaders = []
    for shader_id in shader_ids:
        shader_type = shader_type_from_id(shader_id)
        text = context.get_shader_string(shader_id)
        if dump_text:
            print(f"Shader dump ({shader_id}):")
            print("-" * 44)
            print(text)
            print()
        result = compiler.compile_shader(shader_type, text, shader_id)
        if not result.ok:
            logger.error(
                f"Cannot compile shader! fileID: '{shader_id}'\n{result.log}"
            )
        shaders.append(CompiledShader(shader_id, shader_type, text, result))

    link_result = compiler.link_program(shaders)
    if not link_result.ok:
        ids = ", ".join(shader_ids)
        logger.error(f"Cannot link shader program ({ids})\n{link_result.log}")
    return ShaderProgram(shaders, link_result)
