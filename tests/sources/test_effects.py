from glsleffects import (
    DefineTable,
    EffectParser,
    FileIndex,
    IncludeResolver,
    CircularInclude,
    MissingInclude,
)
from glsleffects.sources.effects import InSection, Preamble

from ..testutils import MemoryFileSystem


files = {}
files["shaders/Common.glsl"] = """#version 430
#extension GL_ARB_foo : enable
float common;
"""
files["shaders/Loop.glsl"] = """-- Vertex
#include "Loop.glsl"
void main() {}
-- Fragment
void main() {}
"""

blur = """-- Vertex
#version 430
void main() {}

-- Fragment
#version 430
out vec4 color;
void main() { color = vec4(1.0); }
"""


def make_parser(defines=None, global_block=""):
    fs = MemoryFileSystem(files)
    index = FileIndex(fs)
    index.index("shaders")
    define_table = DefineTable(defines)
    define_table._global_block = global_block
    resolver = IncludeResolver(index, define_table, fs)
    return EffectParser(resolver, define_table)


def test_parser_states():
    state = Preamble()
    assert state.lines == []

    state = InSection("Blur.Vertex")
    assert state.name == "Blur.Vertex"
    assert state.lines == ["#line 1"]
    assert state.line_counter == 0


def test_effect_sections():
    parser = make_parser()
    effect = parser.parse("Blur", blur)

    assert list(effect.sections) == ["Blur.Vertex", "Blur.Fragment"]
    assert effect.problems == []
    assert effect.sections["Blur.Vertex"] == (
        "#version 430\n#line 1\n#line 2\nvoid main() {}\n\n"
    )
    # The line count restarts for each section
    assert effect.sections["Blur.Fragment"] == (
        "#version 430\n"
        "#line 1\n"
        "#line 2\n"
        "out vec4 color;\n"
        "void main() { color = vec4(1.0); }\n"
    )


def test_effect_unnamed_section():
    parser = make_parser()
    effect = parser.parse("Plain", "float a;\r\nfloat b;\r\n")
    assert list(effect.sections) == ["Plain.glsl"]
    assert effect.sections["Plain.glsl"] == "#line 1\nfloat a;\nfloat b;\n"

    effect = parser.parse("Empty", "")
    assert effect.sections == {"Empty.glsl": "#line 1\n"}


def test_effect_text_before_first_marker_is_dropped():
    parser = make_parser()
    text = "// Shared comment\n#include \"Nope.glsl\"\n-- Compute\nvoid main() {}\n"
    effect = parser.parse("Reduce", text)
    assert list(effect.sections) == ["Reduce.Compute"]
    assert effect.sections["Reduce.Compute"] == "#line 1\nvoid main() {}\n"
    # The include before the marker was never expanded
    assert effect.problems == []


def test_effect_marker_names_are_stripped():
    parser = make_parser()
    effect = parser.parse("Blit", "-- Vertex  \r\nfoo\n")
    assert list(effect.sections) == ["Blit.Vertex"]


def test_effect_duplicate_section_keeps_first(caplog):
    parser = make_parser()
    effect = parser.parse("Dup", "-- Vertex\nfirst\n-- Vertex\nsecond\n")
    assert effect.sections == {"Dup.Vertex": "#line 1\nfirst\n"}
    assert "more than once" in caplog.text


def test_effect_defines_and_hoisting():
    parser = make_parser({"USE_SHADOWS": 1}, "#define PI 3.14159")
    text = """-- Fragment
float a;
#version 430
#include "Common.glsl"
#include "Common.glsl"
void main() {}
"""
    effect = parser.parse("Light", text)
    result = effect.sections["Light.Fragment"]

    ref = """#version 430
#extension GL_ARB_foo : enable
#define USE_SHADOWS 1
#define PI 3.14159
#line 1
float a;
#line 3
#line 1
#line 2
#line 3
float common;
#line 4
#line 1
#line 2
#line 3
float common;
#line 5
void main() {}
"""
    assert result == ref
    assert result.count("#version") == 1


def test_effect_hoisting_is_per_section():
    parser = make_parser()
    text = """-- Vertex
#include "Common.glsl"
-- Fragment
void main() {}
"""
    effect = parser.parse("Split", text)
    assert effect.sections["Split.Vertex"].startswith("#version 430\n")
    assert "#version" not in effect.sections["Split.Fragment"]


def test_effect_missing_include_fails_soft():
    parser = make_parser()
    text = '-- Vertex\n#include "Nope.glsl"\nvoid main() {}\n'
    effect = parser.parse("Broken", text)
    assert effect.sections["Broken.Vertex"] == "#line 1\n\n#line 2\nvoid main() {}\n"
    assert len(effect.problems) == 1
    assert isinstance(effect.problems[0], MissingInclude)


def test_effect_circular_include_only_fails_its_section():
    parser = make_parser()
    effect = parser.parse("Loop", files["shaders/Loop.glsl"], "shaders/Loop.glsl")

    assert list(effect.failed) == ["Loop.Vertex"]
    assert isinstance(effect.failed["Loop.Vertex"], CircularInclude)
    assert effect.problems == [effect.failed["Loop.Vertex"]]

    # The sibling section has no cycle
    assert effect.sections == {"Loop.Fragment": "#line 1\nvoid main() {}\n"}
