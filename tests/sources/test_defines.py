from pytest import raises

from glsleffects import DefineTable, FileIndex, UndefinedKey
from glsleffects.sources.templating import render_define_block

from ..testutils import MemoryFileSystem


def test_render_define_block():
    assert render_define_block([], "") == ""
    assert render_define_block([], "#define X 1\n") == "#define X 1\n"
    assert render_define_block([("A", "1"), ("B", "x y")], "") == (
        "#define A 1\n#define B x y\n"
    )
    assert render_define_block([("A", '"Foo.glsl"')], "// global") == (
        '#define A "Foo.glsl"\n// global'
    )


def test_define_table_basics():
    defines = DefineTable({"B": 2, "A": "1"})
    assert defines.keys() == ["A", "B"]
    assert "A" in defines
    assert defines.lookup("B") == "2"
    assert defines.render_define_block() == "#define A 1\n#define B 2\n"

    defines.set("C", "3.0")
    defines.remove("A")
    defines.remove("not-there")
    assert defines.render_define_block() == "#define B 2\n#define C 3.0\n"

    with raises(UndefinedKey) as err:
        defines.lookup("A")
    assert err.value.key == "A"


def test_define_table_invalid_keys():
    defines = DefineTable()
    for key in ["", "A B", None, 3]:
        with raises(ValueError):
            defines.set(key, "1")


def test_define_table_global_block():
    fs = MemoryFileSystem(
        {"shaders/common/GlobalDefines.glsl": "#define PI 3.14159\n"}
    )
    index = FileIndex(fs)
    index.index("shaders")

    defines = DefineTable({"USE_SHADOWS": 1})
    assert defines.global_block() == ""
    defines.load_global_block(index, fs)
    assert defines.global_block() == "#define PI 3.14159\n"
    assert defines.render_define_block() == (
        "#define USE_SHADOWS 1\n#define PI 3.14159\n"
    )

    # The global block is opaque text, read once
    assert fs.reads == ["shaders/common/GlobalDefines.glsl"]
    defines.render_define_block()
    assert len(fs.reads) == 1


def test_define_table_without_global_file():
    fs = MemoryFileSystem({"shaders/Blur.glsl": ""})
    index = FileIndex(fs)
    index.index("shaders")

    defines = DefineTable()
    defines.load_global_block(index, fs)
    assert defines.global_block() == ""
    assert defines.render_define_block() == ""
