"""A very tiny CLI.

Invoke using e.g. ``python -m glsleffects version`` or
``python -m glsleffects dump Blur.Vertex Blur.Fragment --root Data/Shaders``.
"""

import sys
import argparse

import glsleffects


def main(argv=None):
    # Get argv so we can massage it
    if argv is None:
        argv = sys.argv[1:]

    # Defaults and aliases
    if not argv:
        argv = ["help"]
    if argv == ["--version"]:
        argv = ["version"]

    # Let the rest to argparse

    parser = argparse.ArgumentParser(
        prog="glsleffects",
        description="The (very basic) glsleffects CLI",
    )

    parser.add_argument(
        "command", action="store", help="The command to run: 'help', 'version' or 'dump'"
    )
    parser.add_argument("ids", nargs="*", help="The shader ids to dump, e.g. Blur.Fragment")
    parser.add_argument("--root", default=None, help="The shader directory")
    parser.add_argument(
        "-D",
        dest="defines",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Add a preprocessor define",
    )

    args = parser.parse_args(argv)
    command = args.command.lower()

    if command == "help":
        parser.print_help()
    elif command == "version":
        print("glsleffects v" + glsleffects.__version__)
    elif command == "dump":
        return _dump(args)
    else:
        print(f"Invalid command '{command}'")
        return 1
    return 0


def _dump(args):
    defines = {}
    for item in args.defines:
        key, _, value = item.partition("=")
        defines[key] = value
    try:
        context = glsleffects.ShaderContext(args.root, defines=defines)
    except (OSError, ValueError) as err:
        print(f"Cannot load shaders: {err}")
        return 1
    failed = False
    for shader_id in args.ids:
        text = context.get_shader_string(shader_id)
        failed = failed or not text
        print(f"Shader dump ({shader_id}):")
        print("-" * 44)
        print(text)
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
