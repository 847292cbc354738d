"""
Expansion of ``#include`` directives.

Included files are inlined recursively. ``#version`` and ``#extension``
lines are hoisted out of the text, because they must be at the top of the
final compilation unit. Every place where lines are added or removed is
followed by a ``#line`` marker, so that the line numbers reported by the
shader compiler still point at the right line in the right file.
"""

from ..utils import logger
from .errors import FileNotIndexed, MissingInclude, UndefinedKey, CircularInclude


INCLUDE_DIRECTIVE = "#include"
HOISTED_DIRECTIVES = ("#version", "#extension")


def line_marker(line_number):
    """Get the directive that sets the number of the next line."""
    return f"#line {line_number}"


def iter_lines(text):
    """Yield the lines of the given text, without line endings.

    A trailing carriage return is removed so that files with Windows line
    endings produce the same result.
    """
    start = 0
    while start < len(text):
        end = text.find("\n", start)
        if end < 0:
            end = len(text)
        line = text[start:end]
        if line.endswith("\r"):
            line = line[:-1]
        yield line
        start = end + 1


class HoistedDirectives:
    """Accumulates the version and extension lines found anywhere in the include graph.

    Each line is kept once. Version lines come first, since the compiler
    requires ``#version`` to precede everything else.
    """

    def __init__(self):
        self._lines = []

    def __len__(self):
        return len(self._lines)

    def __iter__(self):
        return iter(self._lines)

    def add(self, line):
        if line not in self._lines:
            self._lines.append(line)

    def render(self):
        versions = [line for line in self._lines if line.startswith("#version")]
        others = [line for line in self._lines if not line.startswith("#version")]
        return "".join(line + "\n" for line in versions + others)


class Expansion:
    """The state of one top-level resolution: the hoisted directives, the
    chain of files currently being expanded, and the problems encountered.
    """

    def __init__(self, origin=None, hoisted=None):
        self.hoisted = HoistedDirectives() if hoisted is None else hoisted
        self.in_progress = [] if origin is None else [origin]
        self.problems = []

    def report(self, problem):
        logger.error(str(problem))
        self.problems.append(problem)


class IncludeResolver:
    """Expands include directives, using a FileIndex to find files by their bare name."""

    def __init__(self, file_index, defines, filesystem):
        self._index = file_index
        self._defines = defines
        self._fs = filesystem

    def expand_includes(self, path, hoisted=None):
        """Get the expanded text of the file at ``path``.

        Hoisted lines are added to ``hoisted`` (a HoistedDirectives object),
        so that a caller can collect them for a whole compilation unit.
        """
        expansion = Expansion(hoisted=hoisted)
        return self._expand(path, expansion)

    def process_line(self, line, line_number, out, expansion):
        """Process a single source line and append the result to ``out``.

        The ``line_number`` is the (1-based) position of the line in its file.
        """
        if line.startswith(INCLUDE_DIRECTIVE):
            out.append(self._include(line, expansion))
            out.append(line_marker(line_number + 1))
        elif line.startswith(HOISTED_DIRECTIVES):
            expansion.hoisted.add(line)
            out.append(line_marker(line_number + 1))
        else:
            out.append(line)

    def header_name(self, line):
        """Get the bare file name from an include directive.

        The name is either quoted, as in ``#include "Name.glsl"``, or the
        quoted value of a define, as in ``#include SOME_KEY``.
        """
        start = line.find('"')
        end = line.rfind('"')
        if start > 0 and end > start:
            return line[start + 1 : end]

        parts = line.split()
        if len(parts) < 2:
            raise MissingInclude(line, "too few tokens")
        try:
            value = self._defines.lookup(parts[1])
        except UndefinedKey:
            raise UndefinedKey(parts[1], line) from None
        value = value.strip()
        start = value.find('"')
        end = value.rfind('"')
        if start >= 0 and end > start:
            return value[start + 1 : end]
        return value

    def _include(self, line, expansion):
        try:
            path = self._index.resolve(self.header_name(line))
        except FileNotIndexed as err:
            expansion.report(MissingInclude(line, str(err)))
            return ""
        except (MissingInclude, UndefinedKey) as err:
            expansion.report(err)
            return ""
        return self._expand(path, expansion)

    def _expand(self, path, expansion):
        if path in expansion.in_progress:
            raise CircularInclude(expansion.in_progress + [path])
        try:
            text = self._fs.read_text(path)
        except OSError as err:
            expansion.report(MissingInclude(path, str(err)))
            return ""

        expansion.in_progress.append(path)
        try:
            out = [line_marker(1)]
            for line_number, line in enumerate(iter_lines(text), 1):
                self.process_line(line, line_number, out, expansion)
        finally:
            expansion.in_progress.pop()
        return "\n".join(out)
