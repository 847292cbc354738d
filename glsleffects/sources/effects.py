"""
Parsing of effect files. An effect file packs several shader stages into
one physical file, each stage starting with a marker line::

    -- Vertex
    #version 430
    void main() { ... }

    -- Fragment
    #version 430
    #include "Lighting.glsl"
    void main() { ... }

Each section is addressed as ``<baseName>.<SectionName>``, e.g.
``Blur.Fragment``. A file without markers is a single section named
``<baseName>.glsl``.
"""

from ..utils import logger
from .errors import CircularInclude
from .includes import Expansion, iter_lines, line_marker


SECTION_MARKER = "-- "
UNNAMED_SECTION = "glsl"


class Preamble:
    """Parser state before the first section marker. The lines are kept
    raw, because they only become a section if no marker follows.
    """

    def __init__(self):
        self.lines = []


class InSection:
    """Parser state while accumulating the body of a named section."""

    def __init__(self, name, origin=None):
        self.name = name
        self.lines = [line_marker(1)]
        self.line_counter = 0
        self.expansion = Expansion(origin)
        self.error = None


class ParsedEffect:
    """The result of parsing one effect file: the assembled sections, the
    sections that could not be assembled (mapped to their error), and all
    problems that were reported along the way.
    """

    def __init__(self, base_name):
        self.base_name = base_name
        self.sections = {}
        self.failed = {}
        self.problems = []

    def __repr__(self):
        return f"<ParsedEffect {self.base_name!r} with sections {list(self.sections)}>"


class EffectParser:
    """Splits the text of an effect file into assembled sections.

    Each assembled section consists of the hoisted version/extension
    lines, the define block, and the expanded body.
    """

    def __init__(self, resolver, defines):
        self._resolver = resolver
        self._defines = defines

    def parse(self, base_name, text, origin=None):
        """Parse the given text. The ``origin`` is the path of the file, used
        to detect files that include themselves.
        """
        effect = ParsedEffect(base_name)
        state = Preamble()

        for line in iter_lines(text):
            if line.startswith(SECTION_MARKER):
                if isinstance(state, InSection):
                    self._flush(state, effect)
                name = line[len(SECTION_MARKER) :].strip()
                state = InSection(f"{base_name}.{name}", origin)
            elif isinstance(state, InSection):
                self._feed(state, line)
            else:
                state.lines.append(line)

        if isinstance(state, Preamble):
            raw_lines = state.lines
            state = InSection(f"{base_name}.{UNNAMED_SECTION}", origin)
            for line in raw_lines:
                self._feed(state, line)
        self._flush(state, effect)

        return effect

    def _feed(self, state, line):
        if state.error is not None:
            return
        state.line_counter += 1
        try:
            self._resolver.process_line(
                line, state.line_counter, state.lines, state.expansion
            )
        except CircularInclude as err:
            # Only this section is lost, its siblings are still assembled
            state.error = err
            state.expansion.report(err)

    def _flush(self, state, effect):
        effect.problems.extend(state.expansion.problems)
        if state.name in effect.sections or state.name in effect.failed:
            logger.warning(
                f"Shader section '{state.name}' is defined more than once, using the first."
            )
            return
        if state.error is not None:
            effect.failed[state.name] = state.error
            return
        define_block = self._defines.render_define_block()
        if define_block and not define_block.endswith("\n"):
            define_block += "\n"
        effect.sections[state.name] = (
            state.expansion.hoisted.render()
            + define_block
            + "\n".join(state.lines)
            + "\n"
        )
