"""Compiles a scadscript node tree into an OpenSCAD script.

The compiler walks the tree depth first, writing each node's statement or block
header before its children. Output is written to the sink line by line so large
trees are never held in memory as a whole.

A sink is any object with a write(str) method (an open text file, io.StringIO,
StringWriter) or a callable taking a str.
"""

from contextlib import contextmanager
import logging
import os

from scadscript.base import (
    Container,
    InvalidNode,
    LinearExtrude,
    Raw,
    Shape,
    Transformation,
)
from scadscript.modifier import ScadBaseException
from scadscript.params import render_params, render_value

log = logging.getLogger(__name__)


class InvalidIndentLevel(ScadBaseException):
    """Indentation level was set to an invalid number."""


class IndentLevelStackEmpty(ScadBaseException):
    """Indentation level stack popped when empty."""


class StringWriter(object):
    """A writer that collects the script in memory."""

    def __init__(self):
        self._builder = []

    def get(self):
        """Returns the contents written so far."""
        return ''.join(self._builder)

    def write(self, text):
        self._builder.append(text)


class FileWriter(object):
    """A writer that writes to an open file."""

    def __init__(self, fp):
        self.fp = fp

    def write(self, text):
        self.fp.write(text)

    def write_line(self, line):
        """Writes line followed by a newline, used for Raw.text() output."""
        self.fp.write(line)
        self.fp.write('\n')


class FunctionWriter(object):
    """Adapts a callable taking a str to the writer API."""

    def __init__(self, func):
        self.func = func

    def write(self, text):
        self.func(text)


def as_writer(sink):
    """Returns sink if it has a write method otherwise wraps a callable sink."""
    if hasattr(sink, 'write'):
        return sink
    if callable(sink):
        return FunctionWriter(sink)
    raise TypeError('sink %r has no write method and is not callable' % (sink,))


class ScadCompiler(object):
    """Writes the OpenScad script for a node tree."""

    def __init__(self, writer=None, indent_char=' ', indent_multiple=0):
        """
        Args:
           writer: The sink receiving the script, defaults to a StringWriter.
           indent_char: the character used to indent.
           indent_multiple: the number of indent_char added per indent level. With the
               default of 0 nested statements are not indented.
        """
        self.writer = as_writer(writer) if writer is not None else StringWriter()
        self.indent_char = indent_char
        self.indent_multiple = indent_multiple
        self.current_indent_level = 0
        self.current_indent_string = ''
        self.indent_level_stack = []

    def set_indent_level(self, level):
        if level < 0:
            raise InvalidIndentLevel('Requested indent level below zero is not allowed.')
        self.current_indent_level = level
        self.current_indent_string = (
            self.indent_char * self.indent_multiple * self.current_indent_level
        )

    def push_increase_indent(self, amount=1):
        """Push an indent level change and increase indent level."""
        level = self.current_indent_level
        self.set_indent_level(level + amount)
        self.indent_level_stack.append(level)

    def pop_indent_level(self):
        """Pops the indent level stack and sets the indent level to the popped value."""
        if not self.indent_level_stack:
            raise IndentLevelStackEmpty('Empty indent level stack cannot be popped.')
        self.set_indent_level(self.indent_level_stack.pop())

    def write_line(self, line):
        """Writes an indented line to the output."""
        self.writer.write(self.current_indent_string + line + '\n')

    def write_block(self, header, node):
        """Writes header { children }."""
        self.write_line(header + ' {')
        self.push_increase_indent()
        for child in node.children:
            if child is None:
                continue
            self.compile_node(child)
        self.pop_indent_level()
        self.write_line('}')

    def compile_node(self, node):
        """Writes the script for node and all its children."""
        prefix = node.get_modifiers() if hasattr(node, 'get_modifiers') else ''
        if isinstance(node, Shape):
            self.write_line('%s%s(%s);' % (prefix, node.kind, render_params(node.properties)))
        elif isinstance(node, LinearExtrude):
            self.write_block('%s%s(%s)' % (prefix, node.kind, render_params(node.properties)), node)
        elif isinstance(node, Container):
            self.write_block('%s%s()' % (prefix, node.kind), node)
        elif isinstance(node, Transformation):
            self.write_block('%s%s(%s)' % (prefix, node.kind, render_value(node.param)), node)
        elif isinstance(node, Raw):
            if node.has_children():
                self.write_block(prefix + node.command, node)
            else:
                self.write_line(prefix + node.command + ';')
        else:
            raise InvalidNode('Cannot compile object %r' % (node,))


def compile(node, sink, **kwds):
    """Writes the OpenScad script for node to sink.
    Args:
        node: The root of the tree.
        sink: A writer or callable receiving the text.
        **kwds: ScadCompiler options, e.g. indent_multiple.
    """
    log.debug('compiling %s tree', getattr(node, 'kind', type(node).__name__))
    ScadCompiler(sink, **kwds).compile_node(node)


compile_scad = compile


def compile_to_str(node, **kwds):
    """Returns the OpenScad script for node."""
    writer = StringWriter()
    compile(node, writer, **kwds)
    return writer.get()


@contextmanager
def output_file(filename, encoding='utf-8'):
    """Opens filename for writing. If the block raises the partially written file
    is removed before the exception propagates."""
    fp = open(filename, 'w', encoding=encoding)
    try:
        with fp:
            yield fp
    except BaseException:
        log.debug('removing partial output %s', filename)
        os.remove(filename)
        raise
