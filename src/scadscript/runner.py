"""Command line runner generating OpenSCAD scripts from scadscript models.

A model script is a python file defining a function (main by default) that
returns the root node. The scadscript API is available to the script without
importing it.

    # box.py
    def main():
        return difference(cube(10, True), sphere(6))

    $ scadscript box.py box.scad

Scripts can also run themselves:

    if __name__ == '__main__':
        scad_main(main)
"""

import argparse
import builtins
import logging
import runpy
import sys
from typing import Any, Callable

from datatrees import datatree, dtfield

from scadscript.base import Node, Raw
from scadscript.compiler import FileWriter, compile as compile_node, output_file
from scadscript.modifier import ScadBaseException

log = logging.getLogger(__name__)

SCRIPT_RUN_NAME = '__scadscript__'


class EntryPointNotFound(ScadBaseException):
    """The model script does not define the requested entry function."""


def script_globals():
    """Returns the names made available to model scripts. Names of python
    builtins (e.g. compile) are left out so scripts keep the builtin."""
    import scadscript
    return dict(
        (name, getattr(scadscript, name))
        for name in scadscript.__all__
        if not hasattr(builtins, name))


def load_entry(script_path: str, entry: str = 'main') -> Callable[[], Node]:
    """Runs the script at script_path and returns its entry, a node or a function
    returning the root node."""
    log.debug('loading model script %s', script_path)
    namespace = runpy.run_path(
        script_path, init_globals=script_globals(), run_name=SCRIPT_RUN_NAME)
    func = namespace.get(entry)
    if func is None or not (isinstance(func, Node) or callable(func)):
        raise EntryPointNotFound(
            'script %r does not define a callable %r' % (script_path, entry))
    return func


def resolve_root(item) -> Node:
    """Returns item if it is a node otherwise calls it to produce the node."""
    if isinstance(item, Node):
        return item
    return item()


@datatree
class ScadMainRunner:
    """Parses arguments and writes the OpenSCAD script for a model."""
    argv: list | None = None
    root: Any = dtfield(
        default=None, doc='A node or function returning a node. If None, a script is loaded.')
    default_entry: str = 'main'
    default_indent: int = 0
    _args: argparse.Namespace | None = dtfield(default=None, init=False)
    parser: argparse.ArgumentParser | None = dtfield(
        self_default=lambda s: s._make_parser(), init=False)

    @property
    def args(self) -> argparse.Namespace:
        if self._args is None:
            self.parse_args()
        return self._args

    def _make_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(description='Generate an OpenSCAD script from a model.')
        if self.root is None:
            parser.add_argument('script', help='The python model script.')
        parser.add_argument(
            'output',
            nargs='?',
            default=None,
            help='The .scad file to write. Writes to stdout if not provided.')
        parser.add_argument(
            '--entry',
            type=str,
            default=self.default_entry,
            help='Name of the script function returning the model.')
        parser.add_argument(
            '--indent',
            type=int,
            default=self.default_indent,
            help='Spaces to indent each nesting level.')
        parser.add_argument(
            '--verbose',
            action='store_true',
            help='Log debug information to stderr.')
        return parser

    def parse_args(self):
        self._args = self.parser.parse_args(self.argv)

    def _get_root(self) -> Node:
        if self.root is not None:
            return resolve_root(self.root)
        return resolve_root(load_entry(self.args.script, self.args.entry))

    def _generate(self, fp):
        writer = FileWriter(fp)
        with Raw.text_hook(writer.write_line):
            root = self._get_root()
            compile_node(root, writer, indent_multiple=self.args.indent)

    def run(self) -> int:
        if self.args.verbose:
            logging.basicConfig(level=logging.DEBUG)
            logging.getLogger('scadscript').setLevel(logging.DEBUG)

        if self.args.output is None:
            self._generate(sys.stdout)
            return 0

        with output_file(self.args.output) as fp:
            self._generate(fp)
        print(f'Exported SCAD: {self.args.output}', file=sys.stderr)
        return 0


def scad_main(item, argv: list | None = None) -> int:
    """Entry point for model scripts that run themselves.

    Args:
        item: A node or a function returning a node.
        argv: Command line arguments, defaults to sys.argv[1:].
    """
    return ScadMainRunner(argv=argv, root=item).run()


def main(argv: list | None = None) -> int:
    """The scadscript console script."""
    return ScadMainRunner(argv=argv).run()


if __name__ == '__main__':
    sys.exit(main())
