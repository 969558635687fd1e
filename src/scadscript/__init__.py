"""scadscript: build OpenSCAD scene trees in python and compile them to OpenSCAD scripts."""

__version__ = '0.1.0'

from scadscript.modifier import (
    BASE_MODIFIERS,
    DEBUG,
    DISABLE,
    SHOW_ONLY,
    TRANSPARENT,
    InvalidModifier,
    OscModifier,
    ScadBaseException,
)
from scadscript.params import (
    OSC_FALSE,
    OSC_TRUE,
    ConversionException,
    render_params,
    render_value,
)
from scadscript.base import (
    Container,
    InvalidNode,
    LinearExtrude,
    Node,
    NotParentException,
    ParentNode,
    Raw,
    RawTextHookNotSet,
    Shape,
    Transformation,
    circle,
    color,
    cube,
    cylinder,
    difference,
    hull,
    intersection,
    minkowski,
    mirror,
    polygon,
    raw,
    resize,
    rotate,
    scale,
    sphere,
    square,
    text,
    translate,
    union,
)
from scadscript.compiler import (
    FileWriter, ScadCompiler, StringWriter, compile, compile_scad, compile_to_str)
from scadscript.vector import VectorOperandError, vectorAdd, vectorMultiply, vector_add, vector_multiply
from scadscript.runner import EntryPointNotFound, scad_main

__all__ = [
    'BASE_MODIFIERS',
    'DEBUG',
    'DISABLE',
    'SHOW_ONLY',
    'TRANSPARENT',
    'InvalidModifier',
    'OscModifier',
    'ScadBaseException',
    'OSC_FALSE',
    'OSC_TRUE',
    'ConversionException',
    'render_params',
    'render_value',
    'Container',
    'InvalidNode',
    'LinearExtrude',
    'Node',
    'NotParentException',
    'ParentNode',
    'Raw',
    'RawTextHookNotSet',
    'Shape',
    'Transformation',
    'circle',
    'color',
    'cube',
    'cylinder',
    'difference',
    'hull',
    'intersection',
    'minkowski',
    'mirror',
    'polygon',
    'raw',
    'resize',
    'rotate',
    'scale',
    'sphere',
    'square',
    'text',
    'translate',
    'union',
    'FileWriter',
    'ScadCompiler',
    'StringWriter',
    'compile',
    'compile_scad',
    'compile_to_str',
    'VectorOperandError',
    'vectorAdd',
    'vectorMultiply',
    'vector_add',
    'vector_multiply',
    'EntryPointNotFound',
    'scad_main',
]
