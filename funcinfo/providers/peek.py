"""Low-level structural dump of a callable, written to sys.stderr.

The layout follows the style of interpreter debugging dumps: one header line
per object with its type and address, then indented fields. Bytecode is
appended through ``dis``.
"""

from __future__ import annotations

import dis
import sys
import types
from typing import Any, TextIO

from funcinfo.providers.targets import underlying_function

INDENT = "  "


def _header(label: str, obj: Any) -> str:
    return f"{label} = {type(obj).__name__}(0x{id(obj):x})"


def _write_code(code: types.CodeType, stream: TextIO, depth: int) -> None:
    pad = INDENT * depth
    stream.write(f"{pad}{_header('CODE', code)}\n")
    pad += INDENT
    stream.write(f"{pad}NAME = {code.co_name!r}\n")
    stream.write(f"{pad}FILENAME = {code.co_filename!r}\n")
    stream.write(f"{pad}FIRSTLINENO = {code.co_firstlineno}\n")
    stream.write(f"{pad}ARGCOUNT = {code.co_argcount}\n")
    stream.write(f"{pad}POSONLYARGCOUNT = {code.co_posonlyargcount}\n")
    stream.write(f"{pad}KWONLYARGCOUNT = {code.co_kwonlyargcount}\n")
    stream.write(f"{pad}NLOCALS = {code.co_nlocals}\n")
    stream.write(f"{pad}STACKSIZE = {code.co_stacksize}\n")
    stream.write(f"{pad}FLAGS = 0x{code.co_flags:x} ({dis.pretty_flags(code.co_flags)})\n")
    stream.write(f"{pad}VARNAMES = {code.co_varnames!r}\n")
    stream.write(f"{pad}CELLVARS = {code.co_cellvars!r}\n")
    stream.write(f"{pad}FREEVARS = {code.co_freevars!r}\n")
    stream.write(f"{pad}NAMES = {code.co_names!r}\n")


def _write_closure(function: Any, stream: TextIO, depth: int) -> None:
    pad = INDENT * depth
    cells = getattr(function, "__closure__", None) or ()
    code = getattr(function, "__code__", None)
    names = code.co_freevars if code is not None else ()
    stream.write(f"{pad}CLOSURE = {len(cells)} cell(s)\n")
    for index, cell in enumerate(cells):
        label = names[index] if index < len(names) else "?"
        try:
            contents = cell.cell_contents
        except ValueError:
            stream.write(f"{pad}{INDENT}CELL[{index}] {label} = <empty>\n")
            continue
        stream.write(f"{pad}{INDENT}CELL[{index}] {label} = {_header('VALUE', contents)}\n")


def dump(target: Any, *, bytecode: bool = True) -> None:
    """Write the structural dump of ``target`` to the current sys.stderr."""
    stream = sys.stderr
    function = underlying_function(target)

    stream.write(f"{_header('OBJECT', target)} at 0x{id(target):x}\n")
    stream.write(f"{INDENT}REFCNT = {sys.getrefcount(target) - 1}\n")
    stream.write(f"{INDENT}TYPE = {type(target).__module__}.{type(target).__qualname__}\n")
    if function is not target:
        stream.write(f"{INDENT}{_header('TARGET', function)}\n")
    stream.write(f"{INDENT}NAME = {getattr(function, '__name__', None)!r}\n")
    stream.write(f"{INDENT}QUALNAME = {getattr(function, '__qualname__', None)!r}\n")
    stream.write(f"{INDENT}MODULE = {getattr(function, '__module__', None)!r}\n")

    code = getattr(function, "__code__", None)
    if code is None:
        stream.write(f"{INDENT}CODE = <none>\n")
        return

    stream.write(f"{INDENT}DEFAULTS = {getattr(function, '__defaults__', None)!r}\n")
    stream.write(f"{INDENT}KWDEFAULTS = {getattr(function, '__kwdefaults__', None)!r}\n")
    _write_closure(function, stream, depth=1)
    _write_code(code, stream, depth=1)
    if bytecode:
        stream.write(f"{INDENT}BYTECODE:\n")
        dis.dis(code, file=stream)
