"""Tests for the individual attribute providers."""

from __future__ import annotations

import functools
import sys

import pytest

from funcinfo.providers import naming, pad, peek, source
from funcinfo.providers.targets import code_object, underlying_function


def plain(a, b=2):
    return a + b


def decorated_target(x):
    return x


@functools.wraps(decorated_target)
def decorated(*args, **kwargs):
    return decorated_target(*args, **kwargs)


class Adder:
    def __init__(self, step: int) -> None:
        self.step = step

    def add(self, value: int) -> int:
        return value + self.step

    def __call__(self, value: int) -> int:
        return self.add(value)


def test_underlying_function_unwraps_common_wrappers() -> None:
    adder = Adder(1)
    assert underlying_function(plain) is plain
    assert underlying_function(functools.partial(plain, 1)) is plain
    assert underlying_function(adder.add) is Adder.add
    assert underlying_function(adder) is Adder.__call__
    assert underlying_function(decorated) is decorated_target
    assert underlying_function(len) is len
    assert code_object(len) is None
    assert code_object(plain) is plain.__code__


def test_naming_of_methods_and_partials() -> None:
    adder = Adder(1)
    assert naming.bare_name(adder.add) == "add"
    assert naming.full_name(adder.add) == f"{Adder.__module__}.Adder.add"
    assert naming.full_name(functools.partial(plain, 1)) == f"{plain.__module__}.plain"
    assert naming.module_name(str.upper) == "builtins"


def test_source_of_builtin_is_none() -> None:
    assert source.reconstruct_source(len) is None
    assert source.reconstruct_source(plain).startswith("def plain(a, b=2):")


def test_source_of_exec_defined_function_is_none() -> None:
    namespace: dict[str, object] = {}
    exec("def generated():\n    return 1\n", namespace)
    assert source.reconstruct_source(namespace["generated"]) is None


def test_variable_names_are_unique_and_ordered() -> None:
    outer = 1

    def inner(arg):
        local = arg + outer
        return local

    assert pad.variable_names(inner.__code__) == ["arg", "local", "outer"]


def test_pad_reports_unset_closure_cell_as_none() -> None:
    def make():
        def reader():
            return late  # noqa: F821

        yield reader
        late = 1  # noqa: F841

    reader = next(make())
    assert pad.peek_variables(reader) == {"late": None}


def make_tagged(tag):
    def tagged(hook):
        seen = tag
        return hook(), seen

    return tagged


def test_pad_separates_sibling_closures() -> None:
    first = make_tagged("A")
    second = make_tagged("B")

    sibling_view, _ = first(lambda: pad.peek_variables(second))
    own_view, _ = first(lambda: pad.peek_variables(first))

    assert sibling_view == {"hook": None, "seen": None, "tag": "B"}
    assert own_view["tag"] == "A"
    assert own_view["seen"] == "A"
    assert callable(own_view["hook"])


def test_pad_for_builtin_is_empty() -> None:
    assert pad.peek_variables(len) == {}


def test_peek_writes_dump_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    captured = 5

    def closure(x):
        return x + captured

    peek.dump(closure)
    err = capsys.readouterr().err

    assert err.startswith("OBJECT = function(0x")
    assert "CLOSURE = 1 cell(s)" in err
    assert "CELL[0] captured = VALUE = int(0x" in err
    assert "VARNAMES = ('x',)" in err
    assert "FREEVARS = ('captured',)" in err
    assert "BYTECODE:" in err


def test_peek_without_bytecode_and_for_builtins(capsys: pytest.CaptureFixture[str]) -> None:
    peek.dump(plain, bytecode=False)
    err = capsys.readouterr().err
    assert "BYTECODE:" not in err
    assert "DEFAULTS = (2,)" in err

    peek.dump(len)
    err = capsys.readouterr().err
    assert "NAME = 'len'" in err
    assert "CODE = <none>" in err
    assert sys.stderr is not None
