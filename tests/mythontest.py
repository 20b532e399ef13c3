"""Shared helpers for Mython tests."""

import pytest

import mython
from mython import token


def params(names, **cases):
    """Simplified parametrize decorator for test cases.

    Args:
        names: Space or comma-separated string of parameter names
        **cases: Named test cases where key is the test ID and value is
                either a single argument or tuple of arguments

    Returns:
        pytest.mark.parametrize decorator with 'key' as first parameter

    Example:
        @params("code expected", num=("42", token.Number(42)))
        def test_single(key, code, expected):
            assert tokenize(code)[0] == expected
    """
    keys = list(cases)
    params = []
    for k, v in cases.items():
        if isinstance(v, tuple):
            params.append((k, *v))
        else:
            params.append((k, v))

    columns = names.replace(",", " ").split()
    columns.insert(0, "key")
    return pytest.mark.parametrize(columns, params, ids=keys)


def tokenize(source):
    """Lex source to a list of tokens, ending with the first Eof."""
    lexer = mython.Lexer(source)
    tokens = [lexer.current_token()]
    while not tokens[-1].is_(token.Eof):
        tokens.append(lexer.next_token())
    return tokens


def num(value):
    return mython.Holder.own(mython.Number(value))


def text(value):
    return mython.Holder.own(mython.String(value))


def boolean(value):
    return mython.Holder.own(mython.Bool(value))


class Func(mython.Statement):
    """Statement running a Python callable `fn(closure, context) -> Holder`.

    Every call is recorded in `calls` as the closure it was given.
    """

    def __init__(self, fn):
        self.fn = fn
        self.calls = []

    def execute(self, closure, context):
        self.calls.append(dict(closure))
        return self.fn(closure, context)


def const(holder):
    """Statement that always returns `holder`."""
    return Func(lambda closure, context: holder)


def field(closure, name):
    """Read a field of the instance bound to `self` in a closure."""
    return closure["self"].deref().fields[name]


def compare_field_class(name="Point", attr="x"):
    """Class whose `__eq__` and `__lt__` compare one stored field."""

    def eq(closure, context):
        other = closure["other"].deref()
        return boolean(
            mython.equal(field(closure, attr), other.fields[attr], context)
        )

    def lt(closure, context):
        other = closure["other"].deref()
        return boolean(
            mython.less(field(closure, attr), other.fields[attr], context)
        )

    return mython.Class(
        name,
        [
            mython.Method("__eq__", ["other"], Func(eq)),
            mython.Method("__lt__", ["other"], Func(lt)),
        ],
    )


def instance(cls, **fields):
    """Create an owned instance of `cls` with the given field holders."""
    obj = mython.ClassInstance(cls)
    obj.fields.update(fields)
    return mython.Holder.own(obj)
