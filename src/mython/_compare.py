"""Comparison operators over holders.

Only equality and less-than are ever dispatched. Class instances answer
them through their `__eq__` and `__lt__` methods, plain values compare
directly when both sides are the same kind. The other four operators are
derived from those two.
"""

__all__ = [
    "equal",
    "not_equal",
    "less",
    "greater",
    "less_or_equal",
    "greater_or_equal",
]

import operator

import mython


def _compare_values(lhs, rhs, op):
    """Compare two plain values of the same kind.

    Returns:
        (bool | None) Comparison result, or None if the operands are not
        two values of one comparable kind
    """
    left = lhs.get()
    right = rhs.get()
    if type(left) is not type(right) or not isinstance(
        left, (mython.Number, mython.String, mython.Bool)
    ):
        return None
    return op(left.value, right.value)


def equal(lhs, rhs, context):
    """Equality, dispatched to `__eq__` for class instances.

    Raises:
        mython.EvalError: If the operands cannot be compared
    """
    instance = lhs.try_as(mython.ClassInstance)
    if instance is not None:
        return mython.is_true(instance.call("__eq__", [rhs], context))

    result = _compare_values(lhs, rhs, operator.eq)
    if result is not None:
        return result
    if not lhs and not rhs:
        return True
    raise mython.EvalError("Cannot compare objects for equality")


def less(lhs, rhs, context):
    """Ordering, dispatched to `__lt__` for class instances.

    Raises:
        mython.EvalError: If the operands cannot be compared
    """
    instance = lhs.try_as(mython.ClassInstance)
    if instance is not None:
        return mython.is_true(instance.call("__lt__", [rhs], context))

    result = _compare_values(lhs, rhs, operator.lt)
    if result is not None:
        return result
    raise mython.EvalError("Cannot compare objects for less")


def not_equal(lhs, rhs, context):
    return not equal(lhs, rhs, context)


def less_or_equal(lhs, rhs, context):
    return less(lhs, rhs, context) or equal(lhs, rhs, context)


def greater(lhs, rhs, context):
    return not less_or_equal(lhs, rhs, context)


def greater_or_equal(lhs, rhs, context):
    return not less(lhs, rhs, context)
