"""Structural equality and primitive classification of dispatch values

    classOf -- canonical tag naming the runtime category of a value, such as
        'String', 'Number', 'Array' or 'Object'

    isPrimitive -- true for strings, booleans and numbers, the only values a
        dispatch index will accept as keys

    equal -- deep, order-sensitive comparison used for every condition match

'equal()' compares by tag before it compares by value, so there is no
coercion between kinds: 'True' is not equal to '1', and '"1"' is not equal to
'1'.  Lists and tuples are both 'Array' and compare with each other.  NaN is
equal to NaN, so a NaN condition can be registered and dispatched to.
"""

from collections.abc import Mapping
from numbers import Number
from types import FunctionType, BuiltinFunctionType

__all__ = ['classOf', 'isPrimitive', 'equal', 'PRIMITIVE_TAGS']

PRIMITIVE_TAGS = ('String', 'Boolean', 'Number')

STRUCTURAL_TAGS = PRIMITIVE_TAGS + ('Null', 'Array', 'Object')


def classOf(ob):
    """Return the canonical type tag of 'ob'"""

    if ob is None:
        return 'Null'
    if isinstance(ob, bool):
        return 'Boolean'
    if isinstance(ob, str):
        return 'String'
    if isinstance(ob, Number):
        return 'Number'
    if isinstance(ob, (list, tuple)):
        return 'Array'
    if isinstance(ob, Mapping):
        return 'Object'
    if isinstance(ob, (FunctionType, BuiltinFunctionType)):
        return 'Function'
    return type(ob).__name__


def isPrimitive(ob):
    """Is 'ob' a string, boolean or number?"""
    return ob is not None and classOf(ob) in PRIMITIVE_TAGS


def equal(a, b):
    """Return true if 'a' and 'b' are structurally equal

    Containers are walked with an explicit stack of pending '(a,b)' pairs, so
    nesting depth is not limited by the interpreter's recursion limit.  A pair
    of containers that has already been queued is not compared again, which
    also takes care of reference cycles.
    """

    seen = set()
    pending = [(a, b)]

    while pending:
        a, b = pending.pop()
        if a is b:
            continue

        tag = classOf(a)
        if tag != classOf(b):
            if tag in STRUCTURAL_TAGS or classOf(b) in STRUCTURAL_TAGS:
                return False
            if not _fallback(a, b):
                return False

        elif tag == 'Array' or tag == 'Object':
            pair = id(a), id(b)
            if pair in seen:
                continue
            seen.add(pair)
            if len(a) != len(b):
                return False
            if tag == 'Array':
                pending.extend(zip(a, b))
            else:
                for key in a:
                    if key not in b:
                        return False
                    pending.append((a[key], b[key]))

        elif tag == 'Number':
            if not (_fallback(a, b) or (_isNaN(a) and _isNaN(b))):
                return False

        elif not _fallback(a, b):
            return False

    return True


def _isNaN(ob):
    return _fallback(ob, ob) is False


def _fallback(a, b):
    """Compare with the values' own '==', identity if that blows up"""
    try:
        return bool(a == b)
    except (TypeError, ValueError, ArithmeticError, RecursionError):
        return a is b
