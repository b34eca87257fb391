"""Value-based Multiple Dispatch ("Multimethods")

 A multimethod is a function whose behaviour is picked at call time, by
 computing a dispatch value from the call's arguments and comparing it with
 the conditions of the branches that have been registered on it.  Conditions
 are compared by structural equality, so strings, numbers, tuples, lists and
 dicts can all be used to select a branch, and new branches can be attached
 without touching the call sites::

    from multimethods import method

    area = method(lambda shape: shape['kind'])
    area.when('square', lambda shape: shape['side'] ** 2)
    area.when('rect', lambda shape: shape['w'] * shape['h'])
    area.fallback(lambda shape: 0)

 When every condition is a string (or every condition is a number, or a
 boolean), branches are found through a hash index instead of a linear scan.
 Registering any other kind of condition switches the index off for that
 multimethod; dispatch still works, it just scans.

 'clone()' returns a new multimethod that tries its own branches and then
 falls back to the multimethod it was cloned from, so a library can hand out
 an extensible copy without its users being able to change the original.
"""

from multimethods.interfaces import *
from multimethods.equality import classOf, isPrimitive, equal
from multimethods.index import DispatchIndex
from multimethods.registry import Branch, BranchRegistry
from multimethods.functions import Multimethod, method, identity
