"""Multimethod implementation"""

import logging

from zope.interface import implementer

from multimethods.interfaces import *
from multimethods.index import DispatchIndex
from multimethods.registry import BranchRegistry

__all__ = ['Multimethod', 'method', 'identity']

log = logging.getLogger(__name__)


def identity(ob=None, *args, **kw):
    """Default dispatch function: the first argument is the dispatch value

    A call with no positional arguments dispatches on 'None'."""
    return ob


def method(dispatch=None):
    """Return a new multimethod dispatching on 'dispatch(*args,**kw)'"""
    return Multimethod(dispatch)












@implementer(IMultimethod)
class Multimethod(object):

    """Extensible function that dispatches on a computed value

    Each call passes its arguments to 'dispatch', and the resulting dispatch
    value selects the branch to run.  A branch is picked by looking the value
    up in the fast index first, then by scanning the registry for a condition
    structurally equal to it, and finally by falling back to 'baseline'.
    Only the chosen handler is called, with the original arguments.

    A 'Multimethod' can decorate its dispatch function, in which case it
    takes over the function's name and docstring::

        @Multimethod
        def area(shape):
            '''Area of a shape record'''
            return shape['kind']

        @area.when('square')
        def area_of_square(shape):
            return shape['side'] ** 2
    """

    def __init__(self, dispatch=None):
        if dispatch is None:
            dispatch = identity
            self.__name__ = "anonymous"
        else:
            self.__name__ = getattr(dispatch, '__name__', "anonymous")
            if self.__name__ == '<lambda>':
                self.__name__ = "anonymous"
            self.__doc__ = getattr(dispatch, '__doc__', None)
            self.__module__ = getattr(dispatch, '__module__', None)

        self.dispatch = dispatch
        self.branches = BranchRegistry()
        self.index = DispatchIndex()
        self.baseline = None


    def __call__(self, *args, **kw):
        value = self.dispatch(*args, **kw)
        branch = self.index.lookup(value)
        if branch is None:
            branch = self.branches.findMatching(value)
        if branch is not None:
            return branch.handler(*args, **kw)
        if self.baseline is None:
            raise NoBranchError(value)
        return self.baseline(*args, **kw)


    def when(self, condition, handler=None):
        """Call 'handler' when the dispatch value equals 'condition'"""

        if handler is None:
            def registerMethod(func):
                self.when(condition, func)
                return func
            return registerMethod

        if self.branches.findMatching(condition) is not None:
            raise AmbiguousBranchError(condition)

        branch = self.branches.add(condition, handler)
        self.index.insert(condition, branch)
        log.debug("Added branch %r to %s", condition, self.__name__)
        return self


    def fallback(self, handler=None):
        """Call 'handler' when no branch matches"""

        if handler is None:
            def registerFallback(func):
                self.fallback(func)
                return func
            return registerFallback

        self.baseline = handler
        return self


    def remove(self, condition):
        """Remove the branch for 'condition' from the registry and index"""

        for branch in self.branches.removeMatching(condition):
            self.index.discard(branch.condition)
            log.debug("Removed branch %r from %s", condition, self.__name__)
        return self


    def clone(self):
        """Return a multimethod that tries its own branches, then this one"""

        instance = self.__class__(self.dispatch)
        instance.__name__ = self.__name__
        instance.__doc__ = self.__doc__
        instance.fallback(self)
        return instance


    def __repr__(self):
        return "<%s %s with %d branches>" % (
            self.__class__.__name__, self.__name__, len(self.branches)
        )
