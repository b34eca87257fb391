from reprlib import repr as shortRepr

from zope.interface import Interface, Attribute

__all__ = [
    'NoBranchError', 'AmbiguousBranchError', 'IMultimethod',
    'IBranchRegistry', 'IDispatchIndex', 'IIndexState',
]


class NoBranchError(Exception):
    """No branch responds to the dispatch value of a call"""

    def __init__(self, value):
        Exception.__init__(
            self, "No branch responds to: %s" % shortRepr(value)
        )
        self.value = value


class AmbiguousBranchError(Exception):
    """Another branch is already responding to the same condition"""

    def __init__(self, condition):
        Exception.__init__(
            self, "Another branch is already responding to: %s"
            % shortRepr(condition)
        )
        self.condition = condition
























class IBranchRegistry(Interface):

    """Ordered collection of '(condition,handler)' branches

    Conditions are compared with 'multimethods.equality.equal', never by
    identity.  The registry is the authoritative source of branches for a
    multimethod; any index kept alongside it is only a cache.
    """

    def add(condition, handler):
        """Append a branch for 'condition' and return it"""

    def findMatching(value):
        """Return the newest branch whose condition equals 'value', or 'None'"""

    def removeMatching(condition):
        """Remove every branch whose condition equals 'condition'

        Returns a list of the removed branches (empty if there were none)."""

    def __iter__():
        """Iterate over branches, oldest first"""

    def __len__():
        """Return the number of branches"""


class IIndexState(Interface):

    """One state of a dispatch index: empty, locked to a tag, or invalid"""

    isValid = Attribute("""True unless this is the invalid state""")

    def lookup(index, key):
        """Return the branch stored in 'index' for 'key', or 'None'"""

    def insert(index, key, branch):
        """Store 'branch' under 'key' in 'index' and return the next state"""

    def discard(index, key):
        """Forget 'key' in 'index' if it is there"""


class IDispatchIndex(Interface):

    """Hash-based cache of branches keyed by primitive conditions

    The index only accepts keys that are primitives (strings, booleans and
    numbers) sharing a single 'classOf()' tag.  Any other key makes the index
    invalid for good, after which every lookup is a miss.
    """

    state = Attribute("""The current 'IIndexState'""")

    isValid = Attribute("""False once the index has been invalidated""")

    def lookup(key):
        """Return the branch for 'key', or 'None' on a miss"""

    def insert(key, branch):
        """Store 'branch' under 'key', or invalidate if 'key' is ineligible"""

    def discard(key):
        """Evict 'key' from the index; unknown keys are ignored"""

    def invalidate():
        """Permanently disable the index"""












class IMultimethod(Interface):

    """Callable that picks a handler by the value its arguments dispatch to"""

    dispatch = Attribute(
        """Function computing the dispatch value from the call arguments"""
    )

    branches = Attribute("""The 'IBranchRegistry' of this multimethod""")

    index = Attribute("""The 'IDispatchIndex' of this multimethod""")

    baseline = Attribute(
        """Handler used when no branch matches ('None' raises NoBranchError)"""
    )

    def __call__(*args, **kw):
        """Dispatch on the arguments and return the chosen handler's result"""

    def when(condition, handler=None):
        """Call 'handler' when the dispatch value equals 'condition'

        Raises 'AmbiguousBranchError' if a branch already responds to an equal
        condition.  Returns the multimethod, so calls can be chained.  If
        'handler' is omitted, a decorator is returned instead.  E.g.::

            @area.when('square')
            def area_of_square(shape):
                return shape['side'] ** 2

        After this, 'area_of_square' is still bound to the function, but it
        has also been added to 'area' under the condition 'square'.
        """

    def fallback(handler=None):
        """Use 'handler' when no branch matches (decorator if omitted)"""

    def remove(condition):
        """Remove the branch responding to 'condition', if any"""

    def clone():
        """Return an empty multimethod that falls back to this one"""
