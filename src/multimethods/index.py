"""Fast dispatch index for multimethods with primitive conditions

A 'DispatchIndex' maps primitive conditions straight to their branches, so a
multimethod whose conditions are all strings (or all numbers, or all
booleans) can find a branch with one hash lookup instead of comparing the
dispatch value with every registered condition.

The index is only a cache.  Its state is one of three objects:

    Empty -- nothing inserted yet; every lookup misses

    Locked(tag) -- keys have been inserted, all with the 'classOf()' tag
        'tag'; lookups of other tags miss

    Invalid -- a non-primitive or differently-tagged key was inserted;
        every lookup misses, forever

Each state computes its own successor, and 'Invalid' never has any other
successor than itself.
"""

import logging

from zope.interface import implementer

from multimethods.interfaces import IDispatchIndex, IIndexState
from multimethods.equality import classOf, isPrimitive

__all__ = ['DispatchIndex', 'Empty', 'Locked', 'Invalid']

log = logging.getLogger(__name__)


@implementer(IIndexState)
class Empty:

    """Valid index with no keys and no tag"""

    isValid = True

    def lookup(self, index, key):
        return None

    def insert(self, index, key, branch):
        if not isPrimitive(key):
            return Invalid.insert(index, key, branch)
        state = Locked(classOf(key))
        log.debug("Dispatch index locked to %s keys", state.tag)
        return state.insert(index, key, branch)

    def discard(self, index, key):
        pass

    def __repr__(self): return "Empty"

Empty = Empty()


@implementer(IIndexState)
class Locked(object):

    """Valid index whose keys all have the tag 'tag'"""

    __slots__ = 'tag',

    isValid = True

    def __init__(self, tag):
        self.tag = tag

    def accepts(self, key):
        if key is None or classOf(key) != self.tag:
            return False
        try:
            hash(key)
        except TypeError:
            # e.g. Decimal('sNaN'); only the registry can match these
            return False
        return True

    def lookup(self, index, key):
        if self.accepts(key):
            return index.entries.get(key)

    def insert(self, index, key, branch):
        if not self.accepts(key):
            return Invalid.insert(index, key, branch)
        index.entries[key] = branch
        return self

    def discard(self, index, key):
        if self.accepts(key):
            index.entries.pop(key, None)

    def __eq__(self, other):
        return isinstance(other, Locked) and other.tag == self.tag

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash((Locked, self.tag))

    def __repr__(self):
        return "Locked(%r)" % (self.tag,)


@implementer(IIndexState)
class Invalid:

    """Index that has given up; absorbs every transition"""

    isValid = False

    def lookup(self, index, key):
        return None

    def insert(self, index, key, branch):
        if index.state is not self:
            log.debug(
                "Dispatch index invalidated by %s key %r", classOf(key), key
            )
        index.entries.clear()
        return self

    def discard(self, index, key):
        pass

    def __repr__(self): return "Invalid"

Invalid = Invalid()













@implementer(IDispatchIndex)
class DispatchIndex(object):

    """Cache of branches keyed by primitive conditions of a single tag"""

    def __init__(self):
        self.state = Empty
        self.entries = {}

    @property
    def isValid(self):
        return self.state.isValid

    def lookup(self, key):
        return self.state.lookup(self, key)

    def insert(self, key, branch):
        self.state = self.state.insert(self, key, branch)
        return self

    def discard(self, key):
        self.state.discard(self, key)
        return self

    def invalidate(self):
        if self.state is not Invalid:
            log.debug("Dispatch index invalidated")
            self.entries.clear()
            self.state = Invalid
        return self

    def __len__(self):
        return len(self.entries)

    def __repr__(self):
        return "<DispatchIndex %r with %d entries>" % (
            self.state, len(self.entries)
        )
