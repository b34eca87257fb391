"""Branch registry: the authoritative list of a multimethod's branches"""

from collections import namedtuple

from zope.interface import implementer

from multimethods.interfaces import IBranchRegistry
from multimethods.equality import equal

__all__ = ['Branch', 'BranchRegistry']


Branch = namedtuple('Branch', 'condition handler')


@implementer(IBranchRegistry)
class BranchRegistry(object):

    """Ordered sequence of branches, matched by structural equality

    Matching scans the most recently added branches first.  Since 'when()'
    refuses equal conditions, the order only shows when branches are added
    to the registry directly.
    """

    def __init__(self):
        self.branches = []

    def add(self, condition, handler):
        branch = Branch(condition, handler)
        self.branches.append(branch)
        return branch

    def findMatching(self, value):
        for branch in reversed(self.branches):
            if equal(value, branch.condition):
                return branch

    def removeMatching(self, condition):
        kept, removed = [], []
        for branch in self.branches:
            if equal(condition, branch.condition):
                removed.append(branch)
            else:
                kept.append(branch)
        self.branches = kept
        return removed

    def __iter__(self):
        return iter(list(self.branches))

    def __len__(self):
        return len(self.branches)

    def __repr__(self):
        return "BranchRegistry(%r)" % (self.branches,)
