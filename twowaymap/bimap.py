# bimap.py
#
# Bidirectional map
"""
A TwoWayMap pairs values from two sets so that each side uniquely
determines the other. It is stored as two plain dictionaries, one per
lookup direction, which are always updated together::

  m = TwoWayMap()
  m.add('x', 1)
  m.get_forward('x')    # 1
  m.get_backward(1)     # 'x'

Both sides must be hashable. Iteration yields ``(a, b)`` pairs in the
insertion order of the forward side.
"""
import logging
from collections.abc import Mapping
from typing import Hashable

__docformat__ = 'restructuredtext en'

logger = logging.getLogger('twowaymap')

# sentinel, never stored in a map
_NIL = object()


class TwoWayMapError(Exception):
    """Base class for TwoWayMap exceptions.

    :ivar msg: error message
    :type msg: string
    :ivar key: key the error is about
    """

    def __init__(self, msg=None, key=None):
        super().__init__(msg, key)
        self.msg = msg
        self.key = key

    def __str__(self):
        str = self.__class__.__name__
        if self.msg:
            str += ': %s' % self.msg
        if self.key is not None:
            str += ' (%r)' % (self.key,)
        return str


class KeyNotFoundError(TwoWayMapError, KeyError):
    """Lookup of a key that has no entry."""


class DuplicateKeyError(TwoWayMapError, KeyError):
    """Add-only insert of a key that is already present.

    :ivar side: ``'forward'`` or ``'backward'``
    """

    def __init__(self, msg=None, key=None, side=None):
        super().__init__(msg, key)
        self.side = side


class DuplicateValueError(TwoWayMapError, ValueError):
    """Source mapping is not injective, so it has no inverse."""


class TwoWayMap:
    """Bidirectional map.

    :ivar  forward: mapping from the first side to the second
    :type  forward: dict
    :ivar backward: mapping from the second side to the first
    :type backward: dict
    """

    def __init__(self, pairs=None):
        """Constructor.

        :param pairs: initial content, either an iterable of ``(a, b)``
                      pairs loaded last-write-wins, or a mapping which
                      must be injective
        :type  pairs: iterable or mapping
        """
        self.forward = {}
        self.backward = {}
        if pairs is None:
            return
        if isinstance(pairs, Mapping):
            self._load_mapping(pairs.items())
        else:
            self._load_pairs(pairs)

    @classmethod
    def from_pairs(cls, pairs):
        """Build a map from ``(a, b)`` pairs; later pairs overwrite earlier ones."""
        bimap = cls()
        bimap._load_pairs(pairs)
        return bimap

    @classmethod
    def from_reversed_pairs(cls, pairs):
        """Build a map from ``(b, a)`` pairs; later pairs overwrite earlier ones."""
        bimap = cls()
        bimap._load_pairs((one, two) for two, one in pairs)
        return bimap

    @classmethod
    def from_mapping(cls, mapping):
        """Build a map from an ``a -> b`` mapping.

        :raises DuplicateValueError: if two keys share a value
        """
        bimap = cls()
        bimap._load_mapping(mapping.items())
        return bimap

    @classmethod
    def from_reversed_mapping(cls, mapping):
        """Build a map from a ``b -> a`` mapping.

        :raises DuplicateValueError: if two keys share a value
        """
        bimap = cls()
        bimap._load_mapping((one, two) for two, one in mapping.items())
        return bimap

    def _load_pairs(self, pairs):
        for one, two in pairs:
            self._put(one, two)

    def _load_mapping(self, items):
        forward = {}
        backward = {}
        for one, two in items:
            if two in backward:
                raise DuplicateValueError(
                    'Value shared by %r and %r' % (backward[two], one), two)
            if one in forward:
                raise DuplicateValueError(
                    'Value shared by %r and %r' % (forward[one], two), one)
            forward[one] = two
            backward[two] = one
        self.forward = forward
        self.backward = backward

    def _put(self, one: Hashable, two: Hashable):
        # look up both sides before touching either index
        old_two = self.forward.get(one, _NIL)
        old_one = self.backward.get(two, _NIL)
        if old_two is not _NIL and old_two != two:
            logger.debug('Replacing %r -> %r with %r', one, old_two, two)
            del self.backward[old_two]
        if old_one is not _NIL and old_one != one:
            logger.debug('Replacing %r <- %r with %r', two, old_one, one)
            del self.forward[old_one]
        self.forward[one] = two
        self.backward[two] = one

    def add(self, one: Hashable, two: Hashable):
        """Add the pair ``one <-> two``.

        Neither side may already be present.

        :raises DuplicateKeyError: if ``one`` or ``two`` is already stored
        """
        if one in self.forward:
            raise DuplicateKeyError('Key already present', one, 'forward')
        if two in self.backward:
            raise DuplicateKeyError('Key already present', two, 'backward')
        self.forward[one] = two
        self.backward[two] = one

    def add_backward(self, two: Hashable, one: Hashable):
        """Add the pair with the arguments given from the backward side."""
        self.add(one, two)

    def set_forward(self, one: Hashable, two: Hashable):
        """Store ``one <-> two``, replacing any pair either side was in."""
        self._put(one, two)

    def set_backward(self, two: Hashable, one: Hashable):
        """Store ``two <-> one`` from the backward side, replacing as set_forward."""
        self._put(one, two)

    def get_forward(self, key: Hashable):
        """Returns the second side paired with ``key``.

        :raises KeyNotFoundError: if ``key`` is not a forward key
        """
        try:
            return self.forward[key]
        except KeyError:
            raise KeyNotFoundError('No forward entry', key) from None

    def get_backward(self, key: Hashable):
        """Returns the first side paired with ``key``.

        :raises KeyNotFoundError: if ``key`` is not a backward key
        """
        try:
            return self.backward[key]
        except KeyError:
            raise KeyNotFoundError('No backward entry', key) from None

    def try_get_forward(self, key: Hashable) -> tuple:
        """Returns ``(True, value)``, or ``(False, None)`` if absent."""
        if key in self.forward:
            return True, self.forward[key]
        return False, None

    def try_get_backward(self, key: Hashable) -> tuple:
        """Backward counterpart of try_get_forward."""
        if key in self.backward:
            return True, self.backward[key]
        return False, None

    def get(self, key: Hashable, default=None):
        """Like dict.get on the forward side."""
        return self.forward.get(key, default)

    def get_backward_or(self, key: Hashable, default=None):
        """Like dict.get on the backward side."""
        return self.backward.get(key, default)

    def has_forward(self, key: Hashable) -> bool:
        return key in self.forward

    def has_backward(self, key: Hashable) -> bool:
        return key in self.backward

    def remove_forward(self, key: Hashable) -> bool:
        """Remove the pair whose first side is ``key``.

        :return: whether a pair was removed
        """
        if key not in self.forward:
            return False
        del self.backward[self.forward.pop(key)]
        return True

    def remove_backward(self, key: Hashable) -> bool:
        """Remove the pair whose second side is ``key``.

        :return: whether a pair was removed
        """
        if key not in self.backward:
            return False
        del self.forward[self.backward.pop(key)]
        return True

    def clear(self):
        self.forward.clear()
        self.backward.clear()

    def copy(self):
        bimap = self.__class__()
        bimap.forward = dict(self.forward)
        bimap.backward = dict(self.backward)
        return bimap

    def inverse(self):
        """Returns a new map with the two sides swapped."""
        bimap = self.__class__()
        bimap.forward = dict(self.backward)
        bimap.backward = dict(self.forward)
        return bimap

    def items(self):
        return self.forward.items()

    def keys(self):
        return self.forward.keys()

    def values(self):
        return self.forward.values()

    def __len__(self) -> int:
        return len(self.forward)

    def __iter__(self):
        return iter(self.forward.items())

    def __contains__(self, key: Hashable) -> bool:
        return key in self.forward

    def __getitem__(self, key: Hashable):
        return self.get_forward(key)

    def __setitem__(self, key: Hashable, value: Hashable):
        self.set_forward(key, value)

    def __delitem__(self, key: Hashable):
        if not self.remove_forward(key):
            raise KeyNotFoundError('No forward entry', key)

    def __eq__(self, other):
        if not isinstance(other, TwoWayMap):
            return NotImplemented
        return self.forward == other.forward

    __hash__ = None

    def __repr__(self):
        return '%s(%r)' % (self.__class__.__name__, self.forward)
