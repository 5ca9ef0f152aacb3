"""Bidirectional map.

twowaymap keeps a one-to-one pairing between two sets of hashable values
and answers lookups from either side in constant time. Pairs can be
added with collision checking, upserted, removed from either side, and
iterated in insertion order::

  from twowaymap import TwoWayMap

  ports = TwoWayMap([('http', 80), ('https', 443)])
  ports.get_forward('https')    # 443
  ports.get_backward(80)        # 'http'

  ports.add('ssh', 22)
  ports.add('ssh', 2222)        # raises DuplicateKeyError
  ports['ssh'] = 2222           # replaces the old pair

This package contains one module:

  - bimap: the TwoWayMap class and its exceptions
"""

__docformat__ = 'restructuredtext en'

__url__ = 'https://github.com/twowaymap/twowaymap'
__version__ = '1.0'

from twowaymap.bimap import TwoWayMap
from twowaymap.bimap import TwoWayMapError
from twowaymap.bimap import KeyNotFoundError
from twowaymap.bimap import DuplicateKeyError
from twowaymap.bimap import DuplicateValueError

__all__ = ['bimap', 'TwoWayMap', 'TwoWayMapError', 'KeyNotFoundError',
           'DuplicateKeyError', 'DuplicateValueError']
