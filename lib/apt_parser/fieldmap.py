""" Case-insensitive, order preserving field storage for APT stanzas """

import collections.abc

from typing import Any, Iterator, Iterable, Mapping, Optional, Tuple

from apt_parser._util import _strI


class FieldMap(collections.abc.MutableMapping):
    """A dictionary-like object for the fields of a single APT stanza

    Keys are field names.  Lookups are case-insensitive, but the spelling a key
    was first inserted with is preserved and is what iteration returns::

        >>> fields = FieldMap([('Maintainer', 'Jane Doe <jane@example.com>')])
        >>> fields['MAINTAINER']
        'Jane Doe <jane@example.com>'
        >>> list(fields)
        ['Maintainer']

    ``set()`` only inserts: it is a no-op when the key already exists under
    any case.  Item assignment replaces the value and keeps the original
    spelling::

        >>> fields.set('maintainer', 'John Doe <john@example.com>')
        >>> fields['Maintainer']
        'Jane Doe <jane@example.com>'
        >>> fields['MAINTAINER'] = 'John Doe <john@example.com>'
        >>> list(fields.entries())
        [('Maintainer', 'John Doe <john@example.com>')]

    Insertion order is preserved.  Values are always strings.
    """

    def __init__(self, pairs=None):
        # type: (Optional[Iterable[Tuple[str, str]]]) -> None
        self.__dict = {}  # type: dict
        if pairs is not None:
            for key, value in pairs:
                self[key] = value

    def __getitem__(self, key):
        # type: (str) -> str
        return self.__dict[_strI(key)]

    def __setitem__(self, key, value):
        # type: (str, str) -> None
        # dict keeps the first key object on reassignment, and with it the
        # original spelling
        self.__dict[_strI(key)] = value

    def __delitem__(self, key):
        # type: (str) -> None
        del self.__dict[_strI(key)]

    def __contains__(self, key):
        # type: (Any) -> bool
        if not isinstance(key, str):
            return False
        return _strI(key) in self.__dict

    def __iter__(self):
        # type: () -> Iterator[str]
        for key in self.__dict:
            yield str(key)

    def __len__(self):
        # type: () -> int
        return len(self.__dict)

    def __eq__(self, other):
        # type: (Any) -> bool
        if not isinstance(other, collections.abc.Mapping):
            return NotImplemented
        if len(self) != len(other):
            return False
        for key, value in other.items():
            if key not in self or self[key] != value:
                return False
        return True

    # Mutable, so not hashable
    __hash__ = None  # type: ignore

    def __repr__(self):
        # type: () -> str
        return '{%s}' % ', '.join('%r: %r' % (k, v) for k, v in self.entries())

    def set(self, key, value):
        # type: (str, str) -> None
        """Insert key with value unless the key is already present"""
        if key not in self:
            self[key] = value

    @property
    def field_count(self):
        # type: () -> int
        return len(self)

    def entries(self):
        # type: () -> Iterator[Tuple[str, str]]
        """Iterate over (original-case key, value) pairs in insertion order"""
        for key, value in self.__dict.items():
            yield str(key), value

    def copy(self):
        # type: () -> FieldMap
        return self.__class__(self.entries())

    def to_dict(self):
        # type: () -> Mapping[str, str]
        """Return a plain dict keyed by the original spelling of each field"""
        return dict(self.entries())
