""" Decoding of the checksum fields of Release files

The ``MD5Sum``, ``SHA1``, ``SHA256`` and ``SHA512`` fields of a Release file
list one index file per line::

    MD5Sum:
     0123...cdef 1234 main/binary-amd64/Packages

Once the stanza has been tokenized the lines are joined by single spaces, so
the value is a flat run of ``<digest> <size> <filename>`` triples.
"""

import collections
import logging

from typing import List, Optional

from apt_parser.fieldmap import FieldMap


logger = logging.getLogger('apt_parser.hashes')


HashRecord = collections.namedtuple('HashRecord', ['filename', 'hash', 'size'])
HashRecord.__doc__ = """One index file listed in a Release checksum field

:ivar filename: path of the file relative to the Release file
:ivar hash: hex digest; the algorithm is implied by the field it came from
:ivar size: size of the file in bytes
"""

# Field name -> attribute name on Release
HASH_FIELDS = collections.OrderedDict([
    ('MD5Sum', 'md5'),
    ('SHA1', 'sha1'),
    ('SHA256', 'sha256'),
    ('SHA512', 'sha512'),
])

_GROUP_SIZE = 3


def decode_hash_list(fields, field_name):
    # type: (FieldMap, str) -> Optional[List[HashRecord]]
    """Decode one of the checksum fields of ``fields``

    Returns None when the field is absent.  A trailing group with fewer than
    three tokens, or a group whose size is not a base-10 integer, is dropped
    rather than treated as an error.
    """
    value = fields.get(field_name)
    if value is None:
        return None

    tokens = value.strip().split(' ')
    records = []
    for start in range(0, len(tokens), _GROUP_SIZE):
        group = tokens[start:start + _GROUP_SIZE]
        if len(group) < _GROUP_SIZE:
            logger.debug('Dropping incomplete %s entry: %r', field_name, group)
            break
        digest, size, filename = group
        try:
            records.append(HashRecord(filename=filename, hash=digest, size=int(size, 10)))
        except ValueError:
            logger.debug('Dropping %s entry with invalid size: %r', field_name, group)
    return records
