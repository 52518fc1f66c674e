""" Tokenizing of RFC822-like APT stanzas into FieldMaps

A stanza (or paragraph) is a run of ``Key: value`` lines, optionally followed
by continuation lines, as found in ``Release`` files, binary ``control`` files
and ``Packages`` indices::

    >>> fields = parse_field_map('''Package: foo
    ... Description: short summary
    ...  longer text
    ...  .
    ...  more text''')
    >>> fields['description']
    'short summary longer text more text'

Stanzas within a document are separated by a blank line::

    >>> split_stanzas('Package: foo\\n\\nPackage: bar\\n')
    ['Package: foo', 'Package: bar']

Neither function ever raises on malformed input; lines that cannot be
attributed to a field are dropped.
"""

import logging
import re

from typing import List, Optional

from apt_parser._util import normalize_text, collapse_whitespace
from apt_parser.fieldmap import FieldMap


logger = logging.getLogger('apt_parser.stanza')


# The key is everything up to the first ": " (non-greedy), matched against the
# untrimmed line.  An indented line containing ": " therefore starts a field
# whose key keeps its leading whitespace.
_RE_FIELD_LINE = re.compile(r'^(.*?): (.*)$')

STANZA_SEPARATOR = '\n\n'

# Continuation line value used to represent an empty line in multi-line
# fields (e.g. Description)
_PARAGRAPH_MARKER = '.'


def parse_field_map(text):
    # type: (str) -> FieldMap
    """Parse the text of a single stanza into a FieldMap

    The first occurrence of a field wins; later duplicate lines are discarded
    and any continuation lines below them still extend the field that was
    current before the duplicate.  Continuation lines are joined onto the
    value of the field above them with runs of whitespace collapsed to a
    single space.  A continuation line consisting of a lone "." appends a
    newline to the value instead.
    """
    fields = FieldMap()
    current_key = None  # type: Optional[str]

    for line in normalize_text(text).split('\n'):
        if not line:
            continue

        clean_line = line.strip()
        match = _RE_FIELD_LINE.match(line)
        if match is not None and match.group(1) and match.group(2).strip():
            key, value = match.group(1), match.group(2)
            if key in fields:
                # The current key is left alone, so continuation lines of the
                # duplicate still go to the field above it
                logger.debug('Ignoring duplicate field %r', key)
                continue
            fields.set(key, value)
            current_key = key
            continue

        if clean_line.endswith(':'):
            # A field without a value on its own line; the value (if any)
            # follows on continuation lines.  A repeated header keeps its first
            # value and takes the continuation lines below it
            key = clean_line[:-1]
            fields.set(key, '')
            current_key = key
        elif current_key is not None:
            existing = fields[current_key]
            if clean_line == _PARAGRAPH_MARKER:
                fields[current_key] = existing + '\n'
            else:
                # Keep the leading whitespace so the join produces a separator
                fields[current_key] = collapse_whitespace(existing + line.rstrip())
        else:
            logger.debug('Dropping line outside of any field: %r', line)

    return fields


def split_stanzas(text):
    # type: (str) -> List[str]
    """Split a multi-stanza document into the text of each stanza

    Blocks that are empty after stripping are dropped.  The result is a list
    (rather than a generator) as callers routinely need its length up front.
    """
    stanzas = []
    for chunk in normalize_text(text).split(STANZA_SEPARATOR):
        chunk = chunk.strip()
        if chunk:
            stanzas.append(chunk)
    return stanzas


def parse_stanzas(text):
    # type: (str) -> List[FieldMap]
    """Parse a multi-stanza document into one FieldMap per stanza"""
    return [parse_field_map(stanza) for stanza in split_stanzas(text)]
