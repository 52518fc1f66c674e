import logging
import re
import unicodedata

from typing import Any, Callable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from apt_parser.records import AptRecord


_RE_LINE_ENDINGS = re.compile(r'\r\n|\r|\n')
_RE_WHITESPACE_RUN = re.compile(r'\s+')


class _CaseInsensitiveString(str):
    """Field name that matches any other spelling of itself

    Used as the key type of FieldMap: 'SHA256' and 'Sha256' hash and compare
    equal, while str() still gives back the spelling found in the stanza.
    """
    __slots__ = ['folded']

    def __new__(cls, name):  # type: ignore
        key = str.__new__(cls, name)
        key.folded = name.lower()
        return key

    def __hash__(self):
        # type: () -> int
        return hash(self.folded)

    def __eq__(self, other):
        # type: (Any) -> Any
        try:
            return self.folded == other.lower()
        except AttributeError:
            return False

    def __ne__(self, other):
        # type: (Any) -> Any
        return not self == other

    def lower(self):
        # type: () -> str
        return self.folded


_strI = _CaseInsensitiveString


def normalize_text(text):
    # type: (str) -> str
    """Prepare raw APT text for tokenizing

    Line endings are unified to "\\n", NUL bytes are removed, the text is
    put into Unicode NFC form and surrounding whitespace is stripped.
    """
    text = _RE_LINE_ENDINGS.sub('\n', text).replace('\0', '')
    return unicodedata.normalize('NFC', text).strip()


def collapse_whitespace(value):
    # type: (str) -> str
    return _RE_WHITESPACE_RUN.sub(' ', value).strip()


def print_fields(record,  # type: AptRecord
                 *,
                 output_function=None,  # type: Optional[Callable[[str], None]]
                 ):
    # type: (...) -> None
    """Debugging aid, which dumps the raw fields of a record one per line

    :param record: The record (or anything with a ``raw`` FieldMap) to dump.
    :param output_function: Callable that receives a single str argument and is responsible
      for "displaying" that line. The callable may be invoked multiple times (one per line
      of output).  Defaults to logging.info if omitted.
    """
    if output_function is None:
        output_function = logging.info
    output_function(record.__class__.__name__)
    for key, value in record.raw.entries():
        # Keep multi-line values on one output line
        output_function('  ' + key + ': ' + value.replace('\n', '\\n'))
