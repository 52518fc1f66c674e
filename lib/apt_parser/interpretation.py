""" Interpretations of raw field values as typed Python values

Each interpretation receives the raw value of a field (``None`` when the field
is absent from the stanza) and returns the typed value, or ``None`` when the
field is absent or, for the lenient types, cannot be understood.
"""

import datetime
import email.utils

from typing import Generic, List, Optional, TypeVar

from apt_parser.errors import InvalidFieldValueError


T = TypeVar('T')


class Interpretation(Generic[T]):

    def interpret(self, field_name, value):
        # type: (str, Optional[str]) -> Optional[T]
        if value is None:
            return None
        return self._interpret_value(field_name, value)

    def _interpret_value(self, field_name, value):
        # type: (str, str) -> Optional[T]
        raise NotImplementedError  # pragma: no cover


class StringInterpretation(Interpretation[str]):

    def __init__(self, strip=True):
        # type: (bool) -> None
        super(StringInterpretation, self).__init__()
        self._strip = strip

    def _interpret_value(self, field_name, value):
        # type: (str, str) -> Optional[str]
        return value.strip() if self._strip else value


class ListInterpretation(Interpretation[List[str]]):
    """Splits a value on a fixed separator

    Dependency style fields use ", ", Release files use " " for most lists.
    The items themselves are not validated.
    """

    def __init__(self, separator, strip=True):
        # type: (str, bool) -> None
        super(ListInterpretation, self).__init__()
        self._separator = separator
        self._strip = strip

    def _interpret_value(self, field_name, value):
        # type: (str, str) -> Optional[List[str]]
        if self._strip:
            value = value.strip()
        return value.split(self._separator)


class BooleanInterpretation(Interpretation[bool]):
    """APT "yes"/"no" flags

    This is a tri-state: anything but "yes" or "no" gives None, not False.
    """

    def _interpret_value(self, field_name, value):
        # type: (str, str) -> Optional[bool]
        value = value.strip()
        if value == 'yes':
            return True
        if value == 'no':
            return False
        return None


class IntegerInterpretation(Interpretation[int]):

    def __init__(self, zero_is_absent=False):
        # type: (bool) -> None
        super(IntegerInterpretation, self).__init__()
        self._zero_is_absent = zero_is_absent

    def _interpret_value(self, field_name, value):
        # type: (str, str) -> Optional[int]
        try:
            number = int(value.strip(), 10)
        except ValueError:
            return None
        if number == 0 and self._zero_is_absent:
            return None
        return number


class DateInterpretation(Interpretation[datetime.datetime]):
    """RFC 2822 timestamps, e.g. "Thu, 13 Jan 2022 07:15:42 +0000"

    Unlike the other interpretations, text that is not a date is an error.
    """

    def _interpret_value(self, field_name, value):
        # type: (str, str) -> Optional[datetime.datetime]
        try:
            return email.utils.parsedate_to_datetime(value.strip())
        except (TypeError, ValueError):
            # Older Pythons raise TypeError for unparsable text
            raise InvalidFieldValueError(field_name, value)


STRING = StringInterpretation()
RAW_STRING = StringInterpretation(strip=False)
LIST_COMMA_SPACE_SEPARATED = ListInterpretation(', ')
LIST_SPACE_SEPARATED = ListInterpretation(' ')
# Signed-By is split as-is, without stripping the value first
LIST_COMMA_SEPARATED = ListInterpretation(',', strip=False)
BOOLEAN = BooleanInterpretation()
INTEGER = IntegerInterpretation()
INSTALLED_SIZE = IntegerInterpretation(zero_is_absent=True)
DATE = DateInterpretation()
