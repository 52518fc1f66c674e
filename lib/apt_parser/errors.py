""" Exceptions raised while building typed APT records """


class AptParserError(Exception):
    """Base class for all errors raised by apt_parser"""


class MissingRequiredKeyError(AptParserError, KeyError):
    """Indicates that a field required by a record type is absent

    The tokenizer itself never raises; this is only raised while building a
    typed record with validation enabled.
    """

    def __init__(self, key):
        # type: (str) -> None
        self.key = key
        super(MissingRequiredKeyError, self).__init__(key)

    def __str__(self):
        # type: () -> str
        return "Missing Required APT Key: " + self.key


class InvalidFieldValueError(AptParserError, ValueError):
    """Indicates that a field value could not be interpreted as its type"""

    def __init__(self, key, value):
        # type: (str, str) -> None
        self.key = key
        self.value = value
        super(InvalidFieldValueError, self).__init__(key, value)

    def __str__(self):
        # type: () -> str
        return "Could not parse %s: %s" % (self.key, self.value)
