""" Typed records for binary control files, Packages indices and Release files

Every record wraps the FieldMap of one stanza.  Fields documented by Debian
are made available as typed attributes, while every field (documented or
not) stays reachable through :meth:`AptRecord.get` and the ``raw`` FieldMap::

    >>> control = BinaryControl('''Package: hello
    ... Version: 2.10-2
    ... Architecture: amd64
    ... Maintainer: Santiago Vila <sanvila@debian.org>
    ... Installed-Size: 280
    ... Depends: libc6 (>= 2.14), dpkg
    ... Description: example package based on GNU hello''')
    >>> control.depends
    ['libc6 (>= 2.14)', 'dpkg']
    >>> control.installed_size
    280
    >>> control.get('DEPENDS')
    'libc6 (>= 2.14), dpkg'

Optional fields missing from the stanza are None, never an empty default.
See https://www.debian.org/doc/debian-policy/ch-controlfields.html and
https://wiki.debian.org/DebianRepository/Format for the field definitions.

Classes
-------
"""

import collections
import collections.abc
import logging
from concurrent.futures import ThreadPoolExecutor

from typing import Any, Iterator, List, Optional, Tuple, Union

from apt_parser import interpretation
from apt_parser.errors import AptParserError, InvalidFieldValueError, MissingRequiredKeyError
from apt_parser.fieldmap import FieldMap
from apt_parser.hashes import HASH_FIELDS, decode_hash_list
from apt_parser.stanza import parse_field_map, split_stanzas


logger = logging.getLogger('apt_parser.records')


FieldSpec = collections.namedtuple(
    'FieldSpec', ['attribute', 'field_name', 'interpretation', 'required'])


def _field(attribute, field_name, interp=interpretation.STRING, required=False):
    # type: (str, str, interpretation.Interpretation, bool) -> FieldSpec
    return FieldSpec(attribute, field_name, interp, required)


class AptRecord(object):
    """Generic record: raw access to the fields of one stanza

    Subclasses list the fields they know about in ``_FIELDS``; on construction
    each of them is interpreted and stored as an attribute.

    :param data: the text of a single stanza, or an already parsed FieldMap
    :param validate: whether to check that the required fields are present.
        With validation disabled, missing required fields become None and
        unparsable dates are ignored (with a warning) rather than raised.
    """

    _FIELDS = ()  # type: Tuple[FieldSpec, ...]

    def __init__(self,
                 data,  # type: Union[str, FieldMap]
                 validate=True,  # type: bool
                 ):
        # type: (...) -> None
        if isinstance(data, FieldMap):
            self.raw = data
        else:
            self.raw = parse_field_map(data)
        self._validate = validate
        if validate:
            self._check_required_fields()
        self._populate_fields()

    @classmethod
    def field_specs(cls):
        # type: () -> Tuple[FieldSpec, ...]
        return cls._FIELDS

    @classmethod
    def required_fields(cls):
        # type: () -> List[str]
        return [spec.field_name for spec in cls.field_specs() if spec.required]

    def _check_required_fields(self):
        # type: () -> None
        for field_name in self.required_fields():
            if field_name not in self.raw:
                raise MissingRequiredKeyError(field_name)

    def _populate_fields(self):
        # type: () -> None
        for spec in self.field_specs():
            value = self.raw.get(spec.field_name)
            try:
                typed_value = spec.interpretation.interpret(spec.field_name, value)
            except InvalidFieldValueError as e:
                if self._validate:
                    raise
                logger.warning('Ignoring %s', e)
                typed_value = None
            setattr(self, spec.attribute, typed_value)

    def get(self, key, default=None):
        # type: (str, Optional[str]) -> Optional[str]
        """Raw string value of a field (case-insensitive), or default"""
        return self.raw.get(key, default)

    @property
    def field_count(self):
        # type: () -> int
        """Number of fields in the stanza, known to this class or not"""
        return len(self.raw)

    def __getitem__(self, key):
        # type: (str) -> str
        return self.raw[key]

    def __contains__(self, key):
        # type: (Any) -> bool
        return key in self.raw

    def __iter__(self):
        # type: () -> Iterator[str]
        return iter(self.raw)

    def __repr__(self):
        # type: () -> str
        return '%s(%r)' % (self.__class__.__name__, self.raw)


class BinaryControl(AptRecord):
    """The control file of a binary package

    Package, Version, Architecture, Maintainer and Description are required.
    The relationship fields (``depends``, ``breaks``, ...) are lists split on
    ", "; alternatives ("a | b") stay together in one item.  ``description``
    is kept exactly as tokenized, so a trailing "." paragraph line remains a
    trailing newline.
    """

    _FIELDS = (
        _field('package', 'Package', required=True),
        _field('source', 'Source'),
        _field('version', 'Version', required=True),
        _field('section', 'Section'),
        _field('priority', 'Priority'),
        _field('architecture', 'Architecture', required=True),
        _field('essential', 'Essential', interpretation.BOOLEAN),
        _field('depends', 'Depends', interpretation.LIST_COMMA_SPACE_SEPARATED),
        _field('pre_depends', 'Pre-Depends', interpretation.LIST_COMMA_SPACE_SEPARATED),
        _field('recommends', 'Recommends', interpretation.LIST_COMMA_SPACE_SEPARATED),
        _field('suggests', 'Suggests', interpretation.LIST_COMMA_SPACE_SEPARATED),
        _field('replaces', 'Replaces', interpretation.LIST_COMMA_SPACE_SEPARATED),
        _field('enhances', 'Enhances', interpretation.LIST_COMMA_SPACE_SEPARATED),
        _field('breaks', 'Breaks', interpretation.LIST_COMMA_SPACE_SEPARATED),
        _field('conflicts', 'Conflicts', interpretation.LIST_COMMA_SPACE_SEPARATED),
        _field('provides', 'Provides', interpretation.LIST_COMMA_SPACE_SEPARATED),
        _field('installed_size', 'Installed-Size', interpretation.INSTALLED_SIZE),
        _field('maintainer', 'Maintainer', required=True),
        _field('description', 'Description', interpretation.RAW_STRING, required=True),
        _field('homepage', 'Homepage'),
        _field('built_using', 'Built-Using'),
        _field('package_type', 'Package-Type'),
        _field('multi_arch', 'Multi-Arch'),
    )


class Package(AptRecord):
    """One entry of a Packages index

    An entry is a binary control stanza with distribution fields added.  The
    control part is available as ``control`` and its attributes can also be
    read directly from the package (``pkg.version`` is ``pkg.control.version``).

    Filename and Size are required on top of the control file requirements.
    The checksum attributes hold the single hex digest of the .deb.
    """

    _FIELDS = (
        _field('filename', 'Filename', required=True),
        _field('size', 'Size', interpretation.INTEGER, required=True),
        _field('md5', 'MD5sum'),
        _field('sha1', 'SHA1'),
        _field('sha256', 'SHA256'),
        _field('sha512', 'SHA512'),
        _field('description_md5', 'Description-md5'),
    )

    _CONTROL_ATTRIBUTES = frozenset(spec.attribute for spec in BinaryControl.field_specs())

    def __init__(self,
                 data,  # type: Union[str, FieldMap]
                 validate=True,  # type: bool
                 ):
        # type: (...) -> None
        if not isinstance(data, FieldMap):
            data = parse_field_map(data)
        # The control record is checked first so that its required fields
        # are reported before Filename and Size
        self.control = BinaryControl(data, validate=validate)
        super(Package, self).__init__(data, validate=validate)

    def __getattr__(self, name):
        # type: (str) -> Any
        # Only called when normal lookup fails
        if name in Package._CONTROL_ATTRIBUTES:
            return getattr(self.control, name)
        raise AttributeError("'%s' object has no attribute '%s'"
                             % (self.__class__.__name__, name))


class Release(AptRecord):
    """A Release (or InRelease, once the signature is removed) file

    No field is strictly required: real repositories routinely omit Suite or
    Codename, so both may be None.  The ``md5``, ``sha1``, ``sha256`` and
    ``sha512`` attributes are lists of :class:`apt_parser.hashes.HashRecord`
    decoded from the MD5Sum, SHA1, SHA256 and SHA512 fields.
    """

    _FIELDS = (
        _field('architectures', 'Architectures', interpretation.LIST_SPACE_SEPARATED),
        _field('no_support_for_architecture_all', 'No-Support-For-Architecture-All',
               interpretation.BOOLEAN),
        _field('description', 'Description'),
        _field('origin', 'Origin'),
        _field('label', 'Label'),
        _field('suite', 'Suite'),
        _field('codename', 'Codename'),
        _field('version', 'Version'),
        _field('date', 'Date', interpretation.DATE),
        _field('valid_until', 'Valid-Until', interpretation.DATE),
        _field('components', 'Components', interpretation.LIST_SPACE_SEPARATED),
        _field('not_automatic', 'NotAutomatic', interpretation.BOOLEAN),
        _field('but_automatic_upgrades', 'ButAutomaticUpgrades', interpretation.BOOLEAN),
        _field('acquire_by_hash', 'Acquire-By-Hash', interpretation.BOOLEAN),
        _field('signed_by', 'Signed-By', interpretation.LIST_COMMA_SEPARATED),
        _field('packages_require_authorization', 'Packages-Require-Authorization',
               interpretation.BOOLEAN),
    )

    def _populate_fields(self):
        # type: () -> None
        super(Release, self)._populate_fields()
        for field_name, attribute in HASH_FIELDS.items():
            setattr(self, attribute, decode_hash_list(self.raw, field_name))


class Packages(collections.abc.Sequence):
    """All entries of a Packages index, in file order

    :param data: the text of the whole index
    :param validate: passed on to each :class:`Package`
    :param skip_invalid: if True, entries that fail to build are logged and
        left out; otherwise the first failure is raised
    :param workers: if given, parse the entries on a thread pool of this size
    """

    def __init__(self,
                 data,  # type: str
                 validate=True,  # type: bool
                 skip_invalid=False,  # type: bool
                 workers=None,  # type: Optional[int]
                 ):
        # type: (...) -> None
        stanzas = split_stanzas(data)
        slots = [None] * len(stanzas)  # type: List[Optional[Package]]

        def build(index):
            # type: (int) -> None
            try:
                slots[index] = Package(stanzas[index], validate=validate)
            except AptParserError as e:
                if not skip_invalid:
                    raise
                logger.warning('Skipping entry %d of Packages index: %s', index, e)

        if workers:
            with ThreadPoolExecutor(max_workers=workers) as executor:
                # Consume the results so that exceptions propagate
                list(executor.map(build, range(len(stanzas))))
        else:
            for index in range(len(stanzas)):
                build(index)

        self._packages = [p for p in slots if p is not None]  # type: List[Package]
        logger.debug('Parsed %d of %d Packages entries', len(self._packages), len(stanzas))

    def __getitem__(self, index):
        # type: (Any) -> Any
        return self._packages[index]

    def __len__(self):
        # type: () -> int
        return len(self._packages)

    def __repr__(self):
        # type: () -> str
        return '<%s: %d entries>' % (self.__class__.__name__, len(self))


def parse_control(text, validate=True):
    # type: (str, bool) -> BinaryControl
    return BinaryControl(text, validate=validate)


def parse_release(text, validate=True):
    # type: (str, bool) -> Release
    return Release(text, validate=validate)


def parse_package_list(text, validate=True, skip_invalid=False, workers=None):
    # type: (str, bool, bool, Optional[int]) -> Packages
    """Parse a Packages index; see :class:`Packages` for the arguments"""
    return Packages(text, validate=validate, skip_invalid=skip_invalid, workers=workers)
