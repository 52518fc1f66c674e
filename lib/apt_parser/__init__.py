""" Parsing of APT repository metadata: control files, Packages indices and Release files """

# pylint: disable=useless-import-alias
from apt_parser.errors import (
    AptParserError as AptParserError,
    MissingRequiredKeyError as MissingRequiredKeyError,
    InvalidFieldValueError as InvalidFieldValueError,
)
from apt_parser.fieldmap import FieldMap as FieldMap
from apt_parser.hashes import (
    HashRecord as HashRecord,
    decode_hash_list as decode_hash_list,
)
from apt_parser.stanza import (
    parse_field_map as parse_field_map,
    parse_stanzas as parse_stanzas,
    split_stanzas as split_stanzas,
)
from apt_parser.records import (
    AptRecord as AptRecord,
    BinaryControl as BinaryControl,
    Package as Package,
    Packages as Packages,
    Release as Release,
    parse_control as parse_control,
    parse_package_list as parse_package_list,
    parse_release as parse_release,
)

__all__ = [
    'AptParserError',
    'MissingRequiredKeyError',
    'InvalidFieldValueError',
    'FieldMap',
    'HashRecord',
    'decode_hash_list',
    'parse_field_map',
    'parse_stanzas',
    'split_stanzas',
    'AptRecord',
    'BinaryControl',
    'Package',
    'Packages',
    'Release',
    'parse_control',
    'parse_package_list',
    'parse_release',
]
