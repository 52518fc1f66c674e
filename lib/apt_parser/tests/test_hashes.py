import logging

from apt_parser.fieldmap import FieldMap
from apt_parser.hashes import HASH_FIELDS, HashRecord, decode_hash_list
from apt_parser.stanza import parse_field_map


class TestDecodeHashList:

    def test_decode(self):
        # type: () -> None
        fields = FieldMap([('MD5Sum', 'aaa111 100 pool/a.deb bbb222 200 pool/b.deb')])

        hashes = decode_hash_list(fields, 'MD5Sum')

        assert hashes == [
            HashRecord(filename='pool/a.deb', hash='aaa111', size=100),
            HashRecord(filename='pool/b.deb', hash='bbb222', size=200),
        ]
        assert hashes[0].size == 100
        assert hashes[1].filename == 'pool/b.deb'

    def test_decode_after_tokenizing(self):
        # type: () -> None
        fields = parse_field_map('''\
SHA256:
 aaa111          1394768 main/binary-amd64/Packages
 bbb222               96 main/binary-amd64/Release
''')

        hashes = decode_hash_list(fields, 'sha256')

        assert [(h.hash, h.size, h.filename) for h in hashes] == [
            ('aaa111', 1394768, 'main/binary-amd64/Packages'),
            ('bbb222', 96, 'main/binary-amd64/Release'),
        ]

    def test_absent_field(self):
        # type: () -> None
        assert decode_hash_list(FieldMap([('SHA1', 'aaa 1 a')]), 'SHA512') is None

    def test_empty_field(self):
        # type: () -> None
        assert decode_hash_list(FieldMap([('SHA1', '')]), 'SHA1') == []

    def test_trailing_partial_group_dropped(self, caplog):
        # type: (...) -> None
        fields = FieldMap([('SHA1', 'aaa 1 a bbb 2')])

        with caplog.at_level(logging.DEBUG, logger='apt_parser.hashes'):
            hashes = decode_hash_list(fields, 'SHA1')

        assert hashes == [HashRecord('a', 'aaa', 1)]
        assert 'incomplete' in caplog.text

    def test_invalid_size_dropped(self):
        # type: () -> None
        fields = FieldMap([('SHA1', 'aaa big a bbb 2 b')])

        assert decode_hash_list(fields, 'SHA1') == [HashRecord('b', 'bbb', 2)]

    def test_hash_fields(self):
        # type: () -> None
        assert list(HASH_FIELDS.items()) == [
            ('MD5Sum', 'md5'),
            ('SHA1', 'sha1'),
            ('SHA256', 'sha256'),
            ('SHA512', 'sha512'),
        ]
