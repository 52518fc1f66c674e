from typing import Any, Callable, Dict

import pytest


_STANZA_TEMPLATE = '''\
Package: pkg{index}
Version: 1.{index}-1
Architecture: amd64
Maintainer: Example Maintainer <maint@example.org>
Installed-Size: {index}
Depends: libc6 (>= 2.34), libfoo{index}
Filename: pool/main/p/pkg{index}/pkg{index}_1.{index}-1_amd64.deb
Size: {size}
SHA256: {sha256:064x}
Description: synthetic package number {index}
 Generated for tests.
'''


@pytest.fixture
def make_packages_index():
    # type: () -> Callable[[int], str]
    """Factory for Packages indices with the given number of entries"""
    def _make(count):
        # type: (int) -> str
        return '\n'.join(
            _STANZA_TEMPLATE.format(index=i, size=1000 + i, sha256=i)
            for i in range(count)
        )
    return _make


@pytest.fixture(autouse=True)
def doctest_add_apt_parser(doctest_namespace):
    # type: (Dict[str, Any]) -> None
    # Make the package available to doctests that only show usage
    # (e.g. in the package docstring) without importing it.
    import apt_parser
    doctest_namespace['apt_parser'] = apt_parser
