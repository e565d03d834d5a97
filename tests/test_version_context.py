from __future__ import annotations

import pytest

from tplpath.context import current_resource_anchor, resource_anchor
from tplpath.version import (
    COMPOSITE_SYNTAX_VERSION,
    composite_syntax_enabled,
    version_int,
)


class TestVersionInt:

    @pytest.mark.parametrize("version,expected", [
        ("2.3.22", 2003022),
        ("2.3", 2003000),
        ("3", 3000000),
        ((2, 3, 22), 2003022),
        (2003022, 2003022),
    ])
    def test_packing(self, version, expected):
        assert version_int(version) == expected

    @pytest.mark.parametrize("version", ["", "2.x", "1.2.3.4", "1.1000", (), (-1,)])
    def test_invalid(self, version):
        with pytest.raises(ValueError):
            version_int(version)


def test_composite_syntax_gate():
    assert composite_syntax_enabled(COMPOSITE_SYNTAX_VERSION)
    assert composite_syntax_enabled("2.4")
    assert not composite_syntax_enabled("2.3.21")
    assert not composite_syntax_enabled((2, 3))


class TestResourceAnchor:

    def test_unset_by_default(self):
        assert current_resource_anchor() is None

    def test_nested_blocks_restore(self):
        with resource_anchor("outer") as name:
            assert name == "outer"
            with resource_anchor("inner"):
                assert current_resource_anchor() == "inner"
            assert current_resource_anchor() == "outer"
        assert current_resource_anchor() is None

    def test_reset_on_exception(self):
        with pytest.raises(RuntimeError):
            with resource_anchor("temp"):
                raise RuntimeError("boom")
        assert current_resource_anchor() is None
