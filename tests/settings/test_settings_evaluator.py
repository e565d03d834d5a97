"""
Tests for LiteralSettingsEvaluator.
"""

import pytest

from tplpath.settings import (
    LiteralSettingsEvaluator,
    SettingsEvaluationError,
    SettingsEvaluator,
    SettingsSyntaxError,
)


class Target:

    def __init__(self):
        self.encoding = "utf-8"
        self.sticky = True
        self.limit = 0
        self.ratio = 1.0
        self.label = "x"
        self._hidden = 1

    def reset(self):
        pass


def _configure(source: str, target=None):
    target = target if target is not None else Target()
    evaluator = LiteralSettingsEvaluator()
    end = evaluator.configure(source, source.index("(") + 1, target)
    return end, target


class TestLiteralSettingsEvaluator:

    def test_implements_protocol(self):
        assert isinstance(LiteralSettingsEvaluator(), SettingsEvaluator)

    def test_assigns_literals(self):
        source = "x?settings(encoding='latin-1', sticky=false, limit=10, ratio=0.5, label=null)"
        end, target = _configure(source)

        assert end == len(source)
        assert target.encoding == "latin-1"
        assert target.sticky is False
        assert target.limit == 10
        assert target.ratio == 0.5
        assert target.label is None

    def test_empty_list(self):
        source = "x?settings()"
        end, target = _configure(source)

        assert end == len(source)
        assert target.encoding == "utf-8"

    def test_trailing_comma(self):
        source = "x?settings(limit=1,)"
        end, target = _configure(source)

        assert end == len(source)
        assert target.limit == 1

    def test_trailing_whitespace_consumed(self):
        source = "x?settings( limit = 2 )  \t"
        end, target = _configure(source)

        assert end == len(source)
        assert target.limit == 2

    def test_stops_after_closing_paren(self):
        source = "x?settings(limit=3) junk"
        end, _ = _configure(source)

        assert end == source.index("junk")

    def test_string_escapes(self):
        source = r'x?settings(label="a\"b\n)")'
        end, target = _configure(source)

        assert end == len(source)
        assert target.label == 'a"b\n)'

    def test_unsupported_escape(self):
        with pytest.raises(SettingsSyntaxError, match="Unsupported escape"):
            _configure(r"x?settings(label='\q')")

    def test_unknown_property(self):
        with pytest.raises(SettingsEvaluationError, match="no settable property 'colour'"):
            _configure("x?settings(colour='red')")

    def test_private_property_rejected(self):
        with pytest.raises(SettingsEvaluationError):
            _configure("x?settings(_hidden=2)")

    def test_method_rejected(self):
        with pytest.raises(SettingsEvaluationError):
            _configure("x?settings(reset=true)")

    def test_missing_equals(self):
        with pytest.raises(SettingsSyntaxError, match="Expected '='"):
            _configure("x?settings(limit 1)")

    def test_missing_value(self):
        with pytest.raises(SettingsSyntaxError, match="Expected literal value"):
            _configure("x?settings(limit=)")

    def test_missing_separator(self):
        with pytest.raises(SettingsSyntaxError, match="Expected ',' or '\\)'"):
            _configure("x?settings(limit=1 sticky=true)")

    def test_unclosed_list(self):
        with pytest.raises(SettingsSyntaxError):
            _configure("x?settings(limit=1")

    def test_bean_construction_unsupported(self):
        with pytest.raises(SettingsSyntaxError):
            _configure("x?settings(label=Foo())")


class TypedTarget:
    SETTABLE = {"encoding": (str,), "limit": (int,), "ratio": (int, float), "strict": (bool,)}

    def __init__(self):
        self.encoding = "utf-8"
        self.limit = 0
        self.ratio = 1.0
        self.strict = False
        self.base_dir = "/srv"


class TestDeclaredProperties:

    def test_declared_properties_assigned(self):
        _, target = _configure("x?settings(encoding='ascii', limit=3, ratio=2, strict=true)", TypedTarget())

        assert (target.encoding, target.limit, target.ratio, target.strict) == ("ascii", 3, 2, True)

    def test_undeclared_attribute_rejected(self):
        target = TypedTarget()
        with pytest.raises(SettingsEvaluationError, match="no settable property 'base_dir'"):
            _configure("x?settings(base_dir='elsewhere')", target)
        assert target.base_dir == "/srv"

    def test_wrong_type_rejected(self):
        target = TypedTarget()
        with pytest.raises(SettingsEvaluationError, match="'encoding' of TypedTarget expects str, got int"):
            _configure("x?settings(encoding=1)", target)
        assert target.encoding == "utf-8"

    def test_bool_is_not_a_number(self):
        with pytest.raises(SettingsEvaluationError, match="expects int, got bool"):
            _configure("x?settings(limit=true)", TypedTarget())

    def test_null_rejected(self):
        with pytest.raises(SettingsEvaluationError, match="got NoneType"):
            _configure("x?settings(strict=null)", TypedTarget())
