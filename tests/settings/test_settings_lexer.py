"""
Tests for the settings argument lexer.
"""

import pytest

from tplpath.settings import SettingsLexer, SettingsSyntaxError


class TestSettingsLexer:

    def setup_method(self):
        self.lexer = SettingsLexer()

    def test_empty_string(self):
        tokens = self.lexer.tokenize("")
        assert len(tokens) == 1
        assert tokens[0].type == 'EOF'

    def test_assignment(self):
        tokens = self.lexer.tokenize("name = 'value')")

        assert [(t.type, t.value) for t in tokens] == [
            ('NAME', 'name'),
            ('SYMBOL', '='),
            ('STRING', "'value'"),
            ('SYMBOL', ')'),
            ('EOF', ''),
        ]

    def test_positions(self):
        tokens = self.lexer.tokenize("a=1")

        assert [t.position for t in tokens] == [0, 1, 2, 3]
        assert tokens[2].end == 3

    def test_start_offset(self):
        tokens = self.lexer.tokenize("xx?settings(a=1)", start=12)

        assert tokens[0].value == 'a'
        assert tokens[0].position == 12

    def test_keywords(self):
        for keyword in ("true", "false", "null"):
            tokens = self.lexer.tokenize(keyword)
            assert tokens[0].type == 'KEYWORD'
            assert tokens[0].value == keyword

    def test_numbers(self):
        for number in ("1", "-12", "+3", "1.5", ".5", "2e10", "-1.5E-3"):
            tokens = self.lexer.tokenize(number)
            assert tokens[0].type == 'NUMBER', number
            assert tokens[0].value == number

    def test_strings_with_escapes(self):
        tokens = self.lexer.tokenize(r'"a\"b" ' + r"'c\'d'")

        assert tokens[0].type == 'STRING'
        assert tokens[0].value == r'"a\"b"'
        assert tokens[1].value == r"'c\'d'"

    def test_parens_inside_string(self):
        tokens = self.lexer.tokenize('")"')
        assert tokens[0].type == 'STRING'

    def test_unterminated_string(self):
        with pytest.raises(SettingsSyntaxError, match="Unterminated string literal"):
            self.lexer.tokenize('"abc')

    def test_unknown_character(self):
        with pytest.raises(SettingsSyntaxError, match="Unexpected character") as exc_info:
            self.lexer.tokenize("a = #")
        assert exc_info.value.position == 4

    def test_stream_is_lazy(self):
        stream = self.lexer.tokenize_stream("a) #")

        assert next(stream).value == 'a'
        assert next(stream).value == ')'
        # '#' is only reached when pulling further
        with pytest.raises(SettingsSyntaxError):
            next(stream)
