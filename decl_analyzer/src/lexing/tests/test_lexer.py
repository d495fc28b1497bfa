"""
Tests for lexing/lexer.py - Scanning source text into tokens.
"""

import pytest

from decl_analyzer.src.common.constants import AnalyzerConfig
from decl_analyzer.src.common.diagnostics import Stage
from decl_analyzer.src.lexing.lexer import Lexer, tokenize
from decl_analyzer.src.lexing.tokens import Token, TokenKind, format_token_table


def kinds(result):
    return [token.kind for token in result.tokens]


def messages(result):
    return [error.message for error in result.errors]


class TestBasicScanning:
    """Tests for the token kinds produced from well-formed input."""

    def test_simple_declaration(self):
        """int x = 5; scans to TYPE, IDENTIFIER, EQUALS, INT, SEMICOLON, END."""
        result = tokenize("int x = 5;")
        assert result.ok
        assert result.tokens == [
            Token(TokenKind.TYPE, "int", 1),
            Token(TokenKind.IDENTIFIER, "x", 1),
            Token(TokenKind.EQUALS, "=", 1),
            Token(TokenKind.INT_LITERAL, "5", 1),
            Token(TokenKind.SEMICOLON, ";", 1),
            Token(TokenKind.END, "", 1),
        ]

    def test_empty_input_yields_only_end(self):
        """Empty and None input produce a lone END token on line 1."""
        for source in ("", None, "   \t "):
            result = tokenize(source)
            assert result.ok
            assert result.tokens == [Token(TokenKind.END, "", 1)]

    @pytest.mark.parametrize(
        "word", ["byte", "short", "int", "long", "float", "double", "boolean", "char", "String"]
    )
    def test_type_names(self, word):
        """Every primitive type name and String scan as TYPE."""
        assert tokenize(word).tokens[0].kind is TokenKind.TYPE

    def test_boolean_literals(self):
        """true and false scan as BOOLEAN_LITERAL."""
        assert kinds(tokenize("true false")) == [
            TokenKind.BOOLEAN_LITERAL,
            TokenKind.BOOLEAN_LITERAL,
            TokenKind.END,
        ]

    def test_identifiers(self):
        """Identifiers may start with underscore and contain digits."""
        result = tokenize("_tmp value2 Integer string")
        assert [t.kind for t in result.tokens[:-1]] == [TokenKind.IDENTIFIER] * 4
        assert [t.lexeme for t in result.tokens[:-1]] == ["_tmp", "value2", "Integer", "string"]

    def test_punctuation(self):
        """=, and ; map to their own kinds."""
        assert kinds(tokenize("= , ;")) == [
            TokenKind.EQUALS,
            TokenKind.COMMA,
            TokenKind.SEMICOLON,
            TokenKind.END,
        ]

    def test_custom_type_names(self):
        """Type names come from the injected configuration."""
        config = AnalyzerConfig(type_names=frozenset({"Integer"}))
        result = tokenize("Integer int", config)
        assert kinds(result)[:2] == [TokenKind.TYPE, TokenKind.IDENTIFIER]


class TestNumericLiterals:
    """Tests for numeric literal scanning and suffixes."""

    @pytest.mark.parametrize(
        "text,kind",
        [
            ("42", TokenKind.INT_LITERAL),
            ("-42", TokenKind.INT_LITERAL),
            ("42L", TokenKind.LONG_LITERAL),
            ("42l", TokenKind.LONG_LITERAL),
            ("3.14", TokenKind.DOUBLE_LITERAL),
            ("5.", TokenKind.DOUBLE_LITERAL),
            ("3.14d", TokenKind.DOUBLE_LITERAL),
            ("2D", TokenKind.DOUBLE_LITERAL),
            ("3.14f", TokenKind.FLOAT_LITERAL),
            ("2F", TokenKind.FLOAT_LITERAL),
            ("-0.5f", TokenKind.FLOAT_LITERAL),
        ],
    )
    def test_numeric_kinds(self, text, kind):
        """Suffix and decimal point decide the literal kind."""
        result = tokenize(text)
        assert result.ok
        assert result.tokens[0] == Token(kind, text, 1)

    def test_negative_number_after_equals(self):
        """A minus sign directly before a digit belongs to the number."""
        result = tokenize("x=-5;")
        assert [t.lexeme for t in result.tokens] == ["x", "=", "-5", ";", ""]

    def test_minus_without_digit_is_unrecognized(self):
        """A lone minus sign is not part of any token."""
        result = tokenize("- 5")
        assert messages(result) == ["Unrecognized character '-'"]
        assert result.tokens[0] == Token(TokenKind.INT_LITERAL, "5", 1)

    def test_long_suffix_with_decimal_point_is_error(self):
        """1.5L is rejected and produces no token."""
        result = tokenize("1.5L;")
        assert messages(result) == ["Invalid long literal with decimal point: 1.5L"]
        assert kinds(result) == [TokenKind.SEMICOLON, TokenKind.END]

    def test_digit_followed_by_letters_is_invalid_token(self):
        """7a = 1; reports one invalid token that swallows the whole run."""
        result = tokenize("7a = 1;")
        assert len(result.errors) == 1
        assert result.errors[0].message == "Invalid token (identifier starting with digit): 7a"
        assert result.errors[0].stage is Stage.LEXICAL
        assert kinds(result) == [
            TokenKind.EQUALS,
            TokenKind.INT_LITERAL,
            TokenKind.SEMICOLON,
            TokenKind.END,
        ]

    def test_invalid_token_consumes_alphanumeric_run(self):
        """The bad run extends over letters, digits and underscores."""
        result = tokenize("12ab_3c x")
        assert messages(result) == ["Invalid token (identifier starting with digit): 12ab_3c"]
        assert result.tokens[0] == Token(TokenKind.IDENTIFIER, "x", 1)

    def test_non_ascii_digit_is_unrecognized(self):
        """Only ASCII digits start a number."""
        result = tokenize("٣;")
        assert messages(result) == ["Unrecognized character '٣'"]
        assert kinds(result) == [TokenKind.SEMICOLON, TokenKind.END]

    def test_second_decimal_point_ends_number(self):
        """Only one decimal point is taken into a number."""
        result = tokenize("1.2.3")
        assert result.tokens[0] == Token(TokenKind.DOUBLE_LITERAL, "1.2", 1)
        assert messages(result) == ["Unrecognized character '.'"]
        assert result.tokens[1] == Token(TokenKind.INT_LITERAL, "3", 1)


class TestStringLiterals:
    """Tests for string literal scanning."""

    def test_string_keeps_quotes_and_escapes(self):
        """Escapes are copied verbatim and do not end the literal."""
        source = r'"a\"b\\"'
        result = tokenize(source)
        assert result.ok
        assert result.tokens[0] == Token(TokenKind.STRING_LITERAL, source, 1)

    def test_unterminated_at_end_of_input(self):
        """A string missing its closing quote is reported."""
        result = tokenize('String s = "abc')
        assert messages(result) == ["Unterminated string literal"]
        assert kinds(result)[-1] is TokenKind.END

    def test_unterminated_at_end_of_line(self):
        """A raw newline ends the string scan; the next line is scanned normally."""
        result = tokenize('"abc\nint y;')
        assert result.errors[0].line == 1
        assert messages(result) == ["Unterminated string literal"]
        assert result.tokens[0] == Token(TokenKind.TYPE, "int", 2)

    def test_trailing_backslash(self):
        """A backslash at the very end cannot close the string."""
        result = tokenize('"abc\\')
        assert messages(result) == ["Unterminated string literal"]


class TestCharLiterals:
    """Tests for char literal scanning and validation."""

    @pytest.mark.parametrize("source", ["'a'", "' '", r"'\n'", r"'\''", r"'\\'", r"'\"'"])
    def test_valid_chars(self, source):
        """Single characters and the fixed escape set are accepted."""
        result = tokenize(source)
        assert result.ok
        assert result.tokens[0] == Token(TokenKind.CHAR_LITERAL, source, 1)

    @pytest.mark.parametrize(
        "source,content",
        [("'ab'", "ab"), ("''", ""), (r"'\q'", r"\q"), (r"'\n2'", r"\n2")],
    )
    def test_invalid_chars(self, source, content):
        """Anything other than one character or a known escape is rejected."""
        result = tokenize(source)
        assert messages(result) == [f"Invalid char literal: '{content}'"]
        assert kinds(result) == [TokenKind.END]

    def test_newline_inside_char(self):
        """A raw newline inside a char literal is its own error."""
        result = tokenize("'a\nint y;")
        assert messages(result) == ["Newline inside char literal"]
        assert result.errors[0].line == 1
        assert result.tokens[0] == Token(TokenKind.TYPE, "int", 2)

    def test_unterminated_char(self):
        """A char literal cut off by end of input is reported."""
        result = tokenize("char c = 'a")
        assert messages(result) == ["Unterminated char literal"]


class TestCommentsAndLines:
    """Tests for comment skipping and line counting."""

    def test_line_comment(self):
        """Line comments run to the end of the line."""
        result = tokenize("// int x;\nint y;")
        assert result.tokens[0] == Token(TokenKind.TYPE, "int", 2)
        assert len(result.tokens) == 4

    def test_block_comment_counts_lines(self):
        """Newlines inside block comments advance the line counter."""
        result = tokenize("int x;\n/* one\ntwo */ int y;")
        assert result.tokens[3] == Token(TokenKind.TYPE, "int", 3)

    def test_unclosed_block_comment_runs_to_end(self):
        """An unclosed block comment swallows the rest of the input silently."""
        result = tokenize("int x; /* never\nclosed int y;")
        assert result.ok
        assert kinds(result) == [
            TokenKind.TYPE,
            TokenKind.IDENTIFIER,
            TokenKind.SEMICOLON,
            TokenKind.END,
        ]
        assert result.tokens[-1].line == 2

    def test_end_token_on_last_line(self):
        """The END token carries the line where input ended."""
        result = tokenize("int x;\n\n")
        assert result.tokens[-1] == Token(TokenKind.END, "", 3)

    def test_lexemes_reproduce_source(self):
        """Concatenated lexemes equal the source without whitespace and comments."""
        source = (
            "int a = 1, b = -2L; // trailing\n"
            '/* block\n comment */ String s = "hi\\"x";\n'
            "char c = '\\n'; double d = 2.5;\n"
        )
        result = tokenize(source)
        assert result.ok
        joined = "".join(token.lexeme for token in result.tokens[:-1])
        assert joined == "inta=1,b=-2L;Strings=\"hi\\\"x\";charc='\\n';doubled=2.5;"


class TestErrorPolicy:
    """Tests for diagnostic collection and termination."""

    def test_unrecognized_character(self):
        """Characters outside the language are reported with their line."""
        result = tokenize("int x;\nint @y;")
        assert messages(result) == ["Unrecognized character '@'"]
        assert result.errors[0].line == 2

    def test_continues_after_errors_by_default(self):
        """All lexical errors are collected in one pass."""
        result = tokenize("@ # int x;")
        assert messages(result) == [
            "Unrecognized character '@'",
            "Unrecognized character '#'",
        ]
        assert kinds(result) == [
            TokenKind.TYPE,
            TokenKind.IDENTIFIER,
            TokenKind.SEMICOLON,
            TokenKind.END,
        ]

    def test_stop_on_first_error(self):
        """With stop_on_first_error the lexer halts after the first diagnostic."""
        config = AnalyzerConfig(stop_on_first_error=True)
        result = tokenize("@ # int x;", config)
        assert messages(result) == ["Unrecognized character '@'"]
        assert kinds(result) == [TokenKind.END]

    def test_internal_failure_becomes_diagnostic(self, monkeypatch):
        """An exception inside a scanner is reported and scanning resumes."""

        def broken_scan(self):
            raise ValueError("boom")

        monkeypatch.setattr(Lexer, "_scan_word", broken_scan)
        result = tokenize("ab;")
        assert messages(result) == ["Lexical exception: boom", "Lexical exception: boom"]
        assert kinds(result) == [TokenKind.SEMICOLON, TokenKind.END]

    @pytest.mark.parametrize(
        "source",
        ["'", '"', "/*", "-", "1.", "'\\", '"\\', "\n\n'\n", "7", "@@@", "int x = 'ab"],
    )
    def test_always_single_end_token(self, source):
        """Every input terminates with exactly one trailing END token."""
        result = tokenize(source)
        assert result.tokens[-1].kind is TokenKind.END
        assert kinds(result).count(TokenKind.END) == 1

    def test_lexer_is_reusable(self):
        """A Lexer instance resets its state between runs."""
        lexer = Lexer()
        first = lexer.tokenize("@")
        second = lexer.tokenize("int x;")
        assert len(first.errors) == 1
        assert second.ok
        assert second.tokens[0].line == 1


class TestTokenTable:
    """Tests for the aligned token listing."""

    def test_table_hides_end_and_aligns(self):
        """The table has a header, one row per token and no END row."""
        table = format_token_table(tokenize("int x;").tokens)
        rows = table.splitlines()
        assert rows[0].split() == ["TOKEN", "TYPE", "LEXEME", "LINE"]
        assert len(rows) == 5
        assert rows[2] == f"{'TYPE':<14} {'int':<20} line 1"
        assert "END" not in table

    def test_table_escapes_newlines(self):
        """Newlines inside lexemes are shown escaped."""
        table = format_token_table([Token(TokenKind.STRING_LITERAL, '"a\nb"', 1)])
        assert '"a\\nb"' in table
