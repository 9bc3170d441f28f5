import textwrap

import pytest

from tagscript.diagnostics import TagScriptError
from tagscript.lexer import EOF_TOKEN, Lexer, TokenKind, dump_tokens, token_text, tokenize
from tagscript.text import TextPosition, UNKNOWN_POSITION

from tests._debug import debug_dump_tokens


def _kinds(source: str) -> list[TokenKind]:
    return [token.kind for token in tokenize(source)]


def test_self_closing_tag_with_attribute() -> None:
    source = '<a x="1"/>'
    tokens = tokenize(source)
    debug_dump_tokens("self_closing_tag_with_attribute", source, tokens)

    assert [token.kind for token in tokens] == [
        TokenKind.LESS_THAN,
        TokenKind.IDENTIFIER,
        TokenKind.IDENTIFIER,
        TokenKind.EQUAL,
        TokenKind.STRING_LITERAL,
        TokenKind.SLASH,
        TokenKind.GREATER_THAN,
        TokenKind.EOF,
    ]
    assert tokens[1].text == "a"
    assert tokens[2].text == "x"
    assert tokens[4].text == "1"


def test_stream_ends_with_single_eof_sentinel() -> None:
    tokens = tokenize("<a/>")

    assert tokens[-1] is EOF_TOKEN
    assert tokens[-1].position == UNKNOWN_POSITION
    assert sum(1 for token in tokens if token.kind == TokenKind.EOF) == 1


def test_empty_source_is_just_eof() -> None:
    assert _kinds("") == [TokenKind.EOF]
    assert _kinds("   \n\t  # only a comment") == [TokenKind.EOF]


def test_literals_record_opening_delimiter_position() -> None:
    tokens = tokenize('<a>"hi"[3.5]</a>')

    string, number = tokens[3], tokens[4]
    assert string.kind == TokenKind.STRING_LITERAL
    assert string.text == "hi"
    assert string.position == TextPosition(1, 4)
    assert number.kind == TokenKind.NUMBER_LITERAL
    assert number.text == "3.5"
    assert number.position == TextPosition(1, 8)


def test_string_literal_is_raw_without_escapes() -> None:
    tokens = tokenize('"a\\nb # not a comment"')

    assert tokens[0].text == "a\\nb # not a comment"


def test_comments_run_to_end_of_line() -> None:
    source = textwrap.dedent(
        """
        # header comment
        <a/> # trailing
        <b/>
        """
    ).lstrip()

    tokens = tokenize(source)
    identifiers = [token.text for token in tokens if token.kind == TokenKind.IDENTIFIER]

    assert identifiers == ["a", "b"]


def test_newlines_advance_line_and_reset_column() -> None:
    tokens = tokenize("<a>\n  <b/>\n</a>")

    inner_open = tokens[3]
    assert inner_open.kind == TokenKind.LESS_THAN
    assert inner_open.position == TextPosition(2, 3)
    assert tokens[4].position == TextPosition(2, 4)
    closing_name = [token for token in tokens if token.text == "a"][-1]
    assert (closing_name.line, closing_name.column) == (3, 3)


def test_multiline_string_tracks_following_lines() -> None:
    tokens = tokenize('"one\ntwo"<a/>')

    assert tokens[0].text == "one\ntwo"
    assert tokens[1].position == TextPosition(2, 5)


def test_identifier_allows_hyphen_and_digits() -> None:
    tokens = tokenize("<no-autobreak2/>")

    assert tokens[1].kind == TokenKind.IDENTIFIER
    assert tokens[1].text == "no-autobreak2"
    assert tokens[2].kind == TokenKind.SLASH


def test_punctuation_table() -> None:
    assert _kinds("<>/=,]") == [
        TokenKind.LESS_THAN,
        TokenKind.GREATER_THAN,
        TokenKind.SLASH,
        TokenKind.EQUAL,
        TokenKind.COMMA,
        TokenKind.RBRACKET,
        TokenKind.EOF,
    ]


def test_unterminated_string_points_at_opening_quote() -> None:
    with pytest.raises(TagScriptError) as excinfo:
        tokenize('<a>\n  "never closed')

    assert excinfo.value.code == 1001
    assert excinfo.value.diagnostic.position == TextPosition(2, 3)


def test_unterminated_number_points_at_opening_bracket() -> None:
    with pytest.raises(TagScriptError) as excinfo:
        tokenize("<a>[12")

    assert excinfo.value.code == 1002
    assert excinfo.value.diagnostic.position == TextPosition(1, 4)


def test_unrecognized_character_aborts() -> None:
    with pytest.raises(TagScriptError) as excinfo:
        tokenize("<a>$</a>")

    assert excinfo.value.code == 1000
    assert excinfo.value.diagnostic.position == TextPosition(1, 4)
    assert "'$'" in excinfo.value.diagnostic.info


def test_non_ascii_letters_are_not_identifiers() -> None:
    with pytest.raises(TagScriptError) as excinfo:
        Lexer("<é/>").lex()

    assert excinfo.value.code == 1000


def test_token_text_and_dump() -> None:
    tokens = tokenize("<a/>")

    assert token_text(tokens[-1]) == ""
    assert token_text(tokens[-1], null_char_on_eof=True) == "\0"
    dump = dump_tokens(tokens)
    assert dump.splitlines()[0].startswith("000 LESS_THAN")
    assert "EOF" in dump.splitlines()[-1]
