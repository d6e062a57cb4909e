"""Tests for the parameter value grammar and the escaping rules."""

import pytest

from unitdef import (
    Cursor,
    QuotedValue,
    TokenValue,
    TupleEntry,
    TupleValue,
    ValueShapeError,
    ValueSyntaxError,
    escape,
    quote,
    unescape,
    unquote,
)
from unitdef.values import expect_value_end, parse_value


def parse_one(text: str):
    cursor = Cursor(text)
    value = parse_value(cursor)
    expect_value_end(cursor)
    return value


class TestEscaping:
    def test_quote_doubles_escape_character(self):
        assert quote("a#b") == '"a##b"'

    def test_quote_escapes_double_quote(self):
        assert quote('say "hi"') == '"say #"hi#""'

    @pytest.mark.parametrize(
        "text",
        ["", "plain", "#", "##", '"', '#"', 'mixed # and " chars', "日本語#\"テキスト"],
    )
    def test_unquote_inverts_quote(self, text):
        assert unquote(quote(text)) == text

    def test_unescape_inverts_escape(self):
        assert unescape(escape('#"x"#')) == '#"x"#'

    def test_unquote_rejects_unquoted_text(self):
        with pytest.raises(ValueError):
            unquote("abc")

    @pytest.mark.parametrize(
        "text,expected",
        [("a#b", "a#b"), ("a##b", "a#b"), ('a#"b', 'a"b'), ("end#", "end#"), ("###x", "##x")],
    )
    def test_unescape_keeps_lone_escape_character(self, text, expected):
        assert unescape(text) == expected


class TestRawToken:
    def test_plain_token(self):
        assert parse_one("abc;") == TokenValue(raw="abc")

    def test_token_stops_at_comma(self):
        cursor = Cursor("a,b;")
        assert parse_value(cursor) == TokenValue(raw="a")
        assert cursor.current() == ","

    def test_empty_token(self):
        assert parse_one(";") == TokenValue(raw="")

    def test_embedded_quoted_run_kept_escaped(self):
        value = parse_one('TO:"a##b#"c";')
        assert value == TokenValue(raw='TO:"a##b#"c"')

    def test_embedded_quoted_run_may_hold_separators(self):
        assert parse_one('x"a,b;c"y;') == TokenValue(raw='x"a,b;c"y')

    def test_embedded_quoted_run_copied_verbatim(self):
        assert parse_one('p"a#b"q;') == TokenValue(raw='p"a#b"q')

    def test_unterminated_token(self):
        with pytest.raises(ValueSyntaxError):
            parse_one("abc")


class TestQuotedString:
    def test_simple(self):
        assert parse_one('"hello";') == QuotedValue(content="hello")

    def test_escapes_are_decoded(self):
        assert parse_one('"a##b#"c";') == QuotedValue(content='a#b"c')

    def test_lone_escape_character_is_literal(self):
        assert parse_one('"a#b";') == QuotedValue(content="a#b")

    def test_lone_and_doubled_escape_characters_mix(self):
        assert parse_one('"x#y##z#q";') == QuotedValue(content="x#y#z#q")

    def test_unterminated(self):
        with pytest.raises(ValueSyntaxError) as exc:
            parse_one('"abc')
        assert exc.value.offset == 0

    def test_unterminated_after_escape(self):
        with pytest.raises(ValueSyntaxError):
            parse_one('"abc#')

    def test_text_after_closing_quote_is_an_error(self):
        with pytest.raises(ValueSyntaxError):
            parse_one('"abc"x;')


class TestTupleGrammar:
    def test_keyed_entries(self):
        value = parse_one("(f=A,t=B);")
        assert value == TupleValue(
            entries=(TupleEntry(key="f", value="A"), TupleEntry(key="t", value="B"))
        )

    def test_unkeyed_entry_has_empty_key(self):
        value = parse_one("(f=A,t=B,con);")
        assert value[2].key == ""
        assert not value[2].has_key
        assert value[2].value == "con"

    def test_get_by_key(self):
        value = parse_one("(f=A,t=B);")
        assert value.get("t") == "B"
        assert value.get("x") is None
        assert value.keys() == ["f", "t"]

    def test_later_equals_sign_stays_in_value(self):
        value = parse_one("(k=a=b);")
        assert value[0] == TupleEntry(key="k", value="a=b")

    def test_empty_tuple(self):
        assert parse_one("();") == TupleValue()

    def test_trailing_separator_adds_no_entry(self):
        value = parse_one("(a,);")
        assert len(value) == 1
        assert value[0] == TupleEntry(value="a")

    def test_empty_entry_between_separators_is_kept(self):
        value = parse_one("(a,,b);")
        assert [e.value for e in value.entries] == ["a", "", "b"]

    def test_unterminated(self):
        with pytest.raises(ValueSyntaxError):
            parse_one("(f=A,t=B")

    def test_of_helper(self):
        assert TupleValue.of(("f", "A"), "seq") == parse_one("(f=A,seq);")


class TestValueShapes:
    def test_token_accessors(self):
        value = TokenValue(raw="n")
        assert value.as_token() == "n"
        assert value.as_string() == "n"
        with pytest.raises(ValueShapeError):
            value.as_tuple()
        with pytest.raises(ValueShapeError):
            value.as_quoted()

    def test_quoted_accessors(self):
        value = QuotedValue(content="x")
        assert value.as_quoted() == "x"
        assert value.as_string() == "x"
        with pytest.raises(ValueShapeError):
            value.as_token()

    def test_tuple_accessors(self):
        value = TupleValue.of("a")
        assert value.as_tuple() is value
        with pytest.raises(ValueShapeError):
            value.as_string()
