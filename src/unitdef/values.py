"""Grammar for a single parameter value.

    value   = tuple | quoted | raw
    tuple   = "(" [entry ("," entry)*] ")"
    entry   = [KEY "="] VALUE
    quoted  = '"' (CHAR | "##" | '#"')* '"'
    raw     = (CHAR | quoted)*          terminated by "," or ";"

Inside quotes ``##`` is a literal ``#`` and ``#"`` a literal ``"``; a ``#``
followed by anything else is an ordinary character. Quoted runs inside a raw
token are kept exactly as written so the token can be written back unchanged.
"""

from .ast import QuotedValue, TokenValue, TupleEntry, TupleValue
from .cursor import Cursor
from .errors import EndOfInputError, ValueSyntaxError

ESCAPE = "#"
QUOTE = '"'


def escape(text: str) -> str:
    return text.replace(ESCAPE, ESCAPE * 2).replace(QUOTE, ESCAPE + QUOTE)


def unescape(text: str) -> str:
    """Decode ``##`` and ``#"``; any other ``#`` is kept as is."""
    out = []
    i = 0
    while i < len(text):
        c = text[i]
        if c == ESCAPE and text[i + 1 : i + 2] in (ESCAPE, QUOTE):
            i += 1
            c = text[i]
        out.append(c)
        i += 1
    return "".join(out)


def quote(text: str) -> str:
    return QUOTE + escape(text) + QUOTE


def unquote(text: str) -> str:
    if len(text) < 2 or text[0] != QUOTE or text[-1] != QUOTE:
        raise ValueError(f"not a quoted string: {text!r}")
    return unescape(text[1:-1])


def parse_value(cursor: Cursor) -> TokenValue | QuotedValue | TupleValue:
    """Parse one value starting at the cursor's current character."""
    c = cursor.current()
    if c == "(":
        return parse_tuple(cursor)
    if c == QUOTE:
        return QuotedValue(content=parse_quoted(cursor))
    return TokenValue(raw=parse_raw(cursor))


def parse_quoted(cursor: Cursor) -> str:
    """Parse a quoted string and return its unescaped content."""
    start = cursor.position
    cursor.check(QUOTE)
    out = []
    try:
        c = cursor.next()
        while True:
            if c is None:
                raise EndOfInputError(cursor.position)
            if c == ESCAPE and cursor.peek() in (ESCAPE, QUOTE):
                out.append(cursor.next())
            elif c == QUOTE:
                cursor.next()
                return "".join(out)
            else:
                out.append(c)
            c = cursor.next()
    except EndOfInputError:
        raise ValueSyntaxError("unterminated quoted string", start) from None


def parse_raw(cursor: Cursor) -> str:
    """Parse an unquoted token up to ``,`` or ``;``."""
    out = []
    while cursor.unless_eof():
        c = cursor.current()
        if c in ",;":
            break
        if c == QUOTE:
            start = cursor.offset
            parse_quoted(cursor)
            out.append(cursor.source[start : cursor.offset])
        else:
            out.append(c)
            cursor.next()
    return "".join(out)


def parse_tuple(cursor: Cursor) -> TupleValue:
    """Parse ``(k=v,v,...)``. The first ``=`` in an entry separates the key.

    A ``)`` directly after a separator closes the tuple without adding an
    empty entry, so ``(a,)`` holds one entry.
    """
    start = cursor.position
    cursor.check("(")
    entries: list[TupleEntry] = []
    key: str | None = None
    buf: list[str] = []
    entry_start = True
    c = cursor.next()
    while c is not None:
        if c == ")" and entry_start:
            cursor.next()
            return TupleValue(entries=tuple(entries))
        entry_start = False
        if c == "=" and key is None:
            key = "".join(buf)
            buf = []
        elif c in ",)":
            entries.append(TupleEntry(key=key or "", value="".join(buf)))
            key, buf = None, []
            entry_start = True
            if c == ")":
                cursor.next()
                return TupleValue(entries=tuple(entries))
        else:
            buf.append(c)
        c = cursor.next()
    raise ValueSyntaxError("unterminated tuple", start)


def expect_value_end(cursor: Cursor) -> None:
    """Require the current character to be a value separator."""
    if cursor.reached_eof():
        raise ValueSyntaxError("value not terminated by ',' or ';'", cursor.position)
    c = cursor.current()
    if c not in ",;":
        raise ValueSyntaxError(
            f"value not terminated by ',' or ';' (got {c!r})", cursor.position
        )
