"""unitdef: read and write JP1/AJS unit definition files.

Pipeline: parse text -> immutable Unit tree -> format back to text, with
typed decoders for individual parameters.

Example:
    from unitdef import parse_file, format
    from unitdef.parameters import decode_all

    (root,) = parse_file("jobnet.txt", encoding="cp932")
    for element in decode_all(root, "el"):
        print(element.unit_name, element.x_coord, element.y_coord)
    print(format(root))
"""

__version__ = "0.1.0"

from .ast import (
    Attributes,
    FullQualifiedName,
    Parameter,
    ParameterValue,
    PermissionMode,
    QuotedValue,
    TokenValue,
    TupleEntry,
    TupleValue,
    Unit,
    UnitBuilder,
    find_descendants,
    find_parameters,
    find_sub_unit,
    walk,
)
from .config import FormatOptions, Settings, load_settings
from .cursor import Cursor
from .errors import (
    ConfigError,
    DecodeError,
    EndOfInputError,
    NoUnitFoundError,
    ParseError,
    Position,
    UnitDefError,
    UnitSyntaxError,
    ValueShapeError,
    ValueSyntaxError,
)
from .formatter import Formatter, format, format_units
from .index import UnitIndex
from .parser import UnitParser, parse, parse_file, parse_unit
from .values import escape, quote, unescape, unquote

__all__ = [
    # Parse
    "parse",
    "parse_unit",
    "parse_file",
    "UnitParser",
    "Cursor",
    # Format
    "format",
    "format_units",
    "Formatter",
    "quote",
    "unquote",
    "escape",
    "unescape",
    # Model
    "Unit",
    "UnitBuilder",
    "Attributes",
    "PermissionMode",
    "FullQualifiedName",
    "Parameter",
    "ParameterValue",
    "TokenValue",
    "QuotedValue",
    "TupleValue",
    "TupleEntry",
    "find_parameters",
    "find_sub_unit",
    "find_descendants",
    "walk",
    "UnitIndex",
    # Config
    "Settings",
    "FormatOptions",
    "load_settings",
    # Errors
    "UnitDefError",
    "ParseError",
    "Position",
    "UnitSyntaxError",
    "EndOfInputError",
    "ValueSyntaxError",
    "NoUnitFoundError",
    "DecodeError",
    "ValueShapeError",
    "ConfigError",
]
