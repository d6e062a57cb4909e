"""Data model for parsed unit definitions.

All nodes are frozen pydantic models holding tuples, so a parsed tree is
immutable and can be shared freely. Units do not point back at their
parent; use ``unitdef.index.UnitIndex`` when ancestry is needed.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Annotated
from typing import Literal as TypingLiteral

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .errors import ValueShapeError


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True)


class FullQualifiedName(_Node):
    """Root-to-node path of unit names, e.g. ``/ROOT/NET/JOB1``."""

    fragments: tuple[str, ...] = Field(min_length=1)

    @classmethod
    def of(cls, *names: str) -> "FullQualifiedName":
        return cls(fragments=names)

    @classmethod
    def parse(cls, path: str) -> "FullQualifiedName":
        names = tuple(p for p in path.split("/") if p)
        return cls(fragments=names)

    @property
    def name(self) -> str:
        return self.fragments[-1]

    @property
    def depth(self) -> int:
        return len(self.fragments)

    @property
    def parent(self) -> "FullQualifiedName | None":
        if len(self.fragments) == 1:
            return None
        return FullQualifiedName(fragments=self.fragments[:-1])

    def child(self, name: str) -> "FullQualifiedName":
        return FullQualifiedName(fragments=self.fragments + (name,))

    def __str__(self) -> str:
        return "/" + "/".join(self.fragments)


class PermissionMode(_Node):
    """Typed view of the permission-mode attribute field."""

    raw: str = ""

    @property
    def specified(self) -> bool:
        return self.raw != ""


class Attributes(_Node):
    """Positional fields of a unit header. Missing fields are ``""``."""

    name: str = Field(min_length=1)
    permission_mode: str = ""
    jp1_user_name: str = ""
    resource_group_name: str = ""

    @property
    def permission(self) -> PermissionMode:
        return PermissionMode(raw=self.permission_mode)

    def fields(self) -> tuple[str, str, str, str]:
        return (
            self.name,
            self.permission_mode,
            self.jp1_user_name,
            self.resource_group_name,
        )


# Parameter values - a closed union over token, quoted string and tuple
class _Value(_Node):
    def as_token(self) -> str:
        raise ValueShapeError(f"expected token value, got {self.type}")

    def as_quoted(self) -> str:
        raise ValueShapeError(f"expected quoted value, got {self.type}")

    def as_tuple(self) -> "TupleValue":
        raise ValueShapeError(f"expected tuple value, got {self.type}")

    def as_string(self) -> str:
        raise ValueShapeError(f"expected string value, got {self.type}")


class TokenValue(_Value):
    """Unquoted value; embedded quoted runs are kept in escaped form."""

    type: TypingLiteral["token"] = "token"
    raw: str

    def as_token(self) -> str:
        return self.raw

    def as_string(self) -> str:
        return self.raw


class QuotedValue(_Value):
    """Double-quoted value holding the unescaped content."""

    type: TypingLiteral["quoted"] = "quoted"
    content: str

    def as_quoted(self) -> str:
        return self.content

    def as_string(self) -> str:
        return self.content


class TupleEntry(_Node):
    key: str = ""  # "" means the entry has no key
    value: str

    @property
    def has_key(self) -> bool:
        return self.key != ""


class TupleValue(_Value):
    type: TypingLiteral["tuple"] = "tuple"
    entries: tuple[TupleEntry, ...] = ()

    @classmethod
    def of(cls, *items: "str | tuple[str, str]") -> "TupleValue":
        """Build from plain values and ``(key, value)`` pairs."""
        entries = []
        for item in items:
            if isinstance(item, tuple):
                entries.append(TupleEntry(key=item[0], value=item[1]))
            else:
                entries.append(TupleEntry(value=item))
        return cls(entries=tuple(entries))

    def as_tuple(self) -> "TupleValue":
        return self

    def get(self, key: str) -> str | None:
        for entry in self.entries:
            if entry.key == key:
                return entry.value
        return None

    def keys(self) -> list[str]:
        return [e.key for e in self.entries if e.has_key]

    def __getitem__(self, index: int) -> TupleEntry:
        return self.entries[index]

    def __len__(self) -> int:
        return len(self.entries)


ParameterValue = Annotated[
    TokenValue | QuotedValue | TupleValue,
    Field(discriminator="type"),
]


class Parameter(_Node):
    """A named parameter with its ordered values."""

    name: str = Field(min_length=1)
    values: tuple[ParameterValue, ...] = Field(min_length=1)

    def value(self, index: int) -> TokenValue | QuotedValue | TupleValue:
        return self.values[index]

    @property
    def first(self) -> TokenValue | QuotedValue | TupleValue:
        return self.values[0]


class Unit(_Node):
    """A unit definition with its parameters and sub-units."""

    attributes: Attributes
    fqn: FullQualifiedName
    parameters: tuple[Parameter, ...] = ()
    sub_units: tuple["Unit", ...] = ()

    @model_validator(mode="after")
    def _check_names(self) -> "Unit":
        if self.fqn.name != self.attributes.name:
            raise ValueError(
                f"fqn {self.fqn} does not end with unit name {self.attributes.name!r}"
            )
        for sub in self.sub_units:
            if sub.fqn != self.fqn.child(sub.name):
                raise ValueError(f"sub-unit {sub.fqn} is not a child of {self.fqn}")
        return self

    @property
    def name(self) -> str:
        return self.attributes.name

    @property
    def unit_type_code(self) -> str | None:
        p = self.parameter("ty")
        return p.first.as_string() if p is not None else None

    def parameters_named(self, name: str) -> list[Parameter]:
        return [p for p in self.parameters if p.name == name]

    def parameter(self, name: str) -> Parameter | None:
        """First parameter called ``name``, if any."""
        for p in self.parameters:
            if p.name == name:
                return p
        return None

    def sub_units_named(self, name: str) -> list["Unit"]:
        return [u for u in self.sub_units if u.name == name]

    def sub_unit(self, name: str) -> "Unit | None":
        for u in self.sub_units:
            if u.name == name:
                return u
        return None


Unit.model_rebuild()


def find_parameters(unit: Unit, name: str) -> list[Parameter]:
    return unit.parameters_named(name)


def find_sub_unit(unit: Unit, name: str) -> Unit | None:
    return unit.sub_unit(name)


def walk(unit: Unit) -> Iterator[Unit]:
    """Yield ``unit`` and its descendants depth-first, parents first."""
    stack = [unit]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.sub_units))


def find_descendants(unit: Unit, name: str) -> list[Unit]:
    """Descendants of ``unit`` (excluding itself) called ``name``."""
    return [u for u in walk(unit) if u is not unit and u.name == name]


def _to_value(value: "str | TokenValue | QuotedValue | TupleValue"):
    if isinstance(value, str):
        return TokenValue(raw=value)
    return value


@dataclass
class UnitBuilder:
    """Mutable scratch space that produces an immutable ``Unit``.

    Example:
        root = UnitBuilder(Attributes(name="ROOT"))
        root.add_parameter("ty", "n")
        job = UnitBuilder(Attributes(name="JOB1"), parent=root.fqn)
        job.add_parameter("ty", "j")
        root.add_sub_unit(job.build())
        unit = root.build()
    """

    attributes: Attributes
    parent: FullQualifiedName | None = None
    parameters: list[Parameter] = field(default_factory=list)
    sub_units: list[Unit] = field(default_factory=list)

    @property
    def fqn(self) -> FullQualifiedName:
        if self.parent is None:
            return FullQualifiedName.of(self.attributes.name)
        return self.parent.child(self.attributes.name)

    def add_parameter(self, name: str, *values) -> "UnitBuilder":
        self.parameters.append(
            Parameter(name=name, values=tuple(_to_value(v) for v in values))
        )
        return self

    def add_sub_unit(self, unit: Unit) -> "UnitBuilder":
        self.sub_units.append(unit)
        return self

    def build(self) -> Unit:
        return Unit(
            attributes=self.attributes,
            fqn=self.fqn,
            parameters=tuple(self.parameters),
            sub_units=tuple(self.sub_units),
        )
