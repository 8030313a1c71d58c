"""Entity descriptions: field annotations, fields, entities and their registry."""

from __future__ import annotations

import threading
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from canyonsql.bounds import FieldIdentifier, FieldValueIdentifier
from canyonsql.params import is_query_parameter

NUMERIC_PK_DATATYPE = ("i16", "u16", "i32", "u32", "i64", "u64")


class EntityError(ValueError):
    """Raised when an entity, a field or one of its annotations is malformed."""


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


@dataclass(frozen=True)
class PrimaryKey:
    """Marks a field as the primary key of its entity."""

    autoincremental: bool = True

    def as_string(self) -> str:
        """Describe the annotation in the textual form used for matching."""
        return f"Annotation: PrimaryKey, Autoincremental: {_format_bool(self.autoincremental)}"


@dataclass(frozen=True)
class ForeignKey:
    """Marks a field as referencing ``column`` of ``table``."""

    table: str
    column: str

    def as_string(self) -> str:
        """Describe the annotation in the textual form used for matching."""
        return f"Annotation: ForeignKey, Table: {self.table}, Column: {self.column}"


EntityFieldAnnotation = Union[PrimaryKey, ForeignKey]


def _primary_key(args: Mapping[str, Any] | None) -> PrimaryKey:
    if args is None:
        return PrimaryKey(True)
    for key, value in args.items():
        if not isinstance(value, bool):
            raise EntityError(f"Only bool literals are supported for the `{key}` attribute")
    if "autoincremental" not in args:
        raise EntityError("Missed `autoincremental` argument on the Primary Key annotation")
    return PrimaryKey(args["autoincremental"])


def _foreign_key(args: Mapping[str, Any] | None) -> ForeignKey:
    if args is None:
        raise EntityError("Error generating the Foreign Key")
    for key, value in args.items():
        if not isinstance(value, str):
            raise EntityError(f"Only string literals are supported for the `{key}` attribute")
    for required in ("table", "column"):
        if required not in args:
            raise EntityError(f"Missed `{required}` argument on the Foreign Key annotation")
    return ForeignKey(args["table"], args["column"])


_PARSERS = {"primary_key": _primary_key, "foreign_key": _foreign_key}


def parse_annotation(name: str, args: Mapping[str, Any] | None) -> EntityFieldAnnotation:
    """Build an annotation from its attribute name and its arguments.

    ``args`` is None for an attribute written without an argument list; a
    bare ``primary_key`` is then autoincremental.
    """
    try:
        parser = _PARSERS[name]
    except KeyError:
        raise EntityError(f"Unknown attribute `{name}`") from None
    return parser(args)


@dataclass
class EntityField:
    """A field of an entity: its name, declared type and annotations."""

    name: str
    field_type: str
    attributes: list[EntityFieldAnnotation] = field(default_factory=list)

    @classmethod
    def from_declaration(
        cls,
        name: str,
        field_type: str,
        raw_attributes: Iterable[tuple[str, Mapping[str, Any] | None]] = (),
    ) -> EntityField:
        """Create a field, parsing each ``(attribute name, args)`` pair."""
        if not name:
            raise EntityError("Expected a structure with named fields, unnamed field given")
        attributes = [parse_annotation(attr, args) for attr, args in raw_attributes]
        return cls(name, field_type, attributes)

    def to_register_field(self) -> CanyonRegisterEntityField:
        """Describe this field as a registry entry."""
        return CanyonRegisterEntityField(
            field_name=self.name,
            field_type=self.field_type,
            annotations=[a.as_string() for a in self.attributes],
        )


@dataclass
class CanyonEntity:
    """A user type mapped to a database table."""

    struct_name: str
    fields: list[EntityField] = field(default_factory=list)
    user_table_name: str | None = None
    user_schema_name: str | None = None

    def field_names(self) -> list[str]:
        """Return the field names in declaration order."""
        return [f.name for f in self.fields]

    def field_enum(self) -> type[Enum]:
        """Build the ``<StructName>Field`` enum with one member per field."""
        members = [(name, name) for name in self.field_names()]
        return Enum(f"{self.struct_name}Field", members, type=FieldIdentifier)

    def field_value(self, field_name: str, value: Any) -> FieldValueIdentifier:
        """Pair one of the entity's fields with a query parameter value."""
        if field_name not in self.field_names():
            raise EntityError(f"{self.struct_name} has no field named `{field_name}`")
        if not is_query_parameter(value):
            raise TypeError(f"unsupported query parameter type: {type(value).__name__}")
        return FieldValueIdentifier(field_name, value)


@dataclass
class CanyonRegisterEntityField:
    """Registry entry for a field that maps a database column."""

    field_name: str = ""
    field_type: str = ""
    annotations: list[str] = field(default_factory=list)

    def is_autoincremental(self) -> bool:
        """True for a numeric primary key declared autoincremental."""
        pk = next(
            (a for a in self.annotations if a.startswith("Annotation: PrimaryKey")), None
        )
        pk_is_autoincremental = pk is not None and "true" in pk
        return self.field_type in NUMERIC_PK_DATATYPE and pk_is_autoincremental

    def is_nullable(self) -> bool:
        """True when the field type is optional."""
        return self.field_type.upper().startswith("OPTION")


@dataclass
class CanyonRegisterEntity:
    """Registry entry identifying an entity and its table."""

    entity_name: str = ""
    entity_db_table_name: str = ""
    user_schema_name: str | None = None
    entity_fields: list[CanyonRegisterEntityField] = field(default_factory=list)


_REGISTER_LOCK = threading.Lock()
_REGISTERED: list[CanyonRegisterEntity] = []


def register_entity(entity: CanyonRegisterEntity) -> None:
    """Add an entity to the process-wide registry."""
    with _REGISTER_LOCK:
        _REGISTERED.append(entity)


def registered_entities() -> list[CanyonRegisterEntity]:
    """Return a copy of the registered entities, in registration order."""
    with _REGISTER_LOCK:
        return list(_REGISTERED)