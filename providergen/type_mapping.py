"""Map entity field type tokens to Java and SQLite types.

Handles:
- The known tokens (string, integer, long, float, double, boolean, date,
  byte[], enum)
- Boxed vs primitive Java types depending on nullability
- Enum fields, typed by their enum class and stored as ordinals
- Unknown tokens, passed through as a Java class name stored as TEXT

The loader does not validate type tokens; anything unknown is rendered
verbatim so projects can reference their own classes.
"""

from __future__ import annotations

from typing import NamedTuple


class JavaType(NamedTuple):
    boxed: str
    primitive: str
    sql: str
    cursor_getter: str


ENUM = "enum"

_TYPES: dict[str, JavaType] = {
    "string": JavaType("String", "String", "TEXT", "getStringOrNull"),
    "integer": JavaType("Integer", "int", "INTEGER", "getIntegerOrNull"),
    "long": JavaType("Long", "long", "INTEGER", "getLongOrNull"),
    "float": JavaType("Float", "float", "REAL", "getFloatOrNull"),
    "double": JavaType("Double", "double", "REAL", "getDoubleOrNull"),
    "boolean": JavaType("Boolean", "boolean", "INTEGER", "getBooleanOrNull"),
    "date": JavaType("Date", "Date", "INTEGER", "getDateOrNull"),
    "byte[]": JavaType("byte[]", "byte[]", "BLOB", "getBlobOrNull"),
    ENUM: JavaType("Integer", "int", "INTEGER", "getIntegerOrNull"),
}

# Stored representation differs from the Java value, cursor code must convert
_CONVERTED_TYPES = {"boolean", "date", ENUM}


def normalize(type_name: str) -> str:
    return type_name.strip().lower()


def is_known(type_name: str) -> bool:
    return normalize(type_name) in _TYPES


def resolve_java_type(
    type_name: str,
    is_nullable: bool = True,
    enum_name: str | None = None,
) -> str:
    """Resolve a field type token to the Java type used in generated code."""
    if enum_name:
        return enum_name
    mapped = _TYPES.get(normalize(type_name))
    if mapped is None:
        return type_name
    return mapped.boxed if is_nullable else mapped.primitive


def resolve_sql_type(type_name: str, enum_name: str | None = None) -> str:
    """Resolve a field type token to its SQLite column affinity."""
    if enum_name:
        return _TYPES[ENUM].sql
    mapped = _TYPES.get(normalize(type_name))
    return mapped.sql if mapped else "TEXT"


def resolve_cursor_getter(type_name: str, enum_name: str | None = None) -> str:
    """Name of the AbstractCursor helper that reads this column."""
    if enum_name:
        return _TYPES[ENUM].cursor_getter
    mapped = _TYPES.get(normalize(type_name))
    return mapped.cursor_getter if mapped else "getStringOrNull"


def needs_conversion(type_name: str, enum_name: str | None = None) -> bool:
    """Whether values must be converted between Java and SQLite forms."""
    return bool(enum_name) or normalize(type_name) in _CONVERTED_TYPES
