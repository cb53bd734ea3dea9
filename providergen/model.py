"""In-memory model built from the entity JSON files.

A ``Model`` is constructed once by the loader and handed to every
generator. The properties below are the names the templates use.
"""

from __future__ import annotations

from dataclasses import dataclass, field as dc_field

from .naming import (
    to_camel_case,
    to_lower_camel_case,
    to_lower_case,
    to_upper_snake_case,
)
from .type_mapping import (
    needs_conversion,
    resolve_cursor_getter,
    resolve_java_type,
    resolve_sql_type,
)


@dataclass
class Field:
    name: str
    type: str
    serialized_name: str | None = None
    is_index: bool = False
    is_nullable: bool = True
    default_value: str | None = None
    enum_name: str | None = None
    enum_values: list[str] = dc_field(default_factory=list)

    @property
    def name_upper_case(self) -> str:
        return to_upper_snake_case(self.name)

    @property
    def name_camel_case(self) -> str:
        return to_camel_case(self.name)

    @property
    def name_camel_case_lower_case(self) -> str:
        return to_lower_camel_case(self.name)

    @property
    def wire_name(self) -> str:
        """Name used on the wire by the REST layer."""
        return self.serialized_name or self.name

    @property
    def is_enum(self) -> bool:
        return bool(self.enum_name)

    @property
    def has_default_value(self) -> bool:
        return self.default_value is not None

    @property
    def java_type_simple_name(self) -> str:
        return resolve_java_type(self.type, self.is_nullable, self.enum_name)

    @property
    def java_type_boxed_name(self) -> str:
        return resolve_java_type(self.type, True, self.enum_name)

    @property
    def sql_type(self) -> str:
        return resolve_sql_type(self.type, self.enum_name)

    @property
    def cursor_getter(self) -> str:
        return resolve_cursor_getter(self.type, self.enum_name)

    @property
    def is_convertion_needed(self) -> bool:
        return needs_conversion(self.type, self.enum_name)


@dataclass
class Constraint:
    """Named table constraint, e.g. ``unique_name`` / ``UNIQUE (name)``.

    Both parts are lower-cased on construction and read back upper-cased.
    """

    name: str
    definition: str

    def __post_init__(self) -> None:
        self.name = self.name.lower()
        self.definition = self.definition.lower()

    @property
    def name_upper_case(self) -> str:
        return self.name.upper()

    @property
    def definition_upper_case(self) -> str:
        return self.definition.upper()


@dataclass
class QueryParam:
    name: str

    def __post_init__(self) -> None:
        self.name = self.name.lower()

    @property
    def name_upper_case(self) -> str:
        return self.name.upper()

    @property
    def name_camel_case_lower_case(self) -> str:
        return to_lower_camel_case(self.name)


@dataclass
class Entity:
    name: str
    url_path: str | None = None
    fields: list[Field] = dc_field(default_factory=list)
    constraints: list[Constraint] = dc_field(default_factory=list)
    query_params: list[QueryParam] = dc_field(default_factory=list)

    def add_field(self, field: Field) -> None:
        self.fields.append(field)

    def add_constraint(self, constraint: Constraint) -> None:
        self.constraints.append(constraint)

    def add_query_param(self, param: QueryParam) -> None:
        self.query_params.append(param)

    @property
    def name_lower_case(self) -> str:
        return to_lower_case(self.name)

    @property
    def name_upper_case(self) -> str:
        return to_upper_snake_case(self.name)

    @property
    def name_camel_case(self) -> str:
        return to_camel_case(self.name)

    @property
    def name_camel_case_lower_case(self) -> str:
        return to_lower_camel_case(self.name)

    @property
    def has_url(self) -> bool:
        return bool(self.url_path)

    @property
    def enum_fields(self) -> list[Field]:
        return [f for f in self.fields if f.is_enum]


@dataclass
class Model:
    entities: list[Entity] = dc_field(default_factory=list)
    header: str | None = None

    def add_entity(self, entity: Entity) -> None:
        self.entities.append(entity)

    @property
    def entities_with_url(self) -> list[Entity]:
        return [e for e in self.entities if e.has_url]
