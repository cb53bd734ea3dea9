"""Load entity definitions from the input directory.

Every ``*.json`` file not prefixed with ``_`` describes one entity, named
after the file. An optional ``header.txt`` holds the banner prepended to
every generated file.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .errors import ModelLoadError
from .model import Constraint, Entity, Field, Model, QueryParam
from .type_mapping import ENUM, is_known, normalize

logger = logging.getLogger(__name__)

HEADER_FILE_NAME = "header.txt"

_KIND_NAMES: dict[type, str] = {
    str: "string",
    bool: "boolean",
    list: "array",
    dict: "object",
}


def list_entity_files(input_dir: Path) -> list[Path]:
    """Return entity files in the directory, sorted by file name."""
    return sorted(
        (
            p for p in Path(input_dir).iterdir()
            if p.is_file() and p.name.endswith(".json") and not p.name.startswith("_")
        ),
        key=lambda p: p.name,
    )


def _load_json(path: Path) -> Any:
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except UnicodeDecodeError as exc:
        raise ModelLoadError(f"{path.name}: not valid UTF-8: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ModelLoadError(f"{path.name}: invalid JSON: {exc}") from exc


def _require(obj: dict[str, Any], key: str, kind: type, where: str) -> Any:
    value = obj.get(key)
    if not isinstance(value, kind):
        raise ModelLoadError(
            f"{where}: '{key}' is mandatory and must be a {_KIND_NAMES[kind]}."
        )
    return value


def _optional(obj: dict[str, Any], key: str, kind: type, where: str, default: Any = None) -> Any:
    value = obj.get(key)
    if value is None:
        return default
    if not isinstance(value, kind):
        raise ModelLoadError(f"{where}: '{key}' must be a {_KIND_NAMES[kind]}.")
    return value


def _as_object(value: Any, where: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ModelLoadError(f"{where}: expected a JSON object.")
    return value


def _default_to_string(value: Any, where: str) -> str | None:
    """Normalize a defaultValue to the literal the SQL schema will use."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise ModelLoadError(f"{where}: 'defaultValue' must be a string, number or boolean.")


def parse_field(field_json: Any, where: str) -> Field:
    """Parse one element of an entity's ``fields`` array."""
    obj = _as_object(field_json, where)
    name = _require(obj, "name", str, where)
    where = f"{where} ({name})"
    type_name = _require(obj, "type", str, where)
    if not is_known(type_name):
        logger.debug("%s: unknown type %r, treating it as a Java class", where, type_name)

    enum_name = _optional(obj, "enumName", str, where) or None
    enum_values_json = _optional(obj, "enumValues", list, where, default=[])
    enum_values: list[str] = []
    for value in enum_values_json:
        if not isinstance(value, str):
            raise ModelLoadError(f"{where}: 'enumValues' must only contain strings.")
        enum_values.append(value)

    if enum_values and not enum_name:
        raise ModelLoadError(f"{where}: 'enumValues' is set but 'enumName' is missing.")
    if normalize(type_name) == ENUM and not enum_name:
        raise ModelLoadError(f"{where}: enum fields must declare 'enumName'.")

    return Field(
        name=name,
        type=type_name,
        serialized_name=_optional(obj, "serializedName", str, where) or None,
        is_index=_optional(obj, "index", bool, where, default=False),
        is_nullable=_optional(obj, "nullable", bool, where, default=True),
        default_value=_default_to_string(obj.get("defaultValue"), where),
        enum_name=enum_name,
        enum_values=enum_values,
    )


def parse_entity(name: str, entity_json: Any, source: str) -> Entity:
    """Build an Entity from a decoded entity file."""
    obj = _as_object(entity_json, source)
    entity = Entity(name=name, url_path=_optional(obj, "urlPath", str, source) or None)

    fields_json = _require(obj, "fields", list, source)
    for i, field_json in enumerate(fields_json):
        field = parse_field(field_json, f"{source}: fields[{i}]")
        logger.debug("field=%s", field)
        entity.add_field(field)

    for i, constraint_json in enumerate(_optional(obj, "constraints", list, source, default=[])):
        where = f"{source}: constraints[{i}]"
        constraint_obj = _as_object(constraint_json, where)
        entity.add_constraint(Constraint(
            name=_require(constraint_obj, "name", str, where),
            definition=_require(constraint_obj, "definition", str, where),
        ))

    for i, param_json in enumerate(_optional(obj, "queryParams", list, source, default=[])):
        where = f"{source}: queryParams[{i}]"
        param_obj = _as_object(param_json, where)
        entity.add_query_param(QueryParam(name=_require(param_obj, "name", str, where)))

    return entity


def load_header(input_dir: Path) -> str | None:
    """Read the optional header banner, stripped of surrounding whitespace."""
    header_file = Path(input_dir) / HEADER_FILE_NAME
    if not header_file.is_file():
        return None
    try:
        return header_file.read_text(encoding="utf-8").strip()
    except UnicodeDecodeError as exc:
        raise ModelLoadError(f"{HEADER_FILE_NAME}: not valid UTF-8: {exc}") from exc


def load_model(input_dir: Path) -> Model:
    """Load every entity file and the header from ``input_dir``."""
    input_dir = Path(input_dir)
    if not input_dir.is_dir():
        raise ModelLoadError(f"Input directory {input_dir} does not exist.")

    model = Model()
    for entity_file in list_entity_files(input_dir):
        entity_name = entity_file.name[: -len(".json")]
        logger.debug("Loading %s (entityName=%s)", entity_file, entity_name)
        entity = parse_entity(entity_name, _load_json(entity_file), entity_file.name)
        model.add_entity(entity)

    model.header = load_header(input_dir)
    logger.info("Loaded %d entities from %s", len(model.entities), input_dir)
    return model
