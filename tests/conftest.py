"""Shared fixtures: a sample input directory with _config.json and entities."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from providergen.version import VERSION


def base_config() -> dict[str, Any]:
    """A _config.json document valid with every default toggle."""
    return {
        "toolVersion": VERSION,
        "projectPackageId": "com.example.app",
        "providerJavaPackage": "com.example.app.provider",
        "providerClassName": "SampleProvider",
        "sqliteHelperClassName": "SampleSQLiteOpenHelper",
        "authority": "com.example.app.provider",
        "databaseFileName": "sample.db",
        "enableForeignKeys": True,
        "projectBaseUrl": "https://api.example.com",
    }


USER_ENTITY: dict[str, Any] = {
    "fields": [
        {"name": "id", "type": "long", "index": True, "nullable": False},
        {"name": "name", "type": "string"},
    ],
}

TEAM_ENTITY: dict[str, Any] = {
    "urlPath": "/teams",
    "fields": [
        {"name": "team_name", "type": "String", "serializedName": "teamName", "defaultValue": "Unnamed"},
        {
            "name": "color",
            "type": "enum",
            "enumName": "TeamColor",
            "enumValues": ["RED", "GREEN", "BLUE"],
            "nullable": False,
        },
        {"name": "founded", "type": "date"},
    ],
    "constraints": [
        {"name": "Unique_Name", "definition": "unique (team_name) on conflict replace"},
    ],
    "queryParams": [
        {"name": "Country"},
    ],
}


def write_json(path: Path, data: Any) -> Path:
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


@pytest.fixture()
def config_dict() -> dict[str, Any]:
    return base_config()


@pytest.fixture()
def make_input_dir(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory writing an input directory under tmp_path.

    Usage::

        input_dir = make_input_dir(entities={"User": {...}}, config={...})
    """
    def _make(
        entities: dict[str, Any] | None = None,
        config: dict[str, Any] | None = None,
        header: str | None = None,
    ) -> Path:
        input_dir = tmp_path / "input"
        input_dir.mkdir(exist_ok=True)
        write_json(input_dir / "_config.json", config if config is not None else base_config())
        for name, data in (entities or {}).items():
            write_json(input_dir / f"{name}.json", data)
        if header is not None:
            (input_dir / "header.txt").write_text(header, encoding="utf-8")
        return input_dir
    return _make


@pytest.fixture()
def sample_input_dir(make_input_dir) -> Path:
    """Input directory with User and Team entities and a header."""
    return make_input_dir(
        entities={"User": USER_ENTITY, "Team": TEAM_ENTITY},
        header="\n/*\n * Copyright Example Inc.\n */\n\n",
    )
