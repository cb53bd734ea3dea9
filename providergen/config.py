"""Load and validate _config.json.

The config is read once per run, checked against the fields each enabled
generation pass needs, and returned as a frozen ``GeneratorConfig`` that
the generators and templates read from.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError
from .version import VERSION

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "_config.json"

TOOL_VERSION = "toolVersion"
PROJECT_PACKAGE_ID = "projectPackageId"
PROVIDER_JAVA_PACKAGE = "providerJavaPackage"
PROVIDER_CLASS_NAME = "providerClassName"
SQLITE_HELPER_CLASS_NAME = "sqliteHelperClassName"
AUTHORITY = "authority"
DATABASE_FILE_NAME = "databaseFileName"
ENABLE_FOREIGN_KEYS = "enableForeignKeys"
PROJECT_BASE_URL = "projectBaseUrl"

GENERATE_PROVIDER = "generateProvider"
GENERATE_MODELS = "generateModels"
GENERATE_VIEWS = "generateViews"
GENERATE_API = "generateApi"
GENERATE_FRAGMENTS = "generateFragments"

# Toggle -> default when absent
_TOGGLES: dict[str, bool] = {
    GENERATE_PROVIDER: True,
    GENERATE_MODELS: True,
    GENERATE_VIEWS: True,
    GENERATE_API: True,
    GENERATE_FRAGMENTS: False,
}

_PROVIDER_STRINGS = (
    PROVIDER_JAVA_PACKAGE,
    PROVIDER_CLASS_NAME,
    SQLITE_HELPER_CLASS_NAME,
    AUTHORITY,
    DATABASE_FILE_NAME,
)


class GeneratorConfig(BaseModel):
    """Validated contents of _config.json.

    Keys not listed here are kept as extra attributes so custom templates
    can read them.
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    tool_version: str = Field(alias=TOOL_VERSION)
    project_package_id: str = Field(alias=PROJECT_PACKAGE_ID)
    provider_java_package: str | None = Field(default=None, alias=PROVIDER_JAVA_PACKAGE)
    provider_class_name: str | None = Field(default=None, alias=PROVIDER_CLASS_NAME)
    sqlite_helper_class_name: str | None = Field(default=None, alias=SQLITE_HELPER_CLASS_NAME)
    authority: str | None = Field(default=None, alias=AUTHORITY)
    database_file_name: str | None = Field(default=None, alias=DATABASE_FILE_NAME)
    enable_foreign_keys: bool = Field(default=False, alias=ENABLE_FOREIGN_KEYS, strict=True)
    project_base_url: str | None = Field(default=None, alias=PROJECT_BASE_URL)

    generate_provider: bool = Field(default=True, alias=GENERATE_PROVIDER, strict=True)
    generate_models: bool = Field(default=True, alias=GENERATE_MODELS, strict=True)
    generate_views: bool = Field(default=True, alias=GENERATE_VIEWS, strict=True)
    generate_api: bool = Field(default=True, alias=GENERATE_API, strict=True)
    generate_fragments: bool = Field(default=False, alias=GENERATE_FRAGMENTS, strict=True)

    @property
    def api_java_package(self) -> str:
        return f"{self.project_package_id}.api"


def _check_version(raw: dict[str, Any]) -> None:
    """Input files must target exactly this version of the tool."""
    found = raw.get(TOOL_VERSION)
    if not isinstance(found, str):
        raise ConfigError(
            f"Could not find '{TOOL_VERSION}' field in {CONFIG_FILE_NAME}, which is"
            f" mandatory and must be equal to '{VERSION}'."
        )
    if found != VERSION:
        raise ConfigError(
            f"Invalid '{TOOL_VERSION}' value in {CONFIG_FILE_NAME}: found '{found}'"
            f" but expected '{VERSION}'."
        )


def _flag(raw: dict[str, Any], key: str) -> bool:
    value = raw.get(key, _TOGGLES[key])
    if not isinstance(value, bool):
        raise ConfigError(
            f"Invalid '{key}' value in {CONFIG_FILE_NAME}: found {value!r}"
            " but expected a boolean."
        )
    return value


def _ensure_string(raw: dict[str, Any], key: str) -> None:
    if not isinstance(raw.get(key), str):
        raise ConfigError(
            f"Could not find '{key}' field in {CONFIG_FILE_NAME}, which is"
            " mandatory and must be a string."
        )


def _ensure_boolean(raw: dict[str, Any], key: str) -> None:
    if not isinstance(raw.get(key), bool):
        raise ConfigError(
            f"Could not find '{key}' field in {CONFIG_FILE_NAME}, which is"
            " mandatory and must be a boolean."
        )


def validate_config(raw: Any) -> GeneratorConfig:
    """Validate a decoded _config.json document."""
    if not isinstance(raw, dict):
        raise ConfigError(f"{CONFIG_FILE_NAME} must contain a JSON object.")

    _check_version(raw)

    toggles = {key: _flag(raw, key) for key in _TOGGLES}
    if toggles[GENERATE_PROVIDER]:
        for key in _PROVIDER_STRINGS:
            _ensure_string(raw, key)
        _ensure_boolean(raw, ENABLE_FOREIGN_KEYS)
    if toggles[GENERATE_API]:
        _ensure_string(raw, PROJECT_BASE_URL)
    if toggles[GENERATE_FRAGMENTS]:
        # List fragments load rows through the provider classes
        _ensure_string(raw, PROVIDER_JAVA_PACKAGE)
    _ensure_string(raw, PROJECT_PACKAGE_ID)

    try:
        return GeneratorConfig.model_validate(raw)
    except ValidationError as exc:
        err = exc.errors()[0]
        loc = ".".join(str(p) for p in err["loc"])
        raise ConfigError(
            f"Invalid '{loc}' value in {CONFIG_FILE_NAME}: {err['msg']}."
        ) from exc


def load_config(input_dir: Path) -> GeneratorConfig:
    """Read and validate ``<input_dir>/_config.json``."""
    config_file = Path(input_dir) / CONFIG_FILE_NAME
    logger.debug("Loading config from %s", config_file)
    try:
        with open(config_file, encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError as exc:
        raise ConfigError(f"Could not find {config_file}.") from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"Could not decode {config_file} as UTF-8: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Could not parse {config_file}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Could not read {config_file}: {exc}") from exc

    config = validate_config(raw)
    logger.info(
        "Config loaded: provider=%s api=%s views=%s models=%s fragments=%s",
        config.generate_provider,
        config.generate_api,
        config.generate_views,
        config.generate_models,
        config.generate_fragments,
    )
    return config
