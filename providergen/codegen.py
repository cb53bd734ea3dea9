"""Render templates and write generated output.

``TemplateRenderer`` is the only place that knows about Jinja2: it turns a
template name plus a context dict into text. ``CodeGenerator`` holds one
method per generation target and decides where each rendered file goes.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import jinja2

from .config import GeneratorConfig
from .context_builder import build_context
from .errors import RenderError
from .model import Model
from .naming import (
    package_to_path,
    to_camel_case,
    to_lower_camel_case,
    to_upper_snake_case,
)

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"

MANIFEST_FILE_NAME = "__add_to_manifest.txt"


class TemplateRenderer:
    """Renders named Jinja2 templates from the template directory.

    Undefined variables are errors, so a template referring to a context
    key that was not bound fails the run instead of rendering blanks.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        self.template_dir = Path(template_dir) if template_dir else TEMPLATE_DIR
        self.env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(self.template_dir)),
            undefined=jinja2.StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["camel_case"] = to_camel_case
        self.env.filters["lower_camel"] = to_lower_camel_case
        self.env.filters["upper_snake"] = to_upper_snake_case

    def render(self, template_name: str, context: dict[str, Any]) -> str:
        try:
            template = self.env.get_template(template_name)
            return template.render(**context)
        except jinja2.TemplateError as exc:
            raise RenderError(template_name, str(exc)) from exc


class CodeGenerator:
    """Writes every generation target for one config/model pair."""

    def __init__(
        self,
        config: GeneratorConfig,
        model: Model,
        output_dir: str | Path,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.model = model
        self.output_dir = Path(output_dir)
        self.renderer = renderer or TemplateRenderer()
        self.written: list[Path] = []

    # -- Paths ---------------------------------------------------------------

    @property
    def provider_dir(self) -> Path:
        return self.output_dir / package_to_path(self.config.provider_java_package)

    @property
    def project_dir(self) -> Path:
        return self.output_dir / package_to_path(self.config.project_package_id)

    @property
    def api_dir(self) -> Path:
        return self.output_dir / package_to_path(self.config.api_java_package)

    # -- Output --------------------------------------------------------------

    def write(self, path: Path, text: str) -> Path:
        """Write ``text`` to ``path``, replacing any old file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
        logger.debug("Wrote %s", path)
        self.written.append(path)
        return path

    def _emit(self, template_name: str, path: Path, context: dict[str, Any]) -> Path:
        return self.write(path, self.renderer.render(template_name, context))

    def _context(self, **kwargs: Any) -> dict[str, Any]:
        return build_context(self.config, self.model, **kwargs)

    # -- Provider ------------------------------------------------------------

    def generate_columns(self) -> None:
        for entity in self.model.entities:
            entity_dir = self.provider_dir / entity.name_lower_case
            self._emit(
                "columns.java.j2",
                entity_dir / f"{entity.name_camel_case}Columns.java",
                self._context(entity=entity),
            )

    def generate_wrappers(self) -> None:
        base_dir = self.provider_dir / "base"
        for template_name, class_name in (
            ("abstractcursor.java.j2", "AbstractCursor"),
            ("abstractcontentvalues.java.j2", "AbstractContentValues"),
            ("abstractselection.java.j2", "AbstractSelection"),
        ):
            self._emit(template_name, base_dir / f"{class_name}.java", self._context())

        for entity in self.model.entities:
            entity_dir = self.provider_dir / entity.name_lower_case
            context = self._context(entity=entity)
            for template_name, suffix in (
                ("cursor.java.j2", "Cursor"),
                ("contentvalues.java.j2", "ContentValues"),
                ("selection.java.j2", "Selection"),
            ):
                self._emit(
                    template_name,
                    entity_dir / f"{entity.name_camel_case}{suffix}.java",
                    context,
                )
            for field in entity.enum_fields:
                self._emit(
                    "enum.java.j2",
                    entity_dir / f"{field.enum_name}.java",
                    self._context(entity=entity, field=field),
                )

    def generate_content_provider(self) -> None:
        self._emit(
            "contentprovider.java.j2",
            self.provider_dir / f"{self.config.provider_class_name}.java",
            self._context(include_model=True),
        )

    def generate_sqlite_helper(self) -> None:
        self._emit(
            "sqlitehelper.java.j2",
            self.provider_dir / f"{self.config.sqlite_helper_class_name}.java",
            self._context(include_model=True),
        )

    # -- API -----------------------------------------------------------------

    def generate_intent_service(self) -> None:
        self._emit(
            "intentservice.java.j2",
            self.api_dir / "ApiService.java",
            self._context(include_model=True),
        )

    def generate_rest_service(self) -> None:
        self._emit(
            "restservice.java.j2",
            self.api_dir / "RestService.java",
            self._context(include_model=True),
        )

    def generate_manifest(self) -> None:
        self._emit(
            "add_to_manifest.txt.j2",
            self.output_dir / MANIFEST_FILE_NAME,
            self._context(include_model=True),
        )

    # -- UI and models -------------------------------------------------------

    def generate_views(self) -> None:
        view_dir = self.project_dir / "ui" / "viewmodel"
        layout_dir = self.output_dir / "res" / "layout"
        for entity in self.model.entities:
            context = self._context(entity=entity)
            self._emit("view.java.j2", view_dir / f"{entity.name_camel_case}View.java", context)
            self._emit("layout.xml.j2", layout_dir / f"view_{entity.name_lower_case}.xml", context)

    def generate_models(self) -> None:
        model_dir = self.project_dir / "model"
        for entity in self.model.entities:
            self._emit(
                "model.java.j2",
                model_dir / f"{entity.name_camel_case}Model.java",
                self._context(entity=entity),
            )

    def generate_fragments(self) -> None:
        fragment_dir = self.project_dir / "fragment"
        for entity in self.model.entities:
            self._emit(
                "fragment.java.j2",
                fragment_dir / f"{entity.name_camel_case}ListFragment.java",
                self._context(entity=entity),
            )
