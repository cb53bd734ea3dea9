"""Build Jinja2 template contexts from the config and model.

Every template sees ``config``, ``header`` and ``version``. Templates that
span all entities also get ``model``; per-entity templates get ``entity``,
and the enum template additionally gets ``field``.
"""

from __future__ import annotations

from typing import Any

from .config import GeneratorConfig
from .model import Entity, Field, Model
from .version import VERSION


def build_context(
    config: GeneratorConfig,
    model: Model,
    entity: Entity | None = None,
    field: Field | None = None,
    include_model: bool = False,
) -> dict[str, Any]:
    """Build the context for one render."""
    context: dict[str, Any] = {
        "config": config,
        "header": model.header,
        "version": VERSION,
    }
    if include_model:
        context["model"] = model
    if entity is not None:
        context["entity"] = entity
    if field is not None:
        context["field"] = field
    return context
