"""Decide which generation passes run and run them in order.

The order is fixed; passes only share the config and model, never each
other's output:

  columns, wrappers, content_provider, sqlite_helper   (generateProvider)
  intent_service, rest_service                         (generateApi)
  manifest                                             (provider or API)
  views                                                (generateViews)
  models                                               (generateModels)
  fragments                                            (generateFragments)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .codegen import CodeGenerator, TemplateRenderer
from .config import GeneratorConfig
from .model import Model

logger = logging.getLogger(__name__)

PROVIDER_PASSES = ("columns", "wrappers", "content_provider", "sqlite_helper")
API_PASSES = ("intent_service", "rest_service")


@dataclass
class GenerationResult:
    passes: list[str] = field(default_factory=list)
    files: list[Path] = field(default_factory=list)


def plan_passes(config: GeneratorConfig) -> list[str]:
    """Return the names of the passes to run, in execution order."""
    passes: list[str] = []
    if config.generate_provider:
        passes.extend(PROVIDER_PASSES)
    if config.generate_api:
        passes.extend(API_PASSES)
    if config.generate_provider or config.generate_api:
        passes.append("manifest")
    if config.generate_views:
        passes.append("views")
    if config.generate_models:
        passes.append("models")
    if config.generate_fragments:
        passes.append("fragments")
    return passes


def run(
    config: GeneratorConfig,
    model: Model,
    output_dir: str | Path,
    renderer: TemplateRenderer | None = None,
) -> GenerationResult:
    """Run every enabled pass, writing under ``output_dir``."""
    generator = CodeGenerator(config, model, output_dir, renderer)
    result = GenerationResult()
    for name in plan_passes(config):
        before = len(generator.written)
        getattr(generator, f"generate_{name}")()
        logger.info("Pass %s: %d files", name, len(generator.written) - before)
        result.passes.append(name)
    result.files = list(generator.written)
    return result
