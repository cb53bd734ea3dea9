"""Exceptions raised by the generator.

Nothing here is recovered from locally: every error aborts the run and is
reported by the CLI with its own exit code.
"""

from __future__ import annotations


class GeneratorError(Exception):
    """Base class for all generator failures."""


class ConfigError(GeneratorError):
    """_config.json is missing, malformed, or lacks a mandatory field."""


class ModelLoadError(GeneratorError):
    """An entity file is malformed or lacks a mandatory element."""


class RenderError(GeneratorError):
    """A template failed to load or render."""

    def __init__(self, template_name: str, message: str) -> None:
        super().__init__(f"Error rendering {template_name}: {message}")
        self.template_name = template_name
