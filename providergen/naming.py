"""Name conversions shared by the model and the templates.

Entity and field names arrive as written in the JSON files, either
snake_case or camelCase. The generated Java needs several spellings:

  user_address  -> UserAddress   (class names)
  user_address  -> userAddress   (variables, getters)
  firstName     -> FIRST_NAME    (column constants)
  user_address  -> user_address  (directories, table names)

Java packages map onto directories by replacing dots with path separators:

  com.example.provider -> com/example/provider
"""

from __future__ import annotations

import re
from pathlib import Path


def _camel_to_snake(name: str) -> str:
    """Convert camelCase or PascalCase to snake_case."""
    s1 = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", name)
    return re.sub(r"([a-z\d])([A-Z])", r"\1_\2", s1).lower()


def _split_words(name: str) -> list[str]:
    """Split a name on underscores, dashes and whitespace, dropping empties."""
    return [w for w in re.split(r"[_\-\s]+", name) if w]


def to_lower_case(name: str) -> str:
    return name.lower()


def to_camel_case(name: str) -> str:
    """Return the PascalCase form: 'user_address' -> 'UserAddress'.

    Only the first letter of each word is touched, so names that are
    already camel-cased keep their inner capitals.
    """
    return "".join(w[0].upper() + w[1:] for w in _split_words(name))


def to_lower_camel_case(name: str) -> str:
    """Return the camelCase form: 'user_address' -> 'userAddress'."""
    camel = to_camel_case(name)
    return camel[:1].lower() + camel[1:]


def to_upper_snake_case(name: str) -> str:
    """Return the constant form: 'firstName' -> 'FIRST_NAME'."""
    words = [_camel_to_snake(w) for w in _split_words(name)]
    return "_".join(words).upper()


def package_to_path(package: str) -> Path:
    """Map a Java package to a relative directory path."""
    return Path(*package.split("."))
