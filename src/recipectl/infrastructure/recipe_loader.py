"""Recipe document loading.

Recipes are YAML documents whose top level is a sequence of layouts
with camelCase keys::

    - kind: fixed
      name: header
      numberOfRows: 1
      specs:
        - type: string
          value: HDR
        - type: datetime
          format: yyyyMMdd

Parsing uses ruamel.yaml's safe loader; the result is validated into the
frozen :class:`~recipectl.domain.recipe.Recipe` model.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from recipectl.domain.errors import RecipeLoadError
from recipectl.domain.recipe import Recipe


def _new_yaml() -> YAML:
    """Create a fresh safe YAML loader (ruamel's YAML object is stateful)."""
    return YAML(typ="safe", pure=True)


def _describe(exc: ValidationError) -> str:
    parts: list[str] = []
    for error in exc.errors():
        loc = ".".join(str(p) for p in error["loc"] if p != "layouts")
        parts.append(f"{loc}: {error['msg']}" if loc else error["msg"])
    return "; ".join(parts)


def parse_recipe(text: str, *, source: str = "<string>") -> Recipe:
    """Parse recipe YAML *text*.

    Raises:
        RecipeLoadError: If the YAML is malformed or does not describe
            a sequence of layouts.
    """
    try:
        data: Any = _new_yaml().load(text)
    except YAMLError as exc:
        raise RecipeLoadError(source, f"malformed YAML: {exc}") from exc

    if not isinstance(data, list):
        raise RecipeLoadError(source, "top level must be a sequence of layouts")

    try:
        return Recipe.from_layouts(data)
    except ValidationError as exc:
        raise RecipeLoadError(source, _describe(exc)) from exc


def load_recipe(path: Path, *, encoding: str = "utf-8") -> Recipe:
    """Read and parse the recipe file at *path*.

    Raises:
        RecipeLoadError: If the file cannot be read or parsed.
    """
    try:
        text = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise RecipeLoadError(str(path), f"cannot read file: {exc}") from exc
    return parse_recipe(text, source=str(path))
