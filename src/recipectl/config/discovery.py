"""Locating and reading ``recipectl.toml``.

A project keeps its recipes, sample outputs and suite list next to a
``recipectl.toml``. Commands run from anywhere below that directory find
it by walking up from the working directory. ``RECIPECTL_CONFIG`` names
a file directly and disables the walk; ``-c`` does the same per call.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path

from recipectl.config.models import RecipectlConfig

CONFIG_FILENAME = "recipectl.toml"
CONFIG_ENV_VAR = "RECIPECTL_CONFIG"


def _walk_up(start: Path) -> Path | None:
    for directory in (start, *start.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file governing *start* (default: cwd), or None.

    When ``RECIPECTL_CONFIG`` is set it wins outright: a missing file there
    means no config, not a fallback to the walk.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = Path(env_path)
        return path if path.is_file() else None
    return _walk_up((start or Path.cwd()).resolve())


def load_config(path: Path | None = None, cwd: Path | None = None) -> RecipectlConfig:
    """Read the ``[engine]``, ``[plugins]`` and ``[suite]`` sections.

    Without *path* the file is discovered from *cwd*; with no file at all
    every section keeps its defaults, so a bare ``validate`` needs no
    config.
    """
    if path is None:
        path = find_config(cwd)
    if path is None:
        return RecipectlConfig()
    return RecipectlConfig.model_validate(tomllib.loads(path.read_text(encoding="utf-8")))
