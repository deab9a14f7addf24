"""Config file discovery and parsing.

Walk-up finder locates rulekit.toml, similar to how git finds .git/.
Supports the RULEKIT_CONFIG env var override.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from rulekit.errors import RuleConfigError

CONFIG_FILENAME = "rulekit.toml"
CONFIG_ENV_VAR = "RULEKIT_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for rulekit.toml.

    Returns the path to the config file, or None if not found.
    Checks RULEKIT_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path*, turning syntax errors into ``RuleConfigError``."""
    raw = path.read_text(encoding="utf-8")
    try:
        return tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise RuleConfigError(msg) from exc
