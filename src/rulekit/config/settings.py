"""Process-wide settings — env vars and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — passed by the hosting application
  2. Env vars     — ``RULEKIT_*`` prefix, ``__`` for nested fields
  3. TOML file    — ``rulekit.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Rule factories read :func:`get_settings` once, when a rule is built.
A rule never looks at settings again, so reconfiguring affects only
rules built afterwards.

Nothing is read from disk or the environment unless the host asks for
it: :func:`get_settings` returns code defaults until :func:`configure`
installs something else, typically ``configure(RuleKitSettings.load())``.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from rulekit.config.discovery import find_config, read_toml
from rulekit.config.models import MessageCatalog


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``rulekit.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            self._data = read_toml(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class RuleKitSettings(BaseSettings):
    """Unified rulekit settings, frozen after construction.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
        verbose: DEBUG logging for the ``rulekit`` logger.
        log_json: Render log records as JSON lines.
        messages: Default failure messages used by the rule factories.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "RULEKIT_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }

    config_path: Path | None = None
    verbose: bool = False
    log_json: bool = False
    messages: MessageCatalog = Field(default_factory=MessageCatalog)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def load(
        cls,
        *,
        config_path: str | Path | None = None,
        start: Path | None = None,
        **overrides: Any,
    ) -> RuleKitSettings:
        """Construct settings, discovering ``rulekit.toml`` when needed.

        An explicit *config_path* wins over walk-up discovery from
        *start* (default: cwd). *overrides* take priority over every
        other source.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None


_lock = threading.Lock()
_current: RuleKitSettings | None = None


def get_settings() -> RuleKitSettings:
    """Return the active settings; code defaults unless :func:`configure` ran."""
    global _current
    with _lock:
        if _current is None:
            _current = _defaults()
        return _current


def _defaults() -> RuleKitSettings:
    # model_construct skips every settings source: no env, no TOML.
    return RuleKitSettings.model_construct()


def configure(settings: RuleKitSettings) -> None:
    """Install *settings* as the active settings."""
    global _current
    with _lock:
        _current = settings


def reset_settings() -> None:
    """Drop configured settings; the next lookup returns code defaults."""
    global _current
    with _lock:
        _current = None
