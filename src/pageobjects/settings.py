"""Pydantic-based settings loaded from YAML with env-var overrides."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings

from pageobjects.exceptions import ConfigurationError

_DEFAULT_SETTINGS_FILE = "pageobjects.yaml"

_BROWSERS: frozenset[str] = frozenset({"chromium", "firefox", "webkit"})
_WAIT_STATES: frozenset[str] = frozenset({"load", "domcontentloaded", "networkidle", "commit"})


class PageObjectSettings(BaseSettings):
    """Runtime configuration with YAML + env var support.

    Env vars are prefixed with ``PAGEOBJECTS_``.
    Example: ``PAGEOBJECTS_BASE_URL=https://staging.example.com``
    """

    model_config = {"env_prefix": "PAGEOBJECTS_"}

    # --- target ---
    base_url: str = ""
    pages_file: str = "pages.yaml"

    # --- browser ---
    browser: str = "chromium"
    headless: bool = True
    slow_mo: int = 0  # ms between driver actions
    viewport_width: int = 1280
    viewport_height: int = 900

    # --- waiting ---
    element_timeout: float = 5_000  # ms
    navigation_timeout: float = 30_000  # ms
    wait_until: str = "load"

    @field_validator("browser")
    @classmethod
    def _check_browser(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in _BROWSERS:
            raise ValueError(f"browser must be one of {sorted(_BROWSERS)}, got {v!r}")
        return v

    @field_validator("wait_until")
    @classmethod
    def _check_wait_until(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in _WAIT_STATES:
            raise ValueError(f"wait_until must be one of {sorted(_WAIT_STATES)}, got {v!r}")
        return v

    @field_validator("element_timeout", "navigation_timeout")
    @classmethod
    def _non_negative(cls, v: float) -> float:
        if v < 0:
            raise ValueError("timeouts must be >= 0")
        return v

    # ---- factory ----

    @classmethod
    def from_yaml(cls, path: str | Path | None = None) -> "PageObjectSettings":
        """Load settings from a YAML file, then overlay env vars.

        Env vars (``PAGEOBJECTS_*``) take priority over YAML values.
        """
        path = Path(path) if path is not None else Path.cwd() / _DEFAULT_SETTINGS_FILE
        raw: dict[str, Any] = {}
        if path.exists():
            with open(path) as fh:
                try:
                    raw = yaml.safe_load(fh) or {}
                except yaml.YAMLError as exc:
                    raise ConfigurationError(f"{path} is not valid YAML: {exc}") from exc
        if not isinstance(raw, dict):
            raise ConfigurationError(f"{path}: expected a mapping at the top level.")

        # Let env vars override YAML: remove YAML keys that have an env override
        prefix = "PAGEOBJECTS_"
        for key in list(raw.keys()):
            env_key = f"{prefix}{str(key).upper()}"
            if env_key in os.environ:
                del raw[key]

        try:
            return cls(**raw)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid settings in {path}: {exc}") from exc
