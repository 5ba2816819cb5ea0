# listify/inputs/settings.py
"""
Settings loader for Listify.

Goals
-----
- File-first settings with validation via Pydantic; the file is optional.
- Environment overrides for deployment (proxy credentials never need to live in
  a file).

JSON shape
----------
    {
      "timeframe_days": 7,
      "log_level": "INFO",
      "log_file": "logs/listify.log",
      "fetch": { ... FetchPolicy fields ... }
    }

Environment overrides (optional)
--------------------------------
- LISTIFY_TIMEFRAME_DAYS  -> ScrapeSettings.timeframe_days (int, >= 1)
- LISTIFY_LOG_LEVEL       -> ScrapeSettings.log_level
- LISTIFY_LOG_FILE        -> ScrapeSettings.log_file
- LISTIFY_ONLINE          -> fetch.allow_network ("1"/"true"/"yes")
- SCRAPE_PROXY_URL        -> fetch.proxy_url
- SCRAPE_PROXY_USER       -> fetch.proxy_user
- SCRAPE_PROXY_PASS       -> fetch.proxy_pass
- REQUEST_TIMEOUT_MS      -> fetch.timeout_s (milliseconds → seconds)

Bad values are ignored and the validated setting is kept.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, cast

from pydantic import BaseModel, Field, ValidationError

from listify.core.normalize.window import DEFAULT_TIMEFRAME_DAYS
from listify.schemas.models import FetchPolicy

_TRUTHY = {"1", "true", "yes", "on"}

# ----------------------------
# Pydantic model
# ----------------------------


class ScrapeSettings(BaseModel):
    """Runtime options for a seller-sales run."""

    timeframe_days: int = Field(DEFAULT_TIMEFRAME_DAYS, ge=1, description="Default recency window in days.")
    fetch: FetchPolicy = Field(default_factory=FetchPolicy, description="HTTP fetch policy.")
    log_level: str = Field("INFO", description="Log level name for the listify logger.")
    log_file: str | None = Field(None, description="Optional rotating log file path.")


# ----------------------------
# Loader
# ----------------------------


@dataclass(frozen=True)
class SettingsLoader:
    """
    Settings loader with env overrides.

    Default search (when path=None): ./listify.json; if absent, defaults are used.
    """

    env_prefix: str = "LISTIFY_"

    # ---------- Public API ----------

    def load(self, path: str | Path | None = None) -> ScrapeSettings:
        p = self._resolve_path(path)
        raw = self._read_json_file(p) if p is not None else {}
        cfg = self._parse_root(raw)
        return self._apply_env_overrides(cfg)

    def load_json(self, text: str) -> ScrapeSettings:
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON payload: {e}") from e
        if not isinstance(raw, dict):
            raise ValueError("Settings JSON must be an object")
        cfg = self._parse_root(raw)
        return self._apply_env_overrides(cfg)

    def with_overrides(
        self,
        cfg: ScrapeSettings,
        *,
        timeframe_days: int | None = None,
        allow_network: bool | None = None,
        log_level: str | None = None,
        log_file: str | None = None,
    ) -> ScrapeSettings:
        """
        Return a *new* ScrapeSettings with the non-null overrides applied.
        Overrides are re-validated, so e.g. timeframe_days=0 raises ValueError.
        """
        data = cfg.model_dump()
        changed = False
        if timeframe_days is not None:
            data["timeframe_days"] = timeframe_days
            changed = True
        if log_level is not None:
            data["log_level"] = log_level
            changed = True
        if log_file is not None:
            data["log_file"] = log_file
            changed = True
        if allow_network is not None:
            data["fetch"]["allow_network"] = allow_network
            changed = True

        if not changed:
            return cfg
        return self._parse_root(data)

    # ---------- Internals ----------

    def _resolve_path(self, path: str | Path | None) -> Path | None:
        if path is not None:
            p = Path(path)
            if not p.exists():
                raise FileNotFoundError(f"Settings file not found: {p}")
            return p
        candidate = Path("listify.json")
        return candidate if candidate.exists() else None

    def _read_json_file(self, p: Path) -> dict[str, Any]:
        if p.suffix.lower() != ".json":
            raise ValueError(f"Unsupported settings format for {p.name}; only .json is supported.")
        try:
            data = json.loads(p.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {p}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Settings JSON in {p} must be an object")
        return cast(dict[str, Any], data)

    def _parse_root(self, data: dict[str, Any]) -> ScrapeSettings:
        try:
            return ScrapeSettings.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Settings validation failed:\n{e}") from e

    def _apply_env_overrides(self, cfg: ScrapeSettings) -> ScrapeSettings:
        prefix = self.env_prefix
        updates: dict[str, Any] = {}
        fetch_updates: dict[str, Any] = {}

        days = os.getenv(f"{prefix}TIMEFRAME_DAYS")
        if days:
            try:
                value = int(days)
                if value >= 1:
                    updates["timeframe_days"] = value
            except ValueError:
                pass

        level = os.getenv(f"{prefix}LOG_LEVEL")
        if level:
            updates["log_level"] = level.strip().upper()

        log_file = os.getenv(f"{prefix}LOG_FILE")
        if log_file:
            updates["log_file"] = log_file

        online = os.getenv(f"{prefix}ONLINE")
        if online:
            fetch_updates["allow_network"] = online.strip().lower() in _TRUTHY

        for env_name, field_name in (
            ("SCRAPE_PROXY_URL", "proxy_url"),
            ("SCRAPE_PROXY_USER", "proxy_user"),
            ("SCRAPE_PROXY_PASS", "proxy_pass"),
        ):
            val = os.getenv(env_name)
            if val:
                fetch_updates[field_name] = val

        timeout_ms = os.getenv("REQUEST_TIMEOUT_MS")
        if timeout_ms:
            try:
                seconds = float(timeout_ms) / 1000.0
                if seconds > 0:
                    fetch_updates["timeout_s"] = seconds
            except ValueError:
                pass

        if fetch_updates:
            updates["fetch"] = cfg.fetch.model_copy(update=fetch_updates)

        if not updates:
            return cfg
        return cfg.model_copy(update=updates)


# ----------------------------
# Convenience function
# ----------------------------


def load_settings(path: str | Path | None = None) -> ScrapeSettings:
    """Convenience wrapper for one-shot callers."""
    return SettingsLoader().load(path)
